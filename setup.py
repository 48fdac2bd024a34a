from setuptools import setup, find_packages

setup(
    name="nmdiagram",
    version="0.1.0",
    description="N-M interaction diagrams and reinforcement design for rectangular RC sections (EN 1992-1-1)",
    author="HST.AI Engineering",
    author_email="ha.nguyen@hydrostructai.com",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    package_data={"nmdiagram": ["data/*.yaml"]},
    install_requires=[
        "numpy>=1.24.0",
        "pydantic>=2.0.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "scipy>=1.10.0",
        ],
        "dev": [
            "black>=23.0.0",
        ],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
