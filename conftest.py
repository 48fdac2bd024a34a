"""
Shared fixtures: the reference 300×500 mm section with EC2 default materials.
"""

import pytest

from nmdiagram.core import SectionGeometry, ConcreteLaw, SteelLaw


@pytest.fixture
def geometry():
    """b = 0.3 m, h = 0.5 m, both layers 50 mm from their faces."""
    return SectionGeometry(b=0.3, h=0.5, layer1_distance=0.05, layer2_y=0.05)


@pytest.fixture
def concrete():
    """fcd = −20 MPa, εc2 = −2‰, εcu = −3.5‰."""
    return ConcreteLaw(fcd=-20e6, eps_c2=-0.002, eps_cu=-0.0035)


@pytest.fixture
def steel():
    """fyd = 435 MPa, Es = 200 GPa, εud = 10‰."""
    return SteelLaw(fyd=435e6, es=200e9, eps_ud=0.01)
