"""
Material laws for N-M interaction diagrams (EN 1992-1-1:2004).

- ConcreteLaw: parabolic-rectangular diagram, 3.1.7(1)
- SteelLaw: bilinear diagram with horizontal top branch, 3.2.7(2)
- MaterialLoader: catalogue of strength classes from YAML

Sign convention: compression strain and stress are negative.
Units: SI (Pa, dimensionless strain)
"""

from pathlib import Path
from typing import Any, Dict, List

import numpy as np
import yaml
from pydantic import BaseModel, Field, model_validator


# ============================================================================
# CONCRETE
# ============================================================================

class ConcreteLaw(BaseModel):
    """
    EC2 parabolic-rectangular stress-strain law for concrete in compression.

    σ(ε) = 0                               for ε ≥ 0 (no tension)
    σ(ε) = fcd · (1 − (1 − ε/εc2)²)        for εc2 < ε < 0
    σ(ε) = fcd                             for ε ≤ εc2

    Attributes:
        fcd: Design compressive strength (Pa, negative)
        eps_c2: Strain at the end of the parabolic branch (negative)
        eps_cu: Ultimate compressive strain (negative, ≤ eps_c2)
    """

    fcd: float = Field(default=-20e6, lt=0, description="Design compressive strength (Pa)")
    eps_c2: float = Field(default=-0.002, lt=0, description="Strain at end of parabola (-)")
    eps_cu: float = Field(default=-0.0035, lt=0, description="Ultimate compressive strain (-)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_strains(self) -> "ConcreteLaw":
        if self.eps_cu > self.eps_c2:
            raise ValueError(
                f"eps_cu = {self.eps_cu} must not exceed eps_c2 = {self.eps_c2} (both negative)"
            )
        return self

    def stress(self, eps: float) -> float:
        """Concrete stress (Pa) for strain eps."""
        if eps >= 0:
            return 0.0
        if eps > self.eps_c2:
            ratio = 1.0 - eps / self.eps_c2
            return self.fcd * (1.0 - ratio * ratio)
        return self.fcd


# ============================================================================
# REINFORCING STEEL
# ============================================================================

class SteelLaw(BaseModel):
    """
    Bilinear stress-strain law for reinforcement (horizontal top branch).

    σ(ε) = clamp(ε · Es, −fyd, +fyd)

    Attributes:
        fyd: Design yield strength (Pa, positive)
        es: Modulus of elasticity (Pa)
        eps_ud: Design ultimate strain (positive)
    """

    fyd: float = Field(default=435e6, gt=0, description="Design yield strength (Pa)")
    es: float = Field(default=200e9, gt=0, description="Modulus of elasticity (Pa)")
    eps_ud: float = Field(default=0.01, gt=0, description="Design ultimate strain (-)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_strains(self) -> "SteelLaw":
        if self.eps_ud <= self.eps_yd:
            raise ValueError(
                f"eps_ud = {self.eps_ud} must exceed yield strain eps_yd = {self.eps_yd:.6f}"
            )
        return self

    @property
    def eps_yd(self) -> float:
        """Design yield strain."""
        return self.fyd / self.es

    def stress(self, eps: float) -> float:
        """Steel stress (Pa) for strain eps."""
        return float(np.clip(eps * self.es, -self.fyd, self.fyd))


# ============================================================================
# CALCULATION SETTINGS
# ============================================================================

class CalculationSettings(BaseModel):
    """Default densities and convergence controls for diagram/design-point runs."""

    default_density: int = Field(default=10, ge=1, description="Subdivisions per interval")
    rel_tol: float = Field(default=0.01, gt=0, description="Relative moment tolerance (-)")
    abs_tol: float = Field(default=100.0, gt=0, description="Absolute moment tolerance (N·m)")
    max_iterations: int = Field(default=50, ge=1, description="Regula falsi iteration cap")

    model_config = {"frozen": True}


# ============================================================================
# MATERIAL LOADER FROM YAML
# ============================================================================

def _load_ec2_materials() -> Dict[str, Any]:
    """Load Eurocode 2 material catalogue from the packaged YAML file."""
    yaml_path = Path(__file__).parent.parent / "data" / "materials_ec2.yaml"
    with open(yaml_path, 'r') as f:
        return yaml.safe_load(f)


_EC2_MATERIALS = _load_ec2_materials()

# Highest fck (MPa) for which eq. (3.17) uses n = 2, εc2 = 2.0‰, εcu2 = 3.5‰
MAX_FCK_PARABOLA = 50.0


class MaterialLoader:
    """Factory for EC2 material laws and calculation settings from YAML data."""

    @staticmethod
    def get_concrete(grade: str) -> ConcreteLaw:
        """
        Get concrete law for a strength class.

        fcd = −αcc · fck / γc; εc2 = −2.0‰ and εcu2 = −3.5‰ (Table 3.1,
        fck <= 50 MPa). Higher classes need an exponent n < 2 in eq. (3.17)
        and are rejected.

        Args:
            grade: Strength class (e.g., "C30/37" or "C30_37")

        Returns:
            ConcreteLaw in SI units

        Raises:
            ValueError: If the grade is not in the catalogue or fck > 50 MPa
        """
        normalized = grade.replace('/', '_')

        if normalized not in _EC2_MATERIALS['concrete']:
            available = [k.replace('_', '/') for k in _EC2_MATERIALS['concrete'].keys()]
            raise ValueError(f"Unknown concrete grade: {grade}. Available: {available}")

        fck = float(_EC2_MATERIALS['concrete'][normalized]['fck'])
        params = _EC2_MATERIALS['parameters']

        # Eq. (3.17) exponent n = 2 only holds up to fck = 50 MPa
        if fck > MAX_FCK_PARABOLA:
            raise ValueError(
                f"Concrete grade {grade} (fck = {fck:.0f} MPa) is not supported: "
                f"the parabolic-rectangular law with n = 2 is limited to "
                f"fck <= {MAX_FCK_PARABOLA:.0f} MPa"
            )

        fcd = params['alpha_cc'] * fck / params['gamma_c']
        return ConcreteLaw(
            fcd=-fcd * 1e6,
            eps_c2=-0.002,
            eps_cu=-0.0035,
        )

    @staticmethod
    def get_steel(grade: str) -> SteelLaw:
        """
        Get steel law for a reinforcement grade.

        fyd = fyk / γs; εud = 0.9 · εuk (3.2.7(2) recommended value).

        Args:
            grade: Steel class (e.g., "B500B")

        Returns:
            SteelLaw in SI units

        Raises:
            ValueError: If the grade is not in the catalogue
        """
        if grade not in _EC2_MATERIALS['steel']:
            available = list(_EC2_MATERIALS['steel'].keys())
            raise ValueError(f"Unknown steel grade: {grade}. Available: {available}")

        props = _EC2_MATERIALS['steel'][grade]
        params = _EC2_MATERIALS['parameters']
        return SteelLaw(
            fyd=props['fyk'] / params['gamma_s'] * 1e6,
            es=params['Es'] * 1e6,
            eps_ud=params['eps_ud_factor'] * props['epsilon_uk'] / 100,  # % -> decimal
        )

    @staticmethod
    def list_concrete_grades() -> List[str]:
        """Get list of concrete grades supported by ConcreteLaw (fck <= 50 MPa)."""
        return [
            k.replace('_', '/')
            for k, props in _EC2_MATERIALS['concrete'].items()
            if props['fck'] <= MAX_FCK_PARABOLA
        ]

    @staticmethod
    def list_steel_grades() -> List[str]:
        """Get list of available steel grades."""
        return list(_EC2_MATERIALS['steel'].keys())

    @staticmethod
    def get_settings() -> CalculationSettings:
        """Get default calculation settings from YAML."""
        params = _EC2_MATERIALS.get('parameters', {})
        return CalculationSettings(
            **{
                key: params[key]
                for key in CalculationSettings.model_fields
                if key in params
            }
        )
