"""
Closed-form reinforcement areas for a given strain state and design load.

For a strain state the concrete resultant (Nc, Mc) and the layer stresses
(σ1, σ2) are known, so equilibrium with the design load (Nd, Md) is linear in
the layer areas:

    Nc + As1·σ1 + As2·σ2 = Nd
    −Mc + As1·σ1·(−y1) + As2·σ2·(−y2) = Md

Three design policies are offered:

- OPTIMAL:       both areas free, both equations satisfied (Cramer's rule)
- SINGLE_LAYER:  As1 = 0, As2 from force equilibrium; Md is the achieved moment
- UNIFORM:       As1 = As2 = Astot/2 from force equilibrium; Mdtot is achieved

A degenerate system yields an invalid result with a reason, never NaN.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .concrete import Forces

DETERMINANT_TOL = 1e-6
STRESS_TOL = 1e-6


class ReinforcementVariant(Enum):
    """Reinforcement design policy."""
    OPTIMAL = "optimal"
    SINGLE_LAYER = "single_layer"
    UNIFORM = "uniform"


@dataclass(frozen=True)
class ReinforcementInput:
    """
    Everything a reinforcement solve needs for one strain state.

    Attributes:
        concrete: Concrete resultant (N, N·m), M = Σσ·y
        sigma1: Stress in the top layer (Pa)
        sigma2: Stress in the bottom layer (Pa)
        y1: Top layer position relative to the centroid (m)
        y2: Bottom layer position relative to the centroid (m)
        n_design: Design normal force (N)
        m_design: Design moment (N·m)
    """
    concrete: Forces
    sigma1: float
    sigma2: float
    y1: float
    y2: float
    n_design: float
    m_design: float


@dataclass(frozen=True)
class ReinforcementResult:
    """
    Layer areas (m²), layer forces (N) and resulting design moment (N·m).

    Fields are None when the variant has no solution; `reason` says why.
    """
    variant: ReinforcementVariant
    as1: Optional[float] = None
    as2: Optional[float] = None
    fs1: Optional[float] = None
    fs2: Optional[float] = None
    md: Optional[float] = None
    reason: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.reason is None

    @property
    def as_total(self) -> Optional[float]:
        if not self.is_valid:
            return None
        return self.as1 + self.as2

    def residuals(self, inputs: ReinforcementInput) -> Tuple[float, float]:
        """
        Force and moment equilibrium residuals against the design load.

        Only OPTIMAL is expected to close the moment equation; the other
        variants report their achieved moment instead.

        Raises:
            ValueError: If the result is invalid
        """
        if not self.is_valid:
            raise ValueError(f"No residuals for an invalid result: {self.reason}")
        n = inputs.concrete.n + self.fs1 + self.fs2
        m = -inputs.concrete.m - self.fs1 * inputs.y1 - self.fs2 * inputs.y2
        return n - inputs.n_design, m - inputs.m_design


def solve_optimal(inputs: ReinforcementInput) -> ReinforcementResult:
    """Two free areas satisfying both equilibrium equations."""
    sigma1, sigma2 = inputs.sigma1, inputs.sigma2
    y1, y2 = inputs.y1, inputs.y2

    rhs_n = inputs.n_design - inputs.concrete.n
    rhs_m = -inputs.m_design - inputs.concrete.m

    det = sigma1 * sigma2 * (y2 - y1)
    if abs(det) < DETERMINANT_TOL:
        return ReinforcementResult(
            variant=ReinforcementVariant.OPTIMAL,
            reason=f"Singular system (determinant {det:.3e})",
        )

    as1 = (rhs_n * y2 - rhs_m) / (sigma1 * (y2 - y1))
    as2 = (rhs_m - y1 * rhs_n) / (sigma2 * (y2 - y1))
    fs1 = as1 * sigma1
    fs2 = as2 * sigma2

    return ReinforcementResult(
        variant=ReinforcementVariant.OPTIMAL,
        as1=as1,
        as2=as2,
        fs1=fs1,
        fs2=fs2,
        md=-inputs.concrete.m - fs1 * y1 - fs2 * y2,
    )


def solve_single_layer(inputs: ReinforcementInput) -> ReinforcementResult:
    """Bottom layer only (As1 = 0); Md follows from force equilibrium."""
    if abs(inputs.sigma2) <= STRESS_TOL:
        return ReinforcementResult(
            variant=ReinforcementVariant.SINGLE_LAYER,
            reason="Zero stress in the bottom layer",
        )

    as2 = (inputs.n_design - inputs.concrete.n) / inputs.sigma2
    fs2 = as2 * inputs.sigma2

    return ReinforcementResult(
        variant=ReinforcementVariant.SINGLE_LAYER,
        as1=0.0,
        as2=as2,
        fs1=0.0,
        fs2=fs2,
        md=-inputs.concrete.m + fs2 * (-inputs.y2),
    )


def solve_uniform(inputs: ReinforcementInput) -> ReinforcementResult:
    """Equal areas in both layers; Mdtot follows from force equilibrium."""
    sigma_sum = inputs.sigma1 + inputs.sigma2
    if abs(sigma_sum) <= STRESS_TOL:
        return ReinforcementResult(
            variant=ReinforcementVariant.UNIFORM,
            reason="Zero sum of layer stresses",
        )

    as_total = 2 * (inputs.n_design - inputs.concrete.n) / sigma_sum
    as_layer = as_total / 2
    fs1 = as_layer * inputs.sigma1
    fs2 = as_layer * inputs.sigma2

    return ReinforcementResult(
        variant=ReinforcementVariant.UNIFORM,
        as1=as_layer,
        as2=as_layer,
        fs1=fs1,
        fs2=fs2,
        md=-inputs.concrete.m + fs1 * (-inputs.y1) + fs2 * (-inputs.y2),
    )


_SOLVERS = {
    ReinforcementVariant.OPTIMAL: solve_optimal,
    ReinforcementVariant.SINGLE_LAYER: solve_single_layer,
    ReinforcementVariant.UNIFORM: solve_uniform,
}


def solve_reinforcement(
    variant: ReinforcementVariant,
    inputs: ReinforcementInput
) -> ReinforcementResult:
    """
    Solve the reinforcement areas for one design policy.

    Args:
        variant: Design policy
        inputs: Concrete forces, layer stresses/positions and design load

    Returns:
        ReinforcementResult (invalid with a reason on degeneracy)
    """
    return _SOLVERS[ReinforcementVariant(variant)](inputs)
