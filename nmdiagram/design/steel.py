"""
Reinforcement layer forces for a linear strain field.
"""

from ..core.geometry import SectionGeometry
from ..core.materials import ConcreteLaw, SteelLaw
from ..core.strain import StrainState
from .concrete import Forces, integrate_concrete


def steel_layer_forces(
    area: float,
    y_local: float,
    k: float,
    q: float,
    steel: SteelLaw
) -> Forces:
    """
    Force and moment of one reinforcement layer.

    Args:
        area: Layer area (m²)
        y_local: Layer position relative to the centroid (m)
        k: Strain gradient (1/m)
        q: Strain at the centroid (-)
        steel: Steel law

    Returns:
        Forces with N = A·σ(k·y + q) and M = N·y
    """
    sigma = steel.stress(k * y_local + q)
    n = area * sigma
    return Forces(n=n, m=n * y_local)


def steel_total_forces(
    as1: float,
    as2: float,
    geometry: SectionGeometry,
    strain: StrainState,
    steel: SteelLaw
) -> Forces:
    """Combined forces of the top (as1) and bottom (as2) layers."""
    k, q = strain.kq
    return (
        steel_layer_forces(as1, geometry.y1_local, k, q, steel)
        + steel_layer_forces(as2, geometry.y2_local, k, q, steel)
    )


def section_forces(
    geometry: SectionGeometry,
    concrete: ConcreteLaw,
    steel: SteelLaw,
    strain: StrainState,
    as1: float,
    as2: float
) -> Forces:
    """
    Resultant of concrete plus both reinforcement layers.

    Same sign convention as the concrete integrator: the design moment is −M.
    """
    return integrate_concrete(geometry, concrete, strain) + steel_total_forces(
        as1, as2, geometry, strain, steel
    )
