"""
Characteristic strain states of the EC2 interaction diagram.

The nine states bound the physical regimes of a two-layer section, from pure
compression to pure tension:

    1   top εcu,  bottom εcu            uniform crushing
    2   top εcu,  bottom εc2            constant branch reaches the bottom fibre
    2b  top εcu,  bottom 0              onset of tension at the bottom fibre
    3   top εcu,  bottom layer εyd      bottom steel yields
    4   top εcu,  bottom layer εud      bottom steel at ultimate strain
    5   top εc2,  bottom layer εud
    6   top 0,    bottom layer εud
    7   top layer εyd, bottom layer εud
    8   top εud,  bottom εud            pure tension

Each inversion uses ε(yn) = eps_bottom + (eps_top − eps_bottom)·yn with yn the
normalized layer position (0 = bottom, 1 = top).
"""

from dataclasses import dataclass
from typing import List

from ..core.geometry import SectionGeometry
from ..core.materials import ConcreteLaw, SteelLaw

CHARACTERISTIC_LABELS = ("1", "2", "2b", "3", "4", "5", "6", "7", "8")


@dataclass(frozen=True)
class CharacteristicState:
    """Named boundary strain state (extreme-fibre strains)."""
    label: str
    eps_top: float
    eps_bottom: float


def _bottom_for_layer(eps_top: float, eps_layer: float, y_norm: float) -> float:
    """Bottom strain giving eps_layer at y_norm for a fixed top strain."""
    return (eps_layer - eps_top * y_norm) / (1 - y_norm)


def characteristic_states(
    geometry: SectionGeometry,
    concrete: ConcreteLaw,
    steel: SteelLaw
) -> List[CharacteristicState]:
    """
    Generate the characteristic strain states in diagram order.

    Args:
        geometry: Section geometry (layer positions)
        concrete: Concrete law (εc2, εcu)
        steel: Steel law (εyd, εud)

    Returns:
        Nine states from pure compression ("1") to pure tension ("8")
    """
    eps_cu = concrete.eps_cu
    eps_c2 = concrete.eps_c2
    eps_yd = steel.eps_yd
    eps_ud = steel.eps_ud
    y1n = geometry.y1_norm
    y2n = geometry.y2_norm

    # Top layer at εyd and bottom layer at εud:
    #   eps_bottom + d·y1n = εyd,  eps_bottom + d·y2n = εud,  d = eps_top − eps_bottom
    slope = (eps_yd - eps_ud) / (y1n - y2n)
    bottom_7 = eps_ud - slope * y2n
    top_7 = bottom_7 + slope

    values = [
        (eps_cu, eps_cu),
        (eps_cu, eps_c2),
        (eps_cu, 0.0),
        (eps_cu, _bottom_for_layer(eps_cu, eps_yd, y2n)),
        (eps_cu, _bottom_for_layer(eps_cu, eps_ud, y2n)),
        (eps_c2, _bottom_for_layer(eps_c2, eps_ud, y2n)),
        (0.0, _bottom_for_layer(0.0, eps_ud, y2n)),
        (top_7, bottom_7),
        (eps_ud, eps_ud),
    ]

    return [
        CharacteristicState(label=label, eps_top=top, eps_bottom=bottom)
        for label, (top, bottom) in zip(CHARACTERISTIC_LABELS, values)
    ]
