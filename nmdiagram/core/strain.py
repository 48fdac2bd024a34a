"""
Linear strain fields over the section height (plane sections remain plane).

A strain state is stored by its extreme-fibre strains (eps_top, eps_bottom)
and is interchangeable with the slope/intercept form

    ε(y) = k · y + q,    y measured upward from the centroid

with k = (eps_top − eps_bottom) / h and q = eps_top − k · h/2.
"""

from dataclasses import dataclass
from typing import Tuple


def strain_params(eps_top: float, eps_bottom: float, h: float) -> Tuple[float, float]:
    """
    Slope and centroid strain of a linear strain field.

    Args:
        eps_top: Strain at the top fibre (-)
        eps_bottom: Strain at the bottom fibre (-)
        h: Section height (m)

    Returns:
        (k, q): slope (1/m) and strain at the centroid (-)
    """
    h2 = h / 2
    k = (eps_top - eps_bottom) / (h2 - (-h2))
    q = eps_top - k * h2
    return k, q


def strain_at(eps_top: float, eps_bottom: float, y_norm: float) -> float:
    """Strain at normalized height y_norm (0 = bottom, 1 = top); not range-checked."""
    return eps_bottom + (eps_top - eps_bottom) * y_norm


@dataclass(frozen=True)
class StrainState:
    """
    Linear strain field across a section of height h.

    Attributes:
        eps_top: Strain at the top fibre (-)
        eps_bottom: Strain at the bottom fibre (-)
        h: Section height (m)
    """
    eps_top: float
    eps_bottom: float
    h: float

    @classmethod
    def from_kq(cls, k: float, q: float, h: float) -> "StrainState":
        """Build a strain state from slope k (1/m) and centroid strain q (-)."""
        return cls(eps_top=k * h / 2 + q, eps_bottom=k * (-h / 2) + q, h=h)

    @classmethod
    def from_fibers(
        cls,
        y_a: float, eps_a: float,
        y_b: float, eps_b: float,
        h: float
    ) -> "StrainState":
        """
        Build the strain field passing through two fibres.

        Args:
            y_a, y_b: Fibre positions relative to the centroid (m)
            eps_a, eps_b: Strains at those fibres (-)
            h: Section height (m)

        Raises:
            ValueError: If both fibres sit at the same height
        """
        if abs(y_a - y_b) < 1e-10:
            raise ValueError(
                f"Fibres must be at different heights (y_a = {y_a}, y_b = {y_b})"
            )
        k = (eps_a - eps_b) / (y_a - y_b)
        q = eps_a - k * y_a
        return cls.from_kq(k, q, h)

    @property
    def kq(self) -> Tuple[float, float]:
        return strain_params(self.eps_top, self.eps_bottom, self.h)

    @property
    def k(self) -> float:
        """Strain gradient (1/m)."""
        return self.kq[0]

    @property
    def q(self) -> float:
        """Strain at the centroid (-)."""
        return self.kq[1]

    def at_norm(self, y_norm: float) -> float:
        return strain_at(self.eps_top, self.eps_bottom, y_norm)

    def at_local(self, y: float) -> float:
        k, q = self.kq
        return k * y + q

    def interpolate(self, other: "StrainState", t: float) -> "StrainState":
        """Linear interpolation of the extreme-fibre strains (t = 0 → self, t = 1 → other)."""
        return StrainState(
            eps_top=self.eps_top + t * (other.eps_top - self.eps_top),
            eps_bottom=self.eps_bottom + t * (other.eps_bottom - self.eps_bottom),
            h=self.h,
        )
