"""
Concrete resultant forces for the EC2 parabolic-rectangular diagram.

The closed-form integrator splits the section height at the two strain roots

    y0   : ε(y) = 0      (tension boundary)
    yEc2 : ε(y) = εc2    (end of the parabolic branch)

clips each sub-interval to [−h/2, h/2] and integrates stress (N = ∫σ·b dy)
and its first moment (M = ∫σ·b·y dy) exactly. With the normalized variables
a = k/εc2 and c = q/εc2 the parabolic branch becomes

    σ / fcd = (2a − 2ac)·y + (2c − c²) − a²·y²

which integrates term by term (up to y⁴ for the moment).

Sign convention:
    N ≤ 0 under net compression; M = Σσ·y with y upward from the centroid.
    The design moment reported to users is −M.
"""

from dataclasses import dataclass

import numpy as np

from ..core.geometry import SectionGeometry
from ..core.materials import ConcreteLaw
from ..core.strain import StrainState

TOLERANCE = 1e-12


@dataclass(frozen=True)
class Forces:
    """Stress resultant about the section centroid: N (N) and M (N·m)."""
    n: float = 0.0
    m: float = 0.0

    def __add__(self, other: "Forces") -> "Forces":
        return Forces(n=self.n + other.n, m=self.m + other.m)


def _is_zero(val: float) -> bool:
    return abs(val) < TOLERANCE


def _is_less(a: float, b: float) -> bool:
    return a < b - TOLERANCE


def concrete_forces(
    b: float,
    h: float,
    k: float,
    q: float,
    fcd: float,
    eps_c2: float = -0.002
) -> Forces:
    """
    Closed-form N, M of the concrete for the strain field ε(y) = k·y + q.

    Args:
        b: Section width (m)
        h: Section height (m)
        k: Strain gradient (1/m)
        q: Strain at the centroid (-)
        fcd: Design compressive strength (Pa, negative)
        eps_c2: Strain at the end of the parabolic branch (negative)

    Returns:
        Forces of the concrete alone about the centroid
    """
    h2 = 0.5 * h
    y_bottom = -h2
    y_top = h2

    # Uniform strain: a single stress value over the whole section
    if _is_zero(k):
        if q >= 0:
            return Forces(0.0, 0.0)
        if q > eps_c2:
            ratio = 1.0 - q / eps_c2
            sigma = fcd * (1.0 - ratio * ratio)
        else:
            sigma = fcd
        return Forces(n=sigma * b * h, m=0.0)

    y0 = -q / k
    y_ec2 = (eps_c2 - q) / k

    n_total = 0.0
    m_total = 0.0

    # Parabolic branch, between the two roots
    ya = max(y_bottom, min(y_ec2, y0))
    yb = min(y_top, max(y_ec2, y0))

    if _is_less(ya, yb):
        a = k / eps_c2
        c = q / eps_c2
        lin = 2 * a - 2 * a * c
        const = 2 * c - c * c

        dy = yb - ya
        dy2 = yb * yb - ya * ya
        dy3 = (yb ** 3 - ya ** 3) / 3.0
        dy4 = 0.25 * (yb ** 4 - ya ** 4)

        n_total += fcd * b * (lin * dy2 * 0.5 + const * dy - a * a * dy3)
        m_total += fcd * b * (lin * dy3 + const * dy2 * 0.5 - a * a * dy4)

    # Constant branch (ε ≤ εc2); which side is more compressed follows sign(k)
    if k > 0:
        ya = y_bottom
        yb = min(y_ec2, y_top)
    else:
        ya = max(y_ec2, y_bottom)
        yb = y_top

    if _is_less(ya, yb):
        n_const = fcd * b * (yb - ya)
        n_total += n_const
        m_total += n_const * 0.5 * (ya + yb)

    return Forces(n=n_total, m=m_total)


def integrate_concrete(
    geometry: SectionGeometry,
    concrete: ConcreteLaw,
    strain: StrainState
) -> Forces:
    """Concrete forces for a section, material law and strain state."""
    k, q = strain.kq
    return concrete_forces(geometry.b, geometry.h, k, q, concrete.fcd, concrete.eps_c2)


def concrete_forces_numeric(
    b: float,
    h: float,
    k: float,
    q: float,
    concrete: ConcreteLaw,
    n_strips: int = 100
) -> Forces:
    """
    Midpoint strip integration of the same concrete resultant.

    Slower and only approximate near branch boundaries; kept as an
    independent check of :func:`concrete_forces`.
    """
    if n_strips < 1:
        raise ValueError(f"n_strips must be positive, got {n_strips}")

    dy = h / n_strips
    y = -h / 2 + dy * (np.arange(n_strips) + 0.5)
    eps = k * y + q

    ratio = 1.0 - eps / concrete.eps_c2
    sigma = np.where(
        eps >= 0,
        0.0,
        np.where(eps > concrete.eps_c2, concrete.fcd * (1.0 - ratio ** 2), concrete.fcd),
    )

    dn = sigma * b * dy
    return Forces(n=float(np.sum(dn)), m=float(np.sum(dn * y)))


def compression_centroid(forces: Forces) -> float:
    """Lever arm of the concrete resultant from the centroid (m); 0 without force."""
    if abs(forces.n) < 1e-6:
        return 0.0
    return forces.m / forces.n
