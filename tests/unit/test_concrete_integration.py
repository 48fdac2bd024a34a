"""
Unit tests for the closed-form concrete integrator.

The exact integrals are checked against limit cases and against
adaptive quadrature of the stress law (scipy.integrate.quad).
"""

import pytest
from scipy import integrate

from nmdiagram.core import StrainState
from nmdiagram.design import (
    Forces,
    concrete_forces,
    concrete_forces_numeric,
    integrate_concrete,
    compression_centroid,
)


def quad_forces(geometry, concrete, k, q):
    """Reference N, M by adaptive quadrature with breaks at the branch roots."""
    h2 = geometry.h / 2
    breaks = []
    if k != 0:
        breaks = [y for y in (-q / k, (concrete.eps_c2 - q) / k) if -h2 < y < h2]

    def sigma(y):
        return concrete.stress(k * y + q) * geometry.b

    n, _ = integrate.quad(sigma, -h2, h2, points=breaks or None, epsabs=1e-6)
    m, _ = integrate.quad(lambda y: sigma(y) * y, -h2, h2, points=breaks or None, epsabs=1e-6)
    return n, m


class TestLimitCases:
    """Test exact results for uniform and boundary strain fields."""

    def test_uniform_strain_has_no_moment(self, geometry, concrete):
        """k = 0: M = 0 exactly and N = b·h·σ(q)."""
        forces = concrete_forces(geometry.b, geometry.h, 0.0, -0.001, concrete.fcd, concrete.eps_c2)

        assert forces.m == 0.0
        assert forces.n == pytest.approx(geometry.area * concrete.stress(-0.001))
        assert forces.n == pytest.approx(-2.25e6)

    def test_all_tension(self, geometry, concrete):
        """No compression anywhere: N = M = 0."""
        state = StrainState(eps_top=0.001, eps_bottom=0.01, h=geometry.h)
        forces = integrate_concrete(geometry, concrete, state)

        assert forces.n == 0.0
        assert forces.m == 0.0

    def test_uniform_tension(self, geometry, concrete):
        """Uniform tensile strain gives no force."""
        forces = concrete_forces(geometry.b, geometry.h, 0.0, 0.002, concrete.fcd)
        assert forces == Forces(0.0, 0.0)

    def test_full_crush(self, geometry, concrete):
        """Both extremes at εcu: N = fcd·b·h, M = 0."""
        state = StrainState(eps_top=concrete.eps_cu, eps_bottom=concrete.eps_cu, h=geometry.h)
        forces = integrate_concrete(geometry, concrete, state)

        assert forces.n == pytest.approx(concrete.fcd * geometry.b * geometry.h)
        assert forces.m == 0.0

    def test_whole_section_beyond_eps_c2(self, geometry, concrete):
        """Both extremes at or beyond εc2 collapses to the constant branch."""
        state = StrainState(eps_top=concrete.eps_cu, eps_bottom=concrete.eps_c2, h=geometry.h)
        forces = integrate_concrete(geometry, concrete, state)

        assert forces.n == pytest.approx(-3.0e6)
        assert forces.m == pytest.approx(0.0, abs=1e-3)


class TestAgainstQuadrature:
    """Compare closed-form results with numerical quadrature."""

    @pytest.mark.parametrize("eps_top,eps_bottom", [
        (-0.0035, 0.0),
        (-0.0035, 0.01),
        (-0.002, 0.01),
        (-0.001, 0.002),
        (-0.0035, -0.001),
        (0.002, -0.0035),
        (-0.0005, -0.0015),
    ])
    def test_matches_quad(self, geometry, concrete, eps_top, eps_bottom):
        """N and M agree with adaptive quadrature."""
        state = StrainState(eps_top=eps_top, eps_bottom=eps_bottom, h=geometry.h)
        k, q = state.kq

        forces = integrate_concrete(geometry, concrete, state)
        n_ref, m_ref = quad_forces(geometry, concrete, k, q)

        assert forces.n == pytest.approx(n_ref, rel=1e-6, abs=1e-3)
        assert forces.m == pytest.approx(m_ref, rel=1e-6, abs=1e-3)

    def test_mirrored_field(self, geometry, concrete):
        """Swapping top and bottom strains keeps N and flips the sign of M."""
        up = integrate_concrete(geometry, concrete, StrainState(-0.0035, 0.005, geometry.h))
        down = integrate_concrete(geometry, concrete, StrainState(0.005, -0.0035, geometry.h))

        assert down.n == pytest.approx(up.n)
        assert down.m == pytest.approx(-up.m)


class TestNumericIntegrator:
    """Test midpoint strip integration."""

    def test_converges_to_closed_form(self, geometry, concrete):
        """Fine strips approach the closed-form result."""
        state = StrainState(eps_top=-0.0035, eps_bottom=0.004, h=geometry.h)
        k, q = state.kq

        exact = integrate_concrete(geometry, concrete, state)
        numeric = concrete_forces_numeric(geometry.b, geometry.h, k, q, concrete, n_strips=2000)

        assert numeric.n == pytest.approx(exact.n, rel=1e-4)
        assert numeric.m == pytest.approx(exact.m, rel=1e-4)

    def test_invalid_strip_count(self, geometry, concrete):
        """At least one strip is required."""
        with pytest.raises(ValueError, match="n_strips must be positive"):
            concrete_forces_numeric(geometry.b, geometry.h, 0.0, -0.001, concrete, n_strips=0)


class TestCompressionCentroid:
    """Test lever arm of the concrete resultant."""

    def test_top_compression_acts_above_centroid(self, geometry, concrete):
        """Compression at the top fibre puts the resultant above the centroid."""
        forces = integrate_concrete(geometry, concrete, StrainState(-0.0035, 0.01, geometry.h))

        lever = compression_centroid(forces)
        assert 0.0 < lever < geometry.h / 2

    def test_no_force(self):
        """Without force the lever arm is reported as zero."""
        assert compression_centroid(Forces(0.0, 0.0)) == 0.0
