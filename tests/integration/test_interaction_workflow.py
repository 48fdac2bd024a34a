"""
Integration tests for the complete diagram and design workflow.

Uses catalogue materials (C30/37, B500B) on a 300×500 mm section and
drives everything through the public entry points.
"""

import pytest

import nmdiagram
from nmdiagram import (
    SectionGeometry,
    MaterialLoader,
    ConcretePoint,
    InteractionPoint,
    DesignPointNotFoundError,
    calculate,
    calculate_concrete_only,
    design_reinforcement,
)


@pytest.fixture
def section():
    return SectionGeometry(b=0.3, h=0.5, layer1_distance=0.05, layer2_y=0.05)


@pytest.fixture
def c30():
    return MaterialLoader.get_concrete("C30/37")


@pytest.fixture
def b500():
    return MaterialLoader.get_steel("B500B")


class TestCalculate:
    """Full diagram through the calculate entry point."""

    def test_default_diagram(self, section, c30, b500):
        """Default densities give 81 points from pure compression to pure tension."""
        points = calculate(section, c30, b500, n_design=-200e3, m_design=80e3)

        assert len(points) == 81
        assert all(isinstance(p, InteractionPoint) for p in points)
        assert points[0].label == "1"
        assert points[-1].label == "8"
        assert points[0].design_load.n == -200e3
        assert points[0].design_load.m == 80e3

    def test_optimal_variant_along_diagram(self, section, c30, b500):
        """Wherever the optimal variant exists it meets both design values."""
        points = calculate(section, c30, b500, n_design=-200e3, m_design=80e3,
                           densities=[2, 2, 2, 4, 4, 2, 2, 2])

        assert len(points) == 21
        for point in points:
            result = point.optimal
            if not result.is_valid:
                continue
            res_n, res_m = result.residuals(point.reinforcement_input)
            assert res_n == pytest.approx(0.0, abs=1e-3)
            assert res_m == pytest.approx(0.0, abs=1e-3)

    def test_invalid_densities(self, section, c30, b500):
        """Density arrays must have one entry per interval."""
        with pytest.raises(ValueError, match="must equal the number of intervals"):
            calculate(section, c30, b500, densities=[10] * 9)


class TestConcreteOnly:
    """Concrete-only diagram through its entry point."""

    def test_concrete_force_decreases_along_diagram(self, section, c30, b500):
        """Compression in the concrete never grows from state 1 to state 8."""
        points = calculate_concrete_only(section, c30, b500)

        assert len(points) == 81
        assert all(isinstance(p, ConcretePoint) for p in points)
        assert points[0].n == pytest.approx(-20e6 * 0.15)
        assert points[0].m == 0.0
        for earlier, later in zip(points[:-1], points[1:]):
            assert later.n >= earlier.n - 1e-6


class TestDesignReinforcement:
    """Design point search through the design_reinforcement entry point."""

    def test_beam_150_knm(self, section, c30, b500):
        """Pure bending 150 kNm: bottom steel ≈ M/(z·fyd) with z ≈ 0.42 m."""
        result = design_reinforcement(section, c30, b500, n_target=0.0, m_target=150e3)

        assert result.converged
        assert result.error_rel < 0.01 or result.error_abs < 100.0

        point = result.point
        lever_arm = point.m_total / point.steel_force
        assert 0.38 < lever_arm < 0.45
        assert point.sigma_s2 == pytest.approx(b500.fyd)
        assert point.single_layer.as2 == pytest.approx(8.2e-4, rel=0.05)

    def test_explicit_tolerances(self, section, c30, b500):
        """Tolerances and cap passed explicitly override the defaults."""
        result = design_reinforcement(
            section, c30, b500, n_target=0.0, m_target=150e3,
            rel_tol=1e-6, abs_tol=0.5, max_iter=50,
        )

        assert result.converged
        assert result.error_abs < 0.5 or result.error_rel < 1e-6

    def test_unreachable_moment(self, section, c30, b500):
        """Moments beyond the section capacity are reported with the range."""
        with pytest.raises(DesignPointNotFoundError, match="achievable range"):
            design_reinforcement(section, c30, b500, n_target=0.0, m_target=5e9)


class TestPackageInterface:
    """Public names exported at package level."""

    def test_exports(self):
        """Entry points and models are importable from the package root."""
        for name in ("calculate", "calculate_concrete_only", "design_reinforcement",
                     "InteractionDiagram", "DesignPointFinder", "SectionGeometry"):
            assert name in nmdiagram.__all__
            assert hasattr(nmdiagram, name)
        assert nmdiagram.__version__ == "0.1.0"
