"""
Design point search on the interaction diagram (regula falsi).

For a target load pair (N, M) the diagram is built with that load as the
design load, so every point carries the single-layer reinforcement that
satisfies force equilibrium at N. The search then locates the strain state
whose total moment matches M:

1. Take the first consecutive pair of diagram points whose moments bracket M
2. Interpolate the extreme-fibre strains with t = (M − M1)/(M2 − M1)
3. Evaluate, and keep the sub-bracket that still contains M

The first bracket found is used even if the curve folds back and several
brackets exist; narrowing assumes M varies monotonically inside the bracket.
"""

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ..core.geometry import SectionGeometry
from ..core.materials import CalculationSettings, ConcreteLaw, MaterialLoader, SteelLaw
from .diagram import DesignLoad, InteractionDiagram, InteractionPoint

logger = logging.getLogger(__name__)

# Moment difference below which the secant step falls back to bisection (N·m)
FLAT_BRACKET_TOL = 1e-9
# Target moment below which the relative error is replaced by the absolute one (N·m)
ZERO_MOMENT_TOL = 1e-6


class DesignPointNotFoundError(ValueError):
    """Target moment lies outside the moment range of the diagram."""

    def __init__(self, m_target: float, m_min: float, m_max: float):
        self.m_target = m_target
        self.m_min = m_min
        self.m_max = m_max
        super().__init__(
            f"Target moment {m_target / 1e3:.2f} kNm lies outside the achievable "
            f"range [{m_min / 1e3:.2f}, {m_max / 1e3:.2f}] kNm"
        )


@dataclass(frozen=True)
class DesignResult:
    """
    Outcome of a design point search.

    Attributes:
        point: Refined diagram point (last evaluated one if not converged)
        converged: Whether the tolerance was met within the iteration cap
        iterations: Number of regula falsi iterations performed
        error_abs: |M − M_target| at the returned point (N·m)
        error_rel: error_abs / |M_target|, or error_abs when M_target ≈ 0
        n_target: Target normal force (N)
        m_target: Target moment (N·m)
    """
    point: InteractionPoint
    converged: bool
    iterations: int
    error_abs: float
    error_rel: float
    n_target: float
    m_target: float

    @property
    def label(self) -> str:
        return self.point.label

    def to_dict(self) -> Dict[str, Any]:
        data = self.point.to_dict()
        data.update({
            'converged': self.converged,
            'iterations': self.iterations,
            'error_abs': self.error_abs,
            'error_rel': self.error_rel,
            'N_target': self.n_target,
            'M_target': self.m_target,
        })
        return data


def _errors(m: float, m_target: float) -> Tuple[float, float]:
    error_abs = abs(m - m_target)
    if abs(m_target) > ZERO_MOMENT_TOL:
        return error_abs, error_abs / abs(m_target)
    return error_abs, error_abs


class DesignPointFinder:
    """
    Regula falsi search for the diagram point matching a target moment.

    Example:
        >>> finder = DesignPointFinder(SectionGeometry(), ConcreteLaw(), SteelLaw())
        >>> result = finder.find(n_target=0.0, m_target=30e3)
        >>> result.converged
        True
    """

    def __init__(
        self,
        geometry: SectionGeometry,
        concrete: ConcreteLaw,
        steel: SteelLaw,
        settings: Optional[CalculationSettings] = None
    ):
        self.geometry = geometry
        self.concrete = concrete
        self.steel = steel
        self.settings = settings if settings is not None else MaterialLoader.get_settings()

    def find(
        self,
        n_target: float,
        m_target: float,
        rel_tol: Optional[float] = None,
        abs_tol: Optional[float] = None,
        max_iter: Optional[int] = None
    ) -> DesignResult:
        """
        Find the strain state matching (n_target, m_target).

        Args:
            n_target: Target normal force (N, tension positive)
            m_target: Target design moment (N·m)
            rel_tol: Relative moment tolerance (default from settings)
            abs_tol: Absolute moment tolerance in N·m (default from settings)
            max_iter: Iteration cap (default from settings)

        Returns:
            DesignResult; converged=False if the cap was reached

        Raises:
            DesignPointNotFoundError: If no diagram interval brackets m_target
            ValueError: If a tolerance or the iteration cap is not positive
        """
        rel_tol = self.settings.rel_tol if rel_tol is None else rel_tol
        abs_tol = self.settings.abs_tol if abs_tol is None else abs_tol
        max_iter = self.settings.max_iterations if max_iter is None else max_iter

        if rel_tol <= 0 or abs_tol <= 0:
            raise ValueError(f"Tolerances must be positive (rel_tol={rel_tol}, abs_tol={abs_tol})")
        if max_iter < 1:
            raise ValueError(f"max_iter must be at least 1, got {max_iter}")

        diagram = InteractionDiagram(
            self.geometry,
            self.concrete,
            self.steel,
            design_load=DesignLoad(n=n_target, m=m_target),
            settings=self.settings,
        )
        points = diagram.build()

        p1 = p2 = None
        for a, b in zip(points[:-1], points[1:]):
            if min(a.m_total, b.m_total) <= m_target <= max(a.m_total, b.m_total):
                p1, p2 = a, b
                break

        if p1 is None:
            m_min, m_max = diagram.moment_range(points)
            raise DesignPointNotFoundError(m_target, m_min, m_max)

        logger.debug("Bracket found between '%s' and '%s'", p1.label, p2.label)

        point = p1
        error_abs, error_rel = _errors(point.m_total, m_target)
        for iteration in range(1, max_iter + 1):
            m1, m2 = p1.m_total, p2.m_total
            if abs(m2 - m1) < FLAT_BRACKET_TOL:
                t = 0.5
            else:
                t = (m_target - m1) / (m2 - m1)

            strain = p1.strain.interpolate(p2.strain, t)
            point = diagram.evaluate(
                f"Design point (iteration {iteration})", strain.eps_top, strain.eps_bottom
            )
            error_abs, error_rel = _errors(point.m_total, m_target)

            logger.debug(
                "Iteration %d: t=%.6f, M=%.3f N·m, error=%.3f N·m",
                iteration, t, point.m_total, error_abs
            )

            if error_abs < abs_tol or error_rel < rel_tol:
                return DesignResult(
                    point=dataclasses.replace(
                        point, label=f"Design point (converged after {iteration} iterations)"
                    ),
                    converged=True,
                    iterations=iteration,
                    error_abs=error_abs,
                    error_rel=error_rel,
                    n_target=n_target,
                    m_target=m_target,
                )

            if (m1 - m_target) * (point.m_total - m_target) < 0:
                p2 = point
            else:
                p1 = point

        logger.warning(
            "Design point search stopped after %d iterations (error %.3f N·m, %.4f relative)",
            max_iter, error_abs, error_rel
        )
        return DesignResult(
            point=dataclasses.replace(
                point, label=f"Design point (max iterations {max_iter} reached)"
            ),
            converged=False,
            iterations=max_iter,
            error_abs=error_abs,
            error_rel=error_rel,
            n_target=n_target,
            m_target=m_target,
        )
