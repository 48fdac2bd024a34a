"""
N-M Interaction Diagram Builder
===============================

Walks the characteristic strain states pairwise, subdivides every interval by
linear interpolation of the extreme-fibre strains, and evaluates each strain
state:

1. Strains at both reinforcement layers
2. Concrete resultant (closed-form integration)
3. Layer stresses (bilinear steel law)
4. Reinforcement areas for the design load (on demand, per variant)

Two modes are available: REINFORCED returns InteractionPoint objects,
CONCRETE_ONLY returns ConcretePoint objects (k, q, N, M without steel).
"""

import logging
import numbers
from dataclasses import dataclass
from enum import Enum
from functools import cached_property
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np
from pydantic import BaseModel, Field

from ..core.geometry import SectionGeometry
from ..core.materials import CalculationSettings, ConcreteLaw, MaterialLoader, SteelLaw
from ..core.strain import StrainState
from .characteristic import CharacteristicState, characteristic_states
from .concrete import Forces, integrate_concrete
from .reinforcement import (
    ReinforcementInput,
    ReinforcementResult,
    ReinforcementVariant,
    solve_reinforcement,
)

logger = logging.getLogger(__name__)


class DiagramMode(Enum):
    """What each diagram point carries."""
    REINFORCED = "reinforced"
    CONCRETE_ONLY = "concrete_only"


class DesignLoad(BaseModel):
    """Design load pair: normal force n (N, tension positive) and moment m (N·m)."""
    n: float = Field(default=0.0, description="Design normal force (N)")
    m: float = Field(default=0.0, description="Design moment (N·m)")

    model_config = {"frozen": True}


# ============================================================================
# DIAGRAM POINTS
# ============================================================================

@dataclass(frozen=True)
class InteractionPoint:
    """
    One evaluated strain state of the interaction diagram.

    Reinforcement variants are solved lazily on first access and cached.
    Forces are in N and N·m; `concrete.m` follows the Σσ·y convention, the
    design-sign moments (`concrete_design_moment`, `m_total`, variant `md`)
    are its negation plus steel contributions.

    Attributes:
        label: Point name (characteristic label or interval position)
        strain: Strain state
        eps_s1, eps_s2: Strains at the top/bottom layer (-)
        concrete: Concrete resultant
        sigma_s1, sigma_s2: Layer stresses (Pa)
        y1, y2: Layer positions relative to the centroid (m)
        design_load: Load used for the reinforcement variants
    """
    label: str
    strain: StrainState
    eps_s1: float
    eps_s2: float
    concrete: Forces
    sigma_s1: float
    sigma_s2: float
    y1: float
    y2: float
    design_load: DesignLoad

    @property
    def eps_top(self) -> float:
        return self.strain.eps_top

    @property
    def eps_bottom(self) -> float:
        return self.strain.eps_bottom

    @property
    def k(self) -> float:
        return self.strain.k

    @property
    def q(self) -> float:
        return self.strain.q

    @property
    def concrete_design_moment(self) -> float:
        """Concrete moment in design sign convention (N·m)."""
        return -self.concrete.m

    @property
    def reinforcement_input(self) -> ReinforcementInput:
        return ReinforcementInput(
            concrete=self.concrete,
            sigma1=self.sigma_s1,
            sigma2=self.sigma_s2,
            y1=self.y1,
            y2=self.y2,
            n_design=self.design_load.n,
            m_design=self.design_load.m,
        )

    @cached_property
    def optimal(self) -> ReinforcementResult:
        return solve_reinforcement(ReinforcementVariant.OPTIMAL, self.reinforcement_input)

    @cached_property
    def single_layer(self) -> ReinforcementResult:
        return solve_reinforcement(ReinforcementVariant.SINGLE_LAYER, self.reinforcement_input)

    @cached_property
    def uniform(self) -> ReinforcementResult:
        return solve_reinforcement(ReinforcementVariant.UNIFORM, self.reinforcement_input)

    def reinforcement(self, variant: Union[ReinforcementVariant, str]) -> ReinforcementResult:
        """Reinforcement result for one variant (computed once per point)."""
        return getattr(self, ReinforcementVariant(variant).value)

    # Aggregates use the single-layer variant; an unavailable solution
    # contributes nothing to the totals.

    @property
    def steel_force(self) -> float:
        """Bottom layer force of the single-layer solution (N)."""
        result = self.single_layer
        return result.fs2 if result.is_valid else 0.0

    @property
    def steel_moment(self) -> float:
        """Design-sign moment of the single-layer steel force (N·m)."""
        return self.steel_force * (-self.y2)

    @property
    def n_total(self) -> float:
        return self.concrete.n + self.steel_force

    @property
    def m_total(self) -> float:
        return self.concrete_design_moment + self.steel_moment

    def to_dict(self) -> Dict[str, Any]:
        """Flat record in SI units; unavailable values are None."""
        optimal = self.optimal
        single = self.single_layer
        uniform = self.uniform
        return {
            'label': self.label,
            'eps_top': self.eps_top,
            'eps_bottom': self.eps_bottom,
            'eps_s1': self.eps_s1,
            'eps_s2': self.eps_s2,
            'k': self.k,
            'q': self.q,
            'sigma_s1': self.sigma_s1,
            'sigma_s2': self.sigma_s2,
            'Fc': self.concrete.n,
            'Mc': self.concrete_design_moment,
            'Fs2': single.fs2,
            'N': self.n_total,
            'M': self.m_total,
            'As1': optimal.as1,
            'As2': optimal.as2,
            'Fs1_optimal': optimal.fs1,
            'Fs2_optimal': optimal.fs2,
            'As': single.as2,
            'Md': single.md,
            'Astot': uniform.as_total,
            'Mdtot': uniform.md,
        }


@dataclass(frozen=True)
class ConcretePoint:
    """Concrete-only diagram point: strain parameters and concrete resultant."""
    label: str
    k: float
    q: float
    n: float
    m: float


# ============================================================================
# DIAGRAM BUILDER
# ============================================================================

class InteractionDiagram:
    """
    N-M interaction diagram of a two-layer rectangular section.

    Attributes:
        geometry: Section geometry
        concrete: Concrete law
        steel: Steel law
        design_load: Load pair used for per-point reinforcement variants
        settings: Default density and convergence controls

    Example:
        >>> diagram = InteractionDiagram(SectionGeometry(), ConcreteLaw(), SteelLaw(),
        ...                              DesignLoad(n=0.0, m=30e3))
        >>> points = diagram.build([5, 5, 5, 10, 10, 5, 5, 5])
        >>> len(points)
        51
    """

    def __init__(
        self,
        geometry: SectionGeometry,
        concrete: ConcreteLaw,
        steel: SteelLaw,
        design_load: Optional[DesignLoad] = None,
        settings: Optional[CalculationSettings] = None
    ):
        self.geometry = geometry
        self.concrete = concrete
        self.steel = steel
        self.design_load = design_load if design_load is not None else DesignLoad()
        self.settings = settings if settings is not None else MaterialLoader.get_settings()

    def states(self) -> List[CharacteristicState]:
        return characteristic_states(self.geometry, self.concrete, self.steel)

    def evaluate(self, label: str, eps_top: float, eps_bottom: float) -> InteractionPoint:
        """
        Evaluate one strain state.

        Args:
            label: Point name
            eps_top: Top fibre strain (-)
            eps_bottom: Bottom fibre strain (-)

        Returns:
            InteractionPoint with concrete forces and layer stresses
        """
        geometry = self.geometry
        strain = StrainState(eps_top=eps_top, eps_bottom=eps_bottom, h=geometry.h)

        eps_s1 = strain.at_norm(geometry.y1_norm)
        eps_s2 = strain.at_norm(geometry.y2_norm)

        return InteractionPoint(
            label=label,
            strain=strain,
            eps_s1=eps_s1,
            eps_s2=eps_s2,
            concrete=integrate_concrete(geometry, self.concrete, strain),
            sigma_s1=self.steel.stress(eps_s1),
            sigma_s2=self.steel.stress(eps_s2),
            y1=geometry.y1_local,
            y2=geometry.y2_local,
            design_load=self.design_load,
        )

    def evaluate_concrete(self, label: str, eps_top: float, eps_bottom: float) -> ConcretePoint:
        strain = StrainState(eps_top=eps_top, eps_bottom=eps_bottom, h=self.geometry.h)
        forces = integrate_concrete(self.geometry, self.concrete, strain)
        k, q = strain.kq
        return ConcretePoint(label=label, k=k, q=q, n=forces.n, m=forces.m)

    def _resolve_densities(
        self,
        densities: Optional[Sequence[int]],
        n_intervals: int
    ) -> List[int]:
        if densities is None:
            return [self.settings.default_density] * n_intervals

        densities = list(densities)
        if len(densities) != n_intervals:
            raise ValueError(
                f"Number of densities ({len(densities)}) must equal the number "
                f"of intervals ({n_intervals})"
            )
        for density in densities:
            if not isinstance(density, numbers.Integral) or density < 1:
                raise ValueError(f"Densities must be positive integers, got {density!r}")
        return [int(d) for d in densities]

    def build(
        self,
        densities: Optional[Sequence[int]] = None,
        mode: DiagramMode = DiagramMode.REINFORCED
    ) -> List[Union[InteractionPoint, ConcretePoint]]:
        """
        Generate the densified interaction diagram.

        Each interval contributes its start state plus (density − 1)
        interpolated states; the final state closes the sequence, so the
        diagram holds sum(densities) + 1 points.

        Args:
            densities: Subdivisions per interval (one per interval, default
                settings.default_density each)
            mode: REINFORCED or CONCRETE_ONLY

        Returns:
            Ordered points from pure compression to pure tension

        Raises:
            ValueError: If densities has the wrong length or invalid entries
        """
        mode = DiagramMode(mode)
        states = self.states()
        densities = self._resolve_densities(densities, len(states) - 1)

        evaluate = self.evaluate if mode == DiagramMode.REINFORCED else self.evaluate_concrete

        h = self.geometry.h
        points = []
        for start, end, density in zip(states[:-1], states[1:], densities):
            points.append(evaluate(start.label, start.eps_top, start.eps_bottom))

            start_strain = StrainState(eps_top=start.eps_top, eps_bottom=start.eps_bottom, h=h)
            end_strain = StrainState(eps_top=end.eps_top, eps_bottom=end.eps_bottom, h=h)
            for j in range(1, density):
                strain = start_strain.interpolate(end_strain, j / density)
                label = f"{start.label}-{end.label} ({j}/{density})"
                points.append(evaluate(label, strain.eps_top, strain.eps_bottom))

        last = states[-1]
        points.append(evaluate(last.label, last.eps_top, last.eps_bottom))

        logger.debug(
            "Built %s diagram: %d points over %d intervals (b=%.3f m, h=%.3f m)",
            mode.value, len(points), len(densities), self.geometry.b, self.geometry.h
        )
        return points

    @staticmethod
    def moment_range(points: Sequence[InteractionPoint]) -> Tuple[float, float]:
        """Smallest and largest total design moment over the points (N·m)."""
        moments = np.array([p.m_total for p in points])
        return float(moments.min()), float(moments.max())
