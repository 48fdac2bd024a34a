"""
Entry points for callers (HTTP layers, CLIs, reports).

Each call constructs its own diagram objects and returns freshly built
results; nothing is shared between calls.
"""

from typing import List, Optional, Sequence

from ..core.geometry import SectionGeometry
from ..core.materials import ConcreteLaw, SteelLaw
from .design_point import DesignPointFinder, DesignResult
from .diagram import ConcretePoint, DesignLoad, DiagramMode, InteractionDiagram, InteractionPoint


def calculate(
    geometry: SectionGeometry,
    concrete: ConcreteLaw,
    steel: SteelLaw,
    n_design: float = 0.0,
    m_design: float = 0.0,
    densities: Optional[Sequence[int]] = None
) -> List[InteractionPoint]:
    """
    Full interaction diagram with reinforcement variants for a design load.

    Args:
        geometry: Section geometry
        concrete: Concrete law
        steel: Steel law
        n_design: Design normal force (N)
        m_design: Design moment (N·m)
        densities: Subdivisions for each of the 8 intervals

    Returns:
        Ordered diagram points
    """
    diagram = InteractionDiagram(
        geometry, concrete, steel, design_load=DesignLoad(n=n_design, m=m_design)
    )
    return diagram.build(densities, mode=DiagramMode.REINFORCED)


def calculate_concrete_only(
    geometry: SectionGeometry,
    concrete: ConcreteLaw,
    steel: SteelLaw,
    densities: Optional[Sequence[int]] = None
) -> List[ConcretePoint]:
    """Concrete resultant along the diagram; steel only fixes the strain states."""
    diagram = InteractionDiagram(geometry, concrete, steel)
    return diagram.build(densities, mode=DiagramMode.CONCRETE_ONLY)


def design_reinforcement(
    geometry: SectionGeometry,
    concrete: ConcreteLaw,
    steel: SteelLaw,
    n_target: float,
    m_target: float,
    rel_tol: Optional[float] = None,
    abs_tol: Optional[float] = None,
    max_iter: Optional[int] = None
) -> DesignResult:
    """
    Refined diagram point and reinforcement for a target load pair.

    Raises:
        DesignPointNotFoundError: If m_target is outside the diagram's moment range
    """
    finder = DesignPointFinder(geometry, concrete, steel)
    return finder.find(n_target, m_target, rel_tol=rel_tol, abs_tol=abs_tol, max_iter=max_iter)
