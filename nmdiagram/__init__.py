"""
nmdiagram - N-M interaction diagrams and reinforcement design for
rectangular reinforced concrete sections (EN 1992-1-1:2004)
"""

from .core import (
    SectionGeometry,
    ConcreteLaw,
    SteelLaw,
    CalculationSettings,
    MaterialLoader,
    StrainState,
)
from .design import (
    DiagramMode,
    DesignLoad,
    InteractionPoint,
    ConcretePoint,
    InteractionDiagram,
    ReinforcementVariant,
    DesignPointNotFoundError,
    DesignResult,
    DesignPointFinder,
    calculate,
    calculate_concrete_only,
    design_reinforcement,
)

__version__ = "0.1.0"

__all__ = [
    'SectionGeometry',
    'ConcreteLaw',
    'SteelLaw',
    'CalculationSettings',
    'MaterialLoader',
    'StrainState',
    'DiagramMode',
    'DesignLoad',
    'InteractionPoint',
    'ConcretePoint',
    'InteractionDiagram',
    'ReinforcementVariant',
    'DesignPointNotFoundError',
    'DesignResult',
    'DesignPointFinder',
    'calculate',
    'calculate_concrete_only',
    'design_reinforcement',
]
