"""
Interaction diagram and reinforcement design for two-layer RC sections
EN 1992-1-1:2004 parabolic-rectangular concrete, bilinear steel
"""

from .concrete import (
    Forces,
    concrete_forces,
    concrete_forces_numeric,
    integrate_concrete,
    compression_centroid,
)
from .steel import steel_layer_forces, steel_total_forces, section_forces
from .characteristic import CHARACTERISTIC_LABELS, CharacteristicState, characteristic_states
from .reinforcement import (
    ReinforcementVariant,
    ReinforcementInput,
    ReinforcementResult,
    solve_optimal,
    solve_single_layer,
    solve_uniform,
    solve_reinforcement,
)
from .diagram import DiagramMode, DesignLoad, InteractionPoint, ConcretePoint, InteractionDiagram
from .design_point import DesignPointNotFoundError, DesignResult, DesignPointFinder
from .operations import calculate, calculate_concrete_only, design_reinforcement

__all__ = [
    'Forces',
    'concrete_forces',
    'concrete_forces_numeric',
    'integrate_concrete',
    'compression_centroid',
    'steel_layer_forces',
    'steel_total_forces',
    'section_forces',
    'CHARACTERISTIC_LABELS',
    'CharacteristicState',
    'characteristic_states',
    'ReinforcementVariant',
    'ReinforcementInput',
    'ReinforcementResult',
    'solve_optimal',
    'solve_single_layer',
    'solve_uniform',
    'solve_reinforcement',
    'DiagramMode',
    'DesignLoad',
    'InteractionPoint',
    'ConcretePoint',
    'InteractionDiagram',
    'DesignPointNotFoundError',
    'DesignResult',
    'DesignPointFinder',
    'calculate',
    'calculate_concrete_only',
    'design_reinforcement',
]
