"""
Core data structures: section geometry, material laws and strain fields.
"""

from .geometry import SectionGeometry
from .materials import ConcreteLaw, SteelLaw, CalculationSettings, MaterialLoader
from .strain import StrainState, strain_params, strain_at

__all__ = [
    'SectionGeometry',
    'ConcreteLaw',
    'SteelLaw',
    'CalculationSettings',
    'MaterialLoader',
    'StrainState',
    'strain_params',
    'strain_at',
]
