"""
Strategies Package - Concrete strategy implementations.

Import this module to register all built-in strategies.
"""

from .layered import LayeredStrategy
from .orientation_search import OrientationSearchStrategy

__all__ = [
    "LayeredStrategy",
    "OrientationSearchStrategy",
]
