"""
Strategy Factory Module - Registry and factory for strategy instantiation.
"""

import logging
from typing import Any, Dict, List, Optional, Type

from .base import SolverStrategy
from .board import Board
from .context import SolutionContext
from .solution import Solution

logger = logging.getLogger(__name__)

DEFAULT_STRATEGY = "orientation_search"

# Global registry of strategies, in registration order
_STRATEGIES: Dict[str, Type[SolverStrategy]] = {}


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """
    Decorator to register a strategy class under its name.

    Usage:
        @register_strategy
        class MyStrategy(SolverStrategy):
            name = "my_strategy"
            ...

    Raises:
        ValueError: If another class already uses the same name
    """
    existing = _STRATEGIES.get(cls.name)
    if existing is not None and existing is not cls:
        raise ValueError(
            f"Strategy name {cls.name!r} already registered by {existing.__name__}"
        )
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: str, **kwargs: Any) -> SolverStrategy:
    """
    Create a strategy instance by name.

    Args:
        name: Strategy name (e.g., "layered", "orientation_search")
        **kwargs: Additional arguments passed to strategy constructor

    Returns:
        Strategy instance

    Raises:
        ValueError: If strategy name not found
    """
    if name not in _STRATEGIES:
        available = ", ".join(_STRATEGIES.keys())
        raise ValueError(f"Unknown strategy: {name}. Available: {available}")
    logger.debug(f"Creating strategy {name} with {kwargs}")
    return _STRATEGIES[name](**kwargs)


def get_strategy_names() -> List[str]:
    """List registered strategy names."""
    return list(_STRATEGIES.keys())


def get_strategy_info() -> List[Dict[str, str]]:
    """
    Get name and description for all registered strategies.

    Returns:
        List of dicts with 'name' and 'description' keys
    """
    return [
        {"name": cls.name, "description": cls.description}
        for cls in _STRATEGIES.values()
    ]


def get_default_strategy_name() -> str:
    """
    Get the default strategy name.

    Returns:
        DEFAULT_STRATEGY if registered, else the first registered name
    """
    if DEFAULT_STRATEGY in _STRATEGIES:
        return DEFAULT_STRATEGY
    return next(iter(_STRATEGIES), "")


def solve_board(board: Board, name: Optional[str] = None, **kwargs: Any) -> Solution:
    """
    Solve a board with a registered strategy.

    Args:
        board: Board to solve (left untouched)
        name: Strategy name (default strategy if omitted)
        **kwargs: Additional arguments passed to strategy constructor

    Returns:
        Solution from the strategy
    """
    strategy = create_strategy(name or get_default_strategy_name(), **kwargs)
    return strategy.solve(SolutionContext(board=board))
