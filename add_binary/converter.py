"""
Public conversion functions.

solution1, solution2 and solution3 are the three interchangeable variants;
to_binary and convert_all select strategies by name.
"""

from enum import Enum
from typing import Dict, Optional, Union

from .core.config import Config, get_config
from .core.logging import get_logger
from .plugin_loader import plugin_loader

logger = get_logger(__name__)


class Strategy(str, Enum):
    """Available conversion strategies."""
    BUILTIN = "builtin"
    ITERATIVE = "iterative"
    RECURSIVE = "recursive"


def to_binary(
    a: int,
    b: int,
    strategy: Union[Strategy, str, None] = None,
    config: Optional[Config] = None,
) -> str:
    """
    Render a + b in binary with the given strategy.

    Args:
        a: First operand
        b: Second operand
        strategy: Strategy to use; the configured default when omitted
        config: Settings to apply; the global configuration when omitted

    Returns:
        Binary string of the normalized sum

    Raises:
        UnknownStrategy: If the strategy is not registered
        ConversionError: If the configured policies reject the operands or sum
    """
    config = config or get_config()
    if strategy is None:
        strategy = config.default_strategy
    name = strategy.value if isinstance(strategy, Strategy) else strategy

    operation = plugin_loader.get_operation(name)
    result = operation.convert(a, b, config)
    logger.debug("Converted sum", a=a, b=b, strategy=name, result=result)
    return result


def convert_all(a: int, b: int, config: Optional[Config] = None) -> Dict[str, str]:
    """Render a + b with every registered strategy, keyed by strategy name."""
    config = config or get_config()
    return {
        name: plugin_loader.get_operation(name).convert(a, b, config)
        for name in plugin_loader.get_operation_names()
    }


def solution1(a: int, b: int) -> str:
    """Binary form of a + b using the built-in conversion."""
    return to_binary(a, b, Strategy.BUILTIN)


def solution2(a: int, b: int) -> str:
    """Binary form of a + b by repeated division by two."""
    return to_binary(a, b, Strategy.ITERATIVE)


def solution3(a: int, b: int) -> str:
    """Binary form of a + b by recursive digit assembly."""
    return to_binary(a, b, Strategy.RECURSIVE)
