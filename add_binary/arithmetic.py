"""
Operand validation and sum normalization.

Every conversion strategy receives the value produced here, so the width,
overflow and negative-sum policies are applied once and identically.
"""

from typing import Optional

from .core.config import Config, get_config
from .core.exceptions import ArithmeticOverflow, OperandOutOfRange, UnsupportedNegativeSum
from .core.logging import get_logger

logger = get_logger(__name__)


def check_operand(name: str, value: int, config: Config) -> None:
    """Raise OperandOutOfRange if value does not fit the configured signed width."""
    if not config.min_value <= value <= config.max_value:
        raise OperandOutOfRange(name, value, config.int_width)


def wrap_signed(value: int, width: int) -> int:
    """Two's-complement wraparound of value into a signed integer of the given width."""
    value &= (1 << width) - 1
    if value >= 1 << (width - 1):
        value -= 1 << width
    return value


def normalize_sum(a: int, b: int, config: Optional[Config] = None) -> int:
    """
    Add two operands and return the non-negative value to render in binary.

    Args:
        a: First operand
        b: Second operand
        config: Settings to apply; the global configuration when omitted

    Returns:
        Non-negative integer whose binary form is the conversion result

    Raises:
        OperandOutOfRange: If an operand does not fit the configured width
        ArithmeticOverflow: If the sum overflows and overflow_policy is "error"
        UnsupportedNegativeSum: If the sum is negative and negative_policy is "error"
    """
    config = config or get_config()
    check_operand("a", a, config)
    check_operand("b", b, config)

    total = a + b
    if not config.min_value <= total <= config.max_value:
        if config.overflow_policy == "error":
            logger.warning("Sum overflow rejected", a=a, b=b, width=config.int_width)
            raise ArithmeticOverflow(a, b, config.int_width)
        total = wrap_signed(total, config.int_width)

    if total < 0:
        if config.negative_policy == "error":
            logger.warning("Negative sum rejected", total=total)
            raise UnsupportedNegativeSum(total)
        # Same bit pattern read as unsigned
        total &= (1 << config.int_width) - 1

    return total
