"""Render the sum of two integers in binary with interchangeable strategies."""

from .converter import Strategy, convert_all, solution1, solution2, solution3, to_binary
from .core.config import Config, get_config

__version__ = "1.0.0"

__all__ = [
    "Strategy",
    "Config",
    "get_config",
    "convert_all",
    "solution1",
    "solution2",
    "solution3",
    "to_binary",
]
