"""
Base interface for all binary conversion strategies.

All strategy plugins must implement the BinaryOperation interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ..arithmetic import normalize_sum
from ..core.config import Config


class BinaryOperation(ABC):
    """Base class for strategies rendering the sum of two integers in base 2."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the strategy name (must match filename without .py)."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Return a human-readable description of the strategy."""
        pass

    @property
    def solution(self) -> str:
        """Name of the public function bound to this strategy."""
        return ""

    @abstractmethod
    def render(self, value: int) -> str:
        """
        Render a non-negative integer as a binary string.

        Args:
            value: Non-negative integer

        Returns:
            Digits '0'/'1', most significant first, "0" for zero
        """
        pass

    def convert(self, a: int, b: int, config: Optional[Config] = None) -> str:
        """
        Add two integers and render the sum in binary.

        Raises:
            ConversionError: If the configured policies reject the operands or sum
        """
        return self.render(normalize_sum(a, b, config))

    def get_metadata(self) -> Dict[str, Any]:
        """
        Return strategy metadata for API exposure.

        Returns:
            Dictionary containing strategy information
        """
        return {
            "name": self.name,
            "description": self.description,
            "solution": self.solution,
        }
