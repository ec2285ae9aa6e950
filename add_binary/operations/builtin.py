"""Built-in strategy - delegates to Python's base conversion."""

from .base import BinaryOperation


class BuiltinOperation(BinaryOperation):
    """Render with the built-in integer formatting."""

    @property
    def name(self) -> str:
        return "builtin"

    @property
    def description(self) -> str:
        return "Built-in base-2 formatting of (a + b)"

    @property
    def solution(self) -> str:
        return "solution1"

    def render(self, value: int) -> str:
        return format(value, "b")
