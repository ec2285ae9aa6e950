"""Iterative strategy - collects remainders of repeated division by two."""

from .base import BinaryOperation


class IterativeOperation(BinaryOperation):
    """Prepend value % 2 and halve until the quotient reaches zero."""

    @property
    def name(self) -> str:
        return "iterative"

    @property
    def description(self) -> str:
        return "Repeated division by 2, prepending each remainder"

    @property
    def solution(self) -> str:
        return "solution2"

    def render(self, value: int) -> str:
        # The loop body never runs for zero, which would leave an empty string
        if value == 0:
            return "0"

        digits = ""
        while value > 0:
            digits = str(value % 2) + digits
            value //= 2
        return digits
