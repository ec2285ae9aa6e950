"""Recursive strategy - assembles digits while the call stack unwinds."""

from .base import BinaryOperation


def _to_binary(number: int) -> str:
    """Binary digits of a positive integer; empty string for zero."""
    if number == 0:
        return ""
    return _to_binary(number // 2) + str(number % 2)


class RecursiveOperation(BinaryOperation):
    """Recurse on the higher-order bits, then append the lowest bit."""

    @property
    def name(self) -> str:
        return "recursive"

    @property
    def description(self) -> str:
        return "Recursion on value // 2, appending value % 2 on return"

    @property
    def solution(self) -> str:
        return "solution3"

    def render(self, value: int) -> str:
        # The helper's base case yields "" so zero is answered here
        if value == 0:
            return "0"
        return _to_binary(value)
