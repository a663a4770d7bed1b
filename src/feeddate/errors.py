"""Errors raised at the call boundary.

Bad date content never raises: it resolves to ``None`` or is skipped.
Only arguments of the wrong shape altogether abort a call.
"""
from __future__ import annotations


class BoundaryError(TypeError):
    """An argument cannot be marshalled into the shape an operation needs."""

    def __init__(
        self,
        operation: str,
        argument: str,
        value: object,
        expected: str = "a number",
    ) -> None:
        self.operation = operation
        self.argument = argument
        self.value = value
        super().__init__(
            f"{operation}: {argument} must be {expected}, got {type(value).__name__}"
        )
