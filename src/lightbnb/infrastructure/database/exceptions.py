"""
Exception hierarchy for the LightBnB data-access layer.

Builder errors (InvalidInputError) are raised before any round trip and always
propagate. Store errors are wrapped in StoreError only when the repository runs
with the "raise" policy; under the default "log" policy they are logged and the
accessor resolves to None.
"""


class LightBnbError(Exception):
    """Base class for all data-access errors."""


class InvalidInputError(LightBnbError, ValueError):
    """Raised when a query cannot be compiled from the given input."""


class StoreError(LightBnbError):
    """Raised when the database rejects or fails to run a statement."""

    def __init__(self, operation: str, message: str):
        super().__init__(f"{operation} failed: {message}")
        self.operation = operation
        self.message = message
