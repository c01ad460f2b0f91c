"""
DomainValidationError - Raised when an entity invariant is violated.
Maps to: status envelope code 400 / gRPC INVALID_ARGUMENT
"""

from typing import Iterable, Union


class DomainValidationError(Exception):
    """Exception raised for domain validation errors."""

    def __init__(self, errors: Union[str, Iterable[str]]):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        message = (
            self.errors[0]
            if len(self.errors) == 1
            else "One or more domain validation errors occurred."
        )
        super().__init__(message)
        self.message = message
