"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain logic and caught by the presentation
layer, which maps them to the status envelope (code 400).
"""

from todo_service.domain.exceptions.validation_error import DomainValidationError

__all__ = [
    "DomainValidationError",
]
