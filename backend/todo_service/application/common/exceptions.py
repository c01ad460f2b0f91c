"""
Application errors.

AppValidationError   - request rejected by registered validators (envelope code 400)
ConfigurationError   - wiring or settings are wrong; fatal at startup
HandlerNotRegisteredError - no handler for a request type (internal error)
"""

from typing import Iterable


class AppValidationError(Exception):
    """Raised by the dispatcher when one or more validators fail."""

    def __init__(self, errors: Iterable[str]):
        self.errors = list(errors)
        super().__init__("One or more validation errors occurred.")


class ConfigurationError(Exception):
    """Raised when the service is misconfigured."""


class HandlerNotRegisteredError(ConfigurationError):
    def __init__(self, request_type: type):
        self.request_type = request_type
        super().__init__(f"No handler registered for {request_type.__name__}")
