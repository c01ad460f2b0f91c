"""
DatabaseError - Raised when the storage engine fails.
Maps to: gRPC INTERNAL (details are logged, never returned to the caller)
"""


class DatabaseError(Exception):
    """Storage failure with the operation that was running."""

    def __init__(self, message: str, operation: str = "unknown"):
        super().__init__(message)
        self.message = message
        self.operation = operation
