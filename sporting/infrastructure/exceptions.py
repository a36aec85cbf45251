"""
Custom exceptions for the Infrastructure layer.
"""


class InfrastructureError(Exception):
    """Base class for exceptions in the infrastructure layer."""
    pass


class PersistenceError(InfrastructureError):
    """A database operation failed and was rolled back."""

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} failed: {cause}")
