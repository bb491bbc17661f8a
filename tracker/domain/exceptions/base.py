"""
DomainError - Common base for every error the tracker reports to callers.
"""


class DomainError(Exception):
    """Base class for classified, caller-facing errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
