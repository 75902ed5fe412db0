from typing import Optional


class InternalException(Exception):
    """
    Raised when an internal error occurs.

    This is raised by default to the frontend when
    an unexpected error occurs while replaying history.
    """
    def __init__(self, message: str = "An internal error occurred."):
        super().__init__(message)


class DomainException(Exception):
    """Base class for domain-specific exceptions."""
    def __init__(self, message: str, log_message: Optional[str] = None):
        super().__init__(message)
        self.log_message = log_message  # In case devs want to include extra log info.


class UnknownCommandError(DomainException):
    """Raised when no handler is registered under the invoked command name."""

    pass


class InvalidCommandNameError(DomainException):
    """Raised when a command is registered under an empty or non-string name."""

    pass


class InvalidAutogroupDelayError(DomainException):
    """Raised when an auto-group delay is negative or not a number."""

    pass


class InvalidTriggerNameError(DomainException):
    """Raised when an undo/redo trigger name is configured as empty."""

    pass
