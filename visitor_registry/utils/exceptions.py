"""Custom exception classes."""


class ValidationError(ValueError):
    """Raised when a visitor field fails validation."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class InvalidArgumentError(ValueError):
    """Raised when a public operation receives an unusable argument."""
    pass


class FileWriteError(Exception):
    """Raised when unable to write a visitor file."""
    pass


class FileReadError(Exception):
    """Raised when unable to read or parse a visitor file."""
    pass
