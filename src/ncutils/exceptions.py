"""
Custom exceptions for ncutils
"""


class NCUtilsError(Exception):
    """Base exception for ncutils errors"""
    pass


class ValidationError(NCUtilsError):
    """Raised when an argument fails validation"""
    pass


class InvalidBlockSizeError(ValidationError, ValueError):
    """Raised when a copy block size is not a positive integer"""
    pass


class DirectoryUnavailableError(NCUtilsError):
    """Raised when a private directory cannot be created or is occupied"""

    def __init__(self, path, reason: str) -> None:
        super().__init__(f"Private directory unavailable: {path} ({reason})")
        self.path = path
        self.reason = reason
