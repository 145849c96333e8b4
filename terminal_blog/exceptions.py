"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class ContentStoreError(BaseAppError):
    """Exception raised for content store errors."""

    pass


class ContentUnreachableError(ContentStoreError):
    """Exception raised when a remote content operation cannot complete."""

    pass


class NoSuchDirectoryError(BaseAppError):
    """Exception raised when a cd target is not a known directory."""

    def __init__(self, target: str):
        super().__init__(f"No such directory: {target}")
        self.target = target


class SessionError(BaseAppError):
    """Exception raised for terminal session errors."""

    pass


class SessionStateError(SessionError):
    """Exception raised when input is submitted without an open prompt."""

    pass


class SessionNotFoundError(SessionError):
    """Exception raised when a session id is not registered."""

    pass


class PostIndexError(BaseAppError):
    """Exception raised when the post index cannot be built."""

    pass
