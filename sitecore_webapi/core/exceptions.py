"""
Custom exceptions for Sitecore Item Web API operations.

Configuration and programming errors are raised from these classes.
Operational failures (network, HTTP status, deserialization) are never
raised to callers; they are recorded on the response object instead.
"""
from typing import Optional, Any


class SitecoreException(Exception):
    """Base exception for all Sitecore client errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(SitecoreException):
    """Exception raised when a data context is configured incorrectly."""
    pass


class InvalidArgumentError(SitecoreException, ValueError):
    """Exception raised for invalid or missing arguments."""

    def __init__(self, message: str, argument: Optional[str] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            argument: Name of the offending argument (if known)
        """
        self.argument = argument
        super().__init__(message)


class InvalidOperationError(SitecoreException, RuntimeError):
    """Exception raised when an operation is not valid for the current context."""
    pass


class InvalidHostNameError(ConfigurationError, InvalidArgumentError):
    """Exception raised when a host name is empty or malformed."""

    def __init__(self, host_name: Any) -> None:
        self.host_name = host_name
        InvalidArgumentError.__init__(
            self,
            "host_name cannot be None, empty or an unrecognized type",
            argument='host_name'
        )


class InvalidCredentialsError(ConfigurationError, InvalidArgumentError):
    """Exception raised when credentials fail validation."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        InvalidArgumentError.__init__(self, reason, argument='credentials')


class EncryptionConflictError(ConfigurationError, InvalidOperationError):
    """Exception raised when encrypted headers are requested over TLS."""

    def __init__(self) -> None:
        super().__init__(
            "If you use an SSL connection, the credentials must not be encrypted. "
            "The server takes care of header encryption."
        )


class PublicKeyError(SitecoreException):
    """Exception raised when the server does not provide a usable public key."""
    pass


class ResponseParseError(SitecoreException):
    """
    Exception raised when a response body cannot be deserialized.

    Keeps the HTTP response so its status can be reported on the result.
    """

    def __init__(self, message: str, response: Any = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            response: The ``requests.Response`` whose body failed to parse
        """
        self.response = response
        super().__init__(message)
