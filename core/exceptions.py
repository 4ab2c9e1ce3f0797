"""Custom exceptions for the application."""
from typing import Optional


class MarketplaceError(Exception):
    """Base exception for marketplace errors."""
    pass


class AuthenticationError(MarketplaceError):
    """Sign-in or sign-up rejected by the auth backend."""
    pass


class BackendError(MarketplaceError):
    """Error reported by the data backend."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code


class UniqueViolationError(BackendError):
    """Insert rejected by a uniqueness constraint."""
    pass


class SessionExpiredError(BackendError):
    """Backend rejected the stored access token as expired or invalid."""
    pass


class ValidationError(MarketplaceError):
    """Error validating submitted form data."""

    def __init__(self, message: str, title: str = "Invalid input"):
        super().__init__(message)
        self.message = message
        self.title = title


class ConfigurationError(MarketplaceError):
    """Error in application configuration."""
    pass
