"""Custom exception types raised by the wema configuration and CLI layers."""

__all__ = [
    "WemaValidationError",
    "InvalidParameterError",
    "InvalidConfigError",
    "InvalidWindowSizeError",
    "InvalidSmoothingError",
]


class WemaValidationError(ValueError):
    """Base class for all wema validation errors."""
    pass


class InvalidParameterError(WemaValidationError):
    """Raised when a configuration parameter is unknown or malformed."""
    pass


class InvalidConfigError(WemaValidationError):
    """Raised when a configuration document or section is not a mapping."""
    pass


class InvalidWindowSizeError(WemaValidationError):
    """Raised when a window size is not a positive integer."""
    pass


class InvalidSmoothingError(WemaValidationError):
    """Raised when a smoothing coefficient is not a finite number."""
    pass
