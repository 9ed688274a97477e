"""
Elementsnatch Exceptions.

Centralized exception hierarchy for the application.
"""

class SnatchError(Exception):
    """Base exception for all Elementsnatch errors."""
    pass


class ConfigurationError(SnatchError):
    """Raised when options are invalid."""
    pass


class DocumentError(SnatchError):
    """Raised when a document cannot be loaded or a selector matches nothing."""
    pass


class ClipboardError(SnatchError):
    """Raised when the clipboard cannot be written and the caller asked to fail loudly."""
    pass
