"""
Core Exceptions

Custom exceptions for the overlay core and its host collaborators.
"""


class OverlayException(Exception):
    """Base exception for overlay errors"""
    pass


class CatalogLookupError(LookupError, OverlayException):
    """
    Raised when a stop is asked for that the static tables don't contain.

    The catalog is fixed and fully enumerable, so this is a data-table
    bug, not something to recover from at runtime.
    """
    pass


class SessionStateError(OverlayException):
    """Raised when a session or host operation is invalid for its current state"""
    pass


class LogSourceError(OverlayException):
    """Raised when the game log directory can't be followed"""
    pass
