"""
Service-level exceptions.

This module contains exceptions that can be raised by the cycle engine
services.
"""

class CycleEngineError(Exception):
    """Base exception for cycle engine errors."""
    pass

class EmptyPhaseRangesError(CycleEngineError):
    """Raised when a day lookup is attempted against no phase ranges."""
    pass

class CycleNotStartedError(CycleEngineError):
    """Raised when a date calculation needs a last period start that is missing."""
    pass

class ContentCatalogError(CycleEngineError):
    """Raised when the daily content data file cannot be loaded or validated."""
    pass
