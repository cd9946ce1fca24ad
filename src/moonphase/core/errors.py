class MoonPhaseError(Exception):
    """Base error."""

class NaiveDatetimeError(MoonPhaseError, ValueError):
    """Raised when a datetime without tzinfo is passed to a time adapter."""

class DependencyUnavailableError(MoonPhaseError, RuntimeError):
    """Raised when an optional dependency (e.g. numpy) is not installed."""
