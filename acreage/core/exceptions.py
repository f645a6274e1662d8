"""Custom exception hierarchy for the loop search."""


class AcreageError(Exception):
    """Base exception for search failures."""


class LoopNotClosedError(AcreageError):
    """Raised when the scanline pass cannot account for every grid cell."""


class SearchInvariantError(AcreageError):
    """Raised when the place/unplace protocol is broken; the search cannot continue."""


class ValidationError(AcreageError):
    """Raised when a harvested grid fails an integrity check."""
