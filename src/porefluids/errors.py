__all__ = [
    "PorefluidsError",
    "ValidationError",
    "PhaseIndexError",
    "ComponentIndexError",
    "ComputationError",
    "TabulationError",
]


class PorefluidsError(Exception):
    """Base class for all porefluids-related errors."""

    pass


class ValidationError(PorefluidsError, ValueError):
    """Raised when input data or configuration fails validation checks."""

    pass


class PhaseIndexError(ValidationError, IndexError):
    """Raised when a phase index is outside `[0, num_phases)`."""

    pass


class ComponentIndexError(ValidationError, IndexError):
    """Raised when a component index is outside `[0, num_components)`."""

    pass


class ComputationError(PorefluidsError):
    """Raised when an external correlation backend fails to evaluate a property."""

    pass


class TabulationError(PorefluidsError):
    """Raised when a tabulated component is queried before its tables are built."""

    pass
