class FilterError(ValueError):
    """Base class for failures raised by a single filter invocation."""


class InvalidConventions(FilterError):
    """Locale conventions are missing fields or hold out-of-range values."""


class InvalidAmount(FilterError):
    """The amount is not a finite number."""
