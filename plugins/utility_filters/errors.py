"""Exceptions raised by the utility filters plugin."""


class UtilityFiltersError(RuntimeError):
    """Base class for all errors raised by this plugin."""


class IncompatibleContextError(UtilityFiltersError):
    """A filter was applied where the surrounding content type forbids its output."""


class EncodingError(UtilityFiltersError):
    """The JSON encoder could not serialize the given value."""


class ConfigurationError(UtilityFiltersError):
    """The UTILITY_FILTERS setting is invalid."""
