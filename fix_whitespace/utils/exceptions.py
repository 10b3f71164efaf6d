"""Custom exception classes."""


class TemplateContractError(ValueError):
    """Raised when segments and values don't satisfy len(segments) == len(values) + 1."""
    pass


class ValueConversionError(Exception):
    """Raised when a truthy value cannot be converted to a string."""
    pass
