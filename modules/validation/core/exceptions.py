"""
Custom exceptions for the validation module.

Configuration errors are caller mistakes and abort a validation pass.
Failed predicates are never raised; they end up in the error list.
"""

from typing import Optional


class ValidationException(Exception):
    """Base exception for validation module."""
    pass


class ConfigurationError(ValidationException):
    """Exception raised when a validation pass cannot run."""
    pass


class MissingSourceError(ConfigurationError, ValueError):
    """Exception raised when validate() is called with no source values."""

    def __init__(self, message: str = "Validation source values are empty"):
        super().__init__(message)


class FieldNotInSourceError(ConfigurationError, LookupError):
    """Exception raised when a registered field has no source value."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Field '{field}' has rules but is not present in source values")


class UnknownPredicateError(ConfigurationError, LookupError):
    """Exception raised when a rule names a predicate that is not registered."""

    def __init__(self, predicate: str, field: Optional[str] = None):
        self.predicate = predicate
        self.field = field
        message = f"Unknown validation predicate '{predicate}'"
        if field:
            message += f" in rules for field '{field}'"
        super().__init__(message)


class InvalidRuleDescriptorError(ConfigurationError, ValueError):
    """Exception raised when a rule descriptor is missing required keys."""
    pass


class InvalidRuleParameterError(ConfigurationError, ValueError):
    """Exception raised when a rule parameter cannot be used by its predicate."""

    def __init__(self, predicate: str, param: str, expected: str):
        self.predicate = predicate
        self.param = param
        super().__init__(
            f"Predicate '{predicate}' expects {expected} parameter, got '{param}'"
        )
