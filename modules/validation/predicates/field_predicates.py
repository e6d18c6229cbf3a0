"""
Field predicates.

Presence, length and membership checks:
- required: Value is present and not empty
- minLength / maxLength: String length bounds
- listed: Value is one of the rule parameters
- equals: Value equals the rule parameter
- between: Numeric value within an inclusive range
"""

from typing import Any

from modules.validation.core.exceptions import InvalidRuleParameterError
from modules.validation.core.registry import register_predicate


def _as_text(value: Any) -> str:
    return '' if value is None else str(value)


def _int_param(predicate: str, param: str) -> int:
    try:
        return int(str(param).strip())
    except ValueError:
        raise InvalidRuleParameterError(predicate, param, "an integer")


def _float_param(predicate: str, param: str) -> float:
    try:
        return float(str(param).strip())
    except ValueError:
        raise InvalidRuleParameterError(predicate, param, "a numeric")


@register_predicate("required")
def is_required(value: Any, *params: str) -> bool:
    """
    Value exists and is not empty.

    None, blank strings and empty collections fail.
    """
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ''
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) > 0
    return True


@register_predicate("minLength")
def is_min_length(value: Any, length: str = '0', *params: str) -> bool:
    return len(_as_text(value)) >= _int_param('minLength', length)


@register_predicate("maxLength")
def is_max_length(value: Any, length: str = '0', *params: str) -> bool:
    return len(_as_text(value)) <= _int_param('maxLength', length)


@register_predicate("listed")
def is_listed(value: Any, *allowed: str) -> bool:
    """Value (as text) is one of the listed parameters."""
    return _as_text(value) in allowed


@register_predicate("equals")
def is_equals(value: Any, expected: str = '', *params: str) -> bool:
    return _as_text(value) == expected


@register_predicate("between")
def is_between(value: Any, minimum: str = '0', maximum: str = '0', *params: str) -> bool:
    """Numeric value within [minimum, maximum]. Non-numeric values fail."""
    low = _float_param('between', minimum)
    high = _float_param('between', maximum)

    if isinstance(value, bool) or value is None:
        return False
    try:
        number = float(value)
    except (TypeError, ValueError):
        return False

    return low <= number <= high
