"""
Format predicates.

Checks on the shape of a single value:
- float, integer, numeric: Number formats (numbers or numeric strings)
- email, url, ip: Network identifiers
- alpha, alphaNumeric: Character classes
- regex: Custom pattern
- date: Date string in a strptime format
"""

import ipaddress
import math
import re
from datetime import datetime
from typing import Any
from urllib.parse import urlparse

from modules.validation.core.exceptions import InvalidRuleParameterError
from modules.validation.core.registry import register_predicate

EMAIL_PATTERN = re.compile(r'^[A-Za-z0-9._%+\-]+@[A-Za-z0-9.\-]+\.[A-Za-z]{2,}$')
INTEGER_PATTERN = re.compile(r'^[+-]?\d+$')
FLOAT_PATTERN = re.compile(r'^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$')

DEFAULT_DATE_FORMAT = '%Y-%m-%d'


@register_predicate("float")
def is_float(value: Any, *params: str) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return math.isfinite(value)
    if isinstance(value, str):
        return bool(FLOAT_PATTERN.match(value.strip()))
    return False


@register_predicate("integer")
def is_integer(value: Any, *params: str) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return value.is_integer()
    if isinstance(value, str):
        return bool(INTEGER_PATTERN.match(value.strip()))
    return False


@register_predicate("numeric")
def is_numeric(value: Any, *params: str) -> bool:
    return is_integer(value) or is_float(value)


@register_predicate("email")
def is_email(value: Any, *params: str) -> bool:
    return isinstance(value, str) and bool(EMAIL_PATTERN.match(value.strip()))


@register_predicate("url")
def is_url(value: Any, *params: str) -> bool:
    """
    Absolute URL with a scheme and host.

    Optional parameters restrict the scheme: url[http,https]
    """
    if not isinstance(value, str):
        return False
    parsed = urlparse(value.strip())
    if not parsed.scheme or not parsed.netloc:
        return False
    return not params or parsed.scheme in params


@register_predicate("ip")
def is_ip(value: Any, version: str = '', *params: str) -> bool:
    """IPv4 or IPv6 address; ip[4] or ip[6] pins the version."""
    try:
        address = ipaddress.ip_address(str(value).strip())
    except ValueError:
        return False

    if version.strip() in ('4', '6'):
        return address.version == int(version)
    return True


@register_predicate("alpha")
def is_alpha(value: Any, *params: str) -> bool:
    return isinstance(value, str) and value.isalpha()


@register_predicate("alphaNumeric")
def is_alpha_numeric(value: Any, *params: str) -> bool:
    return isinstance(value, (str, int)) and not isinstance(value, bool) and str(value).isalnum()


@register_predicate("regex")
def is_regex(value: Any, *pattern_parts: str) -> bool:
    """
    Value matches the whole pattern.

    The parser splits parameters on commas, so they are joined back:
    regex[^\\d{1,3}$] keeps its quantifier.
    """
    pattern = ','.join(pattern_parts)
    try:
        compiled = re.compile(pattern)
    except re.error:
        raise InvalidRuleParameterError('regex', pattern, "a valid regular expression")

    return value is not None and bool(compiled.fullmatch(str(value)))


@register_predicate("date")
def is_date(value: Any, *format_parts: str) -> bool:
    date_format = ','.join(format_parts) or DEFAULT_DATE_FORMAT
    if not isinstance(value, str):
        return False
    try:
        datetime.strptime(value.strip(), date_format)
    except ValueError:
        return False
    return True
