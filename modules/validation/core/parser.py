"""
Rule spec parser.

Turns a textual rule chain such as "required|minLength[3]|listed[a, b]"
into an ordered list of RuleToken objects.
"""

import re
from functools import lru_cache
from typing import List, Tuple

from modules.validation.core.base import RuleToken

RULE_SEPARATOR = '|'
PARAM_SEPARATOR = ','

_PARAM_BLOCK = re.compile(r'\[(.*)\]')
_PARAM_SPACING = re.compile(r',[ ]+')


def parse_rule(segment: str) -> RuleToken:
    """
    Parse one rule segment.

    Parameters are kept as literal strings. A segment with an unterminated
    bracket keeps its raw text as the predicate name.

    Args:
        segment: Single rule, e.g. "minLength[3]"

    Returns:
        RuleToken
    """
    segment = segment.strip()
    match = _PARAM_BLOCK.search(segment)

    if not match:
        return RuleToken(name=segment)

    name = _PARAM_BLOCK.sub('', segment, count=1).strip()
    inner = _PARAM_SPACING.sub(PARAM_SEPARATOR, match.group(1))
    params: Tuple[str, ...] = tuple(inner.split(PARAM_SEPARATOR)) if inner else ()

    return RuleToken(name=name, params=params)


@lru_cache(maxsize=512)
def _parse_cached(rule_spec: str) -> Tuple[RuleToken, ...]:
    return tuple(
        parse_rule(segment)
        for segment in rule_spec.split(RULE_SEPARATOR)
        if segment.strip()
    )


def parse_rules(rule_spec: str) -> List[RuleToken]:
    """
    Parse a rule spec into tokens, in declaration order.

    Args:
        rule_spec: Rule chain separated by '|'

    Returns:
        List of RuleToken (empty for an empty spec)

    Example:
        parse_rules("required|email")
        # [RuleToken("required"), RuleToken("email")]
    """
    if not rule_spec:
        return []
    return list(_parse_cached(rule_spec))
