"""
Base data models for the validation system.

This module provides the shared types used by the parser, registry,
formatter and engine:
- RuleToken: One parsed segment of a rule spec
- FieldRule: Rules registered for a single field
- RunnerState: Lifecycle of a validation pass
- DEFAULT_MESSAGES: Built-in message templates keyed by predicate name
"""

import re
from dataclasses import dataclass, field as dataclass_field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union


# Message templates keyed by predicate name.
# Placeholders: :attribute, :label, :params and positional {0}, {1}, ...
DEFAULT_MESSAGES: Dict[str, str] = {
    'required': ':attribute is required',
    'float': ':attribute data format should be float',
    'email': ':attribute not a valid email format',
    'integer': ':attribute should be an integer',
    'minLength': ':attribute should be more than :params',
    'maxLength': ':attribute should be less than :params',
    'listed': ':attribute not listed in :params',
}

# Per-rule messages: a mapping keyed by predicate or field name, or one string
RuleMessages = Union[Mapping[str, str], str, None]

_WORD_SEPARATORS = re.compile(r'[\s_\-]+')


def studly_case(name: str) -> str:
    """
    Convert a rule name to StudlyCase.

    Example:
        studly_case("min_length")  # "MinLength"
        studly_case("minLength")   # "MinLength"
    """
    words = _WORD_SEPARATORS.split(name.strip())
    return ''.join(word[:1].upper() + word[1:] for word in words if word)


def canonical_name(name: str) -> str:
    """Canonical lower-camel predicate name, e.g. "min-length" -> "minLength"."""
    studly = studly_case(name)
    return studly[:1].lower() + studly[1:]


class RunnerState(str, Enum):
    """Lifecycle states of a validation pass"""
    IDLE = "idle"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"


@dataclass(frozen=True)
class RuleToken:
    """
    One parsed segment of a rule spec.

    "minLength[3]" -> RuleToken(name="minLength", params=("3",))
    """
    name: str
    params: Tuple[str, ...] = ()

    @property
    def message_key(self) -> str:
        """Key used for predicate lookup and message resolution"""
        return canonical_name(self.name)

    @property
    def method_name(self) -> str:
        """Dispatch name of the predicate, e.g. "isMinLength" """
        return 'is' + studly_case(self.name)


@dataclass
class FieldRule:
    """
    Rules registered for one field.

    The rule spec is kept verbatim and parsed once at registration.
    """
    field: str
    label: str
    rules: str
    messages: RuleMessages = None
    tokens: List[RuleToken] = dataclass_field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a rule descriptor dictionary"""
        messages: Optional[Any] = self.messages
        if isinstance(messages, Mapping):
            messages = dict(messages)
        return {
            'field': self.field,
            'label': self.label,
            'rules': self.rules,
            'messages': messages,
        }
