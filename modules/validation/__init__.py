"""
Validation module.

Declarative field validation for form and API payloads.

Main components:
- Rules: Validation session (rule registry + runner)
- ErrorFormatter: Message resolution and placeholder substitution
- MessageResource: Language line lookup
- Built-in predicates: field and format predicates

Usage:
    from modules.validation import Rules

    rules = Rules({"username": "jo"})
    rules.add_rule("username", "Username", "required|minLength[3]")

    if not rules.validate():
        for error in rules.get_errors():
            print(f"Error: {error}")
"""

from modules.validation.engine import Rules, normalize_values
from modules.validation.formatter import ErrorFormatter
from modules.validation.language import MessageResource, NullMessageResource, YamlMessageResource
from modules.validation.core.base import DEFAULT_MESSAGES, FieldRule, RuleToken, RunnerState
from modules.validation.core.config_loader import RuleSetLoader
from modules.validation.core.exceptions import (
    ConfigurationError,
    FieldNotInSourceError,
    InvalidRuleDescriptorError,
    InvalidRuleParameterError,
    MissingSourceError,
    UnknownPredicateError,
    ValidationException,
)
from modules.validation.core.parser import parse_rules
from modules.validation.core.registry import register_predicate, PREDICATE_REGISTRY

__all__ = [
    'Rules',
    'normalize_values',
    'ErrorFormatter',
    'MessageResource',
    'NullMessageResource',
    'YamlMessageResource',
    'DEFAULT_MESSAGES',
    'FieldRule',
    'RuleToken',
    'RunnerState',
    'RuleSetLoader',
    'ConfigurationError',
    'FieldNotInSourceError',
    'InvalidRuleDescriptorError',
    'InvalidRuleParameterError',
    'MissingSourceError',
    'UnknownPredicateError',
    'ValidationException',
    'parse_rules',
    'register_predicate',
    'PREDICATE_REGISTRY',
]
