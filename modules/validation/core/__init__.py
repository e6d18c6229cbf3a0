"""
Validation core module.

Contains data models, exceptions, the rule parser and the predicate registry.
"""

from modules.validation.core.base import DEFAULT_MESSAGES, FieldRule, RuleToken, RunnerState
from modules.validation.core.exceptions import (
    ConfigurationError,
    FieldNotInSourceError,
    InvalidRuleDescriptorError,
    InvalidRuleParameterError,
    MissingSourceError,
    UnknownPredicateError,
    ValidationException,
)
from modules.validation.core.parser import parse_rule, parse_rules
from modules.validation.core.registry import PREDICATE_REGISTRY, register_predicate, get_predicate

__all__ = [
    'DEFAULT_MESSAGES',
    'FieldRule',
    'RuleToken',
    'RunnerState',
    'ConfigurationError',
    'FieldNotInSourceError',
    'InvalidRuleDescriptorError',
    'InvalidRuleParameterError',
    'MissingSourceError',
    'UnknownPredicateError',
    'ValidationException',
    'parse_rule',
    'parse_rules',
    'PREDICATE_REGISTRY',
    'register_predicate',
    'get_predicate',
]
