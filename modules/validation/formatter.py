"""
Error formatter.

Resolves the message for a failed predicate and fills in its placeholders.

Resolution order, first match wins:
1. Rule messages (mapping) keyed by the predicate name
2. Rule messages (mapping) keyed by the field name
3. Rule messages given as a single string
4. Registry message keyed by the field name
5. Registry message keyed by the predicate name, then the built-in default
6. Language line IS_<PREDICATE>, or the identifier itself when missing

Placeholders:
    :attribute  field name
    :label      field label
    :params     rule parameters joined with ','; kept verbatim without parameters
    {0}, {1}..  positional predicate arguments (values, then parameters)
"""

import re
from typing import Any, Mapping, Optional, Sequence, Tuple

from modules.validation.core.base import DEFAULT_MESSAGES, RuleMessages, canonical_name, studly_case
from modules.validation.language import MessageResource, VALIDATION_DOMAIN
from shared.utils.logger import setup_logger

logger = setup_logger(__name__)

_POSITIONAL = re.compile(r'\{(\d+)\}')


def message_identifier(predicate: str) -> str:
    """
    Language key for a predicate.

    Example:
        message_identifier("minLength")  # "IS_MINLENGTH"
    """
    return 'IS_' + studly_case(predicate).upper()


class ErrorFormatter:
    """
    Builds user-facing error messages for failed predicates.

    Usage:
        formatter = ErrorFormatter(messages, resource)
        formatter.format("minLength", "username", ["3"], rule_messages)
    """

    def __init__(
        self,
        messages: Mapping[str, str],
        message_resource: Optional[MessageResource] = None,
        defaults: Mapping[str, str] = DEFAULT_MESSAGES
    ):
        """
        Initialize formatter.

        Args:
            messages: Registry-level messages keyed by field or predicate name.
                      Read on every call, so later overrides apply.
            message_resource: Language line lookup used as last resort
            defaults: Built-in messages keyed by predicate name only
        """
        self.messages = messages
        self.defaults = defaults
        self.message_resource = message_resource

    def format(
        self,
        predicate: str,
        field: str,
        params: Sequence[str] = (),
        rule_messages: RuleMessages = None,
        values: Sequence[Any] = (),
        label: Optional[str] = None
    ) -> str:
        """
        Build the final message for one failed predicate.

        Args:
            predicate: Predicate name as written in the rule spec
            field: Field name
            params: Rule parameters
            rule_messages: Messages registered with the field's rule
            values: Normalized value list passed to the predicate
            label: Field label

        Returns:
            Non-empty message string
        """
        template = self.resolve(predicate, field, rule_messages)

        args: Tuple[Any, ...] = tuple(values) + tuple(params)
        message = _POSITIONAL.sub(lambda m: _positional(m, args), template)

        message = message.replace(':attribute', field)
        message = message.replace(':label', label or field)
        if params:
            message = message.replace(':params', ','.join(params))

        return message

    def resolve(self, predicate: str, field: str, rule_messages: RuleMessages = None) -> str:
        """
        Pick the message template for a failed predicate.

        Returns:
            Template with placeholders still in place
        """
        key = canonical_name(predicate)

        if isinstance(rule_messages, Mapping):
            for candidate in (key, key.lower(), field):
                if rule_messages.get(candidate):
                    return rule_messages[candidate]
        elif isinstance(rule_messages, str) and rule_messages:
            return rule_messages

        for candidate in (field, key):
            if self.messages.get(candidate):
                return self.messages[candidate]

        if self.defaults.get(key):
            return self.defaults[key]

        identifier = message_identifier(predicate)
        if self.message_resource is not None:
            line = self.message_resource.lookup(identifier, VALIDATION_DOMAIN)
            if line:
                return line

        logger.debug(f"No message defined for '{key}', using identifier {identifier}")
        return identifier


def _positional(match: 're.Match[str]', args: Tuple[Any, ...]) -> str:
    index = int(match.group(1))
    if index < len(args):
        return str(args[index])
    return match.group(0)
