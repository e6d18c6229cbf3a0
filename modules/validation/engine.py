"""
Rules - validation session for request-like input.

Holds the source values and per-field rules, runs every rule against its
field and collects formatted error messages.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from modules.validation.core.base import (
    DEFAULT_MESSAGES,
    FieldRule,
    RuleMessages,
    RuleToken,
    RunnerState,
)
from modules.validation.core.config_loader import RuleSetLoader
from modules.validation.core.exceptions import (
    FieldNotInSourceError,
    InvalidRuleDescriptorError,
    MissingSourceError,
    UnknownPredicateError,
)
from modules.validation.core.parser import parse_rules
from modules.validation.core.registry import get_predicate
from modules.validation.formatter import ErrorFormatter
from modules.validation.language import MessageResource, YamlMessageResource
from shared.utils.logger import setup_logger, log_error

# Import predicates to trigger registration
from modules.validation import predicates  # noqa: F401

logger = setup_logger(__name__)

RuleDescriptor = Union[Mapping[str, Any], FieldRule]


def normalize_values(value: Any) -> List[Any]:
    """
    Build the value list handed to a predicate.

    Lists and tuples are passed element by element, any other value is
    wrapped. An empty sequence becomes [None] so predicates always get
    one value.
    """
    values = list(value) if isinstance(value, (list, tuple)) else [value]
    return values or [None]


class Rules:
    """
    Declarative field validation.

    Each field gets a label and a rule spec such as "required|minLength[3]".
    validate() checks every registered field against the source values and
    returns True when no rule failed. Messages for failed rules are
    available from get_errors().

    Caller mistakes (no source values, a rule for a field missing from the
    source, an unknown predicate) raise ConfigurationError subclasses and
    abort the pass.

    Usage:
        rules = Rules({"username": "jo", "email": "jo@example.com"})
        rules.add_rule("username", "Username", "required|minLength[3]")
        rules.add_rule("email", "Email", "required|email")

        if not rules.validate():
            for error in rules.get_errors():
                print(error)
    """

    def __init__(
        self,
        source: Optional[Mapping[str, Any]] = None,
        message_resource: Optional[MessageResource] = None,
        messages: Optional[Mapping[str, str]] = None
    ):
        """
        Initialize validation session.

        Args:
            source: Values to validate, keyed by field name
            message_resource: Language lines used when no message is defined
                              If None, uses YamlMessageResource with settings
            messages: Extra messages keyed by field or predicate name
        """
        self._rules: Dict[str, FieldRule] = {}
        self._errors: List[str] = []
        self._source: Dict[str, Any] = dict(source) if source else {}

        # Overrides only; DEFAULT_MESSAGES stay keyed by predicate in the formatter
        self._messages: Dict[str, str] = dict(messages) if messages else {}

        self.message_resource = message_resource or YamlMessageResource()
        self.formatter = ErrorFormatter(self._messages, self.message_resource, DEFAULT_MESSAGES)
        self.state = RunnerState.IDLE

    @classmethod
    def from_config(
        cls,
        form_name: str,
        source: Optional[Mapping[str, Any]] = None,
        loader: Optional[RuleSetLoader] = None,
        message_resource: Optional[MessageResource] = None
    ) -> 'Rules':
        """
        Build a session from a form defined in the rules YAML file.

        Args:
            form_name: Form identifier under 'forms'
            source: Values to validate
            loader: Config loader, defaults to settings.VALIDATION_RULES_PATH
            message_resource: Language line lookup
                              If None, uses the global locale of the rules file

        Returns:
            Rules with the form's messages and rules registered
        """
        loader = loader or RuleSetLoader()
        if message_resource is None:
            locale = loader.get_global_settings().get('locale')
            message_resource = YamlMessageResource(locale=locale)

        instance = cls(source, message_resource=message_resource, messages=loader.get_messages())
        instance.add_rules(loader.get_form_rules(form_name))

        logger.info(f"Loaded {len(instance._rules)} field rules for form: {form_name}")
        return instance

    # ------------------------------------------------------------------
    # Source values
    # ------------------------------------------------------------------

    def set_source(self, values: Mapping[str, Any]) -> None:
        """Replace all source values."""
        self._source = dict(values)

    def add_source(self, key: str, value: Any) -> None:
        """Set a single source value."""
        self._source[key] = value

    def get_source(self) -> Dict[str, Any]:
        """Copy of the current source values."""
        return dict(self._source)

    # ------------------------------------------------------------------
    # Rule registration
    # ------------------------------------------------------------------

    def add_rule(
        self,
        field: str,
        label: str,
        rules: str,
        messages: RuleMessages = None
    ) -> None:
        """
        Register rules for a field, replacing any earlier registration.

        Args:
            field: Field name in the source values
            label: Human-readable field name
            rules: Rule spec, e.g. "required|minLength[3]"
            messages: Message per predicate or field name, or one message
                      used for every failed rule of this field
        """
        if field in self._rules:
            logger.warning(f"Rules for field '{field}' are already registered. Replacing them")

        self._rules[field] = FieldRule(
            field=field,
            label=label,
            rules=rules,
            messages=messages,
            tokens=parse_rules(rules),
        )

    def add_rules(self, descriptors: Iterable[RuleDescriptor]) -> None:
        """
        Register several rules.

        Args:
            descriptors: Mappings with 'field', 'rules' and optional
                         'label' and 'messages', or FieldRule objects

        Raises:
            InvalidRuleDescriptorError: If a descriptor lacks 'field' or 'rules'
        """
        for descriptor in descriptors:
            if isinstance(descriptor, FieldRule):
                descriptor = descriptor.to_dict()

            field = descriptor.get('field')
            rules = descriptor.get('rules')
            if not field or rules is None:
                raise InvalidRuleDescriptorError(
                    f"Rule descriptor requires 'field' and 'rules': {dict(descriptor)}"
                )

            self.add_rule(
                field,
                descriptor.get('label') or field,
                rules,
                descriptor.get('messages'),
            )

    def has_rule(self, field: str) -> bool:
        return field in self._rules

    def get_rule(self, field: str) -> Optional[FieldRule]:
        return self._rules.get(field)

    def remove_rule(self, field: str) -> bool:
        """
        Remove the rules of a field.

        Returns:
            True if the field had rules
        """
        return self._rules.pop(field, None) is not None

    def set_message(self, key: str, message: str) -> None:
        """
        Set a registry-level message.

        Args:
            key: Field name or predicate name
            message: Message template
        """
        self._messages[key] = message

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self) -> bool:
        """
        Run all registered rules against the source values.

        Every rule of every field is evaluated; failures accumulate in
        registration order. Errors from a previous call are discarded.

        Returns:
            True if no rule failed

        Raises:
            MissingSourceError: If there are no source values
            FieldNotInSourceError: If a registered field has no source value
            UnknownPredicateError: If a rule names an unregistered predicate
        """
        self._errors = []
        self.state = RunnerState.RUNNING
        logger.info(f"Validating {len(self._rules)} fields")

        try:
            errors = self._run()
        except Exception as e:
            self.state = RunnerState.IDLE
            log_error(logger, e, "Validation aborted")
            raise

        self._errors = errors
        self.state = RunnerState.FAILED if errors else RunnerState.PASSED

        logger.info(f"Validation {self.state.value} with {len(errors)} errors")
        return not errors

    def get_errors(self) -> List[str]:
        """Messages from the last validate() call, in order."""
        return list(self._errors)

    def _run(self) -> List[str]:
        if not self._source:
            raise MissingSourceError()

        errors: List[str] = []

        for field, rule in self._rules.items():
            if field not in self._source:
                raise FieldNotInSourceError(field)

            for token in rule.tokens:
                values = normalize_values(self._source[field])

                if not self._check(token, field, values):
                    message = self.formatter.format(
                        token.name,
                        field,
                        token.params,
                        rule.messages,
                        values=values,
                        label=rule.label,
                    )
                    logger.debug(f"Field '{field}' failed {token.method_name}: {message}")
                    errors.append(message)

        return errors

    def _check(self, token: RuleToken, field: str, values: List[Any]) -> bool:
        predicate = get_predicate(token.name)

        if predicate is None:
            raise UnknownPredicateError(token.name, field)

        return bool(predicate(values, *token.params))
