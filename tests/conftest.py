"""
Shared fixtures for the validation test suite.
"""

from typing import Dict, List, Optional

import pytest

from modules.validation import ErrorFormatter, MessageResource, NullMessageResource, Rules
from modules.validation.core.registry import PREDICATE_REGISTRY


class DictMessageResource(MessageResource):
    """In-memory language lines, records which domains were loaded."""

    def __init__(self, domains: Dict[str, Dict[str, str]]):
        self.domains = domains
        self.loaded: List[str] = []
        self._lines: Dict[str, str] = {}

    def load_domain(self, domain: str) -> None:
        self.loaded.append(domain)
        self._lines.update(self.domains.get(domain, {}))

    def get_line(self, key: str) -> Optional[str]:
        return self._lines.get(key)


@pytest.fixture
def language_lines() -> Dict[str, str]:
    return {
        'IS_NUMERIC': ':attribute must be a number',
        'IS_CUSTOM': ':attribute failed the custom check',
    }


@pytest.fixture
def message_resource(language_lines) -> DictMessageResource:
    return DictMessageResource({'validation': language_lines})


@pytest.fixture
def formatter(message_resource) -> ErrorFormatter:
    return ErrorFormatter({}, message_resource)


@pytest.fixture
def rules(message_resource) -> Rules:
    return Rules(message_resource=message_resource)


@pytest.fixture
def silent_rules() -> Rules:
    return Rules(message_resource=NullMessageResource())


@pytest.fixture
def restore_predicates():
    """Undo predicate registrations made by a test."""
    snapshot = dict(PREDICATE_REGISTRY)
    yield PREDICATE_REGISTRY
    PREDICATE_REGISTRY.clear()
    PREDICATE_REGISTRY.update(snapshot)


@pytest.fixture
def rules_file(tmp_path):
    path = tmp_path / "rules.yaml"
    path.write_text(
        """
global:
  locale: en
messages:
  email: ":attribute needs an @"
forms:
  signup:
    rules:
      - field: username
        label: Username
        rules: required|minLength[3]
        messages:
          minLength: "Pick a longer username"
      - field: email
        label: Email
        rules: required|email
  empty_form: {}
""",
        encoding='utf-8',
    )
    return path
