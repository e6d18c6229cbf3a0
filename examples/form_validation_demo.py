#!/usr/bin/env python3
"""
Form Validation Demo.

Demonstrates the declarative rule flow:
1. Registering rules in code and from YAML
2. Running a validation pass and reading the messages
3. Message overrides and language lines

Usage:
    python examples/form_validation_demo.py
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from modules.validation import ConfigurationError, Rules, RuleSetLoader, YamlMessageResource
from shared.utils.logger import setup_logger

logger = setup_logger(__name__)

RULES_PATH = Path(__file__).parent.parent / "config" / "validation" / "rules.yaml"


def demo_inline_rules():
    """Rules registered in code."""
    logger.info("=" * 80)
    logger.info("INLINE RULES DEMO")
    logger.info("=" * 80)

    rules = Rules({
        "username": "jo",
        "email": "jo-at-example",
        "color": "pink",
    })
    rules.add_rule("username", "Username", "required|minLength[3]")
    rules.add_rule("email", "Email", "required|email", {"email": "Please enter a real email address"})
    rules.add_rule("color", "Color", "listed[red, green, blue]")

    if rules.validate():
        logger.info("✓ All fields passed")
    else:
        for error in rules.get_errors():
            logger.info(f"  ✗ {error}")


def demo_config_rules():
    """Rules loaded from config/validation/rules.yaml, Indonesian language lines."""
    logger.info("=" * 80)
    logger.info("CONFIG RULES DEMO")
    logger.info("=" * 80)

    rules = Rules.from_config(
        "signup",
        {"username": "a!", "email": "", "age": "9", "plan": "gold"},
        loader=RuleSetLoader(str(RULES_PATH)),
        message_resource=YamlMessageResource(locale="id"),
    )

    rules.validate()
    for error in rules.get_errors():
        logger.info(f"  ✗ {error}")


def demo_configuration_error():
    """A rule for a field that is not in the source aborts the pass."""
    logger.info("=" * 80)
    logger.info("CONFIGURATION ERROR DEMO")
    logger.info("=" * 80)

    rules = Rules({"username": "johnny"})
    rules.add_rule("password", "Password", "required")

    try:
        rules.validate()
    except ConfigurationError as e:
        logger.info(f"  Validation could not run: {e}")


if __name__ == "__main__":
    demo_inline_rules()
    demo_config_rules()
    demo_configuration_error()
