"""
Tests for message resolution and placeholder substitution.
"""

from modules.validation import ErrorFormatter, NullMessageResource
from modules.validation.formatter import message_identifier


def test_rule_message_for_predicate_wins(formatter):
    message = formatter.format(
        "minLength", "username", ["3"],
        {"minLength": "custom", "username": "field message"},
    )

    assert message == "custom"


def test_rule_message_lowercase_predicate_key(formatter):
    assert formatter.format("minLength", "username", ["3"], {"minlength": "lower"}) == "lower"


def test_rule_message_for_field(formatter):
    message = formatter.format("required", "username", [], {"username": "Give us :attribute"})

    assert message == "Give us username"


def test_rule_message_single_string_applies_to_any_predicate(formatter):
    assert formatter.format("email", "contact", [], "Bad :attribute") == "Bad contact"
    assert formatter.format("required", "contact", [], "Bad :attribute") == "Bad contact"


def test_unmatched_rule_mapping_falls_through_to_registry(formatter):
    message = formatter.format("required", "username", [], {"other": "unused"})

    assert message == "username is required"


def test_empty_rule_message_falls_through(formatter):
    assert formatter.format("required", "username", [], {"required": ""}) == "username is required"
    assert formatter.format("required", "username", [], "") == "username is required"


def test_registry_field_message_beats_predicate_message():
    formatter = ErrorFormatter({"username": "Username is invalid"})

    assert formatter.format("required", "username") == "Username is invalid"


def test_registry_predicate_message(formatter):
    assert formatter.format("minLength", "username", ["3"]) == "username should be more than 3"


def test_registry_messages_are_read_live():
    messages = {}
    formatter = ErrorFormatter(messages)
    messages["required"] = "Fill in :attribute"

    assert formatter.format("required", "name") == "Fill in name"


def test_language_line_fallback(formatter, message_resource):
    message = formatter.format("numeric", "age")

    assert message == "age must be a number"
    assert message_resource.loaded == ["validation"]


def test_missing_language_line_uses_identifier(formatter):
    assert formatter.format("alphaNumeric", "code") == "IS_ALPHANUMERIC"


def test_no_resource_uses_identifier():
    assert ErrorFormatter({}, defaults={}).format("minLength", "name", ["3"]) == "IS_MINLENGTH"
    assert ErrorFormatter({}, NullMessageResource()).format("date", "dob") == "IS_DATE"


def test_params_placeholder_needs_params(formatter):
    assert formatter.format("listed", "color", []) == "color not listed in :params"
    assert formatter.format("listed", "color", ["red", "blue"]) == "color not listed in red,blue"


def test_label_placeholder(formatter):
    message = formatter.format("required", "dob", [], ":label (:attribute) is missing", label="Date of birth")

    assert message == "Date of birth (dob) is missing"


def test_positional_arguments(formatter):
    message = formatter.format(
        "minLength", "username", ["3"],
        "'{0}' is shorter than {1} characters {5}",
        values=["ab"],
    )

    assert message == "'ab' is shorter than 3 characters {5}"


def test_other_braces_are_untouched(formatter):
    assert formatter.format("required", "f", [], "{name} {} :attribute") == "{name} {} f"


def test_message_identifier():
    assert message_identifier("minLength") == "IS_MINLENGTH"
    assert message_identifier("listed") == "IS_LISTED"
    assert message_identifier("alpha_numeric") == "IS_ALPHANUMERIC"


def test_default_messages_are_not_field_messages(formatter):
    # a field named like a predicate still gets the failed predicate's message
    assert formatter.format("required", "email") == "email is required"
    assert formatter.format("email", "required") == "required not a valid email format"


def test_registry_predicate_message_beats_default():
    formatter = ErrorFormatter({"required": "Fill in :attribute"})

    assert formatter.format("required", "name") == "Fill in name"
    assert formatter.format("email", "name") == "name not a valid email format"


def test_params_with_braces_are_not_rewritten(formatter):
    message = formatter.format(
        "regex", "code", ["^a{1}$"], ":attribute must match :params ({0})", values=["b"]
    )

    assert message == "code must match ^a{1}$ (b)"


def test_field_name_with_braces_is_not_rewritten(formatter):
    assert formatter.format("required", "item{0}", [], ":attribute is required", values=["x"]) == "item{0} is required"
