import re
from typing import Callable, Optional

from bootstrap_form.form.Exceptions import InvalidArgumentError


class ValidationRule:
    def __init__(self, validation_func: Callable, error_message: str, name: str = "callbackValue"):
        self.validation_func = validation_func
        self.error_message = error_message
        self.name = name

    def validate(self, value) -> Optional[str]:
        """Validate the value. Return error message if validation fails, otherwise None."""
        if not self.validation_func(value):
            return self.error_message
        return None


def required_rule(error_message="Value is required and can't be empty") -> ValidationRule:
    return ValidationRule(lambda v: v is not None and v != "" and v != [], error_message, "isEmpty")


def min_length(length: int, error_message=None) -> ValidationRule:
    error_message = error_message or f"The input is less than {length} characters long"
    return ValidationRule(lambda v: v is not None and len(v) >= length, error_message, "stringLengthTooShort")


def max_length(length: int, error_message=None) -> ValidationRule:
    error_message = error_message or f"The input is more than {length} characters long"
    return ValidationRule(lambda v: v is not None and len(v) <= length, error_message, "stringLengthTooLong")


def pattern(regex: str, error_message=None) -> ValidationRule:
    error_message = error_message or f"The input does not match against pattern '{regex}'"
    return ValidationRule(lambda v: v is not None and re.match(regex, str(v)) is not None, error_message, "regexNotMatch")


RULES = {
    "required": required_rule,
    "min_length": min_length,
    "max_length": max_length,
    "pattern": pattern,
}


def rule_from_spec(spec: dict | ValidationRule) -> ValidationRule:
    """Build a rule from ``{"name": "min_length", "options": {"length": 3}}``."""
    if isinstance(spec, ValidationRule):
        return spec
    factory = RULES.get(spec.get("name"))
    if factory is None:
        raise InvalidArgumentError(f"Unknown validation rule {spec.get('name')!r}; expected one of {', '.join(RULES)}")
    return factory(**spec.get("options", {}))
