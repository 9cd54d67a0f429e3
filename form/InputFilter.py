from typing import Any, Iterator, Self

from bootstrap_form.form.Exceptions import InvalidArgumentError
from bootstrap_form.form.Validation import ValidationRule, rule_from_spec

IS_EMPTY_MESSAGE = "Value is required and can't be empty"


class Input:
    def __init__(self, name: str, required: bool = True, validators: list | None = None):
        self.name = name
        self.required = required
        self.validators: list[ValidationRule] = [rule_from_spec(rule) for rule in validators or []]
        self.messages: dict[str, str] = {}

    def get_name(self) -> str:
        return self.name

    def set_required(self, required: bool = True) -> Self:
        self.required = bool(required)
        return self

    def is_required(self) -> bool:
        return self.required

    def add_validator(self, rule: ValidationRule | dict) -> Self:
        self.validators.append(rule_from_spec(rule))
        return self

    def is_valid(self, value: Any) -> bool:
        self.messages = {}
        if value is None or value == "" or value == []:
            if self.required:
                self.messages["isEmpty"] = IS_EMPTY_MESSAGE
                return False
            return True

        for rule in self.validators:
            error = rule.validate(value)
            if error:
                self.messages[rule.name] = error
        return not self.messages

    def get_messages(self) -> dict[str, str]:
        return self.messages


class InputFilter:
    """Named inputs and nested filters; nested filters mirror fieldsets."""

    def __init__(self):
        self.inputs: dict[str, "Input | InputFilter"] = {}
        self.data: dict = {}
        self.invalid: dict[str, "Input | InputFilter"] = {}

    @classmethod
    def from_spec(cls, spec: dict) -> "InputFilter":
        """
        ``{"email": {"required": True, "validators": [...]}, "address": {"type": "input_filter", "street": {...}}}``
        """
        input_filter = cls()
        for name, item in spec.items():
            match item:
                case Input() | InputFilter():
                    input_filter.add(item, name)
                case {"type": "input_filter", **children}:
                    input_filter.add(cls.from_spec(children), name)
                case dict():
                    input_filter.add(
                        Input(name, required=item.get("required", True), validators=item.get("validators")),
                        name,
                    )
                case _:
                    raise InvalidArgumentError(f"Invalid input filter specification for {name!r}: {item!r}")
        return input_filter

    def add(self, item: "Input | InputFilter", name: str | None = None) -> Self:
        if name is None:
            if not isinstance(item, Input):
                raise InvalidArgumentError("InputFilter.add requires a name when adding a nested input filter")
            name = item.get_name()
        self.inputs[name] = item
        return self

    def has(self, name: str) -> bool:
        return name in self.inputs

    def get(self, name: str) -> "Input | InputFilter":
        if name not in self.inputs:
            raise InvalidArgumentError(f"InputFilter.get: no input found matching {name!r}")
        return self.inputs[name]

    def remove(self, name: str) -> Self:
        self.inputs.pop(name, None)
        return self

    def __iter__(self) -> Iterator[str]:
        return iter(self.inputs)

    def __len__(self) -> int:
        return len(self.inputs)

    def set_data(self, data: dict | None) -> Self:
        self.data = dict(data or {})
        return self

    def is_valid(self) -> bool:
        self.invalid = {}
        for name, item in self.inputs.items():
            value = self.data.get(name)
            if isinstance(item, InputFilter):
                item.set_data(value if isinstance(value, dict) else {})
                valid = item.is_valid()
            else:
                valid = item.is_valid(value)
            if not valid:
                self.invalid[name] = item
        return not self.invalid

    def get_messages(self) -> dict:
        return {name: item.get_messages() for name, item in self.invalid.items()}

    def get_values(self) -> dict:
        return dict(self.data)
