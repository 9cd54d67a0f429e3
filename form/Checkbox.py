from typing import Any, Self

from bootstrap_form.form.Element import Element


class Checkbox(Element):
    default_attributes = {"type": "checkbox"}

    def __init__(self, name: str | None = None, options: dict | None = None):
        self.use_hidden_element = True
        self.checked_value = "1"
        self.unchecked_value = "0"
        self.checked = False
        super().__init__(name, options)

    def set_options(self, options: dict) -> Self:
        super().set_options(options)
        if "use_hidden_element" in options:
            self.set_use_hidden_element(options["use_hidden_element"])
        if "checked_value" in options:
            self.set_checked_value(options["checked_value"])
        if "unchecked_value" in options:
            self.set_unchecked_value(options["unchecked_value"])
        return self

    def set_use_hidden_element(self, use_hidden_element: bool) -> Self:
        self.use_hidden_element = bool(use_hidden_element)
        return self

    def use_hidden(self) -> bool:
        return self.use_hidden_element

    def set_checked_value(self, value: str) -> Self:
        self.checked_value = value
        return self

    def get_checked_value(self) -> str:
        return self.checked_value

    def set_unchecked_value(self, value: str) -> Self:
        self.unchecked_value = value
        return self

    def get_unchecked_value(self) -> str:
        return self.unchecked_value

    def set_checked(self, checked: bool = True) -> Self:
        self.checked = bool(checked)
        return self

    def is_checked(self) -> bool:
        return self.checked

    def set_value(self, value: Any) -> Self:
        if isinstance(value, bool):
            self.checked = value
        else:
            self.checked = value is not None and str(value) == str(self.checked_value)
        return self

    def get_value(self) -> Any:
        return self.checked_value if self.checked else self.unchecked_value


class MultiCheckbox(Checkbox):
    default_attributes = {"type": "multi_checkbox"}

    def __init__(self, name: str | None = None, options: dict | None = None):
        self.value_options: list | dict = []
        super().__init__(name)
        self.use_hidden_element = False
        self.unchecked_value = ""
        if options:
            self.set_options(options)

    def set_options(self, options: dict) -> Self:
        super().set_options(options)
        if "value_options" in options:
            self.set_value_options(options["value_options"])
        if "options" in options:
            self.set_value_options(options["options"])
        return self

    def set_value_options(self, value_options: list | dict) -> Self:
        self.value_options = value_options
        return self

    def get_value_options(self) -> list | dict:
        return self.value_options

    def set_value(self, value: Any) -> Self:
        self.value = value
        return self

    def get_value(self) -> Any:
        return self.value


class Radio(MultiCheckbox):
    default_attributes = {"type": "radio"}
