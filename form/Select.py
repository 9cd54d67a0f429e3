from typing import Any, Self

from bootstrap_form.form.Element import Element


class Select(Element):
    default_attributes = {"type": "select"}

    def __init__(self, name: str | None = None, options: dict | None = None):
        self.value_options: list | dict = []
        self.empty_option: str | None = None
        self.use_hidden_element = False
        self.unselected_value = ""
        super().__init__(name, options)

    def set_options(self, options: dict) -> Self:
        super().set_options(options)
        if "value_options" in options:
            self.set_value_options(options["value_options"])
        if "options" in options:
            self.set_value_options(options["options"])
        if "empty_option" in options:
            self.set_empty_option(options["empty_option"])
        if "use_hidden_element" in options:
            self.set_use_hidden_element(options["use_hidden_element"])
        if "unselected_value" in options:
            self.set_unselected_value(options["unselected_value"])
        return self

    def set_value_options(self, value_options: list | dict) -> Self:
        self.value_options = value_options
        return self

    def get_value_options(self) -> list | dict:
        return self.value_options

    def set_empty_option(self, empty_option: str | None) -> Self:
        self.empty_option = empty_option
        return self

    def get_empty_option(self) -> str | None:
        return self.empty_option

    def set_use_hidden_element(self, use_hidden_element: bool) -> Self:
        self.use_hidden_element = bool(use_hidden_element)
        return self

    def use_hidden(self) -> bool:
        return self.use_hidden_element

    def set_unselected_value(self, value: Any) -> Self:
        self.unselected_value = value
        return self

    def get_unselected_value(self) -> Any:
        return self.unselected_value
