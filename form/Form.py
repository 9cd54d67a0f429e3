from typing import Self

from bootstrap_form.form.Exceptions import DomainError
from bootstrap_form.form.Fieldset import Fieldset
from bootstrap_form.form.InputFilter import InputFilter


class Form(Fieldset):
    default_attributes = {"method": "POST"}

    def __init__(self, name: str | None = None, options: dict | None = None):
        self.input_filter: InputFilter | None = None
        self.wrap = False
        self.is_prepared = False
        self.has_validated = False
        self.valid = False
        self.data: dict | None = None
        super().__init__(name, options)

    def set_options(self, options: dict) -> Self:
        super().set_options(options)
        if "wrap_elements" in options:
            self.set_wrap_elements(options["wrap_elements"])
        return self

    def set_wrap_elements(self, flag: bool) -> Self:
        self.wrap = bool(flag)
        return self

    def wrap_elements(self) -> bool:
        return self.wrap

    def set_input_filter(self, input_filter: InputFilter | dict) -> Self:
        if isinstance(input_filter, dict):
            input_filter = InputFilter.from_spec(input_filter)
        self.input_filter = input_filter
        self.has_validated = False
        return self

    def get_input_filter(self) -> InputFilter:
        if self.input_filter is None:
            self.input_filter = InputFilter()
        return self.input_filter

    def set_data(self, data: dict) -> Self:
        self.data = dict(data)
        self.populate_values(self.data)
        self.has_validated = False
        return self

    def is_valid(self) -> bool:
        if self.has_validated:
            return self.valid
        if self.data is None:
            raise DomainError(f"{type(self).__name__}.is_valid is unable to validate as there is no data currently set")

        input_filter = self.get_input_filter()
        input_filter.set_data(self.data)
        self.valid = input_filter.is_valid()
        if not self.valid:
            self.set_messages(input_filter.get_messages())
        self.has_validated = True
        return self.valid

    def get_data(self) -> dict:
        if not self.has_validated:
            raise DomainError(f"{type(self).__name__}.get_data cannot return data as validation has not yet occurred")
        return self.get_input_filter().get_values()

    def prepare(self) -> Self:
        """Rename nested elements once; wrapping puts top level names under the form name too."""
        if self.is_prepared:
            return self

        self.get_input_filter()
        if self.wrap:
            self.prepare_element(self)
        else:
            for element in self:
                if isinstance(element, Form):
                    element.prepare()
                elif hasattr(element, "prepare_element"):
                    element.prepare_element(self)

        self.is_prepared = True
        return self
