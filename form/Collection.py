from typing import Any, Self

from bootstrap_form.form.Element import Element
from bootstrap_form.form.Exceptions import InvalidArgumentError
from bootstrap_form.form.Fieldset import Fieldset

DEFAULT_TEMPLATE_PLACEHOLDER = "__index__"


class Collection(Fieldset):
    """
    A fieldset whose children are numbered copies of one target element.

    ``prepare_element`` creates ``count`` children named ``0`` .. ``count - 1``
    and, when templates are enabled, a template child named after the
    placeholder. The template is prepared with the others but never iterated.
    """

    def __init__(self, name: str | None = None, options: dict | None = None):
        self.target_element: Element | None = None
        self.count = 1
        self.allow_add = True
        self.allow_remove = True
        self.should_create_template = False
        self.template_placeholder = DEFAULT_TEMPLATE_PLACEHOLDER
        self.template_element: Element | None = None
        self.last_child_index = -1
        super().__init__(name, options)

    def set_options(self, options: dict) -> Self:
        super().set_options(options)
        if "target_element" in options:
            self.set_target_element(options["target_element"])
        if "count" in options:
            self.set_count(options["count"])
        if "allow_add" in options:
            self.allow_add = bool(options["allow_add"])
        if "allow_remove" in options:
            self.allow_remove = bool(options["allow_remove"])
        if "should_create_template" in options:
            self.set_should_create_template(options["should_create_template"])
        if "template_placeholder" in options:
            self.set_template_placeholder(options["template_placeholder"])
        return self

    def set_target_element(self, element_or_spec: Element | dict) -> Self:
        if isinstance(element_or_spec, dict):
            from bootstrap_form.form.Factory import Factory

            element_or_spec = Factory().create(element_or_spec)
        if not isinstance(element_or_spec, Element):
            raise InvalidArgumentError(
                f"{type(self).__name__}.set_target_element requires an Element or a specification dict, "
                f"got {type(element_or_spec).__name__}"
            )
        self.target_element = element_or_spec
        return self

    def get_target_element(self) -> Element | None:
        return self.target_element

    def set_count(self, count: int) -> Self:
        self.count = max(int(count), 0)
        return self

    def get_count(self) -> int:
        return self.count

    def set_should_create_template(self, flag: bool) -> Self:
        self.should_create_template = bool(flag)
        return self

    def should_create_template_element(self) -> bool:
        return self.should_create_template

    def set_template_placeholder(self, placeholder: str) -> Self:
        self.template_placeholder = placeholder
        return self

    def get_template_placeholder(self) -> str:
        return self.template_placeholder

    def get_template_element(self) -> Element | None:
        if self.template_element is None and self.target_element is not None:
            self.template_element = self._new_target_element(self.template_placeholder)
        return self.template_element

    def _new_target_element(self, name: Any) -> Element:
        element = self.target_element.clone()
        element.set_name(str(name))
        return element

    def _add_child(self, index: Any) -> Element:
        element = self._new_target_element(index)
        self.add(element)
        return element

    def prepare_element(self, form) -> None:
        if self.target_element is not None:
            while self.count > self.last_child_index + 1:
                self.last_child_index += 1
                self._add_child(self.last_child_index)

        template = None
        if self.should_create_template:
            template = self.get_template_element()
            if template is not None:
                self.add(template)

        super().prepare_element(form)

        if template is not None:
            self.remove(self.template_placeholder)

    def populate_values(self, data: dict | list | None) -> Self:
        if isinstance(data, list):
            data = dict(enumerate(data))
        data = data or {}
        if self.target_element is None:
            return super().populate_values(data)

        for key in list(self.elements):
            if key not in {str(k) for k in data}:
                self.remove(key)
        for key, value in data.items():
            if str(key) not in self.elements:
                self._add_child(key)
            child = self.elements[str(key)]
            if isinstance(child, Fieldset):
                child.populate_values(value)
            else:
                child.set_value(value)
            if str(key).isdigit():
                self.last_child_index = max(self.last_child_index, int(key))
        return self

    def clone(self) -> Self:
        cloned = super().clone()
        cloned.template_element = None
        return cloned
