from typing import Any, Iterator, Self

from bootstrap_form.form.Element import Element
from bootstrap_form.form.Exceptions import InvalidArgumentError


class Fieldset(Element):
    """An element that groups other elements and fieldsets under its name."""

    def __init__(self, name: str | None = None, options: dict | None = None):
        self.elements: dict[str, Element] = {}
        super().__init__(name, options)

    def add(self, element_or_spec: Element | dict, flags: dict | None = None) -> Self:
        if isinstance(element_or_spec, dict):
            from bootstrap_form.form.Factory import Factory

            element_or_spec = Factory().create(element_or_spec)

        if not isinstance(element_or_spec, Element):
            raise InvalidArgumentError(
                f"{type(self).__name__}.add requires an Element or a specification dict, "
                f"got {type(element_or_spec).__name__}"
            )

        flags = flags or {}
        if flags.get("name"):
            element_or_spec.set_name(flags["name"])

        name = element_or_spec.get_name()
        if name is None or name == "":
            raise InvalidArgumentError(
                f"{type(element_or_spec).__name__} provided to {type(self).__name__}.add has no name"
            )
        self.elements[str(name)] = element_or_spec
        return self

    def has(self, name: str) -> bool:
        return name in self.elements

    def get(self, name: str) -> Element:
        if name not in self.elements:
            raise InvalidArgumentError(f"No element by the name of [{name}] found in {type(self).__name__}")
        return self.elements[name]

    def remove(self, name: str) -> Self:
        self.elements.pop(name, None)
        return self

    def get_elements(self) -> dict[str, Element]:
        return {name: element for name, element in self.elements.items() if not isinstance(element, Fieldset)}

    def get_fieldsets(self) -> dict[str, "Fieldset"]:
        return {name: element for name, element in self.elements.items() if isinstance(element, Fieldset)}

    def __iter__(self) -> Iterator[Element]:
        return iter(list(self.elements.values()))

    def __len__(self) -> int:
        return len(self.elements)

    def __bool__(self) -> bool:
        return True

    def populate_values(self, data: dict | None) -> Self:
        data = data or {}
        for key, element in self.elements.items():
            if key not in data:
                continue
            if isinstance(element, Fieldset):
                element.populate_values(data[key])
            else:
                element.set_value(data[key])
        return self

    def set_messages(self, messages: dict | list) -> Self:
        if not isinstance(messages, dict):
            self.messages = messages
            return self
        for key, element_messages in messages.items():
            if key in self.elements:
                self.elements[key].set_messages(element_messages)
        return self

    def get_messages(self, element_name: str | None = None) -> dict:
        if element_name is not None:
            return self.get(element_name).get_messages()
        messages = {}
        for key, element in self.elements.items():
            element_messages = element.get_messages()
            if element_messages:
                messages[key] = element_messages
        return messages

    def prepare_element(self, form) -> None:
        """Rename children to ``parent[child]`` and let them prepare themselves."""
        name = self.get_name()
        for element in self:
            element.set_name(f"{name}[{element.get_name()}]")
            if hasattr(element, "prepare_element"):
                element.prepare_element(form)

    def clone(self) -> Self:
        cloned = super().clone()
        cloned.elements = {key: element.clone() for key, element in self.elements.items()}
        return cloned
