import copy
from typing import Any, Self


class Element:
    """
    A single form element.

    The name lives in the ``name`` attribute, so attribute order follows the
    order things were set: class level defaults (``type``) first, then the
    name, then whatever the caller adds.
    """

    default_attributes: dict = {}

    def __init__(self, name: str | None = None, options: dict | None = None):
        self.attributes: dict[str, Any] = dict(self.default_attributes)
        self.options: dict[str, Any] = {}
        self.label: str | None = None
        self.label_attributes: dict[str, Any] = {}
        self.label_options: dict[str, Any] = {}
        self.messages: list | dict = []
        self.value: Any = None

        if name is not None:
            self.set_name(name)
        if options:
            self.set_options(options)

    # name

    def set_name(self, name: str) -> Self:
        self.set_attribute("name", name)
        return self

    def get_name(self) -> str | None:
        return self.get_attribute("name")

    # attributes

    def set_attribute(self, key: str, value: Any) -> Self:
        if key == "value":
            return self.set_value(value)
        self.attributes[key] = value
        return self

    def get_attribute(self, key: str) -> Any:
        return self.attributes.get(key)

    def has_attribute(self, key: str) -> bool:
        return key in self.attributes

    def remove_attribute(self, key: str) -> Self:
        self.attributes.pop(key, None)
        return self

    def set_attributes(self, attributes: dict) -> Self:
        """Merge ``attributes`` into the existing ones."""
        for key, value in attributes.items():
            self.set_attribute(key, value)
        return self

    def get_attributes(self) -> dict:
        return dict(self.attributes)

    def clear_attributes(self) -> Self:
        self.attributes = {}
        return self

    # options

    def set_options(self, options: dict) -> Self:
        """Merge ``options``; label related keys also land in their own fields."""
        for key, value in options.items():
            match key:
                case "label":
                    self.set_label(value)
                case "label_attributes":
                    self.set_label_attributes(value)
                case "label_options":
                    self.set_label_options(value)
            self.options[key] = value
        return self

    def get_options(self) -> dict:
        return self.options

    def set_option(self, key: str, value: Any) -> Self:
        self.options[key] = value
        return self

    def get_option(self, key: str) -> Any:
        return self.options.get(key)

    def has_option(self, key: str) -> bool:
        return key in self.options

    # label

    def set_label(self, label: str | None) -> Self:
        self.label = label
        return self

    def get_label(self) -> str | None:
        return self.label

    def set_label_attributes(self, attributes: dict) -> Self:
        self.label_attributes = dict(attributes)
        return self

    def get_label_attributes(self) -> dict:
        return self.label_attributes

    def set_label_options(self, options: dict) -> Self:
        for key, value in options.items():
            self.set_label_option(key, value)
        return self

    def get_label_options(self) -> dict:
        return self.label_options

    def set_label_option(self, key: str, value: Any) -> Self:
        self.label_options[key] = value
        return self

    def get_label_option(self, key: str) -> Any:
        return self.label_options.get(key)

    def has_label_option(self, key: str) -> bool:
        return key in self.label_options

    # value and messages

    def set_value(self, value: Any) -> Self:
        self.value = value
        return self

    def get_value(self) -> Any:
        return self.value

    def set_messages(self, messages: list | dict) -> Self:
        self.messages = messages
        return self

    def get_messages(self) -> list | dict:
        return self.messages

    def clone(self) -> Self:
        """Copy the element; nested dicts are copied, option values are shared."""
        cloned = copy.copy(self)
        cloned.attributes = dict(self.attributes)
        cloned.options = dict(self.options)
        cloned.label_attributes = dict(self.label_attributes)
        cloned.label_options = dict(self.label_options)
        cloned.messages = copy.copy(self.messages)
        return cloned

    def __repr__(self):
        return f"<{type(self).__name__} name={self.get_name()!r}>"
