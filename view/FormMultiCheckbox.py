from typing import Any, Self

from bootstrap_form.form.Checkbox import MultiCheckbox
from bootstrap_form.form.Element import Element
from bootstrap_form.form.Exceptions import DomainError, InvalidArgumentError
from bootstrap_form.utilities.ValueOptions import iter_value_options, selected_values
from bootstrap_form.view.AbstractHelper import EOL, LABEL_PREPEND
from bootstrap_form.view.FormCheckbox import group_attributes_for
from bootstrap_form.view.FormInput import AbstractFormInput
from bootstrap_form.view.Mixins import HiddenHelperMixin, HtmlHelperMixin, LabelHelperMixin, LabelPositionMixin


class AbstractFormMultiCheckbox(LabelPositionMixin, HiddenHelperMixin, LabelHelperMixin, HtmlHelperMixin,
                                AbstractFormInput):
    """One ``form-check`` group per value option; shared by checkbox lists and radios."""

    valid_tag_attributes = frozenset({"name", "autofocus", "checked", "disabled", "form", "required", "type", "value"})

    def __init__(self):
        super().__init__()
        self.label_attributes: dict = {}
        self.separator = ""
        self.use_hidden_element = False
        self.unchecked_value = ""

    def set_label_attributes(self, attributes: dict) -> Self:
        self.label_attributes = dict(attributes)
        return self

    def get_label_attributes(self) -> dict:
        return self.label_attributes

    def set_separator(self, separator: str) -> Self:
        self.separator = separator
        return self

    def get_separator(self) -> str:
        return self.separator

    def set_use_hidden_element(self, use_hidden_element: bool) -> Self:
        self.use_hidden_element = bool(use_hidden_element)
        return self

    def set_unchecked_value(self, value: str) -> Self:
        self.unchecked_value = value
        return self

    def get_input_type(self) -> str:
        raise NotImplementedError

    def get_element_name(self, element: Element) -> str:
        raise NotImplementedError

    def render(self, element: Element) -> str:
        if not isinstance(element, MultiCheckbox):
            raise InvalidArgumentError(
                f"{type(self).__name__}.render requires that the element is of type MultiCheckbox, "
                f"but was {type(element).__name__}"
            )

        name = self.get_element_name(element)
        attributes = element.get_attributes()
        attributes["name"] = name
        attributes["type"] = self.get_input_type()

        indent = self.get_indent()
        rendered = indent + self.render_options(element, element.get_value_options(), element.get_value(), attributes)

        if element.use_hidden() or self.use_hidden_element:
            unchecked_value = element.get_unchecked_value()
            if unchecked_value is None:
                unchecked_value = self.unchecked_value
            rendered = indent + self.render_hidden(element.get_name(), unchecked_value) + EOL + rendered

        return rendered

    def render_options(self, element: Element, options: Any, value: Any, attributes: dict) -> str:
        if element.has_label_option("label_position"):
            label_position = self.validate_label_position(element.get_label_option("label_position"))
        else:
            label_position = self.get_label_position()

        selected_options = selected_values(value)
        global_label_attributes = element.get_label_attributes() or self.label_attributes
        as_button = bool(element.get_option("as-button"))
        always_wrap = element.get_label_option("always_wrap")
        group_attributes = group_attributes_for(element)
        label_helper = self.get_label_helper()
        html_helper = self.get_html_helper()
        indent = self.get_indent()
        lf1_indent = indent if as_button else indent + self.get_whitespace(4)

        combined_markup = []
        for count, (_, option_spec) in enumerate(iter_value_options(options), start=1):
            if count > 1:
                attributes.pop("id", None)

            input_attributes = dict(attributes)
            label_attributes = dict(global_label_attributes)
            selected = bool(input_attributes.get("selected")) and input_attributes["type"] != "radio"
            disabled = bool(input_attributes.get("disabled"))

            option_value = option_spec.get("value", "")
            label = option_spec.get("label", "")
            if "selected" in option_spec:
                selected = option_spec["selected"]
            if "disabled" in option_spec:
                disabled = option_spec["disabled"]

            if as_button:
                input_classes = ["btn-check"]
                label_classes = ["btn"]
            else:
                input_classes = ["form-check-input"]
                label_classes = ["form-check-label"]

            label_classes.append(label_attributes.get("class"))
            input_classes.append(input_attributes.get("class"))

            option_label_attributes = dict(option_spec.get("label_attributes") or {})
            if isinstance(option_label_attributes.get("class"), str):
                label_classes.append(option_label_attributes.pop("class"))
            label_attributes.update(option_label_attributes)

            option_attributes = dict(option_spec.get("attributes") or {})
            if isinstance(option_attributes.get("class"), str):
                input_classes.append(option_attributes.pop("class"))
            input_attributes.update(option_attributes)

            if str(option_value) in selected_options:
                selected = True

            input_attributes["value"] = option_value
            input_attributes["checked"] = selected
            input_attributes["disabled"] = disabled
            if disabled:
                input_attributes["aria-disabled"] = "true"

            input_attributes["class"] = self.combine_classes(*input_classes)
            label_attributes["class"] = self.combine_classes(*label_classes)

            if "id" in input_attributes:
                label_attributes["for"] = input_attributes["id"]

            if element.get_option("switch"):
                input_attributes["role"] = "switch"

            input_markup = self.render_tag(input_attributes)
            label = self.escape_label(element, self.translate_label(str(label)))

            if "id" in input_attributes and not always_wrap:
                label_open = ""
                label_close = ""
                label = label_helper.open_tag(label_attributes) + label + label_helper.close_tag()
            else:
                label_open = label_helper.open_tag(label_attributes) + EOL
                if as_button:
                    label_open += lf1_indent
                label_close = EOL + lf1_indent + label_helper.close_tag()
                input_markup = self.get_whitespace(4) + input_markup

            markup = label_open
            if (label != "" and "id" not in input_attributes) or always_wrap:
                label = self.get_whitespace(4) + f"<span>{label}</span>"
                if not as_button:
                    markup += lf1_indent

            if label_position == LABEL_PREPEND:
                markup += label + EOL + lf1_indent + input_markup
            else:
                markup += input_markup + EOL + lf1_indent + label
            markup += label_close

            if as_button:
                combined_markup.append(markup)
            else:
                combined_markup.append(
                    html_helper.render("div", group_attributes, EOL + lf1_indent + markup + EOL + indent)
                )

        return (EOL + indent).join(combined_markup)


class FormMultiCheckbox(AbstractFormMultiCheckbox):
    """Checkbox lists submit an array, so the name gets ``[]``."""

    def get_input_type(self) -> str:
        return "checkbox"

    def get_element_name(self, element: Element) -> str:
        name = element.get_name()
        if not name:
            raise DomainError(
                f"{type(self).__name__}.render requires that the element has an assigned name; none discovered"
            )
        return f"{name}[]"


class FormRadio(AbstractFormMultiCheckbox):
    def get_input_type(self) -> str:
        return "radio"

    def get_element_name(self, element: Element) -> str:
        name = element.get_name()
        if not name:
            raise DomainError(
                f"{type(self).__name__}.render requires that the element has an assigned name; none discovered"
            )
        return name
