from typing import Self

from bootstrap_form.form.Checkbox import Checkbox
from bootstrap_form.form.Element import Element
from bootstrap_form.form.Exceptions import DomainError, InvalidArgumentError
from bootstrap_form.view.AbstractHelper import EOL, LABEL_PREPEND, LAYOUT_INLINE
from bootstrap_form.view.FormInput import AbstractFormInput
from bootstrap_form.view.Mixins import HiddenHelperMixin, HtmlHelperMixin, LabelHelperMixin, LabelPositionMixin


def group_attributes_for(element: Element) -> dict:
    """The ``form-check`` wrapper attributes shared by single and multi checkboxes."""
    classes = ["form-check"]
    if element.get_option("layout") == LAYOUT_INLINE:
        classes.append("form-check-inline")
    if element.get_option("switch"):
        classes.append("form-switch")

    group_attributes = dict(element.get_option("group_attributes") or {})
    if isinstance(group_attributes.get("class"), str):
        classes.extend(group_attributes.pop("class").split(" "))
    group_attributes["class"] = " ".join(dict.fromkeys(classes))
    return group_attributes


class FormCheckbox(LabelPositionMixin, HiddenHelperMixin, LabelHelperMixin, HtmlHelperMixin, AbstractFormInput):
    """
    A single Bootstrap checkbox::

        <div class="form-check">
            <input type="checkbox" name="agree" id="agree" value="1" class="form-check-input">
            <label for="agree" class="form-check-label">Agree</label>
        </div>

    Without an ``id`` (or with the ``always_wrap`` label option) the label
    wraps the input and the text moves into a ``<span>``.
    """

    valid_tag_attributes = frozenset({"name", "autofocus", "checked", "disabled", "form", "required", "type", "value"})
    use_hidden_element = False
    unchecked_value = "0"

    def set_use_hidden_element(self, use_hidden_element: bool) -> Self:
        self.use_hidden_element = bool(use_hidden_element)
        return self

    def set_unchecked_value(self, value: str) -> Self:
        self.unchecked_value = value
        return self

    def render(self, element: Element) -> str:
        if not isinstance(element, Checkbox):
            raise InvalidArgumentError(
                f"{type(self).__name__}.render requires that the element is of type Checkbox, "
                f"but was {type(element).__name__}"
            )

        name = element.get_name()
        if not name:
            raise DomainError(
                f"{type(self).__name__}.render requires that the element has an assigned name; none discovered"
            )

        label = element.get_label() or ""
        if label:
            label = self.escape_label(element, self.translate_label(label))

        element_id = self.get_id(element)
        indent = self.get_indent()
        as_button = bool(element.get_option("as-button"))
        group_attributes = {}

        if as_button:
            input_classes = ["btn-check"]
            label_classes = ["btn"]
            lf1_indent = indent
        else:
            input_classes = ["form-check-input"]
            label_classes = ["form-check-label"]
            group_attributes = group_attributes_for(element)
            lf1_indent = indent + self.get_whitespace(4)

        label_attributes = {**element.get_label_attributes(), "for": element_id}
        label_attributes["class"] = self.combine_classes(label_classes, label_attributes.get("class"))

        attributes = element.get_attributes()
        attributes["name"] = name
        attributes["type"] = "checkbox"
        attributes["value"] = element.get_checked_value()
        if element.is_checked():
            attributes["checked"] = True
        attributes["class"] = self.combine_classes(input_classes, attributes.get("class"))

        rendered = self.render_tag(attributes)

        use_hidden = element.use_hidden() or self.use_hidden_element
        hidden = ""
        if use_hidden:
            unchecked_value = element.get_unchecked_value()
            if unchecked_value is None:
                unchecked_value = self.unchecked_value
            hidden = lf1_indent + self.render_hidden(name, unchecked_value) + EOL

        label_helper = self.get_label_helper()
        label_start = lf1_indent + label_helper.open_tag(label_attributes)
        always_wrap = element.get_label_option("always_wrap")

        if "id" in attributes and not always_wrap:
            label_open = ""
            label_close = ""
            label = label_start + label + label_helper.close_tag()
            rendered = lf1_indent + rendered
        else:
            label_open = label_start + EOL
            label_close = EOL + lf1_indent + label_helper.close_tag()
            rendered = lf1_indent + self.get_whitespace(4) + rendered

        if (label != "" and "id" not in attributes) or always_wrap:
            label = f"<span>{label}</span>"
            if label_close != "":
                label = lf1_indent + self.get_whitespace(4) + label

        if self.get_label_position() == LABEL_PREPEND:
            markup = label_open + label + EOL + rendered + label_close
        else:
            markup = label_open + rendered + EOL + label + label_close

        if as_button:
            return markup

        return indent + self.get_html_helper().render(
            "div",
            group_attributes,
            EOL + hidden + markup + EOL + indent,
        )
