from typing import Self

from bootstrap_form.form.Checkbox import Checkbox, MultiCheckbox
from bootstrap_form.form.DateSelect import MonthSelect
from bootstrap_form.form.Element import Element
from bootstrap_form.form.Fieldset import Fieldset
from bootstrap_form.form.InputFilter import Input, InputFilter
from bootstrap_form.form.Inputs import Button, Submit
from bootstrap_form.view.AbstractHelper import (
    AbstractHelper, EOL, LABEL_APPEND, LABEL_PREPEND, LAYOUT_HORIZONTAL, LAYOUT_INLINE, LAYOUT_VERTICAL, logger,
)
from bootstrap_form.view.FormElement import FormElement
from bootstrap_form.view.FormElementErrors import FormElementErrors
from bootstrap_form.view.Mixins import HiddenHelperMixin, HtmlHelperMixin, LabelHelperMixin

BUTTON_TYPES = ("button", "submit", "reset")


class FormRow(HiddenHelperMixin, LabelHelperMixin, HtmlHelperMixin, AbstractHelper):
    """
    Renders a complete form row: label, element, errors, help text and extra messages.

    Most of the look is driven by element options, falling back to the options
    of the form the element belongs to (``form`` option):

    * ``layout``: ``horizontal``, ``vertical`` or ``inline``
    * ``floating`` / form ``floating-labels``: floating labels
    * ``row_attributes``, ``col_attributes``, ``label_col_attributes``,
      ``label_attributes``, ``legend_attributes``, ``help_attributes``
    * ``show-required-mark`` / ``field-required-mark``
    * ``in-group`` with ``group-prefixes`` and ``group-suffixes``
    * ``as-card`` and ``as-form-control`` for checkbox groups
    * ``help_content`` (string or ``{"content": ..., "header": ...}``) and ``messages``
    * ``error-class``, ``valid-class`` and ``was-validated``
    """

    def __init__(self):
        super().__init__()
        self.label_position = LABEL_PREPEND
        self.render_errors = True
        self.label_attributes: dict = {}
        self.partial: str | None = None
        self.input_error_class = "is-invalid"
        self.element_helper: FormElement | None = None
        self.element_errors_helper: FormElementErrors | None = None

    def __call__(self, element: Element | None = None, label_position: str | None = None,
                 render_errors: bool | None = None, partial: str | None = None):
        if element is None:
            return self
        if label_position is not None:
            self.set_label_position(label_position)
        if render_errors is not None:
            self.set_render_errors(render_errors)
        if partial is not None:
            self.set_partial(partial)
        return self.render(element)

    # configuration

    def set_label_position(self, label_position: str) -> Self:
        self.label_position = self.validate_label_position(label_position)
        return self

    def get_label_position(self) -> str:
        return self.label_position

    def set_render_errors(self, render_errors: bool) -> Self:
        self.render_errors = bool(render_errors)
        return self

    def get_render_errors(self) -> bool:
        return self.render_errors

    def set_label_attributes(self, attributes: dict) -> Self:
        self.label_attributes = dict(attributes)
        return self

    def get_label_attributes(self) -> dict:
        return self.label_attributes

    def set_partial(self, partial: str | None) -> Self:
        self.partial = partial
        return self

    def get_partial(self) -> str | None:
        return self.partial

    def set_input_error_class(self, input_error_class: str) -> Self:
        self.input_error_class = input_error_class
        return self

    def get_input_error_class(self) -> str:
        return self.input_error_class

    def get_element_helper(self) -> FormElement:
        if self.element_helper is None:
            self.element_helper = self.plugin("form_element", FormElement)
        return self.element_helper

    def set_element_helper(self, helper: FormElement) -> Self:
        self.element_helper = helper
        return self

    def get_element_errors_helper(self) -> FormElementErrors:
        if self.element_errors_helper is None:
            self.element_errors_helper = self.plugin("form_element_errors", FormElementErrors)
        return self.element_errors_helper

    def set_element_errors_helper(self, helper: FormElementErrors) -> Self:
        self.element_errors_helper = helper
        return self

    # rendering

    def render(self, element: Element, label_position: str | None = None) -> str:
        form = element.get_option("form")

        if not element.has_attribute("required"):
            element_name = element.get_name()
            if element_name is not None and form is not None:
                found = self.find_input(element_name, form.get_input_filter(), element)
                if isinstance(found, Input) and found.is_required():
                    element.set_attribute("required", True)

        label = element.get_label() or ""
        if label_position is None:
            label_position = self.get_label_position()

        element_type = element.get_attribute("type")
        # hidden inputs never get a label
        if label != "" and element_type != "hidden":
            label = self.translate_label(label)

        if element.get_messages():
            classes = [element.get_attribute("class"), self.get_input_error_class(), element.get_option("error-class")]
            element.set_attribute("class", self.combine_classes(*classes))
        else:
            was_validated = element.get_option("was-validated")
            if was_validated is None and form is not None:
                was_validated = form.get_option("was-validated")
            if was_validated:
                classes = [element.get_attribute("class"), element.get_option("valid-class")]
                element.set_attribute("class", self.combine_classes(*classes))

        indent = self.get_indent()

        if self.view is not None and self.partial:
            logger.debug("Rendering %r through partial %s", element, self.partial)
            return self.view.render(
                self.partial,
                element=element,
                label=label,
                label_attributes=self.label_attributes,
                label_position=label_position,
                render_errors=self.render_errors,
                indent=indent,
            )

        if element_type == "hidden":
            hidden_helper = self.get_hidden_helper()
            hidden_helper.set_indent(indent)
            error_content = ""
            if self.render_errors:
                error_content = self.render_form_errors(element, indent + self.get_whitespace(4))
            return hidden_helper.render(element) + error_content

        label = self.escape_label(element, label)

        layout = element.get_option("layout")
        floating = element.get_option("floating")
        show_required_mark = element.get_option("show-required-mark")
        required_mark = element.get_option("field-required-mark")

        if form is not None:
            if layout is None:
                layout = form.get_option("layout")
            if floating is None and layout in (LAYOUT_VERTICAL, LAYOUT_INLINE) and form.get_option("floating-labels"):
                element.set_option("floating", True)
            if show_required_mark is None:
                show_required_mark = (
                    form.get_option("form-required-mark") is not None
                    and form.get_option("field-required-mark") is not None
                )
            if show_required_mark and required_mark is None:
                required_mark = form.get_option("field-required-mark")

        if show_required_mark and isinstance(required_mark, str) and element.get_attribute("required"):
            label += required_mark

        if layout == LAYOUT_HORIZONTAL:
            return self.render_horizontal_row(element, label)

        return self.render_vertical_row(element, label, label_position)

    def render_horizontal_row(self, element: Element, label: str) -> str:
        row_attributes = self.merge_attributes(element, "row_attributes", ["row"])
        col_attributes = self.merge_attributes(element, "col_attributes", [])
        label_col_attributes = self.merge_attributes(element, "label_col_attributes", ["col-form-label"])

        indent = self.get_indent()
        element_type = element.get_attribute("type")
        html_helper = self.get_html_helper()
        element_helper = self.get_element_helper()

        base_indent = indent
        lf1_indent = indent + self.get_whitespace(4)
        lf2_indent = lf1_indent + self.get_whitespace(4)
        lf3_indent = lf2_indent + self.get_whitespace(4)
        lf4_indent = lf3_indent + self.get_whitespace(4)

        as_card = element.get_option("as-card")
        in_container = as_card or element.get_option("as-form-control")

        # groups of inputs cannot sit inside one label, so they get a fieldset with a legend
        if isinstance(element, (MultiCheckbox, MonthSelect)) or element_type in ("multi_checkbox", "radio"):
            legend = lf1_indent + html_helper.render("legend", label_col_attributes, label) + EOL
            error_content, message_content, help_content = self.render_extras(
                element, lf4_indent if in_container else lf2_indent, lf1_indent, row_attributes
            )

            element_helper.set_indent(lf4_indent if as_card else lf3_indent)
            element_string = element_helper.render(element) + error_content + message_content
            element_string = self.wrap_in_container(element, element_string, lf2_indent)

            outer_div = lf1_indent + html_helper.render(
                "div", col_attributes, EOL + lf2_indent + element_string + EOL + lf1_indent
            )
            return base_indent + html_helper.render(
                "fieldset", row_attributes, EOL + legend + outer_div + help_content + EOL + base_indent
            )

        # the checkbox helper renders its own label
        if isinstance(element, Checkbox) or element_type == "checkbox":
            error_content, message_content, help_content = self.render_extras(
                element, lf4_indent if in_container else lf2_indent, lf1_indent, row_attributes
            )

            element_helper.set_indent(lf4_indent if as_card else lf3_indent)
            element_string = element_helper.render(element) + error_content + message_content
            element_string = self.wrap_in_container(element, element_string, lf2_indent)

            outer_div = lf1_indent + html_helper.render(
                "div", col_attributes, EOL + lf2_indent + element_string + EOL + lf1_indent
            )
            return base_indent + html_helper.render(
                "div", row_attributes, EOL + outer_div + help_content + EOL + base_indent
            )

        if isinstance(element, (Button, Submit, Fieldset)) or element_type in BUTTON_TYPES:
            element_helper.set_indent(lf2_indent)
            element_string = element_helper.render(element)
            outer_div = lf1_indent + html_helper.render(
                "div", col_attributes, EOL + element_string + EOL + lf1_indent
            )
            return base_indent + html_helper.render("div", row_attributes, EOL + outer_div + EOL + base_indent)

        if element.has_attribute("id"):
            label_col_attributes["for"] = element.get_attribute("id")

        label_helper = self.get_label_helper()
        legend = lf1_indent + label_helper.open_tag(label_col_attributes) + label + label_helper.close_tag()

        error_content, message_content, help_content = self.render_extras(
            element, lf2_indent, lf1_indent, row_attributes
        )

        element_helper.set_indent(lf3_indent if element.get_option("in-group") else lf2_indent)
        element_string = element_helper.render(element) + error_content + message_content
        element_string = self.wrap_in_group(element, element_string, lf2_indent)

        outer_div = lf1_indent + html_helper.render("div", col_attributes, EOL + element_string + EOL + lf1_indent)
        return base_indent + html_helper.render(
            "div", row_attributes, EOL + legend + EOL + outer_div + help_content + EOL + base_indent
        )

    def render_vertical_row(self, element: Element, label: str, label_position: str | None = None) -> str:
        col_attributes = self.merge_attributes(element, "col_attributes", [])
        label_attributes = self.merge_attributes(element, "label_attributes", ["form-label"])
        if element.has_attribute("id"):
            label_attributes["for"] = element.get_attribute("id")

        indent = self.get_indent()
        html_helper = self.get_html_helper()
        element_helper = self.get_element_helper()
        as_card = element.get_option("as-card")
        in_container = as_card or element.get_option("as-form-control")

        if isinstance(element, (MultiCheckbox, MonthSelect)):
            legend_attributes = self.merge_attributes(element, "legend_attributes", ["form-label"])
            legend = indent + self.get_whitespace(4) + html_helper.render("legend", legend_attributes, label)

            floating = element.get_option("floating")
            base_indent = indent
            if floating:
                indent += self.get_whitespace(4)
            lf1_indent = indent + self.get_whitespace(4)
            lf2_indent = lf1_indent + self.get_whitespace(4)
            lf3_indent = lf2_indent + self.get_whitespace(4)

            error_content, message_content, help_content = self.render_extras(
                element, lf3_indent if in_container else lf1_indent, indent if floating else lf1_indent, col_attributes
            )

            element_helper.set_indent(lf3_indent if as_card else lf2_indent)
            element_string = element_helper.render(element) + error_content + message_content
            element_string = self.wrap_in_container(element, element_string, lf1_indent)

            if floating:
                element_string = EOL + lf1_indent + element_string + EOL + "    " + legend + EOL + indent
                element_string = indent + html_helper.render(
                    "div", {"class": "form-floating flex-fill"}, element_string
                )
                element_string += help_content
            else:
                element_string = legend + EOL + lf1_indent + element_string + help_content

            return base_indent + html_helper.render(
                "fieldset", col_attributes, EOL + element_string + EOL + base_indent
            )

        if isinstance(element, Checkbox):
            base_indent = indent
            lf1_indent = indent + self.get_whitespace(4)
            lf2_indent = lf1_indent + self.get_whitespace(4)
            lf3_indent = lf2_indent + self.get_whitespace(4)

            error_content, message_content, help_content = self.render_extras(
                element, lf3_indent if in_container else lf1_indent, lf1_indent, col_attributes
            )

            element_helper.set_indent(lf3_indent if as_card else lf2_indent)
            element_string = element_helper.render(element) + error_content + message_content
            element_string = self.wrap_in_container(element, element_string, lf1_indent)

            return base_indent + html_helper.render(
                "div", col_attributes, EOL + lf1_indent + element_string + help_content + EOL + base_indent
            )

        element_type = element.get_attribute("type")
        if isinstance(element, (Button, Submit, Fieldset)) or element_type in BUTTON_TYPES:
            base_indent = indent
            element_helper.set_indent(indent + self.get_whitespace(4))
            element_string = element_helper.render(element)
            return base_indent + html_helper.render("div", col_attributes, EOL + element_string + EOL + base_indent)

        floating = element.get_option("floating")
        in_group = element.get_option("in-group")
        base_indent = indent
        if floating:
            indent += self.get_whitespace(4)
        lf1_indent = indent + self.get_whitespace(4)
        lf2_indent = lf1_indent + self.get_whitespace(4)

        error_content, message_content, help_content = self.render_extras(
            element, indent if floating else lf1_indent, indent if floating else lf1_indent, col_attributes
        )

        element_helper.set_indent(lf2_indent if in_group else lf1_indent)
        element_string = element_helper.render(element)

        if label == "":
            rendered = element_string + error_content + message_content
        else:
            if floating:
                label_position = LABEL_APPEND
            elif element.has_label_option("label_position"):
                label_position = element.get_label_option("label_position")
            else:
                label_position = LABEL_PREPEND

            label_helper = self.get_label_helper()
            legend = label_helper.open_tag(label_attributes) + label + label_helper.close_tag()

            if label_position == LABEL_PREPEND:
                element_string += error_content + message_content
                element_string = self.wrap_in_group(element, element_string, lf1_indent)
                rendered = lf1_indent + legend + EOL + element_string
            else:
                if not floating:
                    element_string += error_content + message_content
                    element_string = self.wrap_in_group(element, element_string, indent)
                rendered = element_string + EOL + (lf2_indent if in_group else lf1_indent) + legend

        if floating:
            rendered = EOL + rendered + EOL + (lf1_indent if in_group else indent)
            rendered = html_helper.render("div", {"class": "form-floating flex-fill"}, rendered)
            rendered += error_content + message_content
            rendered = (lf1_indent if in_group else indent) + rendered
            rendered = self.wrap_in_group(element, rendered, indent)

        rendered += help_content
        return base_indent + html_helper.render("div", col_attributes, EOL + rendered + EOL + base_indent)

    def render_extras(self, element: Element, message_indent: str, help_indent: str,
                      container_attributes: dict) -> tuple[str, str, str]:
        """Errors, extra messages and help text; each starts with a line break or is empty."""
        error_content = ""
        message_content = ""
        help_content = ""
        if self.render_errors:
            error_content = self.render_form_errors(element, message_indent)
        if element.get_option("messages"):
            message_content = self.render_messages(element, message_indent)
        if element.get_option("help_content") is not None:
            help_content = self.render_form_help(element, help_indent, container_attributes)
        return error_content, message_content, help_content

    def render_form_errors(self, element: Element, indent: str) -> str:
        errors_helper = self.get_element_errors_helper()
        errors_helper.set_indent(indent)
        element_errors = errors_helper.render(element)
        if element_errors != "" and element.has_attribute("id"):
            self.add_described_by(element, f"{element.get_attribute('id')}Feedback")
        return element_errors

    def render_form_help(self, element: Element, indent: str, container_attributes: dict) -> str:
        """``container_attributes`` is updated in place with the ``has-help`` class."""
        help_content = element.get_option("help_content")
        if isinstance(help_content, dict):
            content = help_content.get("content")
            if not isinstance(content, str) or content == "":
                return ""
        elif not isinstance(help_content, str) or help_content == "":
            return ""

        container_attributes["class"] = self.combine_classes(container_attributes.pop("class", None), ["has-help"])

        attributes = self.merge_attributes(element, "help_attributes", ["toast"])
        if element.has_attribute("id"):
            attributes["id"] = f"{element.get_attribute('id')}Help"
            self.add_described_by(element, f"{element.get_attribute('id')}Help")

        html_helper = self.get_html_helper()
        if isinstance(help_content, str):
            return EOL + indent + html_helper.render("div", attributes, help_content)

        lf1_indent = indent + self.get_whitespace(4)
        content = html_helper.render("div", {"class": "toast-body"}, help_content["content"])
        header = ""
        if isinstance(help_content.get("header"), str) and help_content["header"] != "":
            header = lf1_indent + html_helper.render("div", {"class": "toast-header"}, help_content["header"]) + EOL

        content = html_helper.render("div", attributes, EOL + header + lf1_indent + content + EOL + indent)
        return EOL + indent + content

    def render_messages(self, element: Element, indent: str) -> str:
        messages = element.get_option("messages")
        if not isinstance(messages, list):
            return ""

        html_helper = self.get_html_helper()
        message_content = ""
        for message in messages:
            content = message.get("content") or ""
            if content == "":
                continue
            attributes = message.get("attributes") or {}
            if "id" in attributes:
                self.add_described_by(element, attributes["id"])
            message_content += EOL + indent + html_helper.render("div", attributes, content)
        return message_content

    def render_group_content(self, messages: list, indent: str) -> str:
        html_helper = self.get_html_helper()
        contents = []
        for message in messages:
            content = message.get("content") or ""
            if content == "":
                continue
            contents.append(html_helper.render("div", message.get("attributes") or {}, content))
        return EOL + indent + (EOL + indent).join(contents)

    @staticmethod
    def add_described_by(element: Element, element_id: str) -> None:
        described_by = element.get_attribute("aria-describedby")
        prefix = f"{described_by} " if element.has_attribute("aria-describedby") else ""
        element.set_attribute("aria-describedby", prefix + element_id)

    def merge_attributes(self, element: Element, option_name: str, classes: list) -> dict:
        """Element option attributes over form option attributes, with all classes combined."""
        attributes = dict(element.get_option(option_name) or {})
        classes = list(classes)
        if "class" in attributes:
            classes.extend(str(attributes.pop("class")).split(" "))

        form = element.get_option("form")
        if form is not None:
            form_attributes = dict(form.get_option(option_name) or {})
            if "class" in form_attributes:
                classes.extend(str(form_attributes.pop("class")).split(" "))
            attributes = {**form_attributes, **attributes}

        if classes:
            attributes["class"] = " ".join(dict.fromkeys(classes))
        return attributes

    def find_input(self, element_name: str, input_filter: InputFilter, element: Element,
                   level: int = 0) -> Input | InputFilter | None:
        """Look up the input for ``element_name``, descending through ``fieldset[child]`` names."""
        if input_filter.has(element_name):
            found = input_filter.get(element_name)
            if isinstance(found, Input):
                return found

        fieldset = element.get_option("fieldset")
        if fieldset is None or fieldset.get_name() is None:
            return None

        fieldset_name = fieldset.get_name()
        original_fieldset_name = fieldset_name
        if not input_filter.has(original_fieldset_name) and "[" in original_fieldset_name:
            start = original_fieldset_name.find("[")
            end = original_fieldset_name.find("]", start + 1)
            if end != -1:
                base_fieldset_name = original_fieldset_name[:start]
                fieldset_name = original_fieldset_name[start + 1:end]
                if input_filter.has(base_fieldset_name):
                    base_filter = input_filter.get(base_fieldset_name)
                    if isinstance(base_filter, InputFilter):
                        return self.find_input(
                            element_name.replace(original_fieldset_name, fieldset_name),
                            base_filter,
                            element,
                            level + 1,
                        )

        if not input_filter.has(fieldset_name):
            return None

        found = input_filter.get(fieldset_name)
        if isinstance(found, Input):
            return found

        original_element_name = element_name[len(fieldset_name) + 1:-1]
        if found.has(original_element_name):
            sub_filter = found.get(original_element_name)
            if isinstance(sub_filter, Input):
                return sub_filter
            return self.find_input(original_element_name, sub_filter, element, level + 1)

        return None

    def wrap_in_container(self, element: Element, element_string: str, indent: str) -> str:
        as_card = element.get_option("as-card")
        if not (as_card or element.get_option("as-form-control")):
            return element_string

        html_helper = self.get_html_helper()
        if as_card:
            control_classes = ["card", "has-validation"]
            lf1_indent = indent + self.get_whitespace(4)
            element_string = lf1_indent + html_helper.render(
                "div", {"class": "card-body"}, EOL + element_string + EOL + lf1_indent
            )
        else:
            control_classes = ["form-control", "has-validation"]

        if element.get_attribute("required"):
            control_classes.append("required")

        return html_helper.render(
            "div", {"class": " ".join(control_classes)}, EOL + element_string + EOL + indent
        )

    def wrap_in_group(self, element: Element, element_string: str, indent: str) -> str:
        if not element.get_option("in-group"):
            return element_string

        prefixes = element.get_option("group-prefixes")
        suffixes = element.get_option("group-suffixes")
        lf1_indent = indent + self.get_whitespace(4)

        element_string = EOL + element_string
        if isinstance(prefixes, list):
            element_string = self.render_group_content(prefixes, lf1_indent) + element_string
        if isinstance(suffixes, list):
            element_string += self.render_group_content(suffixes, lf1_indent)

        control_classes = ["input-group", "has-validation"]
        if element.get_attribute("required"):
            control_classes.append("required")

        return indent + self.get_html_helper().render(
            "div", {"class": " ".join(control_classes)}, element_string + EOL + indent
        )
