from typing import Any, Iterable

from bootstrap_form.form.Element import Element
from bootstrap_form.form.Exceptions import DomainError, InvalidArgumentError
from bootstrap_form.form.Select import Select
from bootstrap_form.utilities.ValueOptions import iter_value_options, selected_values
from bootstrap_form.view.AbstractHelper import AbstractHelper, EOL
from bootstrap_form.view.Mixins import HiddenHelperMixin

SELECT_ATTRIBUTES = frozenset({"name", "autocomplete", "autofocus", "disabled", "form", "multiple", "required", "size"})
OPTION_ATTRIBUTES = frozenset({"disabled", "selected", "label", "value"})
OPTGROUP_ATTRIBUTES = frozenset({"disabled", "label"})


class FormSelect(HiddenHelperMixin, AbstractHelper):
    """
    Renders a ``<select>`` with one option per line::

        <select name="color" class="form-select">
            <option value="">Choose</option>
            <option value="r" selected="selected">Red</option>
            <optgroup label="Dark">
                <option value="k">Black</option>
            </optgroup>
        </select>
    """

    valid_tag_attributes = SELECT_ATTRIBUTES

    def render(self, element: Element) -> str:
        if not isinstance(element, Select):
            raise InvalidArgumentError(
                f"{type(self).__name__}.render requires that the element is of type Select, "
                f"but was {type(element).__name__}"
            )

        name = element.get_name()
        if name is None or name == "":
            raise DomainError(
                f"{type(self).__name__}.render requires that the element has an assigned name; none discovered"
            )

        value = element.get_value()
        attributes = element.get_attributes()
        if isinstance(value, (list, tuple)) and not attributes.get("multiple"):
            raise DomainError(
                f"{type(self).__name__} does not allow specifying multiple selected values when the element "
                "does not have a multiple attribute set to a boolean true"
            )

        options = list(iter_value_options(element.get_value_options()))
        empty_option = element.get_empty_option()
        if empty_option is not None:
            options.insert(0, ("", {"value": "", "label": empty_option}))

        attributes["name"] = name
        if attributes.get("multiple") and not name.endswith("[]"):
            attributes["name"] = name + "[]"
        attributes["class"] = self.combine_classes(["form-select"], attributes.get("class"))

        indent = self.get_indent()
        markup = (
            f"{indent}<select {self.create_attributes_string(attributes)}>{EOL}"
            f"{self.render_options(options, selected_values(value))}"
            f"{indent}</select>"
        )

        if element.use_hidden() and attributes.get("multiple"):
            markup = indent + self.render_hidden(name, element.get_unselected_value()) + EOL + markup

        return markup

    def render_options(self, options: Iterable[tuple[Any, dict]], selected: set[str], level: int = 1) -> str:
        """One line per normalised ``(key, spec)`` option or optgroup, each terminated by a newline."""
        lines = []
        for _, option_spec in options:
            if isinstance(option_spec.get("options"), (dict, list)):
                lines.append(self.render_optgroup(option_spec, selected, level))
            else:
                lines.append(self.render_option(option_spec, selected, level) + EOL)
        return "".join(lines)

    def render_option(self, option_spec: dict, selected: set[str], level: int = 1) -> str:
        value = option_spec.get("value", "")
        label = self.translate(str(option_spec.get("label", "")))
        if not option_spec.get("disable_html_escape"):
            label = self.get_escape_html_helper()(label)

        attributes = {
            "value": value,
            "selected": bool(option_spec.get("selected")) or str(value) in selected,
            "disabled": bool(option_spec.get("disabled")),
        }
        attributes.update(option_spec.get("attributes") or {})

        attributes_string = self.create_attributes_string(attributes, OPTION_ATTRIBUTES)
        return f"{self.option_indent(level)}<option {attributes_string}>{label}</option>"

    def render_optgroup(self, optgroup: dict, selected: set[str], level: int = 1) -> str:
        attributes = {key: value for key, value in optgroup.items() if key not in ("options", "attributes")}
        if attributes.get("label"):
            attributes["label"] = self.translate(str(attributes["label"]))
        attributes.update(optgroup.get("attributes") or {})

        attributes_string = self.create_attributes_string(attributes, OPTGROUP_ATTRIBUTES)

        indent = self.option_indent(level)
        return (
            f"{indent}<optgroup {attributes_string}>{EOL}"
            f"{self.render_options(iter_value_options(optgroup['options']), selected, level + 1)}"
            f"{indent}</optgroup>{EOL}"
        )

    def option_indent(self, level: int) -> str:
        return self.get_indent() + self.get_whitespace(4 * level)
