from bootstrap_form.form.Element import Element
from bootstrap_form.form.Exceptions import DomainError
from bootstrap_form.form.Inputs import Range, Submit
from bootstrap_form.view.AbstractHelper import AbstractHelper

VALID_TYPES = frozenset({
    "text", "button", "checkbox", "file", "hidden", "image", "password", "radio", "reset", "select", "submit",
    "color", "date", "datetime", "datetime-local", "email", "month", "number", "range", "search", "tel", "time",
    "url", "week",
})

INPUT_ATTRIBUTES = frozenset({
    "name", "accept", "alt", "autocomplete", "autofocus", "checked", "dirname", "disabled", "form", "formaction",
    "formenctype", "formmethod", "formnovalidate", "formtarget", "height", "list", "max", "maxlength", "min",
    "minlength", "multiple", "pattern", "placeholder", "readonly", "required", "size", "src", "step", "type",
    "value", "width",
})

TEXT_ATTRIBUTES = frozenset({
    "name", "autocomplete", "autofocus", "dirname", "disabled", "form", "list", "maxlength", "minlength",
    "pattern", "placeholder", "readonly", "required", "size", "type", "value",
})

DATE_ATTRIBUTES = frozenset({
    "name", "autocomplete", "autofocus", "disabled", "form", "list", "max", "min", "readonly", "required", "step",
    "type", "value",
})

BUTTON_ATTRIBUTES = frozenset({
    "name", "autofocus", "disabled", "form", "formaction", "formenctype", "formmethod", "formnovalidate",
    "formtarget", "type", "value",
})


class AbstractFormInput(AbstractHelper):
    """
    Renders one ``<input>``.

    Bootstrap classes depend on the type: ``btn`` for buttons, ``form-range``
    for ranges, ``form-control-plaintext`` for readonly elements with the
    ``plain`` option and ``form-control`` for everything else.
    """

    valid_tag_attributes = INPUT_ATTRIBUTES
    input_type: str | None = None

    def render(self, element: Element) -> str:
        name = element.get_name()
        if name is None or name == "":
            raise DomainError(
                f"{type(self).__name__}.render requires that the element has an assigned name; none discovered"
            )

        attributes = element.get_attributes()
        attributes["name"] = name
        input_type = self.get_type(element)
        attributes["type"] = input_type
        attributes["value"] = "" if input_type == "password" else element.get_value()

        if isinstance(element, Submit) or input_type in ("submit", "reset", "button"):
            classes = self.combine_classes(["btn"], attributes.get("class"))
        elif isinstance(element, Range) or input_type == "range":
            classes = self.combine_classes(["form-range"], attributes.get("class"))
        elif attributes.get("readonly") is not None and element.get_option("plain"):
            classes = "form-control-plaintext"
        else:
            classes = self.combine_classes(["form-control"], attributes.get("class"))
        attributes["class"] = classes

        return self.get_indent() + self.render_tag(attributes)

    def render_tag(self, attributes: dict) -> str:
        attributes_string = self.create_attributes_string(attributes)
        if attributes_string:
            attributes_string = " " + attributes_string
        return f"<input{attributes_string}{self.get_inline_closing_bracket()}"

    def get_type(self, element: Element) -> str:
        if self.input_type is not None:
            return self.input_type
        element_type = element.get_attribute("type")
        if not element_type:
            return "text"
        element_type = str(element_type).lower()
        if element_type not in VALID_TYPES:
            return "text"
        return element_type


class FormInput(AbstractFormInput):
    """Generic input, the type comes from the element."""


class FormText(AbstractFormInput):
    valid_tag_attributes = TEXT_ATTRIBUTES
    input_type = "text"


class FormTel(AbstractFormInput):
    valid_tag_attributes = TEXT_ATTRIBUTES
    input_type = "tel"


class FormUrl(AbstractFormInput):
    valid_tag_attributes = TEXT_ATTRIBUTES
    input_type = "url"


class FormSearch(AbstractFormInput):
    valid_tag_attributes = TEXT_ATTRIBUTES
    input_type = "search"


class FormEmail(AbstractFormInput):
    valid_tag_attributes = TEXT_ATTRIBUTES | {"multiple"}
    input_type = "email"


class FormPassword(AbstractFormInput):
    valid_tag_attributes = TEXT_ATTRIBUTES - {"dirname", "list"}
    input_type = "password"


class FormNumber(AbstractFormInput):
    valid_tag_attributes = DATE_ATTRIBUTES | {"placeholder"}
    input_type = "number"


class FormRange(AbstractFormInput):
    valid_tag_attributes = DATE_ATTRIBUTES - {"readonly", "required"}
    input_type = "range"


class FormDate(AbstractFormInput):
    valid_tag_attributes = DATE_ATTRIBUTES
    input_type = "date"


class FormDateTime(AbstractFormInput):
    valid_tag_attributes = DATE_ATTRIBUTES
    input_type = "datetime"


class FormDateTimeLocal(AbstractFormInput):
    valid_tag_attributes = DATE_ATTRIBUTES
    input_type = "datetime-local"


class FormMonth(AbstractFormInput):
    valid_tag_attributes = DATE_ATTRIBUTES
    input_type = "month"


class FormWeek(AbstractFormInput):
    valid_tag_attributes = DATE_ATTRIBUTES
    input_type = "week"


class FormTime(AbstractFormInput):
    valid_tag_attributes = DATE_ATTRIBUTES
    input_type = "time"


class FormColor(AbstractFormInput):
    valid_tag_attributes = frozenset({"name", "autocomplete", "autofocus", "disabled", "form", "list", "type", "value"})
    input_type = "color"


class FormSubmit(AbstractFormInput):
    valid_tag_attributes = BUTTON_ATTRIBUTES
    input_type = "submit"


class FormReset(AbstractFormInput):
    valid_tag_attributes = BUTTON_ATTRIBUTES
    input_type = "reset"


class FormHidden(AbstractFormInput):
    valid_tag_attributes = frozenset({"name", "disabled", "form", "type", "value", "autocomplete"})
    input_type = "hidden"

    def render(self, element: Element) -> str:
        name = element.get_name()
        if name is None or name == "":
            raise DomainError(
                f"{type(self).__name__}.render requires that the element has an assigned name; none discovered"
            )

        attributes = element.get_attributes()
        attributes["name"] = name
        attributes["type"] = self.get_type(element)
        attributes["value"] = element.get_value()
        return self.get_indent() + self.render_tag(attributes)


class FormFile(AbstractFormInput):
    valid_tag_attributes = frozenset({"name", "accept", "autofocus", "disabled", "form", "multiple", "required", "type"})
    input_type = "file"

    def render(self, element: Element) -> str:
        name = element.get_name()
        if name is None or name == "":
            raise DomainError(
                f"{type(self).__name__}.render requires that the element has an assigned name; none discovered"
            )

        attributes = element.get_attributes()
        attributes["type"] = self.get_type(element)
        attributes["name"] = name
        if attributes.get("multiple"):
            attributes["name"] += "[]"

        # file inputs never carry a value
        return self.get_indent() + self.render_tag(attributes)


class FormImage(AbstractFormInput):
    valid_tag_attributes = frozenset({
        "name", "alt", "autofocus", "disabled", "form", "formaction", "formenctype", "formmethod",
        "formnovalidate", "formtarget", "height", "src", "type", "width",
    })
    input_type = "image"

    def render(self, element: Element) -> str:
        if not element.get_attribute("src"):
            raise DomainError(
                f"{type(self).__name__}.render requires that the element has an assigned src; none discovered"
            )
        return super().render(element)
