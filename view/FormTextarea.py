from bootstrap_form.form.Element import Element
from bootstrap_form.form.Exceptions import DomainError
from bootstrap_form.view.AbstractHelper import AbstractHelper


class FormTextarea(AbstractHelper):
    valid_tag_attributes = frozenset({
        "autocomplete", "autofocus", "cols", "dirname", "disabled", "form", "maxlength", "minlength", "name",
        "placeholder", "readonly", "required", "rows", "wrap",
    })

    def render(self, element: Element) -> str:
        name = element.get_name()
        if not name:
            raise DomainError(
                f"{type(self).__name__}.render requires that the element has an assigned name; none discovered"
            )

        attributes = element.get_attributes()
        attributes["name"] = name
        attributes["class"] = self.combine_classes(["form-control"], attributes.get("class"))

        value = element.get_value()
        content = self.get_escape_html_helper()("" if value is None else str(value))

        attributes_string = self.create_attributes_string(attributes)
        if attributes_string:
            attributes_string = " " + attributes_string
        return f"{self.get_indent()}<textarea{attributes_string}>{content}</textarea>"
