from bootstrap_form.form.Element import Element
from bootstrap_form.form.Exceptions import DomainError, InvalidArgumentError
from bootstrap_form.form.Inputs import Button, Submit
from bootstrap_form.view.FormInput import AbstractFormInput, BUTTON_ATTRIBUTES

BUTTON_TYPES = ("button", "reset", "submit")


class FormButton(AbstractFormInput):
    """Renders ``<button>`` elements; the content defaults to the element label."""

    valid_tag_attributes = BUTTON_ATTRIBUTES

    def __call__(self, element: Element | None = None, button_content: str | None = None):
        if element is None:
            return self
        return self.render(element, button_content)

    def render(self, element: Element, button_content: str | None = None) -> str:
        if not isinstance(element, (Button, Submit)):
            raise InvalidArgumentError(
                f"{type(self).__name__}.render requires that the element is of type Button or of type Submit, "
                f"but was {type(element).__name__}"
            )

        if button_content is None:
            button_content = element.get_label()
            if button_content is None:
                raise DomainError(
                    f"{type(self).__name__}.render expects either button content as the second argument, "
                    "or that the element provided has a label value; neither found"
                )

        button_content = self.escape_label(element, self.translate_label(button_content))
        return self.get_indent() + self.open_tag(element) + button_content + self.close_tag()

    def open_tag(self, attributes_or_element: dict | Element | None = None) -> str:
        if attributes_or_element is None:
            return "<button>"

        if isinstance(attributes_or_element, dict):
            attributes = dict(attributes_or_element)
            attributes["class"] = self.combine_classes(["btn"], attributes.get("class"))
            return f"<button {self.create_attributes_string(attributes)}>"

        element = attributes_or_element
        name = element.get_name()
        if not name:
            raise DomainError(
                f"{type(self).__name__}.open_tag requires that the element has an assigned name; none discovered"
            )

        attributes = element.get_attributes()
        attributes["name"] = name
        attributes["type"] = self.get_type(element)
        attributes["class"] = self.combine_classes(["btn"], attributes.get("class"))

        value = element.get_value()
        if value:
            attributes["value"] = value

        attributes_string = self.create_attributes_string(attributes)
        if attributes_string:
            attributes_string = " " + attributes_string
        return f"<button{attributes_string}>"

    @staticmethod
    def close_tag() -> str:
        return "</button>"

    def get_type(self, element: Element) -> str:
        element_type = element.get_attribute("type")
        if not element_type or str(element_type).lower() not in BUTTON_TYPES:
            return "submit"
        return str(element_type).lower()
