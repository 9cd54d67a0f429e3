from bootstrap_form.form.Element import Element
from bootstrap_form.form.Exceptions import DomainError, InvalidArgumentError
from bootstrap_form.view.AbstractHelper import AbstractHelper, LABEL_APPEND


class FormLabel(AbstractHelper):
    valid_tag_attributes = frozenset({"for", "form"})

    def __call__(self, element: Element | None = None, label_content: str | None = None,
                 position: str | None = None):
        if element is None:
            return self
        return self.render(element, label_content, position)

    def render(self, element: Element, label_content: str | None = None, position: str | None = None) -> str:
        open_tag = self.open_tag(element)
        label = ""
        if label_content is None or position is not None:
            label = element.get_label()
            if not label:
                raise DomainError(
                    f"{type(self).__name__}.render expects either label content as the second argument, "
                    "or that the element provided has a label; neither found"
                )
            label = self.escape_label(element, self.translate_label(label))

        if label and label_content:
            if position == LABEL_APPEND:
                label_content = label_content + label
            else:
                label_content = label + label_content

        if label and label_content is None:
            label_content = label

        return open_tag + label_content + self.close_tag()

    def open_tag(self, attributes_or_element: dict | Element | None = None) -> str:
        if attributes_or_element is None:
            return "<label>"

        if isinstance(attributes_or_element, dict):
            attributes = attributes_or_element
        elif isinstance(attributes_or_element, Element):
            attributes = {**attributes_or_element.get_label_attributes(), "for": self.get_id(attributes_or_element)}
        else:
            raise InvalidArgumentError(
                f"{type(self).__name__}.open_tag expects a dict of attributes or an Element, "
                f"got {type(attributes_or_element).__name__}"
            )

        attributes_string = self.create_attributes_string(attributes)
        if attributes_string == "":
            return "<label>"
        return f"<label {attributes_string}>"

    @staticmethod
    def close_tag() -> str:
        return "</label>"
