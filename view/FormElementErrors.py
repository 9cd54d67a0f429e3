from typing import Any, Iterator, Self

from bootstrap_form.form.Element import Element
from bootstrap_form.view.AbstractHelper import AbstractHelper, EOL
from bootstrap_form.view.Mixins import HtmlHelperMixin


def flatten_messages(messages: Any) -> Iterator[str]:
    match messages:
        case dict():
            for value in messages.values():
                yield from flatten_messages(value)
        case list() | tuple():
            for value in messages:
                yield from flatten_messages(value)
        case None | "":
            return
        case str():
            yield messages
        case _:
            yield str(messages)


class FormElementErrors(HtmlHelperMixin, AbstractHelper):
    """
    Renders element messages as a Bootstrap ``invalid-feedback`` block::

        <div class="invalid-feedback" id="emailFeedback">
            <ul>
                <li>Value is required and can't be empty</li>
            </ul>
        </div>

    The block starts with a line break; elements without messages render nothing.
    """

    def __init__(self):
        super().__init__()
        self.attributes: dict = {}
        self.translate_messages = True

    def __call__(self, element: Element | None = None, attributes: dict | None = None):
        if element is None:
            return self
        return self.render(element, attributes)

    def set_attributes(self, attributes: dict) -> Self:
        self.attributes = dict(attributes)
        return self

    def get_attributes(self) -> dict:
        return self.attributes

    def set_translate_messages(self, flag: bool) -> Self:
        self.translate_messages = bool(flag)
        return self

    def render(self, element: Element, attributes: dict | None = None) -> str:
        messages = [message for message in flatten_messages(element.get_messages()) if message]
        if not messages:
            return ""

        if self.translate_messages:
            messages = [self.translate(message) for message in messages]
        if not element.get_label_option("disable_html_escape"):
            escape = self.get_escape_html_helper()
            messages = [escape(message) for message in messages]

        attributes_string = self.create_attributes_string({**self.attributes, **(attributes or {})})
        if attributes_string:
            attributes_string = " " + attributes_string

        indent = self.get_indent()
        item_indent = indent + self.get_whitespace(8)
        items = EOL.join(f"{item_indent}<li>{message}</li>" for message in messages)
        markup = f"<ul{attributes_string}>{EOL}{items}{EOL}{indent}{self.get_whitespace(4)}</ul>"

        error_attributes = {"class": "invalid-feedback"}
        if element.has_attribute("id"):
            error_attributes["id"] = f"{element.get_attribute('id')}Feedback"

        return EOL + indent + self.get_html_helper().render(
            "div",
            error_attributes,
            EOL + indent + self.get_whitespace(4) + markup + EOL + indent,
        )
