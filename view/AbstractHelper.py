import json
import logging
from typing import Any, Self

from bootstrap_form.core_services.Doctype import Doctype
from bootstrap_form.core_services.Escaper import EscapeHtml, EscapeHtmlAttr
from bootstrap_form.core_services.Translator import DEFAULT_TEXT_DOMAIN
from bootstrap_form.form.Element import Element
from bootstrap_form.form.Exceptions import InvalidArgumentError

logger = logging.getLogger("bootstrap_form.view")

EOL = "\n"

LABEL_APPEND = "append"
LABEL_PREPEND = "prepend"

LAYOUT_HORIZONTAL = "horizontal"
LAYOUT_VERTICAL = "vertical"
LAYOUT_INLINE = "inline"

GLOBAL_ATTRIBUTES = frozenset({
    "accesskey", "autocapitalize", "class", "contenteditable", "contextmenu", "dir", "draggable", "dropzone",
    "enterkeyhint", "hidden", "id", "inert", "inputmode", "is", "itemid", "itemprop", "itemref", "itemscope",
    "itemtype", "lang", "nonce", "popover", "role", "slot", "spellcheck", "style", "tabindex", "title",
    "translate", "xml:base", "xml:lang", "xml:space",
})

ATTRIBUTE_PREFIXES = ("data-", "aria-", "x-")

# attribute -> (value when true, value when false); an empty "off" value drops the attribute
BOOLEAN_ATTRIBUTES = {
    "autocomplete": ("on", "off"),
    "autofocus": ("autofocus", ""),
    "checked": ("checked", ""),
    "disabled": ("disabled", ""),
    "multiple": ("multiple", ""),
    "readonly": ("readonly", ""),
    "required": ("required", ""),
    "selected": ("selected", ""),
}

TRANSLATABLE_ATTRIBUTES = frozenset({"placeholder", "title"})


class AbstractHelper:
    """
    Shared plumbing for every view helper: indentation, the view the helper
    belongs to, translation, escaping and attribute rendering.

    Collaborators are looked up on the view when one is set, so helpers
    resolved from the same view share escapers, translator and siblings.
    """

    valid_tag_attributes: frozenset = frozenset()

    def __init__(self):
        self.view = None
        self.indent = ""
        self.translator = None
        self.translator_enabled = True
        self.text_domain = DEFAULT_TEXT_DOMAIN
        self.escape_html_helper: EscapeHtml | None = None
        self.escape_html_attr_helper: EscapeHtmlAttr | None = None
        self.doctype_helper: Doctype | None = None

    def __call__(self, element: Element | None = None, *args, **kwargs):
        if element is None:
            return self
        return self.render(element, *args, **kwargs)

    # view

    def set_view(self, view) -> Self:
        self.view = view
        return self

    def get_view(self):
        return self.view

    def plugin(self, name: str, default_factory=None):
        """A sibling helper from the view, or a fresh ``default_factory()`` without a view."""
        if self.view is not None:
            return self.view.plugin(name)
        helper = default_factory()
        helper.set_translator(self.translator, self.text_domain)
        helper.set_translator_enabled(self.translator_enabled)
        helper.doctype_helper = self.doctype_helper
        return helper

    # indentation

    def set_indent(self, indent: int | str) -> Self:
        self.indent = self.get_whitespace(indent)
        return self

    def get_indent(self) -> str:
        return self.indent

    @staticmethod
    def get_whitespace(indent: int | str) -> str:
        if isinstance(indent, int):
            return " " * indent
        return indent

    # translation

    def set_translator(self, translator, text_domain: str | None = None) -> Self:
        self.translator = translator
        if text_domain is not None:
            self.set_translator_text_domain(text_domain)
        return self

    def get_translator(self):
        if not self.translator_enabled:
            return None
        if self.translator is None and self.view is not None:
            return getattr(self.view, "translator", None)
        return self.translator

    def has_translator(self) -> bool:
        return self.get_translator() is not None

    def set_translator_enabled(self, enabled: bool = True) -> Self:
        self.translator_enabled = bool(enabled)
        return self

    def is_translator_enabled(self) -> bool:
        return self.translator_enabled

    def set_translator_text_domain(self, text_domain: str = DEFAULT_TEXT_DOMAIN) -> Self:
        self.text_domain = text_domain
        return self

    def get_translator_text_domain(self) -> str:
        return self.text_domain

    def translate(self, message: str) -> str:
        translator = self.get_translator()
        if translator is None or not message:
            return message
        return translator.translate(message, self.get_translator_text_domain())

    def translate_label(self, label: str) -> str:
        return self.translate(label)

    def escape_label(self, element: Element, label: str) -> str:
        if label == "" or element.get_label_option("disable_html_escape"):
            return label
        return self.get_escape_html_helper()(label)

    # collaborators

    def get_escape_html_helper(self) -> EscapeHtml:
        if self.escape_html_helper is None:
            self.escape_html_helper = getattr(self.view, "escape_html", None) or EscapeHtml()
        return self.escape_html_helper

    def get_escape_html_attr_helper(self) -> EscapeHtmlAttr:
        if self.escape_html_attr_helper is None:
            self.escape_html_attr_helper = getattr(self.view, "escape_html_attr", None) or EscapeHtmlAttr()
        return self.escape_html_attr_helper

    def get_doctype_helper(self) -> Doctype:
        if self.doctype_helper is None:
            self.doctype_helper = getattr(self.view, "doctype", None) or Doctype()
        return self.doctype_helper

    def get_inline_closing_bracket(self) -> str:
        if self.get_doctype_helper().is_xhtml():
            return "/>"
        return ">"

    # attributes

    def get_id(self, element: Element) -> str | None:
        element_id = element.get_attribute("id")
        if element_id is not None:
            return element_id
        return element.get_name()

    def is_valid_attribute(self, key: str, valid_tag_attributes: frozenset | None = None) -> bool:
        if valid_tag_attributes is None:
            valid_tag_attributes = self.valid_tag_attributes
        return (
            key in GLOBAL_ATTRIBUTES
            or key in valid_tag_attributes
            or key.startswith(ATTRIBUTE_PREFIXES)
            or (key.startswith("on") and len(key) > 2)
        )

    def prepare_attributes(self, attributes: dict, valid_tag_attributes: frozenset | None = None) -> dict:
        prepared = {}
        for key, value in attributes.items():
            key = str(key).lower()
            if not self.is_valid_attribute(key, valid_tag_attributes):
                continue
            if key in BOOLEAN_ATTRIBUTES:
                value = self.prepare_boolean_attribute_value(key, value)
            prepared[key] = value
        return prepared

    @staticmethod
    def prepare_boolean_attribute_value(key: str, value: Any) -> str:
        on, off = BOOLEAN_ATTRIBUTES[key]
        if not isinstance(value, bool) and value in (on, off):
            return value
        return on if value else off

    def create_attributes_string(self, attributes: dict, valid_tag_attributes: frozenset | None = None) -> str:
        """
        Render ``attributes`` as ``key="value"`` pairs in insertion order.

        ``valid_tag_attributes`` replaces the helper's own allowlist for this call,
        for helpers that render more than one kind of tag.
        """
        escape = self.get_escape_html_helper()
        escape_attr = self.get_escape_html_attr_helper()
        strings = []
        for key, value in self.prepare_attributes(attributes, valid_tag_attributes).items():
            if key in BOOLEAN_ATTRIBUTES and value == "":
                continue
            if key in TRANSLATABLE_ATTRIBUTES and value:
                value = self.translate(value)
            strings.append(f'{escape(key)}="{escape_attr(self._attribute_value(value))}"')
        return " ".join(strings)

    @staticmethod
    def _attribute_value(value: Any) -> str:
        match value:
            case None:
                return ""
            case bool():
                return "1" if value else ""
            case list() | tuple():
                return " ".join(str(item) for item in value)
            case dict():
                return json.dumps(value)
        return str(value)

    # classes

    @staticmethod
    def combine_classes(*groups) -> str:
        """Join class lists and space separated strings, dropping blanks and duplicates."""
        classes = []
        for group in groups:
            if group is None:
                continue
            if isinstance(group, str):
                group = group.split(" ")
            classes.extend(str(item) for item in group)
        return " ".join(dict.fromkeys(item for item in classes if item))

    @staticmethod
    def validate_label_position(position: str) -> str:
        position = position.lower()
        if position not in (LABEL_APPEND, LABEL_PREPEND):
            raise InvalidArgumentError(
                f"set_label_position expects either {LABEL_APPEND!r} or {LABEL_PREPEND!r}; received {position!r}"
            )
        return position
