from typing import Self

from bootstrap_form.form.Collection import Collection
from bootstrap_form.form.DateSelect import DateSelect, DateTimeSelect, MonthSelect
from bootstrap_form.form.Element import Element
from bootstrap_form.form.Fieldset import Fieldset
from bootstrap_form.form.Inputs import Button
from bootstrap_form.view.AbstractHelper import AbstractHelper, logger

# checked in order, subclasses first
CLASS_MAP: list[tuple[type, str]] = [
    (Button, "form_button"),
    (Collection, "form_collection"),
    (Fieldset, "form_collection"),
    (DateTimeSelect, "form_date_time_select"),
    (DateSelect, "form_date_select"),
    (MonthSelect, "form_month_select"),
]

TYPE_MAP = {
    "checkbox": "form_checkbox",
    "color": "form_color",
    "date": "form_date",
    "datetime": "form_date_time",
    "datetime-local": "form_date_time_local",
    "email": "form_email",
    "file": "form_file",
    "hidden": "form_hidden",
    "image": "form_image",
    "month": "form_month",
    "multi_checkbox": "form_multi_checkbox",
    "number": "form_number",
    "password": "form_password",
    "radio": "form_radio",
    "range": "form_range",
    "reset": "form_reset",
    "search": "form_search",
    "select": "form_select",
    "submit": "form_submit",
    "tel": "form_tel",
    "text": "form_text",
    "textarea": "form_textarea",
    "time": "form_time",
    "url": "form_url",
    "week": "form_week",
}

DEFAULT_HELPER = "form_input"


class FormElement(AbstractHelper):
    """Picks the helper for an element by class, then by ``type`` attribute, and renders with it."""

    def __init__(self):
        super().__init__()
        self.class_map = list(CLASS_MAP)
        self.type_map = dict(TYPE_MAP)
        self.default_helper = DEFAULT_HELPER

    def add_class(self, element_class: type, plugin: str) -> Self:
        self.class_map.insert(0, (element_class, plugin))
        return self

    def add_type(self, element_type: str, plugin: str) -> Self:
        self.type_map[element_type] = plugin
        return self

    def set_default_helper(self, plugin: str) -> Self:
        self.default_helper = plugin
        return self

    def resolve_helper_name(self, element: Element) -> str:
        for element_class, plugin in self.class_map:
            if isinstance(element, element_class):
                return plugin
        element_type = element.get_attribute("type")
        if isinstance(element_type, str) and element_type.lower() in self.type_map:
            return self.type_map[element_type.lower()]
        return self.default_helper

    def get_helper(self, name: str):
        if self.view is not None:
            return self.view.plugin(name)
        from bootstrap_form.service_container.ConfigProvider import create_helper

        helper = create_helper(name)
        helper.set_translator(self.translator, self.text_domain)
        helper.doctype_helper = self.doctype_helper
        return helper

    def render(self, element: Element) -> str:
        name = self.resolve_helper_name(element)
        logger.debug("Rendering %r with %s", element, name)
        helper = self.get_helper(name)
        helper.set_indent(self.get_indent())
        return helper.render(element)
