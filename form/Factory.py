from typing import Any

from bootstrap_form.form.Checkbox import Checkbox, MultiCheckbox, Radio
from bootstrap_form.form.Collection import Collection
from bootstrap_form.form.DateSelect import DateSelect, DateTimeSelect, MonthSelect
from bootstrap_form.form.Element import Element
from bootstrap_form.form.Exceptions import InvalidArgumentError
from bootstrap_form.form.Fieldset import Fieldset
from bootstrap_form.form.Form import Form
from bootstrap_form.form.Inputs import (
    Button, Color, Date, DateTime, DateTimeLocal, Email, File, Hidden, Image, Month, Number, Password, Range,
    Reset, Search, Submit, Tel, Text, Textarea, Time, Url, Week,
)
from bootstrap_form.form.Select import Select

ELEMENT_TYPES: dict[str, type[Element]] = {
    "element": Element,
    "text": Text,
    "tel": Tel,
    "email": Email,
    "password": Password,
    "number": Number,
    "range": Range,
    "url": Url,
    "search": Search,
    "date": Date,
    "datetime": DateTime,
    "datetime-local": DateTimeLocal,
    "datetime_local": DateTimeLocal,
    "month": Month,
    "week": Week,
    "time": Time,
    "color": Color,
    "hidden": Hidden,
    "file": File,
    "image": Image,
    "submit": Submit,
    "reset": Reset,
    "textarea": Textarea,
    "button": Button,
    "select": Select,
    "checkbox": Checkbox,
    "multi_checkbox": MultiCheckbox,
    "multicheckbox": MultiCheckbox,
    "radio": Radio,
    "month_select": MonthSelect,
    "date_select": DateSelect,
    "date_time_select": DateTimeSelect,
    "datetime_select": DateTimeSelect,
    "fieldset": Fieldset,
    "collection": Collection,
    "form": Form,
}


class Factory:
    """
    Builds elements from plain dicts::

        Factory().create_form({
            "type": "form",
            "elements": [{"spec": {"type": "tel", "name": "phone", "options": {"label": "Phone"}}}],
            "input_filter": {"phone": {"required": True}},
        })
    """

    def __init__(self, element_types: dict[str, type[Element]] | None = None):
        self.element_types = dict(ELEMENT_TYPES)
        if element_types:
            self.element_types.update({key.lower(): value for key, value in element_types.items()})

    def resolve_type(self, element_type: Any) -> type[Element]:
        if isinstance(element_type, type) and issubclass(element_type, Element):
            return element_type
        if isinstance(element_type, str) and element_type.lower() in self.element_types:
            return self.element_types[element_type.lower()]
        raise InvalidArgumentError(
            f"{type(self).__name__} cannot create an element of type {element_type!r}; "
            f"known types are {', '.join(sorted(self.element_types))}"
        )

    def create(self, spec: dict) -> Element:
        element_class = self.resolve_type(spec.get("type", Element))
        element = element_class(spec.get("name"))

        if spec.get("options"):
            element.set_options(spec["options"])
        if spec.get("attributes"):
            element.set_attributes(spec["attributes"])

        if isinstance(element, Fieldset):
            self.prepare_and_inject_elements(element, spec.get("elements", []))
            self.prepare_and_inject_elements(element, spec.get("fieldsets", []))

        if isinstance(element, Form) and spec.get("input_filter") is not None:
            element.set_input_filter(spec["input_filter"])

        return element

    def create_form(self, spec: dict) -> Form:
        spec = dict(spec)
        spec.setdefault("type", Form)
        form = self.create(spec)
        if not isinstance(form, Form):
            raise InvalidArgumentError(
                f"{type(self).__name__}.create_form expected a Form type, got {type(form).__name__}"
            )
        return form

    def prepare_and_inject_elements(self, fieldset: Fieldset, elements: list) -> None:
        for item in elements:
            if isinstance(item, Element):
                fieldset.add(item)
                continue
            if "spec" in item:
                fieldset.add(self.create(item["spec"]), item.get("flags"))
            else:
                fieldset.add(self.create(item))
