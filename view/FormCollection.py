from typing import Self

from bootstrap_form.form.Collection import Collection
from bootstrap_form.form.Element import Element
from bootstrap_form.form.Exceptions import HelperRuntimeError, InvalidArgumentError, ServiceNotFoundError
from bootstrap_form.form.Fieldset import Fieldset
from bootstrap_form.view.AbstractHelper import AbstractHelper, EOL
from bootstrap_form.view.Mixins import HtmlHelperMixin


class FormCollection(HtmlHelperMixin, AbstractHelper):
    """
    Renders every child of a fieldset or collection, one row per line.

    Nested fieldsets go through the fieldset helper (this helper unless
    another one is set), plain elements through the row helper. With
    ``should_wrap`` the markup is wrapped in a ``<fieldset>`` with a legend,
    and the ``as-card`` option puts that fieldset inside a Bootstrap card.
    """

    def __init__(self):
        super().__init__()
        self.should_wrap_flag = True
        self.element_helper = None
        self.fieldset_helper: "FormCollection | None" = None

    def __call__(self, element: Element | None = None, wrap: bool = True):
        if element is None:
            return self
        self.set_should_wrap(wrap)
        return self.render(element)

    def set_should_wrap(self, wrap: bool) -> Self:
        self.should_wrap_flag = bool(wrap)
        return self

    def should_wrap(self) -> bool:
        return self.should_wrap_flag

    def set_element_helper(self, helper) -> Self:
        self.element_helper = helper
        return self

    def get_element_helper(self):
        """The row helper; a view without one raises ``HelperRuntimeError``."""
        if self.element_helper is None:
            from bootstrap_form.view.FormRow import FormRow

            try:
                self.element_helper = self.plugin("form_row", FormRow)
            except ServiceNotFoundError as e:
                raise HelperRuntimeError(str(e)) from e
        return self.element_helper

    def set_fieldset_helper(self, helper: "FormCollection") -> Self:
        self.fieldset_helper = helper
        return self

    def get_fieldset_helper(self) -> "FormCollection":
        return self.fieldset_helper or self

    def render(self, element: Element) -> str:
        if not isinstance(element, Fieldset):
            raise InvalidArgumentError(
                f"{type(self).__name__}.render requires that the element is of type Fieldset, "
                f"but was {type(element).__name__}"
            )

        markup = ""
        template_markup = ""
        indent = self.get_indent()
        base_indent = indent
        as_card = element.get_option("as-card")
        wrap = self.should_wrap()

        if wrap and as_card:
            indent += self.get_whitespace(8)

        if isinstance(element, Collection) and element.should_create_template_element():
            template_markup = self.render_template(element, indent)

        form = element.get_option("form")
        layout = element.get_option("layout")
        floating = element.get_option("floating")
        required_mark = element.get_option("field-required-mark")
        show_required_mark = element.get_option("show-required-mark") and required_mark

        element_helper = self.get_element_helper()
        fieldset_helper = self.get_fieldset_helper()

        for child in element:
            child.set_option("was-validated", element.get_option("was-validated"))
            if form is not None and not child.get_option("form"):
                child.set_option("form", form)
            if layout is not None and not child.get_option("layout"):
                child.set_option("layout", layout)
            if floating:
                child.set_option("floating", True)
            if show_required_mark:
                child.set_option("show-required-mark", True)
                child.set_option("field-required-mark", required_mark)

            if isinstance(child, Fieldset):
                # the helper may be this one, so its state is restored afterwards
                saved_indent = fieldset_helper.get_indent()
                saved_wrap = fieldset_helper.should_wrap()
                fieldset_helper.set_indent(indent + self.get_whitespace(4))
                fieldset_helper.set_should_wrap(wrap)
                try:
                    markup += fieldset_helper.render(child) + EOL
                finally:
                    fieldset_helper.set_indent(saved_indent)
                    fieldset_helper.set_should_wrap(saved_wrap)
            else:
                child.set_option("fieldset", element)
                element_helper.set_indent(indent + self.get_whitespace(4))
                markup += element_helper.render(child) + EOL

        if not wrap:
            return markup + template_markup

        attributes = element.get_attributes()
        if not self.get_doctype_helper().is_html5():
            for key in ("name", "disabled", "form"):
                attributes.pop(key, None)

        html_helper = self.get_html_helper()
        label = element.get_label() or ""
        legend = ""
        if label != "":
            label = self.escape_label(element, self.translate_label(label))
            if not element.has_attribute("id") or element.get_label_option("always_wrap"):
                label = f"<span>{label}</span>"

            label_attributes = dict(element.get_option("label_attributes") or {})
            label_attributes["class"] = self.combine_classes(label_attributes.get("class"))
            if as_card:
                label_attributes = self.merge_form_attributes(element, "col_attributes", ["card-title"], label_attributes)

            legend = EOL + indent + self.get_whitespace(4) + html_helper.render("legend", label_attributes, label)

        if as_card:
            attributes["class"] = self.combine_classes(["card-body"], attributes.get("class"))

        markup = base_indent + html_helper.render(
            "fieldset", attributes, legend + EOL + markup + template_markup + indent
        )

        if as_card:
            card_indent = base_indent + self.get_whitespace(4)
            markup = EOL + card_indent + html_helper.render(
                "div",
                self.merge_attributes(element, "card_attributes", ["card"]),
                EOL + card_indent + markup + EOL + card_indent,
            )
            markup = base_indent + html_helper.render(
                "div", self.merge_attributes(element, "col_attributes", []), markup + EOL + base_indent
            )

        return markup

    def render_template(self, collection: Collection, indent: str = "") -> str:
        """The collection's template element inside a ``<template>`` tag, or an empty string."""
        template_element = collection.get_template_element()
        if template_element is None:
            return ""

        if isinstance(template_element, Fieldset):
            fieldset_helper = self.get_fieldset_helper()
            saved_indent = fieldset_helper.get_indent()
            saved_wrap = fieldset_helper.should_wrap()
            fieldset_helper.set_indent(indent + self.get_whitespace(4))
            fieldset_helper.set_should_wrap(self.should_wrap())
            try:
                template_markup = fieldset_helper.render(template_element) + EOL
            finally:
                fieldset_helper.set_indent(saved_indent)
                fieldset_helper.set_should_wrap(saved_wrap)
        else:
            element_helper = self.get_element_helper()
            element_helper.set_indent(indent + self.get_whitespace(4))
            template_markup = element_helper.render(template_element) + EOL

        template_attributes = collection.get_option("template_attributes") or {}
        return (
            indent + self.get_whitespace(4)
            + self.get_html_helper().render(
                "template", template_attributes, template_markup + indent
            )
            + EOL
        )

    @staticmethod
    def merge_attributes(element: Element, option_name: str, classes: list) -> dict:
        attributes = dict(element.get_option(option_name) or {})
        classes = list(classes)
        if "class" in attributes:
            classes.extend(str(attributes.pop("class")).split(" "))
        if classes:
            attributes["class"] = " ".join(dict.fromkeys(classes))
        return attributes

    @staticmethod
    def merge_form_attributes(element: Element, option_name: str, classes: list, attributes: dict) -> dict:
        """Form option attributes under ``attributes``; form classes come first."""
        classes = [item for item in classes if item]
        form = element.get_option("form")
        if form is not None:
            form_attributes = dict(form.get_option(option_name) or {})
            if "class" in form_attributes:
                classes = str(form_attributes.pop("class")).split(" ") + classes
            attributes = {**form_attributes, **attributes}
        if classes:
            attributes["class"] = " ".join(dict.fromkeys(classes))
        return attributes
