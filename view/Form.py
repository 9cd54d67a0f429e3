from typing import Self

from bootstrap_form.form.Element import Element
from bootstrap_form.form.Exceptions import DomainError
from bootstrap_form.form.Fieldset import Fieldset
from bootstrap_form.view.AbstractHelper import EOL, LAYOUT_INLINE, LAYOUT_VERTICAL, AbstractHelper, logger
from bootstrap_form.view.FormCollection import FormCollection
from bootstrap_form.view.FormRow import FormRow

FORM_ATTRIBUTES = frozenset({
    "accept-charset", "action", "autocomplete", "enctype", "method", "name", "novalidate", "target",
})


class Form(AbstractHelper):
    """
    Renders a whole form: the opening tag, one row per element, fieldsets
    through the collection helper and the required mark at the end.
    """

    valid_tag_attributes = FORM_ATTRIBUTES

    def __init__(self):
        super().__init__()
        self.element_helper: FormRow | None = None
        self.fieldset_helper: FormCollection | None = None

    def __call__(self, form: Element | None = None):
        if form is None:
            return self
        return self.render(form)

    def set_element_helper(self, helper: FormRow | None) -> Self:
        self.element_helper = helper
        return self

    def get_element_helper(self) -> FormRow:
        if self.element_helper is None:
            self.element_helper = self.plugin("form_row", FormRow)
        return self.element_helper

    def set_fieldset_helper(self, helper: FormCollection | None) -> Self:
        self.fieldset_helper = helper
        return self

    def get_fieldset_helper(self) -> FormCollection:
        if self.fieldset_helper is None:
            self.fieldset_helper = self.plugin("form_collection", FormCollection)
        return self.fieldset_helper

    def render(self, form: Element) -> str:
        if hasattr(form, "prepare"):
            form.prepare()

        logger.debug("Rendering form %r", form)

        indent = self.get_indent()
        form_content = EOL + indent + self.open_tag(form) + EOL
        layout = form.get_option("layout")
        required_mark = form.get_option("form-required-mark")
        field_required_mark = form.get_option("field-required-mark")
        was_validated = form.get_option("was-validated")

        element_helper = self.get_element_helper()
        fieldset_helper = self.get_fieldset_helper()

        for element in form:
            element.set_option("form", form)
            if was_validated is not None and element.get_option("was-validated") is None:
                element.set_option("was-validated", was_validated)
            if not element.get_option("layout"):
                element.set_option("layout", layout)
            if required_mark and field_required_mark:
                element.set_option("show-required-mark", True)
                element.set_option("field-required-mark", field_required_mark)
            if layout in (LAYOUT_VERTICAL, LAYOUT_INLINE) and form.get_option("floating-labels"):
                element.set_option("floating", True)

            if isinstance(element, Fieldset):
                fieldset_helper.set_indent(indent + self.get_whitespace(4))
                fieldset_helper.set_should_wrap(True)
                form_content += fieldset_helper.render(element) + EOL
            else:
                element_helper.set_indent(indent + self.get_whitespace(4))
                form_content += element_helper.render(element) + EOL

        if required_mark:
            form_content += indent + self.get_whitespace(4) + required_mark + EOL

        return form_content + indent + self.close_tag() + EOL

    def open_tag(self, form: Element | None = None) -> str:
        attributes = {}
        if not self.get_doctype_helper().is_html5():
            attributes = {"action": "", "method": "get"}

        if form is not None:
            if not form.has_attribute("role"):
                form.set_attribute("role", "form")

            try:
                form.get_data()
                was_validated = True
            except DomainError:
                was_validated = False
            form.set_option("was-validated", was_validated)

            layout = form.get_option("layout")
            if layout is None and form.get_option("floating-labels"):
                layout = LAYOUT_VERTICAL
                form.set_option("layout", layout)

            classes = [form.get_attribute("class")]
            if layout == LAYOUT_VERTICAL:
                classes.append("card" if form.get_option("as-card") else "row")
            elif layout == LAYOUT_INLINE:
                classes.append("row row-cols-lg-auto align-items-center")
            form.set_attribute("class", self.combine_classes(*classes))

            form_attributes = form.get_attributes()
            if "id" not in form_attributes and "name" in form_attributes:
                form_attributes["id"] = form_attributes["name"]
            attributes.update(form_attributes)

        if not attributes:
            return "<form>"
        return f"<form {self.create_attributes_string(attributes)}>"

    @staticmethod
    def close_tag() -> str:
        return "</form>"
