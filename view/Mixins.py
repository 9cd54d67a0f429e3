from typing import Self

from bootstrap_form.form.Inputs import Hidden
from bootstrap_form.view.AbstractHelper import LABEL_APPEND
from bootstrap_form.view.FormHtml import FormHtml
from bootstrap_form.view.FormInput import FormHidden
from bootstrap_form.view.FormLabel import FormLabel


class HtmlHelperMixin:
    html_helper: FormHtml | None = None

    def get_html_helper(self) -> FormHtml:
        if self.html_helper is None:
            self.html_helper = self.plugin("form_html", FormHtml)
        return self.html_helper

    def set_html_helper(self, helper: FormHtml) -> Self:
        self.html_helper = helper
        return self


class LabelHelperMixin:
    label_helper: FormLabel | None = None

    def get_label_helper(self) -> FormLabel:
        if self.label_helper is None:
            self.label_helper = self.plugin("form_label", FormLabel)
        return self.label_helper

    def set_label_helper(self, helper: FormLabel) -> Self:
        self.label_helper = helper
        return self


class HiddenHelperMixin:
    hidden_helper: FormHidden | None = None

    def get_hidden_helper(self) -> FormHidden:
        if self.hidden_helper is None:
            self.hidden_helper = self.plugin("form_hidden", FormHidden)
        return self.hidden_helper

    def set_hidden_helper(self, helper: FormHidden) -> Self:
        self.hidden_helper = helper
        return self

    def render_hidden(self, name: str, value) -> str:
        """A bare hidden input, without the indent the shared hidden helper may carry."""
        helper = self.get_hidden_helper()
        indent = helper.get_indent()
        try:
            return helper.set_indent("").render(Hidden(name).set_value(value))
        finally:
            helper.set_indent(indent)


class LabelPositionMixin:
    label_position = LABEL_APPEND

    def set_label_position(self, label_position: str) -> Self:
        self.label_position = self.validate_label_position(label_position)
        return self

    def get_label_position(self) -> str:
        return self.label_position
