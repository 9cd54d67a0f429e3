from unittest import TestCase

from jinja2 import DictLoader, Environment

from bootstrap_form.core_services.Translator import DictTranslator
from bootstrap_form.form.Checkbox import Checkbox, MultiCheckbox
from bootstrap_form.form.Fieldset import Fieldset
from bootstrap_form.form.Form import Form
from bootstrap_form.form.Inputs import Hidden, Submit, Text
from bootstrap_form.view.FormRow import FormRow
from bootstrap_form.view.Renderer import Renderer


def email_field(**options):
    return Text("email", {"label": "Email", **options}).set_attribute("id", "email")


class TestVerticalRow(TestCase):
    def test_text_row(self):
        assert FormRow()(email_field()) == (
            "<div>\n"
            '    <label class="form-label" for="email">Email</label>\n'
            '    <input type="text" name="email" id="email" value="" class="form-control">\n'
            "</div>"
        )

    def test_errors(self):
        element = email_field().set_messages(["Required"])
        assert FormRow()(element) == (
            "<div>\n"
            '    <label class="form-label" for="email">Email</label>\n'
            '    <input type="text" name="email" id="email" class="form-control is-invalid" '
            'aria-describedby="emailFeedback" value="">\n'
            '    <div class="invalid-feedback" id="emailFeedback">\n'
            "        <ul>\n"
            "            <li>Required</li>\n"
            "        </ul>\n"
            "    </div>\n"
            "</div>"
        )

    def test_errors_can_be_skipped(self):
        element = email_field().set_messages(["Required"])
        assert "invalid-feedback" not in FormRow()(element, render_errors=False)

    def test_help_content(self):
        element = email_field(help_content="We never share.")
        assert FormRow()(element) == (
            '<div class="has-help">\n'
            '    <label class="form-label" for="email">Email</label>\n'
            '    <input type="text" name="email" id="email" aria-describedby="emailHelp" value="" '
            'class="form-control">\n'
            '    <div class="toast" id="emailHelp">We never share.</div>\n'
            "</div>"
        )

    def test_help_with_header(self):
        element = email_field(help_content={"header": "Note", "content": "Private"})
        rendered = FormRow()(element)
        assert (
            '    <div class="toast" id="emailHelp">\n'
            '        <div class="toast-header">Note</div>\n'
            '        <div class="toast-body">Private</div>\n'
            "    </div>\n"
        ) in rendered

    def test_extra_messages(self):
        element = email_field(messages=[{"content": "Looks good", "attributes": {"class": "valid-feedback", "id": "ok"}}])
        rendered = FormRow()(element)
        assert '\n    <div class="valid-feedback" id="ok">Looks good</div>\n</div>' in rendered
        assert 'aria-describedby="ok"' in rendered

    def test_floating_label(self):
        assert FormRow()(email_field(floating=True)) == (
            "<div>\n"
            '    <div class="form-floating flex-fill">\n'
            '        <input type="text" name="email" id="email" value="" class="form-control">\n'
            '        <label class="form-label" for="email">Email</label>\n'
            "    </div>\n"
            "</div>"
        )

    def test_input_group(self):
        element = email_field(**{
            "in-group": True,
            "group-prefixes": [{"content": "@", "attributes": {"class": "input-group-text"}}],
        })
        assert FormRow()(element) == (
            "<div>\n"
            '    <label class="form-label" for="email">Email</label>\n'
            '    <div class="input-group has-validation">\n'
            '        <div class="input-group-text">@</div>\n'
            '        <input type="text" name="email" id="email" value="" class="form-control">\n'
            "    </div>\n"
            "</div>"
        )

    def test_label_is_translated_and_escaped(self):
        helper = FormRow().set_translator(DictTranslator({"default": {"Email": "E-Mail <Adresse>"}}))
        assert '<label class="form-label" for="email">E-Mail &lt;Adresse&gt;</label>' in helper(email_field())

    def test_without_label(self):
        assert FormRow()(Text("q")) == (
            "<div>\n"
            '    <input type="text" name="q" value="" class="form-control">\n'
            "</div>"
        )

    def test_hidden_has_no_wrapper(self):
        helper = FormRow().set_indent(4)
        assert helper(Hidden("csrf").set_value("abc")) == '    <input type="hidden" name="csrf" value="abc">'

    def test_submit(self):
        assert FormRow()(Submit("send").set_value("Send")) == (
            "<div>\n"
            '    <input type="submit" name="send" value="Send" class="btn">\n'
            "</div>"
        )

    def test_checkbox(self):
        element = Checkbox("agree", {"label": "Agree"}).set_attribute("id", "agree")
        assert FormRow()(element) == (
            "<div>\n"
            '            <div class="form-check">\n'
            '            <input type="hidden" name="agree" value="0">\n'
            '            <input type="checkbox" name="agree" id="agree" value="1" class="form-check-input">\n'
            '            <label for="agree" class="form-check-label">Agree</label>\n'
            "        </div>\n"
            "</div>"
        )

    def test_multi_checkbox_gets_a_legend(self):
        element = MultiCheckbox("colors", {"label": "Colors", "value_options": {"r": "Red"}})
        rendered = FormRow()(element)
        assert rendered.startswith("<fieldset>\n    <legend class=\"form-label\">Colors</legend>\n")
        assert rendered.endswith("</fieldset>")
        assert '    <div class="form-check">\n' in rendered

    def test_as_form_control_container(self):
        element = MultiCheckbox("colors", {"label": "Colors", "value_options": {"r": "Red"}, "as-form-control": True})
        rendered = FormRow()(element)
        assert '\n    <div class="form-control has-validation">\n        <div class="form-check">' in rendered


class TestHorizontalRow(TestCase):
    def test_text_row(self):
        element = Text("name", {
            "label": "Name",
            "layout": "horizontal",
            "col_attributes": {"class": "col-sm-10"},
            "label_col_attributes": {"class": "col-sm-2"},
        }).set_attribute("id", "name")
        assert FormRow()(element) == (
            '<div class="row">\n'
            '    <label class="col-form-label col-sm-2" for="name">Name</label>\n'
            '    <div class="col-sm-10">\n'
            '        <input type="text" name="name" id="name" value="" class="form-control">\n'
            "    </div>\n"
            "</div>"
        )

    def test_layout_from_form(self):
        form = Form("f", {"layout": "horizontal", "row_attributes": {"class": "mb-3"}})
        element = Text("name", {"label": "Name", "form": form})
        assert FormRow()(element).startswith('<div class="row mb-3">')

    def test_checkbox(self):
        element = Checkbox("agree", {"label": "Agree", "layout": "horizontal", "use_hidden_element": False})
        element.set_attribute("id", "agree")
        assert FormRow()(element) == (
            '<div class="row">\n'
            "    <div>\n"
            '                    <div class="form-check">\n'
            '                <input type="checkbox" name="agree" id="agree" value="1" class="form-check-input">\n'
            '                <label for="agree" class="form-check-label">Agree</label>\n'
            "            </div>\n"
            "    </div>\n"
            "</div>"
        )


class TestRowWithForm(TestCase):
    def test_required_from_input_filter_and_mark(self):
        form = Form("f", {"form-required-mark": "<div>* required</div>", "field-required-mark": "*"})
        form.set_input_filter({"name": {"required": True}})
        element = Text("name", {"label": "Name", "form": form}).set_attribute("id", "name")
        rendered = FormRow()(element)
        assert '<label class="form-label" for="name">Name*</label>' in rendered
        assert 'required="required"' in rendered

    def test_required_inside_fieldset(self):
        form = Form("f").set_input_filter({"address": {"type": "input_filter", "city": {"required": True}}})
        fieldset = Fieldset("address")
        element = Text("address[city]", {"form": form, "fieldset": fieldset})
        assert 'required="required"' in FormRow()(element)

    def test_valid_class_after_validation(self):
        element = Text("name", {"was-validated": True, "valid-class": "is-valid"})
        assert 'class="form-control is-valid"' in FormRow()(element)

    def test_error_class_option(self):
        element = Text("name", {"error-class": "border-danger"}).set_messages(["Bad"])
        assert 'class="form-control is-invalid border-danger"' in FormRow()(element)


class TestPartial(TestCase):
    def test_partial_receives_row_variables(self):
        environment = Environment(loader=DictLoader({
            "row.html": "{{ indent }}[{{ label }}|{{ element.get_name() }}|{{ label_position }}|{{ render_errors }}]",
        }))
        renderer = Renderer(environment=environment)
        helper = renderer.plugin("form_row")
        helper.set_indent(2)
        assert helper(Text("email", {"label": "Email"}), partial="row.html") == "  [Email|email|prepend|True]"
        helper.set_partial(None)
