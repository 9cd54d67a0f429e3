from unittest import TestCase

from bootstrap_form.core_services.Doctype import HTML4_STRICT, Doctype
from bootstrap_form.form.Collection import Collection
from bootstrap_form.form.Exceptions import HelperRuntimeError, InvalidArgumentError, ServiceNotFoundError
from bootstrap_form.form.Fieldset import Fieldset
from bootstrap_form.form.Form import Form as FormElement
from bootstrap_form.form.Inputs import Submit, Text
from bootstrap_form.service_container.HelperPluginManager import HelperPluginManager
from bootstrap_form.view.Form import Form
from bootstrap_form.view.FormCollection import FormCollection
from bootstrap_form.view.Renderer import Renderer


def address_fieldset(**options):
    return Fieldset("address", {"label": "Address", **options}).add(Text("street", {"label": "Street"}))


class TestFormCollection(TestCase):
    def test_wrapped_fieldset(self):
        assert FormCollection()(address_fieldset()) == (
            '<fieldset name="address">\n'
            "    <legend class=\"\"><span>Address</span></legend>\n"
            "    <div>\n"
            '        <label class="form-label">Street</label>\n'
            '        <input type="text" name="street" value="" class="form-control">\n'
            "    </div>\n"
            "</fieldset>"
        )

    def test_without_wrap(self):
        assert FormCollection()(address_fieldset(), wrap=False) == (
            "    <div>\n"
            '        <label class="form-label">Street</label>\n'
            '        <input type="text" name="street" value="" class="form-control">\n'
            "    </div>\n"
        )

    def test_legend_with_id_and_classes(self):
        fieldset = address_fieldset(label_attributes={"class": "h5"}).set_attribute("id", "address")
        rendered = FormCollection()(fieldset)
        assert rendered.startswith('<fieldset name="address" id="address">\n    <legend class="h5">Address</legend>\n')

    def test_html4_drops_name(self):
        helper = FormCollection()
        helper.doctype_helper = Doctype(HTML4_STRICT)
        assert helper(address_fieldset()).startswith("<fieldset>\n")

    def test_nested_fieldsets(self):
        outer = Fieldset("person").add(address_fieldset())
        rendered = FormCollection()(outer)
        assert rendered.startswith('<fieldset name="person">\n    <fieldset name="address">\n')
        assert "            <label class=\"form-label\">Street</label>\n" in rendered
        assert rendered.endswith("    </fieldset>\n</fieldset>")

    def test_helper_state_is_restored(self):
        helper = FormCollection().set_indent(2)
        helper(Fieldset("person").add(address_fieldset()))
        assert helper.get_indent() == "  "
        assert helper.should_wrap()

    def test_as_card(self):
        rendered = FormCollection()(address_fieldset(**{"as-card": True}))
        assert rendered == (
            "<div>\n"
            '    <div class="card">\n'
            '    <fieldset name="address" class="card-body">\n'
            '            <legend class="card-title"><span>Address</span></legend>\n'
            "            <div>\n"
            '                <label class="form-label">Street</label>\n'
            '                <input type="text" name="street" value="" class="form-control">\n'
            "            </div>\n"
            "        </fieldset>\n"
            "    </div>\n"
            "</div>"
        )

    def test_as_card_legend_takes_form_column_classes(self):
        form = FormElement("f", {"col_attributes": {"class": "col-12"}})
        fieldset = address_fieldset(**{"as-card": True, "form": form, "label_attributes": {"class": "h5"}})
        rendered = FormCollection()(fieldset)
        assert '<legend class="col-12 card-title"><span>Address</span></legend>' in rendered

    def test_requires_fieldset(self):
        with self.assertRaises(InvalidArgumentError):
            FormCollection()(Text("x"))

    def test_view_without_row_helper(self):
        helper = FormCollection().set_view(Renderer(plugin_manager=HelperPluginManager()))
        with self.assertRaises(HelperRuntimeError) as caught:
            helper(address_fieldset())
        assert isinstance(caught.exception.__cause__, ServiceNotFoundError)


class TestCollectionTemplate(TestCase):
    def test_template_follows_children(self):
        collection = Collection("phones", {
            "target_element": {"type": "tel", "name": "phone"},
            "count": 2,
            "should_create_template": True,
            "template_attributes": {"id": "phone-template"},
        })
        form = FormElement("f").add(collection)
        rendered = Form()(form)

        assert 'name="phones[0]"' in rendered
        assert 'name="phones[1]"' in rendered
        assert rendered.count("<input") == 3
        assert (
            "        </div>\n"
            '        <template id="phone-template">        <div>\n'
            '            <input type="tel" name="phones[__index__]" value="" class="form-control">\n'
            "        </div>\n"
            "    </template>\n"
            "    </fieldset>\n"
            "</form>\n"
        ) in rendered

    def test_template_without_wrap(self):
        collection = Collection("phones", {
            "target_element": {"type": "tel", "name": "phone"},
            "count": 1,
            "should_create_template": True,
        })
        FormElement("f").add(collection).prepare()
        assert FormCollection()(collection, wrap=False) == (
            "    <div>\n"
            '        <input type="tel" name="phones[0]" value="" class="form-control">\n'
            "    </div>\n"
            "    <template>    <div>\n"
            '        <input type="tel" name="phones[__index__]" value="" class="form-control">\n'
            "    </div>\n"
            "</template>\n"
        )


class TestFormHelper(TestCase):
    def test_render(self):
        form = FormElement("contact")
        form.add(Text("name", {"label": "Name"}).set_attribute("id", "name"))
        form.add(Submit("send").set_value("Send"))
        assert Form()(form) == (
            "\n"
            '<form method="POST" name="contact" role="form" class="" id="contact">\n'
            "    <div>\n"
            '        <label class="form-label" for="name">Name</label>\n'
            '        <input type="text" name="name" id="name" value="" class="form-control">\n'
            "    </div>\n"
            "    <div>\n"
            '        <input type="submit" name="send" value="Send" class="btn">\n'
            "    </div>\n"
            "</form>\n"
        )

    def test_open_tag_layouts(self):
        helper = Form()
        assert helper.open_tag() == "<form>"
        assert helper.open_tag(FormElement("f", {"layout": "vertical"})) == (
            '<form method="POST" name="f" role="form" class="row" id="f">'
        )
        assert 'class="row row-cols-lg-auto align-items-center"' in helper.open_tag(
            FormElement("f", {"layout": "inline"})
        )
        assert 'class="card"' in helper.open_tag(FormElement("f", {"layout": "vertical", "as-card": True}))

    def test_floating_labels_imply_vertical(self):
        form = FormElement("f", {"floating-labels": True}).add(Text("email", {"label": "Email"}))
        rendered = Form()(form)
        assert 'class="row"' in rendered
        assert '<div class="form-floating flex-fill">' in rendered

    def test_html4_defaults(self):
        helper = Form()
        helper.doctype_helper = Doctype(HTML4_STRICT)
        assert helper.open_tag(FormElement("f")) == '<form action="" method="POST" name="f" role="form" class="" id="f">'

    def test_required_mark(self):
        form = FormElement("f", {"form-required-mark": '<div class="mark">* required</div>', "field-required-mark": "*"})
        form.set_input_filter({"name": {"required": True}})
        form.add(Text("name", {"label": "Name"}).set_attribute("id", "name"))
        assert Form().set_indent(2)(form) == (
            "\n"
            '  <form method="POST" name="f" role="form" class="" id="f">\n'
            "      <div>\n"
            '          <label class="form-label" for="name">Name*</label>\n'
            '          <input type="text" name="name" id="name" required="required" value="" class="form-control">\n'
            "      </div>\n"
            '      <div class="mark">* required</div>\n'
            "  </form>\n"
        )

    def test_validation_errors_are_escaped(self):
        form = FormElement("f").add(Text("name", {"label": "Name"}).set_attribute("id", "name"))
        form.set_input_filter({"name": {"required": True}})
        form.set_data({"name": ""})
        form.is_valid()
        rendered = Form()(form)
        assert "<li>Value is required and can&#39;t be empty</li>" in rendered
        assert 'class="form-control is-invalid"' in rendered
        assert form.get_option("was-validated") is True

    def test_fieldsets_are_wrapped(self):
        form = FormElement("f").add(address_fieldset())
        rendered = Form()(form)
        assert '    <fieldset name="address">\n        <legend class=""><span>Address</span></legend>\n' in rendered
