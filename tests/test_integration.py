import contextlib
import io
import json
import os
import tempfile
from pathlib import Path
from unittest import TestCase, mock

from flask import Flask, render_template_string

from bootstrap_form import BootstrapForm, Factory, Settings, get_renderer
from bootstrap_form.manage import main
from bootstrap_form.view.Renderer import Renderer

CONTACT_SPEC = {
    "name": "contact",
    "elements": [
        {"spec": {"type": "text", "name": "name", "options": {"label": "Name"}, "attributes": {"id": "name"}}},
    ],
    "input_filter": {"name": {"required": True}},
}


@contextlib.contextmanager
def spec_file(content):
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "contact.json"
        path.write_text(content if isinstance(content, str) else json.dumps(content), encoding="utf-8")
        yield str(path)


@contextlib.contextmanager
def captured_output():
    stdout, stderr = io.StringIO(), io.StringIO()
    with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
        yield stdout, stderr


class TestFlaskIntegration(TestCase):
    def setUp(self):
        self.app = Flask(__name__)
        BootstrapForm(self.app, settings=Settings())

    def test_registers_renderer(self):
        renderer = get_renderer(self.app)
        assert isinstance(renderer, Renderer)
        assert renderer.environment is self.app.jinja_env
        assert isinstance(self.app.config["BOOTSTRAP_FORM_SETTINGS"], Settings)

    def test_keyword_overrides(self):
        app = Flask(__name__)
        BootstrapForm(app, settings=Settings(), doctype="XHTML5", indent=4)
        assert app.config["BOOTSTRAP_FORM_SETTINGS"].indent == 4
        assert get_renderer(app).doctype.is_xhtml()

    def test_template_globals_render_markup(self):
        element = Factory().create({"type": "email", "name": "email", "options": {"label": "Email"}})
        element.set_attribute("id", "email")
        with self.app.app_context():
            rendered = render_template_string("{{ form_row(element) }}", element=element)
            label = render_template_string("{{ form_label(element) }}", element=element)
            indented = render_template_string("{{ form_element(element, indent=2) }}", element=element)
        assert '<input type="email" name="email" id="email" value="" class="form-control">' in rendered
        assert label == '<label for="email">Email</label>'
        assert indented == '  <input type="email" name="email" id="email" value="" class="form-control">'

    def test_form_global(self):
        form = Factory().create_form(CONTACT_SPEC)
        with self.app.app_context():
            rendered = render_template_string("{{ form(contact) }}", contact=form)
        assert '<form method="POST" name="contact" role="form" class="" id="contact">' in rendered
        assert 'required="required"' in rendered

    def test_render_form_command(self):
        runner = self.app.test_cli_runner()
        with spec_file(CONTACT_SPEC) as path:
            result = runner.invoke(args=["render-form", path, "--indent", "2"])
        assert result.exit_code == 0
        assert result.output.startswith('\n  <form method="POST" name="contact" role="form" class="" id="contact">\n')
        assert result.output.endswith("  </form>\n")

    def test_render_form_command_reports_bad_json(self):
        runner = self.app.test_cli_runner()
        with spec_file("{not json") as path:
            result = runner.invoke(args=["render-form", path])
        assert "Error: The form spec is not valid JSON" in result.output


class TestManage(TestCase):
    def run_main(self, argv):
        with mock.patch.dict(os.environ, {}, clear=True), captured_output() as (stdout, stderr):
            exit_code = main(argv)
        return exit_code, stdout.getvalue(), stderr.getvalue()

    def test_render(self):
        with spec_file({**CONTACT_SPEC, "data": {"name": ""}}) as path:
            exit_code, output, _ = self.run_main(["render", path])
        assert exit_code == 0
        assert output.startswith('\n<form method="POST" name="contact" role="form" class="" id="contact">\n')
        assert "<li>Value is required and can&#39;t be empty</li>" in output

    def test_render_with_doctype(self):
        with spec_file(CONTACT_SPEC) as path:
            exit_code, output, _ = self.run_main(["render", path, "--doctype", "html4_strict", "--indent", "4"])
        assert exit_code == 0
        assert '    <form action="" method="POST" name="contact" role="form" class="" id="contact">' in output

    def test_missing_file(self):
        exit_code, output, errors = self.run_main(["render", "/nonexistent/contact.json"])
        assert exit_code == 1
        assert output == ""
        assert "Error: Unable to read the form spec" in errors

    def test_unknown_element_type(self):
        with spec_file({"name": "f", "elements": [{"type": "signature", "name": "s"}]}) as path:
            exit_code, _, errors = self.run_main(["render", path])
        assert exit_code == 1
        assert "Error: Unable to render the form spec" in errors

    def test_no_command_prints_help(self):
        exit_code, output, _ = self.run_main([])
        assert exit_code == 0
        assert "render" in output
