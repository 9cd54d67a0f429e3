import click
import markupsafe
from dotenv import load_dotenv
from flask import Flask

from .core_services.ErrorHandler import ErrorHandler
from .core_services.Settings import Settings
from .form.Exceptions import BootstrapFormError, DomainError, InvalidArgumentError
from .form.Factory import Factory
from .service_container.ConfigProvider import create_plugin_manager
from .utilities.FormSpec import load_form_spec, render_form_spec
from .view.Renderer import Renderer

__version__ = "1.0.0"


def BootstrapForm(app: Flask, settings: Settings | None = None, translator=None, debug=False, **kwargs):
    """
    Wires the form helpers into a Flask application.

    Settings come from ``BOOTSTRAP_FORM_*`` environment variables (a ``.env``
    file is loaded first); keyword arguments override single fields, e.g.
    ``BootstrapForm(app, doctype="XHTML5", indent=4)``.

    The helpers are registered as Jinja globals (``form``, ``form_row``,
    ``form_element`` ...). A context variable with the same name shadows the
    global, so pass the form under another name: ``{{ form(contact) }}``.
    """
    load_dotenv()
    settings = settings or Settings.from_env()
    for key, value in kwargs.items():
        if hasattr(settings, key):
            setattr(settings, key, value)

    error_handler = ErrorHandler(
        log_to_file=settings.log_file,
        log_level="DEBUG" if debug else settings.log_level,
    )

    if translator is None:
        translator = settings.build_translator()

    renderer = Renderer(
        plugin_manager=create_plugin_manager(),
        translator=translator,
        doctype=settings.doctype,
        environment=app.jinja_env,
        text_domain=settings.text_domain,
    )

    app.extensions["bootstrap_form"] = renderer
    app.config.setdefault("BOOTSTRAP_FORM_SETTINGS", settings)
    error_handler.logger.debug("Bootstrap form helpers registered for %s", app.name)

    def render_with(helper_name, element, **options):
        helper = renderer.plugin(helper_name)
        helper.set_indent(options.pop("indent", settings.indent))
        return markupsafe.Markup(helper(element, **options))

    @app.template_global("form")
    def form(element):
        return render_with("form", element)

    @app.template_global("form_row")
    def form_row(element, **options):
        return render_with("form_row", element, **options)

    @app.template_global("form_collection")
    def form_collection(element, wrap=True, **options):
        return render_with("form_collection", element, wrap=wrap, **options)

    @app.template_global("form_element")
    def form_element(element, **options):
        return render_with("form_element", element, **options)

    @app.template_global("form_element_errors")
    def form_element_errors(element, attributes=None, **options):
        return render_with("form_element_errors", element, attributes=attributes, **options)

    @app.template_global("form_label")
    def form_label(element, label_content=None, position=None):
        return markupsafe.Markup(renderer.plugin("form_label")(element, label_content, position))

    @app.cli.command("render-form")
    @click.argument("spec_path", type=click.Path(exists=True, dir_okay=False))
    @click.option("--indent", default=None, help="Spaces (or a literal string) in front of every line")
    def render_form(spec_path, indent):
        """Render the form described by a JSON spec file."""
        with error_handler.handle_errors(
            {
                BootstrapFormError: "Unable to render the form spec",
                ValueError: "The form spec is not valid JSON",
            },
            fallback=lambda message, e: click.echo(f"Error: {message}: {e}", err=True),
        ):
            if indent is not None and indent.isdigit():
                indent = int(indent)
            click.echo(render_form_spec(load_form_spec(spec_path), renderer, indent or settings.indent), nl=False)

    return app


def get_renderer(app: Flask) -> Renderer:
    return app.extensions["bootstrap_form"]


__all__ = [
    "BootstrapForm",
    "BootstrapFormError",
    "DomainError",
    "ErrorHandler",
    "Factory",
    "InvalidArgumentError",
    "Renderer",
    "Settings",
    "get_renderer",
    "load_form_spec",
    "render_form_spec",
]
