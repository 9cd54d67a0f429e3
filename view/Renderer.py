import logging

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from bootstrap_form.core_services.Doctype import HTML5, Doctype
from bootstrap_form.core_services.Escaper import EscapeHtml, EscapeHtmlAttr
from bootstrap_form.core_services.Translator import DEFAULT_TEXT_DOMAIN

logger = logging.getLogger("bootstrap_form.view")


class Renderer:
    """
    The view helpers belong to: hands out helpers by name and renders partials.

    Helpers ask the renderer for siblings (``plugin("form_label")``), the
    shared escapers, the doctype and the translator.
    """

    def __init__(self, plugin_manager=None, translator=None, doctype: str | Doctype = HTML5,
                 environment: Environment | None = None, text_domain: str = DEFAULT_TEXT_DOMAIN,
                 template_path: str | None = None):
        if plugin_manager is None:
            from bootstrap_form.service_container.ConfigProvider import create_plugin_manager

            plugin_manager = create_plugin_manager()
        if environment is None:
            environment = Environment(
                loader=FileSystemLoader(template_path or "templates"),
                autoescape=select_autoescape(["html", "htm", "xml", "j2"]),
            )

        self.translator = translator
        self.text_domain = text_domain
        self.doctype = doctype if isinstance(doctype, Doctype) else Doctype(doctype)
        self.escape_html = EscapeHtml()
        self.escape_html_attr = EscapeHtmlAttr()
        self.environment = environment
        self.plugin_manager = plugin_manager
        self.plugin_manager.set_view(self)
        self.plugin_manager.set_translator(translator, text_domain)

    def plugin(self, name: str):
        return self.plugin_manager.get(name)

    def __getattr__(self, name: str):
        # view.form_row(element) style access
        if name.startswith("form") and "plugin_manager" in self.__dict__ and self.plugin_manager.has(name):
            return self.plugin_manager.get(name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def set_translator(self, translator, text_domain: str | None = None):
        self.translator = translator
        if text_domain is not None:
            self.text_domain = text_domain
        self.plugin_manager.set_translator(translator, self.text_domain)
        return self

    def render(self, template: str, **variables) -> Markup:
        logger.debug("Rendering partial %s", template)
        return Markup(self.environment.get_template(template).render(view=self, **variables))
