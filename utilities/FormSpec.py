import json
import logging

from bootstrap_form.form.Factory import Factory

logger = logging.getLogger("bootstrap_form.cli")


def load_form_spec(path: str) -> dict:
    with open(path, 'r', encoding='utf-8') as file:
        return json.load(file)


def render_form_spec(spec: dict, renderer, indent: int | str = "") -> str:
    """
    Build a form from ``spec`` and render it with ``renderer``.

    A ``data`` key holds submitted values; when present the form is validated
    first so error messages show up in the markup.
    """
    spec = dict(spec)
    data = spec.pop("data", None)
    form = Factory().create_form(spec)

    if data is not None:
        form.set_data(data)
        if not form.is_valid():
            logger.info("Form %s did not validate: %s", form.get_name(), form.get_messages())

    helper = renderer.plugin("form")
    helper.set_indent(indent)
    return helper.render(form)
