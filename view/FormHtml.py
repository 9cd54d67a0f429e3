from bootstrap_form.view.AbstractHelper import AbstractHelper

# attributes accepted per tag besides the global ones
TAG_ATTRIBUTES = {
    "fieldset": frozenset({"disabled", "form", "name"}),
    "label": frozenset({"for", "form"}),
    "legend": frozenset(),
    "template": frozenset(),
}


class FormHtml(AbstractHelper):
    """Wraps content in an arbitrary tag: ``render("div", {"class": "row"}, content)``."""

    def __call__(self, tag: str | None = None, attributes: dict | None = None, content: str = ""):
        if tag is None:
            return self
        return self.render(tag, attributes or {}, content)

    def render(self, tag: str, attributes: dict, content: str) -> str:
        return self.open(tag, attributes) + content + self.close(tag)

    def open(self, tag: str, attributes: dict) -> str:
        attributes_string = self.create_attributes_string(attributes, TAG_ATTRIBUTES.get(tag, frozenset()))
        if attributes_string != "":
            attributes_string = " " + attributes_string
        return f"<{tag}{attributes_string}>"

    @staticmethod
    def close(tag: str) -> str:
        return f"</{tag}>"
