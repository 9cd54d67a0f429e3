from markupsafe import Markup, escape


class EscapeHtml:
    """Escapes text content; ``Markup`` passes through untouched."""

    def __call__(self, value) -> str:
        if value is None:
            return ""
        return str(escape(value))


class EscapeHtmlAttr(EscapeHtml):
    """Escapes attribute values; quotes are always encoded."""

    def __call__(self, value) -> str:
        if value is None:
            return ""
        if isinstance(value, Markup):
            return str(value)
        return str(escape(str(value)))
