import gettext
import logging
from typing import Iterable, Self

logger = logging.getLogger("bootstrap_form.translator")

DEFAULT_TEXT_DOMAIN = "default"


class GettextTranslator:
    """
    Translates messages per text domain using ``gettext`` catalogues.

    Unknown domains fall back to a ``NullTranslations`` instance, so the
    message comes back unchanged.
    """

    def __init__(self, translations: dict[str, gettext.NullTranslations] | None = None):
        self.translations: dict[str, gettext.NullTranslations] = dict(translations or {})
        self.fallback = gettext.NullTranslations()

    @classmethod
    def from_directory(cls, localedir: str, languages: Iterable[str],
                       domains: Iterable[str] = (DEFAULT_TEXT_DOMAIN,)) -> "GettextTranslator":
        translator = cls()
        languages = list(languages)
        for domain in domains:
            translations = gettext.translation(domain, localedir=localedir, languages=languages, fallback=True)
            if isinstance(translations, gettext.GNUTranslations):
                logger.debug("Loaded catalogue for text domain %s from %s", domain, localedir)
            else:
                logger.warning("No catalogue found for text domain %s in %s (%s)", domain, localedir, languages)
            translator.add_translations(domain, translations)
        return translator

    def add_translations(self, text_domain: str, translations: gettext.NullTranslations) -> Self:
        self.translations[text_domain] = translations
        return self

    def translate(self, message: str, text_domain: str = DEFAULT_TEXT_DOMAIN) -> str:
        if not message:
            return message
        return self.translations.get(text_domain, self.fallback).gettext(message)


class DictTranslator(GettextTranslator):
    """In-memory catalogue, handy for tests and small apps: ``{"default": {"Name": "Nom"}}``."""

    def __init__(self, catalogues: dict[str, dict[str, str]] | None = None):
        super().__init__()
        self.catalogues = {domain: dict(messages) for domain, messages in (catalogues or {}).items()}

    def translate(self, message: str, text_domain: str = DEFAULT_TEXT_DOMAIN) -> str:
        if not message:
            return message
        if text_domain in self.catalogues:
            return self.catalogues[text_domain].get(message, message)
        return super().translate(message, text_domain)
