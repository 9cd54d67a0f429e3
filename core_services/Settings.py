import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from bootstrap_form.core_services.Doctype import HTML5
from bootstrap_form.core_services.Translator import DEFAULT_TEXT_DOMAIN, GettextTranslator


def _indent_from_env(raw: str | None) -> int | str:
    if raw is None or raw == "":
        return ""
    if raw.isdigit():
        return int(raw)
    return raw


@dataclass
class Settings:
    doctype: str = HTML5
    indent: int | str = ""
    text_domain: str = DEFAULT_TEXT_DOMAIN
    log_level: int = logging.WARNING
    log_file: str | None = None
    locale_dir: str | None = None
    languages: list[str] = field(default_factory=list)

    @classmethod
    def from_env(cls, prefix: str = "BOOTSTRAP_FORM_", dotenv_path: str | None = None) -> "Settings":
        """Read settings from the environment, after loading a ``.env`` file if there is one."""
        load_dotenv(dotenv_path)
        languages = os.getenv(f"{prefix}LANGUAGES", "")
        return cls(
            doctype=os.getenv(f"{prefix}DOCTYPE", HTML5).upper(),
            indent=_indent_from_env(os.getenv(f"{prefix}INDENT")),
            text_domain=os.getenv(f"{prefix}TEXT_DOMAIN", DEFAULT_TEXT_DOMAIN),
            log_level=logging.getLevelName(os.getenv(f"{prefix}LOG_LEVEL", "WARNING").upper()),
            log_file=os.getenv(f"{prefix}LOG_FILE") or None,
            locale_dir=os.getenv(f"{prefix}LOCALE_DIR") or None,
            languages=[language.strip() for language in languages.split(",") if language.strip()],
        )

    def build_translator(self) -> GettextTranslator | None:
        if not self.locale_dir:
            return None
        return GettextTranslator.from_directory(self.locale_dir, self.languages, [self.text_domain])
