from typing import Self

from bootstrap_form.form.Exceptions import InvalidArgumentError

XHTML11 = "XHTML11"
XHTML1_STRICT = "XHTML1_STRICT"
XHTML1_TRANSITIONAL = "XHTML1_TRANSITIONAL"
XHTML1_FRAMESET = "XHTML1_FRAMESET"
XHTML1_RDFA = "XHTML1_RDFA"
XHTML5 = "XHTML5"
HTML4_STRICT = "HTML4_STRICT"
HTML4_LOOSE = "HTML4_LOOSE"
HTML4_FRAMESET = "HTML4_FRAMESET"
HTML5 = "HTML5"

DECLARATIONS = {
    XHTML11: '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.1//EN" "http://www.w3.org/TR/xhtml11/DTD/xhtml11.dtd">',
    XHTML1_STRICT: '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Strict//EN" '
                   '"http://www.w3.org/TR/xhtml1/DTD/xhtml1-strict.dtd">',
    XHTML1_TRANSITIONAL: '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Transitional//EN" '
                         '"http://www.w3.org/TR/xhtml1/DTD/xhtml1-transitional.dtd">',
    XHTML1_FRAMESET: '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Frameset//EN" '
                     '"http://www.w3.org/TR/xhtml1/DTD/xhtml1-frameset.dtd">',
    XHTML1_RDFA: '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML+RDFa 1.0//EN" '
                 '"http://www.w3.org/MarkUp/DTD/xhtml-rdfa-1.dtd">',
    XHTML5: "<!DOCTYPE html>",
    HTML4_STRICT: '<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 4.01//EN" "http://www.w3.org/TR/html4/strict.dtd">',
    HTML4_LOOSE: '<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 4.01 Transitional//EN" '
                 '"http://www.w3.org/TR/html4/loose.dtd">',
    HTML4_FRAMESET: '<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 4.01 Frameset//EN" '
                    '"http://www.w3.org/TR/html4/frameset.dtd">',
    HTML5: "<!DOCTYPE html>",
}


class Doctype:
    def __init__(self, doctype: str = HTML5):
        self.doctype = HTML5
        self.set_doctype(doctype)

    def set_doctype(self, doctype: str) -> Self:
        doctype = doctype.upper()
        if doctype not in DECLARATIONS:
            raise InvalidArgumentError(f"Unknown doctype {doctype!r}; expected one of {', '.join(DECLARATIONS)}")
        self.doctype = doctype
        return self

    def get_doctype(self) -> str:
        return self.doctype

    def is_xhtml(self) -> bool:
        return "XHTML" in self.doctype

    def is_html5(self) -> bool:
        return self.doctype in (HTML5, XHTML5)

    def __str__(self):
        return DECLARATIONS[self.doctype]
