import re
from contextlib import contextmanager

from bs4 import BeautifulSoup

BACKENDS = ("soup", "playwright")

_IMPORTANT = re.compile(r"\s*!\s*important\s*$", re.IGNORECASE)
# an unterminated comment runs to the end of the attribute
_COMMENT = re.compile(r"/\*.*?(?:\*/|$)", re.DOTALL)


class UnknownBackend(ValueError):
    def __init__(self, name):
        super().__init__(f"unknown backend {name!r}, expected one of {', '.join(BACKENDS)}")
        self.name = name


class ElementAbsent(LookupError):
    """Raised when an attribute is read from the ABSENT marker."""


class _Absent:
    __slots__ = ()

    def __bool__(self):
        return False

    def __repr__(self):
        return "ABSENT"


ABSENT = _Absent()


def _split_declarations(style):
    """Split on `;` outside quotes and parentheses."""
    chunks, current = [], []
    quote = None
    depth = 0
    escaped = False
    for char in style:
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif quote:
            if char == quote:
                quote = None
        elif char in "\"'":
            quote = char
        elif char == "(":
            depth += 1
        elif char == ")" and depth:
            depth -= 1
        elif char == ";" and not depth:
            chunks.append("".join(current))
            current = []
            continue
        current.append(char)
    chunks.append("".join(current))
    return chunks


def parse_inline_style(style):
    """Parse a `style` attribute into {property: value}.

    Names are lower-cased, values trimmed. A later declaration replaces an
    earlier one unless the earlier one is !important and the later is not.
    """
    declarations = {}
    important = set()
    for chunk in _split_declarations(_COMMENT.sub(" ", style)):
        name, sep, value = chunk.partition(":")
        name = name.strip().lower()
        if not sep or not name:
            continue
        value, n = _IMPORTANT.subn("", value)
        value = value.strip()
        if not value:
            continue
        if name in important and not n:
            continue
        declarations[name] = value
        if n:
            important.add(name)
    return declarations


class DocumentQuery:
    """Lookup by id, class name and inline style: all a check needs."""

    def get_element_by_id(self, element_id):
        raise NotImplementedError

    def body(self):
        raise NotImplementedError

    def class_name(self, element):
        raise NotImplementedError

    def style_property(self, element, name):
        raise NotImplementedError

    def close(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def _require(self, element):
        if element is ABSENT:
            raise ElementAbsent("element is absent")
        return element


class SoupDocument(DocumentQuery):
    def __init__(self, markup):
        # keep `class` as the raw string so class_name mirrors DOM className,
        # and keep the first of a repeated attribute as the DOM does
        self.soup = BeautifulSoup(
            markup,
            "html.parser",
            multi_valued_attributes=None,
            on_duplicate_attribute="ignore",
        )

    def get_element_by_id(self, element_id):
        element = self.soup.find(id=element_id)
        return ABSENT if element is None else element

    def body(self):
        element = self.soup.body
        return ABSENT if element is None else element

    def class_name(self, element):
        return self._require(element).get("class") or ""

    def style_property(self, element, name):
        style = self._require(element).get("style") or ""
        return parse_inline_style(style).get(name.strip().lower(), "")


def open_document(markup):
    return SoupDocument(markup)


@contextmanager
def document_factory(backend="soup"):
    """Yield a callable that turns markup into a fresh DocumentQuery."""
    if backend == "soup":
        yield open_document
    elif backend == "playwright":
        from acc_jabra_ui.playwright_query import PlaywrightSession

        with PlaywrightSession() as session:
            yield session.open
    else:
        raise UnknownBackend(backend)
