"""Read-only document tree built from raw markup."""

import logging
import re
from typing import Any, Callable, Pattern, Union

from bs4 import BeautifulSoup, Doctype
from bs4.builder import ParserRejectedMarkup
from bs4.element import PreformattedString, Tag

logger = logging.getLogger(__name__)

# Elements whose text is not page content
NOISE_TAGS = ["script", "style", "nav", "footer", "aside"]

Element = Tag
AttrPredicate = Union[str, bool, Pattern[str], Callable[[str | None], bool]]

_WHITESPACE = re.compile(r"\s+")


class Document:
    """
    Queryable view over parsed markup.

    Extractors only use this interface; the underlying parser is an
    implementation detail. Elements returned by the query methods are opaque
    handles to be passed back into :meth:`attr`, :meth:`text` and
    :meth:`has_ancestor`. Nothing here mutates the tree.

    Attribute predicates passed in ``attrs`` may be:
    - a string: attribute equals the value
    - ``True``: attribute is present
    - a compiled regex: attribute value matches (``search`` semantics)
    - a callable: receives the value (``None`` when absent), returns bool
    """

    def __init__(self, soup: BeautifulSoup):
        self._soup = soup

    def select_all(
        self, tag: str | None = None, attrs: dict[str, AttrPredicate] | None = None
    ) -> list[Element]:
        """All elements matching the tag name and attribute predicates."""
        return list(self._soup.find_all(tag or True, attrs=attrs or {}))

    def select_first(
        self, tag: str | None = None, attrs: dict[str, AttrPredicate] | None = None
    ) -> Element | None:
        """First element matching the tag name and attribute predicates."""
        return self._soup.find(tag or True, attrs=attrs or {})

    def count(
        self, tag: str | None = None, attrs: dict[str, AttrPredicate] | None = None
    ) -> int:
        return len(self.select_all(tag, attrs))

    @staticmethod
    def attr(element: Element | None, name: str, default: Any = None) -> Any:
        """Attribute value of an element, or ``default`` if absent."""
        if element is None:
            return default
        value = element.get(name)
        if value is None:
            return default
        if isinstance(value, list):
            return " ".join(value)
        return value

    @staticmethod
    def text(element: Element | None) -> str:
        """Whitespace-normalized text content of an element."""
        if element is None:
            return ""
        return _WHITESPACE.sub(" ", element.get_text(" ")).strip()

    @staticmethod
    def has_ancestor(element: Element, tag: str) -> bool:
        return element.find_parent(tag) is not None

    def root_attr(self, name: str, default: Any = None) -> Any:
        """Attribute of the root ``<html>`` element."""
        return self.attr(self._soup.find("html"), name, default)

    def doctype(self) -> str:
        """Declared doctype, e.g. ``"html"``, or an empty string."""
        for node in self._soup.contents:
            if isinstance(node, Doctype):
                return str(node).strip()
        return ""

    def content_text(self) -> str:
        """
        Visible body text with non-content noise removed.

        Text inside script, style, nav, footer and aside elements is skipped,
        as are comments and other declarations.
        """
        root = self._soup.body or self._soup
        chunks = []
        for node in root.find_all(string=True):
            if isinstance(node, PreformattedString):
                continue
            if node.find_parent(NOISE_TAGS) is not None:
                continue
            chunks.append(str(node))
        return _WHITESPACE.sub(" ", " ".join(chunks)).strip()


def parse_document(markup: str | None) -> Document:
    """
    Parse markup into a :class:`Document`.

    Never raises: malformed markup is repaired by the parser, and markup the
    parser rejects outright yields an empty document.
    """
    try:
        soup = BeautifulSoup(markup or "", "lxml", multi_valued_attributes=None)
    except ParserRejectedMarkup as e:
        logger.warning(f"Parser rejected markup, using empty document: {e}")
        soup = BeautifulSoup("", "lxml")
    return Document(soup)
