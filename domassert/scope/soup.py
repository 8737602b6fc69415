"""
BeautifulSoup-backed search scope.

Selectors are matched with ``Tag.select`` / ``Tag.select_one``
(soupsieve). Static HTML has no live focus, so the focused element
is tracked by the scope itself and set with ``focus()``.
"""

from __future__ import annotations

import logging
from typing import Any

from bs4 import BeautifulSoup
from bs4.element import (
    CData,
    NavigableString,
    RubyParenthesisString,
    RubyTextString,
    Script,
    Stylesheet,
    Tag,
    TemplateString,
)
from soupsieve import SelectorSyntaxError

from ..assertions.errors import SelectorError
from .base import BaseScope

logger = logging.getLogger(__name__)

SUPPORTED_PARSERS = ("html.parser", "lxml", "html5lib")

# String types that make up DOM textContent; comments and doctypes are left out
TEXT_CONTENT_TYPES = (
    NavigableString,
    CData,
    Script,
    Stylesheet,
    TemplateString,
    RubyTextString,
    RubyParenthesisString,
)


class SoupScope(BaseScope):
    """
    A search scope over a parsed HTML document or one of its subtrees.

    Example:
        scope = SoupScope.from_html('<input class="email" value="x">')
        scope.focus(scope.query_first("input.email"))

        narrowed = scope.within(scope.query_first("#app"))
        narrowed.active_element()  # still the document's focused element
    """

    def __init__(self, root: Tag, document: SoupScope | None = None):
        """
        Args:
            root: Document or element to search within
            document: Scope of the whole document when this scope is a
                subtree; focus state lives on the document scope
        """
        self.root = root
        self._document = document
        self._active: Tag | None = None

    @classmethod
    def from_html(cls, html: str, parser: str = "html.parser") -> SoupScope:
        """Parse ``html`` and return a scope over the whole document."""
        if parser not in SUPPORTED_PARSERS:
            raise ValueError(
                f"Unsupported parser {parser!r}; valid parsers: {', '.join(SUPPORTED_PARSERS)}"
            )
        return cls(BeautifulSoup(html, parser))

    @property
    def document(self) -> SoupScope:
        return self._document if self._document is not None else self

    def within(self, element: Tag) -> SoupScope:
        """Return a scope searching only inside ``element``."""
        return SoupScope(element, document=self.document)

    def focus(self, element: Tag | None) -> None:
        """Make ``element`` the document's focused element."""
        if element is not None and not self.is_element(element):
            raise TypeError(f"Cannot focus {element!r}")
        self.document._active = element

    def blur(self) -> None:
        self.document._active = None

    # ─────────────────────────────────────────────────────────────────────
    # Structural queries
    # ─────────────────────────────────────────────────────────────────────

    def query_all(self, selector: str) -> list[Tag]:
        if selector == "":
            return []
        try:
            matches = self.root.select(selector)
        except SelectorSyntaxError as e:
            raise SelectorError(selector, str(e)) from e
        logger.debug(f"query_all({selector!r}) matched {len(matches)} element(s)")
        return list(matches)

    def query_first(self, selector: str) -> Tag | None:
        if selector == "":
            return None
        try:
            match = self.root.select_one(selector)
        except SelectorSyntaxError as e:
            raise SelectorError(selector, str(e)) from e
        logger.debug(f"query_first({selector!r}) found={match is not None}")
        return match

    def active_element(self) -> Tag | None:
        return self.document._active

    # ─────────────────────────────────────────────────────────────────────
    # Element accessors
    # ─────────────────────────────────────────────────────────────────────

    def is_element(self, obj: Any) -> bool:
        return isinstance(obj, Tag) and not isinstance(obj, BeautifulSoup)

    def text_content(self, element: Tag) -> str:
        return element.get_text(types=TEXT_CONTENT_TYPES)

    def form_value(self, element: Tag) -> str | None:
        tag = self.tag_name(element)

        if tag == "input":
            value = element.get("value")
            if value is None:
                input_type = (element.get("type") or "").lower()
                return "on" if input_type in ("checkbox", "radio") else ""
            return value

        if tag == "textarea":
            # a newline right after <textarea> is not part of the value
            text = element.get_text()
            return text[1:] if text.startswith("\n") else text

        if tag == "select":
            option = element.select_one("option[selected]") or element.find("option")
            return _option_value(option) if option is not None else ""

        if tag == "option":
            return _option_value(element)

        if tag == "button":
            return element.get("value", "")

        return None

    def class_list(self, element: Tag) -> list[str]:
        classes = element.get("class")
        if classes is None:
            return []
        if isinstance(classes, str):
            return classes.split()
        return list(classes)

    def tag_name(self, element: Tag) -> str:
        return element.name.lower()

    def element_id(self, element: Tag) -> str | None:
        return element.get("id") or None


def _option_value(option: Tag) -> str:
    value = option.get("value")
    if value is not None:
        return value
    return " ".join(option.get_text().split())
