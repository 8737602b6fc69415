"""
Search scopes for DOM assertions.

A scope is the searchable root selectors are evaluated against. The
assertion engine only talks to BaseScope; SoupScope implements it on
top of BeautifulSoup.

Usage:
    from domassert.scope import SoupScope

    scope = SoupScope.from_html(html)
    scope.focus(scope.query_first("input.email"))
"""

from .base import BaseScope
from .soup import SUPPORTED_PARSERS, SoupScope
from .factory import create_scope

__all__ = [
    "BaseScope",
    "SoupScope",
    "SUPPORTED_PARSERS",
    "create_scope",
]
