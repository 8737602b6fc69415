"""
Scope factory for creating search scopes from suite configuration.

This module builds the appropriate scope for a DocumentConfig: it
loads the HTML, narrows the search root, and sets the focused element.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ..assertions.errors import ScopeError
from .soup import SoupScope

if TYPE_CHECKING:
    from ..schema_parsing import DocumentConfig

logger = logging.getLogger(__name__)


def create_scope(config: DocumentConfig, base_dir: str | Path | None = None) -> SoupScope:
    """
    Create a scope from a DocumentConfig.

    Args:
        config: Document configuration from a parsed suite
        base_dir: Directory relative document paths are resolved against

    Returns:
        SoupScope over the document, narrowed to ``config.root`` if set

    Raises:
        ScopeError: If the document cannot be read, or ``root`` / ``focus``
            match nothing

    Example:
        suite, _ = load_suite("suites/login.yaml")
        scope = create_scope(suite.document, base_dir="suites")
    """
    html = _read_document(config, base_dir)
    document = SoupScope.from_html(html, parser=config.parser)
    logger.info(f"Loaded document {config.source} with {config.parser}")

    if config.focus:
        focused = document.query_first(config.focus)
        if focused is None:
            raise ScopeError(f"Focus selector {config.focus!r} matches no element")
        document.focus(focused)
        logger.debug(f"Focused element: {config.focus}")

    if config.root:
        root = document.query_first(config.root)
        if root is None:
            raise ScopeError(f"Root selector {config.root!r} matches no element")
        return document.within(root)

    return document


def _read_document(config: DocumentConfig, base_dir: str | Path | None) -> str:
    if config.html is not None:
        return config.html

    path = Path(config.path)
    if not path.is_absolute() and base_dir is not None:
        path = Path(base_dir) / path

    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise ScopeError(f"Cannot read document {path}: {e}") from e
