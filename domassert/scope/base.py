"""
Base scope interface for DOM queries.

This module defines the abstract base class that every search scope
must follow. A scope wraps a document (or a subtree of one) and
exposes the structural query and element accessors the assertion
engine relies on.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class BaseScope(ABC):
    """
    Abstract base class for search scopes.

    Scopes are read-only from the assertion engine's perspective: the
    engine queries them and reads element state, it never mutates them.
    """

    @abstractmethod
    def query_all(self, selector: str) -> list[Any]:
        """
        Return every element in the scope matching ``selector``.

        Raises:
            SelectorError: If the selector cannot be parsed
        """
        pass

    @abstractmethod
    def query_first(self, selector: str) -> Any | None:
        """
        Return the first element in the scope matching ``selector``.

        Raises:
            SelectorError: If the selector cannot be parsed
        """
        pass

    @abstractmethod
    def active_element(self) -> Any | None:
        """Return the currently focused element of the document, if any."""
        pass

    @abstractmethod
    def is_element(self, obj: Any) -> bool:
        """Return True if ``obj`` is an element handle this scope understands."""
        pass

    @abstractmethod
    def text_content(self, element: Any) -> str:
        """Rendered text content of the element and its descendants."""
        pass

    @abstractmethod
    def form_value(self, element: Any) -> str | None:
        """Current form value of the element, or None for non-form elements."""
        pass

    @abstractmethod
    def class_list(self, element: Any) -> list[str]:
        """CSS class tokens of the element, in document order."""
        pass

    @abstractmethod
    def tag_name(self, element: Any) -> str:
        """Lower-case tag name of the element."""
        pass

    @abstractmethod
    def element_id(self, element: Any) -> str | None:
        """The element's id attribute, if set."""
        pass
