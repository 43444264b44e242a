# pagecheck/selectors/locator.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class NoParent:
    """Locator is not scoped to an ancestor."""


@dataclass(frozen=True)
class Parent:
    selector: str


ParentScope = Union[NoParent, Parent]

NO_PARENT = NoParent()


@dataclass(frozen=True)
class ElementLocator:
    """
    A selector plus an optional parent scope.

    - effective_selector: "<parent> <selector>" (descendant combinator), used for
      every direct element lookup
    - effective_parent_selector: "<parent>:has(<selector>)", the ancestor itself;
      None when unscoped

    Selector syntax is not validated; bad selectors fail at resolution time.
    """
    selector: str
    parent: ParentScope = NO_PARENT

    @classmethod
    def of(cls, selector: str, parent_selector: Optional[str] = None) -> "ElementLocator":
        return cls(selector, Parent(parent_selector) if parent_selector else NO_PARENT)

    @property
    def effective_selector(self) -> str:
        if isinstance(self.parent, Parent):
            return f"{self.parent.selector} {self.selector}"
        return self.selector

    @property
    def effective_parent_selector(self) -> Optional[str]:
        if isinstance(self.parent, Parent):
            return f"{self.parent.selector}:has({self.selector})"
        return None

    def __str__(self) -> str:
        return self.effective_selector
