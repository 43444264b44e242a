"""
Selectors package
-----------------
Locator composition (selector + optional parent scope) and resolution of
locators into live Playwright element handles.
"""

from .locator import ElementLocator, NoParent, Parent, ParentScope, NO_PARENT
from .resolver import ElementResolver

__all__ = [
    "ElementLocator",
    "NoParent",
    "Parent",
    "ParentScope",
    "NO_PARENT",
    "ElementResolver",
]
