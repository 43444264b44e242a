"""
pagecheck
---------
Page-object elements for Playwright tests: scoped locators, lookups by
content or value, and state checks that poll until they hold.
"""

from pagecheck.core.element import Element
from pagecheck.core.errors import (
    CheckTimedOut,
    ElementError,
    NoMatch,
    NoParentSelector,
    NotAttached,
    PropertyMissing,
    StillAttached,
)
from pagecheck.selectors.locator import ElementLocator, NoParent, Parent
from pagecheck.utils.config import CheckOptions

__all__ = [
    "Element",
    "ElementLocator",
    "NoParent",
    "Parent",
    "CheckOptions",
    "ElementError",
    "NotAttached",
    "StillAttached",
    "NoMatch",
    "NoParentSelector",
    "PropertyMissing",
    "CheckTimedOut",
]
