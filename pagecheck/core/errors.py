# pagecheck/core/errors.py
from __future__ import annotations

"""Element error taxonomy
------------------------
Every failure raised by resolvers, property reads and state checks derives
from ElementError so callers can catch the whole family at once.
"""

from typing import Optional, Sequence


class ElementError(RuntimeError):
    def __init__(self, message: str, *, selector: Optional[str] = None) -> None:
        super().__init__(message)
        self.selector = selector

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""

    def annotate(self, flag_name: str, flag: Optional[bool], selector: str) -> "ElementError":
        """
        Rewrite the message as "<Flag>=<true|false> > <message> > <selector>".
        Mutates and returns self so the concrete type survives a bare `raise`.
        """
        flag_text = "true" if flag else "false"
        self.args = (f"{flag_name}={flag_text} > {self.message} > {selector}",)
        self.selector = selector
        return self


class NotAttached(ElementError):
    pass


class StillAttached(ElementError):
    pass


class NoParentSelector(ElementError):
    pass


class PropertyMissing(ElementError):
    pass


class CheckTimedOut(ElementError):
    pass


class NoMatch(ElementError):
    def __init__(
        self,
        message: str,
        *,
        selector: Optional[str] = None,
        fragments: Sequence[str] = (),
        contents: Sequence[str] = (),
    ) -> None:
        super().__init__(message, selector=selector)
        self.fragments = list(fragments)
        self.contents = list(contents)
