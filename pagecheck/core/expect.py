# pagecheck/core/expect.py
from __future__ import annotations

"""Small assertion helpers used inside poll conditions.

Element checks pass class lists here, so containment is per whole token:
`is-hidden` does not satisfy a `hidden` check and `inactive` does not
satisfy `active`. A plain substring match on the className string would
accept both.
"""

from typing import Any, Collection


def expect_truthy(value: Any, what: str) -> None:
    if not value:
        raise AssertionError(f"expected {what} to be truthy, received {value!r}")


def expect_contains(received: Collection[str], token: str) -> None:
    if token not in received:
        raise AssertionError(f"expected {list(received)!r} to contain {token!r}")


def expect_not_contains(received: Collection[str], token: str) -> None:
    if token in received:
        raise AssertionError(f"expected {list(received)!r} not to contain {token!r}")
