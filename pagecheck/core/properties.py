# pagecheck/core/properties.py
from __future__ import annotations

"""Property reads
----------------
Walk a property chain off a live handle and materialize the terminal value
as JSON. No retries here; callers that need convergence wrap reads in
poll_until.
"""

from typing import Any, List, Sequence

from playwright.async_api import JSHandle

from pagecheck.core.errors import PropertyMissing

# Runs in the page; `Object(obj)` lets primitives answer `in` checks too.
_HAS_PROPERTY_JS = "(obj, name) => obj !== null && obj !== undefined && name in Object(obj)"


async def read_property(handle: JSHandle, path: Sequence[str]) -> Any:
    if not path:
        raise ValueError("property path cannot be empty")

    current = handle
    walked: List[str] = []
    for name in path:
        walked.append(name)
        if not await current.evaluate(_HAS_PROPERTY_JS, name):
            raise PropertyMissing(f"property '{'.'.join(walked)}' is missing")
        current = await current.get_property(name)
    return await current.json_value()


def class_tokens(value: Any) -> List[str]:
    """Split a className string into its tokens."""
    if value is None:
        return []
    return str(value).split()
