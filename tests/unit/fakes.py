"""
In-memory stand-ins for the async Playwright Page / ElementHandle / JSHandle
surface used by pagecheck. Elements are registered per selector string;
mutate their attributes (directly or via loop.call_later) to simulate the DOM
changing while a check polls.
"""

import asyncio
import time
from typing import Any, Dict, List, Optional

from playwright.async_api import TimeoutError as PWTimeoutError


class SVGAnimatedString:
    """className of an SVG element; has no own enumerable keys."""

    def __init__(self, base_val: str) -> None:
        self.baseVal = base_val
        self.animVal = base_val


class FakeJSHandle:
    def __init__(self, value: Any) -> None:
        self._value = value

    async def get_property(self, name: str) -> "FakeJSHandle":
        v = self._value
        if isinstance(v, dict):
            return FakeJSHandle(v.get(name))
        return FakeJSHandle(getattr(v, name, None))

    async def json_value(self) -> Any:
        # the driver serializes objects by own enumerable keys
        if isinstance(self._value, SVGAnimatedString):
            return {}
        return self._value

    async def evaluate(self, expression: str, arg: Any = None) -> bool:
        # only the has-property probe is supported
        v = self._value
        if v is None:
            return False
        if isinstance(v, dict):
            return arg in v
        return hasattr(v, arg)


class FakeElement(FakeJSHandle):
    def __init__(
        self,
        *,
        class_name: Any = "",
        value: Any = "",
        inner_html: str = "",
        visible: bool = True,
        enabled: bool = True,
        editable: bool = True,
        attached: bool = True,
        extra: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.class_name = class_name
        self.value = value
        self.inner_html_text = inner_html
        self.visible = visible
        self.enabled = enabled
        self.editable = editable
        self.attached = attached
        self.extra = dict(extra or {})

    @property
    def _value(self) -> Dict[str, Any]:
        props = {"className": self.class_name, "value": self.value, "innerHTML": self.inner_html_text}
        props.update(self.extra)
        return props

    async def is_visible(self) -> bool:
        return self.visible

    async def is_hidden(self) -> bool:
        return not self.visible

    async def is_enabled(self) -> bool:
        return self.enabled

    async def is_disabled(self) -> bool:
        return not self.enabled

    async def is_editable(self) -> bool:
        return self.editable

    async def inner_html(self) -> str:
        return self.inner_html_text


class FakePage:
    def __init__(self) -> None:
        self.elements: Dict[str, List[FakeElement]] = {}
        self.waited: List[tuple] = []

    def add(self, selector: str, *elements: FakeElement) -> None:
        self.elements.setdefault(selector, []).extend(elements)

    def _attached(self, selector: str) -> List[FakeElement]:
        return [e for e in self.elements.get(selector, []) if e.attached]

    async def wait_for_selector(self, selector: str, *, state: str = "visible", timeout: Optional[float] = None):
        self.waited.append((selector, state))
        deadline = time.monotonic() + (timeout or 0) / 1000.0
        while True:
            found = self._attached(selector)
            if state == "attached" and found:
                return found[0]
            if state == "detached" and not found:
                return None
            if time.monotonic() >= deadline:
                raise PWTimeoutError(f"Timeout {timeout}ms exceeded.")
            await asyncio.sleep(0.005)

    async def query_selector_all(self, selector: str) -> List[FakeElement]:
        return self._attached(selector)


def later(delay_s: float, fn, *args) -> None:
    """Schedule a DOM mutation on the running loop."""
    asyncio.get_running_loop().call_later(delay_s, fn, *args)
