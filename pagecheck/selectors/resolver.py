# pagecheck/selectors/resolver.py
from __future__ import annotations

from typing import List, Optional, Sequence

from playwright.async_api import ElementHandle, Page, TimeoutError as PWTimeoutError

from pagecheck.core.errors import NoMatch, NoParentSelector, NotAttached, StillAttached
from pagecheck.selectors.locator import ElementLocator
from pagecheck.utils.config import CheckOptions
from pagecheck.utils.logger import get_logger

log = get_logger(__name__)

VALUE_PROPERTY = "value"


class ElementResolver:
    """
    Turns an ElementLocator into live element handles.

    Every call goes back to the page; handles are never cached because the
    DOM may replace nodes between calls.
    """

    def __init__(self, page: Page, locator: ElementLocator, options: CheckOptions) -> None:
        self.page = page
        self.locator = locator
        self.options = options

    @property
    def selector(self) -> str:
        return self.locator.effective_selector

    async def _wait_attached(self, selector: str, timeout_ms: Optional[int] = None) -> ElementHandle:
        timeout = self.options.timeout_ms if timeout_ms is None else timeout_ms
        try:
            handle = await self.page.wait_for_selector(
                selector, state="attached", timeout=timeout
            )
        except PWTimeoutError as e:
            raise NotAttached(
                f"no element matching '{selector}' attached within {timeout} ms",
                selector=selector,
            ) from e
        if handle is None:
            raise NotAttached(f"no element matching '{selector}' attached", selector=selector)
        return handle

    # ---------- Lookups ----------

    async def resolve_one(self, timeout_ms: Optional[int] = None) -> ElementHandle:
        log.debug(f"resolve_one {self.selector!r}")
        return await self._wait_attached(self.selector, timeout_ms)

    async def resolve_all(self) -> List[ElementHandle]:
        await self._wait_attached(self.selector)
        return await self.page.query_selector_all(self.selector)

    async def resolve_by_content(self, fragments: Sequence[str]) -> ElementHandle:
        """
        First element whose inner HTML contains every fragment (case-insensitive).
        """
        wanted = [f.lower() for f in fragments]
        contents: List[str] = []
        for element in await self.resolve_all():
            content = await element.inner_html()
            contents.append(content)
            lowered = content.lower()
            if all(f in lowered for f in wanted):
                return element
        raise NoMatch(
            f"None of these innerHtmls: {list(fragments)} >> were found in these elementInnerHtmls: {contents}",
            selector=self.selector,
            fragments=fragments,
            contents=contents,
        )

    async def resolve_by_value(self, values: Sequence[str]) -> Optional[ElementHandle]:
        """
        First element whose `value` property contains the first term and, when
        given, the second term too. Returns None when nothing matches; callers
        are expected to poll.
        """
        if len(values) not in (1, 2):
            raise ValueError(f"expected one or two search terms, got {len(values)}")
        terms = [v.lower() for v in values]
        for element in await self.resolve_all():
            raw = await (await element.get_property(VALUE_PROPERTY)).json_value()
            value = "" if raw is None else str(raw).lower()
            if all(t in value for t in terms):
                return element
        log.debug(f"resolve_by_value found nothing for {list(values)} under {self.selector!r}")
        return None

    async def resolve_parent(self) -> ElementHandle:
        parent_selector = self.locator.effective_parent_selector
        if parent_selector is None:
            raise NoParentSelector(
                f"'{self.locator.selector}' has no parent scope", selector=self.selector
            )
        return await self._wait_attached(parent_selector)

    async def wait_detached(self) -> None:
        try:
            await self.page.wait_for_selector(
                self.selector, state="detached", timeout=self.options.timeout_ms
            )
        except PWTimeoutError as e:
            raise StillAttached(
                f"element matching '{self.selector}' still attached after {self.options.timeout_ms} ms",
                selector=self.selector,
            ) from e
