# pagecheck/core/element.py
from __future__ import annotations

"""Element page object
---------------------
Wraps one locator and asserts on its visual and interactive state. Every
check polls live state until it converges or the timeout budget runs out;
failures are annotated with the requested flag and the selector.
"""

from contextlib import contextmanager
from typing import Any, Iterator, List, Optional, Sequence

from playwright.async_api import ElementHandle, Error as PWError, Page

from pagecheck.core.errors import ElementError
from pagecheck.core.expect import expect_contains, expect_not_contains, expect_truthy
from pagecheck.core.properties import class_tokens, read_property
from pagecheck.selectors.locator import ElementLocator
from pagecheck.selectors.resolver import ElementResolver
from pagecheck.utils.config import CheckOptions, get_settings
from pagecheck.utils.logger import get_logger, log_with_context
from pagecheck.utils.timing import measure, now_ms, poll_until

CLASS_NAME_PROPERTY = "className"
SVG_CLASS_PATH = [CLASS_NAME_PROPERTY, "baseVal"]


class Element:
    def __init__(
        self,
        page: Page,
        selector: str,
        parent_selector: Optional[str] = None,
        *,
        options: Optional[CheckOptions] = None,
    ) -> None:
        self.page = page
        self.locator = ElementLocator.of(selector, parent_selector)
        self.options = options if options is not None else CheckOptions.from_settings(get_settings())
        self.resolver = ElementResolver(page, self.locator, self.options)
        self.log = log_with_context(get_logger(__name__), selector=self.selector)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.selector!r})"

    @property
    def selector(self) -> str:
        return self.locator.effective_selector

    @property
    def parent_selector(self) -> Optional[str]:
        return self.locator.effective_parent_selector

    # ---------- Resolution shortcuts for page-object subclasses ----------

    async def _get_element(self, timeout_ms: Optional[int] = None) -> ElementHandle:
        return await self.resolver.resolve_one(timeout_ms)

    async def _get_elements(self) -> List[ElementHandle]:
        return await self.resolver.resolve_all()

    async def _get_element_by_inner_html(self, inner_htmls: Sequence[str]) -> ElementHandle:
        return await self.resolver.resolve_by_content(inner_htmls)

    async def _get_element_by_value(self, values: Sequence[str]) -> Optional[ElementHandle]:
        return await self.resolver.resolve_by_value(values)

    async def _get_parent_element(self) -> ElementHandle:
        return await self.resolver.resolve_parent()

    # ---------- Reads ----------

    async def get_element_property(self, properties: Sequence[str]) -> Any:
        return await read_property(await self._get_element(), properties)

    async def _class_tokens(self, timeout_ms: Optional[int] = None) -> List[str]:
        element = await self._get_element(timeout_ms)
        value = await read_property(element, [CLASS_NAME_PROPERTY])
        if not isinstance(value, str):
            # SVGAnimatedString serializes to {}; its baseVal holds the class
            value = await read_property(element, SVG_CLASS_PATH)
        return class_tokens(value)

    # ---------- Polling ----------

    def _poll(self, condition):
        return poll_until(condition, self.options.timeout_ms, self.options.poll_interval_ms)

    def _deadline(self) -> int:
        return now_ms() + self.options.timeout_ms

    @staticmethod
    def _remaining(deadline: int) -> int:
        # Playwright reads timeout=0 as "wait forever"
        return max(1, deadline - now_ms())

    def _poll_class(self, token: str, present: bool):
        deadline = self._deadline()

        async def condition() -> bool:
            tokens = await self._class_tokens(self._remaining(deadline))
            if present:
                expect_contains(tokens, token)
            else:
                expect_not_contains(tokens, token)
            return True
        return self._poll(condition)

    def _poll_native(self, what: str, probe):
        deadline = self._deadline()

        async def condition() -> bool:
            element = await self._get_element(self._remaining(deadline))
            expect_truthy(await probe(element), what)
            return True
        return self._poll(condition)

    @contextmanager
    def _annotating(self, flag_name: str, flag: bool) -> Iterator[None]:
        try:
            yield
        except ElementError as error:
            error.annotate(flag_name, flag, self.selector)
            raise
        except PWError as error:
            raise ElementError(str(error), selector=self.selector).annotate(
                flag_name, flag, self.selector
            ) from error

    # ---------- Checks ----------

    async def exists(self, *, hidden: Optional[bool] = None, disabled: Optional[bool] = None) -> None:
        """
        Wait for the element to attach, then verify the requested flags.
        A flag left as None is not checked.
        """
        await self._get_element()
        if hidden is not None:
            await self.check_hidden_state(hidden)
        if disabled is not None:
            await self.check_disabled_state(disabled)

    @measure("check_hidden_state")
    async def check_hidden_state(self, hidden: bool) -> None:
        with self._annotating("Hidden", hidden):
            element = await self._get_element()
            if hidden:
                if await element.is_visible():
                    # CSS hide in progress; the class is authoritative
                    self.log.debug("visible, waiting for hidden class")
                    await self._poll_class(self.options.hidden_class, present=True)
                    return
                await self._poll_native("isHidden()", lambda e: e.is_hidden())
            else:
                await self._poll_native("isVisible()", lambda e: e.is_visible())

    @measure("check_disabled_state")
    async def check_disabled_state(self, disabled: bool) -> None:
        with self._annotating("Disabled", disabled):
            element = await self._get_element()
            is_enabled = await element.is_enabled()
            is_editable = await element.is_editable()
            if disabled:
                if is_enabled and is_editable:
                    self.log.debug("natively enabled, waiting for disabled class")
                    await self._poll_class(self.options.disabled_class, present=True)
                    return

                async def natively_disabled(e: ElementHandle) -> bool:
                    return await e.is_disabled() or not await e.is_editable()

                await self._poll_native("isDisabled() || !isEditable()", natively_disabled)
                return
            await self._poll_native("isEnabled()", lambda e: e.is_enabled())
            await self._poll_class(self.options.disabled_class, present=False)

    @measure("check_active")
    async def check_active(self, is_active: bool) -> None:
        with self._annotating("Active", is_active):
            await self._poll_class(self.options.active_class, present=is_active)

    @measure("check_focused")
    async def check_focused(self, is_focused: bool) -> None:
        with self._annotating("Focused", is_focused):
            await self._poll_class(self.options.focused_class, present=is_focused)

    async def not_exists(self) -> None:
        await self.resolver.wait_detached()
