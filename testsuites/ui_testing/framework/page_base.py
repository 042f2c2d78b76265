"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides (on top of ElementActions):
    - Navigation and URL handling
    - Window / tab and frame switching
    - Browser dialog (alert) handling
    - Explicit waits
    - Table, sort-order and keyword verifications
    - Screenshot and debugging utilities

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, List, Optional

import allure
from loguru import logger
from playwright.sync_api import Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from uiauto_tools.common import get_config
from uiauto_tools.report_tools.allure_utils import attach_html, attach_json, attach_png, attach_text

from .dialogs import DialogTracker
from .element_actions import ElementActions
from .errors import ElementNotFoundError, WaitTimeoutError
from .locator import resolve, to_selector
from .ordering import SortKind, all_contain, all_equal, all_in, convert_all, is_sorted
from .outcome import guarded
from .timeouts import Timeouts, to_ms
from .waits import (
    WaitCondition,
    alert_is_present,
    element_to_be_clickable,
    presence_of_all_elements,
    visibility_of_all_elements,
)


# Default output directory for screenshots
SCREENSHOT_DIR = Path(__file__).parent.parent / "screenshots"


class BasePage(ElementActions):
    """
    Base class for all page objects.

    Every public helper follows the swallow-and-default policy: failures are
    logged and a default (``""``, ``[]``, ``0``, ``False`` or ``None``) is
    returned. ``last_result`` tells why; ``strict=True`` re-raises instead.

    Usage:
        class SearchPage(BasePage):
            URL_PATH = "/search"
            SEARCH_BOX = "//input[@name='q']"
            RESULT_TITLES = "//div[@class='result']//h3"

            def search(self, keyword: str) -> None:
                self.send_key_to_element(self.SEARCH_BOX, keyword)
                self.send_key_board_to_element(self.SEARCH_BOX, "Enter")
                self.wait_for_all_elements_visible(self.RESULT_TITLES)

            def all_results_match(self, keyword: str) -> bool:
                return self.is_result_contains_keyword(self.RESULT_TITLES, keyword)
    """

    # Override in subclasses
    URL_PATH: str = "/"
    PAGE_TITLE: str = ""

    def __init__(
        self,
        page: Page,
        base_url: str = "",
        timeouts: Optional[Timeouts] = None,
        strict: bool = False,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            base_url: Base URL for the application (config `ui.base_url` if empty)
            timeouts: Timeout classes; read from configuration when omitted
            strict: Re-raise failures after logging instead of returning defaults
        """
        super().__init__(page, timeouts=timeouts, strict=strict)
        if not base_url:
            base_url = os.getenv("UI_BASE_URL") or get_config("ui.base_url", "http://localhost:3000")
        self.base_url = base_url.rstrip("/")
        self._dialogs = DialogTracker.for_context(page.context)

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    # =========================================================================
    # Navigation
    # =========================================================================

    @guarded(None)
    def navigate(self, wait_for: str = "load") -> None:
        """
        Navigate to this page.

        Args:
            wait_for: Wait condition - 'load', 'domcontentloaded', 'networkidle'
        """
        with allure.step(f"Navigate to {self.URL_PATH}"):
            self.page.goto(self.url, wait_until=wait_for)
            logger.debug(f"Navigated to: {self.url}")

    @guarded(None)
    def open_page_url(self, url: str) -> None:
        with allure.step(f"Open {url}"):
            self.page.goto(url)

    @guarded("")
    def get_current_page_url(self) -> str:
        return self.page.url

    @guarded(None)
    def back_to_page(self) -> None:
        self.page.go_back()

    @guarded(None)
    def forward_to_page(self) -> None:
        self.page.go_forward()

    @guarded(None)
    def refresh_current_page(self) -> None:
        self.page.reload()

    @guarded("")
    def get_current_page_title(self) -> str:
        return self.page.title()

    @guarded("")
    def get_current_page_source(self) -> str:
        return self.page.content()

    # =========================================================================
    # Windows and Frames
    # =========================================================================

    def _switch_to(self, target: Page) -> None:
        self.page = target
        self._scope = target
        self._frame = None
        target.bring_to_front()

    @guarded(None)
    def get_window_id(self) -> Page:
        """Handle of the current window: its Page object."""
        return self.page

    @guarded(list)
    def get_window_ids(self) -> List[Page]:
        """Handles of every window / tab in the browser context."""
        return list(self.page.context.pages)

    @guarded(None)
    def switch_window_by_id(self, parent: Page) -> None:
        """Switch to a window other than `parent` (the newest one when several)."""
        others = [candidate for candidate in self.page.context.pages if candidate is not parent]
        if not others:
            logger.warning("No window besides the parent window is open")
            return
        self._switch_to(others[-1])

    @guarded(None)
    def switch_window_by_title(self, title: str) -> None:
        for candidate in self.page.context.pages:
            if candidate.title() == title:
                self._switch_to(candidate)
                return
        raise ElementNotFoundError(f"No window titled '{title}'")

    @guarded(None)
    def close_all_windows_without_parent(self, parent: Page) -> None:
        """Close every window except `parent` and switch back to it."""
        for candidate in list(self.page.context.pages):
            if candidate is not parent:
                candidate.close()
        self._switch_to(parent)

    @guarded(None)
    def open_new_tab(self) -> Page:
        """Open a blank tab and switch to it."""
        new_page = self.page.context.new_page()
        self._switch_to(new_page)
        return new_page

    @guarded(None)
    def switch_to_frame(self, locator: str, *values: str) -> None:
        """Scope following lookups and scripts to the content of the matching <iframe>."""
        iframe = self._element(locator, *values)
        frame = iframe.element_handle().content_frame()
        self._scope = iframe.content_frame
        self._frame = frame

    @guarded(None)
    def switch_to_default_content(self) -> None:
        self._scope = self.page
        self._frame = None

    # =========================================================================
    # Alerts
    # =========================================================================

    @guarded(None)
    def accept_alert(self) -> None:
        """Accept the next dialog (arm before the action that opens it)."""
        self._dialogs.arm(accept=True)

    @guarded(None)
    def cancel_alert(self) -> None:
        """Dismiss the next dialog (arm before the action that opens it)."""
        self._dialogs.arm(accept=False)

    @guarded(None)
    def set_text_alert(self, value: str) -> None:
        """Type `value` into the next prompt dialog and accept it."""
        self._dialogs.arm(accept=True, prompt_text=value)

    @guarded("")
    def get_text_alert(self) -> str:
        """Message of the last dialog shown."""
        return self._dialogs.message

    # =========================================================================
    # Wait Utilities
    # =========================================================================

    @guarded(None)
    def wait_until(self, condition: WaitCondition, timeout: Optional[float] = None) -> None:
        """
        Block until a condition holds.

        Args:
            condition: Condition to poll
            timeout: Seconds; defaults to the long timeout
        """
        self._wait(timeout).until(condition)

    def _wait_for_state(self, state: str, locator: str, values: tuple, timeout: Optional[float]) -> None:
        """
        Wait for the first match to reach a Playwright element state.

        Raises:
            WaitTimeoutError: The state was not reached within the timeout
        """
        resolved = resolve(locator, *values)
        wait_s = self.timeouts.long if timeout is None else timeout
        logger.info(f"Waiting for {resolved} to be {state}")
        try:
            # Playwright treats 0 as "no timeout"
            self._scope.locator(to_selector(resolved)).first.wait_for(
                state=state, timeout=max(to_ms(wait_s), 1)
            )
        except PlaywrightTimeoutError as e:
            raise WaitTimeoutError(
                f"Timeout after {wait_s}s waiting for element {state}: {resolved}"
            ) from e

    @guarded(None)
    def wait_for_all_elements_visible(self, locator: str, *values: str, timeout: Optional[float] = None) -> None:
        self._wait(timeout).until(visibility_of_all_elements(self._scope, resolve(locator, *values)))

    @guarded(None)
    def wait_for_element_visible(self, locator: str, *values: str, timeout: Optional[float] = None) -> None:
        self._wait_for_state("visible", locator, values, timeout)

    @guarded(None)
    def wait_for_element_clickable(self, locator: str, *values: str, timeout: Optional[float] = None) -> None:
        self._wait(timeout).until(element_to_be_clickable(self._scope, resolve(locator, *values)))

    @guarded(None)
    def wait_for_element_invisible(self, locator: str, *values: str, timeout: Optional[float] = None) -> None:
        """
        Wait until nothing matches or the match is hidden.

        Uses the short timeout unless one is given.
        """
        wait_s = self.timeouts.short if timeout is None else timeout
        self._wait_for_state("hidden", locator, values, wait_s)

    @guarded(None)
    def wait_for_element_presence(self, locator: str, *values: str, timeout: Optional[float] = None) -> None:
        self._wait_for_state("attached", locator, values, timeout)

    @guarded(None)
    def wait_for_all_elements_presence(self, locator: str, *values: str, timeout: Optional[float] = None) -> None:
        self._wait(timeout).until(presence_of_all_elements(self._scope, resolve(locator, *values)))

    @guarded(None)
    def wait_for_alert_presence(self, timeout: Optional[float] = None) -> None:
        """
        Wait until an armed dialog response has been used.

        Each answered dialog satisfies one wait only.
        """
        self._wait(timeout).until(alert_is_present(self._dialogs))

    @guarded(None)
    def sleep_in_second(self, seconds: float) -> None:
        """Unconditional blocking pause."""
        self._pause(seconds)

    @guarded(None)
    def wait_for_page_load(self, state: str = "load", timeout: Optional[float] = None) -> None:
        """
        Wait for the page to reach a stable load state.

        Args:
            state: Playwright load state ('load', 'domcontentloaded', 'networkidle')
            timeout: Seconds; defaults to the long timeout
        """
        wait_s = self.timeouts.long if timeout is None else timeout
        self.page.wait_for_load_state(state, timeout=to_ms(wait_s))

    # =========================================================================
    # Table and Result Verifications
    # =========================================================================

    @guarded(False)
    def is_data_sorted(
        self,
        locator: str,
        *values: str,
        kind: SortKind = SortKind.STRING,
        descending: bool = False,
        key: Optional[Callable[[Any], Any]] = None,
    ) -> bool:
        """
        Check the texts of all matches are in sorted order.

        Args:
            locator: XPath template matching the cells of one column
            *values: Placeholder values
            kind: Compare as text, as amounts ("$1,000.50") or as dates ("Jan 05 2021")
            descending: Expect largest first
            key: Sort key applied to each converted value (e.g. `str.lower`)

        Returns:
            True if sorted; False if not, or if a text could not be converted
        """
        texts = self._texts(locator, *values)
        return is_sorted(convert_all(texts, kind), descending=descending, key=key)

    @guarded(False)
    def is_data_displayed_at_table(
        self,
        header_locator: str,
        column_locator: str,
        column_name: str,
        text: str,
    ) -> bool:
        """
        Check a table column contains a cell with the given text.

        Args:
            header_locator: XPath template (one `%s` for the column name)
                matching the header cells *preceding* the named header
            column_locator: XPath template (one `%s` for the 1-based column
                index) matching the cells of that column
            column_name: Visible header text
            text: Text expected inside one of the cells
        """
        index = self._locate(header_locator, column_name).count() + 1
        cells = self._texts(column_locator, str(index))
        return any(text in cell for cell in cells)

    @guarded(False)
    def is_result_equals_keyword(self, locator: str, keyword: str, *values: str) -> bool:
        """Every matched result text equals the keyword."""
        return all_equal(self._texts(locator, *values), keyword)

    @guarded(False)
    def is_result_contains_keyword(self, locator: str, keyword: str, *values: str) -> bool:
        """Every matched result text contains the keyword."""
        return all_contain(self._texts(locator, *values), keyword)

    @guarded(False)
    def is_result_in_values(self, locator: str, *expected: str) -> bool:
        """Every matched result text is one of the expected values."""
        return all_in(self._texts(locator), expected)

    # =========================================================================
    # Screenshot and Debug Utilities
    # =========================================================================

    def screenshot(
        self,
        name: str,
        full_page: bool = False,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Args:
            name: Screenshot name (without extension)
            full_page: Capture full scrollable page
            attach_to_allure: Whether to attach to Allure report

        Returns:
            Path to saved screenshot
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = SCREENSHOT_DIR / f"{name}_{timestamp}.png"

        self.page.screenshot(path=str(filepath), full_page=full_page)

        if attach_to_allure:
            attach_png(filepath, name=name)

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath

    def capture_failure(self, test_name: str) -> None:
        """
        Capture debugging information on test failure.

        Saves:
            - Screenshot
            - Current URL
            - Page source
            - Outcome of the last facade call
        """
        with allure.step("Capture failure details"):
            self.screenshot(f"failure_{test_name}", attach_to_allure=True)
            attach_text(self.page.url, name="Current URL")
            attach_html(self.page.content(), name="Page Source")
            if self.last_result is not None:
                attach_json(
                    {"outcome": self.last_result.outcome.value, "error": self.last_result.error},
                    name="Last Action Result",
                )


__all__ = [
    "BasePage",
    "PageBase",
]

# Backward-compatible alias (many Page Objects prefer PageBase naming)
PageBase = BasePage
