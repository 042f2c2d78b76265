"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation.

Features:
    - Single browser instance per session
    - Context isolation between tests
    - Browser configuration presets (config `ui.*`)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.sync_api import (
    Browser,
    BrowserContext,
    Error as PlaywrightError,
    Page,
    Playwright,
    sync_playwright,
)

from uiauto_tools.common import get_config


SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


class BrowserManager:
    """
    Manages the browser instance and contexts for UI testing.

    Usage:
        with BrowserManager() as manager:
            page = manager.new_page()
            page.goto("https://example.com")
    """

    # Default browser launch options
    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "headless": True,
    }

    # Default context options
    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        headless: Optional[bool] = None,
        browser_type: Optional[str] = None,
    ):
        """
        Initialize browser manager.

        Args:
            headless: Run browser in headless mode (config `ui.headless` if None)
            browser_type: 'chromium', 'firefox' or 'webkit' (config `ui.browser` if None)
        """
        if headless is None:
            headless = get_config("ui.headless", True)
        # Env overrides arrive as strings
        if isinstance(headless, str):
            headless = headless.strip().lower() not in ("0", "false", "no", "off")
        self.headless = headless
        self.browser_type = browser_type or get_config("ui.browser", "chromium")
        if self.browser_type not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Unsupported browser: {self.browser_type}. "
                f"Expected one of {SUPPORTED_BROWSERS}"
            )

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    def __enter__(self) -> "BrowserManager":
        """Context manager entry - start browser."""
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit - close browser."""
        self.close()

    def start(self) -> None:
        """Start Playwright and launch browser."""
        self._playwright = sync_playwright().start()
        browser_launcher = getattr(self._playwright, self.browser_type)

        launch_options = {
            **self.DEFAULT_LAUNCH_OPTIONS,
            "headless": self.headless,
        }

        try:
            self._browser = browser_launcher.launch(**launch_options)
        except PlaywrightError:
            self._playwright.stop()
            self._playwright = None
            raise

        logger.debug(
            f"Browser started: {self.browser_type} "
            f"(headless={self.headless})"
        )

    def close(self) -> None:
        """Close all contexts and browser."""
        for context in self._contexts:
            try:
                context.close()
            except PlaywrightError as e:
                logger.warning(f"Failed to close browser context: {e}")
        self._contexts.clear()

        if self._browser:
            self._browser.close()
            self._browser = None

        if self._playwright:
            self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    def new_context(self, **options: Any) -> BrowserContext:
        """
        Create new browser context.

        Each context is isolated - separate cookies, localStorage, etc.

        Args:
            **options: Additional context options

        Returns:
            New BrowserContext
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context = self._browser.new_context(**{**self.DEFAULT_CONTEXT_OPTIONS, **options})
        self._contexts.append(context)
        return context

    def new_page(
        self,
        context: Optional[BrowserContext] = None,
        **context_options: Any,
    ) -> Page:
        """
        Create new page in new or existing context.

        Args:
            context: Existing context to use (creates new if None)
            **context_options: Options for new context
        """
        if context is None:
            context = self.new_context(**context_options)
        return context.new_page()

    @property
    def browser(self) -> Optional[Browser]:
        """Get browser instance."""
        return self._browser


__all__ = [
    "SUPPORTED_BROWSERS",
    "BrowserManager",
]
