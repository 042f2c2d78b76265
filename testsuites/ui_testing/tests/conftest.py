"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for real-browser tests of the page facade,
providing fixtures for browser management, pages and test fixtures served
from inline HTML.

Key Features:
- Browser and page lifecycle management
- Inline HTML served on a fake origin (localStorage and document.domain work)
- Screenshot capture on failure
- Whole module skipped when no browser can be launched

================================================================================
"""

from typing import Callable, Generator

import allure
import pytest
from loguru import logger
from playwright.sync_api import BrowserContext, Error as PlaywrightError, Page, Route

from testsuites.ui_testing.framework.browser_manager import BrowserManager
from testsuites.ui_testing.framework.page_base import BasePage
from testsuites.ui_testing.framework.timeouts import Timeouts


# Served for every request to this origin, see `serve_html`
FIXTURE_ORIGIN = "http://facade.test"

# Fast timeouts; fixtures are static documents
FAST_TIMEOUTS = Timeouts(short=1.0, long=3.0, poll_interval=0.05, settle=0.05)


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def browser_manager() -> Generator[BrowserManager, None, None]:
    """
    Session-scoped browser manager fixture.

    Provides a single browser for all tests in the session, reducing browser
    launch overhead. Skips the UI tests when the browser is not installed.
    """
    manager = BrowserManager(headless=True)
    try:
        manager.start()
    except PlaywrightError as e:
        pytest.skip(f"Browser could not be launched: {str(e).splitlines()[0]}")
    yield manager
    manager.close()


@pytest.fixture(scope="function")
def context(browser_manager: BrowserManager) -> Generator[BrowserContext, None, None]:
    """
    Function-scoped browser context fixture.

    Creates a new browser context for each test, providing isolation.
    """
    context = browser_manager.new_context()
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context: BrowserContext) -> Page:
    """Function-scoped page fixture."""
    return context.new_page()


@pytest.fixture
def serve_html(page: Page) -> Callable[[str], None]:
    """
    Serve an HTML body on FIXTURE_ORIGIN and open it.

    Usage:
        serve_html("<button id='go'>Go</button>")
    """
    documents = {}

    def handle(route: Route) -> None:
        path = route.request.url[len(FIXTURE_ORIGIN):] or "/"
        route.fulfill(
            status=200,
            content_type="text/html",
            body=documents.get(path, documents.get("/", "")),
        )

    page.route(f"{FIXTURE_ORIGIN}/**", handle)

    def open_document(body: str, path: str = "/") -> None:
        documents[path] = f"<!DOCTYPE html><html><head><title>Fixture</title></head><body>{body}</body></html>"
        page.goto(f"{FIXTURE_ORIGIN}{path}")

    return open_document


@pytest.fixture
def base_page(page: Page) -> BasePage:
    """BasePage over the test page, with fast timeouts."""
    return BasePage(page, base_url=FIXTURE_ORIGIN, timeouts=FAST_TIMEOUTS)


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Hook to capture screenshots on test failure.

    Automatically takes a screenshot when a UI test fails and attaches
    it to the Allure report.
    """
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        if hasattr(item, "funcargs") and "page" in item.funcargs:
            page = item.funcargs["page"]
            try:
                allure.attach(
                    page.screenshot(full_page=True),
                    name="failure_screenshot",
                    attachment_type=allure.attachment_type.PNG,
                )
            except PlaywrightError as e:
                # Log but don't fail if screenshot capture fails
                logger.warning(f"Failed to capture screenshot on failure: {e}")
