from typing import Generator, List

import pytest
from loguru import logger

from testsuites.ui_testing.framework.element_actions import ElementActions
from testsuites.ui_testing.framework.page_base import BasePage
from testsuites.ui_testing.framework.timeouts import Timeouts
from testsuites.unit.fakes import FakePage

# No real sleeping beyond a few milliseconds
FAST_TIMEOUTS = Timeouts(short=0.05, long=0.1, poll_interval=0.01, settle=0)


@pytest.fixture
def caplog_loguru() -> Generator[List[str], None, None]:
    """Messages logged through loguru while the test runs."""
    messages: List[str] = []
    handler_id = logger.add(messages.append, format="{message}", level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def page() -> FakePage:
    return FakePage(url="http://app.test/home", title="Home")


@pytest.fixture
def actions(page: FakePage) -> ElementActions:
    return ElementActions(page, timeouts=FAST_TIMEOUTS)


@pytest.fixture
def base_page(page: FakePage) -> BasePage:
    return BasePage(page, base_url="http://app.test/", timeouts=FAST_TIMEOUTS)
