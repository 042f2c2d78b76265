# ================================================================================
# Explicit Waits
# ================================================================================
#
# Condition-based synchronization for page objects.
#
# A WaitCondition is a named zero-argument predicate over the current page
# state. ExplicitWait polls it at a fixed interval until it holds or the
# timeout elapses. Element lookups inside the predicates never wait on their
# own, so the explicit timeout is the only timeout in play.
#
# Usage:
#   wait = ExplicitWait(timeout=10, poll_interval=0.5)
#   wait.until(visibility_of_element(page, "//div[@id='result']"))
#
# ================================================================================

import time
from dataclasses import dataclass
from typing import Callable, Optional, Union

from loguru import logger
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import FrameLocator, Page

from .errors import WaitTimeoutError
from .locator import to_selector

Scope = Union[Page, FrameLocator]


@dataclass(frozen=True)
class WaitCondition:
    """
    A named predicate evaluated by ExplicitWait.

    Attributes:
        description: Human-readable description used in logs and errors
        check: Returns True once the condition holds
    """
    description: str
    check: Callable[[], bool]


class ExplicitWait:
    """
    Bounded polling loop.

    Args:
        timeout: Total time budget in seconds
        poll_interval: Pause between polls in seconds
        sleep: Blocking sleep taking seconds. Page objects pass a wrapper
            around `page.wait_for_timeout` so Playwright keeps dispatching
            browser events (dialogs) while waiting.
        clock: Monotonic clock returning seconds
    """

    def __init__(
        self,
        timeout: float,
        poll_interval: float = 0.5,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.timeout = timeout
        self.poll_interval = poll_interval
        self._sleep = sleep
        self._clock = clock

    def until(self, condition: WaitCondition) -> None:
        """
        Block until the condition holds.

        Driver errors raised while checking count as "not yet".

        Raises:
            WaitTimeoutError: The condition did not hold within the timeout
        """
        start = self._clock()
        deadline = start + self.timeout
        attempt = 0
        last_error: Optional[str] = None

        logger.debug(f"Starting wait: {condition.description} (timeout={self.timeout}s)")

        while True:
            attempt += 1
            try:
                if condition.check():
                    logger.debug(
                        f"Wait successful after {attempt} attempts "
                        f"({self._clock() - start:.1f}s): {condition.description}"
                    )
                    return
            except PlaywrightError as e:
                last_error = str(e).splitlines()[0] if str(e) else type(e).__name__

            remaining = deadline - self._clock()
            if remaining <= 0:
                message = (
                    f"Timeout after {self.timeout}s waiting for: {condition.description}"
                )
                if last_error:
                    message += f". Last error: {last_error}"
                raise WaitTimeoutError(message)

            self._sleep(min(self.poll_interval, remaining))


# =============================================================================
# Conditions
# =============================================================================

def _matches(scope: Scope, locator: str):
    return scope.locator(to_selector(locator))


def visibility_of_all_elements(scope: Scope, locator: str) -> WaitCondition:
    """At least one element matches and every match is visible."""

    def check() -> bool:
        matches = _matches(scope, locator)
        count = matches.count()
        return count > 0 and all(matches.nth(i).is_visible() for i in range(count))

    return WaitCondition(f"all elements visible: {locator}", check)


def visibility_of_element(scope: Scope, locator: str) -> WaitCondition:
    """The first match is visible."""

    def check() -> bool:
        matches = _matches(scope, locator)
        return matches.count() > 0 and matches.first.is_visible()

    return WaitCondition(f"element visible: {locator}", check)


def element_to_be_clickable(scope: Scope, locator: str) -> WaitCondition:
    """The first match is visible and enabled."""

    def check() -> bool:
        matches = _matches(scope, locator)
        if matches.count() == 0:
            return False
        first = matches.first
        return first.is_visible() and first.is_enabled()

    return WaitCondition(f"element clickable: {locator}", check)


def invisibility_of_element(scope: Scope, locator: str) -> WaitCondition:
    """Nothing matches, or the first match is hidden."""

    def check() -> bool:
        matches = _matches(scope, locator)
        return matches.count() == 0 or not matches.first.is_visible()

    return WaitCondition(f"element invisible: {locator}", check)


def presence_of_element(scope: Scope, locator: str) -> WaitCondition:
    """At least one element is attached to the DOM."""

    def check() -> bool:
        return _matches(scope, locator).count() > 0

    return WaitCondition(f"element present: {locator}", check)


def presence_of_all_elements(scope: Scope, locator: str) -> WaitCondition:
    """At least one element is attached to the DOM; all matches are returned by later lookups."""

    def check() -> bool:
        return _matches(scope, locator).count() > 0

    return WaitCondition(f"all elements present: {locator}", check)


def alert_is_present(dialogs) -> WaitCondition:
    """A dialog answered with the armed response; holding consumes it."""
    return WaitCondition("alert present", dialogs.consume)


__all__ = [
    "WaitCondition",
    "ExplicitWait",
    "visibility_of_all_elements",
    "visibility_of_element",
    "element_to_be_clickable",
    "invisibility_of_element",
    "presence_of_element",
    "presence_of_all_elements",
    "alert_is_present",
]
