"""
================================================================================
Action Outcomes
================================================================================

Swallow-and-default error policy for page facade methods.

Every public BasePage method returns a type-appropriate default instead of
raising when the browser or the facade fails. The outcome of each call is
still recorded as an `ActionResult` on the page object, so tests can tell
"the condition is false" apart from "the check blew up".

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import wraps
from typing import Any, Callable, Optional

from loguru import logger
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from .errors import (
    ConversionError,
    ElementNotFoundError,
    FacadeError,
    LocatorFormatError,
    NoAlertPresentError,
    ScriptExecutionError,
    WaitTimeoutError,
)


class Outcome(str, Enum):
    """How a facade call ended."""
    OK = "ok"
    LOCATOR_FORMAT_ERROR = "locator_format_error"
    NOT_FOUND = "not_found"
    TIMEOUT = "timeout"
    CONVERSION_ERROR = "conversion_error"
    SCRIPT_ERROR = "script_error"
    NO_ALERT = "no_alert"
    DRIVER_ERROR = "driver_error"


# Checked in order; subclasses before their bases
_OUTCOME_BY_ERROR = (
    (LocatorFormatError, Outcome.LOCATOR_FORMAT_ERROR),
    (ElementNotFoundError, Outcome.NOT_FOUND),
    (WaitTimeoutError, Outcome.TIMEOUT),
    (PlaywrightTimeoutError, Outcome.TIMEOUT),
    (ConversionError, Outcome.CONVERSION_ERROR),
    (ScriptExecutionError, Outcome.SCRIPT_ERROR),
    (NoAlertPresentError, Outcome.NO_ALERT),
)


@dataclass
class ActionResult:
    """Result of a single facade call."""
    value: Any
    outcome: Outcome = Outcome.OK
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.OK


def classify(error: BaseException) -> Outcome:
    """Map an exception raised by a facade call to its outcome tag."""
    for error_type, outcome in _OUTCOME_BY_ERROR:
        if isinstance(error, error_type):
            return outcome
    return Outcome.DRIVER_ERROR


def guarded(default: Any = None) -> Callable:
    """
    Decorator applying the swallow-and-default policy to a page method.

    The wrapped method's owner must expose `strict` (bool) and accepts a
    `last_result` attribute.

    Args:
        default: Value returned on failure. Callables (e.g. `list`) are
            invoked to build a fresh default per call.
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            try:
                value = func(self, *args, **kwargs)
            except (FacadeError, PlaywrightError) as e:
                outcome = classify(e)
                message = str(e).splitlines()[0] if str(e) else type(e).__name__
                logger.error(
                    f"|{type(self).__name__}| - |{func.__name__}| - "
                    f"{outcome.value}: {message}"
                )
                fallback = default() if callable(default) else default
                self.last_result = ActionResult(
                    value=fallback, outcome=outcome, error=str(e)
                )
                if self.strict:
                    raise
                return fallback

            self.last_result = ActionResult(value=value)
            return value

        return wrapper

    return decorator


__all__ = [
    "Outcome",
    "ActionResult",
    "classify",
    "guarded",
]
