"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based page object framework addressed by XPath templates.

Components:
    - element_actions: Element lookup, interactions and script actions
    - page_base: Base page object (navigation, windows, frames, alerts,
      waits, table verifications)
    - waits: Explicit wait loop and conditions
    - outcome: Swallow-and-default policy and ActionResult
    - browser_manager: Browser lifecycle management

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import BrowserManager
from .dialogs import DialogTracker
from .dropdowns import CustomDropdown, Dropdown, NativeDropdown
from .element_actions import ElementActions
from .errors import (
    ConversionError,
    ElementNotFoundError,
    FacadeError,
    LocatorFormatError,
    NoAlertPresentError,
    ScriptExecutionError,
    WaitTimeoutError,
)
from .locator import resolve
from .ordering import SortKind
from .outcome import ActionResult, Outcome, guarded
from .page_base import BasePage, PageBase
from .timeouts import Timeouts
from .waits import ExplicitWait, WaitCondition

__all__ = [
    "ActionResult",
    "BasePage",
    "BrowserManager",
    "ConversionError",
    "CustomDropdown",
    "DialogTracker",
    "Dropdown",
    "ElementActions",
    "ElementNotFoundError",
    "ExplicitWait",
    "FacadeError",
    "LocatorFormatError",
    "NativeDropdown",
    "NoAlertPresentError",
    "Outcome",
    "PageBase",
    "ScriptExecutionError",
    "SortKind",
    "Timeouts",
    "WaitCondition",
    "WaitTimeoutError",
    "guarded",
    "resolve",
]
