"""
================================================================================
Dropdowns
================================================================================

One "choose the option with this text" capability, two implementations:

    - NativeDropdown: a real <select> element
    - CustomDropdown: a JS-rendered list opened by clicking a parent element

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, List

from loguru import logger
from playwright.sync_api import Locator

from .errors import ElementNotFoundError
from .locator import to_selector
from .timeouts import to_ms
from .waits import ExplicitWait, Scope, WaitCondition, presence_of_all_elements

_SELECTED_TEXTS_JS = "el => Array.from(el.selectedOptions, o => o.text.trim())"

_DESELECT_JS = """
(el, text) => {
    let changed = false;
    for (const option of el.options) {
        if (option.selected && (text === null || option.text.trim() === text)) {
            option.selected = false;
            changed = true;
        }
    }
    if (changed) {
        el.dispatchEvent(new Event('input', { bubbles: true }));
        el.dispatchEvent(new Event('change', { bubbles: true }));
    }
    return changed;
}
"""


class Dropdown(ABC):
    """Something that lets the user choose an option by its visible text."""

    @abstractmethod
    def select(self, text: str) -> None:
        """Choose the option whose visible text equals `text`."""


class NativeDropdown(Dropdown):
    """A <select> element, single or multiple."""

    def __init__(self, element: Locator):
        self.element = element

    def is_multiple(self) -> bool:
        return bool(self.element.evaluate("el => el.multiple"))

    def selected_texts(self) -> List[str]:
        return list(self.element.evaluate(_SELECTED_TEXTS_JS))

    def first_selected_text(self) -> str:
        """
        Raises:
            ElementNotFoundError: No option is selected
        """
        texts = self.selected_texts()
        if not texts:
            raise ElementNotFoundError("No option is selected")
        return texts[0]

    def select(self, text: str) -> None:
        # select_option replaces the selection; multi-selects keep what was chosen
        if self.is_multiple():
            labels = self.selected_texts()
            if text not in labels:
                labels.append(text)
            self.element.select_option(label=labels)
        else:
            self.element.select_option(label=text)

    def deselect(self, text: str) -> None:
        self.element.evaluate(_DESELECT_JS, text)

    def deselect_all(self) -> None:
        self.element.evaluate(_DESELECT_JS, None)


class CustomDropdown(Dropdown):
    """
    A dropdown rendered from ordinary elements.

    Args:
        scope: Page or frame the locators are resolved against
        parent_locator: Resolved XPath of the element that opens the list
        items_locator: Resolved XPath matching every item of the open list
        wait: Explicit wait used for the list and the chosen item; its
            timeout also bounds every click
        pause: Unconditional pause around the final click (animations)
    """

    def __init__(
        self,
        scope: Scope,
        parent_locator: str,
        items_locator: str,
        wait: ExplicitWait,
        pause: Callable[[], None],
    ):
        self.scope = scope
        self.parent_locator = parent_locator
        self.items_locator = items_locator
        self.wait = wait
        self.pause = pause

    @property
    def _click_timeout(self) -> float:
        return to_ms(self.wait.timeout)

    def _open(self) -> List[Locator]:
        self.scope.locator(to_selector(self.parent_locator)).first.click(timeout=self._click_timeout)
        self.wait.until(presence_of_all_elements(self.scope, self.items_locator))
        return self.scope.locator(to_selector(self.items_locator)).all()

    def select(self, text: str) -> None:
        for item in self._open():
            if item.inner_text().strip() != text:
                continue
            item.scroll_into_view_if_needed()
            self.wait.until(
                WaitCondition(
                    f"item clickable: {text}",
                    lambda: item.is_visible() and item.is_enabled(),
                )
            )
            self.pause()
            item.click(timeout=self._click_timeout)
            self.pause()
            logger.debug(f"Selected '{text}' in {self.parent_locator}")
            return

        raise ElementNotFoundError(
            f"No item with text '{text}' in dropdown {self.parent_locator}"
        )

    def select_many(self, *texts: str) -> None:
        """Click every item whose text is one of `texts`, each at most once."""
        wanted = set(texts)
        for item in self._open():
            if item.inner_text().strip() in wanted:
                item.scroll_into_view_if_needed()
                self.pause()
                item.click(timeout=self._click_timeout)


__all__ = [
    "Dropdown",
    "NativeDropdown",
    "CustomDropdown",
]
