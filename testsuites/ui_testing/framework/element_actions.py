# ================================================================================
# Element Actions Module
# ================================================================================
#
# XPath-based element access and interaction for page objects.
#
# Every public method resolves its element right before acting (nothing is
# cached between calls), reports itself as an Allure step and follows the
# swallow-and-default policy of `outcome.guarded`: failures are logged, the
# method returns a default value and `last_result` records what went wrong.
#
# Key Features:
#   - Parameterized XPath locators ("//tr[%s]/td[%s]", "2", "3")
#   - Clicks, text entry, checkboxes, keyboard and mouse actions
#   - Native <select> and JS-rendered dropdowns
#   - Script-executed actions with structured arguments
#
# ================================================================================

from typing import Any, List, Optional, Union

import allure
from loguru import logger
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Frame, Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from uiauto_tools.common import get_config

from .dropdowns import CustomDropdown, Dropdown, NativeDropdown
from .errors import ElementNotFoundError, ScriptExecutionError
from .locator import resolve, to_selector
from .outcome import ActionResult, guarded
from .timeouts import Timeouts, to_ms
from .waits import ExplicitWait, Scope

# Script snippets; values always travel as the evaluate() argument
_IS_SELECTED_JS = (
    "el => Boolean(el.checked || el.selected || el.getAttribute('aria-checked') === 'true')"
)
_SET_VALUE_JS = "(el, value) => el.setAttribute('value', value)"
_SET_STYLE_JS = "(el, style) => el.setAttribute('style', style)"
_REMOVE_ATTRIBUTE_JS = "(el, name) => el.removeAttribute(name)"
_IMAGE_LOADED_JS = (
    "el => el.complete && typeof el.naturalWidth !== 'undefined' && el.naturalWidth > 0"
)
_HIGHLIGHT_STYLE = "border: 2px solid red; border-style: dashed;"

DOCUMENT_PROPERTIES = {
    "domain": "() => document.domain",
    "title": "() => document.title",
    "url": "() => document.URL",
    "innerText": "() => document.documentElement.innerText",
}


class ElementActions:
    """
    Element-level helpers over a Playwright page.

    Locators are XPath templates; positional `*values` fill their `%s`
    placeholders. The lookup scope is the page, or the frame selected with
    `BasePage.switch_to_frame`; document-level scripts run in that frame too.

    Example:
        actions = ElementActions(page)
        actions.send_key_to_element("//input[@name='%s']", "alice", "username")
        actions.click_to_element("//button[text()='Log in']")
        actions.last_result.outcome   # Outcome.OK
    """

    def __init__(
        self,
        page: Page,
        timeouts: Optional[Timeouts] = None,
        strict: bool = False,
    ):
        """
        Initialize ElementActions with a Playwright page.

        Args:
            page: Playwright Page object
            timeouts: Timeout classes; read from configuration when omitted
            strict: Re-raise failures after logging instead of returning defaults
        """
        self.page = page
        self.timeouts = timeouts or Timeouts.from_config()
        self.strict = strict
        self.last_result: Optional[ActionResult] = None
        self._scope: Scope = page
        # Frame selected with switch_to_frame; scripts run in its document
        self._frame: Optional[Frame] = None

    # =========================================================================
    # Lookup helpers (raise; never guarded)
    # =========================================================================

    def _locate(self, locator: str, *values: str) -> Locator:
        return self._scope.locator(to_selector(resolve(locator, *values)))

    def _element(self, locator: str, *values: str, timeout: Optional[float] = None) -> Locator:
        """First match, waiting up to the lookup timeout for it to be attached."""
        resolved = resolve(locator, *values)
        first = self._scope.locator(to_selector(resolved)).first
        wait_s = self.timeouts.long if timeout is None else timeout
        try:
            first.wait_for(state="attached", timeout=to_ms(wait_s))
        except PlaywrightTimeoutError as e:
            raise ElementNotFoundError(
                f"No element matches {resolved} after {wait_s}s"
            ) from e
        return first

    def _texts(self, locator: str, *values: str) -> List[str]:
        return [text.strip() for text in self._locate(locator, *values).all_inner_texts()]

    def _pause(self, seconds: Optional[float] = None) -> None:
        self.page.wait_for_timeout(to_ms(self.timeouts.settle if seconds is None else seconds))

    def _wait(self, timeout: Optional[float] = None) -> ExplicitWait:
        return ExplicitWait(
            timeout=self.timeouts.long if timeout is None else timeout,
            poll_interval=self.timeouts.poll_interval,
            sleep=lambda seconds: self.page.wait_for_timeout(to_ms(seconds)),
        )

    @property
    def _document(self) -> Union[Page, Frame]:
        return self._frame or self.page

    def _run_script(self, target: Union[Page, Frame, Locator], script: str, arg: Any = None) -> Any:
        try:
            return target.evaluate(script, arg)
        except PlaywrightTimeoutError:
            raise
        except PlaywrightError as e:
            raise ScriptExecutionError(f"Script failed: {script!r}: {e}") from e

    def _is_selected(self, element: Locator) -> bool:
        return bool(element.evaluate(_IS_SELECTED_JS))

    def _set_checkbox(self, locator: str, checked: bool, *values: str) -> None:
        element = self._element(locator, *values)
        if self._is_selected(element) != checked:
            element.click(timeout=to_ms(self.timeouts.long))
            logger.info(f"{'Checked' if checked else 'Unchecked'}: {locator}")
        else:
            logger.debug(f"Already {'checked' if checked else 'unchecked'}: {locator}")

    # =========================================================================
    # Element Access
    # =========================================================================

    @guarded(None)
    def get_element(self, locator: str, *values: str, timeout: Optional[float] = None) -> Optional[Locator]:
        """
        Get the first element matching a locator.

        Args:
            locator: XPath template
            *values: Placeholder values
            timeout: Lookup timeout in seconds (defaults to the long timeout)

        Returns:
            Locator of the first match, or None when nothing matched
        """
        return self._element(locator, *values, timeout=timeout)

    @guarded(list)
    def get_elements(self, locator: str, *values: str) -> List[Locator]:
        """Get every current match; an empty list when nothing matches."""
        return self._locate(locator, *values).all()

    @guarded(0)
    def count_elements(self, locator: str, *values: str) -> int:
        """Number of current matches."""
        return len(self._locate(locator, *values).all())

    # =========================================================================
    # Interactions
    # =========================================================================

    @guarded(None)
    @allure.step("Click element: {locator}")
    def click_to_element(self, locator: str, *values: str) -> None:
        logger.info(f"Clicking element: {locator} {list(values) or ''}")
        self._element(locator, *values).click(timeout=to_ms(self.timeouts.long))

    @guarded(None)
    @allure.step("Fill input: {locator}")
    def send_key_to_element(self, locator: str, text: str, *values: str) -> None:
        """
        Replace the content of an input with `text`.

        The field is cleared first, so the resulting value is exactly `text`.
        """
        element = self._element(locator, *values)
        logger.info(f"Filling input: {locator} with '{text[:50]}'")
        element.clear(timeout=to_ms(self.timeouts.long))
        element.fill(text, timeout=to_ms(self.timeouts.long))

    @guarded(None)
    @allure.step("Clear input: {locator}")
    def clear_text_box(self, locator: str, *values: str) -> None:
        self._element(locator, *values).clear(timeout=to_ms(self.timeouts.long))

    @guarded(None)
    @allure.step("Click number input {times} times: {locator}")
    def click_to_text_box_type_number(self, locator: str, times: int, *values: str) -> None:
        """Click a number input `times` times (spinner style inputs)."""
        element = self._element(locator, *values)
        for _ in range(times):
            element.click(timeout=to_ms(self.timeouts.long))

    @guarded(None)
    @allure.step("Set checkbox {checked}: {locator}")
    def set_checkbox(self, locator: str, checked: bool, *values: str) -> None:
        """
        Bring a checkbox to the requested state.

        Clicks at most once, and only when the current state differs.
        """
        self._set_checkbox(locator, checked, *values)

    @guarded(None)
    @allure.step("Check checkbox: {locator}")
    def check_to_checkbox(self, locator: str, *values: str) -> None:
        self._set_checkbox(locator, True, *values)

    @guarded(None)
    @allure.step("Uncheck checkbox: {locator}")
    def uncheck_to_checkbox(self, locator: str, *values: str) -> None:
        self._set_checkbox(locator, False, *values)

    @guarded(None)
    @allure.step("Double click element: {locator}")
    def double_click_to_element(self, locator: str, *values: str) -> None:
        self._element(locator, *values).dblclick(timeout=to_ms(self.timeouts.long))

    @guarded(None)
    @allure.step("Right click element: {locator}")
    def right_click_to_element(self, locator: str, *values: str) -> None:
        self._element(locator, *values).click(button="right", timeout=to_ms(self.timeouts.long))

    @guarded(None)
    @allure.step("Hover element: {locator}")
    def hover_mouse_to_element(self, locator: str, *values: str) -> None:
        logger.info(f"Hovering over: {locator}")
        self._element(locator, *values).hover(timeout=to_ms(self.timeouts.long))

    @guarded(None)
    @allure.step("Click and hold element: {locator}")
    def click_and_hold_to_element(self, locator: str, *values: str) -> None:
        """Press the left mouse button over the element without releasing it."""
        self._element(locator, *values).hover(timeout=to_ms(self.timeouts.long))
        self.page.mouse.down()

    @guarded(None)
    @allure.step("Drag and drop: {source_locator} -> {target_locator}")
    def drag_and_drop_element(self, source_locator: str, target_locator: str) -> None:
        source = self._element(source_locator)
        target = self._element(target_locator)
        logger.info(f"Dragging from {source_locator} to {target_locator}")
        source.drag_to(target, timeout=to_ms(self.timeouts.long))
        self._pause()

    @guarded(None)
    @allure.step("Press key {key} on: {locator}")
    def send_key_board_to_element(self, locator: str, key: str, *values: str) -> None:
        """
        Press a key or combination on an element.

        Args:
            key: Playwright key name or combo, e.g. "Enter", "Control+A"
        """
        self._element(locator, *values).press(key, timeout=to_ms(self.timeouts.long))
        logger.debug(f"Pressed key: {key}")

    @guarded(None)
    def key_down(self, key: str) -> None:
        self.page.keyboard.down(key)

    @guarded(None)
    def key_up(self, key: str) -> None:
        self.page.keyboard.up(key)

    # =========================================================================
    # Dropdowns
    # =========================================================================

    @guarded(None)
    def native_dropdown(self, locator: str, *values: str) -> Optional[NativeDropdown]:
        """Wrap the <select> matching a locator."""
        return NativeDropdown(self._element(locator, *values))

    @guarded(None)
    def custom_dropdown(self, parent_locator: str, items_locator: str) -> CustomDropdown:
        """Describe a JS-rendered dropdown by its opener and its items."""
        return CustomDropdown(
            self._scope,
            resolve(parent_locator),
            resolve(items_locator),
            wait=self._wait(),
            pause=self._pause,
        )

    @guarded(None)
    @allure.step("Choose '{text}' in dropdown")
    def select_in_dropdown(self, dropdown: Dropdown, text: str) -> None:
        """Choose an option in either kind of dropdown."""
        dropdown.select(text)

    @guarded(None)
    @allure.step("Select option '{text}': {locator}")
    def select_item_by_visible(self, locator: str, text: str, *values: str) -> None:
        logger.info(f"Selecting option: {text} in {locator}")
        NativeDropdown(self._element(locator, *values)).select(text)

    @guarded(None)
    @allure.step("Deselect option '{text}': {locator}")
    def deselect_item_by_visible(self, locator: str, text: str, *values: str) -> None:
        NativeDropdown(self._element(locator, *values)).deselect(text)

    @guarded(None)
    @allure.step("Deselect all options: {locator}")
    def deselect_all_options(self, locator: str, *values: str) -> None:
        NativeDropdown(self._element(locator, *values)).deselect_all()

    @guarded("")
    def get_first_selected_text_in_dropdown(self, locator: str, *values: str) -> str:
        return NativeDropdown(self._element(locator, *values)).first_selected_text()

    @guarded(False)
    def is_dropdown_multiple(self, locator: str, *values: str) -> bool:
        return NativeDropdown(self._element(locator, *values)).is_multiple()

    @guarded(None)
    @allure.step("Select '{text}' in custom dropdown: {parent_locator}")
    def select_item_in_custom_dropdown(
        self,
        parent_locator: str,
        items_locator: str,
        text: str,
    ) -> None:
        """
        Open a JS-rendered dropdown and click the item with the given text.

        Args:
            parent_locator: XPath of the element that opens the list
            items_locator: XPath matching every item of the open list
            text: Visible text of the item to choose
        """
        CustomDropdown(
            self._scope,
            resolve(parent_locator),
            resolve(items_locator),
            wait=self._wait(),
            pause=self._pause,
        ).select(text)

    @guarded(None)
    @allure.step("Select multiple in custom dropdown: {parent_locator}")
    def multiple_select(self, parent_locator: str, items_locator: str, *texts: str) -> None:
        CustomDropdown(
            self._scope,
            resolve(parent_locator),
            resolve(items_locator),
            wait=self._wait(),
            pause=self._pause,
        ).select_many(*texts)

    # =========================================================================
    # Element State
    # =========================================================================

    @guarded(None)
    def get_element_attribute(self, locator: str, attribute: str, *values: str) -> Optional[str]:
        """
        Get attribute value of an element.

        Returns:
            Attribute value, None when the element lacks the attribute
        """
        value = self._element(locator, *values).get_attribute(attribute)
        logger.debug(f"Got attribute {attribute} from {locator}: '{value}'")
        return value

    @guarded("")
    def get_element_text(self, locator: str, *values: str) -> str:
        """Rendered text of the first match, trimmed."""
        return self._element(locator, *values).inner_text().strip()

    @guarded(list)
    def get_elements_text(self, locator: str, *values: str) -> List[str]:
        """Rendered text of every match, each trimmed."""
        return self._texts(locator, *values)

    @guarded(False)
    def is_element_displayed(self, locator: str, *values: str) -> bool:
        return self._element(locator, *values).is_visible()

    @guarded(False)
    def is_element_undisplayed(self, locator: str, *values: str) -> bool:
        """
        True when nothing matches or the first match is hidden.

        Does not wait for the element to appear.
        """
        matches = self._locate(locator, *values)
        return matches.count() == 0 or not matches.first.is_visible()

    @guarded(False)
    def is_element_enabled(self, locator: str, *values: str) -> bool:
        return self._element(locator, *values).is_enabled()

    @guarded(False)
    def is_element_selected(self, locator: str, *values: str) -> bool:
        """True for a checked checkbox / radio or a selected <option>."""
        return self._is_selected(self._element(locator, *values))

    # =========================================================================
    # Script-Executed Actions
    # =========================================================================

    @guarded(None)
    @allure.step("Set value by JS: {locator}")
    def send_key_to_element_by_js(self, locator: str, text: str, *values: str) -> Any:
        """Set the `value` attribute directly (read-only or masked inputs)."""
        return self._run_script(self._element(locator, *values), _SET_VALUE_JS, text)

    @guarded(None)
    @allure.step("Click by JS: {locator}")
    def click_element_by_js(self, locator: str, *values: str) -> Any:
        return self._run_script(self._element(locator, *values), "el => el.click()")

    @guarded(None)
    def scroll_to_element_by_js(self, locator: str, *values: str) -> Any:
        return self._run_script(self._element(locator, *values), "el => el.scrollIntoView(true)")

    @guarded(None)
    def scroll_to_bottom_page_by_js(self) -> Any:
        return self._run_script(self._document, "() => window.scrollBy(0, document.body.scrollHeight)")

    @guarded(None)
    def scroll_to_top_page_by_js(self) -> Any:
        return self._run_script(self._document, "() => window.scrollTo(0, 0)")

    @guarded(None)
    @allure.step("Remove attribute '{attribute}' by JS: {locator}")
    def remove_attribute_by_js(self, locator: str, attribute: str, *values: str) -> Any:
        return self._run_script(self._element(locator, *values), _REMOVE_ATTRIBUTE_JS, attribute)

    @guarded(None)
    @allure.step("Navigate by JS: {url}")
    def navigate_to_url_by_js(self, url: str) -> Any:
        return self._run_script(self._document, "url => { window.location = url; }", url)

    @guarded(None)
    def read_document_property(self, name: str) -> Any:
        """
        Read a document property by script.

        Args:
            name: One of "domain", "title", "url", "innerText"
        """
        if name not in DOCUMENT_PROPERTIES:
            raise ValueError(
                f"Unknown document property: {name}. "
                f"Expected one of {sorted(DOCUMENT_PROPERTIES)}"
            )
        return self._run_script(self._document, DOCUMENT_PROPERTIES[name])

    @guarded(None)
    def get_domain_by_js(self) -> Any:
        return self._run_script(self._document, DOCUMENT_PROPERTIES["domain"])

    @guarded(None)
    def get_title_by_js(self) -> Any:
        return self._run_script(self._document, DOCUMENT_PROPERTIES["title"])

    @guarded(None)
    def get_url_by_js(self) -> Any:
        return self._run_script(self._document, DOCUMENT_PROPERTIES["url"])

    @guarded(None)
    def get_inner_text_by_js(self) -> Any:
        return self._run_script(self._document, DOCUMENT_PROPERTIES["innerText"])

    @guarded("")
    def get_local_storage_item(self, key: Optional[str] = None) -> Any:
        """
        Read a localStorage entry of the current origin.

        Args:
            key: Storage key; defaults to `ui.access_token_key` (the auth token)
        """
        key = key or get_config("ui.access_token_key", "auth0AccessToken")
        return self._run_script(self._document, "key => window.localStorage.getItem(key)", key)

    @guarded(None)
    def highlight_element(self, locator: str, *values: str) -> None:
        """Outline an element for `timeouts.settle` seconds, then restore its style."""
        element = self._element(locator, *values)
        original_style = element.get_attribute("style")
        self._run_script(element, _SET_STYLE_JS, _HIGHLIGHT_STYLE)
        self._pause()
        if original_style is None:
            self._run_script(element, _REMOVE_ATTRIBUTE_JS, "style")
        else:
            self._run_script(element, _SET_STYLE_JS, original_style)

    @guarded(False)
    def is_image_loaded(self, locator: str, *values: str) -> bool:
        return bool(self._run_script(self._element(locator, *values), _IMAGE_LOADED_JS))


__all__ = [
    "DOCUMENT_PROPERTIES",
    "ElementActions",
]
