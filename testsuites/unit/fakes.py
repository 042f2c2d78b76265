"""
In-memory stand-ins for the parts of the Playwright sync API the page facade
touches: pages, frames, locators, contexts and dialogs.

A scope's DOM is a dict from XPath to the elements it matches:

    page = FakePage()
    box = page.add("//input[@id='agree']", FakeElement(tag="checkbox"))
"""

import time
from collections import defaultdict
from typing import Any, Callable, Dict, List, Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError


class FakeElement:
    def __init__(
        self,
        text: str = "",
        tag: str = "div",
        visible: bool = True,
        enabled: bool = True,
        checked: bool = False,
        value: str = "",
        attributes: Optional[Dict[str, str]] = None,
        options: Optional[List[str]] = None,
        selected: Optional[List[str]] = None,
        multiple: bool = False,
        image_loaded: bool = True,
        frame: Optional["FakeFrame"] = None,
        on_click: Optional[Callable[[], None]] = None,
    ):
        self.text = text
        self.tag = tag
        self.visible = visible
        self.enabled = enabled
        self.checked = checked
        self.value = value
        self.attributes = dict(attributes or {})
        self.options = list(options or [])
        self.selected = list(selected or [])
        self.multiple = multiple
        self.image_loaded = image_loaded
        self.frame = frame
        self.on_click = on_click
        self.script_error = False

        self.clicks = 0
        self.click_timeouts: List[Optional[float]] = []
        self.events: List[tuple] = []
        self.scripts: List[tuple] = []

    # Actions -----------------------------------------------------------------

    def click(self, timeout=None, button: str = "left") -> None:
        self.events.append(("click", button))
        self.click_timeouts.append(timeout)
        if button != "left":
            return
        self.clicks += 1
        if self.tag == "checkbox":
            self.checked = not self.checked
        if self.on_click:
            self.on_click()

    def dblclick(self, timeout=None) -> None:
        self.events.append(("dblclick",))

    def hover(self, timeout=None) -> None:
        self.events.append(("hover",))

    def press(self, key: str, timeout=None) -> None:
        self.events.append(("press", key))

    def clear(self, timeout=None) -> None:
        self.events.append(("clear",))
        self.value = ""

    def fill(self, text: str, timeout=None) -> None:
        self.events.append(("fill", text))
        self.value = text

    def drag_to(self, target, timeout=None) -> None:
        self.events.append(("drag_to", target.element))

    def scroll_into_view_if_needed(self, timeout=None) -> None:
        self.events.append(("scroll_into_view",))

    def select_option(self, label=None, timeout=None) -> None:
        labels = label if isinstance(label, list) else [label]
        missing = [text for text in labels if text not in self.options]
        if missing:
            raise PlaywrightTimeoutError(f"Timeout exceeded: no option with label {missing[0]}")
        self.selected = labels

    # State -------------------------------------------------------------------

    def inner_text(self, timeout=None) -> str:
        return self.text

    def get_attribute(self, name: str, timeout=None) -> Optional[str]:
        return self.attributes.get(name)

    def is_visible(self) -> bool:
        return self.visible

    def is_enabled(self) -> bool:
        return self.enabled

    @property
    def content_frame(self) -> Optional["FakeFrame"]:
        return self.frame

    def element_handle(self, timeout=None) -> "FakeHandle":
        return FakeHandle(self)

    # Scripts -----------------------------------------------------------------

    def evaluate(self, script: str, arg: Any = None) -> Any:
        self.scripts.append((script, arg))
        if self.script_error:
            raise PlaywrightError("Evaluation failed: TypeError: boom")

        if "el.checked" in script:
            return self.checked
        if "el.multiple" in script:
            return self.multiple
        if "selectedOptions" in script:
            return list(self.selected)
        if "option.selected = false" in script:
            before = list(self.selected)
            self.selected = [] if arg is None else [t for t in self.selected if t != arg]
            return before != self.selected
        if "setAttribute('value'" in script:
            self.attributes["value"] = arg
            return None
        if "setAttribute('style'" in script:
            self.attributes["style"] = arg
            return None
        if "removeAttribute" in script:
            self.attributes.pop(arg, None)
            return None
        if "el.click()" in script:
            self.clicks += 1
            return None
        if "naturalWidth" in script:
            return self.image_loaded
        return None


class FakeLocator:
    """Snapshot of the elements matching a selector."""

    def __init__(self, elements: List[FakeElement], waits: Optional[List[tuple]] = None):
        self.elements = list(elements)
        self.waits = waits if waits is not None else []

    @property
    def element(self) -> FakeElement:
        if not self.elements:
            raise PlaywrightError("Element is not attached to the DOM")
        return self.elements[0]

    @property
    def first(self) -> "FakeLocator":
        return FakeLocator(self.elements[:1], self.waits)

    def nth(self, index: int) -> "FakeLocator":
        return FakeLocator(self.elements[index:index + 1])

    def count(self) -> int:
        return len(self.elements)

    def all(self) -> List["FakeLocator"]:
        return [FakeLocator([element]) for element in self.elements]

    def all_inner_texts(self) -> List[str]:
        return [element.text for element in self.elements]

    def wait_for(self, state: str = "visible", timeout=None) -> None:
        """Checks the state once; a miss is reported as a timeout."""
        self.waits.append((state, timeout))
        first = self.elements[0] if self.elements else None
        reached = {
            "attached": first is not None,
            "detached": first is None,
            "visible": first is not None and first.visible,
            "hidden": first is None or not first.visible,
        }[state]
        if not reached:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded.")

    def __getattr__(self, name: str):
        return getattr(self.element, name)


class FakeHandle:
    def __init__(self, element: FakeElement):
        self.element = element

    def content_frame(self) -> Optional["FakeFrame"]:
        return self.element.frame


class FakeScope:
    """A document: the DOM dict plus what document-level scripts read."""

    def __init__(self, url: str = "about:blank", title: str = ""):
        self.dom: Dict[str, List[FakeElement]] = {}
        self.queries: List[str] = []
        self.waits: List[tuple] = []

        self.url = url
        self._title = title
        self.inner_text = ""
        self.domain = "app.test"
        self.local_storage: Dict[str, str] = {}
        self.script_error = False
        self.scripts: List[tuple] = []

    def add(self, xpath: str, *elements: FakeElement):
        self.dom.setdefault(xpath, []).extend(elements)
        return elements[0] if len(elements) == 1 else elements

    def locator(self, selector: str) -> FakeLocator:
        self.queries.append(selector)
        xpath = selector[len("xpath="):] if selector.startswith("xpath=") else selector
        return FakeLocator(self.dom.get(xpath, []), self.waits)

    def evaluate(self, script: str, arg: Any = None) -> Any:
        self.scripts.append((script, arg))
        if self.script_error:
            raise PlaywrightError("Evaluation failed: ReferenceError: boom is not defined")

        if "document.domain" in script:
            return self.domain
        if "document.title" in script:
            return self._title
        if "document.URL" in script:
            return self.url
        if "innerText" in script:
            return self.inner_text
        if "localStorage" in script:
            return self.local_storage.get(arg)
        if "window.location" in script:
            self.url = arg
        return None


class FakeFrame(FakeScope):
    pass


class FakeKeyboard:
    def __init__(self):
        self.actions: List[tuple] = []

    def down(self, key: str) -> None:
        self.actions.append(("down", key))

    def up(self, key: str) -> None:
        self.actions.append(("up", key))


class FakeMouse:
    def __init__(self):
        self.actions: List[str] = []

    def down(self) -> None:
        self.actions.append("down")


class FakeContext:
    def __init__(self):
        self.pages: List["FakePage"] = []
        self.handlers: Dict[str, List[Callable]] = defaultdict(list)

    def on(self, event: str, handler: Callable) -> None:
        self.handlers[event].append(handler)

    def new_page(self) -> "FakePage":
        return FakePage(context=self)

    def emit_dialog(self, dialog: "FakeDialog") -> None:
        for handler in self.handlers["dialog"]:
            handler(dialog)


class FakePage(FakeScope):
    def __init__(
        self,
        context: Optional[FakeContext] = None,
        url: str = "about:blank",
        title: str = "",
    ):
        super().__init__(url=url, title=title)
        self.context = context or FakeContext()
        self.context.pages.append(self)
        self.html = "<html><body></body></html>"

        self.keyboard = FakeKeyboard()
        self.mouse = FakeMouse()
        self.navigation: List[str] = []
        self.waited_ms: List[float] = []
        self.load_states: List[str] = []
        self.fronted = 0
        self.closed = False

    def goto(self, url: str, wait_until: Optional[str] = None) -> None:
        self.navigation.append(f"goto {url}")
        self.url = url

    def go_back(self) -> None:
        self.navigation.append("back")

    def go_forward(self) -> None:
        self.navigation.append("forward")

    def reload(self) -> None:
        self.navigation.append("reload")

    def title(self) -> str:
        return self._title

    def content(self) -> str:
        return self.html

    def bring_to_front(self) -> None:
        self.fronted += 1

    def close(self) -> None:
        self.closed = True
        self.context.pages.remove(self)

    def wait_for_timeout(self, timeout: float) -> None:
        self.waited_ms.append(timeout)
        time.sleep(timeout / 1000)

    def wait_for_load_state(self, state: str = "load", timeout=None) -> None:
        self.load_states.append(state)

    def screenshot(self, path: Optional[str] = None, full_page: bool = False) -> bytes:
        data = b"\x89PNG\r\n\x1a\nfake"
        if path:
            with open(path, "wb") as f:
                f.write(data)
        return data


class FakeDialog:
    def __init__(self, message: str, type: str = "alert"):
        self.message = message
        self.type = type
        self.response: Optional[tuple] = None

    def _answer(self, response: tuple) -> None:
        if self.response is not None:
            raise PlaywrightError("Cannot accept dialog which is already handled!")
        self.response = response

    def accept(self, prompt_text: Optional[str] = None) -> None:
        self._answer(("accept", prompt_text))

    def dismiss(self) -> None:
        self._answer(("dismiss", None))
