"""
================================================================================
Browser Dialog Tracking
================================================================================

Playwright requires a dialog (alert / confirm / prompt) to be answered while
its event is being dispatched, otherwise the page freezes. The tracker
therefore answers every dialog immediately with the *armed* response:

    dialogs.arm(accept=True, prompt_text="hello")   # before the click
    page.click("#open-prompt")                        # dialog answered here
    dialogs.message                                   # text that was shown

Arming is one-shot; unarmed dialogs are dismissed, which is also what
Playwright does when nobody listens. A dialog answered with an armed response
leaves one `pending` answer behind, which `consume()` takes.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import weakref
from typing import List, Optional

from loguru import logger
from playwright.sync_api import BrowserContext, Dialog
from playwright.sync_api import Error as PlaywrightError

from .errors import NoAlertPresentError

# One tracker per browser context, shared by every page object built on it
_TRACKERS: "weakref.WeakKeyDictionary[BrowserContext, DialogTracker]" = (
    weakref.WeakKeyDictionary()
)


class DialogTracker:
    """
    Records browser dialogs of a context and answers them.

    Attributes:
        pending: A dialog used the armed response and nobody consumed it yet
        history: Messages of every dialog seen, oldest first
    """

    def __init__(self, context: BrowserContext):
        self._armed = False
        self._accept = False
        self._prompt_text: Optional[str] = None
        self._last_message: Optional[str] = None
        self.pending = False
        self.history: List[str] = []
        context.on("dialog", self._on_dialog)

    @classmethod
    def for_context(cls, context: BrowserContext) -> "DialogTracker":
        """Return the context's tracker, creating and registering it on first use."""
        tracker = _TRACKERS.get(context)
        if tracker is None:
            tracker = cls(context)
            _TRACKERS[context] = tracker
        return tracker

    def arm(self, accept: bool, prompt_text: Optional[str] = None) -> None:
        """
        Decide how the next dialog is answered.

        Args:
            accept: Accept (OK) instead of dismiss (Cancel)
            prompt_text: Text typed into a prompt before accepting
        """
        self._armed = True
        self._accept = accept
        self._prompt_text = prompt_text
        self.pending = False
        logger.debug(
            f"Next dialog will be {'accepted' if accept else 'dismissed'}"
            + (f" with text '{prompt_text}'" if prompt_text is not None else "")
        )

    def consume(self) -> bool:
        """Take the pending answered dialog, if any. True at most once per dialog."""
        pending, self.pending = self.pending, False
        return pending

    @property
    def message(self) -> str:
        """
        Message of the last dialog seen.

        Raises:
            NoAlertPresentError: No dialog has appeared yet
        """
        if self._last_message is None:
            raise NoAlertPresentError("No dialog has been shown on this page")
        return self._last_message

    def _on_dialog(self, dialog: Dialog) -> None:
        armed, accept, prompt_text = self._armed, self._accept, self._prompt_text
        self._armed, self._accept, self._prompt_text = False, False, None

        self._last_message = dialog.message
        self.history.append(dialog.message)
        if armed:
            self.pending = True

        try:
            if accept and prompt_text is not None:
                dialog.accept(prompt_text)
            elif accept:
                dialog.accept()
            else:
                dialog.dismiss()
        except PlaywrightError as e:
            logger.warning(f"Dialog '{dialog.message}' was already handled: {e}")
            return

        logger.info(
            f"{dialog.type} dialog '{dialog.message}' "
            f"{'accepted' if accept else 'dismissed'}"
        )


__all__ = [
    "DialogTracker",
]
