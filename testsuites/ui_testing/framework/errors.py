"""
================================================================================
Page Facade Errors
================================================================================

Error kinds raised by the locator, wait, ordering and script layers.

BasePage converts these into default return values (see `outcome.guarded`);
strict page objects let them propagate.

Author: Automation Team
License: MIT
================================================================================
"""


class FacadeError(Exception):
    """Base class for every error raised by the page facade."""
    pass


class LocatorFormatError(FacadeError):
    """Raised when locator placeholders and substitution values do not line up."""
    pass


class ElementNotFoundError(FacadeError):
    """Raised when no element matches a resolved locator."""
    pass


class WaitTimeoutError(FacadeError):
    """Raised when an explicit wait condition does not hold before its timeout."""
    pass


class ConversionError(FacadeError):
    """Raised when element text cannot be converted to a number or date."""
    pass


class ScriptExecutionError(FacadeError):
    """Raised when a script evaluated in the browser throws."""
    pass


class NoAlertPresentError(FacadeError):
    """Raised when an alert operation finds no dialog to act on."""
    pass


__all__ = [
    "FacadeError",
    "LocatorFormatError",
    "ElementNotFoundError",
    "WaitTimeoutError",
    "ConversionError",
    "ScriptExecutionError",
    "NoAlertPresentError",
]
