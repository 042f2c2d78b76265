"""
================================================================================
Locator Resolution
================================================================================

XPath locator templates with positional `%s` placeholders.

Page objects declare their locators as module or class constants and fill
the dynamic parts at call time:

    >>> ROW_CELL = "//table//tr[%s]/td[%s]"
    >>> resolve(ROW_CELL, "2", "3")
    '//table//tr[2]/td[3]'
    >>> to_selector(resolve(ROW_CELL, "2", "3"))
    'xpath=//table//tr[2]/td[3]'

A literal percent sign in a template is written `%%`.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from .errors import LocatorFormatError

XPATH_PREFIX = "xpath="


def resolve(template: str, *values: str) -> str:
    """
    Substitute values positionally into a locator template.

    Args:
        template: XPath expression, optionally containing `%s` placeholders
        *values: One value per placeholder, in order

    Returns:
        The resolved XPath expression

    Raises:
        LocatorFormatError: Placeholder count differs from value count, or
            the template contains a malformed placeholder
    """
    try:
        return template % tuple(values)
    except (TypeError, ValueError) as e:
        raise LocatorFormatError(
            f"Cannot resolve locator {template!r} with values {list(values)!r}: {e}"
        ) from e


def to_selector(resolved: str) -> str:
    """Turn a resolved XPath expression into a Playwright selector."""
    if resolved.startswith(XPATH_PREFIX):
        return resolved
    return f"{XPATH_PREFIX}{resolved}"


__all__ = [
    "XPATH_PREFIX",
    "resolve",
    "to_selector",
]
