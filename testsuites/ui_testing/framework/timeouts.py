"""
Timeout classes shared by page objects.

Durations are seconds; Playwright calls take milliseconds, see `to_ms`.
"""

from __future__ import annotations

from dataclasses import dataclass

from uiauto_tools.common import get_config


@dataclass(frozen=True)
class Timeouts:
    """
    Process-wide timeout classes.

    Attributes:
        short: Quick checks such as waiting for an element to disappear
        long: Element lookups and explicit waits
        poll_interval: Pause between explicit-wait polls
        settle: Unconditional pause used by drag, highlight and custom dropdowns
    """
    short: float = 5.0
    long: float = 30.0
    poll_interval: float = 0.5
    settle: float = 1.0

    @classmethod
    def from_config(cls) -> "Timeouts":
        """Build timeouts from the `timeouts.*` configuration section."""
        defaults = cls()
        return cls(
            short=float(get_config("timeouts.short", defaults.short)),
            long=float(get_config("timeouts.long", defaults.long)),
            poll_interval=float(get_config("timeouts.poll_interval", defaults.poll_interval)),
            settle=float(get_config("timeouts.settle", defaults.settle)),
        )


def to_ms(seconds: float) -> float:
    return seconds * 1000
