"""
================================================================================
UI Automation Tools
================================================================================

Infrastructure utilities shared by the page facade and its test suites.

Modules:
    - common: Shared configuration and logging utilities
    - report_tools: Allure attachment helpers

Example:
    from uiauto_tools.common import get_config, init_logger
    from uiauto_tools.report_tools.allure_utils import attach_text

    init_logger()
    attach_text(get_config("ui.base_url"), name="Base URL")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
