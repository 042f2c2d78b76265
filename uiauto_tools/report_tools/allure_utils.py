"""
================================================================================
Allure Report Utilities
================================================================================

Attachment helpers used by page objects and test hooks to enrich Allure
reports with screenshots, page source and plain-text diagnostics.

================================================================================
"""

import json
from pathlib import Path
from typing import Any, Union

import allure


def attach_json(data: Any, name: str = "Data"):
    """
    Attach JSON data to Allure report.

    Args:
        data: Data to attach (will be JSON serialized)
        name: Attachment name
    """
    json_str = json.dumps(data, indent=2, default=str)
    allure.attach(
        json_str,
        name=name,
        attachment_type=allure.attachment_type.JSON
    )


def attach_text(text: str, name: str = "Text"):
    """
    Attach text content to Allure report.

    Args:
        text: Text to attach
        name: Attachment name
    """
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT
    )


def attach_html(html: str, name: str = "HTML"):
    """
    Attach HTML content to Allure report.

    Args:
        html: HTML to attach
        name: Attachment name
    """
    allure.attach(
        html,
        name=name,
        attachment_type=allure.attachment_type.HTML
    )


def attach_png(image: Union[bytes, Path], name: str = "Screenshot"):
    """
    Attach a PNG image (raw bytes or a file path) to Allure report.

    Args:
        image: PNG bytes or path to a PNG file
        name: Attachment name
    """
    if isinstance(image, Path):
        image = image.read_bytes()
    allure.attach(
        image,
        name=name,
        attachment_type=allure.attachment_type.PNG
    )


__all__ = [
    "attach_json",
    "attach_text",
    "attach_html",
    "attach_png",
]
