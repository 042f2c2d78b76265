from .allure_utils import attach_html, attach_json, attach_png, attach_text

__all__ = [
    "attach_html",
    "attach_json",
    "attach_png",
    "attach_text",
]
