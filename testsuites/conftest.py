"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers and tags tests by directory.

================================================================================
"""

from pathlib import Path

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "unit: Driver-free tests against fake pages"
    )
    config.addinivalue_line(
        "markers", "ui: Tests driving a real browser"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "alerts: Tests related to browser dialogs"
    )
    config.addinivalue_line(
        "markers", "waits: Tests related to explicit waits"
    )
    config.addinivalue_line(
        "markers", "tables: Tests related to table, sort and keyword verification"
    )


def pytest_collection_modifyitems(config, items):
    """
    Modify collected test items.

    Adds the domain marker matching the directory a test lives in.
    """
    for item in items:
        parts = Path(str(item.fspath)).parts

        if "unit" in parts:
            item.add_marker(pytest.mark.unit)

        if "ui_testing" in parts:
            item.add_marker(pytest.mark.ui)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "XPath Page Facade - UI Automation Framework",
        "=" * 60,
        "",
    ]
