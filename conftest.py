"""
Repository-level pytest configuration.

Why this exists:
  - Provide safe defaults for local runs (no real application required)
  - Configure the shared loguru logger once per session
  - Keep behavior explicit and discoverable

Values below are placeholders; real runs override them through the
environment or config/{ENV}.yaml.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest

from uiauto_tools.common import init_logger


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _safe_env_defaults() -> Generator[None, None, None]:
    """
    Set environment defaults if not already provided by the user/CI,
    then initialise logging.
    """
    defaults = {
        "UI_BASE_URL": "http://localhost:3000",
        "ENV": "dev",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    init_logger()

    yield
