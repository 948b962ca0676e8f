"""
Pytest configuration for termclip tests.
"""

import os
import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from termclip.config import get_config  # noqa: E402


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch, tmp_path):
    """
    Isolate environment variables and cached config for each test.

    Runs each test from an empty directory so a developer's .env file
    is never picked up.
    """
    original_env = dict(os.environ)
    for var in list(os.environ):
        if var.startswith("TERMCLIP_"):
            monkeypatch.delenv(var)
    monkeypatch.chdir(tmp_path)
    get_config.cache_clear()

    yield

    get_config.cache_clear()
    os.environ.clear()
    os.environ.update(original_env)
