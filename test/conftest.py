"""
Pytest configuration and fixtures for Pageflow configuration tests
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH119, PTH120

from pageflow.configuration import Configuration  # noqa: E402
from pageflow.settings import PageflowSettings  # noqa: E402


@pytest.fixture
def settings(monkeypatch):
    """Settings isolated from PAGEFLOW_* variables of the environment."""
    for key in list(os.environ):
        if key.upper().startswith("PAGEFLOW_"):
            monkeypatch.delenv(key)
    return PageflowSettings(_env_file=None)


@pytest.fixture
def config(settings):
    return Configuration(settings)
