"""
Pytest configuration for the biodata form.

Puts the repository root on sys.path so tests import the in-repo package
without an editable install, and provides shared fixtures.
"""

import os
import sys

import pytest

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from biodata.shared.core.event_bus import EventBus  # noqa: E402


class FakePage:
    """Stands in for ``ft.Page``: records added controls and counts updates."""

    def __init__(self):
        self.title = None
        self.theme = None
        self.theme_mode = None
        self.on_disconnect = None
        self.controls = []
        self.updates = 0

    def add(self, *controls):
        self.controls.extend(controls)
        self.update()

    def update(self, *controls):
        self.updates += 1


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()


@pytest.fixture
def make_page():
    return FakePage


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def clean_env(monkeypatch):
    """Strip every environment override the config layer understands."""
    from biodata.shared.core.configuration import ENV_OVERRIDES

    for key in ENV_OVERRIDES:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
