"""
Pytest configuration and fixtures for paneclose tests.
"""

import os

import pytest
from hypothesis import Verbosity, settings

from paneclose.config import KeyBindingConfig
from paneclose.registry import SnapshotRegistry
from paneclose.types import PaneSnapshotEntry, TabSnapshotEntry

settings.register_profile("default", max_examples=100, verbosity=Verbosity.normal, deadline=None)
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.normal, deadline=None)
settings.register_profile("dev", max_examples=10, verbosity=Verbosity.verbose, deadline=None)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "default"))


class RecordingHost:
    """Host that records requested actions in order."""

    def __init__(self):
        self.actions: list[tuple] = []

    def close_pane(self, pane_id):
        self.actions.append(("close", pane_id))

    def hide_self(self):
        self.actions.append(("hide",))

    def write(self, data):
        self.actions.append(("write", data))


class FakeSource:
    """Snapshot source returning whatever the test sets."""

    def __init__(self, panes=(), tabs=()):
        self.panes = tuple(panes)
        self.tabs = tuple(tabs)
        self.reads = 0

    def read_panes(self):
        self.reads += 1
        return self.panes

    def read_tabs(self):
        return self.tabs


def pane(pane_id, tab=0, title="", focused=False):
    return PaneSnapshotEntry(pane_id=pane_id, title=title or f"pane-{pane_id}", owning_tab=tab, is_focused=focused)


def tab(position, name, **flags):
    return TabSnapshotEntry(position=position, name=name, **flags)


def grouped(*panes):
    """Group pane entries by owning tab, preserving order."""
    groups: dict[int, list] = {}
    for p in panes:
        groups.setdefault(p.owning_tab, []).append(p)
    return tuple((position, tuple(entries)) for position, entries in groups.items())


@pytest.fixture
def host():
    return RecordingHost()


@pytest.fixture
def registry():
    return SnapshotRegistry()


@pytest.fixture
def bindings():
    return KeyBindingConfig.defaults("accept-confirm")
