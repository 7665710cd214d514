"""Tests for snapshot change detection."""

from conftest import FakeSource, grouped, pane, tab
from paneclose.events import PaneUpdate, TabUpdate
from paneclose.watcher import SnapshotWatcher


def test_first_poll_emits_pane_then_tab_update():
    source = FakeSource(panes=grouped(pane(1, focused=True)), tabs=(tab(0, "main"),))
    watcher = SnapshotWatcher(source)

    events = watcher.poll()

    assert [type(e) for e in events] == [PaneUpdate, TabUpdate]
    assert events[0].panes == source.panes
    assert events[1].tabs == source.tabs


def test_unchanged_snapshots_emit_nothing():
    watcher = SnapshotWatcher(FakeSource(panes=grouped(pane(1)), tabs=(tab(0, "main"),)))
    watcher.poll()

    assert watcher.poll() == []


def test_tab_rename_emits_only_tab_update():
    source = FakeSource(panes=grouped(pane(1)), tabs=(tab(0, "main"),))
    watcher = SnapshotWatcher(source)
    watcher.poll()

    source.tabs = (tab(0, "renamed"),)

    assert watcher.poll() == [TabUpdate(tabs=(tab(0, "renamed"),))]


def test_pane_change_is_followed_by_tabs():
    source = FakeSource(panes=grouped(pane(1)), tabs=(tab(0, "main"),))
    watcher = SnapshotWatcher(source)
    watcher.poll()

    source.panes = grouped(pane(1), pane(2, focused=True))
    events = watcher.poll()

    assert [type(e) for e in events] == [PaneUpdate, TabUpdate]
