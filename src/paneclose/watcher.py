"""Turns polled host snapshots into pane and tab update events.

PUBLIC API:
  - SnapshotSource: Anything that can read full pane and tab snapshots
  - SnapshotWatcher: Emits an update only for the snapshot that changed
"""

import logging
from typing import Protocol

from .events import Event, PaneUpdate, TabUpdate
from .types import PaneSnapshotEntry, TabPosition, TabSnapshotEntry

__all__ = ["SnapshotSource", "SnapshotWatcher"]

logger = logging.getLogger(__name__)


class SnapshotSource(Protocol):
    def read_panes(self) -> tuple[tuple[TabPosition, tuple[PaneSnapshotEntry, ...]], ...]: ...

    def read_tabs(self) -> tuple[TabSnapshotEntry, ...]: ...


class SnapshotWatcher:
    """Polls a source and reports what changed since the last poll.

    The pane and tab streams are independent: a tab rename yields only a
    TabUpdate, a focus change only a PaneUpdate. When both changed the
    PaneUpdate comes first.
    """

    def __init__(self, source: SnapshotSource):
        self.source = source
        self._last_panes: tuple | None = None
        self._last_tabs: tuple | None = None

    def poll(self) -> list[Event]:
        """Read both snapshots and return the events to dispatch.

        Errors from the source propagate; the previous snapshots are kept.
        """
        panes = self.source.read_panes()
        tabs = self.source.read_tabs()

        events: list[Event] = []
        if panes != self._last_panes:
            self._last_panes = panes
            events.append(PaneUpdate(panes=panes))
        # A pane update resets tab names to placeholders, so tabs follow it
        if tabs != self._last_tabs or events:
            self._last_tabs = tabs
            events.append(TabUpdate(tabs=tabs))

        if events:
            logger.debug(f"Snapshot changes: {[type(e).__name__ for e in events]}")
        return events
