"""Reconciliation of pane and tab snapshots into merged pane records.

PUBLIC API:
  - SnapshotRegistry: Owns the merged view, focus, and close target
"""

import logging
from collections.abc import Iterable, Sequence

from .types import MergedPaneRecord, PaneID, PaneSnapshotEntry, TabPosition, TabSnapshotEntry

__all__ = ["SnapshotRegistry"]

logger = logging.getLogger(__name__)


class SnapshotRegistry:
    """Merged pane/tab view built from two independent snapshot streams.

    A pane snapshot replaces every record, pairing each pane with a
    placeholder tab. A tab snapshot patches the tab of existing records in
    place and never adds or removes records. Tab names read between the two
    are placeholders.
    """

    def __init__(self):
        self._merged: list[MergedPaneRecord] = []
        self._focused: PaneID | None = None
        self._target: PaneID | None = None

    @property
    def merged_panes(self) -> Sequence[MergedPaneRecord]:
        """Records in arrival order of the latest pane snapshot."""
        return tuple(self._merged)

    def apply_pane_snapshot(
        self, grouped_by_tab: Iterable[tuple[TabPosition, Iterable[PaneSnapshotEntry]]]
    ) -> None:
        """Replace all records with the panes of a new snapshot.

        Focus and target move to the focused entry. A snapshot without a
        focused entry leaves both unchanged.

        Args:
            grouped_by_tab: (tab position, panes in that tab) pairs
        """
        self._merged = []

        for position, panes in grouped_by_tab:
            for pane in panes:
                if pane.is_focused:
                    self._focused = pane.pane_id
                    self._target = pane.pane_id
                self._merged.append(MergedPaneRecord(pane=pane, tab=TabSnapshotEntry.placeholder(position)))

        logger.debug(f"Pane snapshot: {len(self._merged)} panes, focused={self._focused}")

    def apply_tab_snapshot(self, tabs: Iterable[TabSnapshotEntry]) -> int:
        """Patch the tab of every record whose tab position matches.

        Args:
            tabs: Full tab list

        Returns:
            Number of records patched. Tabs with no pane are a no-op.
        """
        patched = 0
        for tab in tabs:
            for record in self._merged:
                if record.tab.position == tab.position:
                    record.tab = tab
                    patched += 1

        logger.debug(f"Tab snapshot: patched {patched} records")
        return patched

    def lookup(self, pane_id: PaneID) -> MergedPaneRecord | None:
        """Find the record for a pane. None if the pane is not in the last snapshot."""
        for record in self._merged:
            if record.pane.pane_id == pane_id:
                return record
        return None

    def focused(self) -> PaneID | None:
        return self._focused

    def target(self) -> PaneID | None:
        return self._target
