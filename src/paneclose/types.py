"""Type definitions for paneclose - snapshot entries and merged records.

Panes and tabs arrive as separate full snapshots from the host. The merged
record pairs a pane with the tab it currently belongs to.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal, TypeAlias


PaneID: TypeAlias = int  # e.g., 42 for tmux "%42"
TabPosition: TypeAlias = int  # ordinal slot, tmux window_index

Variant: TypeAlias = Literal["two-key", "accept-confirm", "echo"]

VARIANTS: tuple[Variant, ...] = ("two-key", "accept-confirm", "echo")


@dataclass(frozen=True)
class PaneSnapshotEntry:
    """One pane as reported by the latest pane snapshot."""

    pane_id: PaneID
    title: str
    owning_tab: TabPosition
    is_focused: bool = False


@dataclass(frozen=True)
class TabSnapshotEntry:
    """One tab as reported by the latest tab snapshot."""

    position: TabPosition
    name: str
    active: bool = False
    is_fullscreen_active: bool = False
    is_sync_panes_active: bool = False

    @classmethod
    def placeholder(cls, position: TabPosition) -> "TabSnapshotEntry":
        """Stand-in tab used until a tab snapshot names this position."""
        return cls(position=position, name=str(position))


@dataclass
class MergedPaneRecord:
    """Pane attributes joined with its owning tab's attributes."""

    pane: PaneSnapshotEntry
    tab: TabSnapshotEntry

    @property
    def pane_id(self) -> PaneID:
        return self.pane.pane_id


class ConfirmationState(Enum):
    """States of the confirmation controller."""

    IDLE = "idle"
    AWAITING_CONFIRMATION = "awaiting_confirmation"
    HIDDEN = "hidden"
