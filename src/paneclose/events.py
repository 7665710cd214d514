"""Host events and their dispatch to the registry and controller.

PUBLIC API:
  - Key, PaneUpdate, TabUpdate, Unhandled: Event kinds
  - Event: Union of all event kinds
  - dispatch: Route one event, return whether a redraw is needed
"""

import logging
from dataclasses import dataclass, field
from typing import TypeAlias

from .controller import ConfirmationController
from .keys import KeyWithModifier
from .registry import SnapshotRegistry
from .types import PaneSnapshotEntry, TabPosition, TabSnapshotEntry

__all__ = ["Key", "PaneUpdate", "TabUpdate", "Unhandled", "Event", "dispatch"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Key:
    key: KeyWithModifier


@dataclass(frozen=True)
class PaneUpdate:
    """Full pane snapshot grouped by owning tab."""

    panes: tuple[tuple[TabPosition, tuple[PaneSnapshotEntry, ...]], ...]


@dataclass(frozen=True)
class TabUpdate:
    """Full tab list."""

    tabs: tuple[TabSnapshotEntry, ...]


@dataclass(frozen=True)
class Unhandled:
    """Any other host event. Accepted and ignored."""

    kind: str
    payload: dict = field(default_factory=dict, compare=False)


Event: TypeAlias = Key | PaneUpdate | TabUpdate | Unhandled


def dispatch(event: Event, registry: SnapshotRegistry, controller: ConfirmationController) -> bool:
    """Route an event to its handler.

    Args:
        event: Host event
        registry: Merged pane/tab view
        controller: Confirmation state machine

    Returns:
        True if presentation must be redrawn
    """
    match event:
        case Key(key=key):
            return controller.handle_key(key)
        case PaneUpdate(panes=panes):
            registry.apply_pane_snapshot(panes)
            return True
        case TabUpdate(tabs=tabs):
            return registry.apply_tab_snapshot(tabs) > 0
        case _:
            logger.debug(f"Ignoring event {event!r}")
            return False
