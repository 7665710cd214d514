"""Host actions carried out through tmux.

PUBLIC API:
  - TmuxHost: Host implementation backed by tmux commands
"""

import logging
from collections.abc import Callable

from .core import run_tmux, format_pane_id
from ..registry import SnapshotRegistry
from ..types import PaneID

__all__ = ["TmuxHost"]

logger = logging.getLogger(__name__)


class TmuxHost:
    """Fire-and-forget tmux actions.

    Failures are logged, never raised: the caller does not wait on results.

    Args:
        registry: Used to pick the pane that receives written bytes
        on_hide: Called when the UI should go away
    """

    def __init__(self, registry: SnapshotRegistry, on_hide: Callable[[], None]):
        self.registry = registry
        self.on_hide = on_hide

    def close_pane(self, pane_id: PaneID) -> None:
        code, _, stderr = run_tmux(["kill-pane", "-t", format_pane_id(pane_id)])
        if code != 0:
            logger.warning(f"Failed to close pane {format_pane_id(pane_id)}: {stderr.strip()}")

    def hide_self(self) -> None:
        self.on_hide()

    def write(self, data: bytes) -> None:
        """Type data into the target pane (or focused pane if no target)."""
        pane_id = self.registry.target()
        if pane_id is None:
            pane_id = self.registry.focused()
        if pane_id is None:
            logger.warning(f"No pane to write {len(data)} bytes to")
            return

        text = data.decode("utf-8", errors="replace")
        code, _, stderr = run_tmux(["send-keys", "-t", format_pane_id(pane_id), "-l", text])
        if code != 0:
            logger.warning(f"Failed to write to pane {format_pane_id(pane_id)}: {stderr.strip()}")
