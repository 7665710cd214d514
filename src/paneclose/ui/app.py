"""Textual app hosting the confirmation flow.

PUBLIC API:
  - ConfirmApp: Polls host snapshots, routes keys, renders the target pane
"""

import logging

from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Static

from ..config import KeyBindingConfig
from ..controller import build_controller
from ..events import Key, dispatch
from ..host import Host
from ..keys import from_textual_key
from ..presentation import render
from ..registry import SnapshotRegistry
from ..tmux import TmuxError, TmuxHost
from ..types import PaneID, Variant
from ..watcher import SnapshotSource, SnapshotWatcher

__all__ = ["ConfirmApp"]

logger = logging.getLogger(__name__)


class ConfirmApp(App[None]):
    """Confirm-close prompt for the focused pane.

    Args:
        source: Snapshot source polled for pane and tab updates
        bindings: Resolved key bindings
        variant: Controller variant
        poll_interval: Seconds between snapshot polls
        host: Action target. Defaults to tmux, hiding by exiting this app.
        own_pane: Pane this app runs in; None inside a popup
    """

    CSS_PATH = "paneclose.tcss"

    def __init__(
        self,
        source: SnapshotSource,
        bindings: KeyBindingConfig,
        variant: Variant,
        poll_interval: float = 0.5,
        host: Host | None = None,
        own_pane: PaneID | None = None,
    ):
        super().__init__()
        self.registry = SnapshotRegistry()
        self.bindings = bindings
        self.variant = variant
        self.poll_interval = poll_interval
        self.own_pane = own_pane
        self.watcher = SnapshotWatcher(source)
        self.host = host or TmuxHost(self.registry, on_hide=self.exit)
        self.controller = build_controller(variant, bindings, self.registry, self.host)

    def compose(self) -> ComposeResult:
        yield Static(id="view")

    def on_mount(self) -> None:
        """Take the first snapshot, then keep polling."""
        self.poll_snapshots()
        self.set_interval(self.poll_interval, self.poll_snapshots)

    def poll_snapshots(self) -> None:
        """Dispatch whatever changed on the host since the last poll."""
        try:
            updates = self.watcher.poll()
        except TmuxError as e:
            logger.warning(f"Snapshot poll failed: {e}")
            return

        redraw = False
        for update in updates:
            redraw = dispatch(update, self.registry, self.controller) or redraw
        if redraw:
            self.refresh_view()

    def on_key(self, event: events.Key) -> None:
        key = from_textual_key(event.key, event.character)
        if key is None:
            return

        event.stop()
        event.prevent_default()
        if dispatch(Key(key), self.registry, self.controller):
            self.refresh_view()

    def on_resize(self, event: events.Resize) -> None:
        self.refresh_view()

    def refresh_view(self) -> None:
        if self.controller.hidden:
            return
        view = self.query_one("#view", Static)
        view.update(
            render(
                self.registry,
                self.controller.state,
                self.bindings,
                self.variant,
                rows=self.size.height,
                cols=self.size.width,
                own_pane=self.own_pane,
            )
        )
