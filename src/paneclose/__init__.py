"""Confirm-before-close prompt for tmux panes.

Reconciles pane and tab snapshots from the multiplexer into one view of the
focused pane, and runs a small key-driven state machine that either closes
that pane or aborts.

PUBLIC API:
  - SnapshotRegistry: Merged pane/tab view
  - build_controller: Confirmation state machine for a variant
  - KeyBindingConfig: Resolved key bindings
  - parse_key_binding: Parse a key-binding string
  - dispatch: Route a host event
"""

from importlib.metadata import PackageNotFoundError, version

from .config import KeyBindingConfig
from .controller import build_controller
from .events import dispatch
from .keys import parse_key_binding
from .registry import SnapshotRegistry

try:
    __version__ = version("paneclose")
except PackageNotFoundError:
    __version__ = "0.0.0"


__all__ = [
    "SnapshotRegistry",
    "build_controller",
    "KeyBindingConfig",
    "parse_key_binding",
    "dispatch",
    "__version__",
]
