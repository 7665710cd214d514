"""tmux as the paneclose host.

PUBLIC API:
  - run_tmux: Run tmux command and return result
  - check_tmux_available: Check if tmux is available and server running
  - get_current_session: Name of the session this process runs in
  - get_own_pane: Pane running paneclose, None in a popup
  - TmuxSnapshotSource: Reads pane and tab snapshots
  - TmuxHost: Executes close/hide/write actions
  - TmuxError, SessionNotFoundError: tmux exceptions
"""

from .core import run_tmux, check_tmux_available, get_current_session, get_own_pane, format_pane_id, parse_pane_id
from .exceptions import TmuxError, SessionNotFoundError
from .snapshot import TmuxSnapshotSource
from .host import TmuxHost

__all__ = [
    "run_tmux",
    "check_tmux_available",
    "get_current_session",
    "get_own_pane",
    "format_pane_id",
    "parse_pane_id",
    "TmuxSnapshotSource",
    "TmuxHost",
    "TmuxError",
    "SessionNotFoundError",
]
