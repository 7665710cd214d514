"""Core tmux operations - shared utilities for all tmux modules.

PUBLIC API:
  - run_tmux: Execute tmux command and return result
  - check_tmux_available: Check if tmux is available and server running
  - get_current_session: Name of the session this process runs in
  - get_own_pane: Pane whose terminal this process runs in, None in a popup
  - format_pane_id: PaneID to tmux "%N" form
  - parse_pane_id: tmux "%N" form to PaneID
"""

import os
import subprocess
from typing import List, Tuple

from .exceptions import SessionNotFoundError
from ..types import PaneID


def run_tmux(args: List[str]) -> Tuple[int, str, str]:
    """Run tmux command, return (returncode, stdout, stderr)."""
    cmd = ["tmux"] + args
    result = subprocess.run(cmd, capture_output=True, text=True)
    return result.returncode, result.stdout, result.stderr


def check_tmux_available() -> bool:
    """Check if tmux is available and server is running."""
    try:
        code, _, _ = run_tmux(["info"])
    except FileNotFoundError:
        return False
    return code == 0


def get_current_session() -> str:
    """Get the session this process is attached to.

    Raises:
        SessionNotFoundError: If not running inside tmux
    """
    if not os.environ.get("TMUX"):
        raise SessionNotFoundError("Not running inside tmux")

    code, stdout, stderr = run_tmux(["display-message", "-p", "#{session_name}"])
    if code != 0 or not stdout.strip():
        raise SessionNotFoundError(f"Failed to get current session: {stderr.strip()}")
    return stdout.strip()


def format_pane_id(pane_id: PaneID) -> str:
    """Convert 42 to "%42"."""
    return f"%{pane_id}"


def parse_pane_id(raw: str) -> PaneID:
    """Convert "%42" to 42.

    Raises:
        ValueError: If raw is not a tmux pane ID
    """
    if not raw.startswith("%") or not raw[1:].isdigit():
        raise ValueError(f"Invalid tmux pane ID: {raw!r}")
    return int(raw[1:])


def get_own_pane() -> PaneID | None:
    """Get the pane this process's terminal belongs to.

    Matches stdin's tty against pane ttys. Inside display-popup the tty
    belongs to no pane, so this returns None there.
    """
    try:
        tty = os.ttyname(0)
    except OSError:
        return None

    code, stdout, _ = run_tmux(["list-panes", "-a", "-F", "#{pane_id}\t#{pane_tty}"])
    if code != 0:
        return None

    for line in stdout.splitlines():
        raw_id, _, pane_tty = line.partition("\t")
        if pane_tty == tty:
            try:
                return parse_pane_id(raw_id)
            except ValueError:
                return None
    return None
