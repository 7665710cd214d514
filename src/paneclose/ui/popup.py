"""Popup integration for paneclose.

PUBLIC API:
  - show_popup: Launch paneclose in a tmux popup
  - install_binding: Bind a tmux key to the popup
"""

import shlex

from ..tmux import run_tmux, TmuxError

__all__ = ["show_popup", "install_binding"]


def _popup_command(options: list[str]) -> str:
    return shlex.join(["paneclose", "run", *options])


def show_popup(options: list[str] | None = None, session: str | None = None):
    """Launch paneclose in a tmux popup over the current pane.

    Args:
        options: key=value options passed through to the app
        session: Session to show popup in. Uses current if None.
    """
    cmd = ["display-popup", "-E", _popup_command(options or [])]

    if session:
        cmd.insert(1, "-t")
        cmd.insert(2, session)

    code, _, stderr = run_tmux(cmd)
    if code != 0:
        raise TmuxError(f"Failed to open popup: {stderr.strip()}")


def install_binding(key: str, options: list[str] | None = None):
    """Bind key (in the prefix table) to open the popup.

    Raises:
        TmuxError: If tmux rejects the binding
    """
    code, _, stderr = run_tmux(["bind-key", key, "display-popup", "-E", _popup_command(options or [])])
    if code != 0:
        raise TmuxError(f"Failed to bind {key}: {stderr.strip()}")
