"""Pane and tab snapshots read from tmux.

Tabs are the windows of one session. A pane is focused when it is the
active pane of the active window.

PUBLIC API:
  - TmuxSnapshotSource: Reads pane and tab snapshots for a session
"""

import logging

from .core import run_tmux, get_current_session, parse_pane_id
from .exceptions import SessionNotFoundError
from ..types import PaneSnapshotEntry, TabPosition, TabSnapshotEntry

__all__ = ["TmuxSnapshotSource"]

logger = logging.getLogger(__name__)

# Titles and names go last: they may contain the delimiter
_PANE_FORMAT = "\t".join(["#{pane_id}", "#{window_index}", "#{pane_active}", "#{window_active}", "#{pane_title}"])
_TAB_FORMAT = "\t".join(
    ["#{window_index}", "#{window_active}", "#{window_zoomed_flag}", "#{synchronize-panes}", "#{window_name}"]
)


def _flag(value: str) -> bool:
    return value.strip() in ("1", "on")


class TmuxSnapshotSource:
    """Reads full pane and tab snapshots of one tmux session.

    Args:
        session: Session name. Resolved from the environment when None.
    """

    def __init__(self, session: str | None = None):
        self._session = session

    @property
    def session(self) -> str:
        if self._session is None:
            self._session = get_current_session()
        return self._session

    def read_panes(self) -> tuple[tuple[TabPosition, tuple[PaneSnapshotEntry, ...]], ...]:
        """List panes of the session grouped by window, in window order.

        Raises:
            SessionNotFoundError: If the session is gone
        """
        code, stdout, stderr = run_tmux(["list-panes", "-s", "-t", self.session, "-F", _PANE_FORMAT])
        if code != 0:
            raise SessionNotFoundError(f"Failed to list panes of {self.session}: {stderr.strip()}")

        groups: dict[TabPosition, list[PaneSnapshotEntry]] = {}
        for line in stdout.splitlines():
            if not line:
                continue
            parts = line.split("\t", 4)
            if len(parts) < 5:
                logger.debug(f"Skipping malformed pane line: {line!r}")
                continue

            try:
                pane_id = parse_pane_id(parts[0])
                position = int(parts[1])
            except ValueError:
                logger.debug(f"Skipping malformed pane line: {line!r}")
                continue

            groups.setdefault(position, []).append(
                PaneSnapshotEntry(
                    pane_id=pane_id,
                    title=parts[4],
                    owning_tab=position,
                    is_focused=_flag(parts[2]) and _flag(parts[3]),
                )
            )

        return tuple((position, tuple(panes)) for position, panes in sorted(groups.items()))

    def read_tabs(self) -> tuple[TabSnapshotEntry, ...]:
        """List windows of the session as tabs.

        Raises:
            SessionNotFoundError: If the session is gone
        """
        code, stdout, stderr = run_tmux(["list-windows", "-t", self.session, "-F", _TAB_FORMAT])
        if code != 0:
            raise SessionNotFoundError(f"Failed to list windows of {self.session}: {stderr.strip()}")

        tabs = []
        for line in stdout.splitlines():
            if not line:
                continue
            parts = line.split("\t", 4)
            if len(parts) < 5:
                logger.debug(f"Skipping malformed window line: {line!r}")
                continue

            try:
                position = int(parts[0])
            except ValueError:
                logger.debug(f"Skipping malformed window line: {line!r}")
                continue

            tabs.append(
                TabSnapshotEntry(
                    position=position,
                    name=parts[4] or str(position),
                    active=_flag(parts[1]),
                    is_fullscreen_active=_flag(parts[2]),
                    is_sync_panes_active=_flag(parts[3]),
                )
            )

        tabs.sort(key=lambda t: t.position)
        return tuple(tabs)
