"""Actions paneclose can request from its host.

PUBLIC API:
  - Host: Fire-and-forget action interface implemented by host adapters
"""

from typing import Protocol

from .types import PaneID

__all__ = ["Host"]


class Host(Protocol):
    """Fire-and-forget requests toward the multiplexer.

    None of these return a result the core observes.
    """

    def close_pane(self, pane_id: PaneID) -> None: ...

    def hide_self(self) -> None: ...

    def write(self, data: bytes) -> None: ...
