"""Tmux-specific exceptions.

PUBLIC API:
  - TmuxError: Base exception for all tmux operations
  - SessionNotFoundError: Current session cannot be determined
"""


class TmuxError(Exception):
    """Base exception for all tmux operations."""

    pass


class SessionNotFoundError(TmuxError):
    """Raised when the current tmux session cannot be determined."""

    pass
