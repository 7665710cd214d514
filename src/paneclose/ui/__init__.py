"""Textual UI for paneclose.

PUBLIC API:
  - ConfirmApp: The confirmation prompt app
  - show_popup: Launch the app in a tmux popup
  - install_binding: Bind a tmux key to the popup
"""

from .app import ConfirmApp
from .popup import show_popup, install_binding

__all__ = ["ConfirmApp", "show_popup", "install_binding"]
