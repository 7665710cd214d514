"""Confirmation state machine for closing the target pane.

PUBLIC API:
  - ConfirmationController: Base controller, handles cancel and hidden state
  - TwoKeyController: confirm closes, cancel hides
  - AcceptConfirmController: accept arms, confirm closes, cancel hides
  - EchoController: confirm writes a diagnostic payload
  - build_controller: Create the controller for a configured variant
"""

import logging

from .config import KeyBindingConfig
from .host import Host
from .keys import KeyWithModifier
from .registry import SnapshotRegistry
from .types import ConfirmationState, Variant

__all__ = [
    "ConfirmationController",
    "TwoKeyController",
    "AcceptConfirmController",
    "EchoController",
    "build_controller",
    "ECHO_PAYLOAD",
]

logger = logging.getLogger(__name__)

ECHO_PAYLOAD = b"paneclose is working"


class ConfirmationController:
    """Interprets key presses against the registry's current target.

    Once HIDDEN the controller is detached: every later key is ignored.
    Subclasses implement _on_key for their own bindings.
    """

    def __init__(self, bindings: KeyBindingConfig, registry: SnapshotRegistry, host: Host):
        self.bindings = bindings
        self.registry = registry
        self.host = host
        self.state = ConfirmationState.IDLE

    @property
    def hidden(self) -> bool:
        return self.state == ConfirmationState.HIDDEN

    def handle_key(self, key: KeyWithModifier) -> bool:
        """Process one key press.

        Args:
            key: The pressed key

        Returns:
            True if presentation must be redrawn
        """
        if self.hidden:
            return False

        if key == self.bindings.cancel:
            return self._hide()

        return self._on_key(key)

    def _on_key(self, key: KeyWithModifier) -> bool:
        return False

    def _hide(self) -> bool:
        logger.info(f"Hiding from state {self.state.value}")
        self.host.hide_self()
        self.state = ConfirmationState.HIDDEN
        # Nothing left to draw
        return False

    def _close_target(self) -> bool:
        """Close the captured target and hide. No-op without a target."""
        pane_id = self.registry.target()
        if pane_id is None:
            logger.debug("Confirm pressed with no target pane")
            return False

        logger.info(f"Closing pane {pane_id}")
        self.host.close_pane(pane_id)
        self.host.hide_self()
        self.state = ConfirmationState.HIDDEN
        return True


class TwoKeyController(ConfirmationController):
    """confirm closes the target immediately."""

    def _on_key(self, key: KeyWithModifier) -> bool:
        if key == self.bindings.confirm:
            return self._close_target()
        return False


class AcceptConfirmController(ConfirmationController):
    """accept arms the close, then confirm performs it."""

    def _on_key(self, key: KeyWithModifier) -> bool:
        if key == self.bindings.accept and self.state != ConfirmationState.AWAITING_CONFIRMATION:
            if self.registry.target() is None:
                logger.debug("Accept pressed with no target pane")
                return False
            self.state = ConfirmationState.AWAITING_CONFIRMATION
            return True

        if key == self.bindings.confirm and self.state == ConfirmationState.AWAITING_CONFIRMATION:
            return self._close_target()

        return False


class EchoController(ConfirmationController):
    """Diagnostic build: confirm writes a fixed payload to the host."""

    def _on_key(self, key: KeyWithModifier) -> bool:
        if key == self.bindings.confirm:
            logger.info(ECHO_PAYLOAD.decode())
            self.host.write(ECHO_PAYLOAD)
        return False


_CONTROLLERS: dict[str, type[ConfirmationController]] = {
    "two-key": TwoKeyController,
    "accept-confirm": AcceptConfirmController,
    "echo": EchoController,
}


def build_controller(
    variant: Variant, bindings: KeyBindingConfig, registry: SnapshotRegistry, host: Host
) -> ConfirmationController:
    """Create the controller for a variant name."""
    return _CONTROLLERS[variant](bindings, registry, host)
