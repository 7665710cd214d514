"""Tests for the confirmation state machine variants."""

import pytest

from conftest import grouped, pane
from paneclose.config import KeyBindingConfig
from paneclose.controller import (
    ECHO_PAYLOAD,
    AcceptConfirmController,
    EchoController,
    TwoKeyController,
    build_controller,
)
from paneclose.keys import KeyWithModifier
from paneclose.types import ConfirmationState

ENTER = KeyWithModifier.named("Enter")
ESC = KeyWithModifier.named("Esc")
Y = KeyWithModifier.char("y")
N = KeyWithModifier.char("n")


def _focus(registry, pane_id=7):
    registry.apply_pane_snapshot(grouped(pane(pane_id, focused=True)))


@pytest.fixture
def two_key(registry, host):
    return TwoKeyController(KeyBindingConfig.defaults("two-key"), registry, host)


@pytest.fixture
def accept_confirm(registry, host, bindings):
    return AcceptConfirmController(bindings, registry, host)


def test_build_controller_picks_variant(registry, host, bindings):
    assert isinstance(build_controller("two-key", bindings, registry, host), TwoKeyController)
    assert isinstance(build_controller("accept-confirm", bindings, registry, host), AcceptConfirmController)
    assert isinstance(build_controller("echo", bindings, registry, host), EchoController)


# Two-key


def test_two_key_confirm_closes_target_then_hides(two_key, registry, host):
    _focus(registry, 7)

    assert two_key.handle_key(Y) is True
    assert host.actions == [("close", 7), ("hide",)]
    assert two_key.state == ConfirmationState.HIDDEN


def test_two_key_confirm_without_target_is_noop(two_key, host):
    assert two_key.handle_key(Y) is False
    assert host.actions == []
    assert two_key.state == ConfirmationState.IDLE


def test_two_key_cancel_hides_without_redraw(two_key, registry, host):
    _focus(registry, 7)

    assert two_key.handle_key(N) is False
    assert host.actions == [("hide",)]
    assert two_key.state == ConfirmationState.HIDDEN


def test_two_key_acts_on_captured_target(two_key, registry, host):
    _focus(registry, 7)
    # Later snapshot reports no focus: the captured target stays 7
    registry.apply_pane_snapshot(grouped(pane(7), pane(8)))

    two_key.handle_key(Y)

    assert host.actions[0] == ("close", 7)


# Accept then confirm


def test_accept_confirm_scenario(accept_confirm, registry, host):
    _focus(registry, 7)
    assert registry.target() == 7

    assert accept_confirm.handle_key(Y) is True
    assert accept_confirm.state == ConfirmationState.AWAITING_CONFIRMATION
    assert host.actions == []

    accept_confirm.handle_key(ENTER)

    assert host.actions == [("close", 7), ("hide",)]
    assert accept_confirm.state == ConfirmationState.HIDDEN


def test_accept_without_target_is_noop(accept_confirm, host):
    assert accept_confirm.handle_key(Y) is False
    assert accept_confirm.state == ConfirmationState.IDLE
    assert host.actions == []


def test_confirm_before_accept_does_nothing(accept_confirm, registry, host):
    _focus(registry, 7)

    assert accept_confirm.handle_key(ENTER) is False
    assert accept_confirm.state == ConfirmationState.IDLE
    assert host.actions == []


def test_repeated_accept_does_not_redraw(accept_confirm, registry):
    _focus(registry, 7)
    accept_confirm.handle_key(Y)

    assert accept_confirm.handle_key(Y) is False
    assert accept_confirm.state == ConfirmationState.AWAITING_CONFIRMATION


# Shared behaviour


@pytest.mark.parametrize("variant", ["two-key", "accept-confirm", "echo"])
@pytest.mark.parametrize("with_target", [True, False])
@pytest.mark.parametrize("armed", [True, False])
def test_cancel_always_terminates(registry, host, variant, with_target, armed):
    bindings = KeyBindingConfig.defaults(variant)
    controller = build_controller(variant, bindings, registry, host)
    if with_target:
        _focus(registry, 3)
    if armed and variant == "accept-confirm":
        controller.handle_key(bindings.accept)

    controller.handle_key(bindings.cancel)

    assert controller.state == ConfirmationState.HIDDEN
    assert host.actions == [("hide",)]


@pytest.mark.parametrize("variant", ["two-key", "accept-confirm"])
def test_hidden_controller_ignores_keys(registry, host, variant):
    bindings = KeyBindingConfig.defaults(variant)
    controller = build_controller(variant, bindings, registry, host)
    _focus(registry, 7)
    controller.handle_key(bindings.cancel)
    host.actions.clear()

    for key in (bindings.accept, bindings.confirm, bindings.cancel):
        assert controller.handle_key(key) is False
    assert host.actions == []


@pytest.mark.parametrize("variant", ["two-key", "accept-confirm", "echo"])
def test_unbound_key_is_ignored(registry, host, variant):
    controller = build_controller(variant, KeyBindingConfig.defaults(variant), registry, host)
    _focus(registry, 7)

    assert controller.handle_key(KeyWithModifier.char("z", "Ctrl")) is False
    assert controller.state == ConfirmationState.IDLE
    assert host.actions == []


# Echo


def test_echo_writes_payload_without_transition(registry, host, caplog):
    controller = EchoController(KeyBindingConfig.defaults("echo"), registry, host)

    with caplog.at_level("INFO", logger="paneclose.controller"):
        assert controller.handle_key(ENTER) is False

    assert host.actions == [("write", ECHO_PAYLOAD)]
    assert controller.state == ConfirmationState.IDLE
    assert ECHO_PAYLOAD.decode() in caplog.text
