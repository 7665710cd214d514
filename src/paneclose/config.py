"""Configuration management for paneclose.

Handles key bindings and default settings from paneclose.toml, with
command-line key=value overrides layered on top.
"""

import logging
import tempfile
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .keys import KeyWithModifier, parse_key_binding
from .types import VARIANTS, Variant

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "paneclose.toml"
DEFAULT_VARIANT: Variant = "accept-confirm"
BINDING_OPTIONS = ("confirm_key", "cancel_key", "accept_key")


@dataclass(frozen=True)
class KeyBindingConfig:
    """Resolved confirm/cancel/accept keys."""

    confirm: KeyWithModifier
    cancel: KeyWithModifier
    accept: KeyWithModifier

    @classmethod
    def defaults(cls, variant: Variant = DEFAULT_VARIANT) -> "KeyBindingConfig":
        """Compiled-in bindings for a controller variant."""
        if variant == "two-key":
            return cls(
                confirm=KeyWithModifier.char("y"),
                cancel=KeyWithModifier.char("n"),
                accept=KeyWithModifier.char("y"),
            )
        return cls(
            confirm=KeyWithModifier.named("Enter"),
            cancel=KeyWithModifier.named("Esc"),
            accept=KeyWithModifier.char("y"),
        )

    @classmethod
    def from_options(cls, options: Mapping[str, str], variant: Variant = DEFAULT_VARIANT) -> "KeyBindingConfig":
        """Resolve bindings from option strings.

        Never fails: a missing or malformed option keeps the default for
        that option. Unrecognized option names are ignored.

        Args:
            options: Option name to raw binding string
            variant: Controller variant whose defaults apply

        Returns:
            KeyBindingConfig with every binding set
        """
        defaults = cls.defaults(variant)
        resolved = {
            "confirm_key": defaults.confirm,
            "cancel_key": defaults.cancel,
            "accept_key": defaults.accept,
        }

        for name in BINDING_OPTIONS:
            raw = options.get(name)
            if raw is None:
                continue
            parsed = parse_key_binding(str(raw))
            if parsed is None:
                logger.debug(f"Ignoring malformed {name}={raw!r}, keeping {resolved[name]}")
                continue
            resolved[name] = parsed

        return cls(
            confirm=resolved["confirm_key"],
            cancel=resolved["cancel_key"],
            accept=resolved["accept_key"],
        )


def _find_config_file() -> Optional[Path]:
    """Find paneclose.toml in current or parent directories, then ~/.config."""
    current = Path.cwd()

    for parent in [current] + list(current.parents):
        config_file = parent / CONFIG_FILENAME
        if config_file.exists():
            return config_file

    user_file = Path.home() / ".config" / "paneclose" / CONFIG_FILENAME
    if user_file.exists():
        return user_file

    return None


def _load_config(path: Optional[Path] = None) -> dict:
    """Load raw configuration from file."""
    if path is None:
        path = _find_config_file()

    if path is None or not path.exists():
        return {}

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError) as e:
        logger.debug(f"Ignoring unreadable config {path}: {e}")
        return {}


def _table(data: dict, name: str) -> dict:
    """Get a top-level table, treating a non-table value as empty."""
    value = data.get(name, {})
    if not isinstance(value, dict):
        logger.debug(f"Ignoring non-table [{name}] in config")
        return {}
    return value


def parse_overrides(args: list[str]) -> dict[str, str]:
    """Parse key=value command-line arguments.

    Arguments without "=" are skipped.
    """
    overrides = {}
    for arg in args:
        if "=" not in arg:
            logger.debug(f"Ignoring argument without '=': {arg!r}")
            continue
        key, value = arg.split("=", 1)
        overrides[key.strip()] = value.strip()
    return overrides


class ConfigManager:
    """Manages configuration for paneclose."""

    def __init__(self, path: Optional[Path] = None, overrides: Optional[Mapping[str, str]] = None):
        self._config_file = path or _find_config_file()
        self.data = _load_config(self._config_file)
        self._default_config = dict(_table(self.data, "default"))
        self._bindings = {k: v for k, v in _table(self.data, "bindings").items() if isinstance(v, str)}

        # Command-line options share one namespace with both tables
        for key, value in (overrides or {}).items():
            if key in BINDING_OPTIONS:
                self._bindings[key] = value
            else:
                self._default_config[key] = value

    @property
    def config_file(self) -> Optional[Path]:
        return self._config_file

    @property
    def variant(self) -> Variant:
        """Controller variant, falling back to accept-confirm."""
        value = self._default_config.get("variant", DEFAULT_VARIANT)
        if value not in VARIANTS:
            logger.debug(f"Unknown variant {value!r}, using {DEFAULT_VARIANT}")
            return DEFAULT_VARIANT
        return value

    @property
    def bindings(self) -> KeyBindingConfig:
        """Key bindings for the configured variant."""
        return KeyBindingConfig.from_options(self._bindings, self.variant)

    @property
    def poll_interval(self) -> float:
        """Seconds between host snapshot polls."""
        try:
            value = float(self._default_config.get("poll_interval", 0.5))
        except (TypeError, ValueError):
            return 0.5
        return value if value > 0 else 0.5

    @property
    def log_file(self) -> Path:
        """Where log output goes while the TUI owns the terminal."""
        value = self._default_config.get("log_file")
        if value:
            return Path(value).expanduser()
        return Path(tempfile.gettempdir()) / "paneclose.log"


# Global instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager(overrides: Optional[Mapping[str, str]] = None) -> ConfigManager:
    """Get or create the global config manager.

    Overrides only apply when the manager is first created.
    """
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager(overrides=overrides)
    return _config_manager
