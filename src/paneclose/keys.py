"""Key identities and key-binding parsing.

PUBLIC API:
  - KeyWithModifier: Bare key plus modifier set
  - parse_key_binding: Parse "Ctrl Alt x" style strings, None on failure
  - from_textual_key: Translate a textual key event into a KeyWithModifier
"""

import logging
from dataclasses import dataclass, field

__all__ = ["KeyWithModifier", "parse_key_binding", "from_textual_key", "MODIFIERS"]

logger = logging.getLogger(__name__)

# Order used when formatting a binding back to text
MODIFIERS = ("Ctrl", "Alt", "Shift", "Super")

_MODIFIER_LOOKUP = {m.lower(): m for m in MODIFIERS}

_NAMED_KEYS = (
    "Enter",
    "Esc",
    "Tab",
    "Backspace",
    "Delete",
    "Insert",
    "Home",
    "End",
    "PageUp",
    "PageDown",
    "Left",
    "Right",
    "Up",
    "Down",
    "CapsLock",
    "ScrollLock",
    "NumLock",
    "PrintScreen",
    "Pause",
    "Menu",
    *(f"F{n}" for n in range(1, 13)),
)

_BARE_KEY_LOOKUP = {name.lower(): name for name in _NAMED_KEYS}
_BARE_KEY_LOOKUP["space"] = " "

# textual key names that differ from ours
_TEXTUAL_KEY_NAMES = {
    "enter": "Enter",
    "escape": "Esc",
    "tab": "Tab",
    "backspace": "Backspace",
    "delete": "Delete",
    "insert": "Insert",
    "home": "Home",
    "end": "End",
    "pageup": "PageUp",
    "pagedown": "PageDown",
    "left": "Left",
    "right": "Right",
    "up": "Up",
    "down": "Down",
    "space": " ",
    **{f"f{n}": f"F{n}" for n in range(1, 13)},
}

_TEXTUAL_MODIFIERS = {"ctrl": "Ctrl", "alt": "Alt", "meta": "Alt", "shift": "Shift", "super": "Super"}


@dataclass(frozen=True)
class KeyWithModifier:
    """A key press: bare key plus the modifiers held with it.

    Attributes:
        key: Named key ("Enter", "Esc", "F5") or a single character.
        modifiers: Subset of MODIFIERS.
    """

    key: str
    modifiers: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def char(cls, c: str, *modifiers: str) -> "KeyWithModifier":
        return cls(key=c, modifiers=frozenset(modifiers))

    @classmethod
    def named(cls, name: str, *modifiers: str) -> "KeyWithModifier":
        return cls(key=_BARE_KEY_LOOKUP[name.lower()], modifiers=frozenset(modifiers))

    def __str__(self) -> str:
        key = "Space" if self.key == " " else self.key
        return " ".join([m for m in MODIFIERS if m in self.modifiers] + [key])


def parse_key_binding(text: str) -> KeyWithModifier | None:
    """Parse a key-binding string like "Ctrl Shift x" or "Enter".

    Args:
        text: Whitespace separated modifiers followed by exactly one bare key

    Returns:
        KeyWithModifier, or None if the string is not a valid binding
    """
    tokens = text.split()
    if not tokens:
        return None

    modifiers: set[str] = set()
    for token in tokens[:-1]:
        modifier = _MODIFIER_LOOKUP.get(token.lower())
        if modifier is None or modifier in modifiers:
            # Unknown modifier, duplicate, or a second bare key
            return None
        modifiers.add(modifier)

    bare = tokens[-1]
    if bare.lower() in _BARE_KEY_LOOKUP:
        key = _BARE_KEY_LOOKUP[bare.lower()]
    elif len(bare) == 1:
        key = bare
    else:
        return None

    # Key events carry shifted characters without Shift ("Y", not "Shift y")
    if len(key) == 1 and key != " " and modifiers == {"Shift"}:
        if key.isalpha():
            return KeyWithModifier(key=key.upper())
        logger.debug(f"Binding {text!r} can never match: shifted symbols arrive as their own character")

    return KeyWithModifier(key=key, modifiers=frozenset(modifiers))


def from_textual_key(key: str, character: str | None = None) -> KeyWithModifier | None:
    """Translate textual's key name (e.g. "ctrl+a", "escape") to a KeyWithModifier.

    Args:
        key: textual key name, modifiers joined with "+"
        character: Printable character for the key, if any

    Returns:
        KeyWithModifier, or None for keys with no equivalent
    """
    parts = key.split("+")
    name = parts[-1]

    modifiers = set()
    for part in parts[:-1]:
        modifier = _TEXTUAL_MODIFIERS.get(part)
        if modifier is None:
            logger.debug(f"Unknown textual modifier {part!r} in {key!r}")
            return None
        modifiers.add(modifier)

    if name in _TEXTUAL_KEY_NAMES:
        bare = _TEXTUAL_KEY_NAMES[name]
    elif character and len(character) == 1 and character.isprintable():
        # Shift is already folded into the character ("Y" not "Shift y")
        bare = character
        modifiers.discard("Shift")
    elif len(name) == 1:
        bare = name
    else:
        return None

    return KeyWithModifier(key=bare, modifiers=frozenset(modifiers))
