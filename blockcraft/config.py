"""Player controls and game options, with their plain-text settings format."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class Key(IntEnum):
    """Keypad buttons, by their bit in the keypad state."""

    A = 1 << 0
    B = 1 << 1
    SELECT = 1 << 2
    START = 1 << 3
    RIGHT = 1 << 4
    LEFT = 1 << 5
    UP = 1 << 6
    DOWN = 1 << 7
    R = 1 << 8
    L = 1 << 9
    X = 1 << 10
    Y = 1 << 11
    TOUCH = 1 << 12
    LID = 1 << 13


class Action(IntEnum):
    """Player actions that can be bound to a key."""

    MOVE_LEFT = 1
    MOVE_RIGHT = 2
    JUMP = 3
    CROUCH = 4
    ITEM_LEFT = 5
    ITEM_RIGHT = 6
    SWITCH_SCREEN = 7
    MENU = 8
    CLIMB = 9
    DROP = 10


class Property(IntEnum):
    """Game options that can be switched on or off."""

    HEROBRINE = 0
    DRAW = 1
    SPEED = 2
    SMOOTH = 3
    GRADIENT = 4
    DITHERING = 5
    REGEN = 6


_KEY_NAMES = {
    Key.UP: "Up",
    Key.DOWN: "Down",
    Key.LEFT: "Left",
    Key.RIGHT: "Right",
    Key.A: "A",
    Key.B: "B",
    Key.X: "X",
    Key.Y: "Y",
    Key.L: "L",
    Key.R: "R",
    Key.START: "Start",
    Key.SELECT: "Select",
}
_KEYS_BY_NAME = {name.upper(): key for key, name in _KEY_NAMES.items()}

_DEFAULT_KEYS = {
    Action.MOVE_LEFT: Key.LEFT,
    Action.MOVE_RIGHT: Key.RIGHT,
    Action.JUMP: Key.A,
    Action.CROUCH: Key.DOWN,
    Action.ITEM_LEFT: Key.X,
    Action.ITEM_RIGHT: Key.B,
    Action.SWITCH_SCREEN: Key.Y,
    Action.MENU: Key.START,
    Action.CLIMB: Key.UP,
    Action.DROP: Key.SELECT,
}

_DEFAULT_PROPERTIES = {
    Property.HEROBRINE: False,
    Property.DRAW: False,
    Property.SPEED: True,
    Property.SMOOTH: True,
    Property.GRADIENT: True,
    Property.DITHERING: True,
    Property.REGEN: True,
}

_KEY_LABELS = (
    ("Move Left", Action.MOVE_LEFT),
    ("Move Right", Action.MOVE_RIGHT),
    ("Jump", Action.JUMP),
    ("Crouch", Action.CROUCH),
    ("Item Left", Action.ITEM_LEFT),
    ("Item Right", Action.ITEM_RIGHT),
    ("Switch Screen", Action.SWITCH_SCREEN),
    ("Menu", Action.MENU),
    ("Climb", Action.CLIMB),
    ("Drop", Action.DROP),
)

_PROPERTY_LABELS = (
    ("Herobrine", Property.HEROBRINE),
    ("Draw Mode", Property.DRAW),
    ("Smooth Camera", Property.SMOOTH),
    ("Creative Speed", Property.SPEED),
    ("Gradient", Property.GRADIENT),
    ("Dithering", Property.DITHERING),
    ("Regeneration", Property.REGEN),
)


def key_name(key: int) -> str:
    """Display name of a key, or ``"Error"`` for keys that cannot be bound."""
    return _KEY_NAMES.get(key, "Error")


def parse_key(text: str) -> Key:
    """Key named by ``text``, ignoring case; unknown names give ``Key.A``."""
    return _KEYS_BY_NAME.get(text.upper(), Key.A)


def parse_property(text: str) -> bool:
    """True only for ``"enabled"`` in any letter case."""
    return text.upper() == "ENABLED"


def _action(action: int) -> Action | None:
    try:
        return Action(action)
    except ValueError:
        return None


@dataclass
class Config:
    """Key bindings, option switches, audio volumes, language and texture pack."""

    keys: dict[Action, Key] = field(default_factory=lambda: dict(_DEFAULT_KEYS))
    properties: dict[Property, bool] = field(
        default_factory=lambda: dict(_DEFAULT_PROPERTIES))
    music_volume: int = 20
    sfx_volume: int = 25
    language_id: int = 1
    texture_name: str = "default"

    def set_key(self, action: int, key: int) -> None:
        """Bind ``key`` to ``action``; unknown actions are ignored."""
        resolved = _action(action)
        if resolved is not None:
            self.keys[resolved] = Key(key)

    def get_key(self, action: int) -> Key:
        """Key bound to ``action``; unknown actions give ``Key.LID``."""
        resolved = _action(action)
        if resolved is None:
            return Key.LID
        return self.keys[resolved]

    def set_property(self, prop: int, enabled: bool) -> None:
        """Switch an option on or off."""
        self.properties[Property(prop)] = bool(enabled)

    def get_property(self, prop: int) -> bool:
        """Whether an option is switched on."""
        return self.properties[Property(prop)]

    def dumps(self) -> str:
        """Render the settings in the settings-file format."""
        lines = ["==Controls=="]
        lines += [f"{label}: {key_name(self.get_key(action))}"
                  for label, action in _KEY_LABELS]
        lines += ["", "==Game Options=="]
        lines += [f"{label}: {'Enabled' if self.get_property(prop) else 'Disabled'}"
                  for label, prop in _PROPERTY_LABELS]
        lines += [
            "",
            f"Texture Pack: {self.texture_name}",
            "",
            "==Audio==",
            f"Music Volume: {self.music_volume}",
            f"Sfx Volume: {self.sfx_volume}",
            "",
            "==Language==",
            f"Language ID: {self.language_id}",
        ]
        return "\n".join(lines) + "\n"

    @classmethod
    def loads(cls, text: str) -> Config:
        """Read settings from the settings-file format.

        Entries that are missing or unreadable keep their default values.
        Each value is the first word after the label's colon.
        """
        entries: dict[str, str] = {}
        for line in text.splitlines():
            label, sep, rest = line.partition(":")
            words = rest.split()
            if sep and words:
                entries.setdefault(label.strip(), words[0])

        config = cls()
        for label, action in _KEY_LABELS:
            if label in entries:
                config.set_key(action, parse_key(entries[label]))
        for label, prop in _PROPERTY_LABELS:
            if label in entries:
                config.set_property(prop, parse_property(entries[label]))
        if "Texture Pack" in entries:
            config.texture_name = entries["Texture Pack"]
        for label, attr in (("Music Volume", "music_volume"),
                            ("Sfx Volume", "sfx_volume"),
                            ("Language ID", "language_id")):
            if label in entries:
                try:
                    setattr(config, attr, int(entries[label]))
                except ValueError:
                    pass
        return config