"""Keyboard events delivered to the terminal editor."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


class Key(enum.Enum):
    """Key codes understood by the editor components."""

    CHAR = "char"
    ENTER = "enter"
    BACKSPACE = "backspace"
    DELETE = "delete"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    TAB = "tab"
    ESC = "esc"
    F1 = "f1"
    F2 = "f2"
    F3 = "f3"
    F4 = "f4"
    F5 = "f5"
    F6 = "f6"
    F7 = "f7"
    F8 = "f8"
    F9 = "f9"
    F10 = "f10"
    F11 = "f11"
    F12 = "f12"


class KeyModifiers(enum.Flag):
    """Modifier keys held during a key press."""

    NONE = 0
    SHIFT = enum.auto()
    CONTROL = enum.auto()
    ALT = enum.auto()


@dataclass(frozen=True)
class KeyEvent:
    """A single key press: its code, its character for ``Key.CHAR``, and modifiers."""

    key: Key
    character: Optional[str] = None
    modifiers: KeyModifiers = KeyModifiers.NONE

    def __post_init__(self) -> None:
        if self.key is Key.CHAR:
            if self.character is None or len(self.character) != 1:
                raise ValueError("a character key needs exactly one character")
        elif self.character is not None:
            raise ValueError(f"{self.key.name} carries no character")

    @classmethod
    def char(cls, c: str, modifiers: KeyModifiers = KeyModifiers.NONE) -> KeyEvent:
        """A key press of the character ``c``."""
        return cls(Key.CHAR, c, modifiers)

    def has_control(self) -> bool:
        """Whether Control was held."""
        return bool(self.modifiers & KeyModifiers.CONTROL)