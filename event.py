from dataclasses import dataclass
from enum import IntEnum, auto


class Key(IntEnum):
    RUNE = auto()
    ENTER = auto()
    TAB = auto()
    BACKTAB = auto()
    ESCAPE = auto()
    BACKSPACE = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    CTRL_Q = auto()


@dataclass(frozen=True)
class KeyEvent:
    key: Key
    rune: str = ''  # only set for Key.RUNE

    @staticmethod
    def from_rune(rune: str) -> 'KeyEvent':
        return KeyEvent(Key.RUNE, rune)
