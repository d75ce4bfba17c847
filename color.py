from dataclasses import dataclass, replace

import config


class Color:
    DEFAULT = -1
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7

    # Theme
    LABEL = config.get_int('label_color', YELLOW)
    FIELD_BACKGROUND = config.get_int('field_bg_color', BLUE)
    FIELD_TEXT = config.get_int('field_fg_color', WHITE)
    BORDER = config.get_int('border_color', WHITE)


@dataclass(frozen=True)
class Style:
    fg: int = Color.DEFAULT
    bg: int = Color.DEFAULT

    def foreground(self, color: int) -> 'Style':
        return replace(self, fg=color)

    def background(self, color: int) -> 'Style':
        return replace(self, bg=color)


Style.DEFAULT = Style()
