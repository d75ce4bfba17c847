from enum import Enum
from typing import List, Tuple

from wcwidth import wcwidth

from color import Color, Style


class Align(Enum):
    LEFT = 0
    CENTER = 1
    RIGHT = 2


def text_cells(text: str) -> List[Tuple[str, List[str], int]]:
    """Split text into screen cells as (character, combining marks, columns).

    Zero-width characters are attached to the cell before them. Wide (East
    Asian) characters take two columns, unprintable ones are counted as one.
    """
    cells = []
    for c in text:
        w = wcwidth(c)
        if w == 0 and cells:
            cells[-1][1].append(c)
        else:
            cells.append((c, [], w if w > 0 else 1))
    return cells


def text_width(text: str) -> int:
    return sum(w for _, _, w in text_cells(text))


def print_text(screen, text: str, x: int, y: int, max_width: int, align: Align, color: int,
               bg: int = Color.DEFAULT) -> int:
    if max_width <= 0:
        return 0
    cells = []
    width = 0
    for cell in text_cells(text):
        if width + cell[2] > max_width:
            break
        cells.append(cell)
        width += cell[2]
    if align == Align.CENTER:
        x += (max_width - width) // 2
    elif align == Align.RIGHT:
        x += max_width - width
    style = Style(color, bg)
    for ch, combining, w in cells:
        screen.set_content(x, y, ch, combining, style)
        x += w
    return width
