from typing import Optional

from color import Color, Style
from geom import Rect
from utils import Align, print_text

# corners and edges: top-left, horizontal, top-right, vertical, bottom-left, bottom-right
FRAMES = ['┌─┐│└┘',
          '╔═╗║╚╝']


class Box:
    def __init__(self, rect: Optional[Rect] = None):
        self.rect = Rect(rect) if rect is not None else Rect(0, 0, 15, 10)
        self._border = False
        self._border_color = Color.BORDER
        self._background_color = Color.DEFAULT
        self._title = ''
        self._has_focus = False

    def set_rect(self, rect: Rect):
        self.rect = Rect(rect)
        return self

    def get_rect(self) -> Rect:
        return self.rect

    def get_inner_rect(self) -> Rect:
        r = Rect(self.rect)
        if self._border:
            r.inflate(-1)
        return r

    def set_border(self, state: bool):
        self._border = state
        return self

    def has_border(self) -> bool:
        return self._border

    def set_border_color(self, color: int):
        self._border_color = color
        return self

    def set_title(self, title: str):
        self._title = title
        return self

    def get_title(self) -> str:
        return self._title

    def set_background_color(self, color: int):
        self._background_color = color
        return self

    def get_background_color(self) -> int:
        return self._background_color

    def focus(self):
        self._has_focus = True

    def blur(self):
        self._has_focus = False

    def has_focus(self) -> bool:
        return self._has_focus

    def draw(self, screen):
        r = self.rect
        if r.width() <= 0 or r.height() <= 0:
            return
        background = Style.DEFAULT.background(self._background_color)
        for y in range(r.pos.y, r.bottom()):
            for x in range(r.pos.x, r.right()):
                screen.set_content(x, y, ' ', None, background)
        if self._border and r.width() >= 2 and r.height() >= 2:
            self.draw_frame(screen, FRAMES[1 if self._has_focus else 0])
            if self._title:
                print_text(screen, self._title, r.pos.x + 1, r.pos.y, r.width() - 2, Align.LEFT,
                           self._border_color, self._background_color)

    def draw_frame(self, screen, frame):
        r = self.rect
        style = Style(self._border_color, self._background_color)
        left, top, right, bottom = r.pos.x, r.pos.y, r.right() - 1, r.bottom() - 1
        for x in range(left + 1, right):
            screen.set_content(x, top, frame[1], None, style)
            screen.set_content(x, bottom, frame[1], None, style)
        for y in range(top + 1, bottom):
            screen.set_content(left, y, frame[3], None, style)
            screen.set_content(right, y, frame[3], None, style)
        screen.set_content(left, top, frame[0], None, style)
        screen.set_content(right, top, frame[2], None, style)
        screen.set_content(left, bottom, frame[4], None, style)
        screen.set_content(right, bottom, frame[5], None, style)
