from box import Box
from event import KeyEvent
from geom import Rect


class Widget:
    """Base for everything drawn inside a form.

    A widget owns a Box for its geometry, border, background and focus flag and
    forwards the box accessors, so callers can configure either one directly.
    """

    def __init__(self, box: Box = None):
        self._box = box if box is not None else Box()

    def set_rect(self, rect: Rect):
        self._box.set_rect(rect)
        return self

    def get_rect(self) -> Rect:
        return self._box.get_rect()

    def set_border(self, state: bool):
        self._box.set_border(state)
        return self

    def has_border(self) -> bool:
        return self._box.has_border()

    def set_title(self, title: str):
        self._box.set_title(title)
        return self

    def set_background_color(self, color: int):
        self._box.set_background_color(color)
        return self

    def get_background_color(self) -> int:
        return self._box.get_background_color()

    def focus(self):
        self._box.focus()

    def blur(self):
        self._box.blur()

    def has_focus(self) -> bool:
        return self._box.has_focus()

    def draw(self, screen):
        self._box.draw(screen)

    def handle_event(self, event: KeyEvent) -> bool:
        return False

    def input_handler(self):
        return self.handle_event
