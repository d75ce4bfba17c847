from typing import Callable, Optional

from box import Box
from color import Color, Style
from dialogs.form_item import FinishedFunc, FormItem
from dialogs.widget import Widget
from event import Key, KeyEvent
from utils import Align, print_text


class CheckboxWidget(Widget, FormItem):
    """A one-line labeled toggle: the label followed by a single 'X' / ' ' cell."""

    def __init__(self, box: Box = None, label: str = '', checked: bool = False):
        super().__init__(box)
        self._checked = checked
        self._label = label
        self._label_color = Color.LABEL
        self._field_background_color = Color.FIELD_BACKGROUND
        self._field_text_color = Color.FIELD_TEXT
        self._changed: Optional[Callable[[bool], None]] = None
        self._done: FinishedFunc = None

    def set_checked(self, checked: bool):
        self._checked = bool(checked)
        return self

    def is_checked(self) -> bool:
        return self._checked

    def set_label(self, label: str):
        self._label = label
        return self

    def get_label(self) -> str:
        return self._label

    def set_label_color(self, color: int):
        self._label_color = color
        return self

    def set_field_background_color(self, color: int):
        self._field_background_color = color
        return self

    def set_field_text_color(self, color: int):
        self._field_text_color = color
        return self

    def set_form_attributes(self, label, label_color, bg_color, field_text_color, field_bg_color):
        self._label = label
        self._label_color = label_color
        self._box.set_background_color(bg_color)
        self._field_text_color = field_text_color
        self._field_background_color = field_bg_color
        return self

    def set_changed_func(self, handler: Optional[Callable[[bool], None]]):
        """Called with the new state whenever the user toggles the box."""
        self._changed = handler
        return self

    def set_done_func(self, handler: FinishedFunc):
        """Called with Key.TAB, Key.BACKTAB or Key.ESCAPE when the user leaves the field."""
        self._done = handler
        return self

    def set_finished_func(self, handler: FinishedFunc):
        return self.set_done_func(handler)

    def field_style(self) -> Style:
        style = Style.DEFAULT.background(self._field_background_color).foreground(self._field_text_color)
        if self.has_focus():
            style = style.background(self._field_text_color).foreground(self._field_background_color)
        return style

    def draw(self, screen):
        super().draw(screen)

        r = self._box.get_inner_rect()
        x, y = r.pos.x, r.pos.y
        right = r.right()
        if r.height() < 1 or right <= x:
            return

        # the last interior column is kept for the toggle cell
        x += print_text(screen, self._label, x, y, right - x - 1, Align.LEFT, self._label_color,
                        self._box.get_background_color())

        screen.set_content(x, y, 'X' if self._checked else ' ', None, self.field_style())

        if self.has_focus():
            screen.hide_cursor()

    def toggle(self):
        self._checked = not self._checked
        if self._changed is not None:
            self._changed(self._checked)

    def handle_event(self, event: KeyEvent) -> bool:
        key = event.key
        if key == Key.RUNE and event.rune == ' ' or key == Key.ENTER:
            self.toggle()
            return True
        if key in (Key.TAB, Key.BACKTAB, Key.ESCAPE):
            if self._done is not None:
                self._done(key)
            return True
        return False
