from typing import Callable, List, Optional

import logger
from box import Box
from color import Color
from dialogs.checkbox import CheckboxWidget
from dialogs.form_item import FormItem
from dialogs.widget import Widget
from event import Key, KeyEvent
from geom import Rect
from utils import text_width


class Form(Widget):
    """Stacks form items one per row and moves focus between them.

    Every item gets the form's colors and a label padded to the longest one, so
    the fields line up in a single column.
    """

    def __init__(self, box: Box = None):
        super().__init__(box)
        self._items: List[FormItem] = []
        self._focus: Optional[FormItem] = None
        self._label_color = Color.LABEL
        self._field_text_color = Color.FIELD_TEXT
        self._field_background_color = Color.FIELD_BACKGROUND
        self._cancel: Optional[Callable[[], None]] = None

    def set_label_color(self, color: int):
        self._label_color = color
        return self

    def set_field_text_color(self, color: int):
        self._field_text_color = color
        return self

    def set_field_background_color(self, color: int):
        self._field_background_color = color
        return self

    def set_cancel_func(self, handler: Optional[Callable[[], None]]):
        self._cancel = handler
        return self

    def add_item(self, item: FormItem):
        self._items.append(item)
        item.set_finished_func(self.on_finished)
        if self._focus is None:
            self.set_focus(item)
        self.layout()
        return self

    def add_checkbox(self, label: str, checked: bool = False, changed=None):
        return self.add_item(CheckboxWidget(label=label, checked=checked).set_changed_func(changed))

    def get_item(self, index: int) -> FormItem:
        return self._items[index]

    def item_count(self) -> int:
        return len(self._items)

    def get_focused_item(self) -> Optional[FormItem]:
        return self._focus

    def set_focus(self, item: FormItem):
        if self._focus is not None:
            self._focus.blur()
        self._focus = item
        item.focus()
        logger.logwrite(f'Focus: {item.get_label().strip()}')

    def change_focus(self, d):
        if self._focus is None:
            return
        try:
            i = self._items.index(self._focus)
            i = (i + d) % len(self._items)
            self.set_focus(self._items[i])
        except ValueError:
            pass

    def on_finished(self, key: Key):
        if key == Key.TAB:
            self.change_focus(1)
        elif key == Key.BACKTAB:
            self.change_focus(-1)
        elif key == Key.ESCAPE:
            if self._cancel is not None:
                self._cancel()

    def layout(self):
        if not self._items:
            return
        labels = [item.get_label().strip() for item in self._items]
        label_width = max(text_width(label) for label in labels)
        r = self._box.get_inner_rect()
        y = r.pos.y
        for item, label in zip(self._items, labels):
            padded = label + ' ' * (label_width - text_width(label) + 1) if label_width > 0 else ''
            item.set_form_attributes(padded, self._label_color, self.get_background_color(),
                                     self._field_text_color, self._field_background_color)
            item.set_rect(Rect(r.pos.x, y, r.width(), 1))
            y += 1

    def draw(self, screen):
        super().draw(screen)
        self.layout()
        r = self._box.get_inner_rect()
        for item in self._items:
            if item is not self._focus and item.get_rect().pos.y < r.bottom():
                item.draw(screen)
        if self._focus is not None and self._focus.get_rect().pos.y < r.bottom():
            self._focus.draw(screen)

    def handle_event(self, event: KeyEvent) -> bool:
        if self._focus is None:
            return False
        return self._focus.handle_event(event)
