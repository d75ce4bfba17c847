import os
from typing import Dict, List, Optional, Tuple

import config
import logger
from color import Style
from event import Key, KeyEvent

os.environ.setdefault('ESCDELAY', '25')
import curses

Cell = Tuple[str, List[str], Style]


class Screen:
    """A grid of styled character cells with a cursor.

    Widgets only ever talk to this interface; the concrete screens below decide
    where the cells end up.
    """

    def size(self) -> Tuple[int, int]:
        raise NotImplementedError()

    def width(self):
        return self.size()[0]

    def height(self):
        return self.size()[1]

    def contains(self, x: int, y: int) -> bool:
        w, h = self.size()
        return 0 <= x < w and 0 <= y < h

    def set_content(self, x: int, y: int, ch: str, combining: Optional[List[str]], style: Style):
        raise NotImplementedError()

    def get_content(self, x: int, y: int) -> Cell:
        raise NotImplementedError()

    def show_cursor(self, x: int, y: int):
        raise NotImplementedError()

    def hide_cursor(self):
        raise NotImplementedError()

    def clear(self):
        w, h = self.size()
        for y in range(h):
            for x in range(w):
                self.set_content(x, y, ' ', None, Style.DEFAULT)

    def show(self):
        pass

    def poll_event(self) -> Optional[KeyEvent]:
        return None

    def close(self):
        pass


class CellScreen(Screen):
    """In-memory screen, for headless rendering and tests."""

    def __init__(self, width: int, height: int):
        self._size = width, height
        self._cells: List[List[Cell]] = [[(' ', [], Style.DEFAULT) for _ in range(width)] for _ in range(height)]
        self.cursor_visible = True
        self.cursor_pos = (0, 0)
        self.writes = 0
        self._events: List[KeyEvent] = []

    def size(self):
        return self._size

    def set_content(self, x, y, ch, combining, style):
        if not self.contains(x, y):
            return
        self._cells[y][x] = (ch, list(combining) if combining else [], style)
        self.writes += 1

    def get_content(self, x, y):
        if not self.contains(x, y):
            return ' ', [], Style.DEFAULT
        return self._cells[y][x]

    def show_cursor(self, x, y):
        self.cursor_visible = True
        self.cursor_pos = (x, y)

    def hide_cursor(self):
        self.cursor_visible = False

    def row_text(self, y: int) -> str:
        return ''.join(self.get_content(x, y)[0] for x in range(self.width()))

    def snapshot(self):
        return [list(row) for row in self._cells]

    def post_event(self, event: KeyEvent):
        self._events.append(event)

    def poll_event(self):
        if self._events:
            return self._events.pop(0)
        return None


class CursesScreen(Screen):
    def __init__(self):
        super().__init__()
        self._scr = curses.initscr()
        curses.flushinp()
        curses.noecho()
        curses.raw()
        self._scr.notimeout(False)
        self._scr.timeout(30)
        self._scr.keypad(True)
        curses.start_color()
        try:
            curses.use_default_colors()
        except curses.error:
            pass
        self._pairs: Dict[Tuple[int, int], int] = {}

    def size(self):
        mx = self._scr.getmaxyx()
        return mx[1], mx[0]

    def _color_pair(self, style: Style):
        key = (style.fg, style.bg)
        if key not in self._pairs:
            n = len(self._pairs) + 1
            if n >= curses.COLOR_PAIRS:
                return 0
            try:
                curses.init_pair(n, style.fg, style.bg)
            except curses.error:
                return 0
            self._pairs[key] = n
        return curses.color_pair(self._pairs.get(key))

    def set_content(self, x, y, ch, combining, style):
        if not self.contains(x, y):
            return
        text = ch + ''.join(combining) if combining else ch
        try:
            self._scr.addstr(y, x, text, self._color_pair(style))
        except curses.error:
            # writing the bottom-right cell moves the cursor off screen
            pass

    def get_content(self, x, y):
        value = self._scr.inch(y, x)
        return chr(value & curses.A_CHARTEXT), [], Style.DEFAULT

    def show_cursor(self, x, y):
        curses.curs_set(1)
        if self.contains(x, y):
            self._scr.move(y, x)

    def hide_cursor(self):
        curses.curs_set(0)

    def clear(self):
        self._scr.erase()

    def show(self):
        self._scr.refresh()

    def getkey(self):
        key = None
        try:
            key = self._scr.getkey()
            if len(key) == 1 and ord(key[0]) == 27:
                key = 'ESC'
                next_key = self._scr.getkey()
                key = "Alt+" + next_key
        except curses.error as e:
            if e.args[0] == 'no input':
                return key
        except KeyboardInterrupt:
            return chr(3)
        return key

    def poll_event(self):
        key = self.getkey()
        if key is None:
            return None
        if key in config.keymap:
            return KeyEvent(Key[config.keymap.get(key)])
        if len(key) == 1 and key.isprintable():
            return KeyEvent.from_rune(key)
        logger.logwrite(f'Unmapped key: "{key}"')
        return None

    def close(self):
        curses.nocbreak()
        self._scr.keypad(0)
        curses.echo()
        curses.endwin()
        self._scr = None

