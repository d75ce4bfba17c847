import unittest

from box import Box
from color import Color, Style
from dialogs.checkbox import CheckboxWidget
from dialogs.form_item import FormItem
from event import Key, KeyEvent
from geom import Rect
from screen import CellScreen

SPACE = KeyEvent.from_rune(' ')


class TestCheckboxConfiguration(unittest.TestCase):
    def test_defaults(self):
        checkbox = CheckboxWidget()
        self.assertFalse(checkbox.is_checked())
        self.assertEqual(checkbox.get_label(), '')
        self.assertIsInstance(checkbox, FormItem)

    def test_setters_chain(self):
        checkbox = CheckboxWidget()
        result = (checkbox.set_label('Accept')
                  .set_checked(True)
                  .set_label_color(Color.RED)
                  .set_field_background_color(Color.GREEN)
                  .set_field_text_color(Color.BLACK))
        self.assertIs(result, checkbox)
        self.assertEqual(checkbox.get_label(), 'Accept')
        self.assertTrue(checkbox.is_checked())

    def test_set_checked_does_not_fire_changed(self):
        calls = []
        checkbox = CheckboxWidget().set_changed_func(calls.append)
        checkbox.set_checked(True)
        checkbox.set_checked(False)
        self.assertEqual(calls, [])

    def test_set_form_attributes(self):
        checkbox = CheckboxWidget(label='old')
        result = checkbox.set_form_attributes('new', Color.CYAN, Color.MAGENTA, Color.BLACK, Color.YELLOW)
        self.assertIs(result, checkbox)
        self.assertEqual(checkbox.get_label(), 'new')
        self.assertEqual(checkbox.get_background_color(), Color.MAGENTA)
        self.assertEqual(checkbox.field_style(), Style(Color.BLACK, Color.YELLOW))

    def test_finished_func_installs_done_handler(self):
        keys = []
        checkbox = CheckboxWidget()
        self.assertIs(checkbox.set_finished_func(keys.append), checkbox)
        checkbox.handle_event(KeyEvent(Key.TAB))
        self.assertEqual(keys, [Key.TAB])

    def test_new_handler_replaces_old(self):
        first, second = [], []
        checkbox = CheckboxWidget().set_changed_func(first.append).set_changed_func(second.append)
        checkbox.handle_event(SPACE)
        self.assertEqual(first, [])
        self.assertEqual(second, [True])


class TestCheckboxInput(unittest.TestCase):
    def setUp(self):
        self.changes = []
        self.done = []
        self.checkbox = CheckboxWidget(label='Accept')
        self.checkbox.set_changed_func(self.changes.append)
        self.checkbox.set_done_func(self.done.append)
        self.checkbox.focus()

    def test_accept_scenario(self):
        self.assertTrue(self.checkbox.handle_event(SPACE))
        self.assertTrue(self.checkbox.is_checked())
        self.assertEqual(self.changes, [True])
        self.checkbox.handle_event(SPACE)
        self.assertFalse(self.checkbox.is_checked())
        self.assertEqual(self.changes, [True, False])
        self.checkbox.handle_event(KeyEvent(Key.TAB))
        self.assertEqual(self.done, [Key.TAB])
        self.assertFalse(self.checkbox.is_checked())
        self.assertEqual(self.changes, [True, False])

    def test_enter_toggles_like_space(self):
        self.assertTrue(self.checkbox.handle_event(KeyEvent(Key.ENTER)))
        self.assertTrue(self.checkbox.is_checked())
        self.assertEqual(self.changes, [True])

    def test_toggle_parity(self):
        events = [SPACE, KeyEvent(Key.ENTER), SPACE, SPACE, KeyEvent(Key.ENTER)]
        for count, event in enumerate(events, 1):
            self.checkbox.handle_event(event)
            self.assertEqual(len(self.changes), count)
            self.assertEqual(self.checkbox.is_checked(), count % 2 == 1)

    def test_changed_sees_committed_state(self):
        seen = []
        self.checkbox.set_changed_func(lambda checked: seen.append((checked, self.checkbox.is_checked())))
        self.checkbox.handle_event(SPACE)
        self.assertEqual(seen, [(True, True)])

    def test_handler_may_reset_state(self):
        self.checkbox.set_changed_func(lambda checked: self.checkbox.set_checked(False))
        self.checkbox.handle_event(SPACE)
        self.assertFalse(self.checkbox.is_checked())

    def test_done_keys_do_not_change_state(self):
        for key in (Key.TAB, Key.BACKTAB, Key.ESCAPE):
            self.assertTrue(self.checkbox.handle_event(KeyEvent(key)))
        self.assertEqual(self.done, [Key.TAB, Key.BACKTAB, Key.ESCAPE])
        self.assertFalse(self.checkbox.is_checked())
        self.assertEqual(self.changes, [])

    def test_other_runes_are_ignored(self):
        for rune in 'xX1\t':
            self.assertFalse(self.checkbox.handle_event(KeyEvent.from_rune(rune)))
        self.assertFalse(self.checkbox.is_checked())
        self.assertEqual(self.changes, [])

    def test_other_keys_are_ignored(self):
        for key in (Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT, Key.BACKSPACE):
            self.assertFalse(self.checkbox.handle_event(KeyEvent(key)))
        self.assertFalse(self.checkbox.is_checked())
        self.assertEqual(self.changes, [])
        self.assertEqual(self.done, [])

    def test_missing_handlers_are_tolerated(self):
        checkbox = CheckboxWidget()
        checkbox.handle_event(SPACE)
        checkbox.handle_event(KeyEvent(Key.ESCAPE))
        self.assertTrue(checkbox.is_checked())

    def test_input_handler_is_bound(self):
        self.checkbox.input_handler()(SPACE)
        self.assertTrue(self.checkbox.is_checked())


class TestCheckboxDraw(unittest.TestCase):
    def make(self, rect, label='X', checked=False):
        return CheckboxWidget(Box(rect), label=label, checked=checked)

    def test_focused_unchecked_single_row(self):
        screen = CellScreen(10, 1)
        blank = screen.get_content(5, 0)
        checkbox = self.make(Rect(0, 0, 10, 1))
        checkbox.focus()
        checkbox.draw(screen)
        ch, _, style = screen.get_content(0, 0)
        self.assertEqual(ch, 'X')
        self.assertEqual(style.fg, Color.LABEL)
        ch, _, style = screen.get_content(1, 0)
        self.assertEqual(ch, ' ')
        self.assertEqual(style, Style(Color.FIELD_BACKGROUND, Color.FIELD_TEXT))
        for x in range(2, 10):
            self.assertEqual(screen.get_content(x, 0), blank)
        self.assertFalse(screen.cursor_visible)

    def test_unfocused_colors_and_cursor(self):
        screen = CellScreen(10, 1)
        self.make(Rect(0, 0, 10, 1), checked=True).draw(screen)
        ch, _, style = screen.get_content(1, 0)
        self.assertEqual(ch, 'X')
        self.assertEqual(style, Style(Color.FIELD_TEXT, Color.FIELD_BACKGROUND))
        self.assertTrue(screen.cursor_visible)

    def test_set_checked_then_draw(self):
        for value in (True, False):
            screen = CellScreen(20, 1)
            changes = []
            checkbox = self.make(Rect(0, 0, 20, 1), label='Accept').set_changed_func(changes.append)
            checkbox.set_checked(value)
            checkbox.draw(screen)
            self.assertEqual(screen.get_content(6, 0)[0], 'X' if value else ' ')
            self.assertEqual(changes, [])

    def test_draw_is_idempotent(self):
        screen = CellScreen(12, 3)
        checkbox = self.make(Rect(1, 1, 10, 1), label='Accept', checked=True)
        checkbox.focus()
        checkbox.draw(screen)
        first = screen.snapshot()
        checkbox.draw(screen)
        self.assertEqual(screen.snapshot(), first)

    def test_bordered_draws_inside_frame(self):
        screen = CellScreen(12, 3)
        checkbox = self.make(Rect(0, 0, 12, 3), label='Ok', checked=True)
        checkbox.set_border(True)
        checkbox.draw(screen)
        self.assertEqual(screen.row_text(1), '│OkX       │')
        self.assertEqual(screen.get_content(0, 0)[0], '┌')

    def test_label_is_clipped_before_toggle(self):
        screen = CellScreen(6, 1)
        self.make(Rect(0, 0, 6, 1), label='Accept terms', checked=True).draw(screen)
        self.assertEqual(screen.row_text(0), 'AccepX')

    def test_wide_label_places_toggle_after_its_columns(self):
        screen = CellScreen(10, 1)
        self.make(Rect(0, 0, 10, 1), label='\u65e5\u672c', checked=True).draw(screen)
        self.assertEqual(screen.get_content(2, 0)[0], '\u672c')
        self.assertEqual(screen.get_content(4, 0)[0], 'X')

    def test_wide_label_clipped_inside_region(self):
        screen = CellScreen(8, 1)
        self.make(Rect(0, 0, 6, 1), label='\u65e5\u672c\u8a9e', checked=True).draw(screen)
        self.assertEqual(screen.get_content(4, 0)[0], 'X')
        self.assertEqual(screen.get_content(6, 0)[0], ' ')

    def test_empty_regions_write_nothing(self):
        for rect, border in ((Rect(0, 0, 10, 0), False), (Rect(0, 0, 0, 1), False),
                             (Rect(0, 0, -3, 1), False), (Rect(0, 0, 10, -1), False)):
            screen = CellScreen(10, 3)
            checkbox = self.make(rect, checked=True)
            checkbox.set_border(border)
            checkbox.focus()
            checkbox.draw(screen)
            self.assertEqual(screen.writes, 0)
            self.assertTrue(screen.cursor_visible)

    def test_bordered_without_interior_draws_only_frame(self):
        screen = CellScreen(10, 3)
        checkbox = self.make(Rect(0, 0, 10, 2), checked=True).set_border(True)
        checkbox.draw(screen)
        self.assertNotIn('X', screen.row_text(0) + screen.row_text(1))

    def test_draw_does_not_mutate_state(self):
        screen = CellScreen(10, 1)
        checkbox = self.make(Rect(0, 0, 10, 1), checked=True)
        checkbox.draw(screen)
        self.assertTrue(checkbox.is_checked())
        self.assertEqual(checkbox.get_label(), 'X')


if __name__ == '__main__':
    unittest.main()
