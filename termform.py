#!/usr/bin/env python3
import traceback

import config
import logger
from box import Box
from dialogs.form import Form
from event import Key
from geom import Rect
from screen import CursesScreen, Screen


class SearchOptions:
    def __init__(self):
        self.case = config.get_bool('find_case')
        self.whole = config.get_bool('find_whole')
        self.regex = config.get_bool('find_regex')

    def save(self):
        config.set_value('find_case', self.case)
        config.set_value('find_whole', self.whole)
        config.set_value('find_regex', self.regex)


class Application:
    def __init__(self, screen: Screen):
        self.screen = screen
        self.options = SearchOptions()
        self.terminating = False
        self.form = Form(Box(Rect(2, 1, 40, 5)).set_border(True).set_title('Search options'))
        self.form.add_checkbox('Case sensitive', self.options.case, self.on_case)
        self.form.add_checkbox('Whole word', self.options.whole, self.on_whole)
        self.form.add_checkbox('Regular expressions', self.options.regex, self.on_regex)
        self.form.set_cancel_func(self.on_cancel)
        self.form.focus()

    def on_case(self, checked):
        self.options.case = checked
        logger.logwrite(f'find_case={checked}')

    def on_whole(self, checked):
        self.options.whole = checked
        logger.logwrite(f'find_whole={checked}')

    def on_regex(self, checked):
        self.options.regex = checked
        logger.logwrite(f'find_regex={checked}')

    def on_cancel(self):
        self.terminating = True

    def render(self):
        self.screen.clear()
        self.form.draw(self.screen)
        self.screen.show()

    def process_input(self):
        if self.terminating:
            return False
        event = self.screen.poll_event()
        if event is None:
            return True
        if event.key == Key.CTRL_Q:
            return False
        self.form.handle_event(event)
        return not self.terminating

    def run(self):
        self.render()
        while self.process_input():
            self.render()
        self.options.save()


def main():
    screen = CursesScreen()
    error_report = ''
    try:
        Application(screen).run()
    except Exception:
        error_report = traceback.format_exc()
    screen.close()
    print(error_report)


if __name__ == '__main__':
    main()
