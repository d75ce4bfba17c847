from abc import ABC, abstractmethod
from typing import Callable, Optional

from event import Key

FinishedFunc = Optional[Callable[[Key], None]]


class FormItem(ABC):
    """What a Form needs from each of its items besides drawing and input."""

    @abstractmethod
    def get_label(self) -> str:
        raise NotImplementedError()

    @abstractmethod
    def set_form_attributes(self, label: str, label_color: int, bg_color: int,
                            field_text_color: int, field_bg_color: int) -> 'FormItem':
        raise NotImplementedError()

    @abstractmethod
    def set_finished_func(self, handler: FinishedFunc) -> 'FormItem':
        raise NotImplementedError()
