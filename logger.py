import atexit
from io import TextIOWrapper
from typing import Optional

import config

Logger: Optional[TextIOWrapper] = None


def open_log(path: str = None):
    global Logger
    Logger = open(path or config.log_path, 'a')
    atexit.register(close_log)


def close_log():
    global Logger
    if Logger is not None:
        Logger.close()
        Logger = None


def logwrite(s):
    if not config.logging:
        return
    if Logger is None:
        open_log()
    Logger.write(f'{s}\n')
    Logger.flush()
