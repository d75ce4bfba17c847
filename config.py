import os
import atexit
import json
from configparser import ConfigParser


def generate_default_keymap(path: str):
    mapping = {
        '\t': 'TAB',
        'KEY_BTAB': 'BACKTAB',
        '\n': 'ENTER',
        '\r': 'ENTER',
        'KEY_ENTER': 'ENTER',
        'ESC': 'ESCAPE',
        'KEY_BACKSPACE': 'BACKSPACE',
        'KEY_LEFT': 'LEFT',
        'KEY_RIGHT': 'RIGHT',
        'KEY_UP': 'UP',
        'KEY_DOWN': 'DOWN',
        '\x11': 'CTRL_Q',
    }
    with open(path, 'w') as fo:
        json.dump(mapping, fo, indent=4)
    return mapping


def get_value(name, default=''):
    if name not in section:
        section[name] = str(default)
    return section.get(name)


def get_int(name, default=0):
    return int(get_value(name, str(default)))


def get_bool(name, default=False):
    return get_value(name, str(default)) != 'False'


def set_value(name, value):
    section[name] = str(value)


def save_cfg():
    with open(cfg_path, 'w') as configfile:
        cfg.write(configfile)


cfg_dir = os.environ.get('TERMFORM_HOME', os.path.join(os.path.expanduser('~'), '.termform'))
os.makedirs(cfg_dir, 0o755, True)
cfg_path = os.path.join(cfg_dir, 'termform.ini')
keymap_path = os.path.join(cfg_dir, 'keymap.json')
log_path = os.path.join(cfg_dir, 'termform.log')
cfg = ConfigParser()
cfg.read(cfg_path)
if 'config' not in cfg:
    cfg['config'] = {}
section = cfg['config']
if os.path.exists(keymap_path):
    with open(keymap_path) as f:
        keymap = json.load(f)
else:
    keymap = generate_default_keymap(keymap_path)

logging = get_bool('logging', False)

atexit.register(save_cfg)
