import configparser
from pathlib import Path

from term_ui.ui_config import DEFAULT_PROMPT, DEFAULT_QUIT_KEY, DEFAULT_REDRAW_KEY, DRAW_COUNT_ORDER

SETTINGS_PATH = Path(__file__).with_name("settings.ini")
SECTION = "game"

DEFAULT_SETTINGS = {
    "draw_count": "1",
    "prompt": DEFAULT_PROMPT,
    "quit_key": DEFAULT_QUIT_KEY,
    "redraw_key": DEFAULT_REDRAW_KEY,
}


def _single_key(value, default):
    value = str(value)
    # read_key yields one byte per key: ASCII only
    if len(value) != 1 or not value.isascii() or not value.isprintable() or value.isspace():
        return default
    return value


def _sanitize(settings):
    data = dict(DEFAULT_SETTINGS)
    data.update({k: v for k, v in settings.items() if k in DEFAULT_SETTINGS})

    try:
        draw_count = int(data["draw_count"])
    except Exception:
        draw_count = int(DEFAULT_SETTINGS["draw_count"])
    if draw_count not in DRAW_COUNT_ORDER:
        draw_count = int(DEFAULT_SETTINGS["draw_count"])
    data["draw_count"] = str(draw_count)

    prompt = str(data["prompt"])
    # configparser strips surrounding whitespace, so prompts are stored quoted
    if len(prompt) >= 2 and prompt[0] == prompt[-1] == '"':
        prompt = prompt[1:-1]
    if not prompt.isprintable():
        prompt = DEFAULT_SETTINGS["prompt"]
    data["prompt"] = prompt

    data["quit_key"] = _single_key(data["quit_key"], DEFAULT_SETTINGS["quit_key"])
    data["redraw_key"] = _single_key(data["redraw_key"], DEFAULT_SETTINGS["redraw_key"])
    if data["quit_key"] == data["redraw_key"]:
        data["quit_key"] = DEFAULT_SETTINGS["quit_key"]
        data["redraw_key"] = DEFAULT_SETTINGS["redraw_key"]
    return data


def load_settings(path=None):
    path = Path(path) if path is not None else SETTINGS_PATH
    parser = configparser.ConfigParser(interpolation=None)
    if not path.exists():
        return dict(DEFAULT_SETTINGS)
    try:
        parser.read(path, encoding="utf-8")
    except (configparser.Error, UnicodeDecodeError, OSError):
        return dict(DEFAULT_SETTINGS)
    if SECTION not in parser:
        return dict(DEFAULT_SETTINGS)
    raw = {key: parser[SECTION].get(key, default) for key, default in DEFAULT_SETTINGS.items()}
    return _sanitize(raw)


def save_settings(settings, path=None):
    path = Path(path) if path is not None else SETTINGS_PATH
    data = _sanitize(settings)
    data["prompt"] = f'"{data["prompt"]}"'
    parser = configparser.ConfigParser(interpolation=None)
    parser[SECTION] = data
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        parser.write(f)
