"""Terminal Output - ANSI styling, status symbols and the push spinner."""

import os
import sys
import threading


RESET = '\033[0m'

# SGR parameters by name; combined with ';' when several apply.
STYLES = {
    'bold': '1',
    'dim': '2',
    'red': '31',
    'green': '32',
    'yellow': '33',
    'magenta': '35',
    'cyan': '36',
}


def color_enabled(stream=None, environ=None) -> bool:
    """NO_COLOR beats FORCE_COLOR; with neither set, colour only on a terminal."""
    environ = os.environ if environ is None else environ
    stream = sys.stdout if stream is None else stream
    if environ.get('NO_COLOR'):
        return False
    if environ.get('FORCE_COLOR'):
        return True
    isatty = getattr(stream, 'isatty', None)
    return bool(isatty and isatty())


def can_encode(symbols: str, stream=None) -> bool:
    encoding = getattr(stream or sys.stdout, 'encoding', None) or 'utf-8'
    try:
        symbols.encode(encoding)
    except (UnicodeEncodeError, LookupError):
        return False
    return True


COLORS_ENABLED = color_enabled()
UNICODE_ENABLED = can_encode('✓✗⠋')

CHECK, CROSS = ('✓', '✗') if UNICODE_ENABLED else ('[OK]', '[X]')


def style(text: str, *names: str) -> str:
    """Wrap text in the named SGR styles, or return it untouched when colour is off."""
    if not COLORS_ENABLED or not names:
        return text
    codes = ';'.join(STYLES[name] for name in names)
    return f"\033[{codes}m{text}{RESET}"


def success(text: str) -> str:
    return style(text, 'green')


def error(text: str) -> str:
    return style(text, 'red')


def info(text: str) -> str:
    return style(text, 'cyan')


def dim(text: str) -> str:
    return style(text, 'dim')


def bold(text: str) -> str:
    return style(text, 'bold')


def print_success(message: str) -> None:
    print(f"{success(CHECK)} {message}")


def print_error(message: str) -> None:
    print(error(f"{CROSS} {message}"), file=sys.stderr)


def print_detail(text: str) -> None:
    """Print captured tool output indented and dimmed under a status line."""
    for line in text.splitlines():
        if line.strip():
            print(dim(f"  {line}"), file=sys.stderr)


CHANGE_TYPE_STYLES = {
    'feature': 'green',
    'fix': 'red',
    'refactor': 'yellow',
    'docs': 'cyan',
    'test': 'magenta',
    'chore': 'dim',
    'style': 'dim',
}


def colorize_change_type(change_type: str) -> str:
    """Highlight a built-in change type; custom tags stay plain."""
    name = CHANGE_TYPE_STYLES.get(change_type)
    if name is None:
        return change_type
    return style(change_type, 'bold', name)


class Spinner:
    """Spin on the current line while a slow git call runs. Silent off a terminal."""

    FRAMES = '⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏' if UNICODE_ENABLED else '-\\|/'
    INTERVAL = 0.08

    def __init__(self, stream=None):
        self.stream = sys.stdout if stream is None else stream
        self.active = bool(getattr(self.stream, 'isatty', None) and self.stream.isatty())
        self._done = threading.Event()
        self._thread = None

    def _clear_line(self, text: str = '') -> None:
        self.stream.write(f'\r\033[K{text}')
        self.stream.flush()

    def _run(self):
        tick = 0
        while not self._done.wait(0 if tick == 0 else self.INTERVAL):
            self._clear_line(f'{self.FRAMES[tick % len(self.FRAMES)]} ')
            tick += 1

    def __enter__(self):
        if self.active:
            self._done.clear()
            self._thread = threading.Thread(target=self._run, daemon=True)
            self._thread.start()
        return self

    def __exit__(self, *exc_info):
        self._done.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None
            self._clear_line()
        return False


__all__ = [
    "STYLES", "COLORS_ENABLED", "UNICODE_ENABLED", "CHECK", "CROSS",
    "color_enabled", "can_encode", "style",
    "success", "error", "info", "dim", "bold",
    "print_success", "print_error", "print_detail",
    "colorize_change_type", "CHANGE_TYPE_STYLES", "Spinner",
]
