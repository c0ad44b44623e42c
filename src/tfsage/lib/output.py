"""Pretty output and formatting utilities for tfsage CLI."""

import sys


# Global color state
_color_enabled = None  # None = auto-detect, True = force on, False = force off


def set_color_enabled(enabled: bool) -> None:
    """
    Set global color output preference.

    Parameters
    ----------
    enabled : bool
        True to enable colors, False to disable.
    """
    global _color_enabled
    _color_enabled = enabled


# ANSI color codes
class Colors:
    """ANSI color codes for terminal output."""

    RESET = "\033[0m"
    BOLD = "\033[1m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"


def supports_color() -> bool:
    """
    Check if the terminal supports color output.

    Returns
    -------
    bool
        True if stdout is a TTY and platform is not Windows.
    """
    if _color_enabled is not None:
        return _color_enabled

    return sys.stdout.isatty() and not sys.platform.startswith("win")


def colorize(text: str, color: str) -> str:
    """
    Colorize text if terminal supports it.

    Parameters
    ----------
    text : str
        Text to colorize.
    color : str
        ANSI color code from the Colors class.

    Returns
    -------
    str
        Colorized text if supported, plain text otherwise.
    """
    if supports_color():
        return f"{color}{text}{Colors.RESET}"
    return text


def success(message: str) -> None:
    """Print success message with a green OK tag."""
    print(f"[{colorize('OK', Colors.GREEN)}] {message}")


def error(message: str) -> None:
    """Print error message with a red ERROR tag to stderr."""
    print(f"[{colorize('ERROR', Colors.RED)}] {message}", file=sys.stderr)


def warning(message: str) -> None:
    """Print warning message with a yellow WARNING tag."""
    print(f"[{colorize('WARNING', Colors.YELLOW)}] {message}")


def info(message: str) -> None:
    """Print informational message with a green INFO tag."""
    print(f"[{colorize('INFO', Colors.GREEN)}] {message}")


class Notifier:
    """
    Sink for user-facing notices emitted by the pipeline.

    Wraps the module-level print helpers so that library code receives its
    output channel as a parameter instead of printing directly.

    Parameters
    ----------
    quiet : bool, optional
        Suppress info and warning notices, by default False. Errors and
        success notices are always printed.
    """

    def __init__(self, quiet: bool = False):
        self.quiet = quiet

    def info(self, message: str) -> None:
        if not self.quiet:
            info(message)

    def warning(self, message: str) -> None:
        if not self.quiet:
            warning(message)

    def error(self, message: str) -> None:
        error(message)

    def success(self, message: str) -> None:
        success(message)


class SilentNotifier(Notifier):
    """Notifier that discards every notice."""

    def info(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass


def get_notifier(notifier: Notifier | None) -> Notifier:
    """Return the given notifier, or a default one when None."""
    if notifier is None:
        return Notifier()
    return notifier
