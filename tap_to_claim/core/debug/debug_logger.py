"""
debug_logger.py
---------------
Console logger for stage flow, asset loading and pointer input.

Every line carries a timestamp, the calling class (or module) and a tag:

    [12:00:01] [StageController][SYSTEM] Transitioning [Boot] → [Preload]

Lines are filtered twice: by category (LoggerConfig.CATEGORIES) and by
level (LoggerConfig.LOG_LEVEL). Boot report helpers (init_entry, init_sub,
section) only honor the global switch.
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Switches read on every log call, so tests may patch them freely."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE

    CATEGORIES = {
        "system": True,       # main loop, window, caches
        "stage": True,        # stage lifecycle
        "loading": True,      # asset queue and config files
        "ui": True,           # control actions, dialogs
        "input": False,       # pointer routing and control transitions
        "animation": False,   # tweens and frame animations
        "background": False,  # ambient pool
        "drawing": False,     # rejected draw calls
    }

    SHOW_TIMESTAMP = True
    SHOW_SOURCE = True


# ===========================================================
# ANSI Colors
# ===========================================================

class AnsiColors:
    RESET = "\033[0m"
    WHITE = "\033[97m"
    GREEN = "\033[92m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"
    RED = "\033[91m"


# tag -> (color, level)
_TAGS = {
    "SYSTEM": (AnsiColors.MAGENTA, "INFO"),
    "STATE": (AnsiColors.CYAN, "INFO"),
    "ACTION": (AnsiColors.GREEN, "INFO"),
    "TRACE": (AnsiColors.BLUE, "VERBOSE"),
    "WARN": (AnsiColors.YELLOW, "WARN"),
    "FAIL": (AnsiColors.RED, "ERROR"),
}

_LEVELS = {"NONE": 0, "ERROR": 1, "WARN": 2, "INFO": 3, "VERBOSE": 4}


# ===========================================================
# Debug Logger
# ===========================================================

class DebugLogger:
    """Static logger. Never instantiated."""

    LINE_LENGTH = 59
    STATUS_COLUMN = 30

    # ===========================================================
    # Tagged lines
    # ===========================================================

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._emit("SYSTEM", msg, category)

    @staticmethod
    def state(msg: str, category: str = "stage"):
        DebugLogger._emit("STATE", msg, category)

    @staticmethod
    def action(msg: str, category: str = "system"):
        DebugLogger._emit("ACTION", msg, category)

    @staticmethod
    def trace(msg: str, category: str = "input"):
        """Verbose-only detail, e.g. every control transition."""
        DebugLogger._emit("TRACE", msg, category)

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._emit("WARN", msg, category)

    @staticmethod
    def fail(msg: str, category: str = "system"):
        DebugLogger._emit("FAIL", msg, category)

    @staticmethod
    def enabled(category: str, level: str = "INFO") -> bool:
        """True if a line of ``level`` in ``category`` would be printed."""
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        if not LoggerConfig.CATEGORIES.get(category, False):
            return False
        return _LEVELS.get(level, 3) <= _LEVELS.get(LoggerConfig.LOG_LEVEL, 3)

    @staticmethod
    def _emit(tag: str, msg: str, category: str):
        color, level = _TAGS[tag]
        if not DebugLogger.enabled(category, level):
            return

        parts = []
        if LoggerConfig.SHOW_TIMESTAMP:
            parts.append(f"[{datetime.now():%H:%M:%S}] ")
        if LoggerConfig.SHOW_SOURCE:
            parts.append(f"[{DebugLogger._caller()}]")
        parts.append(f"[{tag}] ")
        print(f"{color}{''.join(parts)}{msg}{AnsiColors.RESET}")

    @staticmethod
    def _caller() -> str:
        """Class of the method that called the public log function, else its module."""
        try:
            # 0 = _caller, 1 = _emit, 2 = public method, 3 = caller
            frame = sys._getframe(3)
        except ValueError:
            return "Unknown"

        local_vars = frame.f_locals
        if "self" in local_vars:
            return type(local_vars["self"]).__name__
        if "cls" in local_vars:
            return local_vars["cls"].__name__

        module = frame.f_code.co_filename.replace("\\", "/").rsplit("/", 1)[-1]
        return "".join(p.capitalize() for p in module[:-3].split("_"))

    # ===========================================================
    # Boot report
    # ===========================================================

    @staticmethod
    def section(title: str):
        """Framed section header between boot phases and stage switches."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        rule = "─" * DebugLogger.LINE_LENGTH
        print(f"\n{AnsiColors.WHITE}{rule}\n{f'[{title}]'.center(DebugLogger.LINE_LENGTH)}{AnsiColors.RESET}\n")

    @staticmethod
    def init_entry(module: str, status: str = "OK"):
        """Dotted status line: ``> StageController ........ [OK]``."""
        if not LoggerConfig.ENABLE_LOGGING:
            return

        status_color = {
            "OK": AnsiColors.GREEN,
            "FAIL": AnsiColors.RED,
        }.get(status.upper(), AnsiColors.WHITE)

        label = f"> {module}".ljust(DebugLogger.STATUS_COLUMN)
        badge = f"[{status}]"
        dots = "." * max(DebugLogger.LINE_LENGTH - len(label) - len(badge) - 1, 1)
        print(f"{AnsiColors.WHITE}{label}{dots} {status_color}{badge}{AnsiColors.RESET}")

    @staticmethod
    def init_sub(detail: str, level: int = 1):
        """Indented bullet under the last init_entry."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        print(f"{'    ' * level}• {AnsiColors.WHITE}{detail}{AnsiColors.RESET}")
