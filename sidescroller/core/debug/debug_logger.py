"""
debug_logger.py
---------------
Category-filtered console logger for the character simulation.

Responsibilities
----------------
- Gate messages by category and verbosity before anything is formatted.
- Prefix each line with time, source and tag, coloured per tag.
- Print startup reports (sections, dotted status entries) for the host loop.
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Which subsystems may log, and how verbosely."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE

    CATEGORIES = {
        # Host
        "loading": True,
        "system": True,
        "input": True,
        "timing": False,

        # Character core
        "state_machine": True,
        "animation": False,
        "movement": True,
        "simulation": True,
    }

    SHOW_TIMESTAMP = True

    @classmethod
    def configure(cls, level=None, **categories):
        """
        Override the verbosity and per-category switches at runtime.

        Args:
            level: New LOG_LEVEL name, or None to keep the current one
            **categories: category_name=bool pairs
        """
        if level is not None:
            if level not in DebugLogger.LEVEL_VALUES:
                raise ValueError(f"Unknown log level: {level}")
            cls.LOG_LEVEL = level
        cls.CATEGORIES.update(categories)


# ===========================================================
# ANSI Colors
# ===========================================================

class Colors:
    RESET = "\033[0m"
    WHITE = "\033[97m"
    GREEN = "\033[92m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"
    RED = "\033[91m"


# ===========================================================
# Debug Logger
# ===========================================================

class DebugLogger:
    """Static logger; every public method takes a message and a category."""

    LINE_LENGTH = 59

    TAG_COLORS = {
        "INIT": Colors.WHITE,
        "SYSTEM": Colors.MAGENTA,
        "STATE": Colors.CYAN,
        "ACTION": Colors.GREEN,
        "TRACE": Colors.BLUE,
        "WARN": Colors.YELLOW,
        "FAIL": Colors.RED,
    }

    LEVEL_VALUES = {
        "NONE": 0,
        "ERROR": 1,
        "WARN": 2,
        "INFO": 3,
        "VERBOSE": 4
    }

    # ===========================================================
    # Caller Detection
    # ===========================================================

    @staticmethod
    def _get_caller() -> str:
        """Name the class (or module) that called the public log method."""
        try:
            frame = sys._getframe(3)
        except ValueError:
            return "Unknown"

        local_vars = frame.f_locals
        if "self" in local_vars:
            return type(local_vars["self"]).__name__
        if "cls" in local_vars and isinstance(local_vars["cls"], type):
            return local_vars["cls"].__name__

        module = frame.f_globals.get("__name__", "unknown").rsplit(".", 1)[-1]
        return "".join(part.capitalize() for part in module.split("_"))

    # ===========================================================
    # Core Logging
    # ===========================================================

    @staticmethod
    def enabled(category: str, level: str = "INFO") -> bool:
        """True if a message of this category and level would be printed."""
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        if not LoggerConfig.CATEGORIES.get(category, False):
            return False
        threshold = DebugLogger.LEVEL_VALUES.get(LoggerConfig.LOG_LEVEL, 3)
        return DebugLogger.LEVEL_VALUES.get(level, 3) <= threshold

    @staticmethod
    def _log(tag: str, message: str, category: str, level: str):
        if not DebugLogger.enabled(category, level):
            return

        parts = []
        if LoggerConfig.SHOW_TIMESTAMP:
            parts.append(f"[{datetime.now().strftime('%H:%M:%S')}] ")
        parts.append(f"[{DebugLogger._get_caller()}][{tag}] ")

        color = DebugLogger.TAG_COLORS.get(tag, Colors.RESET)
        print(f"{color}{''.join(parts)}{message}{Colors.RESET}")

    # ===========================================================
    # Public Log Methods
    # ===========================================================

    @staticmethod
    def init(msg: str = "", category: str = "system"):
        """Initialization log. Empty message prints blank line."""
        if not msg.strip():
            print()
            return
        DebugLogger._log("INIT", msg, category, "INFO")

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._log("SYSTEM", msg, category, "INFO")

    @staticmethod
    def state(msg: str, category: str = "state_machine"):
        """State change log."""
        DebugLogger._log("STATE", msg, category, "INFO")

    @staticmethod
    def action(msg: str, category: str = "system"):
        DebugLogger._log("ACTION", msg, category, "INFO")

    @staticmethod
    def trace(msg: str, category: str = "animation"):
        """Per-tick detail, only printed at VERBOSE."""
        DebugLogger._log("TRACE", msg, category, "VERBOSE")

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._log("WARN", msg, category, "WARN")

    @staticmethod
    def fail(msg: str, category: str = "system"):
        DebugLogger._log("FAIL", msg, category, "ERROR")

    # ===========================================================
    # Startup Report Formatting
    # ===========================================================

    @staticmethod
    def section(title: str):
        """Print a centred section header framed by a rule."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        rule = "─" * DebugLogger.LINE_LENGTH
        heading = f"[{title}]".center(DebugLogger.LINE_LENGTH)
        print(f"\n{Colors.WHITE}{rule}\n{heading}{Colors.RESET}\n")

    @staticmethod
    def init_entry(module: str, status: str = "OK"):
        """Print a dotted `> Module ....... [OK]` status line."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        print(DebugLogger._render_entry(module, status))

    @staticmethod
    def init_sub(detail: str, level: int = 1):
        """Print an indented bullet under the last entry."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        indent = " " * (level * 4)
        print(f"{indent}• {Colors.WHITE}{detail}{Colors.RESET}")

    @staticmethod
    def _render_entry(module: str, status: str) -> str:
        status = status.upper()
        status_color = {
            "OK": Colors.GREEN,
            "LOADING": Colors.CYAN,
            "FAIL": Colors.RED,
        }.get(status, Colors.WHITE)

        prefix = f"> {module}"
        badge = f"[{status}]"
        pad = max(30 - len(prefix), 1)
        dots = max(DebugLogger.LINE_LENGTH - (len(prefix) + pad + 1 + len(badge)), 1)

        return (
            f"{Colors.WHITE}{prefix}{' ' * pad}{'.' * dots} "
            f"{status_color}{badge}{Colors.RESET}"
        )
