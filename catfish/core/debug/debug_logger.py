"""
debug_logger.py
---------------
Category-filtered console logger used by every Catfish Dash module.

Each line carries a timestamp, the calling class (or module) and a tag:

    [12:04:51] [CollisionManager][ACTION] Picked up shield

Categories map to subsystems (spawn, collision, combo, ...) and can be
switched on and off independently of the global verbosity level.
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Global switches read on every log call."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE

    # None means "whatever sys.stdout is at call time"
    STREAM = None

    CATEGORIES = {
        # Core
        "loading": False,
        "system": True,
        "input": False,
        "event_manager": False,

        # Simulation
        "run_state": True,
        "spawn": False,
        "collision": True,
        "combo": False,

        # Progression
        "economy": True,
        "progress": True,

        # Rendering
        "render": True,
    }

    @classmethod
    def configure(cls, level=None, enabled=None, **categories):
        """
        Adjust logging at runtime.

        Args:
            level: New LOG_LEVEL name (case-insensitive)
            enabled: Master on/off switch
            **categories: Per-category overrides, e.g. spawn=True
        """
        if level is not None:
            level = level.upper()
            if level not in DebugLogger.LEVEL_VALUES:
                raise ValueError(f"Unknown log level: {level}")
            cls.LOG_LEVEL = level
        if enabled is not None:
            cls.ENABLE_LOGGING = bool(enabled)
        for name, flag in categories.items():
            cls.CATEGORIES[name] = bool(flag)


# ===========================================================
# ANSI Colors
# ===========================================================

class Colors:
    """ANSI escape codes for terminal colors."""
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
    """Static logger; never instantiated."""

    LINE_LENGTH = 59
    ENTRY_COLUMN = 30

    # tag -> (color, level)
    TAGS = {
        "INIT": (Colors.WHITE, "INFO"),
        "SYSTEM": (Colors.MAGENTA, "INFO"),
        "STATE": (Colors.CYAN, "INFO"),
        "ACTION": (Colors.GREEN, "INFO"),
        "TRACE": (Colors.BLUE, "VERBOSE"),
        "WARN": (Colors.YELLOW, "WARN"),
        "FAIL": (Colors.RED, "ERROR"),
    }

    STATUS_COLORS = {
        "OK": Colors.GREEN,
        "LOADING": Colors.CYAN,
        "FAIL": Colors.RED,
    }

    LEVEL_VALUES = {
        "NONE": 0,
        "ERROR": 1,
        "WARN": 2,
        "INFO": 3,
        "VERBOSE": 4,
    }

    # ===========================================================
    # Output
    # ===========================================================

    @staticmethod
    def _stream():
        return LoggerConfig.STREAM if LoggerConfig.STREAM is not None else sys.stdout

    @staticmethod
    def _paint(text: str, color: str) -> str:
        """Wrap text in color codes when writing to a terminal."""
        isatty = getattr(DebugLogger._stream(), "isatty", None)
        if isatty is None or not isatty():
            return text
        return f"{color}{text}{Colors.RESET}"

    @staticmethod
    def _emit(line: str):
        stream = DebugLogger._stream()
        stream.write(line + "\n")
        stream.flush()

    # ===========================================================
    # Filtering
    # ===========================================================

    @staticmethod
    def enabled_for(category: str, level: str) -> bool:
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        if not LoggerConfig.CATEGORIES.get(category, False):
            return False
        threshold = DebugLogger.LEVEL_VALUES.get(LoggerConfig.LOG_LEVEL, 3)
        return DebugLogger.LEVEL_VALUES.get(level, 3) <= threshold

    @staticmethod
    def _caller(depth: int = 3) -> str:
        """Name of the class (or PascalCased module) that called the logger."""
        try:
            frame = sys._getframe(depth)
        except ValueError:
            return "Unknown"

        owner = frame.f_locals.get("self")
        if owner is not None:
            return type(owner).__name__
        owner = frame.f_locals.get("cls")
        if isinstance(owner, type):
            return owner.__name__

        module = frame.f_globals.get("__name__", "unknown").rsplit(".", 1)[-1]
        return "".join(part.capitalize() for part in module.split("_"))

    # ===========================================================
    # Core Logging
    # ===========================================================

    @staticmethod
    def _log(tag: str, message: str, category: str):
        color, level = DebugLogger.TAGS[tag]
        if not DebugLogger.enabled_for(category, level):
            return

        stamp = datetime.now().strftime("%H:%M:%S")
        prefix = f"[{stamp}] [{DebugLogger._caller()}][{tag}] "
        DebugLogger._emit(DebugLogger._paint(prefix + message, color))

    @staticmethod
    def init(msg: str, category: str = "system"):
        """Initialization log."""
        DebugLogger._log("INIT", msg, category)

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._log("SYSTEM", msg, category)

    @staticmethod
    def state(msg: str, category: str = "system"):
        """State change log."""
        DebugLogger._log("STATE", msg, category)

    @staticmethod
    def action(msg: str, category: str = "system"):
        DebugLogger._log("ACTION", msg, category)

    @staticmethod
    def trace(msg: str, category: str = "collision"):
        """Per-tick detail; only shown at VERBOSE."""
        DebugLogger._log("TRACE", msg, category)

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._log("WARN", msg, category)

    @staticmethod
    def fail(msg: str, category: str = "system"):
        DebugLogger._log("FAIL", msg, category)

    # ===========================================================
    # Startup Report
    # ===========================================================

    @staticmethod
    def section(title: str):
        """Ruled header between startup phases."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        rule = "─" * DebugLogger.LINE_LENGTH
        heading = f"[{title}]".center(DebugLogger.LINE_LENGTH)
        DebugLogger._emit("\n" + DebugLogger._paint(f"{rule}\n{heading}", Colors.WHITE) + "\n")

    @staticmethod
    def init_entry(module: str, status: str = "OK"):
        """
        Dotted status line, e.g.

            > InputManager ................... [OK]
        """
        if not LoggerConfig.ENABLE_LOGGING:
            return
        label = f"> {module}".ljust(DebugLogger.ENTRY_COLUMN)
        badge = f"[{status}]"
        dots = "." * max(DebugLogger.LINE_LENGTH - len(label) - len(badge) - 1, 1)
        color = DebugLogger.STATUS_COLORS.get(status.upper(), Colors.WHITE)
        DebugLogger._emit(f"{label}{dots} {DebugLogger._paint(badge, color)}")

    @staticmethod
    def init_sub(detail: str, level: int = 1):
        """Indented detail under the previous init_entry."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        DebugLogger._emit(" " * (level * 4) + "• " + detail)
