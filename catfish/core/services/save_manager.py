"""
save_manager.py
---------------
Persists the meta-progression record as JSON.
Loading never fails (corrupt or missing files give the default record) and
saving never raises (errors are logged and reported as False).
"""

import json
import os

from catfish.core.debug.debug_logger import DebugLogger
from catfish.systems.progression import MetaProgress


class SaveManager:
    """Reads and writes the save record on disk."""

    SAVE_FILE = "catfish_meta_v1.json"

    def __init__(self, save_file=None):
        """
        Args:
            save_file: Optional custom path for the save file
        """
        self.save_file = save_file or self.SAVE_FILE

    # ===========================================================
    # Public API
    # ===========================================================

    def load(self) -> MetaProgress:
        """Load progress or fall back to a clean record."""
        if not os.path.exists(self.save_file):
            DebugLogger.system("No save found - starting fresh", category="progress")
            return MetaProgress()

        try:
            with open(self.save_file, "r", encoding="utf-8") as f:
                record = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            DebugLogger.warn(f"Failed to load save: {e} - starting fresh", category="progress")
            return MetaProgress()

        meta = MetaProgress.from_record(record)
        DebugLogger.system(f"Loaded save from {self.save_file}", category="progress")
        return meta

    def save(self, record: dict) -> bool:
        """Write the record. Returns False on failure."""
        try:
            with open(self.save_file, "w", encoding="utf-8") as f:
                json.dump(record, f, indent=2)
        except (OSError, TypeError, ValueError) as e:
            DebugLogger.fail(f"Failed to save progress: {e}", category="progress")
            return False

        DebugLogger.trace(f"Saved progress to {self.save_file}", category="progress")
        return True

    # ===========================================================
    # Event Hook
    # ===========================================================

    def on_progress_changed(self, event):
        """ProgressChangedEvent handler."""
        self.save(event.record)
