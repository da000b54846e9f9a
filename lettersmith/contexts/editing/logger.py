"""
Editing context logger ([edit] prefix).

Editing modules log through these wrappers rather than importing loguru.
"""

from pathlib import Path
from typing import Optional

from lettersmith.utils.logger import ContextLog, setup_logger

_log = ContextLog("[edit]")

_log_info = _log.info
_log_success = _log.success
_log_warning = _log.warning
_log_error = _log.error
_log_debug = _log.debug


def setup_editing_logger(log_dir: Optional[Path] = None, sentinels: str = "") -> Optional[Path]:
    """Configure loguru for the editing context; returns the log file path, if any."""
    return setup_logger("edit", log_dir, {"Sentinels": sentinels} if sentinels else None)
