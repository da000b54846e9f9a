"""
Targeting context logger ([target] prefix).

Targeting modules log through these wrappers rather than importing loguru.
"""

from pathlib import Path
from typing import Optional

from lettersmith.utils.logger import ContextLog, setup_logger

_log = ContextLog("[target]")

_log_info = _log.info
_log_success = _log.success
_log_warning = _log.warning
_log_error = _log.error
_log_debug = _log.debug


def setup_targeting_logger(log_dir: Optional[Path] = None, stopword_pack: str = "minimal") -> Optional[Path]:
    """Configure loguru for the targeting context; returns the log file path, if any."""
    return setup_logger("target", log_dir, {"Stopword pack": stopword_pack})
