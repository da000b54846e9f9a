"""
Intake context logger ([intake] prefix).

Intake modules log through these wrappers rather than importing loguru.
"""

from pathlib import Path
from typing import Optional

from lettersmith.utils.logger import ContextLog, setup_logger

_log = ContextLog("[intake]")

_log_info = _log.info
_log_success = _log.success
_log_warning = _log.warning
_log_error = _log.error
_log_debug = _log.debug


def setup_intake_logger(log_dir: Optional[Path] = None, source: str = "") -> Optional[Path]:
    """Configure loguru for the intake context; returns the log file path, if any."""
    return setup_logger("intake", log_dir, {"Source": source} if source else None)
