"""
Rendering context logger ([render] prefix).

Rendering modules log through these wrappers rather than importing loguru.
"""

from pathlib import Path
from typing import Optional

from lettersmith.utils.logger import ContextLog, setup_logger

_log = ContextLog("[render]")

_log_info = _log.info
_log_success = _log.success
_log_warning = _log.warning
_log_error = _log.error
_log_debug = _log.debug


def setup_rendering_logger(log_dir: Optional[Path] = None, export_dir: Optional[Path] = None) -> Optional[Path]:
    """Configure loguru for the rendering context; returns the log file path, if any."""
    return setup_logger("render", log_dir, {"Export directory": export_dir} if export_dir else None)
