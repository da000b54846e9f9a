"""
Templating context logger ([template] prefix).

Templating modules log through these wrappers rather than importing loguru.
"""

from pathlib import Path
from typing import Optional

from lettersmith.utils.logger import ContextLog, setup_logger

_log = ContextLog("[template]")

_log_info = _log.info
_log_success = _log.success
_log_warning = _log.warning
_log_error = _log.error
_log_debug = _log.debug


def setup_templating_logger(log_dir: Optional[Path] = None, composer: str = "template") -> Optional[Path]:
    """Configure loguru for the templating context; returns the log file path, if any."""
    return setup_logger("template", log_dir, {"Composer": composer})
