"""
Loguru configuration shared by every context.

Each context owns a `logger.py` that builds a ContextLog with its prefix and a
`setup_<context>_logger()` that calls setup_logger() with context provenance.
Modules log through their context's wrappers, never through loguru directly.
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, Optional, Tuple

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Optional[Path] = None,
    extra_provenance: Optional[Dict[str, object]] = None,
    console_level: str = "INFO",
) -> Optional[Path]:
    """
    Replace loguru's sinks with a colorized stdout sink and, optionally, a DEBUG file sink.

    Args:
        context_name: Context identifier, used as the log file stem (e.g., "edit")
        log_dir: Session directory for `{context_name}.log` (None = console only)
        extra_provenance: Context-specific entries for the provenance header
        console_level: Minimum level shown on stdout

    Returns:
        Path to the log file, or None when logging to console only

    Example:
        log_file = setup_logger(
            "edit",
            log_dir=Path("outs/logs/place_fields_20251114_123456"),
            extra_provenance={"Sentinels": "}} / {{"},
        )
    """
    logger.remove()
    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    log_file = None
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"{context_name}.log"
        logger.add(log_file, format=FILE_FORMAT, level="DEBUG")

    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    for key, value in provenance(extra_provenance):
        logger.debug(f"{key}: {value}")

    return log_file


def provenance(extra: Optional[Dict[str, object]] = None) -> Iterator[Tuple[str, object]]:
    """Header entries identifying the run: script, command, working directory, Python, extras."""
    yield "Script", sys.argv[0]
    yield "Command", " ".join(sys.argv)
    yield "Working directory", Path.cwd()
    yield "Python", sys.version.split()[0]
    yield from (extra or {}).items()


@dataclass(frozen=True)
class ContextLog:
    """Loguru calls with a fixed context prefix, e.g. ContextLog("[edit]").info("...")."""

    prefix: str

    def info(self, message: str) -> None:
        logger.info(f"{self.prefix} {message}")

    def success(self, message: str) -> None:
        logger.success(f"{self.prefix} {message}")

    def warning(self, message: str) -> None:
        logger.warning(f"{self.prefix} {message}")

    def error(self, message: str) -> None:
        logger.error(f"{self.prefix} {message}")

    def debug(self, message: str) -> None:
        logger.debug(f"{self.prefix} {message}")
