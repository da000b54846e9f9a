"""
Document export.

Two outputs:
- raw: marked text with sentinels kept, so markers can be reconstructed later
- clean: final letter text with every sentinel occurrence removed
"""

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Optional

from omegaconf import DictConfig

from lettersmith.contexts.editing import Document, SentinelPair
from lettersmith.contexts.rendering.logger import _log_debug, _log_success
from lettersmith.utils.text_processing import collapse_blank_lines, normalize_line_breaks

RAW = "raw"
CLEAN = "clean"
EXPORT_KINDS = (RAW, CLEAN)

DEFAULT_FILENAMES = {
    RAW: "with_markers.txt",
    CLEAN: "final.txt",
}


@dataclass(frozen=True)
class ExportArtifact:
    """Export content plus its suggested filename."""

    kind: str
    filename: str
    content: str

    @property
    def data(self) -> bytes:
        return self.content.encode("utf-8")


def filenames_from_config(cfg: DictConfig) -> Dict[str, str]:
    """Suggested filenames from the `export` config section."""
    return {RAW: cfg.raw_filename, CLEAN: cfg.clean_filename}


def export_raw(document: Document, max_blank_lines: int = 1) -> str:
    """Marked text with \\n line breaks and runs of blank lines collapsed."""
    text = normalize_line_breaks(document.marked_text())
    return collapse_blank_lines(text, max_blank_lines)


def _sentinel_tokens(document: Document, sentinels: Optional[SentinelPair]) -> Iterable[str]:
    pairs = {sentinels or document.sentinels}
    pairs.update(placed.marker.sentinels for placed in document.markers())
    tokens = {token for pair in pairs for token in (pair.open, pair.close)}
    # Longer tokens first so a short token never splits a longer one
    return sorted(tokens, key=lambda token: (-len(token), token))


def export_clean(
    document: Document,
    sentinels: Optional[SentinelPair] = None,
    max_blank_lines: int = 1,
) -> str:
    """
    Raw export with every sentinel occurrence removed.

    Strips both the configured pair and any pair carried by the document's
    markers. Sentinel text that appears in prose is stripped too.
    """
    text = export_raw(document, max_blank_lines=max_blank_lines)
    for token in _sentinel_tokens(document, sentinels):
        text = text.replace(token, "")
    return text


def build_artifact(
    document: Document,
    kind: str,
    filenames: Optional[Dict[str, str]] = None,
    sentinels: Optional[SentinelPair] = None,
    max_blank_lines: int = 1,
) -> ExportArtifact:
    """
    Build the raw or clean export artifact.

    Raises:
        ValueError: If kind is not 'raw' or 'clean'
    """
    if kind not in EXPORT_KINDS:
        raise ValueError(f"Unknown export kind '{kind}' (expected one of {EXPORT_KINDS})")

    names = {**DEFAULT_FILENAMES, **(filenames or {})}
    if kind == RAW:
        content = export_raw(document, max_blank_lines=max_blank_lines)
    else:
        content = export_clean(document, sentinels=sentinels, max_blank_lines=max_blank_lines)

    _log_debug(f"Built {kind} export ({len(content)} chars)")
    return ExportArtifact(kind=kind, filename=names[kind], content=content)


def write_export(
    document: Document,
    kind: str,
    out_dir: Path,
    filenames: Optional[Dict[str, str]] = None,
    sentinels: Optional[SentinelPair] = None,
    max_blank_lines: int = 1,
) -> Path:
    """
    Write an export artifact into out_dir, replacing any existing file atomically.

    Returns:
        Path of the written file
    """
    artifact = build_artifact(document, kind, filenames, sentinels, max_blank_lines)
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / artifact.filename

    fd, tmp_name = tempfile.mkstemp(dir=out_dir, prefix=f".{artifact.filename}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(artifact.data)
        os.replace(tmp_name, out_path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise

    _log_success(f"Wrote {kind} export: {out_path}")
    return out_path
