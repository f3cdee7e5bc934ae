"""Write the report document to stdout or a file.

File output is written to a temporary file next to the target and moved
into place with os.replace, so the target either holds the complete
document or is left as it was.
"""

from __future__ import annotations

import logging
import os
import sys
import tempfile
from pathlib import Path
from typing import TextIO

from sunrise_report.errors import OutputError

logger = logging.getLogger(__name__)


def render_document(document: str) -> str:
    """The exact text written to any sink."""
    return f"{document}\n"


def _write_file_atomic(path: Path, text: str) -> None:
    # Replace the file a symlink points to, not the link
    path = path.resolve()
    mode = path.stat().st_mode & 0o777 if path.exists() else 0o644
    fd, temp_name = tempfile.mkstemp(
        dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as temp_file:
            temp_file.write(text)
            temp_file.flush()
            os.fsync(temp_file.fileno())
        os.chmod(temp_name, mode)
        os.replace(temp_name, path)
    except BaseException:
        Path(temp_name).unlink(missing_ok=True)
        raise


def write_report(
    document: str,
    out: str | Path | None = None,
    stream: TextIO | None = None,
) -> None:
    """Write the document to `out`, or to `stream` (stdout) when no path is given.

    Raises:
        OutputError: If the file cannot be created or written
    """
    text = render_document(document)

    if out is None:
        target = stream if stream is not None else sys.stdout
        try:
            target.write(text)
            target.flush()
        except OSError as e:
            raise OutputError(f"Failed to write report to stdout: {e}") from e
        return

    path = Path(out)
    try:
        _write_file_atomic(path, text)
    except OSError as e:
        raise OutputError(f"Failed to write report to {path}: {e}", path=path) from e
    logger.info(f"Report written to {path}")
