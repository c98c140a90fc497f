"""Write rendered source text to disk.

A failed write is logged and reported through the return value; it never
raises, so callers treat every run as attempted.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger("lox_astgen.codegen")


def write_source(path: str | Path, text: str) -> bool:
    """Write ``text`` to ``path`` in one call, overwriting any existing file.

    Returns:
        True when the file was written, False when the write failed.
    """
    path = Path(path)
    try:
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(text)
    except OSError as exc:
        logger.error("Error writing the file %s: %s", path, exc)
        return False
    logger.info("File written successfully: %s", path)
    return True


__all__ = ["write_source"]
