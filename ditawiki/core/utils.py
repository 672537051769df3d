from __future__ import annotations

"""Simple reusable helper functions.

These helpers are side-effect-free (apart from :func:`save_json_file`) and can
be used across all layers of the package.
"""

from typing import Any
import json
import logging
import posixpath
import re
import uuid

__all__ = [
    "canonical_path",
    "new_item_id",
    "normalize_space",
    "save_json_file",
]

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def canonical_path(name: str) -> str:
    """Return the canonical, case-folded form of a topic path.

    Backslashes become forward slashes and ``.``/``..`` segments are folded, so
    ``"Sub\\..\\A.xml"`` and ``"a.xml"`` name the same topic.
    """
    name = name.replace("\\", "/")
    cleaned = posixpath.normpath(name) if name else ""
    if cleaned == ".":
        cleaned = ""
    return cleaned.lower()


def new_item_id() -> str:
    """Generate a random identifier for a story item."""
    return uuid.uuid4().hex[:16]


def normalize_space(text: str) -> str:
    """Collapse runs of whitespace into single spaces and strip the ends."""
    return _WHITESPACE.sub(" ", text or "").strip()


# ---------------------------------------------------------------------------
# File output
# ---------------------------------------------------------------------------


def save_json_file(data: Any, path: str, *, pretty: bool = True) -> None:
    """Write *data* as UTF-8 JSON to *path*."""
    text = json.dumps(data, ensure_ascii=False, indent=2 if pretty else None, default=str)
    try:
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(text)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("I/O: wrote JSON path=%s chars=%d", path, len(text))
    except OSError:
        # Caller context handles user feedback; file handler captures traceback
        logger.error("I/O FAIL: write JSON path=%s", path, exc_info=True)
        raise
