from __future__ import annotations

"""Image inlining: turn media references of a topic into servable URLs.

The conversion only depends on the :class:`ImageInliner` protocol.
:class:`ContentAddressedInliner` is the implementation used by the batch
job: it reads the referenced file, names it after a hash of its content and
keeps the bytes so the caller can publish them next to the pages.
"""

import hashlib
import logging
import os
from pathlib import Path
import threading
from typing import Dict, Protocol, Union, runtime_checkable

from ditawiki.core.exceptions import ImageInlineError

logger = logging.getLogger(__name__)

__all__ = ["ImageInliner", "ContentAddressedInliner", "PassthroughInliner"]


@runtime_checkable
class ImageInliner(Protocol):
    """Maps an image reference to the URL the page should use."""

    def inlined_image_url(self, ref: str) -> str:
        """Return the URL for *ref* (a corpus-relative path or an absolute URL).

        Raises
        ------
        ImageInlineError
            When the reference cannot be served.
        """
        ...


class PassthroughInliner:
    """Leaves references untouched; used when no media directory is known."""

    def inlined_image_url(self, ref: str) -> str:
        return ref


class ContentAddressedInliner:
    """Serve images under ``<url_prefix>/img_<hash>.<ext>``.

    Parameters
    ----------
    base_dir
        Directory corpus-relative references are resolved against.  Images
        outside it (after resolving ``..`` and symlinks) are refused.
    url_prefix
        Prefix of the produced URLs (``/media`` by default).

    Attributes
    ----------
    media
        File name -> bytes of every image inlined so far.  Shared by all
        conversions using this inliner; access is serialised with a lock.
    """

    def __init__(self, base_dir: Union[str, os.PathLike], url_prefix: str = "/media") -> None:
        self.base_dir = Path(base_dir)
        self.url_prefix = url_prefix.rstrip("/")
        self.media: Dict[str, bytes] = {}
        self._lock = threading.Lock()

    def inlined_image_url(self, ref: str) -> str:
        if ref.startswith(("http:", "https:", "data:")):
            return ref

        root = self.base_dir.resolve()
        path = (root / ref).resolve()
        try:
            path.relative_to(root)
        except ValueError:
            raise ImageInlineError(f"image {ref} is outside the corpus directory",
                                   reference=ref) from None

        try:
            blob = path.read_bytes()
        except OSError as exc:
            raise ImageInlineError(f"cannot read image {ref}: {exc.strerror or exc}",
                                   reference=ref, cause=exc) from exc

        name = self._media_name(ref, blob)
        with self._lock:
            self.media.setdefault(name, blob)
        logger.debug("Inline image %s -> %s (%d bytes)", ref, name, len(blob))
        return f"{self.url_prefix}/{name}"

    @staticmethod
    def _media_name(ref: str, blob: bytes) -> str:
        # Stable name per content hash
        digest = hashlib.md5(blob).hexdigest()[:12]
        ext = Path(ref).suffix.lower().lstrip(".")
        if not ext:
            ext = "bin"
        elif ext == "jpeg":
            ext = "jpg"
        return f"img_{digest}.{ext}"
