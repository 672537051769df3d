from __future__ import annotations

"""Directory indexer for DITA topic trees.

Walks a directory, parses every topic file with lxml and registers a
:class:`~ditawiki.core.models.Topic` per file in an
:class:`~ditawiki.core.models.Index`.  Files are visited in sorted path order
so that the title mapping built on top of the index is reproducible.
"""

from datetime import datetime, timezone
import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional, Union

from lxml import etree as ET

from ditawiki.core.exceptions import TopicLoadError
from ditawiki.core.models import Index, Topic
from ditawiki.core.utils import normalize_space

logger = logging.getLogger(__name__)

__all__ = ["TopicIndexer"]


def _local(elem: ET._Element) -> str:
    return ET.QName(elem).localname if isinstance(elem.tag, str) else ""


def _child(elem: ET._Element, name: str) -> Optional[ET._Element]:
    for child in elem:
        if _local(child) == name:
            return child
    return None


def _text(elem: Optional[ET._Element]) -> str:
    if elem is None:
        return ""
    return normalize_space("".join(elem.itertext()))


def _check_unique(index: Index, topic: Topic) -> None:
    # paths are compared case-insensitively, so A.xml and a.xml collide
    other = index.get(topic.filename)
    if other is not None:
        raise TopicLoadError(
            f"{topic.filename}: same path as already indexed {other.filename}", topic.filename)


class TopicIndexer:
    """Index the DITA topics found below a directory.

    Args:
        extensions: File suffixes treated as topics.  Defaults to the
            ``topic_extensions`` of the conversion configuration.
        strict: Raise :class:`TopicLoadError` on the first file that cannot
            be parsed instead of skipping it.

    Attributes:
        errors: Load errors of skipped files (non-strict mode).
    """

    def __init__(self, extensions: Optional[Iterable[str]] = None, strict: bool = False) -> None:
        if extensions is None:
            from ditawiki.config import ConfigManager

            extensions = ConfigManager().get_conversion_config().get("topic_extensions") or [".dita", ".xml"]
        self.extensions = frozenset(ext.lower() for ext in extensions)
        self.strict = strict
        self.errors: List[TopicLoadError] = []

    def index_directory(self, root: Union[str, os.PathLike]) -> Index:
        """Index every topic file below *root*.

        Args:
            root: Corpus root; topic filenames are relative to it.

        Returns:
            Index with one topic per successfully parsed file.

        Raises:
            TopicLoadError: If *root* is not a directory, or in strict mode
                when a file cannot be read or parsed, or when two files map
                to the same canonical path.
        """
        root = Path(root)
        if not root.is_dir():
            raise TopicLoadError(f"not a directory: {root}", str(root))

        index = Index()
        paths = sorted(
            p for p in root.rglob("*")
            if p.is_file() and p.suffix.lower() in self.extensions
        )
        logger.debug("Indexing %d candidate file(s) below %s", len(paths), root)

        for path in paths:
            try:
                topic = self.load_topic(path, root)
                if topic is not None:
                    _check_unique(index, topic)
            except TopicLoadError as exc:
                if self.strict:
                    raise
                self.errors.append(exc)
                logger.warning("Skipping %s: %s", path, exc)
                continue
            if topic is None:
                continue
            index.add(topic)

        logger.info("Indexed %d topic(s) from %s (%d skipped)", len(index), root, len(self.errors))
        return index

    def load_topic(self, path: Path, root: Path) -> Optional[Topic]:
        """Parse one topic file.

        Returns ``None`` for well-formed files that are not topics (maps and
        other documents without a title element).

        Raises:
            TopicLoadError: If the file cannot be read or is not well-formed.
        """
        filename = path.relative_to(root).as_posix()
        try:
            raw = path.read_bytes()
            stat = path.stat()
        except OSError as exc:
            raise TopicLoadError(f"cannot read {filename}: {exc}", filename, exc) from exc

        try:
            parser = ET.XMLParser(resolve_entities=False, no_network=True, load_dtd=False, huge_tree=True)
            document = ET.fromstring(raw, parser)
        except ET.XMLSyntaxError as exc:
            raise TopicLoadError(f"XML syntax error in {filename}: {exc}", filename, exc) from exc

        element = document
        if _local(element) == "dita":
            # composite document: the first topic describes the file
            element = next((child for child in document if _local(child)), None)
            if element is None:
                return None

        title_elem = _child(element, "title")
        if title_elem is None:
            logger.debug("No title element in %s; not a topic", filename)
            return None

        return Topic(
            filename=filename,
            title=_text(title_elem),
            short_title=self._short_title(element),
            modified=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
            synopsis=self._synopsis(element),
            raw=raw,
            original=document,
        )

    @staticmethod
    def _short_title(element: ET._Element) -> str:
        titlealts = _child(element, "titlealts")
        if titlealts is None:
            return ""
        return _text(_child(titlealts, "navtitle")) or _text(_child(titlealts, "searchtitle"))

    @staticmethod
    def _synopsis(element: ET._Element) -> str:
        shortdesc = _child(element, "shortdesc")
        if shortdesc is None:
            abstract = _child(element, "abstract")
            if abstract is not None:
                shortdesc = _child(abstract, "shortdesc")
        return _text(shortdesc)
