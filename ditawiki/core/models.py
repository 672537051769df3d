from __future__ import annotations

"""Shared data structures used across the ditawiki core.

This module is intentionally free of I/O so that the contained objects can be
reused in any context (unit-tests, CLI, batch jobs).  Building an
:class:`Index` from disk lives in :mod:`ditawiki.core.importers`.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterable, Iterator, Optional

from lxml import etree as ET

from ditawiki.core.utils import canonical_path

__all__ = ["Topic", "Index"]


@dataclass(eq=False)
class Topic:
    """A single source document of the corpus.

    Topics compare and hash by identity: the title mapping keys topics, and
    titles are rewritten in place while the mapping is built.

    Attributes
    ----------
    filename
        Source path relative to the corpus root, as found on disk.  Its
        canonical form (see :func:`ditawiki.core.utils.canonical_path`) is the
        identity of the topic inside an index.
    title
        Display title.  Rewritten by the title mapping (``/`` and ``&`` are
        spelled out, and a shorter title may be promoted).
    short_title
        Optional alternate, shorter title.
    modified
        Last modification time of the source.
    synopsis
        Short description text.
    raw
        Serialized source; used to look up titles at in-document selectors.
    original
        Parsed root element, or ``None`` when the topic was registered
        without parsing its content.
    """

    filename: str
    title: str = ""
    short_title: str = ""
    modified: Optional[datetime] = None
    synopsis: str = ""
    raw: bytes = b""
    original: Optional[ET._Element] = field(default=None, repr=False)

    def __repr__(self) -> str:
        return f"Topic({self.filename!r}, title={self.title!r})"


class Index:
    """Topics of a corpus keyed by canonical path.

    Iteration order is insertion order; the title mapping relies on it to
    decide which of two clashing topics keeps its slug.
    """

    def __init__(self, topics: Optional[Iterable[Topic]] = None) -> None:
        self.topics: Dict[str, Topic] = {}
        for topic in topics or ():
            self.add(topic)

    def add(self, topic: Topic) -> Topic:
        """Register *topic* under its canonical path and return it."""
        key = self.canonical_path(topic.filename)
        if key in self.topics:
            raise ValueError(f"duplicate topic path: {key}")
        self.topics[key] = topic
        return topic

    @staticmethod
    def canonical_path(name: str) -> str:
        return canonical_path(name)

    def get(self, name: str) -> Optional[Topic]:
        """Return the topic stored for *name* (any spelling of its path)."""
        return self.topics.get(self.canonical_path(name))

    def __len__(self) -> int:
        return len(self.topics)

    def __iter__(self) -> Iterator[Topic]:
        return iter(self.topics.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.canonical_path(name) in self.topics
