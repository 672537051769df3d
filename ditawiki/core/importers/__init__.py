from __future__ import annotations

"""Build topic indexes from source trees.

Key components:
- TopicIndexer: walks a directory of DITA topics and returns an Index
"""

from .topic_indexer import TopicIndexer

__all__ = ["TopicIndexer"]
