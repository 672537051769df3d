from __future__ import annotations

"""Assign every topic of a corpus a unique slug derived from its title.

Two passes over the index:

1. *Primary assignment.*  Titles are normalised (see :func:`titelize`) and
   slugified.  A topic without a title, or whose slug is already owned by an
   earlier topic, is reported and left out of the mapping.  The first topic
   to claim a slug keeps it, so the result depends on the index's iteration
   order; feed topics in a stable order (the directory indexer sorts by
   path) to get the same mapping on every run.
2. *Short-title promotion.*  A mapped topic whose short title is non-empty,
   strictly shorter than its title, and slugifies to a free slug, moves to
   that slug and adopts the short title.  Promotion is best effort and does
   not cascade.
"""

from dataclasses import dataclass, field
import logging
import re
from typing import Dict, List, Optional, Tuple

from ditawiki.core.exceptions import MappingError, TitleClashError, TitleMissingError
from ditawiki.core.models import Index, Topic
from ditawiki.core.slug import Slug, slugify
from ditawiki.core.xmlconv.rules import Rules, new_html_rules

logger = logging.getLogger(__name__)

__all__ = ["TitleMapping", "create_mapping", "titelize"]

_RX_OR = re.compile(r" ?/ ?")
_RX_AND = re.compile(r"(?<!\^) ?& ?")


def titelize(title: str) -> str:
    """Spell out ``/`` as "or" and ``&`` as "and" inside *title*.

    Both characters are structural in slugs and links.  An ``&`` directly
    preceded by ``^`` is left alone.
    """
    title = _RX_OR.sub(" or ", title)
    title = _RX_AND.sub(" and ", title)
    return title


@dataclass
class TitleMapping:
    """Bidirectional topic <-> slug assignment for one conversion run.

    ``by_slug`` and ``by_topic`` are inverse of each other.  Topics that
    errored during assignment are in :attr:`topics` but in neither map.
    Treat the mapping as read only once :func:`create_mapping` returned.
    """

    index: Index
    by_slug: Dict[Slug, Topic] = field(default_factory=dict)
    by_topic: Dict[Topic, Slug] = field(default_factory=dict)
    rules: Optional[Rules] = None

    @property
    def topics(self) -> Dict[str, Topic]:
        return self.index.topics

    def topics_sorted(self) -> List[Topic]:
        """All topics of the index ordered by filename (for display)."""
        return sorted(self.index.topics.values(), key=lambda t: t.filename)

    def slug_for(self, topic: Topic) -> Optional[Slug]:
        return self.by_topic.get(topic)

    def topic_for(self, slug: Slug) -> Optional[Topic]:
        return self.by_slug.get(slug)

    def __len__(self) -> int:
        return len(self.by_slug)


def create_mapping(index: Index, rules: Optional[Rules] = None
                   ) -> Tuple[TitleMapping, List[MappingError]]:
    """Build the title mapping for *index*.

    Titles of the indexed topics are rewritten in place (normalisation and
    promotion).  Returns the mapping and the corpus-level errors; errors do
    not stop the mapping of the remaining topics.
    """
    errors: List[MappingError] = []
    by_slug: Dict[Slug, Topic] = {}
    by_topic: Dict[Topic, Slug] = {}

    # assign slugs to the topics
    for topic in index.topics.values():
        topic.title = titelize(topic.title)
        topic.short_title = titelize(topic.short_title)

        if not topic.title.strip():
            errors.append(TitleMissingError(topic.filename))
            continue

        slug = slugify(topic.title)
        other = by_slug.get(slug)
        if other is not None:
            errors.append(TitleClashError(topic.title, topic.filename, other.filename))
            continue

        by_slug[slug] = topic
        by_topic[topic] = slug

    # promote to shorter titles, if possible
    for prev, topic in list(by_slug.items()):
        if not topic.short_title.strip() or len(topic.title) <= len(topic.short_title):
            continue

        slug = slugify(topic.short_title)
        if slug in by_slug:
            continue

        logger.debug("Promote %s: %r -> %r", topic.filename, prev, slug)
        topic.title = topic.short_title
        topic.short_title = ""

        del by_slug[prev]
        by_slug[slug] = topic
        by_topic[topic] = slug

    for error in errors:
        logger.warning("Mapping: %s", error)
    logger.info("Mapping: %d of %d topics mapped, %d error(s)",
                len(by_slug), len(index.topics), len(errors))

    mapping = TitleMapping(
        index=index,
        by_slug=by_slug,
        by_topic=by_topic,
        rules=rules if rules is not None else new_html_rules(),
    )
    return mapping, errors
