from __future__ import annotations

"""Federated-wiki page and story item types.

A page is a slug, a title and a *story*: an ordered list of items, each a
plain dict with at least ``type`` and ``id``.  Pages are handed to the page
store as JSON.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ditawiki.core.slug import Slug
from ditawiki.core.utils import new_item_id

__all__ = ["Page", "Item", "paragraph", "html_item", "entry"]

Item = Dict[str, Any]


def paragraph(text: str) -> Item:
    return {"type": "paragraph", "id": new_item_id(), "text": text}


def html_item(text: str) -> Item:
    return {"type": "html", "id": new_item_id(), "text": text}


def entry(title: str, synopsis: str, slug: Slug) -> Item:
    """Link item pointing at another page; its id is the target slug."""
    return {"type": "entry", "id": slug, "title": title, "text": synopsis, "link": slug}


@dataclass
class Page:
    slug: Slug
    title: str = ""
    modified: Optional[datetime] = None
    synopsis: str = ""
    story: List[Item] = field(default_factory=list)

    def append(self, item: Item) -> None:
        self.story.append(item)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "slug": self.slug,
            "title": self.title,
            "modified": self.modified.isoformat() if self.modified else None,
            "synopsis": self.synopsis,
            "story": list(self.story),
        }
