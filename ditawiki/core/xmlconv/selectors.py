from __future__ import annotations

"""Reference splitting and title lookup at in-document selectors.

DITA references address a topic file and, optionally, an element inside it:
``path/to/topic.dita#topicid/elementid``.  The part after ``#`` is the
*selector*; it names a topic id, optionally followed by ``/`` and the id of
a descendant element.
"""

from typing import Optional, Tuple

from lxml import etree as ET

from ditawiki.core.utils import normalize_space

__all__ = ["split_link", "extract_title", "find_selector"]


def split_link(url: str) -> Tuple[str, str]:
    """Split *url* into ``(path, selector)``; the selector is ``""`` when absent."""
    path, _sep, selector = url.partition("#")
    return path, selector


def find_selector(root: ET._Element, selector: str) -> Optional[ET._Element]:
    """Return the element addressed by *selector* below (or at) *root*."""
    topic_id, _sep, element_id = selector.partition("/")

    scope = _by_id(root, topic_id) if topic_id else root
    if scope is None or not element_id:
        return scope
    return _by_id(scope, element_id)


def extract_title(raw: bytes, selector: str) -> str:
    """Return the title of the element addressed by *selector* in *raw*.

    The title is the text of the element's ``<title>`` child with whitespace
    normalised.

    Raises
    ------
    ValueError
        When *raw* cannot be parsed, the selector matches nothing, or the
        matched element has no title.
    """
    if not raw:
        raise ValueError("topic content is empty")
    try:
        root = ET.fromstring(raw, ET.XMLParser(no_network=True, load_dtd=False, huge_tree=True))
    except ET.XMLSyntaxError as exc:
        raise ValueError(f"cannot parse topic: {exc}") from exc

    element = find_selector(root, selector)
    if element is None:
        raise ValueError(f"no element with id {selector!r}")

    for child in element:
        if isinstance(child.tag, str) and ET.QName(child).localname == "title":
            title = normalize_space("".join(child.itertext()))
            if title:
                return title
            break
    raise ValueError(f"element {selector!r} has no title")


def _by_id(root: ET._Element, element_id: str) -> Optional[ET._Element]:
    if root.get("id") == element_id:
        return root
    found = root.xpath(".//*[@id=$id]", id=element_id)
    return found[0] if found else None
