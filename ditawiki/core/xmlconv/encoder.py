from __future__ import annotations

"""Output accumulator for the rewriter.

The encoder receives output tokens (start, data, end) and builds them into an
lxml tree under a synthetic container element, so a converted topic may
consist of several top-level elements.  :class:`Fragment` wraps the result.
"""

from html import escape
from typing import Iterable, List, Mapping, Tuple, Union

from lxml import etree as ET

__all__ = ["Encoder", "Fragment"]

Attrs = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


class Fragment:
    """An ordered sequence of converted output elements.

    Attributes
    ----------
    container
        Synthetic element holding the output; never part of the rendering.
    """

    def __init__(self, container: ET._Element) -> None:
        self.container = container

    @property
    def elements(self) -> List[ET._Element]:
        return list(self.container)

    @property
    def leading_text(self) -> str:
        """Character data emitted before the first element."""
        return self.container.text or ""

    def to_html(self) -> str:
        """Serialize the fragment with lxml's HTML serializer."""
        parts = [escape(self.leading_text, quote=False)]
        for child in self.container:
            parts.append(ET.tostring(child, method="html", encoding="unicode"))
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_html()


class Encoder:
    """Writes output tokens into an lxml tree.

    Unbalanced writes (an end tag that does not close the innermost open
    element) are programming errors in a callback and raise ``ValueError``.
    """

    CONTAINER_TAG = "fragment"

    def __init__(self) -> None:
        self._builder = ET.TreeBuilder()
        self._builder.start(self.CONTAINER_TAG, {})
        self._open: List[str] = []
        self._fragment: Fragment | None = None

    @property
    def depth(self) -> int:
        return len(self._open)

    def write_start(self, name: str, attrs: Attrs = ()) -> None:
        self._check_open()
        self._builder.start(name, dict(attrs))
        self._open.append(name)

    def write_end(self, name: str) -> None:
        self._check_open()
        if not self._open or self._open[-1] != name:
            expected = self._open[-1] if self._open else None
            raise ValueError(f"unbalanced output: </{name}> while <{expected}> is open")
        self._open.pop()
        self._builder.end(name)

    def write_data(self, text: str) -> None:
        self._check_open()
        if text:
            self._builder.data(text)

    def close(self) -> Fragment:
        """Finish the output and return it; further writes are rejected."""
        if self._fragment is not None:
            return self._fragment
        if self._open:
            raise ValueError(f"unbalanced output: <{self._open[-1]}> left open")
        self._builder.end(self.CONTAINER_TAG)
        self._fragment = Fragment(self._builder.close())
        return self._fragment

    def _check_open(self) -> None:
        if self._fragment is not None:
            raise ValueError("encoder already closed")
