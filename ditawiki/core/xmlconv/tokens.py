from __future__ import annotations

"""Markup token model and the pull-based tokenizer.

A topic is consumed as a flat sequence of tokens (``StartTag``, ``EndTag``,
``CharData``, ``Comment``, ``ProcInst``).  :func:`iter_tokens` produces that
sequence lazily from XML input using lxml's :class:`~lxml.etree.XMLPullParser`;
any other iterable of tokens (for example a hand-built list in a test) can be
fed to the rewriter as well.
"""

from dataclasses import dataclass, field
import io
import os
from typing import IO, Iterable, Iterator, List, Optional, Tuple, Union

from lxml import etree as ET

from ditawiki.core.exceptions import DecodeError

__all__ = [
    "StartTag",
    "EndTag",
    "CharData",
    "Comment",
    "ProcInst",
    "Token",
    "TokenStream",
    "iter_tokens",
]

_CHUNK_SIZE = 64 * 1024


@dataclass
class StartTag:
    """An element start with its attributes, in document order."""

    name: str
    attrs: List[Tuple[str, str]] = field(default_factory=list)

    def get_attr(self, name: str) -> str:
        """Return the value of attribute *name*, or ``""`` when absent."""
        for key, value in self.attrs:
            if key == name:
                return value
        return ""

    def set_attr(self, name: str, value: str) -> None:
        """Set attribute *name*; an empty *value* removes the attribute."""
        for i, (key, _old) in enumerate(self.attrs):
            if key == name:
                if value:
                    self.attrs[i] = (name, value)
                else:
                    del self.attrs[i]
                return
        if value:
            self.attrs.append((name, value))

    def renamed(self, name: str) -> "StartTag":
        """Return a copy named *name* with an independent attribute list."""
        return StartTag(name, list(self.attrs))


@dataclass(frozen=True)
class EndTag:
    name: str


@dataclass(frozen=True)
class CharData:
    text: str


@dataclass(frozen=True)
class Comment:
    text: str


@dataclass(frozen=True)
class ProcInst:
    target: str
    text: str = ""


Token = Union[StartTag, EndTag, CharData, Comment, ProcInst]


class TokenStream:
    """Pull-based cursor over a token iterable.

    The rewriter and the callbacks share one stream; every token is read
    exactly once, there is no look-ahead and no way back.
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._it = iter(tokens)
        self.consumed = 0

    def __iter__(self) -> "TokenStream":
        return self

    def __next__(self) -> Token:
        token = next(self._it)
        self.consumed += 1
        return token


# ---------------------------------------------------------------------------
# Tokenizer
# ---------------------------------------------------------------------------

Source = Union[bytes, str, "os.PathLike[str]", IO[bytes]]


def _local(name: str) -> str:
    return ET.QName(name).localname if name.startswith("{") else name


def _read_chunks(source: Source) -> Iterator[bytes]:
    if isinstance(source, bytes):
        stream: IO[bytes] = io.BytesIO(source)
    elif isinstance(source, str):
        stream = io.BytesIO(source.encode("utf-8"))
    elif isinstance(source, os.PathLike):
        with open(source, "rb") as fh:
            yield from iter(lambda: fh.read(_CHUNK_SIZE), b"")
        return
    else:
        stream = source
    yield from iter(lambda: stream.read(_CHUNK_SIZE), b"")


def iter_tokens(source: Source, *, path: Optional[str] = None) -> Iterator[Token]:
    """Yield the tokens of an XML document.

    *source* is the document itself (``bytes`` or ``str``), a path-like
    object, or a binary file object.  Character data of an element is only
    known once the parser has moved past it, so text is yielded right before
    the token that follows it.  Processed elements are released from the
    parser's tree as the stream advances.

    Raises
    ------
    DecodeError
        When the parser reports a syntax error (mismatched end tag,
        truncated document, …).
    """
    parser = ET.XMLPullParser(
        events=("start", "end", "comment", "pi"),
        no_network=True,
        load_dtd=False,
        huge_tree=True,
    )
    pending: Optional[Tuple[ET._Element, str]] = None

    def flush() -> Iterator[Token]:
        nonlocal pending
        if pending is None:
            return
        elem, attr = pending
        pending = None
        text = getattr(elem, attr)
        if text:
            yield CharData(text)
        if attr == "tail" and not isinstance(elem, (ET._Comment, ET._ProcessingInstruction)):
            _release(elem)

    def drain() -> Iterator[Token]:
        nonlocal pending
        for event, elem in parser.read_events():
            yield from flush()
            if event == "start":
                yield StartTag(
                    _local(elem.tag),
                    [(_local(k), v) for k, v in elem.attrib.items()],
                )
                pending = (elem, "text")
            elif event == "end":
                yield EndTag(_local(elem.tag))
                pending = (elem, "tail")
            elif event == "comment":
                yield Comment(elem.text or "")
                pending = (elem, "tail")
            elif event == "pi":
                yield ProcInst(elem.target, elem.text or "")
                pending = (elem, "tail")

    try:
        for chunk in _read_chunks(source):
            parser.feed(chunk)
            yield from drain()
        parser.close()
        yield from drain()
        yield from flush()
    except ET.XMLSyntaxError as exc:
        raise DecodeError(f"malformed markup in {path or '<input>'}: {exc}", path, exc) from exc


def _release(elem: ET._Element) -> None:
    """Drop an already tokenized element and its earlier siblings from memory."""
    elem.clear()
    parent = elem.getparent()
    if parent is None:
        return
    while elem.getprevious() is not None:
        del parent[0]
