from __future__ import annotations

"""Exception classes for topic conversion.

Three families exist and are handled differently by callers:

- :class:`DecodeError` is *fatal*: the token stream of a topic is structurally
  broken and no fragment is produced for it.
- :class:`ConversionDiagnostic` subclasses are *non-fatal*: they are collected
  on the conversion context and returned next to a best-effort fragment.
- :class:`MappingError` subclasses are corpus level: the affected topic is left
  out of the title mapping, the rest of the corpus is still mapped.
"""

from typing import Optional

__all__ = [
    "DitawikiError",
    "DecodeError",
    "ConversionDiagnostic",
    "TopicNotFoundError",
    "SelectorError",
    "ImageInlineError",
    "MappingError",
    "TitleMissingError",
    "TitleClashError",
    "TopicLoadError",
]


class DitawikiError(Exception):
    """Base exception for all ditawiki errors."""

    def __init__(self, message: str, path: Optional[str] = None,
                 cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.path = path
        self.cause = cause


class DecodeError(DitawikiError):
    """Raised when a topic's token stream is malformed.

    Examples are an end tag that does not match the open element, an end tag
    with nothing open, a stream that ends with unclosed elements, or an XML
    syntax error reported by the parser.
    """
    pass


# ---------------------------------------------------------------------------
# Non-fatal diagnostics
# ---------------------------------------------------------------------------


class ConversionDiagnostic(DitawikiError):
    """A recorded, non-fatal conversion problem.

    Attributes
    ----------
    path
        Source path of the topic being converted.
    reference
        The offending reference as written in the source (href, selector…).
    """

    def __init__(self, message: str, path: Optional[str] = None,
                 reference: str = "", cause: Optional[Exception] = None) -> None:
        super().__init__(message, path, cause)
        self.reference = reference


class TopicNotFoundError(ConversionDiagnostic):
    """A link points at a topic that is not in the index."""
    pass


class SelectorError(ConversionDiagnostic):
    """A title could not be extracted for an in-document selector."""
    pass


class ImageInlineError(ConversionDiagnostic):
    """An image reference could not be turned into a media URL."""
    pass


# ---------------------------------------------------------------------------
# Corpus level mapping errors
# ---------------------------------------------------------------------------


class MappingError(DitawikiError):
    """Base class for errors recorded while building the title mapping."""
    pass


class TitleMissingError(MappingError):
    """A topic has no title and therefore no slug."""

    def __init__(self, filename: str) -> None:
        super().__init__(f'title missing in "{filename}"', filename)


class TitleClashError(MappingError):
    """Two topics slugify to the same identifier; the later one is excluded."""

    def __init__(self, title: str, filename: str, other_filename: str) -> None:
        super().__init__(
            f'clashing title "{title}" in "{filename}" and "{other_filename}"',
            filename,
        )
        self.title = title
        self.other_path = other_filename


# ---------------------------------------------------------------------------
# Indexing
# ---------------------------------------------------------------------------


class TopicLoadError(DitawikiError):
    """Raised by the directory indexer when a topic file cannot be parsed."""
    pass
