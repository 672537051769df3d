from __future__ import annotations

"""Convert one mapped topic into a wiki page.

:class:`PageConversion` runs the streaming rewriter over the topic body with
two per-topic callbacks:

- ``a``: references to other topics are resolved to page slugs through the
  title mapping (see :meth:`PageConversion.resolve_link_info`);
- ``img``: image references are handed to an :class:`ImageInliner`.

Unresolvable references are recorded as diagnostics on the conversion
context; a malformed topic raises :class:`DecodeError`.
"""

import logging
import posixpath
from typing import Iterable, Iterator, List, NamedTuple, Optional, Tuple

from lxml import etree as ET

from ditawiki.core.exceptions import (
    ConversionDiagnostic,
    DecodeError,
    ImageInlineError,
    SelectorError,
    TopicNotFoundError,
)
from ditawiki.core.inline import ImageInliner, PassthroughInliner
from ditawiki.core.mapping import TitleMapping
from ditawiki.core.models import Topic
from ditawiki.core.page import Page, html_item
from ditawiki.core.slug import Slug, validate_slug
from ditawiki.core.utils import normalize_space
from ditawiki.core.xmlconv import (
    Context,
    EndTag,
    StartTag,
    Token,
    TokenStream,
    extract_title,
    is_body_tag,
    iter_tokens,
    new_html_rules,
    split_link,
)

logger = logging.getLogger(__name__)

__all__ = ["LinkInfo", "PageConversion"]

_WEB_SCHEMES = ("http:", "https:")


class LinkInfo(NamedTuple):
    """Outcome of resolving one reference.

    ``href`` is empty when the reference could not be resolved.  ``internal``
    is true only for references that ended up pointing into the wiki.
    """

    href: str
    title: str = ""
    synopsis: str = ""
    internal: bool = False


def _default_download_extensions() -> List[str]:
    from ditawiki.config import ConfigManager

    return list(ConfigManager().get_conversion_config().get("download_extensions") or [])


class PageConversion:
    """Conversion of a single topic; create one instance per topic and run it once.

    Parameters
    ----------
    mapping
        Title mapping of the corpus.  Only read.
    topic
        Topic to convert.
    slug
        Slug of the resulting page; defaults to the topic's mapped slug.
        An explicit slug must already be in slug form (``ValueError``).
    inliner
        Image inliner; references are left as corpus paths when omitted.
    download_extensions
        Extensions of formatted links that become downloads; defaults to the
        ``download_extensions`` of the conversion configuration.
    """

    def __init__(
        self,
        mapping: TitleMapping,
        topic: Topic,
        slug: Optional[Slug] = None,
        inliner: Optional[ImageInliner] = None,
        download_extensions: Optional[Iterable[str]] = None,
    ) -> None:
        if slug is None:
            slug = mapping.slug_for(topic)
            if slug is None:
                raise ValueError(f"topic {topic.filename} has no slug in the mapping")
        else:
            validate_slug(slug)

        self.mapping = mapping
        self.topic = topic
        self.slug = slug
        self.inliner: ImageInliner = inliner if inliner is not None else PassthroughInliner()
        if download_extensions is None:
            download_extensions = _default_download_extensions()
        self.download_extensions = frozenset(ext.lower() for ext in download_extensions)

        base_rules = mapping.rules if mapping.rules is not None else new_html_rules()
        rules = base_rules.with_callbacks({"a": self.to_slug, "img": self.inline_image})
        self.context = Context(rules, index=mapping.index, decoding_path=topic.filename)

    @property
    def errors(self) -> List[ConversionDiagnostic]:
        return self.context.errors

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------
    def convert(self) -> Tuple[Page, List[ConversionDiagnostic]]:
        """Convert the topic.

        Returns the page and the diagnostics gathered along the way.

        Raises
        ------
        DecodeError
            When the topic content is malformed; no page is produced.
        """
        topic = self.topic
        if not topic.raw:
            raise DecodeError(f"{topic.filename}: topic has no content", topic.filename)

        page = Page(
            slug=self.slug,
            title=topic.title,
            modified=topic.modified,
            synopsis=topic.synopsis,
        )

        tokens = iter_tokens(topic.raw, path=topic.filename)
        fragment = self.context.run(TokenStream(_body_tokens(tokens)))
        page.append(html_item(fragment.to_html()))

        related = self.related_links_html()
        if related:
            page.append(html_item(related))

        logger.debug("Page %s: %d story item(s), %d diagnostic(s)",
                     self.slug, len(page.story), len(self.errors))
        return page, self.errors

    # ------------------------------------------------------------------
    # Link resolution
    # ------------------------------------------------------------------
    def resolve_link_info(self, url: str) -> LinkInfo:
        """Resolve a reference found in the topic being converted.

        Web URLs pass through.  ``#selector`` alone points into this topic.
        Anything else is looked up relative to the topic's directory; the
        display title is taken from the element at the selector when there
        is one, otherwise from the referenced topic.
        """
        if url.startswith(_WEB_SCHEMES):
            return LinkInfo(url)

        path, selector = split_link(url)
        if not path:
            return LinkInfo("#" + selector, internal=True)

        name = posixpath.join(self._topic_dir(), path)
        topic = self.mapping.index.get(name)
        if topic is None:
            self.context.report(TopicNotFoundError(
                f"did not find topic {posixpath.normpath(name)} [{url}]", reference=url))
            return LinkInfo("")

        title = ""
        synopsis = ""
        if selector:
            try:
                title = extract_title(topic.raw, selector)
            except ValueError as exc:
                self.context.report(SelectorError(
                    f"unable to extract title from {topic.filename} [{url}]: {exc}",
                    reference=url, cause=exc))

        if not title and topic.original is not None:
            title = topic.title
            if not selector:
                synopsis = topic.synopsis

        slug = self.mapping.slug_for(topic)
        if slug is None:
            return LinkInfo("", title, synopsis, False)
        if selector:
            return LinkInfo(f"{slug}#{selector}", title, synopsis, True)
        return LinkInfo(slug, title, synopsis, True)

    def _topic_dir(self) -> str:
        return posixpath.dirname(self.context.decoding_path.replace("\\", "/"))

    def _rewrite_link(self, start: StartTag) -> LinkInfo:
        href = start.get_attr("href")
        info = LinkInfo("")
        if href:
            info = self.resolve_link_info(href)
            href = info.href
            start.set_attr("href", href)

        if info.synopsis and not start.get_attr("title"):
            start.set_attr("title", info.synopsis)

        start.set_attr("scope", "")

        if start.get_attr("format") and href:
            start.set_attr("format", "")
            ext = posixpath.splitext(href)[1].lower()
            if ext in self.download_extensions:
                start.set_attr("download", posixpath.basename(href))
            else:
                start.set_attr("target", "_blank")
        return info

    # ------------------------------------------------------------------
    # Callbacks
    # ------------------------------------------------------------------
    def to_slug(self, context: Context, tokens: TokenStream, start: StartTag) -> None:
        """Callback for ``a``: point the link at the target page."""
        self._rewrite_link(start)
        context.emit_with_children(tokens, start)

    def inline_image(self, context: Context, tokens: TokenStream, start: StartTag) -> None:
        """Callback for ``img``: replace the reference with a media URL."""
        href = start.get_attr("href")
        if href:
            start.set_attr("src", self._inlined_url(context, href))
        start.set_attr("href", "")

        placement = start.get_attr("placement")
        start.set_attr("placement", "")
        if placement == "break":
            context.encoder.write_start("p", [("class", "image")])

        context.emit_with_children(tokens, start)

        if placement == "break":
            context.encoder.write_end("p")

    def _inlined_url(self, context: Context, href: str) -> str:
        ref = href
        if not href.startswith(_WEB_SCHEMES + ("data:",)):
            ref = posixpath.normpath(posixpath.join(self._topic_dir(), href))
        try:
            return self.inliner.inlined_image_url(ref)
        except ImageInlineError as exc:
            if not exc.reference:
                exc.reference = href
            context.report(exc)
            return href

    # ------------------------------------------------------------------
    # Related links
    # ------------------------------------------------------------------
    def related_links_html(self) -> str:
        """Render the topic's ``<related-links>`` as an HTML list.

        Returns ``""`` when the topic has none or none of them resolves.
        """
        root = self.topic.original
        if root is None:
            return ""

        items = []
        for link in root.xpath(".//*[local-name()='related-links']//*[local-name()='link'][@href]"):
            start = StartTag("a", [(k, v) for k, v in link.attrib.items() if not k.startswith("{")])
            info = self._rewrite_link(start)
            if not start.get_attr("href"):
                continue
            text = ""
            for child in link:
                if isinstance(child.tag, str) and ET.QName(child).localname == "linktext":
                    text = normalize_space("".join(child.itertext()))
                    break
            items.append((start, text or info.title or start.get_attr("href")))

        if not items:
            return ""

        div = ET.Element("div", {"class": "related-links"})
        ET.SubElement(div, "h4").text = "Related Links"
        ul = ET.SubElement(div, "ul")
        for start, text in items:
            li = ET.SubElement(ul, "li")
            a = ET.SubElement(li, "a", dict(_html_link_attrs(start)))
            a.text = text
        return ET.tostring(div, method="html", encoding="unicode")


def _html_link_attrs(start: StartTag) -> List[Tuple[str, str]]:
    keep = ("href", "title", "download", "target")
    return [(key, value) for key, value in start.attrs if key in keep]


def _body_tokens(tokens: Iterable[Token]) -> Iterator[Token]:
    """Yield the children of the first body element of a topic.

    Tokens outside the body are consumed but not yielded, so the whole
    document is still read and checked by the tokenizer.
    """
    depth = -1  # -1: before the body, >= 0: inside, None: after
    for token in tokens:
        if depth is None:
            continue
        if depth < 0:
            if isinstance(token, StartTag) and is_body_tag(token.name):
                depth = 0
            continue
        if isinstance(token, StartTag):
            depth += 1
        elif isinstance(token, EndTag):
            if depth == 0:
                depth = None
                continue
            depth -= 1
        yield token
