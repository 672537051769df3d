from __future__ import annotations

"""High-level conversion service for DITA corpus to wiki page transformation.

Entry-point for any front-end (CLI, batch job, API) that needs to turn an
indexed topic corpus into wiki pages.  The service builds the title mapping
once, then converts every mapped topic with its own
:class:`~ditawiki.core.page_conversion.PageConversion`, optionally on a
thread pool.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
import logging
import os
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union
from urllib.parse import quote

from ditawiki.core.exceptions import ConversionDiagnostic, DecodeError, MappingError
from ditawiki.core.importers import TopicIndexer
from ditawiki.core.inline import ContentAddressedInliner, ImageInliner, PassthroughInliner
from ditawiki.core.mapping import TitleMapping, create_mapping
from ditawiki.core.models import Index, Topic
from ditawiki.core.page import Page, entry, paragraph
from ditawiki.core.page_conversion import PageConversion
from ditawiki.core.slug import Slug
from ditawiki.core.utils import save_json_file
from ditawiki.core.xmlconv import Rules, new_html_rules

logger = logging.getLogger(__name__)

__all__ = ["ConversionService", "ConversionReport"]

INDEX_SLUG = "index"


@dataclass
class ConversionReport:
    """Outcome of converting a corpus.

    Attributes
    ----------
    pages
        Converted pages keyed by slug, in mapping order.
    diagnostics
        Non-fatal problems per slug (only slugs that have some).
    fatal
        Topics that could not be converted, keyed by slug.
    mapping_errors
        Topics left out of the mapping (missing or clashing titles).
    mapping
        The title mapping the pages were built with.
    """

    pages: Dict[Slug, Page] = field(default_factory=dict)
    diagnostics: Dict[Slug, List[ConversionDiagnostic]] = field(default_factory=dict)
    fatal: Dict[Slug, DecodeError] = field(default_factory=dict)
    mapping_errors: List[MappingError] = field(default_factory=list)
    mapping: Optional[TitleMapping] = None

    @property
    def diagnostic_count(self) -> int:
        return sum(len(errs) for errs in self.diagnostics.values())

    @property
    def ok(self) -> bool:
        return not self.fatal


class ConversionService:
    """Corpus conversion façade with no front-end dependencies.

    Parameters
    ----------
    rules
        Rewrite table; defaults to the configured HTML rules.
    inliner
        Image inliner shared by all conversions.
    workers
        Number of threads used to convert topics; defaults to the ``workers``
        setting of the conversion configuration.
    """

    def __init__(
        self,
        rules: Optional[Rules] = None,
        inliner: Optional[ImageInliner] = None,
        workers: Optional[int] = None,
    ) -> None:
        from ditawiki.config import ConfigManager

        self.config = ConfigManager().get_conversion_config()
        self.rules = rules if rules is not None else new_html_rules()
        self.inliner = inliner
        if workers is None:
            workers = int(self.config.get("workers") or 1)
        self.workers = max(1, workers)
        self.download_extensions = list(self.config.get("download_extensions") or [])

    # ---------------------------------------------------------------------
    # PUBLIC API
    # ---------------------------------------------------------------------
    def convert_index(self, index: Index) -> ConversionReport:
        """Map *index* and convert every mapped topic."""
        logger.info("Convert: mapping %d topic(s)", len(index))
        mapping, mapping_errors = create_mapping(index, self.rules)
        report = ConversionReport(mapping_errors=mapping_errors, mapping=mapping)

        jobs = list(mapping.by_slug.items())
        if self.workers > 1 and len(jobs) > 1:
            logger.debug("Converting %d topic(s) on %d worker(s)", len(jobs), self.workers)
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                results = list(pool.map(lambda job: self._convert_job(mapping, *job), jobs))
        else:
            results = [self._convert_job(mapping, slug, topic) for slug, topic in jobs]

        for slug, page, errors, fatal in results:
            if fatal is not None:
                report.fatal[slug] = fatal
                continue
            report.pages[slug] = page
            if errors:
                report.diagnostics[slug] = errors

        logger.info(
            "Convert OK: pages=%d diagnostics=%d fatal=%d mapping_errors=%d",
            len(report.pages), report.diagnostic_count, len(report.fatal), len(report.mapping_errors),
        )
        return report

    def convert_topic(self, mapping: TitleMapping, topic: Topic) -> Tuple[Page, List[ConversionDiagnostic]]:
        """Convert a single mapped topic.

        Raises
        ------
        DecodeError
            When the topic content is malformed.
        """
        conversion = PageConversion(
            mapping,
            topic,
            inliner=self.inliner if self.inliner is not None else PassthroughInliner(),
            download_extensions=self.download_extensions,
        )
        return conversion.convert()

    def index_page(self, report: ConversionReport) -> Page:
        """Build a page listing every converted page, sorted by title."""
        page = Page(slug=INDEX_SLUG, title="Index")
        pages = sorted(report.pages.values(), key=lambda p: (p.title.lower(), p.slug))
        if not pages:
            page.append(paragraph("No pages."))
        for converted in pages:
            page.append(entry(converted.title, converted.synopsis, converted.slug))
        return page

    # ---------------------------------------------------------------------
    # Output
    # ---------------------------------------------------------------------
    def write_pages(self, report: ConversionReport, output_dir: Union[str, os.PathLike]) -> Path:
        """Write each page as ``<slug>.json`` plus ``index.json`` and media.

        Slugs are percent-encoded into file names.  Media collected by a
        :class:`ContentAddressedInliner` are written below ``media/``.
        """
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        logger.info("Export: writing %d page(s)", len(report.pages))
        logger.debug("Destination: %s", output_dir)

        for slug, page in report.pages.items():
            save_json_file(page.to_dict(), str(output_dir / page_filename(slug)))
        save_json_file(self.index_page(report).to_dict(), str(output_dir / page_filename(INDEX_SLUG)))

        if isinstance(self.inliner, ContentAddressedInliner) and self.inliner.media:
            media_dir = output_dir / "media"
            media_dir.mkdir(exist_ok=True)
            for name, blob in sorted(self.inliner.media.items()):
                (media_dir / name).write_bytes(blob)
            logger.info("Export: wrote %d media file(s)", len(self.inliner.media))

        return output_dir

    # Convenience one-shot -------------------------------------------------
    def convert_directory(
        self,
        source_dir: Union[str, os.PathLike],
        output_dir: Optional[Union[str, os.PathLike]] = None,
        *,
        strict: bool = False,
    ) -> ConversionReport:
        """Full pipeline: index *source_dir*, convert, and optionally write pages."""
        indexer = TopicIndexer(self.config.get("topic_extensions"), strict=strict)
        index = indexer.index_directory(source_dir)
        if self.inliner is None:
            self.inliner = ContentAddressedInliner(
                source_dir, self.config.get("image_url_prefix") or "/media")
        report = self.convert_index(index)
        if output_dir is not None:
            self.write_pages(report, output_dir)
        return report

    # ---------------------------------------------------------------------
    # Internals
    # ---------------------------------------------------------------------
    def _convert_job(self, mapping: TitleMapping, slug: Slug, topic: Topic
                     ) -> Tuple[Slug, Optional[Page], List[ConversionDiagnostic], Optional[DecodeError]]:
        try:
            page, errors = self.convert_topic(mapping, topic)
        except DecodeError as exc:
            logger.error("Convert FAIL: %s (%s)", topic.filename, exc)
            return slug, None, [], exc
        return slug, page, errors, None


def page_filename(slug: Slug) -> str:
    return quote(slug, safe="") + ".json"
