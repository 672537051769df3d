import json

import pytest

from ditawiki.core.exceptions import ImageInlineError, TitleClashError
from ditawiki.core.inline import ContentAddressedInliner
from ditawiki.core.models import Index
from ditawiki.core.services import ConversionReport, ConversionService
from ditawiki.core.services.conversion_service import page_filename


@pytest.fixture
def service():
    return ConversionService(workers=1)


class TestConvertIndex:
    def test_pages_and_errors(self, service, make_topic):
        a = make_topic("a.xml", "Alpha", '<p><xref href="b.xml"/></p>')
        b = make_topic("b.xml", "Beta", '<p><xref href="nowhere.xml">x</xref></p>')
        clash = make_topic("c.xml", "alpha")
        broken = make_topic("d.xml", "Delta")
        broken.raw = b"<topic><title>Delta</title><body><p></body></topic>"

        report = service.convert_index(Index([a, b, clash, broken]))

        assert set(report.pages) == {"alpha", "beta"}
        assert set(report.fatal) == {"delta"}
        assert list(report.diagnostics) == ["beta"]
        assert report.diagnostic_count == 1
        assert len(report.mapping_errors) == 1
        assert isinstance(report.mapping_errors[0], TitleClashError)
        assert not report.ok
        assert report.pages["alpha"].story[0]["text"] == '<p><a href="beta"></a></p>'

    def test_parallel_matches_sequential(self, make_topic):
        def corpus():
            return Index([
                make_topic(f"t{i}.xml", f"Topic {i}", f'<p><xref href="t{(i + 1) % 8}.xml"/></p>')
                for i in range(8)
            ])

        sequential = ConversionService(workers=1).convert_index(corpus())
        parallel = ConversionService(workers=4).convert_index(corpus())

        assert list(parallel.pages) == list(sequential.pages)
        for slug, page in sequential.pages.items():
            assert parallel.pages[slug].story[0]["text"] == page.story[0]["text"]

    def test_workers_default_from_config(self):
        assert ConversionService().workers == 1


class TestIndexPage:
    def test_entries_sorted_by_title(self, service, make_topic):
        report = service.convert_index(Index([
            make_topic("b.xml", "Beta", shortdesc="Second"),
            make_topic("a.xml", "Alpha", shortdesc="First"),
        ]))
        page = service.index_page(report)

        assert page.slug == "index"
        assert [item["type"] for item in page.story] == ["entry", "entry"]
        assert page.story[0] == {
            "type": "entry", "id": "alpha", "title": "Alpha", "text": "First", "link": "alpha",
        }

    def test_empty_report(self, service):
        page = service.index_page(ConversionReport())
        assert [item["type"] for item in page.story] == ["paragraph"]
        assert page.story[0]["text"] == "No pages."


class TestConvertDirectory:
    def test_writes_pages_index_and_media(self, corpus_dir, tmp_path):
        out = tmp_path / "out"
        service = ConversionService(workers=2)
        report = service.convert_directory(corpus_dir, out)

        assert report.ok
        assert isinstance(service.inliner, ContentAddressedInliner)
        assert sorted(p.name for p in out.glob("*.json")) == ["alpha.json", "beta.json", "index.json"]

        alpha = json.loads((out / "alpha.json").read_text(encoding="utf-8"))
        assert alpha["title"] == "Alpha"
        assert alpha["synopsis"] == "First topic"
        html = alpha["story"][0]["text"]
        assert '<a href="beta" title="Second topic">beta</a>' in html
        assert '<p class="image"><img src="/media/img_' in html

        media = list((out / "media").iterdir())
        assert len(media) == 1
        assert media[0].read_bytes() == b"\x89PNG fake image"

        index = json.loads((out / "index.json").read_text(encoding="utf-8"))
        assert [item["link"] for item in index["story"]] == ["alpha", "beta"]

    def test_images_outside_corpus_are_not_published(self, corpus_dir, tmp_path):
        (tmp_path / "secret.png").write_bytes(b"SECRET")
        (corpus_dir / "c.xml").write_text(
            "<topic id='c'><title>Gamma</title><body><image href='../secret.png'/></body></topic>",
            encoding="utf-8",
        )
        out = tmp_path / "out"
        report = ConversionService(workers=1).convert_directory(corpus_dir, out)

        assert report.ok
        [error] = report.diagnostics["gamma"]
        assert isinstance(error, ImageInlineError)
        assert [p.read_bytes() for p in (out / "media").iterdir()] == [b"\x89PNG fake image"]

    def test_no_output_directory(self, corpus_dir):
        report = ConversionService().convert_directory(corpus_dir)
        assert set(report.pages) == {"alpha", "beta"}


@pytest.mark.parametrize("slug, expected", [("alpha", "alpha.json"), ("group/page", "group%2Fpage.json")])
def test_page_filename(slug, expected):
    assert page_filename(slug) == expected
