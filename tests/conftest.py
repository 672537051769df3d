"""Shared fixtures: topic factories and isolated configuration."""

from pathlib import Path
from typing import Callable, Optional

import pytest
from lxml import etree as ET

from ditawiki.config import ConfigManager
from ditawiki.core.models import Index, Topic
from ditawiki.core.xmlconv import Rules, new_html_rules


def topic_xml(title: str, body: str = "", *, shortdesc: str = "", topic_id: str = "topic",
              navtitle: str = "", extra: str = "") -> str:
    """Return the source of a minimal DITA topic."""
    alts = f"<titlealts><navtitle>{navtitle}</navtitle></titlealts>" if navtitle else ""
    desc = f"<shortdesc>{shortdesc}</shortdesc>" if shortdesc else ""
    return (
        f'<topic id="{topic_id}"><title>{title}</title>{alts}{desc}'
        f"<body>{body}</body>{extra}</topic>"
    )


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Load only the packaged configuration, never the user's overrides."""
    config_dir = tmp_path_factory.mktemp("ditawiki-config")
    monkeypatch.setenv("DITAWIKI_CONFIG_DIR", str(config_dir))
    ConfigManager.reset()
    yield config_dir
    ConfigManager.reset()


@pytest.fixture
def make_topic() -> Callable[..., Topic]:
    """Build a parsed topic from a title and body markup."""

    def _make(filename: str, title: str, body: str = "", *, short_title: str = "",
              shortdesc: str = "", topic_id: Optional[str] = None, extra: str = "") -> Topic:
        raw = topic_xml(title, body, shortdesc=shortdesc,
                        topic_id=topic_id or Path(filename).stem, extra=extra).encode("utf-8")
        return Topic(
            filename=filename,
            title=title,
            short_title=short_title,
            synopsis=shortdesc,
            raw=raw,
            original=ET.fromstring(raw),
        )

    return _make


@pytest.fixture
def topic_source() -> Callable[..., str]:
    return topic_xml


@pytest.fixture
def make_index():
    def _make(*topics: Topic) -> Index:
        return Index(topics)

    return _make


@pytest.fixture
def html_rules() -> Rules:
    return new_html_rules()


@pytest.fixture
def corpus_dir(tmp_path) -> Path:
    """A small DITA corpus on disk with a sub directory and an image."""
    root = tmp_path / "corpus"
    (root / "sub").mkdir(parents=True)
    (root / "images").mkdir()
    (root / "images" / "logo.png").write_bytes(b"\x89PNG fake image")

    (root / "a.xml").write_text(
        topic_xml(
            "Alpha",
            '<p>See <xref href="sub/b.xml">beta</xref>.</p>'
            '<image href="images/logo.png" placement="break"/>',
            shortdesc="First topic",
            topic_id="a",
        ),
        encoding="utf-8",
    )
    (root / "sub" / "b.xml").write_text(
        topic_xml(
            "Beta",
            '<section id="intro"><title>Intro</title><p>Back to <xref href="../a.xml"/>.</p></section>',
            shortdesc="Second topic",
            topic_id="b",
        ),
        encoding="utf-8",
    )
    return root
