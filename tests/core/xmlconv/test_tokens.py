import io

import pytest

from ditawiki.core.exceptions import DecodeError
from ditawiki.core.xmlconv.tokens import (
    CharData,
    Comment,
    EndTag,
    ProcInst,
    StartTag,
    TokenStream,
    iter_tokens,
)


class TestStartTag:
    def test_get_attr_missing_is_empty(self):
        assert StartTag("a", [("href", "x")]).get_attr("title") == ""

    def test_set_attr_replaces_in_place(self):
        start = StartTag("a", [("href", "x"), ("scope", "external")])
        start.set_attr("href", "y")
        assert start.attrs == [("href", "y"), ("scope", "external")]

    def test_set_attr_empty_removes(self):
        start = StartTag("a", [("href", "x"), ("scope", "external")])
        start.set_attr("scope", "")
        assert start.attrs == [("href", "x")]

    def test_set_attr_appends_new(self):
        start = StartTag("a")
        start.set_attr("target", "_blank")
        start.set_attr("ignored", "")
        assert start.attrs == [("target", "_blank")]

    def test_renamed_copies_attributes(self):
        start = StartTag("xref", [("href", "x")])
        renamed = start.renamed("a")
        renamed.set_attr("href", "y")
        assert renamed.name == "a"
        assert start.get_attr("href") == "x"


class TestIterTokens:
    """Tokenizing XML input with the pull parser."""

    def test_document_order(self):
        tokens = list(iter_tokens(b'<a x="1">hi<b/>tail</a>'))
        assert tokens == [
            StartTag("a", [("x", "1")]),
            CharData("hi"),
            StartTag("b", []),
            EndTag("b"),
            CharData("tail"),
            EndTag("a"),
        ]

    def test_comments_and_processing_instructions(self):
        tokens = list(iter_tokens("<a><!--note--><?php echo?>x</a>"))
        assert tokens == [
            StartTag("a", []),
            Comment("note"),
            ProcInst("php", "echo"),
            CharData("x"),
            EndTag("a"),
        ]

    def test_namespaces_reduced_to_local_names(self):
        tokens = list(iter_tokens(b'<d:a xmlns:d="urn:x" d:k="v"/>'))
        assert tokens == [StartTag("a", [("k", "v")]), EndTag("a")]

    def test_entities_resolved(self):
        tokens = list(iter_tokens(b"<a>x &amp; y</a>"))
        assert CharData("x & y") in tokens

    def test_file_sources(self, tmp_path):
        path = tmp_path / "t.xml"
        path.write_bytes("<a>é</a>".encode("utf-8"))
        expected = [StartTag("a", []), CharData("é"), EndTag("a")]
        assert list(iter_tokens(path)) == expected
        assert list(iter_tokens(io.BytesIO(path.read_bytes()))) == expected

    @pytest.mark.parametrize("source", [b"<a><b></a>", b"<a>", b"<a></a></b>"])
    def test_malformed_input_is_fatal(self, source):
        with pytest.raises(DecodeError):
            list(iter_tokens(source, path="broken.xml"))

    def test_large_documents_stream(self):
        body = "".join(f"<p>{i}</p>" for i in range(5000))
        tokens = iter_tokens(f"<body>{body}</body>".encode("ascii"))
        count = sum(1 for token in tokens if isinstance(token, CharData))
        assert count == 5000


class TestTokenStream:
    def test_counts_consumed_tokens(self):
        stream = TokenStream([StartTag("a"), EndTag("a")])
        assert next(stream) == StartTag("a")
        assert stream.consumed == 1
        assert list(stream) == [EndTag("a")]
        assert stream.consumed == 2
