import pytest

from ditawiki.core.exceptions import DecodeError, TopicNotFoundError
from ditawiki.core.xmlconv import (
    CharData,
    Comment,
    Context,
    EndTag,
    Rules,
    StartTag,
    rewrite,
)


@pytest.fixture
def rules():
    return Rules(
        translate={"b": "strong", "xref": "a", "i": "em"},
        remove={"x", "draft-comment"},
        unwrap={"y"},
    )


def run(rules, tokens, path="topic.xml"):
    context = Context(rules, decoding_path=path)
    fragment = context.run(tokens)
    return fragment.to_html(), context


class TestRewrite:
    """Rule-driven rewriting of a token stream."""

    def test_remove_unwrap_translate(self, rules):
        fragment, errors = rewrite(b"<a><x>drop-me</x><y><b>k</b></y></a>", rules)
        assert fragment.to_html() == "<a><strong>k</strong></a>"
        assert errors == []

    def test_removed_subtree_is_not_visited(self, rules):
        seen = []

        def callback(context, tokens, start):
            seen.append(start.name)
            context.emit_with_children(tokens, start)

        html, _ = run(
            rules.with_callbacks({"a": callback}),
            [
                StartTag("p"),
                StartTag("x"), StartTag("xref", [("href", "t.xml")]), EndTag("xref"), EndTag("x"),
                StartTag("xref"), CharData("kept"), EndTag("xref"),
                EndTag("p"),
            ],
        )
        assert html == "<p><a>kept</a></p>"
        assert seen == ["a"]

    def test_attributes_and_text_pass_through(self, rules):
        fragment, _ = rewrite('<p class="c">1 &lt; 2 <i>really</i></p>', rules)
        assert fragment.to_html() == '<p class="c">1 &lt; 2 <em>really</em></p>'

    def test_multiple_top_level_elements(self, rules):
        html, _ = run(rules, [
            CharData("lead "),
            StartTag("p"), CharData("a"), EndTag("p"),
            StartTag("p"), CharData("b"), EndTag("p"),
        ])
        assert html == "lead <p>a</p><p>b</p>"

    def test_comments_are_dropped(self, rules):
        html, _ = run(rules, [StartTag("p"), Comment("hidden"), CharData("shown"), EndTag("p")])
        assert html == "<p>shown</p>"

    def test_unwrapped_top_level_element(self, rules):
        html, _ = run(rules, [StartTag("y"), StartTag("p"), EndTag("p"), CharData("t"), EndTag("y")])
        assert html == "<p></p>t"


class TestCallbacks:
    def test_callback_receives_output_name_and_may_wrap(self, rules):
        def wrap(context, tokens, start):
            context.encoder.write_start("div", [("class", "wrap")])
            context.emit_with_children(tokens, start)
            context.encoder.write_end("div")

        html, _ = run(
            rules.with_callbacks({"a": wrap}),
            [StartTag("xref", [("href", "h")]), CharData("t"), EndTag("xref")],
        )
        assert html == '<div class="wrap"><a href="h">t</a></div>'

    def test_unconsumed_element_is_skipped(self, rules):
        def ignore(context, tokens, start):
            pass

        html, _ = run(
            rules.with_callbacks({"a": ignore}),
            [
                StartTag("p"),
                StartTag("a"), StartTag("b"), CharData("x"), EndTag("b"), EndTag("a"),
                CharData("y"),
                EndTag("p"),
            ],
        )
        assert html == "<p>y</p>"

    def test_callback_may_skip(self, rules):
        def drop(context, tokens, start):
            context.skip(tokens)

        html, _ = run(rules.with_callbacks({"strong": drop}),
                      [StartTag("p"), StartTag("b"), CharData("x"), EndTag("b"), EndTag("p")])
        assert html == "<p></p>"

    def test_reported_diagnostics_keep_the_fragment(self, rules):
        def report(context, tokens, start):
            context.report(TopicNotFoundError("did not find topic missing.xml", reference="missing.xml"))
            context.emit_with_children(tokens, start)

        html, context = run(
            rules.with_callbacks({"a": report}),
            [StartTag("xref"), CharData("t"), EndTag("xref")],
            path="dir/topic.xml",
        )
        assert html == "<a>t</a>"
        assert len(context.errors) == 1
        assert context.errors[0].path == "dir/topic.xml"
        assert context.errors[0].reference == "missing.xml"


class TestFatalErrors:
    def test_unmatched_end_tag(self, rules):
        context = Context(rules)
        with pytest.raises(DecodeError, match="does not match"):
            context.run([StartTag("p"), CharData("x"), EndTag("q")])
        assert context.output is None

    def test_end_tag_with_nothing_open(self, rules):
        with pytest.raises(DecodeError, match="unexpected end tag"):
            Context(rules).run([EndTag("p")])

    def test_truncated_stream(self, rules):
        with pytest.raises(DecodeError, match="end of input"):
            Context(rules).run([StartTag("p"), StartTag("b")])

    def test_truncated_inside_removed_subtree(self, rules):
        with pytest.raises(DecodeError):
            Context(rules).run([StartTag("x"), StartTag("p")])

    def test_malformed_markup(self, rules):
        with pytest.raises(DecodeError):
            rewrite(b"<p><b></p>", rules, path="broken.xml")

    def test_context_runs_once(self, rules):
        context = Context(rules)
        context.run([StartTag("p"), EndTag("p")])
        with pytest.raises(RuntimeError):
            context.run([])
