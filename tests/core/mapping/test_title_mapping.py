import pytest

from ditawiki.core.exceptions import TitleClashError, TitleMissingError
from ditawiki.core.mapping import create_mapping, titelize
from ditawiki.core.models import Index, Topic
from ditawiki.core.slug import slugify


@pytest.mark.parametrize(
    "title, expected",
    [
        ("Input/Output", "Input or Output"),
        ("Input / Output", "Input or Output"),
        ("R&D", "R and D"),
        ("Setup & Install", "Setup and Install"),
        ("Power ^& Light", "Power ^& Light"),
        ("Plain title", "Plain title"),
    ],
)
def test_titelize(title, expected):
    assert titelize(title) == expected


class TestPrimaryAssignment:
    """First pass: one slug per titled topic."""

    def test_slugs_follow_titles(self):
        a = Topic("a.xml", "Getting Started")
        b = Topic("sub/b.xml", "Input/Output")
        mapping, errors = create_mapping(Index([a, b]))

        assert errors == []
        assert mapping.slug_for(a) == "getting-started"
        assert mapping.slug_for(b) == "input-or-output"
        assert b.title == "Input or Output"

    def test_missing_title(self):
        a = Topic("a.xml", "  ")
        b = Topic("b.xml", "Fine")
        mapping, errors = create_mapping(Index([a, b]))

        assert len(errors) == 1
        assert isinstance(errors[0], TitleMissingError)
        assert str(errors[0]) == 'title missing in "a.xml"'
        assert mapping.slug_for(a) is None
        assert len(mapping) == 1

    def test_clash_keeps_first_topic(self):
        first = Topic("a.xml", "Setup & Install")
        second = Topic("b.xml", "Setup and Install")
        mapping, errors = create_mapping(Index([first, second]))

        assert mapping.topic_for("setup-and-install") is first
        assert second not in mapping.by_topic
        assert len(errors) == 1
        error = errors[0]
        assert isinstance(error, TitleClashError)
        assert error.path == "b.xml"
        assert error.other_path == "a.xml"
        assert str(error) == 'clashing title "Setup and Install" in "b.xml" and "a.xml"'

    def test_clashing_topics_remain_in_index(self):
        first = Topic("a.xml", "Same")
        second = Topic("b.xml", "same")
        mapping, _ = create_mapping(Index([first, second]))
        assert set(mapping.topics) == {"a.xml", "b.xml"}
        assert [t.filename for t in mapping.topics_sorted()] == ["a.xml", "b.xml"]


class TestPromotion:
    """Second pass: shorter titles replace long ones when free."""

    def test_short_title_promoted(self):
        topic = Topic("a.xml", "Configuring the Network Stack", short_title="Networking")
        mapping, _ = create_mapping(Index([topic]))

        assert mapping.slug_for(topic) == "networking"
        assert mapping.topic_for("configuring-the-network-stack") is None
        assert topic.title == "Networking"
        assert topic.short_title == ""

    def test_promotion_blocked_by_taken_slug(self):
        owner = Topic("a.xml", "Networking")
        topic = Topic("b.xml", "Configuring the Network Stack", short_title="Networking")
        mapping, errors = create_mapping(Index([owner, topic]))

        assert errors == []
        assert mapping.slug_for(owner) == "networking"
        assert mapping.slug_for(topic) == "configuring-the-network-stack"
        assert topic.title == "Configuring the Network Stack"

    def test_short_title_must_be_strictly_shorter(self):
        topic = Topic("a.xml", "Abcd", short_title="Wxyz")
        mapping, _ = create_mapping(Index([topic]))
        assert mapping.slug_for(topic) == "abcd"

    def test_short_title_is_titelized(self):
        topic = Topic("a.xml", "Reading and Writing Files", short_title="Read/Write")
        mapping, _ = create_mapping(Index([topic]))
        assert mapping.slug_for(topic) == "read-or-write"
        assert topic.title == "Read or Write"

    def test_single_pass_without_cascade(self):
        # w is blocked by v; v then frees "beta-long" but w is not revisited.
        # x frees "alpha-long", which the later z takes in the same pass.
        w = Topic("w.xml", "Beta Long Title", short_title="Beta Long")
        v = Topic("v.xml", "Beta Long", short_title="B")
        x = Topic("x.xml", "Alpha Long", short_title="Alpha")
        z = Topic("z.xml", "Alpha Long Extended", short_title="Alpha Long")
        mapping, errors = create_mapping(Index([w, v, x, z]))

        assert errors == []
        assert mapping.slug_for(w) == "beta-long-title"
        assert w.title == "Beta Long Title"
        assert w.short_title == "Beta Long"
        assert mapping.topic_for("beta-long") is None
        assert mapping.slug_for(v) == "b"
        assert mapping.slug_for(x) == "alpha"
        assert mapping.slug_for(z) == "alpha-long"
        assert z.title == "Alpha Long"


class TestMappingProperties:
    @pytest.fixture
    def corpus(self):
        return [
            Topic("a.xml", "Alpha"),
            Topic("b.xml", "Beta & Gamma", short_title="Beta"),
            Topic("c.xml", "alpha"),
            Topic("d.xml", ""),
            Topic("e/f.xml", "Delta / Epsilon"),
            Topic("e/g.xml", "Zeta Eta Theta", short_title="Alpha"),
        ]

    def test_bijection_and_idempotence(self, corpus):
        mapping, errors = create_mapping(Index(corpus))

        assert len(mapping.by_slug) == len(mapping.by_topic)
        for slug, topic in mapping.by_slug.items():
            assert mapping.by_topic[topic] == slug
            assert slugify(slug) == slug
        assert len(mapping) + len(errors) == len(corpus)

    def test_deterministic_for_same_order(self, corpus):
        first, _ = create_mapping(Index([Topic(t.filename, t.title, t.short_title) for t in corpus]))
        second, _ = create_mapping(Index([Topic(t.filename, t.title, t.short_title) for t in corpus]))
        assert {t.filename: s for t, s in first.by_topic.items()} == \
            {t.filename: s for t, s in second.by_topic.items()}
