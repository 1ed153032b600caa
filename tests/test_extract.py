"""
Top comment extraction and documentation splitting tests
"""

import pytest

from conftest import FILE, Item, classify, deprecated, other, text

from docattr.lib.attributes import stopComment_is
from docattr.lib.errors import warnings_catch
from docattr.lib.extract import extract_top_comment, extract_top_comment_class, split_docs
from docattr.models import (
    Alert,
    AnnotationLike,
    ClassComment,
    Docs,
    Heading,
    Identifier,
    InternalTag,
    Located,
    Paragraph,
    SourcePosition,
    SourceSpan,
    STOP,
    TagsPolicy,
    UNRECOGNIZED,
    Verbatim,
)


def values(documentation):
    return [element.value for element in documentation]


def located(value, line=1):
    return Located(SourceSpan(FILE, SourcePosition(line, 0), SourcePosition(line, 1)), value)


def comment(body, line=1):
    return Item(body, text(body, line=line))


def alert(message=None, line=1):
    return Item(f"deprecated {message}", deprecated(message, line=line))


def skip(label="open"):
    return Item(label, kind="open")


def irrelevant(label="attribute"):
    return Item(label, other())


def declaration(label="val x"):
    return Item(label, kind="declaration")


def extract(items, policy=None, classifier=classify, parent=None):
    parent = parent or Identifier("module", "Scope")
    return extract_top_comment(policy or TagsPolicy.none(), classifier, parent, items)


class TestLeadingPhase:
    """Finding the top comment"""

    def test_skips_kept_alert_absorbed(self):
        """Skipped items stay, the adjacent alert is absorbed, the scan halts at a declaration"""
        items = [skip("open A"), irrelevant(), comment("overview"), alert(), declaration()]
        remaining, (synopsis, rest), tags = extract(items)

        assert remaining == [items[0], items[1], items[4]]
        assert values(synopsis) == [Paragraph("overview"), Alert("deprecated", None)]
        assert rest == ()
        assert tags == ()

    def test_stop_first(self):
        """A declaration first: nothing is consumed"""
        items = [declaration(), comment("late"), alert()]
        remaining, (synopsis, rest), tags = extract(items)
        assert remaining == items
        assert (synopsis, rest, tags) == ((), (), ())

    def test_stop_after_skips_and_alerts(self):
        """Reaching a declaration first consumes nothing, alerts included"""
        items = [skip(), alert("early"), declaration(), comment("late")]
        remaining, (synopsis, rest), _ = extract(items)
        assert remaining == items
        assert (synopsis, rest) == ((), ())

    def test_empty_body(self):
        """Empty body, empty result"""
        assert extract([]) == ([], ((), ()), ())

    def test_only_skips_and_alerts(self):
        """Running out of items keeps the skipped ones and the alerts"""
        items = [skip(), alert("a"), skip("open B")]
        remaining, (synopsis, rest), _ = extract(items)
        assert remaining == [items[0], items[2]]
        assert values(synopsis) == [Alert("deprecated", "a")]

    def test_alerts_before_and_after(self):
        """Alerts before the comment come before alerts after it"""
        items = [alert("before"), comment("doc"), alert("after")]
        remaining, (synopsis, _), _ = extract(items)
        assert remaining == []
        assert values(synopsis) == [
            Paragraph("doc"),
            Alert("deprecated", "before"),
            Alert("deprecated", "after"),
        ]

    def test_comment_span_is_padded(self):
        """The top comment is read three columns in"""
        _, (synopsis, _), _ = extract([comment("overview", line=3)])
        assert synopsis[0].span.start == SourcePosition(3, 3)

    def test_none_from_classifier_stops(self):
        """A classifier answering None ends the scan like Unrecognized"""
        items = [comment("never read")]
        remaining, (synopsis, _), _ = extract(items, classifier=lambda item: None)
        assert remaining == items
        assert synopsis == ()

    def test_bad_classifier_answer(self):
        """Anything else from the classifier is a programming error"""
        with pytest.raises(TypeError):
            extract([comment("x")], classifier=lambda item: "annotation")


class TestTrailingPhase:
    """Alerts right after the top comment"""

    def test_trailing_skips_dropped(self):
        """Skipped items after the comment are not returned"""
        items = [comment("doc"), skip(), alert("dep"), irrelevant(), comment("next"), declaration()]
        remaining, (synopsis, _), _ = extract(items)
        assert remaining == [items[4], items[5]]
        assert values(synopsis) == [Paragraph("doc"), Alert("deprecated", "dep")]

    def test_stop_after_comment(self):
        """A declaration after the comment is left for the caller"""
        items = [comment("doc"), declaration(), alert("not mine")]
        remaining, (synopsis, _), _ = extract(items)
        assert remaining == [items[1], items[2]]
        assert values(synopsis) == [Paragraph("doc")]

    def test_comment_only(self):
        """A lone comment is consumed entirely"""
        assert extract([comment("doc")])[0] == []


class TestStopComments:
    """The caller reports stop comments"""

    def test_classifier_reports_stop(self):
        """A caller classifier using stopComment_is stops the scan"""
        def classifier(item):
            if item.annotation is not None and stopComment_is(item.annotation):
                return UNRECOGNIZED
            return classify(item)

        items = [skip(), comment("/*"), comment("hidden")]
        remaining, (synopsis, _), _ = extract(items, classifier=classifier)
        assert remaining == items
        assert synopsis == ()

    def test_scanner_does_not_check(self):
        """Passed through as an annotation, '/*' is ordinary text"""
        items = [Item("stop", text("/*"))]
        _, (synopsis, _), _ = extract(items, classifier=lambda item: AnnotationLike(item.annotation))
        assert values(synopsis) == [Paragraph("/*")]


class TestTopCommentContent:
    """Assembly and splitting of the top comment"""

    def test_split_at_heading(self):
        """Synopsis ends at the first heading"""
        _, (synopsis, rest), _ = extract([comment("Intro.\n\n{1 Details}\n\nMore.")])
        assert values(synopsis) == [Paragraph("Intro.")]
        assert [type(value) for value in values(rest)] == [Heading, Paragraph]
        assert values(rest)[0].title == "Details"

    def test_alerts_land_in_rest(self):
        """Alerts follow the text, so with a heading they end up in rest"""
        _, (synopsis, rest), _ = extract([comment("Intro.\n\n{1 Details}"), alert()])
        assert values(synopsis) == [Paragraph("Intro.")]
        assert values(rest)[-1] == Alert("deprecated", None)

    def test_tags_under_policy(self):
        """Internal tags accepted by the policy are returned"""
        _, (synopsis, _), tags = extract([comment("Module.\n@open")], policy=TagsPolicy.status())
        assert values(synopsis) == [Paragraph("Module.")]
        assert values(tags) == [InternalTag("open")]

    def test_tags_rejected(self):
        """Rejected tags are reported"""
        with warnings_catch() as caught:
            _, _, tags = extract([comment("Module.\n@open")])
        assert tags == ()
        assert [warning.message for warning in caught] == ["Unexpected tag '@open' at this location."]


class TestClassBody:
    """Class bodies hold interpreted comments"""

    def test_leading_docs_consumed(self):
        """A leading Docs comment is split and consumed"""
        documentation = (located(Paragraph("Class doc.")), located(Heading(1, "Methods")))
        items = [ClassComment(Docs(documentation)), "method m"]
        remaining, (synopsis, rest) = extract_top_comment_class(items)
        assert remaining == ["method m"]
        assert synopsis == documentation[:1]
        assert rest == documentation[1:]

    def test_leading_stop_kept(self):
        """A stop comment is not documentation"""
        items = [ClassComment(STOP), "method m"]
        assert extract_top_comment_class(items) == (items, ((), ()))

    def test_no_comment(self):
        """Anything else leaves the body untouched"""
        items = ["method m", ClassComment(Docs(()))]
        assert extract_top_comment_class(items) == (items, ((), ()))

    def test_empty(self):
        """Empty body"""
        assert extract_top_comment_class([]) == ([], ((), ()))


class TestSplitDocs:
    """Synopsis/rest split"""

    def test_paragraph_heading_paragraph(self):
        """Split right before the heading"""
        first, heading, last = located(Paragraph("a")), located(Heading(1, "H")), located(Paragraph("b"))
        assert split_docs((first, heading, last)) == ((first,), (heading, last))

    def test_no_heading(self):
        """Everything is synopsis"""
        docs = (located(Paragraph("a")), located(Verbatim("v")))
        assert split_docs(docs) == (docs, ())

    def test_heading_first(self):
        """Empty synopsis"""
        docs = (located(Heading(0, "Title")), located(Paragraph("a")))
        assert split_docs(docs) == ((), docs)

    def test_empty(self):
        """Empty in, empty out"""
        assert split_docs(()) == ((), ())

    @pytest.mark.parametrize("shape", ["", "p", "h", "ph", "hp", "pph", "phpph", "hhp", "pphpp"])
    def test_reconstructs_input(self, shape):
        """synopsis + rest is the input and synopsis has no heading"""
        docs = tuple(
            located(Heading(1, f"h{index}") if kind == "h" else Paragraph(f"p{index}"), line=index + 1)
            for index, kind in enumerate(shape)
        )
        synopsis, rest = split_docs(docs)
        assert synopsis + rest == docs
        assert not any(isinstance(element.value, Heading) for element in synopsis)
        assert rest == () or isinstance(rest[0].value, Heading)

    @pytest.mark.parametrize("shape", ["phpphpph", "hhh", "phph", "ppp"])
    def test_no_heading_in_any_synopsis(self, shape):
        """Splitting the rest again, minus its heading, never yields a heading in a synopsis"""
        docs = tuple(
            located(Heading(1, f"h{index}") if kind == "h" else Paragraph(f"p{index}"), line=index + 1)
            for index, kind in enumerate(shape)
        )
        while docs:
            synopsis, rest = split_docs(docs)
            assert not any(isinstance(element.value, Heading) for element in synopsis)
            docs = rest[1:]
