"""Unit tests for the segment-based Document model."""

import random

import pytest

from lettersmith.contexts.editing.document import (
    CaretTarget,
    Document,
    Marker,
    PlacedMarker,
    SentinelPair,
    TextRun,
)
from lettersmith.contexts.editing.exceptions import DocumentInvariantError


def assert_normalized(document: Document):
    for left, right in zip(document.segments, document.segments[1:]):
        assert not (isinstance(left, TextRun) and isinstance(right, TextRun))
    assert all(segment.text for segment in document.segments if isinstance(segment, TextRun))


@pytest.fixture
def doc_with_marker():
    """'Hello }}Acme{{ team' with the marker at offsets 6-14."""
    return Document.load("Hello ").insert(6, Marker("Acme")).insert(14, " team")


@pytest.mark.unit
class TestSentinelPair:
    def test_defaults(self):
        pair = SentinelPair()
        assert (pair.open, pair.close) == ("}}", "{{")
        assert pair.wrap("x") == "}}x{{"

    @pytest.mark.parametrize(
        "open_, close",
        [("", "{{"), ("}}", ""), ("<<\n", ">>"), ("##", "##"), (None, "{{")],
    )
    def test_invalid_pairs_rejected(self, open_, close):
        with pytest.raises(ValueError):
            SentinelPair(open_, close)


@pytest.mark.unit
class TestInvariants:
    def test_adjacent_text_runs_rejected(self):
        with pytest.raises(DocumentInvariantError) as exc_info:
            Document((TextRun("a"), TextRun("b")))
        assert exc_info.value.segment_index == 1
        assert isinstance(exc_info.value, AssertionError)

    def test_empty_text_run_rejected(self):
        with pytest.raises(DocumentInvariantError):
            Document((TextRun(""),))

    def test_unknown_segment_rejected(self):
        with pytest.raises(DocumentInvariantError):
            Document(("plain string",))

    def test_marker_between_text_allowed(self):
        document = Document([TextRun("a"), Marker("x"), TextRun("b")])
        assert isinstance(document.segments, tuple)
        assert document.marked_text() == "a}}x{{b"

    def test_random_edit_sequences_stay_normalized(self):
        rng = random.Random(7)
        document = Document.load("The quick brown fox jumps over the lazy dog.")
        for _ in range(300):
            op = rng.choice(["text", "marker", "delete"])
            a, b = rng.randint(-3, len(document) + 3), rng.randint(-3, len(document) + 3)
            if op == "text":
                document = document.insert(a, rng.choice(["x", "yz", "\n", " "]))
            elif op == "marker":
                document = document.insert(a, Marker(rng.choice(["Acme", "", "Jane Doe"])))
            else:
                document = document.delete_range(a, b)
            assert_normalized(document)
            assert len(document) == len(document.marked_text())


@pytest.mark.unit
class TestLoad:
    def test_plain_load(self):
        document = Document.load("Dear team,\r\nThanks.\rBye")
        assert document.marked_text() == "Dear team,\nThanks.\nBye"
        assert document.segments == (TextRun("Dear team,\nThanks.\nBye"),)

    def test_empty_load(self):
        document = Document.load("")
        assert document.segments == ()
        assert document.is_empty()
        assert len(document) == 0
        assert Document.load(None).is_empty()

    def test_parse_markers(self):
        document = Document.load("Hi }}Acme{{, from }}Jane Doe{{.", parse_markers=True)
        assert [p.value for p in document.markers()] == ["Acme", "Jane Doe"]
        assert document.plain_text() == "Hi Acme, from Jane Doe."

    def test_parse_markers_ignores_spans_across_lines(self):
        document = Document.load("a }}b\nc{{ d", parse_markers=True)
        assert document.markers() == []

    def test_parse_markers_custom_sentinels(self):
        pair = SentinelPair("<<", ">>")
        document = Document.load("x <<y>> z", sentinels=pair, parse_markers=True)
        assert document.markers()[0].marker == Marker("y", pair)
        assert document.sentinels == pair

    def test_collision_warning_logged(self, caplog_loguru):
        Document.load("Use {{ name }} in templates")
        assert any("sentinel occurrence" in message for message in caplog_loguru)

    def test_sentinel_collisions(self):
        document = Document.load("a }} b {{ c")
        assert document.sentinel_collisions() == [2, 7]


@pytest.mark.unit
class TestQueries:
    def test_text_views(self, doc_with_marker):
        assert doc_with_marker.marked_text() == "Hello }}Acme{{ team"
        assert doc_with_marker.plain_text() == "Hello Acme team"
        assert len(doc_with_marker) == 19

    def test_read_range_clamps_and_orders(self, doc_with_marker):
        assert doc_with_marker.read_range(6, 14) == "}}Acme{{"
        assert doc_with_marker.read_range(14, 6) == "}}Acme{{"
        assert doc_with_marker.read_range(-10, 5) == "Hello"
        assert doc_with_marker.read_range(15, 999) == "team"

    def test_caret_at(self, doc_with_marker):
        assert doc_with_marker.caret_at(0) == CaretTarget(0, 0, 0)
        assert doc_with_marker.caret_at(6) == CaretTarget(6, 1, 0)
        assert doc_with_marker.caret_at(9) == CaretTarget(9, 1, 3)
        assert doc_with_marker.caret_at(14) == CaretTarget(14, 2, 0)
        assert doc_with_marker.caret_at(19) == CaretTarget(19, 3, 0)
        assert doc_with_marker.caret_at(500) == CaretTarget(19, 3, 0)
        assert doc_with_marker.caret_at(-4) == CaretTarget(0, 0, 0)

    def test_markers(self, doc_with_marker):
        placed = doc_with_marker.markers()
        assert placed == [PlacedMarker(6, Marker("Acme"))]
        assert placed[0].end == 14

    def test_marker_containing(self, doc_with_marker):
        assert doc_with_marker.marker_containing(6) is None
        assert doc_with_marker.marker_containing(14) is None
        assert doc_with_marker.marker_containing(7).value == "Acme"


@pytest.mark.unit
class TestInsert:
    def test_returns_new_document(self):
        original = Document.load("abc")
        updated = original.insert(1, "X")
        assert original.marked_text() == "abc"
        assert updated.marked_text() == "aXbc"

    def test_text_merges_into_run(self):
        assert Document.load("abc").insert(3, "def").segments == (TextRun("abcdef"),)

    def test_clamped_offsets(self):
        assert Document.load("abc").insert(99, "!").marked_text() == "abc!"
        assert Document.load("abc").insert(-5, "!").marked_text() == "!abc"

    def test_empty_text_is_noop(self):
        document = Document.load("abc")
        assert document.insert(1, "") is document

    def test_line_breaks_normalized(self):
        assert Document.load("ab").insert(1, "\r\n").marked_text() == "a\nb"

    def test_marker_splits_run(self):
        document = Document.load("Hello world").insert(6, Marker("Acme"))
        assert document.segments == (TextRun("Hello "), Marker("Acme"), TextRun("world"))

    def test_marker_into_empty_document(self):
        assert Document().insert(0, Marker("X")).segments == (Marker("X"),)

    def test_adjacent_markers_kept_separate(self, doc_with_marker):
        document = doc_with_marker.insert(14, Marker("Corp"))
        assert [p.value for p in document.markers()] == ["Acme", "Corp"]
        assert document.marked_text() == "Hello }}Acme{{}}Corp{{ team"

    def test_insert_at_marker_boundary_keeps_marker(self, doc_with_marker):
        document = doc_with_marker.insert(6, "dear ").insert(19, "!")
        assert document.marked_text() == "Hello dear }}Acme{{! team"
        assert [p.value for p in document.markers()] == ["Acme"]

    def test_insert_inside_marker_dissolves_it(self, doc_with_marker):
        document = doc_with_marker.insert(10, "X")
        assert document.markers() == []
        assert document.segments == (TextRun("Hello }}AcXme{{ team"),)

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            Document.load("abc").insert(0, 42)


@pytest.mark.unit
class TestDeleteRange:
    def test_delete_text(self):
        assert Document.load("abcdef").delete_range(1, 3).marked_text() == "adef"

    def test_reversed_and_clamped(self):
        assert Document.load("abcdef").delete_range(4, 1).marked_text() == "aef"
        assert Document.load("abcdef").delete_range(-10, 2).marked_text() == "cdef"
        assert Document.load("abcdef").delete_range(4, 100).marked_text() == "abcd"

    def test_empty_range_is_noop(self):
        document = Document.load("abc")
        assert document.delete_range(2, 2) is document

    def test_whole_marker_removed_and_runs_merge(self, doc_with_marker):
        document = doc_with_marker.delete_range(6, 14)
        assert document.segments == (TextRun("Hello  team"),)

    def test_partial_overlap_dissolves_marker(self, doc_with_marker):
        document = doc_with_marker.delete_range(3, 8)
        assert document.markers() == []
        assert document.marked_text() == "HelAcme{{ team"
        assert_normalized(document)

    def test_range_inside_marker_dissolves(self, doc_with_marker):
        document = doc_with_marker.delete_range(8, 10)
        assert document.marked_text() == "Hello }}me{{ team"
        assert document.markers() == []

    def test_delete_everything(self, doc_with_marker):
        document = doc_with_marker.delete_range(0, len(doc_with_marker))
        assert document.is_empty()

    def test_delete_spanning_two_markers_keeps_neither_boundary_fragment(self):
        document = Document([TextRun("a"), Marker("X"), TextRun("b"), Marker("Y"), TextRun("c")])
        result = document.delete_range(1, 12)
        assert result.marked_text() == "ac"
        assert result.segments == (TextRun("ac"),)
