"""
End-to-end tests for both pipelines.

Letter pipeline: source files -> normalization -> highlight set -> composed letter.
Marker pipeline: layout coordinates -> session drop -> raw/clean export -> reopen.
"""

import pytest

from lettersmith.contexts.editing import Document, EditingSession, FieldBoard
from lettersmith.contexts.intake import normalize_source_text, read_source_file
from lettersmith.contexts.rendering import CLEAN, RAW, MonospaceLayout, write_export
from lettersmith.contexts.templating import LetterComposer
from lettersmith.utils.config import load_config

RESUME = "Jane Doe\nLed development of a billing platform."
JOB = "Senior Backend Engineer\nWe need experience with billing platforms and Python."


@pytest.mark.integration
class TestLetterPipeline:
    def test_billing_platform_scenario(self):
        letter = LetterComposer().compose(RESUME, JOB)

        assert "billing" in letter.highlights.terms
        assert letter.highlights.from_intersection
        assert "Senior Backend Engineer" in letter.opening
        assert letter.text.endswith("Sincerely,\nJane Doe")
        assert "Jane Doe" in letter.closing
        assert letter.closing.endswith("Sincerely,\nJane Doe")

    def test_empty_job_posting(self):
        letter = LetterComposer().compose(RESUME, "")

        assert "the role" in letter.opening
        assert letter.signature == "Jane Doe"
        assert all(letter.paragraphs)

    def test_from_source_files(self, tmp_path):
        resume_path = tmp_path / "resume.txt"
        job_path = tmp_path / "job.md"
        resume_path.write_bytes(RESUME.replace("\n", "\r\n").encode("utf-8"))
        job_path.write_text(JOB, encoding="utf-8")

        resume = read_source_file(resume_path)
        job = read_source_file(job_path)
        assert resume.ok and job.ok

        composer = LetterComposer.from_config(load_config())
        letter = composer.compose(
            normalize_source_text(resume.text), normalize_source_text(job.text)
        )
        assert letter.text == LetterComposer().compose(RESUME, JOB).text


@pytest.mark.integration
class TestMarkerPipeline:
    def test_place_export_reopen(self, tmp_path):
        cfg = load_config()
        geometry = MonospaceLayout.factory_from_config(cfg.layout)
        board = FieldBoard.from_config(cfg.fields).with_value(0, "Acme").with_value(1, "Jane Doe")
        session = EditingSession(Document.load("Dear Hiring Manager,\nI want to join ."), geometry)

        layout = geometry(session.document)
        point = layout.point_for(layout.offset_at(2, 16))
        assert session.hover(point).offset == 36

        session.drop(point, board.value(0))
        session.drop(None, board.value(1))

        raw_path = write_export(session.document, RAW, tmp_path)
        clean_path = write_export(session.document, CLEAN, tmp_path)

        raw = raw_path.read_text(encoding="utf-8")
        assert raw == "Dear Hiring Manager,\nI want to join }}Acme{{.}}Jane Doe{{"
        assert clean_path.read_text(encoding="utf-8") == (
            "Dear Hiring Manager,\nI want to join Acme.Jane Doe"
        )

        reopened = Document.load(raw, parse_markers=True)
        assert [placed.value for placed in reopened.markers()] == ["Acme", "Jane Doe"]
        assert reopened == session.document

    def test_composed_letter_into_editor(self, tmp_path):
        letter = LetterComposer().compose(RESUME, JOB)
        session = EditingSession(Document.load(letter.text), MonospaceLayout.factory())

        session.drop(None, "Acme Corp")
        clean_path = write_export(session.document, CLEAN, tmp_path)

        assert clean_path.read_text(encoding="utf-8") == letter.text + "Acme Corp"
