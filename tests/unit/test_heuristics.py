"""Unit tests for letter structural heuristics."""

import pytest

from lettersmith.contexts.templating.heuristics import (
    LetterHeuristics,
    LetterPatterns,
    PatternHeuristics,
    achievement_pattern,
)


@pytest.fixture
def heuristics():
    return PatternHeuristics()


@pytest.mark.unit
class TestJobTitle:
    def test_first_non_empty_line(self, heuristics):
        assert heuristics.job_title("\n\n  Senior Backend Engineer  \nAcme") == "Senior Backend Engineer"

    def test_markdown_wrappers_removed(self, heuristics):
        assert heuristics.job_title("## Data Scientist") == "Data Scientist"
        assert heuristics.job_title("**Staff Engineer**") == "Staff Engineer"

    def test_markup_only_line_skipped(self, heuristics):
        assert heuristics.job_title("##\nPlatform Lead") == "Platform Lead"

    def test_hash_without_space_is_part_of_title(self, heuristics):
        assert heuristics.job_title("#1 Sales Associate") == "#1 Sales Associate"
        assert heuristics.job_title("# #1 Sales Associate") == "#1 Sales Associate"

    def test_empty(self, heuristics):
        assert heuristics.job_title("") is None
        assert heuristics.job_title("   \n  ") is None


@pytest.mark.unit
class TestCandidateName:
    @pytest.mark.parametrize(
        "line",
        ["Jane Doe", "Name: Jane Doe", "name - Jane Doe", "NAME:Jane Doe", "  Jane Doe  "],
    )
    def test_name_lines(self, heuristics, line):
        assert heuristics.candidate_name(f"Resume\n{line}\nExperience") == "Jane Doe"

    @pytest.mark.parametrize(
        "line",
        ["jane doe", "Jane Q Doe", "Jane Doe, PhD", "JANE DOE", "Name: Jane"],
    )
    def test_non_name_lines(self, heuristics, line):
        assert heuristics.candidate_name(line) is None

    def test_first_match_wins(self, heuristics):
        assert heuristics.candidate_name("Jane Doe\nJohn Smith") == "Jane Doe"

    def test_pattern_constant(self):
        assert LetterPatterns.CANDIDATE_NAME.fullmatch("Name: Ada Lovelace").group(1) == "Ada Lovelace"


@pytest.mark.unit
class TestAchievementLine:
    def test_first_line_with_verb(self, heuristics):
        resume = "Jane Doe\nSummary of skills\nLed migration to Kubernetes\nBuilt dashboards"
        assert heuristics.achievement_line(resume) == "Led migration to Kubernetes"

    def test_whole_word_only(self, heuristics):
        """'projection' and 'misled' do not count."""
        resume = "Worked on projection models\nMisled nobody\nImproved latency by 40%"
        assert heuristics.achievement_line(resume) == "Improved latency by 40%"

    def test_case_insensitive(self, heuristics):
        assert heuristics.achievement_line("CREATED a compiler") == "CREATED a compiler"

    def test_none_when_absent(self, heuristics):
        assert heuristics.achievement_line("Jane Doe\nSkills: Go") is None

    def test_custom_verbs(self):
        heuristics = PatternHeuristics(achievement_verbs=["shipped"])
        assert heuristics.achievement_line("Led a team\nShipped v2") == "Shipped v2"

    def test_verbs_escaped(self):
        pattern = achievement_pattern(["co-led", "re.built"])
        assert pattern.search("Co-led the launch")
        assert not pattern.search("rebuilt the app")


@pytest.mark.unit
def test_strategy_interface_is_swappable():
    class FixedHeuristics(LetterHeuristics):
        def job_title(self, job_text):
            return "Fixed Title"

        def candidate_name(self, resume_text):
            return None

        def achievement_line(self, resume_text):
            return None

    heuristics = FixedHeuristics()
    assert heuristics.job_title("anything") == "Fixed Title"
    with pytest.raises(TypeError):
        LetterHeuristics()
