"""Tests for result synthesis."""

from workflow_engine.synthesis import (
    CHANGE_EXPLANATION,
    MAX_RECOMMENDATIONS,
    calculate_confidence,
    extract_changes,
    extract_recommendations,
    synthesize,
)
from workflow_engine.types import StepStatus


class TestConfidence:
    """Tests for calculate_confidence."""

    def test_all_completed(self, make_step):
        steps = [make_step("a"), make_step("b")]
        assert calculate_confidence(steps) == 100.0

    def test_partial(self, make_step):
        steps = [make_step("a"), make_step("b"), make_step("x", StepStatus.FAILED), make_step("c")]
        assert calculate_confidence(steps) == 75.0

    def test_no_steps(self):
        assert calculate_confidence([]) == 0.0


class TestRecommendations:
    """Tests for extract_recommendations."""

    def test_matches_keywords(self, make_step):
        steps = [make_step("I recommend adding tests. Also the code is fine. You should rename x!")]
        assert extract_recommendations(steps) == [
            "recommend adding tests.",
            "should rename x!",
        ]

    def test_case_insensitive(self, make_step):
        steps = [make_step("Consider caching the result.")]
        assert extract_recommendations(steps) == ["Consider caching the result."]

    def test_deduplicates_in_first_seen_order(self, make_step):
        steps = [
            make_step("You should validate input."),
            make_step("Also suggest logging. You should validate input."),
        ]
        assert extract_recommendations(steps) == [
            "should validate input.",
            "suggest logging.",
        ]

    def test_capped(self, make_step):
        text = " ".join(f"You should do thing {i}." for i in range(25))
        recs = extract_recommendations([make_step(text)])
        assert len(recs) == MAX_RECOMMENDATIONS
        assert recs[0] == "should do thing 0."

    def test_ignores_failed_steps(self, make_step):
        steps = [make_step("you should not see this.", StepStatus.FAILED)]
        assert extract_recommendations(steps) == []

    def test_requires_terminator(self, make_step):
        assert extract_recommendations([make_step("you should keep going")]) == []


class TestChanges:
    """Tests for extract_changes."""

    def test_single_change(self):
        changes = extract_changes("new code", "old code")
        assert len(changes) == 1
        assert changes[0].file_path == "modified_code"
        assert changes[0].original_code == "old code"
        assert changes[0].modified_code == "new code"
        assert changes[0].explanation == CHANGE_EXPLANATION

    def test_empty_original(self):
        assert extract_changes("new code", "") == []

    def test_empty_output(self):
        assert extract_changes("", "old code") == []


def test_synthesize(make_step):
    steps = [make_step("We recommend a guard clause."), make_step("final")]
    result = synthesize("final", steps, "original")
    assert result.final_output == "final"
    assert result.confidence == 100.0
    assert result.recommendations == ["recommend a guard clause."]
    assert result.changes[0].modified_code == "final"
