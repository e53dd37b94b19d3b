"""Result synthesis.

Turns the step history of a finished workflow into a confidence score, a
list of recommendations and a before/after change record.
"""

import re

from .types import FileChange, StepStatus, WorkflowResult, WorkflowStep

RECOMMENDATION_PATTERN = re.compile(
    r"(?:recommend|suggest|should|consider)([^.!?]*[.!?])",
    re.IGNORECASE,
)
MAX_RECOMMENDATIONS = 10

CHANGE_FILE_PATH = "modified_code"
CHANGE_EXPLANATION = "AI-generated improvements based on workflow analysis"


def calculate_confidence(steps: list[WorkflowStep]) -> float:
    """Percentage of recorded steps that completed; 0 with no steps."""
    if not steps:
        return 0.0
    completed = sum(1 for s in steps if s.status == StepStatus.COMPLETED)
    return completed / len(steps) * 100


def extract_recommendations(
    steps: list[WorkflowStep],
    limit: int = MAX_RECOMMENDATIONS,
) -> list[str]:
    """Collect recommendation-like sentences from completed steps.

    Matches are de-duplicated by exact text, keep first-seen order and are
    capped at ``limit``.
    """
    recommendations: list[str] = []
    seen: set[str] = set()

    for step in steps:
        if step.status != StepStatus.COMPLETED or not step.output:
            continue
        for match in RECOMMENDATION_PATTERN.finditer(step.output):
            text = match.group(0).strip()
            if text in seen:
                continue
            seen.add(text)
            recommendations.append(text)
            if len(recommendations) >= limit:
                return recommendations

    return recommendations


def extract_changes(final_output: str, original_code: str) -> list[FileChange]:
    """Single synthetic change record, or none if either side is empty."""
    if not original_code or not final_output:
        return []
    return [
        FileChange(
            file_path=CHANGE_FILE_PATH,
            original_code=original_code,
            modified_code=final_output,
            explanation=CHANGE_EXPLANATION,
        )
    ]


def synthesize(
    final_output: str,
    steps: list[WorkflowStep],
    original_code: str,
) -> WorkflowResult:
    """Build the result of a completed session.

    Args:
        final_output: Last adopted output of the workflow.
        steps: The session's step history.
        original_code: Code the caller started from.

    Returns:
        WorkflowResult with confidence, recommendations and changes.
    """
    return WorkflowResult(
        final_output=final_output,
        confidence=calculate_confidence(steps),
        recommendations=extract_recommendations(steps),
        changes=extract_changes(final_output, original_code),
    )
