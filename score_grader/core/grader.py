"""Core logic for turning a numeric score into a letter grade."""

import re
from enum import Enum
from typing import Final, Tuple

from score_grader.utils.error_handler import InvalidScoreError

class GradeLabel(Enum):
    """Letter grade, highest first."""
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"

    def __str__(self) -> str:
        return self.value

# (lower bound, label) pairs, checked top-down; first match wins
GRADE_THRESHOLDS: Final[Tuple[Tuple[int, GradeLabel], ...]] = (
    (90, GradeLabel.A),
    (80, GradeLabel.B),
    (70, GradeLabel.C),
    (60, GradeLabel.D),
)
LOWEST_GRADE: Final[GradeLabel] = GradeLabel.E

_SCORE_PATTERN = re.compile(r"\s*([+-]?[0-9]+)\s*")

def grade_of(score: int) -> GradeLabel:
    """Maps an integer score to its letter grade.

    Defined for every integer: scores below the lowest threshold, including
    negative ones, get the lowest grade.

    Args:
        score: The numeric score.

    Returns:
        GradeLabel: The grade for the score.
    """
    for lower_bound, label in GRADE_THRESHOLDS:
        if score >= lower_bound:
            return label
    return LOWEST_GRADE

def parse_score(raw: str) -> int:
    """Parses the text typed at the prompt into an integer score.

    Accepts an optional sign and decimal digits, with surrounding whitespace.

    Raises:
        InvalidScoreError: If the text is not an integer.
    """
    match = _SCORE_PATTERN.fullmatch(raw)
    if not match:
        raise InvalidScoreError(raw)
    return int(match.group(1))
