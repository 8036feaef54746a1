"""Read-time ranking functions.

Scores are derived from stored facts whenever they are needed and are
never written back, so they cannot go stale.
"""

from datetime import datetime
from typing import Sequence

from devforum.domain.model import Answer

SECONDS_PER_DAY = 86400


def age_in_days(created_at: datetime, now: datetime) -> float:
    """Fractional days elapsed since created_at (0 for future timestamps)."""
    return max(0.0, (now - created_at).total_seconds() / SECONDS_PER_DAY)


def question_score(
    vote_count: int, created_at: datetime, now: datetime, decay_per_day: float
) -> float:
    """Time-decayed score of a question.

    Args:
        vote_count: Sum of the question's vote values
        created_at: When the question was posted
        now: Reference time
        decay_per_day: Points lost per day of age

    Returns:
        vote_count minus age in days times decay_per_day
    """
    return vote_count - age_in_days(created_at, now) * decay_per_day


def answer_sort_key(answer: Answer) -> tuple[bool, int, datetime]:
    """Key ordering answers accepted first, then by votes, then oldest first."""
    return (not answer.is_accepted, -answer.vote_count, answer.created_at)


def sort_answers(answers: Sequence[Answer]) -> list[Answer]:
    """Return answers in display order."""
    return sorted(answers, key=answer_sort_key)
