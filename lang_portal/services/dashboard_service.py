"""Service layer for dashboard statistics."""

from dataclasses import dataclass
from datetime import UTC, date, datetime

import structlog

from lang_portal.repositories import StudySessionDetail, StudySessionRepository, WordRepository
from lang_portal.services.study_streak import calculate_study_streak

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class StudyProgress:
    """How much of the word catalog has been studied at least once."""

    total_words_studied: int
    total_available_words: int


@dataclass(frozen=True)
class QuickStats:
    """Headline numbers shown on the dashboard."""

    success_rate: float
    total_study_sessions: int
    total_active_groups: int
    study_streak_days: int


def calculate_success_rate(correct: int, total: int) -> float:
    """Percentage of correct reviews, 0.0 when nothing was reviewed."""
    if total == 0:
        return 0.0
    return correct * 100 / total


class DashboardService:
    """Read-only aggregation of study statistics for the dashboard."""

    def __init__(
        self,
        study_session_repository: StudySessionRepository,
        word_repository: WordRepository,
    ) -> None:
        self.study_session_repository = study_session_repository
        self.word_repository = word_repository

    def get_last_study_session(self) -> StudySessionDetail | None:
        """Get the most recently created study session, or None if there are none."""
        return self.study_session_repository.get_last_detail()

    def get_study_progress(self) -> StudyProgress:
        """Compare the number of distinct reviewed words with the catalog size."""
        return StudyProgress(
            total_words_studied=self.study_session_repository.count_distinct_words_studied(),
            total_available_words=self.word_repository.count(),
        )

    def get_quick_stats(self, today: date | None = None) -> QuickStats:
        """
        Compute success rate, session totals and the current study streak.

        Args:
            today: Day the streak is anchored to (defaults to the current UTC date)

        Returns:
            QuickStats for the whole store
        """
        correct, total = self.study_session_repository.get_review_stats()
        study_dates = self.study_session_repository.get_study_dates()
        streak = calculate_study_streak(study_dates, today or datetime.now(UTC).date())

        logger.debug(
            "computed_quick_stats",
            correct_reviews=correct,
            total_reviews=total,
            study_days=len(study_dates),
            streak=streak,
        )

        return QuickStats(
            success_rate=calculate_success_rate(correct, total),
            total_study_sessions=self.study_session_repository.count(),
            total_active_groups=self.study_session_repository.count_active_groups(),
            study_streak_days=streak,
        )
