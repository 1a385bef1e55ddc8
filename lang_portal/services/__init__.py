"""Service layer for business logic."""

from lang_portal.services.dashboard_service import DashboardService, QuickStats, StudyProgress
from lang_portal.services.group_service import GroupDetail, GroupService
from lang_portal.services.study_activity_service import StudyActivityService
from lang_portal.services.study_session_service import StudySessionService
from lang_portal.services.study_streak import calculate_study_streak
from lang_portal.services.word_service import WordDetail, WordService

__all__ = [
    "DashboardService",
    "GroupDetail",
    "GroupService",
    "QuickStats",
    "StudyActivityService",
    "StudyProgress",
    "StudySessionService",
    "WordDetail",
    "WordService",
    "calculate_study_streak",
]
