"""API routers."""

from lang_portal.routers import dashboard, groups, study_activities, study_sessions, words

__all__ = ["dashboard", "groups", "study_activities", "study_sessions", "words"]
