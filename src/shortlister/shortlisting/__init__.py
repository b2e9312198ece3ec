"""Shortlisting runs over a job's applicant pool."""

from shortlister.shortlisting.controller import ShortlistingController, plan_shortlisting
from shortlister.shortlisting.models import (
    ApplicantError,
    ApplicantUpdate,
    ShortlistingResult,
    StatusChange,
)
from shortlister.shortlisting.rules import (
    AUTO_SHORTLIST_THRESHOLD,
    auto_shortlist_note,
    should_auto_shortlist,
)

__all__ = [
    "AUTO_SHORTLIST_THRESHOLD",
    "ApplicantError",
    "ApplicantUpdate",
    "ShortlistingController",
    "ShortlistingResult",
    "StatusChange",
    "auto_shortlist_note",
    "plan_shortlisting",
    "should_auto_shortlist",
]
