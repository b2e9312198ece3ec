"""Result models for a shortlisting run."""

from typing import Literal

from pydantic import BaseModel, Field

from shortlister.models.application import ApplicationStatus
from shortlister.scoring.models import ApplicantScore

ErrorStage = Literal["score", "update_score", "update_status"]


class StatusChange(BaseModel):
    """A status transition planned for one applicant."""

    from_status: ApplicationStatus
    to_status: ApplicationStatus
    reason: str


class ApplicantUpdate(BaseModel):
    """Score (and optional status change) to write back for one applicant."""

    id: str
    applicant_name: str = ""
    score: int
    breakdown: ApplicantScore
    status_change: StatusChange | None = None


class ApplicantError(BaseModel):
    """An applicant that could not be scored or written back."""

    id: str
    stage: ErrorStage
    message: str


class ShortlistingResult(BaseModel):
    """Outcome of running shortlisting across a job's applicant pool."""

    job_id: str
    threshold: int
    updates: list[ApplicantUpdate] = Field(default_factory=list)
    errors: list[ApplicantError] = Field(default_factory=list)

    @property
    def ranked(self) -> list[ApplicantUpdate]:
        """Updates by score, highest first; ties keep pool order."""
        return sorted(self.updates, key=lambda update: update.score, reverse=True)

    @property
    def shortlisted_ids(self) -> list[str]:
        """Applicants moved to ``shortlisted`` by this run."""
        return [
            update.id
            for update in self.updates
            if update.status_change and update.status_change.to_status == "shortlisted"
        ]

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)
