"""Pydantic models for weighted applicant scoring."""

from typing import TypedDict

from pydantic import BaseModel, Field


class ScoreBreakdown(TypedDict):
    """Points awarded per sub-criterion, keyed in report column order."""

    education: int
    experience: int
    skills: int
    certifications: int


class ApplicantScore(BaseModel):
    """Score for one applicant under one criteria set."""

    # Points awarded per sub-criterion
    education: int = Field(ge=0, le=100)
    experience: int = Field(ge=0, le=100)
    skills: int = Field(ge=0, le=100)
    certifications: int = Field(ge=0, le=100)

    # Sum of the four awards
    total: int = Field(ge=0)

    # Qualification signals
    education_qualifies: bool = False
    experience_qualifies: bool = False
    matched_skills: list[str] = Field(default_factory=list)
    matched_certifications: list[str] = Field(default_factory=list)

    def to_breakdown(self) -> ScoreBreakdown:
        """Convert to TypedDict for reporting and persistence."""
        return ScoreBreakdown(
            education=self.education,
            experience=self.experience,
            skills=self.skills,
            certifications=self.certifications,
        )
