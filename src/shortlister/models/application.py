"""Application (applicant record) models."""

from typing import Any, Literal

from pydantic import ConfigDict, Field, field_validator

from shortlister.models.common import CamelModel, coerce_to_list

ApplicationStatus = Literal["pending", "shortlisted", "rejected", "hired"]


class EducationEntry(CamelModel):
    """Education entry as submitted on the application form."""

    degree: str = ""
    institution: str = ""
    year: str = ""
    description: str | None = None

    @field_validator("degree", "institution", "year", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        return "" if v is None else str(v)


class ExperienceEntry(CamelModel):
    """Work experience entry; ``duration`` is free text, usually ``YYYY-YYYY``."""

    title: str = ""
    company: str = ""
    duration: str = ""
    description: str | None = None

    @field_validator("title", "company", "duration", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        return "" if v is None else str(v)


class Application(CamelModel):
    """A candidate's application to one job.

    Only ``score``, ``status`` and ``notes`` are written by shortlisting. Keys
    this model does not know about are kept so records round-trip unchanged.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    job_id: str
    applicant_name: str
    email: str = ""
    phone: str | None = None
    resume: str | None = None
    cover_letter: str | None = None
    education: list[EducationEntry] = Field(default_factory=list)
    experience: list[ExperienceEntry] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)
    status: ApplicationStatus = "pending"
    # Runs with unsaved criteria can score above 100
    score: int | None = Field(default=None, ge=0)
    notes: str | None = None
    applied_at: str | None = None

    @field_validator("id", "job_id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        return str(v) if isinstance(v, int) else v

    @field_validator("skills", "certifications", mode="before")
    @classmethod
    def coerce_item_lists(cls, v: Any) -> list[str]:
        # The form leaves blank rows behind when a field is added and never filled
        return [item for item in coerce_to_list(v) if item.strip()]

    @field_validator("education", "experience", mode="before")
    @classmethod
    def coerce_model_lists(cls, v: Any) -> list[Any]:
        # Entries that are not objects carry no usable fields and score nothing
        if not isinstance(v, (list, tuple)):
            return []
        return [item for item in v if isinstance(item, (dict, EducationEntry, ExperienceEntry))]
