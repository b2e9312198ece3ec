"""Shortlisting criteria models."""

from typing import Any, Literal

from pydantic import Field, field_validator

from shortlister.models.common import CamelModel, coerce_to_list, unique_ordered

DegreeLevel = Literal["bachelor", "master", "phd"]

# Weight every sub-criterion must share out between them before criteria can be saved
REQUIRED_WEIGHT_TOTAL = 100


class EducationCriterion(CamelModel):
    """Minimum degree requirement."""

    weight: int = Field(default=30, ge=0, le=100)
    minimum_degree: DegreeLevel = "bachelor"

    @field_validator("minimum_degree", mode="before")
    @classmethod
    def lowercase_degree(cls, v: Any) -> Any:
        return v.strip().lower() if isinstance(v, str) else v


class ExperienceCriterion(CamelModel):
    """Minimum years in a single role."""

    weight: int = Field(default=40, ge=0, le=100)
    minimum_years: int = Field(default=2, ge=0)


class SkillsCriterion(CamelModel):
    """Required skills, scored by the share matched."""

    weight: int = Field(default=20, ge=0, le=100)
    required_skills: list[str] = Field(default_factory=list)

    @field_validator("required_skills", mode="before")
    @classmethod
    def normalize_required(cls, v: Any) -> list[str]:
        return unique_ordered(coerce_to_list(v))


class CertificationsCriterion(CamelModel):
    """Required certifications, scored by the share matched."""

    weight: int = Field(default=10, ge=0, le=100)
    required_certifications: list[str] = Field(default_factory=list)

    @field_validator("required_certifications", mode="before")
    @classmethod
    def normalize_required(cls, v: Any) -> list[str]:
        return unique_ordered(coerce_to_list(v))


class Criteria(CamelModel):
    """Weighted rule set an applicant pool is scored against.

    Weights are not required to sum to 100 here so that unsaved criteria can
    still drive a shortlisting run. Use ``validate_criteria`` before saving.
    """

    education: EducationCriterion = Field(default_factory=EducationCriterion)
    experience: ExperienceCriterion = Field(default_factory=ExperienceCriterion)
    skills: SkillsCriterion = Field(default_factory=SkillsCriterion)
    certifications: CertificationsCriterion = Field(default_factory=CertificationsCriterion)

    @property
    def weight_total(self) -> int:
        """Sum of the four sub-criterion weights."""
        return (
            self.education.weight
            + self.experience.weight
            + self.skills.weight
            + self.certifications.weight
        )

    @classmethod
    def default(cls) -> "Criteria":
        """Criteria used when nothing has been configured."""
        return cls()
