"""Data models for Shortlister."""

from shortlister.models.application import (
    Application,
    ApplicationStatus,
    EducationEntry,
    ExperienceEntry,
)
from shortlister.models.criteria import (
    REQUIRED_WEIGHT_TOTAL,
    CertificationsCriterion,
    Criteria,
    DegreeLevel,
    EducationCriterion,
    ExperienceCriterion,
    SkillsCriterion,
)

__all__ = [
    "Application",
    "ApplicationStatus",
    "CertificationsCriterion",
    "Criteria",
    "DegreeLevel",
    "EducationCriterion",
    "EducationEntry",
    "ExperienceCriterion",
    "ExperienceEntry",
    "REQUIRED_WEIGHT_TOTAL",
    "SkillsCriterion",
]
