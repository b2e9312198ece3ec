"""Weighted scoring of applicants against shortlisting criteria.

Computes deterministic, reproducible points for each sub-criterion. Malformed
applicant data never raises: the affected sub-criterion simply scores zero.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from typing import TYPE_CHECKING

from shortlister.scoring.models import ApplicantScore
from shortlister.utils.duration import parse_duration_years

if TYPE_CHECKING:
    from shortlister.models.application import Application, EducationEntry, ExperienceEntry
    from shortlister.models.criteria import Criteria, DegreeLevel

logger = logging.getLogger(__name__)

# Degree hierarchy, matched as case-insensitive substrings of the degree text
DEGREE_LEVELS: dict[str, int] = {
    "bachelor": 1,
    "master": 2,
    "phd": 3,
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, rounding halves up (2.5 -> 3)."""
    return math.floor(value + 0.5)


def degree_level(degree: str) -> int:
    """Highest level named in a degree string, 0 if none."""
    degree_lower = degree.lower()
    level = 0
    for key, key_level in DEGREE_LEVELS.items():
        if key in degree_lower:
            level = max(level, key_level)
    return level


def match_required(required: Iterable[str], held: Iterable[str]) -> list[str]:
    """Required items contained (case-insensitively) in at least one held item."""
    held_lower = [item.lower() for item in held]
    return [req for req in required if any(req.lower() in item for item in held_lower)]


class WeightedScorer:
    """Score applicants with additive, weight-bounded sub-scores.

    Education and experience are binary (full weight or nothing). Skills and
    certifications award the matched share of their weight, each rounded on
    its own before the total is summed.
    """

    def compute(self, application: Application, criteria: Criteria) -> ApplicantScore:
        """Compute all sub-scores for one applicant.

        Args:
            application: Applicant record.
            criteria: Criteria to score against (need not be saved).

        Returns:
            ApplicantScore with per-criterion points and qualification signals.
        """
        edu_ok = self._education_qualifies(
            application.education, criteria.education.minimum_degree
        )
        exp_ok = self._experience_qualifies(
            application.experience, criteria.experience.minimum_years
        )

        matched_skills = match_required(criteria.skills.required_skills, application.skills)
        matched_certs = match_required(
            criteria.certifications.required_certifications, application.certifications
        )

        education = criteria.education.weight if edu_ok else 0
        experience = criteria.experience.weight if exp_ok else 0
        skills = self._partial_award(
            criteria.skills.weight, len(matched_skills), len(criteria.skills.required_skills)
        )
        certifications = self._partial_award(
            criteria.certifications.weight,
            len(matched_certs),
            len(criteria.certifications.required_certifications),
        )

        total = education + experience + skills + certifications
        logger.debug(
            "Scored application %s: edu=%d exp=%d skills=%d certs=%d total=%d",
            application.id,
            education,
            experience,
            skills,
            certifications,
            total,
        )

        return ApplicantScore(
            education=education,
            experience=experience,
            skills=skills,
            certifications=certifications,
            total=total,
            education_qualifies=edu_ok,
            experience_qualifies=exp_ok,
            matched_skills=matched_skills,
            matched_certifications=matched_certs,
        )

    @staticmethod
    def _education_qualifies(entries: list[EducationEntry], minimum: DegreeLevel) -> bool:
        """Any entry at or above the minimum degree level."""
        required_level = DEGREE_LEVELS[minimum]
        return any(degree_level(entry.degree) >= required_level for entry in entries)

    @staticmethod
    def _experience_qualifies(entries: list[ExperienceEntry], minimum_years: int) -> bool:
        """Any single entry spanning at least ``minimum_years``."""
        for entry in entries:
            years = parse_duration_years(entry.duration)
            if years is not None and years >= minimum_years:
                return True
        return False

    @staticmethod
    def _partial_award(weight: int, matched: int, required: int) -> int:
        """Share of ``weight`` for matched items; nothing required means full weight."""
        if required == 0:
            return weight
        return round_half_up(weight * (matched / required))


_default_scorer = WeightedScorer()


def score_applicant(application: Application, criteria: Criteria) -> ApplicantScore:
    """Score one applicant with the default scorer."""
    return _default_scorer.compute(application, criteria)
