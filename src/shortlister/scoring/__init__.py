"""Weighted multi-criteria scoring of applicants.

Scores are additive: each of education, experience, skills and certifications
awards up to its configured weight, and the total is their sum.
"""

from shortlister.scoring.engine import WeightedScorer, score_applicant
from shortlister.scoring.models import ApplicantScore, ScoreBreakdown

__all__ = [
    "ApplicantScore",
    "ScoreBreakdown",
    "WeightedScorer",
    "score_applicant",
]
