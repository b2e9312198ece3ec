"""Shortlisting across a job's applicant pool.

Planning is pure: it scores every applicant and decides status changes.
Applying writes the plan back through the application repository, one record
at a time, without rolling back earlier writes when a later one fails.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from typing import TYPE_CHECKING

from shortlister.exceptions import RepositoryError
from shortlister.models.criteria import Criteria
from shortlister.scoring.engine import WeightedScorer
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

if TYPE_CHECKING:
    from shortlister.models.application import Application
    from shortlister.repositories.base import ApplicationRepository, CriteriaRepository

logger = logging.getLogger(__name__)


def plan_shortlisting(
    job_id: str,
    criteria: Criteria,
    applicants: Iterable[Application],
    threshold: int = AUTO_SHORTLIST_THRESHOLD,
    scorer: WeightedScorer | None = None,
) -> ShortlistingResult:
    """Score a job's applicants and decide which are auto-shortlisted.

    Applicants for other jobs are ignored. Every remaining applicant gets a
    score update, whatever their status. An applicant that fails to score is
    recorded as an error and the rest are still processed.

    Args:
        job_id: Job whose pool is being shortlisted.
        criteria: Criteria to score against (saved or not).
        applicants: Candidate pool; may include other jobs' applicants.
        threshold: Auto-shortlist threshold.
        scorer: Scorer to use, defaults to WeightedScorer.

    Returns:
        ShortlistingResult with one update per scored applicant.
    """
    scorer = scorer or WeightedScorer()
    result = ShortlistingResult(job_id=job_id, threshold=threshold)

    for applicant in applicants:
        if applicant.job_id != job_id:
            continue

        try:
            score = scorer.compute(applicant, criteria)
        except Exception as e:
            logger.exception("Failed to score application %s", applicant.id)
            result.errors.append(ApplicantError(id=applicant.id, stage="score", message=str(e)))
            continue

        status_change = None
        if should_auto_shortlist(applicant.status, score.total, threshold):
            status_change = StatusChange(
                from_status=applicant.status,
                to_status="shortlisted",
                reason=auto_shortlist_note(score.total),
            )

        result.updates.append(
            ApplicantUpdate(
                id=applicant.id,
                applicant_name=applicant.applicant_name,
                score=score.total,
                breakdown=score,
                status_change=status_change,
            )
        )

    return result


class ShortlistingController:
    """Run shortlisting for a job and persist the outcome.

    Runs for the same job are serialized so that concurrent callers sharing
    one controller cannot interleave their read-modify-write of the pool.
    """

    def __init__(
        self,
        applications: ApplicationRepository,
        criteria_store: CriteriaRepository | None = None,
        threshold: int = AUTO_SHORTLIST_THRESHOLD,
        scorer: WeightedScorer | None = None,
    ) -> None:
        self.applications = applications
        self.criteria_store = criteria_store
        self.threshold = threshold
        self.scorer = scorer or WeightedScorer()
        self._job_locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def resolve_criteria(self, job_id: str) -> Criteria:
        """Stored criteria for the job, the global default, or the built-in default."""
        if self.criteria_store is not None:
            criteria = self.criteria_store.get(job_id)
            if criteria is not None:
                return criteria
        return Criteria.default()

    def run(self, job_id: str, criteria: Criteria | None = None) -> ShortlistingResult:
        """Score the job's pool and write scores and status changes back.

        Args:
            job_id: Job to shortlist.
            criteria: In-memory criteria to use; loaded from the store if omitted.

        Returns:
            ShortlistingResult including any per-applicant errors.
        """
        if criteria is None:
            criteria = self.resolve_criteria(job_id)

        with self._lock_for(job_id):
            applicants = self.applications.list_by_job(job_id)
            logger.info("Shortlisting %d applicants for job %s", len(applicants), job_id)

            result = plan_shortlisting(
                job_id, criteria, applicants, threshold=self.threshold, scorer=self.scorer
            )
            self._apply(result)

        logger.info(
            "Shortlisting for job %s complete: %d scored, %d shortlisted, %d errors",
            job_id,
            len(result.updates),
            len(result.shortlisted_ids),
            len(result.errors),
        )
        return result

    def _apply(self, result: ShortlistingResult) -> None:
        """Write each update back; failures are recorded and the run continues."""
        for update in result.updates:
            try:
                self.applications.update_score(update.id, update.score)
            except RepositoryError as e:
                logger.error("Failed to save score for application %s: %s", update.id, e)
                result.errors.append(
                    ApplicantError(id=update.id, stage="update_score", message=str(e))
                )

            change = update.status_change
            if change is None:
                continue
            try:
                self.applications.update_status(update.id, change.to_status, notes=change.reason)
            except RepositoryError as e:
                logger.error("Failed to save status for application %s: %s", update.id, e)
                result.errors.append(
                    ApplicantError(id=update.id, stage="update_status", message=str(e))
                )

    def _lock_for(self, job_id: str) -> threading.Lock:
        with self._locks_guard:
            return self._job_locks.setdefault(job_id, threading.Lock())
