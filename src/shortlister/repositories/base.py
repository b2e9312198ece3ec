"""Repository abstractions the shortlisting core reads from and writes to."""

from abc import ABC, abstractmethod

from shortlister.models.application import Application, ApplicationStatus
from shortlister.models.criteria import Criteria
from shortlister.validation import validate_criteria

# Key under which criteria shared by every job are stored
DEFAULT_CRITERIA_KEY = "default"


class CriteriaRepository(ABC):
    """Stores one criteria set per job plus a global default.

    Saving is validated here so every backend rejects criteria whose weights
    do not add up to 100.
    """

    def get(self, job_id: str | None = None) -> Criteria | None:
        """Criteria for ``job_id``, falling back to the global default."""
        if job_id is not None:
            criteria = self._load(job_id)
            if criteria is not None:
                return criteria
        return self._load(DEFAULT_CRITERIA_KEY)

    def save(self, criteria: Criteria, job_id: str | None = None) -> None:
        """Persist criteria for ``job_id`` (or as the global default).

        Raises:
            CriteriaValidationError: If the weights do not sum to 100.
            RepositoryError: If the write fails.
        """
        error = validate_criteria(criteria)
        if error is not None:
            raise error
        self._store(job_id or DEFAULT_CRITERIA_KEY, criteria)

    @abstractmethod
    def _load(self, key: str) -> Criteria | None:
        """Load criteria stored under ``key``. Override in subclasses."""
        pass

    @abstractmethod
    def _store(self, key: str, criteria: Criteria) -> None:
        """Store criteria under ``key``. Override in subclasses."""
        pass


class ApplicationRepository(ABC):
    """Applicant records, owned by the portal."""

    @abstractmethod
    def list_by_job(self, job_id: str) -> list[Application]:
        """All applications submitted to ``job_id``."""
        pass

    @abstractmethod
    def update_score(self, application_id: str, score: int) -> None:
        """Overwrite the stored score."""
        pass

    @abstractmethod
    def update_status(
        self,
        application_id: str,
        status: ApplicationStatus,
        notes: str | None = None,
    ) -> None:
        """Set status; ``notes=None`` leaves existing notes unchanged."""
        pass
