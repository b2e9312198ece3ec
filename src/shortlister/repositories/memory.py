"""In-memory repositories."""

from collections.abc import Iterable

from shortlister.exceptions import RepositoryError
from shortlister.models.application import Application, ApplicationStatus
from shortlister.models.criteria import Criteria
from shortlister.repositories.base import ApplicationRepository, CriteriaRepository


class InMemoryCriteriaRepository(CriteriaRepository):
    """Criteria held in a dict keyed by job id."""

    def __init__(self, criteria: dict[str, Criteria] | None = None) -> None:
        self._criteria: dict[str, Criteria] = dict(criteria or {})

    def _load(self, key: str) -> Criteria | None:
        criteria = self._criteria.get(key)
        return criteria.model_copy(deep=True) if criteria else None

    def _store(self, key: str, criteria: Criteria) -> None:
        self._criteria[key] = criteria.model_copy(deep=True)


class InMemoryApplicationRepository(ApplicationRepository):
    """Applications held in a dict keyed by application id, in insertion order."""

    def __init__(self, applications: Iterable[Application] = ()) -> None:
        self._applications: dict[str, Application] = {app.id: app for app in applications}

    def add(self, application: Application) -> None:
        self._applications[application.id] = application

    def get(self, application_id: str) -> Application | None:
        return self._applications.get(application_id)

    def all(self) -> list[Application]:
        return list(self._applications.values())

    def list_by_job(self, job_id: str) -> list[Application]:
        return [
            app.model_copy(deep=True)
            for app in self._applications.values()
            if app.job_id == job_id
        ]

    def update_score(self, application_id: str, score: int) -> None:
        self._require(application_id).score = score

    def update_status(
        self,
        application_id: str,
        status: ApplicationStatus,
        notes: str | None = None,
    ) -> None:
        application = self._require(application_id)
        application.status = status
        if notes is not None:
            application.notes = notes

    def _require(self, application_id: str) -> Application:
        try:
            return self._applications[application_id]
        except KeyError:
            raise RepositoryError(f"Application not found: {application_id}") from None
