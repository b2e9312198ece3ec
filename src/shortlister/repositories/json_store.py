"""JSON-file repositories, the local stand-in for the portal's browser storage.

Records are kept as raw dicts and only the fields shortlisting owns are
rewritten, so keys written by other parts of the portal survive untouched.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from shortlister.exceptions import RepositoryError
from shortlister.models.application import Application, ApplicationStatus
from shortlister.models.criteria import Criteria
from shortlister.repositories.base import ApplicationRepository, CriteriaRepository

logger = logging.getLogger(__name__)


def _read_json(path: Path, expected: type) -> Any:
    """Read a JSON document, returning an empty container if missing or unreadable."""
    if not path.exists():
        return expected()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Could not read %s, starting empty: %s", path, e)
        return expected()
    if not isinstance(data, expected):
        logger.warning("Ignoring %s: expected a JSON %s", path, expected.__name__)
        return expected()
    return data


def _write_json(path: Path, data: Any) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    except (OSError, TypeError) as e:
        raise RepositoryError(f"Failed to write {path}: {e}") from e


class JsonCriteriaRepository(CriteriaRepository):
    """Criteria stored as one JSON object keyed by job id (``"default"`` for global)."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _load(self, key: str) -> Criteria | None:
        record = _read_json(self.path, dict).get(key)
        if record is None:
            return None
        try:
            return Criteria.model_validate(record)
        except ValidationError as e:
            logger.warning("Ignoring invalid criteria for %r in %s: %s", key, self.path, e)
            return None

    def _store(self, key: str, criteria: Criteria) -> None:
        data = _read_json(self.path, dict)
        data[key] = criteria.to_record()
        _write_json(self.path, data)
        logger.info("Saved criteria for %r to %s", key, self.path)


class JsonApplicationRepository(ApplicationRepository):
    """Applications stored as a JSON array of records."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def all(self) -> list[Application]:
        return self._parse(_read_json(self.path, list))

    def list_by_job(self, job_id: str) -> list[Application]:
        records = [
            record
            for record in _read_json(self.path, list)
            if isinstance(record, dict) and str(record.get("jobId")) == job_id
        ]
        return self._parse(records)

    def update_score(self, application_id: str, score: int) -> None:
        self._update(application_id, {"score": score})

    def update_status(
        self,
        application_id: str,
        status: ApplicationStatus,
        notes: str | None = None,
    ) -> None:
        changes: dict[str, Any] = {"status": status}
        if notes is not None:
            changes["notes"] = notes
        self._update(application_id, changes)

    def _update(self, application_id: str, changes: dict[str, Any]) -> None:
        records = _read_json(self.path, list)
        for record in records:
            if isinstance(record, dict) and str(record.get("id")) == application_id:
                record.update(changes)
                _write_json(self.path, records)
                return
        raise RepositoryError(f"Application not found: {application_id}")

    def _parse(self, records: list[Any]) -> list[Application]:
        applications: list[Application] = []
        for record in records:
            try:
                applications.append(Application.model_validate(record))
            except ValidationError as e:
                logger.warning("Skipping invalid application record in %s: %s", self.path, e)
        return applications
