"""Persistence for criteria and applications."""

from pathlib import Path

from shortlister.repositories.base import (
    DEFAULT_CRITERIA_KEY,
    ApplicationRepository,
    CriteriaRepository,
)
from shortlister.repositories.json_store import JsonApplicationRepository, JsonCriteriaRepository
from shortlister.repositories.memory import (
    InMemoryApplicationRepository,
    InMemoryCriteriaRepository,
)


def get_json_repositories(
    data_dir: str | Path,
) -> tuple[JsonCriteriaRepository, JsonApplicationRepository]:
    """Factory for the JSON-file repositories inside ``data_dir``."""
    data_dir = Path(data_dir)
    return (
        JsonCriteriaRepository(data_dir / "criteria.json"),
        JsonApplicationRepository(data_dir / "applications.json"),
    )


__all__ = [
    "DEFAULT_CRITERIA_KEY",
    "ApplicationRepository",
    "CriteriaRepository",
    "InMemoryApplicationRepository",
    "InMemoryCriteriaRepository",
    "JsonApplicationRepository",
    "JsonCriteriaRepository",
    "get_json_repositories",
]
