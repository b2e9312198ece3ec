"""Pytest configuration and fixtures."""

import pytest

from shortlister.models.application import Application, EducationEntry, ExperienceEntry
from shortlister.models.criteria import (
    CertificationsCriterion,
    Criteria,
    EducationCriterion,
    ExperienceCriterion,
    SkillsCriterion,
)
from shortlister.repositories.memory import (
    InMemoryApplicationRepository,
    InMemoryCriteriaRepository,
)


@pytest.fixture
def sample_criteria() -> Criteria:
    """30/40/20/10 criteria requiring a bachelor, 2 years and SQL."""
    return Criteria(
        education=EducationCriterion(weight=30, minimum_degree="bachelor"),
        experience=ExperienceCriterion(weight=40, minimum_years=2),
        skills=SkillsCriterion(weight=20, required_skills=["SQL"]),
        certifications=CertificationsCriterion(weight=10, required_certifications=[]),
    )


@pytest.fixture
def unsaved_criteria() -> Criteria:
    """Criteria whose weights only add up to 95."""
    return Criteria(
        education=EducationCriterion(weight=30, minimum_degree="bachelor"),
        experience=ExperienceCriterion(weight=40, minimum_years=2),
        skills=SkillsCriterion(weight=20, required_skills=["SQL"]),
        certifications=CertificationsCriterion(weight=5, required_certifications=[]),
    )


@pytest.fixture
def overweight_criteria() -> Criteria:
    """Criteria whose weights add up to 110."""
    return Criteria(
        education=EducationCriterion(weight=40, minimum_degree="bachelor"),
        experience=ExperienceCriterion(weight=40, minimum_years=2),
        skills=SkillsCriterion(weight=20, required_skills=["SQL"]),
        certifications=CertificationsCriterion(weight=10, required_certifications=[]),
    )


@pytest.fixture
def qualified_application() -> Application:
    """Applicant meeting every sample criterion."""
    return Application(
        id="app-1",
        job_id="job-1",
        applicant_name="Amina Okafor",
        email="amina@example.com",
        education=[
            EducationEntry(
                degree="Bachelor of Science",
                institution="University of Lagos",
                year="2014",
            )
        ],
        experience=[
            ExperienceEntry(
                title="Data Analyst",
                company="City Council",
                duration="2015-2020",
                description="Reporting on housing applications",
            )
        ],
        skills=["SQL", "Python"],
        certifications=[],
    )


@pytest.fixture
def unqualified_application() -> Application:
    """Applicant meeting none of the sample criteria except the vacuous certifications."""
    return Application(
        id="app-2",
        job_id="job-1",
        applicant_name="Ben Carter",
        email="ben@example.com",
        education=[EducationEntry(degree="High School Diploma", institution="Central High")],
        experience=[ExperienceEntry(title="Clerk", company="Library", duration="2019-2020")],
        skills=["Java"],
    )


@pytest.fixture
def other_job_application() -> Application:
    """Applicant for a different job."""
    return Application(
        id="app-3",
        job_id="job-2",
        applicant_name="Chen Wei",
        education=[EducationEntry(degree="PhD Statistics")],
        experience=[ExperienceEntry(duration="2010-2020")],
        skills=["SQL"],
    )


@pytest.fixture
def application_repo(
    qualified_application: Application,
    unqualified_application: Application,
    other_job_application: Application,
) -> InMemoryApplicationRepository:
    """Repository holding two job-1 applicants and one job-2 applicant."""
    return InMemoryApplicationRepository(
        [qualified_application, unqualified_application, other_job_application]
    )


@pytest.fixture
def criteria_repo() -> InMemoryCriteriaRepository:
    """Empty criteria repository."""
    return InMemoryCriteriaRepository()


@pytest.fixture
def criteria_record() -> dict:
    """Criteria as persisted by the portal."""
    return {
        "education": {"weight": 30, "minimumDegree": "bachelor"},
        "experience": {"weight": 40, "minimumYears": 2},
        "skills": {"weight": 20, "requiredSkills": ["SQL"]},
        "certifications": {"weight": 10, "requiredCertifications": []},
    }


@pytest.fixture
def application_record() -> dict:
    """Application as persisted by the portal."""
    return {
        "id": "1717171717171",
        "jobId": "job-1",
        "applicantName": "Amina Okafor",
        "email": "amina@example.com",
        "phone": "+2348000000000",
        "resume": "amina_cv.pdf",
        "education": [
            {"degree": "Bachelor of Science", "institution": "University of Lagos", "year": "2014"}
        ],
        "experience": [
            {
                "title": "Data Analyst",
                "company": "City Council",
                "duration": "2015-2020",
                "description": "Reporting",
            }
        ],
        "skills": ["SQL", "Python"],
        "certifications": [""],
        "status": "pending",
        "appliedAt": "2025-03-01T10:00:00.000Z",
    }
