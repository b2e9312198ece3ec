"""Tests for criteria and application models."""

import pytest
from pydantic import ValidationError

from shortlister.models.application import Application, EducationEntry, ExperienceEntry
from shortlister.models.common import coerce_to_list, unique_ordered
from shortlister.models.criteria import (
    REQUIRED_WEIGHT_TOTAL,
    CertificationsCriterion,
    Criteria,
    EducationCriterion,
    ExperienceCriterion,
    SkillsCriterion,
)


class TestCoerceToList:
    """Tests for coerce_to_list."""

    def test_none(self) -> None:
        assert coerce_to_list(None) == []

    def test_list_passthrough(self) -> None:
        assert coerce_to_list(["SQL", "GIS"]) == ["SQL", "GIS"]

    def test_comma_separated(self) -> None:
        assert coerce_to_list("SQL, GIS , Excel") == ["SQL", "GIS", "Excel"]

    def test_json_array_string(self) -> None:
        assert coerce_to_list('["SQL", "GIS"]') == ["SQL", "GIS"]

    def test_single_value(self) -> None:
        assert coerce_to_list("SQL") == ["SQL"]

    def test_empty_string(self) -> None:
        assert coerce_to_list("") == []


class TestUniqueOrdered:
    """Tests for unique_ordered."""

    def test_drops_duplicates_keeping_first(self) -> None:
        assert unique_ordered(["SQL", "GIS", "SQL"]) == ["SQL", "GIS"]

    def test_strips_and_drops_blanks(self) -> None:
        assert unique_ordered([" SQL ", "", "  "]) == ["SQL"]

    def test_case_sensitive(self) -> None:
        assert unique_ordered(["SQL", "sql"]) == ["SQL", "sql"]


class TestCriteria:
    """Tests for the Criteria model."""

    def test_defaults(self) -> None:
        criteria = Criteria.default()

        assert criteria.education.weight == 30
        assert criteria.education.minimum_degree == "bachelor"
        assert criteria.experience.weight == 40
        assert criteria.experience.minimum_years == 2
        assert criteria.skills.weight == 20
        assert criteria.skills.required_skills == []
        assert criteria.certifications.weight == 10
        assert criteria.certifications.required_certifications == []
        assert criteria.weight_total == REQUIRED_WEIGHT_TOTAL

    def test_weight_total(self, unsaved_criteria: Criteria) -> None:
        assert unsaved_criteria.weight_total == 95

    def test_from_camel_case_record(self, criteria_record: dict) -> None:
        criteria = Criteria.model_validate(criteria_record)

        assert criteria.education.minimum_degree == "bachelor"
        assert criteria.experience.minimum_years == 2
        assert criteria.skills.required_skills == ["SQL"]

    def test_to_record_uses_camel_case(
        self, sample_criteria: Criteria, criteria_record: dict
    ) -> None:
        assert sample_criteria.to_record() == criteria_record

    @pytest.mark.parametrize("weight", [-1, 101])
    def test_weight_out_of_range(self, weight: int) -> None:
        with pytest.raises(ValidationError):
            EducationCriterion(weight=weight)

    @pytest.mark.parametrize("weight", [0, 100])
    def test_weight_bounds_accepted(self, weight: int) -> None:
        assert SkillsCriterion(weight=weight).weight == weight

    def test_negative_minimum_years(self) -> None:
        with pytest.raises(ValidationError):
            ExperienceCriterion(minimum_years=-1)

    def test_unknown_degree(self) -> None:
        with pytest.raises(ValidationError):
            EducationCriterion(minimum_degree="associate")

    def test_degree_case_normalized(self) -> None:
        assert EducationCriterion(minimum_degree="Master").minimum_degree == "master"

    def test_required_items_normalized(self) -> None:
        skills = SkillsCriterion(required_skills=["SQL", " GIS ", "", "SQL"])
        certs = CertificationsCriterion(required_certifications="PRINCE2, ITIL, PRINCE2")

        assert skills.required_skills == ["SQL", "GIS"]
        assert certs.required_certifications == ["PRINCE2", "ITIL"]


class TestApplication:
    """Tests for the Application model."""

    def test_from_record(self, application_record: dict) -> None:
        application = Application.model_validate(application_record)

        assert application.id == "1717171717171"
        assert application.job_id == "job-1"
        assert application.applicant_name == "Amina Okafor"
        assert application.education[0].degree == "Bachelor of Science"
        assert application.experience[0].duration == "2015-2020"
        assert application.status == "pending"
        assert application.score is None
        assert application.applied_at == "2025-03-01T10:00:00.000Z"

    def test_blank_list_items_dropped(self, application_record: dict) -> None:
        application = Application.model_validate(application_record)

        assert application.certifications == []

    def test_unknown_keys_round_trip(self, application_record: dict) -> None:
        application_record["department"] = "Planning"

        record = Application.model_validate(application_record).to_record()

        assert record["department"] == "Planning"
        assert record["jobId"] == "job-1"
        assert record["appliedAt"] == "2025-03-01T10:00:00.000Z"

    def test_numeric_ids_coerced(self) -> None:
        application = Application.model_validate({"id": 7, "jobId": 3, "applicantName": "X"})

        assert application.id == "7"
        assert application.job_id == "3"

    def test_invalid_status(self) -> None:
        with pytest.raises(ValidationError):
            Application(id="a", job_id="j", applicant_name="X", status="archived")

    def test_negative_score_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Application(id="a", job_id="j", applicant_name="X", score=-1)

    def test_score_above_hundred_loads(self) -> None:
        """A score written by a run with unsaved criteria must still load."""
        application = Application.model_validate(
            {"id": "a", "jobId": "j", "applicantName": "X", "score": 110}
        )

        assert application.score == 110

    def test_non_object_entries_dropped(self, application_record: dict) -> None:
        record = dict(
            application_record,
            education=["Bachelor of Arts", {"degree": "MSc"}, None],
            experience=["2015-2020"],
        )

        application = Application.model_validate(record)

        assert [e.degree for e in application.education] == ["MSc"]
        assert application.experience == []

    def test_non_list_entries_treated_as_empty(self) -> None:
        application = Application.model_validate(
            {"id": "a", "jobId": "j", "applicantName": "X", "education": "Bachelor of Arts"}
        )

        assert application.education == []

    def test_entry_text_coerced(self) -> None:
        entry = EducationEntry.model_validate({"degree": "BSc", "year": 2014})
        experience = ExperienceEntry.model_validate({"duration": None})

        assert entry.year == "2014"
        assert experience.duration == ""

    def test_null_entry_lists(self) -> None:
        application = Application.model_validate(
            {"id": "a", "jobId": "j", "applicantName": "X", "education": None, "experience": None}
        )

        assert application.education == []
        assert application.experience == []
