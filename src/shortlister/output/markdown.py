"""Markdown output formatting."""

from pathlib import Path

from shortlister.models.criteria import Criteria
from shortlister.scoring.models import ApplicantScore
from shortlister.shortlisting.models import ShortlistingResult


def save_markdown(content: str, output_path: str | Path) -> Path:
    """Save content to a markdown file.

    Args:
        content: Markdown content to save.
        output_path: Path to save the file.

    Returns:
        Path to the saved file.
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def format_criteria(criteria: Criteria) -> str:
    """Format criteria as a Markdown list."""
    skills = ", ".join(criteria.skills.required_skills) or "none"
    certs = ", ".join(criteria.certifications.required_certifications) or "none"
    return "\n".join(
        [
            f"- **Education ({criteria.education.weight}%):** "
            f"minimum {criteria.education.minimum_degree}",
            f"- **Experience ({criteria.experience.weight}%):** "
            f"at least {criteria.experience.minimum_years} years in one role",
            f"- **Skills ({criteria.skills.weight}%):** {skills}",
            f"- **Certifications ({criteria.certifications.weight}%):** {certs}",
        ]
    )


def format_score(score: ApplicantScore) -> str:
    """Format one applicant's score breakdown."""
    output = [f"## Score: {score.total}/100", ""]
    output.append(f"- **Education:** {score.education} ({_yes_no(score.education_qualifies)})")
    output.append(f"- **Experience:** {score.experience} ({_yes_no(score.experience_qualifies)})")
    output.append(f"- **Skills:** {score.skills} (matched: {_joined(score.matched_skills)})")
    output.append(
        f"- **Certifications:** {score.certifications} "
        f"(matched: {_joined(score.matched_certifications)})"
    )
    return "\n".join(output)


def format_shortlisting_result(
    result: ShortlistingResult,
    criteria: Criteria | None = None,
) -> str:
    """Format a shortlisting run as a Markdown report.

    Args:
        result: Outcome of the run.
        criteria: Criteria used, included when given.

    Returns:
        Markdown report with ranked applicants, status changes and errors.
    """
    output = [f"# Shortlisting Report: Job {result.job_id}", ""]
    output.append(
        f"{len(result.updates)} applicants scored, "
        f"{len(result.shortlisted_ids)} shortlisted automatically "
        f"(threshold {result.threshold})."
    )
    output.append("")

    if criteria is not None:
        output.append("## Criteria")
        output.append(format_criteria(criteria))
        output.append("")

    output.append("## Ranking")
    if result.updates:
        output.append(
            "| Rank | Applicant | Education | Experience | Skills | Certifications | Score |"
        )
        output.append("|---|---|---|---|---|---|---|")
        for rank, update in enumerate(result.ranked, start=1):
            points = update.breakdown.to_breakdown()
            row = [
                str(rank),
                update.applicant_name or update.id,
                *(str(value) for value in points.values()),
                str(update.score),
            ]
            output.append(f"| {' | '.join(row)} |")
    else:
        output.append("No applications found for this job.")
    output.append("")

    changes = [u for u in result.updates if u.status_change]
    if changes:
        output.append("## Status Changes")
        for update in changes:
            change = update.status_change
            output.append(
                f"- {update.applicant_name or update.id}: "
                f"{change.from_status} -> {change.to_status} ({change.reason})"
            )
        output.append("")

    if result.errors:
        output.append("## Errors")
        for error in result.errors:
            output.append(f"- {error.id} [{error.stage}]: {error.message}")
        output.append("")

    return "\n".join(output)


def _yes_no(flag: bool) -> str:
    return "qualifies" if flag else "does not qualify"


def _joined(items: list[str]) -> str:
    return ", ".join(items) if items else "none"
