"""Auto-shortlist decision rule."""

from shortlister.models.application import ApplicationStatus

AUTO_SHORTLIST_THRESHOLD = 70


def should_auto_shortlist(
    current_status: ApplicationStatus,
    score: int,
    threshold: int = AUTO_SHORTLIST_THRESHOLD,
) -> bool:
    """Decide whether a scored applicant is moved to ``shortlisted``.

    Only the current status ``shortlisted`` is exempt, so rejected or hired
    applicants who reach the threshold on a later run are shortlisted again.

    Args:
        current_status: Status before this run.
        score: Total score from this run.
        threshold: Minimum score that triggers the change.

    Returns:
        True if the status should change to ``shortlisted``.
    """
    return score >= threshold and current_status != "shortlisted"


def auto_shortlist_note(score: int) -> str:
    """Note recorded on an applicant shortlisted automatically."""
    return f"Automatically shortlisted with score: {score}/100"
