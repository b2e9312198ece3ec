"""Validation of criteria before they are persisted."""

import logging

from shortlister.exceptions import CriteriaValidationError
from shortlister.models.criteria import REQUIRED_WEIGHT_TOTAL, Criteria

logger = logging.getLogger(__name__)


def validate_criteria(criteria: Criteria) -> CriteriaValidationError | None:
    """Check that criteria can be saved.

    Individual weights are already bounded to 0-100 by the model, so the only
    remaining rule is that the four weights share out exactly 100. Empty
    required-skill or certification lists are valid.

    Args:
        criteria: Criteria to check.

    Returns:
        None if valid, otherwise the error to surface to the operator.
    """
    total = criteria.weight_total
    if total != REQUIRED_WEIGHT_TOTAL:
        logger.debug("Rejected criteria with weight total %d", total)
        return CriteriaValidationError(
            f"Weights must add up to {REQUIRED_WEIGHT_TOTAL}% (currently: {total}%)",
            weight_total=total,
        )
    return None
