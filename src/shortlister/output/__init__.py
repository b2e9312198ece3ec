"""Report output for Shortlister."""

from shortlister.output.markdown import (
    format_criteria,
    format_score,
    format_shortlisting_result,
    save_markdown,
)

__all__ = ["format_criteria", "format_score", "format_shortlisting_result", "save_markdown"]
