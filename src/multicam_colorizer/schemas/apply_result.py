"""Apply step result schema."""

from multicam_colorizer.common.base_colorizer_model import BaseColorizerModel


class ApplyResult(BaseColorizerModel):
    """Outcome of coloring the clips of a timeline."""

    applied_count: int
    skipped_count: int = 0
    failed_count: int = 0

    @property
    def status_message(self) -> str:
        """Return the one-line status shown after colorizing."""
        return f"Colored {self.applied_count} clips (see log for mapping)"
