"""Output module - Report generation."""

from decision_criteria.output.reporter import Reporter, ReportFormat

__all__ = ["Reporter", "ReportFormat"]
