"""
Report generation for analysis bundles.

Produces formatted reports in multiple formats (text, JSON, Markdown).
"""

from __future__ import annotations

import json
import math
from enum import Enum, auto
from typing import Any, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from decision_criteria.analysis import Analysis, RiskAnalysis, UncertaintyAnalysis


class ReportFormat(Enum):
    """Available report formats."""
    TEXT = auto()
    JSON = auto()
    MARKDOWN = auto()

    @classmethod
    def from_name(cls, name: str) -> "ReportFormat":
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown format: {name}") from None


def _fmt(value: float) -> str:
    return f"{value:g}"


def _finite_or_none(obj: Any) -> Any:
    """Replace non-finite floats with None, recursing into dicts and lists."""
    if isinstance(obj, float):
        return obj if math.isfinite(obj) else None
    if isinstance(obj, dict):
        return {k: _finite_or_none(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_finite_or_none(v) for v in obj]
    return obj


class Reporter:
    """
    Generates formatted reports from an analysis bundle.
    """

    def __init__(self, analysis: "Analysis"):
        """
        Initialize reporter.

        Args:
            analysis: UncertaintyAnalysis or RiskAnalysis to report on
        """
        self.analysis = analysis

    def generate(self, format: ReportFormat = ReportFormat.TEXT) -> str:
        """
        Generate report in specified format.

        Args:
            format: Output format

        Returns:
            Formatted report string
        """
        if format == ReportFormat.TEXT:
            return self._generate_text()
        elif format == ReportFormat.JSON:
            return self._generate_json()
        elif format == ReportFormat.MARKDOWN:
            return self._generate_markdown()
        else:
            raise ValueError(f"Unknown format: {format}")

    def _generate_text(self) -> str:
        """Generate plain text report."""
        a = self.analysis
        rule = "═" * 39
        return "\n".join([rule, f"  {a.title.upper()}", rule, a.describe()])

    def _generate_json(self) -> str:
        """Generate JSON report. NaN and infinite values are written as null."""
        data = _finite_or_none(self.analysis.to_dict())
        return json.dumps(data, indent=2, default=str, allow_nan=False)

    def _generate_markdown(self) -> str:
        """Generate Markdown report."""
        a = self.analysis
        lines = [f"# {a.title}", "", "## Payoff Matrix", ""]
        states = [f"S{j + 1}" for j in range(a.matrix.n_states)]
        lines.extend(self._matrix_table(states, a.matrix.to_list()))
        lines.append("")

        if a.context == "uncertainty":
            lines.extend(self._uncertainty_sections(a))
        else:
            lines.extend(self._risk_sections(a))

        return "\n".join(lines)

    def _matrix_table(self, headers: List[str], rows: List[List[float]]) -> List[str]:
        lines = [
            "| Alternative | " + " | ".join(headers) + " |",
            "|" + "---|" * (len(headers) + 1),
        ]
        for i, row in enumerate(rows):
            lines.append(f"| A{i + 1} | " + " | ".join(_fmt(v) for v in row) + " |")
        return lines

    def _uncertainty_sections(self, a: "UncertaintyAnalysis") -> List[str]:
        opt = a.hurwicz_optimistic
        pes = a.hurwicz_pessimistic
        headers = [
            "Row max",
            "Row min",
            f"Hurwicz ({_fmt(opt.alpha)})",
            f"Hurwicz ({_fmt(pes.alpha)})",
            "Max regret",
        ]
        rows = [
            list(values)
            for values in zip(
                a.maximax.per_row_max,
                a.minimax.per_row_min,
                opt.values,
                pes.values,
                a.savage.per_row_max_regret,
            )
        ]
        worst = a.worst_case
        lines = ["## Per-Alternative Values", ""]
        lines.extend(self._matrix_table(headers, rows))
        lines.extend([
            "",
            "## Decisions",
            "",
            "| Criterion | Value | Alternative |",
            "|---|---|---|",
            f"| Maximax | {_fmt(a.maximax.overall)} | A{a.maximax.decision_index + 1} |",
            f"| {worst.kind.name.title()} | {_fmt(worst.overall)} | A{worst.decision_index + 1} |",
            f"| Hurwicz ({_fmt(opt.alpha)}) | {_fmt(opt.overall)} | A{opt.decision_index + 1} |",
            f"| Hurwicz ({_fmt(pes.alpha)}) | {_fmt(pes.overall)} | A{pes.decision_index + 1} |",
            f"| Savage | {_fmt(a.savage.min_max_regret)} | A{a.savage.decision_index_1based} |",
            "",
        ])
        return lines

    def _risk_sections(self, a: "RiskAnalysis") -> List[str]:
        t = _fmt(a.threshold.threshold)
        headers = ["Expected", "Variance", f"P(x > {t})", "Modal"]
        rows = [
            list(values)
            for values in zip(
                a.bayesian.expected,
                a.min_variance.variances,
                a.threshold.scores,
                a.modal.modal_values,
            )
        ]
        lines = [
            "Probabilities: " + ", ".join(_fmt(p) for p in a.probabilities.values),
            "",
            "## Per-Alternative Values",
            "",
        ]
        lines.extend(self._matrix_table(headers, rows))
        lines.extend([
            "",
            "## Decisions",
            "",
            "| Criterion | Value | Alternative |",
            "|---|---|---|",
            f"| Bayesian | {_fmt(a.bayesian.best)} | A{a.bayesian.decision_index + 1} |",
            f"| Minimum variance | {_fmt(a.min_variance.min_variance)} | A{a.min_variance.decision_index + 1} |",
            f"| P(x > {t}) | {_fmt(a.threshold.max)} | A{a.threshold.decision_index + 1} |",
            f"| Modal | {_fmt(a.modal.max)} | A{a.modal.decision_index + 1} |",
            "",
        ])
        return lines

    def save(self, filepath: str, format: Optional[ReportFormat] = None) -> None:
        """
        Save report to file.

        Args:
            filepath: Output file path
            format: Format (inferred from extension if not specified)
        """
        if format is None:
            if filepath.endswith('.json'):
                format = ReportFormat.JSON
            elif filepath.endswith('.md'):
                format = ReportFormat.MARKDOWN
            else:
                format = ReportFormat.TEXT

        content = self.generate(format)

        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(content)
