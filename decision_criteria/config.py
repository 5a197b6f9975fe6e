"""
Analysis configuration.

Holds the parameters the presentation layer owns (Hurwicz coefficients,
threshold, which worst-case panel to show) and passes into each call.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from numbers import Real
from typing import Any, Dict

from decision_criteria.exceptions import RangeError

WORST_CASE_VIEWS = ("minimax", "maximin")
OUTPUT_FORMATS = ("text", "json", "markdown")


@dataclass
class AnalysisConfig:
    """
    Configuration for an analysis run.

    Attributes:
        alpha_optimistic: Hurwicz coefficient for the optimistic panel
        alpha_pessimistic: Hurwicz coefficient for the pessimistic panel
        threshold: Threshold for the probability-above-threshold criterion
        worst_case_view: Which of "minimax" or "maximin" is reported as the
            worst-case result
        output_format: "text", "json" or "markdown"
    """
    alpha_optimistic: float = 0.8
    alpha_pessimistic: float = 0.3
    threshold: float = 0.0
    worst_case_view: str = "minimax"
    output_format: str = "text"

    def __post_init__(self):
        for name in ("alpha_optimistic", "alpha_pessimistic", "threshold"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise RangeError(
                    f"{name} must be a number, got {value!r}",
                    {"field": name, "value": repr(value)},
                )
        for name in ("alpha_optimistic", "alpha_pessimistic"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise RangeError(
                    f"{name} must be 0-1, got {value}",
                    {"field": name, "value": value},
                )
        if self.worst_case_view not in WORST_CASE_VIEWS:
            raise ValueError("worst_case_view must be 'minimax' or 'maximin'")
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError("output_format must be 'text', 'json' or 'markdown'")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalysisConfig":
        """Build from a dict, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    @classmethod
    def from_json_file(cls, filepath: str) -> "AnalysisConfig":
        with open(filepath, "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
