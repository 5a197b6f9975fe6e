"""
Result types returned by each criterion.

One frozen dataclass per criterion, tagged with a `Criterion` member, so a
renderer can match exhaustively on which criterion produced a result.
Results are created fresh per call and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, ClassVar, Dict, List, Optional, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from decision_criteria.matrix.payoff import PayoffMatrix


class Criterion(Enum):
    """Closed set of supported decision criteria."""
    MAXIMAX = auto()
    MINIMAX = auto()      # max of per-row minima
    MAXIMIN = auto()      # min of per-row maxima
    HURWICZ = auto()
    SAVAGE = auto()       # minimax regret
    BAYESIAN = auto()
    MIN_VARIANCE = auto()
    THRESHOLD = auto()
    MODAL = auto()

    @property
    def under_risk(self) -> bool:
        """Whether the criterion needs a probability distribution."""
        return self in _RISK_CRITERIA


_RISK_CRITERIA = frozenset({
    Criterion.BAYESIAN,
    Criterion.MIN_VARIANCE,
    Criterion.THRESHOLD,
    Criterion.MODAL,
})


def _fmt(value: float) -> str:
    return f"{value:g}"


def _row_text(matrix: Optional["PayoffMatrix"], index: int) -> str:
    if matrix is None:
        return ""
    return "; ".join(_fmt(v) for v in matrix.row(index))


@dataclass(frozen=True)
class MaximaxResult:
    """
    Optimist's criterion: best of the per-row best outcomes.

    Attributes:
        per_row_max: Largest payoff of each alternative
        overall: Largest of per_row_max
        decision_index: First row attaining overall (0-based)
        tied_indices: Every row attaining overall
    """
    kind: ClassVar[Criterion] = Criterion.MAXIMAX

    per_row_max: List[float]
    overall: float
    decision_index: int
    tied_indices: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "criterion": self.kind.name,
            "per_row_max": self.per_row_max,
            "overall": self.overall,
            "decision_index": self.decision_index,
            "tied_indices": self.tied_indices,
        }

    def describe(self, matrix: Optional["PayoffMatrix"] = None) -> str:
        lines = ["Maximax Criterion"]
        for i, value in enumerate(self.per_row_max):
            detail = f"max({_row_text(matrix, i)}) = " if matrix is not None else ""
            lines.append(f"  z{i + 1} = {detail}{_fmt(value)}")
        lines.append(f"  z = max z_i = {_fmt(self.overall)} (z{self.decision_index + 1})")
        return "\n".join(lines)


@dataclass(frozen=True)
class MinimaxResult:
    """
    Best of the per-row worst outcomes.

    Named "minimax" for the row-wise minimum followed by the maximum
    across rows; this is not minimax regret (see SavageResult).
    """
    kind: ClassVar[Criterion] = Criterion.MINIMAX

    per_row_min: List[float]
    overall: float
    decision_index: int
    tied_indices: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "criterion": self.kind.name,
            "per_row_min": self.per_row_min,
            "overall": self.overall,
            "decision_index": self.decision_index,
            "tied_indices": self.tied_indices,
        }

    def describe(self, matrix: Optional["PayoffMatrix"] = None) -> str:
        lines = ["Minimax Criterion"]
        for i, value in enumerate(self.per_row_min):
            detail = f"min({_row_text(matrix, i)}) = " if matrix is not None else ""
            lines.append(f"  z{i + 1} = {detail}{_fmt(value)}")
        lines.append(f"  z = max z_i = {_fmt(self.overall)} (z{self.decision_index + 1})")
        return "\n".join(lines)


@dataclass(frozen=True)
class MaximinResult:
    """Smallest of the per-row best outcomes."""
    kind: ClassVar[Criterion] = Criterion.MAXIMIN

    per_row_max: List[float]
    overall: float
    decision_index: int
    tied_indices: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "criterion": self.kind.name,
            "per_row_max": self.per_row_max,
            "overall": self.overall,
            "decision_index": self.decision_index,
            "tied_indices": self.tied_indices,
        }

    def describe(self, matrix: Optional["PayoffMatrix"] = None) -> str:
        lines = ["Maximin Criterion"]
        for i, value in enumerate(self.per_row_max):
            detail = f"max({_row_text(matrix, i)}) = " if matrix is not None else ""
            lines.append(f"  z{i + 1} = {detail}{_fmt(value)}")
        lines.append(f"  z = min z_i = {_fmt(self.overall)} (z{self.decision_index + 1})")
        return "\n".join(lines)


@dataclass(frozen=True)
class HurwiczRow:
    """Per-alternative Hurwicz terms."""
    max_value: float
    min_value: float
    value: float

    def to_dict(self) -> Dict[str, float]:
        return {"max": self.max_value, "min": self.min_value, "value": self.value}


@dataclass(frozen=True)
class HurwiczResult:
    """
    Weighted blend of best and worst outcome per alternative.

    Attributes:
        alpha: Optimism coefficient used
        per_row: Max, min and blended value for each alternative
        overall: Largest blended value
        decision_index: First row attaining overall
    """
    kind: ClassVar[Criterion] = Criterion.HURWICZ

    alpha: float
    per_row: List[HurwiczRow]
    overall: float
    decision_index: int
    tied_indices: List[int] = field(default_factory=list)

    @property
    def values(self) -> List[float]:
        return [row.value for row in self.per_row]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "criterion": self.kind.name,
            "alpha": self.alpha,
            "per_row": [row.to_dict() for row in self.per_row],
            "overall": self.overall,
            "decision_index": self.decision_index,
            "tied_indices": self.tied_indices,
        }

    def describe(self, matrix: Optional["PayoffMatrix"] = None) -> str:
        a = _fmt(self.alpha)
        lines = [f"Hurwicz Criterion (alpha = {a})"]
        for i, row in enumerate(self.per_row):
            lines.append(
                f"  z{i + 1} = {a} * {_fmt(row.max_value)} + (1 - {a}) * "
                f"{_fmt(row.min_value)} = {_fmt(row.value)}"
            )
        joined = "; ".join(_fmt(v) for v in self.values)
        lines.append(f"  Z = max z_i = max({joined}) = {_fmt(self.overall)}")
        return "\n".join(lines)


@dataclass(frozen=True)
class SavageResult:
    """
    Minimax regret.

    Attributes:
        regret_matrix: Column maximum minus payoff, for every cell
        column_maxima: Best payoff in each state of nature
        per_row_max_regret: Worst regret of each alternative
        decision_index_1based: First row with the smallest worst regret,
            counted from 1 for display
    """
    kind: ClassVar[Criterion] = Criterion.SAVAGE

    regret_matrix: List[List[float]]
    column_maxima: List[float]
    per_row_max_regret: List[float]
    decision_index_1based: int

    @property
    def decision_index(self) -> int:
        """Decision normalized to 0-based indexing."""
        return self.decision_index_1based - 1

    @property
    def min_max_regret(self) -> float:
        return self.per_row_max_regret[self.decision_index]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "criterion": self.kind.name,
            "regret_matrix": self.regret_matrix,
            "column_maxima": self.column_maxima,
            "per_row_max_regret": self.per_row_max_regret,
            "decision_index_1based": self.decision_index_1based,
        }

    def describe(self, matrix: Optional["PayoffMatrix"] = None) -> str:
        lines = ["Savage Criterion", "  Regret matrix:"]
        for row in self.regret_matrix:
            lines.append("    " + "\t".join(_fmt(v) for v in row))
        joined = ", ".join(_fmt(v) for v in self.per_row_max_regret)
        lines.append(
            f"  Z = min z = min({joined}) = {_fmt(self.min_max_regret)} "
            f"= z{self.decision_index_1based}"
        )
        return "\n".join(lines)


@dataclass(frozen=True)
class BayesianResult:
    """Expected value of each alternative under the distribution."""
    kind: ClassVar[Criterion] = Criterion.BAYESIAN

    expected: List[float]
    best: float
    decision_index: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "criterion": self.kind.name,
            "expected": self.expected,
            "best": self.best,
            "decision_index": self.decision_index,
        }

    def describe(self, matrix: Optional["PayoffMatrix"] = None) -> str:
        lines = ["Bayesian Criterion"]
        for i, value in enumerate(self.expected):
            lines.append(f"  E{i + 1} = {_fmt(value)}")
        lines.append(f"  E = max E_i = {_fmt(self.best)} (E{self.decision_index + 1})")
        return "\n".join(lines)


@dataclass(frozen=True)
class MinVarianceResult:
    """Variance of each alternative's payoff around its expected value."""
    kind: ClassVar[Criterion] = Criterion.MIN_VARIANCE

    means: List[float]
    variances: List[float]
    min_variance: float
    decision_index: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "criterion": self.kind.name,
            "means": self.means,
            "variances": self.variances,
            "min_variance": self.min_variance,
            "decision_index": self.decision_index,
        }

    def describe(self, matrix: Optional["PayoffMatrix"] = None) -> str:
        lines = ["Minimum Variance Criterion"]
        for i, (mean, var) in enumerate(zip(self.means, self.variances)):
            lines.append(f"  D{i + 1} = {_fmt(var)} (mean {_fmt(mean)})")
        lines.append(
            f"  D = min D_i = {_fmt(self.min_variance)} (D{self.decision_index + 1})"
        )
        return "\n".join(lines)


@dataclass(frozen=True)
class ThresholdResult:
    """Probability mass of outcomes strictly above a threshold."""
    kind: ClassVar[Criterion] = Criterion.THRESHOLD

    threshold: float
    scores: List[float]
    max: float
    decision_index: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "criterion": self.kind.name,
            "threshold": self.threshold,
            "scores": self.scores,
            "max": self.max,
            "decision_index": self.decision_index,
        }

    def describe(self, matrix: Optional["PayoffMatrix"] = None) -> str:
        t = _fmt(self.threshold)
        lines = [f"Probability Above Threshold Criterion (threshold = {t})"]
        for i, score in enumerate(self.scores):
            lines.append(f"  P{i + 1}(x > {t}) = {_fmt(score)}")
        lines.append(f"  P = max P_i = {_fmt(self.max)} (P{self.decision_index + 1})")
        return "\n".join(lines)


@dataclass(frozen=True)
class ModalResult:
    """
    Largest probability-weighted single outcome of each alternative.

    Modal values are floored at 0: a row whose weighted outcomes are all
    negative reports 0.
    """
    kind: ClassVar[Criterion] = Criterion.MODAL

    modal_values: List[float]
    max: float
    decision_index: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "criterion": self.kind.name,
            "modal_values": self.modal_values,
            "max": self.max,
            "decision_index": self.decision_index,
        }

    def describe(self, matrix: Optional["PayoffMatrix"] = None) -> str:
        lines = ["Modal Criterion"]
        for i, value in enumerate(self.modal_values):
            lines.append(f"  M{i + 1} = {_fmt(value)}")
        lines.append(f"  M = max M_i = {_fmt(self.max)} (M{self.decision_index + 1})")
        return "\n".join(lines)


CriterionResult = Union[
    MaximaxResult,
    MinimaxResult,
    MaximinResult,
    HurwiczResult,
    SavageResult,
    BayesianResult,
    MinVarianceResult,
    ThresholdResult,
    ModalResult,
]
