"""
Analysis bundles.

Collects every criterion for one decision context into a single record so
a presentation layer can populate all of its panels from one call. The
bundles hold independent results side by side; they do not rank criteria
against each other.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional, Union

import structlog

from decision_criteria.config import AnalysisConfig
from decision_criteria.criteria.results import (
    BayesianResult,
    CriterionResult,
    HurwiczResult,
    MaximaxResult,
    MaximinResult,
    MinimaxResult,
    MinVarianceResult,
    ModalResult,
    SavageResult,
    ThresholdResult,
)
from decision_criteria.criteria.risk import (
    bayesian,
    max_prob_above_threshold,
    min_variance,
    modal,
)
from decision_criteria.criteria.uncertainty import (
    hurwicz,
    maximax,
    maximin_of_row_maxes,
    minimax_of_row_mins,
    savage,
)
from decision_criteria.matrix.payoff import (
    MatrixLike,
    PayoffMatrix,
    ProbabilitiesLike,
    ProbabilityVector,
    as_payoff_matrix,
    as_probability_vector,
)

logger = structlog.get_logger(__name__)


@dataclass
class UncertaintyAnalysis:
    """
    All criteria for a decision under uncertainty.

    Attributes:
        matrix: The analysed payoff matrix
        maximax: Maximax result
        minimax: Max of per-row minima
        maximin: Min of per-row maxima
        hurwicz_optimistic: Hurwicz with the optimistic coefficient
        hurwicz_pessimistic: Hurwicz with the pessimistic coefficient
        savage: Minimax regret result
        worst_case_view: Which of minimax/maximin is the worst-case panel
    """
    context: ClassVar[str] = "uncertainty"

    matrix: PayoffMatrix
    maximax: MaximaxResult
    minimax: MinimaxResult
    maximin: MaximinResult
    hurwicz_optimistic: HurwiczResult
    hurwicz_pessimistic: HurwiczResult
    savage: SavageResult
    worst_case_view: str = "minimax"

    @property
    def worst_case(self) -> Union[MinimaxResult, MaximinResult]:
        """The result selected by worst_case_view."""
        if self.worst_case_view == "maximin":
            return self.maximin
        return self.minimax

    @property
    def title(self) -> str:
        return "Decision Under Uncertainty"

    def results(self) -> List[CriterionResult]:
        """Results in display order."""
        return [
            self.maximax,
            self.worst_case,
            self.hurwicz_optimistic,
            self.hurwicz_pessimistic,
            self.savage,
        ]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "context": self.context,
            "matrix": self.matrix.to_list(),
            "worst_case_view": self.worst_case_view,
            "maximax": self.maximax.to_dict(),
            "minimax": self.minimax.to_dict(),
            "maximin": self.maximin.to_dict(),
            "hurwicz_optimistic": self.hurwicz_optimistic.to_dict(),
            "hurwicz_pessimistic": self.hurwicz_pessimistic.to_dict(),
            "savage": self.savage.to_dict(),
        }

    def describe(self) -> str:
        blocks = [r.describe(self.matrix) for r in self.results()]
        return "\n\n".join(blocks)


@dataclass
class RiskAnalysis:
    """All criteria for a decision under risk."""
    context: ClassVar[str] = "risk"

    matrix: PayoffMatrix
    probabilities: ProbabilityVector
    bayesian: BayesianResult
    min_variance: MinVarianceResult
    threshold: ThresholdResult
    modal: ModalResult

    @property
    def title(self) -> str:
        return "Decision Under Risk"

    def results(self) -> List[CriterionResult]:
        return [self.bayesian, self.min_variance, self.threshold, self.modal]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "context": self.context,
            "matrix": self.matrix.to_list(),
            "probabilities": self.probabilities.to_list(),
            "bayesian": self.bayesian.to_dict(),
            "min_variance": self.min_variance.to_dict(),
            "threshold": self.threshold.to_dict(),
            "modal": self.modal.to_dict(),
        }

    def describe(self) -> str:
        probs = "; ".join(f"{p:g}" for p in self.probabilities.values)
        blocks = [f"Probabilities: ({probs})"]
        blocks.extend(r.describe(self.matrix) for r in self.results())
        return "\n\n".join(blocks)


Analysis = Union[UncertaintyAnalysis, RiskAnalysis]


def analyze_uncertainty(
    matrix: MatrixLike,
    config: Optional[AnalysisConfig] = None,
) -> UncertaintyAnalysis:
    """
    Compute every criterion for a decision under uncertainty.

    Args:
        matrix: Payoff matrix, validated once here
        config: Coefficients and view selection (defaults if None)

    Returns:
        UncertaintyAnalysis
    """
    config = config or AnalysisConfig()
    m = as_payoff_matrix(matrix)

    logger.info(
        "analysis_started",
        context="uncertainty",
        alternatives=m.n_alternatives,
        states=m.n_states,
    )
    return UncertaintyAnalysis(
        matrix=m,
        maximax=maximax(m),
        minimax=minimax_of_row_mins(m),
        maximin=maximin_of_row_maxes(m),
        hurwicz_optimistic=hurwicz(m, config.alpha_optimistic),
        hurwicz_pessimistic=hurwicz(m, config.alpha_pessimistic),
        savage=savage(m),
        worst_case_view=config.worst_case_view,
    )


def analyze_risk(
    matrix: MatrixLike,
    probabilities: ProbabilitiesLike,
    config: Optional[AnalysisConfig] = None,
) -> RiskAnalysis:
    """
    Compute every criterion for a decision under risk.

    Raises:
        ShapeError: If the matrix is malformed or the probability count
            differs from the column count
        RangeError: If the probabilities are not a distribution
    """
    config = config or AnalysisConfig()
    m = as_payoff_matrix(matrix)
    p = as_probability_vector(probabilities, m.n_states)

    logger.info(
        "analysis_started",
        context="risk",
        alternatives=m.n_alternatives,
        states=m.n_states,
    )
    return RiskAnalysis(
        matrix=m,
        probabilities=p,
        bayesian=bayesian(m, p),
        min_variance=min_variance(m, p),
        threshold=max_prob_above_threshold(m, p, config.threshold),
        modal=modal(m, p),
    )
