"""Criteria module - Decision rules under uncertainty and under risk."""

from decision_criteria.criteria.results import (
    BayesianResult,
    Criterion,
    CriterionResult,
    HurwiczResult,
    HurwiczRow,
    MaximaxResult,
    MaximinResult,
    MinimaxResult,
    MinVarianceResult,
    ModalResult,
    SavageResult,
    ThresholdResult,
)
from decision_criteria.criteria.uncertainty import (
    hurwicz,
    maximax,
    maximin_of_row_maxes,
    minimax_of_row_mins,
    savage,
)
from decision_criteria.criteria.risk import (
    bayesian,
    max_prob_above_threshold,
    min_variance,
    modal,
)

__all__ = [
    # Results
    "Criterion",
    "CriterionResult",
    "MaximaxResult",
    "MinimaxResult",
    "MaximinResult",
    "HurwiczResult",
    "HurwiczRow",
    "SavageResult",
    "BayesianResult",
    "MinVarianceResult",
    "ThresholdResult",
    "ModalResult",
    # Under uncertainty
    "maximax",
    "minimax_of_row_mins",
    "maximin_of_row_maxes",
    "hurwicz",
    "savage",
    # Under risk
    "bayesian",
    "min_variance",
    "max_prob_above_threshold",
    "modal",
]
