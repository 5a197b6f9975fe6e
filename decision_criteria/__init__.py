"""
Decision Criteria Engine

Choosing among alternatives whose outcomes depend on an uncertain state of
nature, using classical decision-theory criteria.

Under uncertainty (no probabilities known): Maximax, Minimax, Maximin,
Hurwicz and Savage. Under risk (a distribution over states is known):
Bayesian expected value, minimum variance, probability above a threshold,
and the modal criterion.

Every criterion is a pure function of its inputs. When several
alternatives tie, the lowest row index is reported.
"""

from decision_criteria.exceptions import DecisionCriteriaError, ShapeError, RangeError
from decision_criteria.matrix.payoff import PayoffMatrix, ProbabilityVector, validate
from decision_criteria.criteria.results import Criterion, CriterionResult
from decision_criteria.criteria.uncertainty import (
    maximax,
    minimax_of_row_mins,
    maximin_of_row_maxes,
    hurwicz,
    savage,
)
from decision_criteria.criteria.risk import (
    bayesian,
    min_variance,
    max_prob_above_threshold,
    modal,
)
from decision_criteria.config import AnalysisConfig
from decision_criteria.analysis import (
    UncertaintyAnalysis,
    RiskAnalysis,
    analyze_uncertainty,
    analyze_risk,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "DecisionCriteriaError",
    "ShapeError",
    "RangeError",
    # Matrix model
    "PayoffMatrix",
    "ProbabilityVector",
    "validate",
    # Results
    "Criterion",
    "CriterionResult",
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
    # Analysis bundles
    "AnalysisConfig",
    "UncertaintyAnalysis",
    "RiskAnalysis",
    "analyze_uncertainty",
    "analyze_risk",
]
