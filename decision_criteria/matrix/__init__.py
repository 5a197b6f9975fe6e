"""Matrix module - Payoff matrix and probability vector model."""

from decision_criteria.matrix.payoff import (
    PROBABILITY_TOLERANCE,
    PayoffMatrix,
    ProbabilityVector,
    as_payoff_matrix,
    as_probability_vector,
    validate,
)

__all__ = [
    "PROBABILITY_TOLERANCE",
    "PayoffMatrix",
    "ProbabilityVector",
    "as_payoff_matrix",
    "as_probability_vector",
    "validate",
]
