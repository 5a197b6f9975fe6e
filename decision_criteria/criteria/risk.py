"""
Criteria for decisions under risk.

A probability distribution over states of nature is known. Every function
takes the payoff matrix plus a probability vector whose length must equal
the matrix's column count.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np
import structlog

from decision_criteria.criteria.results import (
    BayesianResult,
    MinVarianceResult,
    ModalResult,
    ThresholdResult,
)
from decision_criteria.criteria.selection import first_index_of_max, first_index_of_min
from decision_criteria.matrix.payoff import (
    MatrixLike,
    PayoffMatrix,
    ProbabilitiesLike,
    as_payoff_matrix,
    as_probability_vector,
)

logger = structlog.get_logger(__name__)


def _prepare(
    matrix: MatrixLike,
    probabilities: ProbabilitiesLike,
) -> Tuple[PayoffMatrix, np.ndarray]:
    m = as_payoff_matrix(matrix)
    p = as_probability_vector(probabilities, m.n_states)
    return m, p.values


def _expected_values(values: np.ndarray, probs: np.ndarray) -> np.ndarray:
    return (values * probs[np.newaxis, :]).sum(axis=1)


def bayesian(matrix: MatrixLike, probabilities: ProbabilitiesLike) -> BayesianResult:
    """
    Bayesian (expected value) criterion.

    Args:
        matrix: Payoff matrix
        probabilities: Distribution over states of nature

    Returns:
        BayesianResult; decision is the first row with the largest
        expected value

    Raises:
        ShapeError: If the probability count differs from the column count
    """
    m, probs = _prepare(matrix, probabilities)
    expected = _expected_values(m.values, probs).tolist()
    decision = first_index_of_max(expected)

    logger.debug("criterion_computed", criterion="bayesian", decision_index=decision)
    return BayesianResult(
        expected=expected,
        best=expected[decision],
        decision_index=decision,
    )


def min_variance(matrix: MatrixLike, probabilities: ProbabilitiesLike) -> MinVarianceResult:
    """
    Minimum variance criterion.

    Variance of row i is sum_j p_j * (x_ij - mean_i)^2 with mean_i the
    row's expected value. Decision is the first row with the smallest
    variance.
    """
    m, probs = _prepare(matrix, probabilities)
    means = _expected_values(m.values, probs)
    deviations = m.values - means[:, np.newaxis]
    variances = (probs[np.newaxis, :] * deviations ** 2).sum(axis=1).tolist()
    decision = first_index_of_min(variances)

    logger.debug("criterion_computed", criterion="min_variance", decision_index=decision)
    return MinVarianceResult(
        means=means.tolist(),
        variances=variances,
        min_variance=variances[decision],
        decision_index=decision,
    )


def max_prob_above_threshold(
    matrix: MatrixLike,
    probabilities: ProbabilitiesLike,
    threshold: float,
) -> ThresholdResult:
    """
    Maximize the probability of beating a threshold.

    Each row scores the total probability of its outcomes strictly greater
    than `threshold`. A row with no such outcome scores 0.
    """
    m, probs = _prepare(matrix, probabilities)
    threshold = float(threshold)
    above = m.values > threshold
    scores = np.where(above, probs[np.newaxis, :], 0.0).sum(axis=1).tolist()
    decision = first_index_of_max(scores)

    logger.debug(
        "criterion_computed",
        criterion="threshold",
        threshold=threshold,
        decision_index=decision,
    )
    return ThresholdResult(
        threshold=threshold,
        scores=scores,
        max=scores[decision],
        decision_index=decision,
    )


def modal(matrix: MatrixLike, probabilities: ProbabilitiesLike) -> ModalResult:
    """
    Modal criterion.

    The modal value of a row is its largest probability-weighted outcome,
    with the running maximum starting at 0. Rows whose weighted outcomes
    are all negative therefore report 0.
    """
    m, probs = _prepare(matrix, probabilities)
    weighted = m.values * probs[np.newaxis, :]
    modal_values = weighted.max(axis=1, initial=0.0).tolist()
    decision = first_index_of_max(modal_values)

    logger.debug("criterion_computed", criterion="modal", decision_index=decision)
    return ModalResult(
        modal_values=modal_values,
        max=modal_values[decision],
        decision_index=decision,
    )
