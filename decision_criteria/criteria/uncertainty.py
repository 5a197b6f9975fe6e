"""
Criteria for decisions under uncertainty.

No probabilities over states of nature are known. Each criterion reduces
every alternative (row) to a single statistic, then aggregates across rows.
"""

from __future__ import annotations

import numpy as np
import structlog

from decision_criteria.criteria.results import (
    HurwiczResult,
    HurwiczRow,
    MaximaxResult,
    MaximinResult,
    MinimaxResult,
    SavageResult,
)
from decision_criteria.criteria.selection import (
    first_index_of_max,
    first_index_of_min,
    indices_equal_to,
)
from decision_criteria.matrix.payoff import MatrixLike, as_payoff_matrix

logger = structlog.get_logger(__name__)


def maximax(matrix: MatrixLike) -> MaximaxResult:
    """
    Maximax criterion.

    Args:
        matrix: Payoff matrix (validated on entry unless already a PayoffMatrix)

    Returns:
        MaximaxResult with each row's maximum and the largest of them
    """
    m = as_payoff_matrix(matrix)
    per_row_max = m.values.max(axis=1).tolist()
    decision = first_index_of_max(per_row_max)
    overall = per_row_max[decision]

    logger.debug("criterion_computed", criterion="maximax", decision_index=decision)
    return MaximaxResult(
        per_row_max=per_row_max,
        overall=overall,
        decision_index=decision,
        tied_indices=indices_equal_to(per_row_max, overall),
    )


def minimax_of_row_mins(matrix: MatrixLike) -> MinimaxResult:
    """
    Minimax criterion: maximum of the per-row minima.

    Returns:
        MinimaxResult with each row's minimum and the largest of them
    """
    m = as_payoff_matrix(matrix)
    per_row_min = m.values.min(axis=1).tolist()
    decision = first_index_of_max(per_row_min)
    overall = per_row_min[decision]

    logger.debug("criterion_computed", criterion="minimax", decision_index=decision)
    return MinimaxResult(
        per_row_min=per_row_min,
        overall=overall,
        decision_index=decision,
        tied_indices=indices_equal_to(per_row_min, overall),
    )


def maximin_of_row_maxes(matrix: MatrixLike) -> MaximinResult:
    """
    Maximin criterion: minimum of the per-row maxima.

    Computed independently of maximax even though both start from the
    same row maxima.
    """
    m = as_payoff_matrix(matrix)
    per_row_max = m.values.max(axis=1).tolist()
    decision = first_index_of_min(per_row_max)
    overall = per_row_max[decision]

    logger.debug("criterion_computed", criterion="maximin", decision_index=decision)
    return MaximinResult(
        per_row_max=per_row_max,
        overall=overall,
        decision_index=decision,
        tied_indices=indices_equal_to(per_row_max, overall),
    )


def hurwicz(matrix: MatrixLike, alpha: float) -> HurwiczResult:
    """
    Hurwicz criterion.

    Each row scores alpha * max + (1 - alpha) * min. Alpha is expected in
    [0, 1]; values outside are computed as given and only logged.

    Args:
        matrix: Payoff matrix
        alpha: Optimism coefficient

    Returns:
        HurwiczResult with per-row terms and the largest blended value
    """
    m = as_payoff_matrix(matrix)
    alpha = float(alpha)
    if not 0.0 <= alpha <= 1.0:
        logger.warning("hurwicz_alpha_out_of_range", alpha=alpha)

    row_max = m.values.max(axis=1)
    row_min = m.values.min(axis=1)
    blended = alpha * row_max + (1 - alpha) * row_min

    per_row = [
        HurwiczRow(max_value=float(hi), min_value=float(lo), value=float(v))
        for hi, lo, v in zip(row_max, row_min, blended)
    ]
    values = blended.tolist()
    decision = first_index_of_max(values)
    overall = values[decision]

    logger.debug(
        "criterion_computed", criterion="hurwicz", alpha=alpha, decision_index=decision
    )
    return HurwiczResult(
        alpha=alpha,
        per_row=per_row,
        overall=overall,
        decision_index=decision,
        tied_indices=indices_equal_to(values, overall),
    )


def savage(matrix: MatrixLike) -> SavageResult:
    """
    Savage (minimax regret) criterion.

    Regret of a cell is the best payoff in its column minus the cell's
    payoff. The chosen alternative has the smallest worst-case regret.

    Returns:
        SavageResult; its decision index is 1-based
    """
    m = as_payoff_matrix(matrix)
    column_maxima = m.values.max(axis=0)
    regret = column_maxima[np.newaxis, :] - m.values
    per_row_max_regret = regret.max(axis=1).tolist()
    decision = first_index_of_min(per_row_max_regret)

    logger.debug("criterion_computed", criterion="savage", decision_index=decision)
    return SavageResult(
        regret_matrix=regret.tolist(),
        column_maxima=column_maxima.tolist(),
        per_row_max_regret=per_row_max_regret,
        decision_index_1based=decision + 1,
    )
