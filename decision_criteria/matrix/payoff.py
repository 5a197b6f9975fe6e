"""
Payoff matrix and probability vector.

Row i of a payoff matrix is alternative i, column j is state of nature j.
Both containers are validated once on construction and hold read-only
numpy arrays afterwards, so criteria never re-check them.
"""

from __future__ import annotations

from collections.abc import Sequence as SequenceABC
from dataclasses import dataclass
from typing import Any, List, Sequence, Union

import numpy as np
import structlog

from decision_criteria.exceptions import RangeError, ShapeError

logger = structlog.get_logger(__name__)

# Allowed deviation of a probability vector's sum from 1.
PROBABILITY_TOLERANCE = 1e-6


def validate(matrix: Any) -> None:
    """
    Check that a matrix is non-empty and rectangular.

    Args:
        matrix: PayoffMatrix, 2-D array or sequence of row sequences

    Raises:
        ShapeError: If the matrix is empty, a row is empty, or rows
            differ in length
    """
    if isinstance(matrix, PayoffMatrix):
        return

    if isinstance(matrix, np.ndarray):
        if matrix.ndim != 2:
            raise ShapeError(
                f"Payoff matrix must be 2-dimensional, got {matrix.ndim} dimension(s)",
                {"ndim": matrix.ndim},
            )
        n_rows, n_cols = matrix.shape
        if n_rows == 0:
            raise ShapeError("Payoff matrix has no rows")
        if n_cols == 0:
            raise ShapeError("Row 0 is empty", {"row": 0})
        return

    rows = list(matrix)
    if not rows:
        raise ShapeError("Payoff matrix has no rows")

    for i, row in enumerate(rows):
        if isinstance(row, str) or not isinstance(row, (SequenceABC, np.ndarray)):
            raise ShapeError(f"Row {i} is not a sequence of payoffs", {"row": i})

    expected = len(rows[0])
    for i, row in enumerate(rows):
        length = len(row)
        if length == 0:
            raise ShapeError(f"Row {i} is empty", {"row": i})
        if length != expected:
            raise ShapeError(
                f"Row {i} has {length} values, expected {expected}",
                {"row": i, "length": length, "expected": expected},
            )
        for j, cell in enumerate(row):
            if not _is_scalar(cell):
                raise ShapeError(
                    f"Cell ({i}, {j}) is not a single payoff",
                    {"row": i, "column": j},
                )


def _is_scalar(cell: Any) -> bool:
    if isinstance(cell, np.ndarray):
        return cell.ndim == 0
    return isinstance(cell, str) or not isinstance(cell, SequenceABC)


@dataclass(frozen=True, eq=False)
class PayoffMatrix:
    """
    Alternatives x states-of-nature grid of outcome values.

    Attributes:
        values: Read-only float array of shape (n_alternatives, n_states)
    """
    values: np.ndarray

    def __post_init__(self):
        values = self.values
        if not isinstance(values, np.ndarray):
            values = list(values)
        validate(values)
        try:
            arr = np.array(values, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise ShapeError(f"Payoff matrix must hold only real numbers: {e}") from e
        if arr.ndim != 2:
            raise ShapeError(
                f"Payoff matrix must be 2-dimensional, got {arr.ndim} dimension(s)",
                {"ndim": arr.ndim},
            )
        arr.setflags(write=False)
        object.__setattr__(self, "values", arr)

        if not np.all(np.isfinite(arr)):
            logger.warning(
                "non_finite_payoffs",
                count=int(np.count_nonzero(~np.isfinite(arr))),
            )

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "PayoffMatrix":
        """Build a matrix from row sequences, validating the shape."""
        return cls(rows)

    @property
    def n_alternatives(self) -> int:
        return self.values.shape[0]

    @property
    def n_states(self) -> int:
        return self.values.shape[1]

    @property
    def shape(self):
        return self.values.shape

    def row(self, index: int) -> np.ndarray:
        return self.values[index]

    def column(self, index: int) -> np.ndarray:
        return self.values[:, index]

    def to_list(self) -> List[List[float]]:
        return self.values.tolist()

    def __repr__(self) -> str:
        return f"PayoffMatrix({self.n_alternatives}x{self.n_states})"


@dataclass(frozen=True, eq=False)
class ProbabilityVector:
    """
    Probability distribution over states of nature.

    Each entry lies in [0, 1] and the entries sum to 1 within
    PROBABILITY_TOLERANCE.
    """
    values: np.ndarray

    def __post_init__(self):
        arr = np.array(self.values, dtype=np.float64)
        if arr.ndim != 1:
            raise ShapeError(
                f"Probabilities must be 1-dimensional, got {arr.ndim} dimension(s)",
                {"ndim": arr.ndim},
            )
        if arr.size == 0:
            raise ShapeError("Probability vector is empty")

        out_of_range = np.flatnonzero((arr < 0) | (arr > 1))
        if out_of_range.size:
            idx = int(out_of_range[0])
            raise RangeError(
                f"Probability at state {idx} must be 0-1, got {arr[idx]}",
                {"state": idx, "value": float(arr[idx])},
            )

        total = float(arr.sum())
        if not np.isclose(total, 1.0, rtol=0.0, atol=PROBABILITY_TOLERANCE):
            raise RangeError(
                f"Probabilities must sum to 1, got {total}",
                {"sum": total},
            )

        arr.setflags(write=False)
        object.__setattr__(self, "values", arr)

    @classmethod
    def from_values(cls, values: Sequence[float], n_states: int) -> "ProbabilityVector":
        """
        Build a distribution for a matrix with `n_states` columns.

        Raises:
            ShapeError: If the length differs from n_states
            RangeError: If an entry is outside [0, 1] or the sum is not 1
        """
        values = list(values)
        if len(values) != n_states:
            raise ShapeError(
                f"Expected {n_states} probabilities, got {len(values)}",
                {"length": len(values), "expected": n_states},
            )
        return cls(values)

    @classmethod
    def uniform(cls, n_states: int) -> "ProbabilityVector":
        if n_states < 1:
            raise ShapeError("Uniform distribution needs at least one state")
        return cls(np.full(n_states, 1.0 / n_states))

    def __len__(self) -> int:
        return self.values.shape[0]

    def to_list(self) -> List[float]:
        return self.values.tolist()


MatrixLike = Union[PayoffMatrix, np.ndarray, Sequence[Sequence[float]]]
ProbabilitiesLike = Union[ProbabilityVector, np.ndarray, Sequence[float]]


def as_payoff_matrix(matrix: MatrixLike) -> PayoffMatrix:
    """Return `matrix` unchanged if already validated, else validate and wrap it."""
    if isinstance(matrix, PayoffMatrix):
        return matrix
    return PayoffMatrix(matrix)


def as_probability_vector(probabilities: ProbabilitiesLike, n_states: int) -> ProbabilityVector:
    """Validate `probabilities` against a matrix with `n_states` columns."""
    if isinstance(probabilities, ProbabilityVector):
        if len(probabilities) != n_states:
            raise ShapeError(
                f"Expected {n_states} probabilities, got {len(probabilities)}",
                {"length": len(probabilities), "expected": n_states},
            )
        return probabilities
    return ProbabilityVector.from_values(probabilities, n_states)
