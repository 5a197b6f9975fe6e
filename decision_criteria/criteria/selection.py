"""
Decision selection helpers.

Tie-break policy: when several alternatives attain the optimal score, the
lowest row index wins. Every criterion derives its decision index through
these helpers so the policy holds in one place.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np


def first_index_of_max(values: Sequence[float]) -> int:
    """Index of the largest value, lowest index among ties."""
    # np.argmax returns the first occurrence
    return int(np.argmax(np.asarray(values, dtype=np.float64)))


def first_index_of_min(values: Sequence[float]) -> int:
    """Index of the smallest value, lowest index among ties."""
    return int(np.argmin(np.asarray(values, dtype=np.float64)))


def indices_equal_to(values: Sequence[float], target: float) -> List[int]:
    """All indices whose value equals `target`, in row order."""
    return [i for i, v in enumerate(values) if v == target]
