"""
Exception hierarchy for the decision criteria engine.

All failures are raised synchronously to the caller. Each error carries a
machine-readable code and a details dict so a presentation layer can render
targeted feedback.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class DecisionCriteriaError(ValueError):
    """Base class for malformed engine input."""

    code = "E1000"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ShapeError(DecisionCriteriaError):
    """
    Matrix or probability vector has the wrong shape.

    Raised for an empty matrix, an empty row, jagged rows, or a probability
    vector whose length differs from the number of states.
    """

    code = "E1001"


class RangeError(DecisionCriteriaError):
    """A value lies outside its documented domain."""

    code = "E1002"
