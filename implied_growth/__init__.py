"""Implied growth rate calculator built on the Gordon Growth Model."""

from .model import (
    D1_TOLERANCE,
    PROJECTION_YEARS,
    CashflowPoint,
    GrowthInputs,
    GrowthModelResult,
    compute,
)
from .validation import is_computable, validate_inputs

__all__ = [
    "D1_TOLERANCE",
    "PROJECTION_YEARS",
    "CashflowPoint",
    "GrowthInputs",
    "GrowthModelResult",
    "compute",
    "is_computable",
    "validate_inputs",
]
