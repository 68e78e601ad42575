"""Numeric contract and adapters used by the interpolation engine."""

from .adapters import ComplexNumber, RationalNumber, RealNumber
from .contract import Numeric, require_numeric

__all__ = [
    "Numeric",
    "require_numeric",
    "RealNumber",
    "ComplexNumber",
    "RationalNumber",
]
