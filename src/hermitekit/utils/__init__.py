"""Utility functions for HermiteKit package."""

from .concurrency import normalize_workers, parallel_execute
from .validate import validate_derivatives, validate_samples

__all__ = [
    "normalize_workers",
    "parallel_execute",
    "validate_derivatives",
    "validate_samples",
]
