"""Provides all hermitekit methods."""

from importlib.metadata import PackageNotFoundError, version

from hermitekit.hermite_kit import (
    HermiteKit,
    available_numerics,
    batch_coefficients,
    register_numeric,
)
from hermitekit.interpolation import (
    ConfluenceError,
    DuplicateError,
    EventHub,
    HermiteConfig,
    HermiteInterpolation,
    Node,
    ObservationUnavailable,
    StepEvent,
)
from hermitekit.numeric import (
    ComplexNumber,
    Numeric,
    RationalNumber,
    RealNumber,
)

try:
    __version__ = version("hermitekit")
except PackageNotFoundError:
    pass

__all__ = [
    "HermiteKit",
    "HermiteInterpolation",
    "HermiteConfig",
    "Node",
    "EventHub",
    "StepEvent",
    "DuplicateError",
    "ConfluenceError",
    "ObservationUnavailable",
    "Numeric",
    "RealNumber",
    "ComplexNumber",
    "RationalNumber",
    "available_numerics",
    "batch_coefficients",
    "register_numeric",
]
