"""Hermite interpolation engine and its building blocks."""

from .dataset import ExpandedNode, Node
from .errors import ConfluenceError, DuplicateError, ObservationUnavailable
from .events import EventHub, HermiteObserver, StepEvent
from .hermite_config import HermiteConfig
from .hermite_interpolation import HermiteInterpolation

__all__ = [
    "HermiteInterpolation",
    "HermiteConfig",
    "Node",
    "ExpandedNode",
    "EventHub",
    "HermiteObserver",
    "StepEvent",
    "DuplicateError",
    "ConfluenceError",
    "ObservationUnavailable",
]
