"""Unit tests for public API."""

from __future__ import annotations

import hermitekit
from hermitekit import HermiteInterpolation, HermiteKit


def test_kits_importable_from_top_level():
    """Test that the public entry points can be imported from top level."""
    assert HermiteKit is not None
    assert HermiteInterpolation is not None


def test_public_all_contains_entry_points():
    """Test that __all__ contains the expected public names."""
    expected = {
        "HermiteKit",
        "HermiteInterpolation",
        "HermiteConfig",
        "EventHub",
        "DuplicateError",
        "RealNumber",
        "ComplexNumber",
        "RationalNumber",
    }
    assert expected.issubset(set(hermitekit.__all__))
    for name in hermitekit.__all__:
        assert hasattr(hermitekit, name)


def test_logger_name():
    """Test that the package logger is the 'hermitekit' logger."""
    from hermitekit.logger import hermitekit_logger, logger_name

    assert logger_name == "hermitekit"
    assert hermitekit_logger.name == "hermitekit"
