"""Pytest configuration file with shared fixtures for the interpolation tests."""

from collections import defaultdict

import numpy as np
import pytest

from hermitekit.interpolation.events import EVENT_NAMES, EventHub

__all__ = ["rng", "recorder"]


@pytest.fixture
def rng():
    """Deterministic RNG for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def recorder():
    """Return ``(hub, seen)`` where ``seen[event]`` lists every payload emitted."""
    hub = EventHub()
    seen = defaultdict(list)
    for name in EVENT_NAMES:
        hub.subscribe(name, seen[name].append)
    return hub, seen
