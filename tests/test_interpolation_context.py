"""Tests for hermitekit.interpolation.context."""

import pytest

from hermitekit.interpolation.context import CallContext
from hermitekit.interpolation.dataset import Node, expand_nodes
from hermitekit.numeric.adapters import RealNumber as R


def test_emit_without_hub_is_a_no_op():
    """Tests that a context without a hub drops events."""
    CallContext().emit("step", None)


def test_emit_forwards_to_hub(recorder):
    """Tests that events reach the hub."""
    hub, seen = recorder
    CallContext(events=hub).emit("pre_coefficients", (1,))
    assert seen["pre_coefficients"] == [(1,)]


def test_scratch_state_is_dropped_on_exit():
    """Tests that leaving the context discards nodes and factorials."""
    with CallContext() as ctx:
        ctx.expanded = expand_nodes([Node(R(0.0), R(1.0), [R(1.0)])])
        ctx.factorial(8)
    assert ctx.expanded == []
    assert ctx.factorial.highest_order == 1


def test_scratch_state_is_dropped_on_error():
    """Tests that the error path also discards scratch state."""
    with pytest.raises(RuntimeError):
        with CallContext() as ctx:
            ctx.expanded = expand_nodes([Node(R(0.0), R(1.0))])
            raise RuntimeError("boom")
    assert ctx.expanded == []


def test_contexts_do_not_share_state():
    """Tests that two contexts have independent scratch state."""
    a, b = CallContext(), CallContext()
    a.factorial(5)
    assert b.factorial.highest_order == 1
    assert a.expanded is not b.expanded
