"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from enumcodec import U64, Constant, EncodingLayout, Field, Unit, analyze


@pytest.fixture
def scenario_a_layout() -> EncodingLayout:
    """A (unit), B (u64 payload), C (unit), auto-numbered from 0."""
    return analyze([Unit("A"), Field("B", U64), Unit("C")], name="ScenarioA")


@pytest.fixture
def scenario_b_layout() -> EncodingLayout:
    """A pinned to 9, then three unit variants."""
    return analyze(
        [Constant("A", 9), Unit("B"), Unit("C"), Unit("D")],
        name="ScenarioB",
    )
