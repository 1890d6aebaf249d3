from __future__ import annotations

import logging

import pytest

from mainapp import ArithmeticUnit, add
from mainapp.policy import INT_WIDTH_ENV, OVERFLOW_MODE_ENV, OverflowPolicy, runtime_overflow_policy


@pytest.mark.integration
def test_wrapped_overflow_is_logged(caplog):
    unit = ArithmeticUnit(policy=OverflowPolicy(mode="wrap", width_bits=8))
    with caplog.at_level(logging.DEBUG, logger="mainapp.primitives.addition"):
        assert unit.add(127, 1) == -128
    assert "wrapped" in caplog.text


@pytest.mark.integration
def test_shared_add_tracks_environment_and_overrides(monkeypatch):
    monkeypatch.setenv(OVERFLOW_MODE_ENV, "saturate")
    monkeypatch.setenv(INT_WIDTH_ENV, "16")
    assert add(32767, 1) == 32767

    with runtime_overflow_policy(OverflowPolicy(mode="wrap", width_bits=16)):
        assert add(32767, 1) == -32768

    assert add(-32768, -1) == -32768


@pytest.mark.integration
def test_pinned_policy_ignores_environment(monkeypatch):
    monkeypatch.setenv(OVERFLOW_MODE_ENV, "wrap")
    unit = ArithmeticUnit(policy=OverflowPolicy())
    with pytest.raises(OverflowError):
        unit.add(2**63 - 1, 1)
