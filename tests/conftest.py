"""Shared pytest fixtures for MainApp tests."""

from __future__ import annotations

from pathlib import Path
import sys

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from mainapp.arithmetic import ArithmeticUnit  # noqa: E402
from mainapp.policy import INT_WIDTH_ENV, OVERFLOW_MODE_ENV  # noqa: E402
from mainapp.primitives.registry import PrimitiveRegistry  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "contract: primitive contract checks")
    config.addinivalue_line("markers", "integration: cross-module tests")


@pytest.fixture(autouse=True)
def _clean_overflow_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(OVERFLOW_MODE_ENV, raising=False)
    monkeypatch.delenv(INT_WIDTH_ENV, raising=False)
    yield


@pytest.fixture
def registry() -> PrimitiveRegistry:
    return PrimitiveRegistry()


@pytest.fixture
def unit() -> ArithmeticUnit:
    return ArithmeticUnit()
