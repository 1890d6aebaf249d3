from __future__ import annotations

import pytest
pytest.importorskip("hypothesis")
from hypothesis import given, strategies as st

from mainapp import add

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Operands whose sum always fits in int64.
half_range = st.integers(min_value=INT64_MIN // 2, max_value=INT64_MAX // 2)


@pytest.mark.unit
@given(half_range, half_range)
def test_add_matches_builtin_sum(a, b):
    assert add(a, b) == a + b


@pytest.mark.unit
@given(half_range, half_range)
def test_add_is_commutative(a, b):
    assert add(a, b) == add(b, a)


@pytest.mark.unit
@given(st.integers(min_value=INT64_MIN, max_value=INT64_MAX))
def test_zero_is_identity(a):
    assert add(a, 0) == a
    assert add(0, a) == a
