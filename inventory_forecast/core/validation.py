from __future__ import annotations

from collections.abc import Sequence
from numbers import Real
from typing import Any


def is_number(value: Any) -> bool:
    """True for real numbers other than bool and NaN (infinity is allowed)."""

    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    # NaN is the only real that is not equal to itself
    return value == value


def is_demand_history(value: Any) -> bool:
    """True for list-like sequences; strings and bytes are not demand histories."""

    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def valid_demands(history: Any) -> list[float]:
    """Keep only the non-negative numeric entries of a demand history."""

    if not is_demand_history(history):
        return []
    return [d for d in history if is_number(d) and d >= 0]
