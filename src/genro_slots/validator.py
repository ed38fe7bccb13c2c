# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Cardinality checks over a classification result."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .classifier import result_key
from .errors import CardinalityError
from .schema import SlotSchema


def check_bound(kind: str, group: str, count: int, limit: Any) -> None:
    """Raise CardinalityError if count violates the given bound."""
    if kind == "min":
        ok = count >= limit
    elif kind == "max":
        ok = count <= limit
    else:
        raise ValueError(f"Unknown bound kind: {kind!r}")
    if not ok:
        raise CardinalityError(kind, group, limit, count)


def validate_cardinality(result: Mapping[str, list[Any]], schema: SlotSchema) -> None:
    """Check every slot count against its bounds, stopping at the first failure.

    Slots are checked in declaration order, min before max. The 'rest'
    group is never checked.

    Raises:
        CardinalityError: On the first violated bound.
    """
    for name, bounds in schema.items():
        count = len(result[result_key(name)])
        check_bound("min", name, count, bounds.min)
        check_bound("max", name, count, bounds.max)
