# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Exceptions raised while normalizing a slot schema or validating slots."""

from __future__ import annotations

import math
from typing import Any


class SlotsError(Exception):
    """Base class for genro_slots errors."""

    pass


class SchemaTypeError(SlotsError, TypeError):
    """The schema is not a mapping from slot name to constraint."""

    pass


class ReservedSlotError(SlotsError, ValueError):
    """A slot uses the name reserved for the catch-all group."""

    pass


def format_limit(limit: Any) -> str:
    """Render a bound for messages.

    Integral floats lose their '.0'; infinity prints as Python spells it,
    so a {'min': math.inf} bound reads 'at least inf'.
    """
    if isinstance(limit, float) and math.isfinite(limit) and limit.is_integer():
        return str(int(limit))
    return str(limit)


class CardinalityError(SlotsError, ValueError):
    """A slot holds fewer or more elements than its bounds allow.

    Attributes:
        kind: 'min' or 'max', the bound that failed.
        group: The slot name.
        limit: The effective bound.
        actual: The number of elements assigned to the slot.
    """

    def __init__(self, kind: str, group: str, limit: Any, actual: int) -> None:
        self.kind = kind
        self.group = group
        self.limit = limit
        self.actual = actual
        super().__init__(self._message())

    def _message(self) -> str:
        plural = "" if self.limit == 1 else "s"
        ending = f"{format_limit(self.limit)} `{self.group}` element{plural}"
        if self.kind == "min":
            return f"Must have at least {ending}"
        return f"Cannot have more than {ending}"
