# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Slot schema normalization.

A slot schema maps slot names to cardinality constraints. The raw form is
any mapping (its insertion order is significant); the normalized form is a
SlotSchema, an immutable ordered sequence of (name, Bounds) pairs.

Constraint forms accepted for each slot:
    - {'min': 1, 'max': 1}: explicit bounds, either key may be omitted
    - Bounds(1, 1) or a preset (OPTIONAL, OPTIONALS, REQUIRED, REQUIREDS)
    - None: no constraint at all

The compact string grammar used by the genro builders for children specs is
also supported through parse_slots():
    - 'icon' → any number
    - 'icon[1]' → exactly 1
    - 'tab[1:]' → at least 1
    - 'footer[:1]' → at most 1
    - 'item[2:5]' → between 2 and 5
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from numbers import Real
from types import MappingProxyType
from typing import Any

from genro_toolbox import smartsplit

from .errors import ReservedSlotError, SchemaTypeError

REST = "rest"

DEFAULT_MIN = 0
DEFAULT_MAX = math.inf

EMPTY_SCHEMA: Mapping[str, Any] = MappingProxyType({})

_SLOT_SPEC_RE = re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)\s*(?:\[(\d*)(?:(:)(\d*))?\])?$")


@dataclass(frozen=True)
class Bounds:
    """Inclusive cardinality range of a slot."""

    min: Any = DEFAULT_MIN
    max: Any = DEFAULT_MAX

    def get(self, kind: str, default: Any = None) -> Any:
        """Mapping-style access so Bounds can stand in for a constraint dict."""
        if kind in ("min", "max"):
            return getattr(self, kind)
        return default


OPTIONAL = Bounds(0, 1)
OPTIONALS = Bounds(0)
REQUIRED = Bounds(1, 1)
REQUIREDS = Bounds(1)

_DEFAULTS = MappingProxyType({"min": DEFAULT_MIN, "max": DEFAULT_MAX})


def is_valid_number(value: Any) -> bool:
    """True if value is a real number usable as a bound (bool and NaN excluded)."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return not math.isnan(value)


def effective_bound(spec: Mapping[str, Any] | Bounds | None, kind: str) -> Any:
    """Return the declared bound of the given kind, or its default.

    Args:
        spec: The slot constraint (mapping, Bounds or None).
        kind: 'min' or 'max'.

    Raises:
        ValueError: If kind is neither 'min' nor 'max'.
    """
    if kind not in _DEFAULTS:
        raise ValueError(f"Unknown bound kind: {kind!r}")
    value = spec.get(kind) if spec is not None else None
    return value if is_valid_number(value) else _DEFAULTS[kind]


class SlotSchema:
    """Normalized, immutable slot schema.

    Iteration yields slot names in declaration order; indexing by name
    returns the slot Bounds.
    """

    __slots__ = ("_items", "_index")

    def __init__(self, items: tuple[tuple[str, Bounds], ...] = ()) -> None:
        self._items = tuple(items)
        self._index = {name: bounds for name, bounds in self._items}

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __getitem__(self, name: str) -> Bounds:
        return self._index[name]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SlotSchema):
            return self._items == other._items
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        inner = ", ".join(f"{name}={bounds.min}..{bounds.max}" for name, bounds in self._items)
        return f"SlotSchema({inner})"

    def items(self) -> tuple[tuple[str, Bounds], ...]:
        """Return the (name, Bounds) pairs in declaration order."""
        return self._items


def _check_slot_name(name: Any) -> None:
    if not isinstance(name, str) or not name:
        raise SchemaTypeError(f"slot names must be non-empty strings, got {name!r}")
    if name == REST:
        raise ReservedSlotError(f"'{REST}' is reserved for unmatched nodes and cannot be a slot")


def normalize_schema(schema: Any) -> SlotSchema:
    """Resolve the effective bounds of every slot of a raw schema.

    Args:
        schema: A mapping of slot name to constraint, or a SlotSchema
            (returned as is).

    Returns:
        The SlotSchema, in the mapping's insertion order.

    Raises:
        SchemaTypeError: If schema is not a mapping, a name is not a
            non-empty string, or a constraint has an unsupported type.
        ReservedSlotError: If a slot is named 'rest'.
    """
    if isinstance(schema, SlotSchema):
        return schema
    if schema is None or not isinstance(schema, Mapping):
        raise SchemaTypeError("schema must be an object")

    items = []
    for name, spec in schema.items():
        _check_slot_name(name)
        if spec is not None and not isinstance(spec, (Mapping, Bounds)):
            raise SchemaTypeError(
                f"constraint of slot '{name}' must be a mapping, got {type(spec).__name__}"
            )
        bounds = Bounds(effective_bound(spec, "min"), effective_bound(spec, "max"))
        items.append((name, bounds))
    return SlotSchema(tuple(items))


def parse_slot_spec(spec: str) -> tuple[str, Bounds]:
    """Parse a single compact slot spec such as 'icon[1]' or 'tab[1:]'.

    Raises:
        SchemaTypeError: If the spec does not follow the 'name[n:m]' grammar.
    """
    if not isinstance(spec, str):
        raise SchemaTypeError(f"Invalid slot specification: {spec!r}")
    match = _SLOT_SPEC_RE.match(spec.strip())
    if match is None:
        raise SchemaTypeError(f"Invalid slot specification: '{spec}'")
    name, low, colon, high = match.groups()
    if low is None:
        return name, Bounds()
    if colon is None:
        if not low:
            raise SchemaTypeError(f"Invalid slot specification: '{spec}'")
        count = int(low)
        return name, Bounds(count, count)
    min_c = int(low) if low else DEFAULT_MIN
    max_c = int(high) if high else DEFAULT_MAX
    return name, Bounds(min_c, max_c)


def parse_slots(spec: str) -> dict[str, Bounds]:
    """Parse a comma-separated compact spec into an ordered schema mapping.

    Raises:
        SchemaTypeError: If spec is not a string, an item is malformed, or a
            slot name appears twice.

    Example:
        >>> parse_slots('icon[1], tab[1:]')
        {'icon': Bounds(min=1, max=1), 'tab': Bounds(min=1, max=inf)}
    """
    if not isinstance(spec, str):
        raise SchemaTypeError(f"Invalid slot specification: {spec!r}")
    result: dict[str, Bounds] = {}
    for item in smartsplit(spec, ","):
        if not item.strip():
            continue
        name, bounds = parse_slot_spec(item)
        if name in result:
            raise SchemaTypeError(f"Slot '{name}' is declared more than once in '{spec}'")
        result[name] = bounds
    return result
