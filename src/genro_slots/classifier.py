# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Assignment of flattened nodes to slots."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .nodes import has_marker
from .schema import REST, SlotSchema


def result_key(name: str) -> str:
    """Key of a slot in the classification result: 'icon' → 'iconChildren'."""
    return f"{name}Children"


def classify_nodes(nodes: Iterable[Any], schema: SlotSchema) -> dict[str, list[Any]]:
    """Distribute nodes among the schema slots.

    Each node goes to the first slot, in declaration order, whose marker it
    carries; nodes matching no slot go to 'rest'. Every slot key and 'rest'
    are present in the result even when empty.

    Args:
        nodes: Flat sequence of nodes (see flatten_nodes).
        schema: The normalized slot schema.

    Returns:
        Dict mapping result_key(slot) and 'rest' to ordered node lists.
    """
    names = list(schema)
    result: dict[str, list[Any]] = {result_key(name): [] for name in names}
    result[REST] = []

    for node in nodes:
        slot = next((name for name in names if has_marker(node, name)), None)
        result[REST if slot is None else result_key(slot)].append(node)

    return result
