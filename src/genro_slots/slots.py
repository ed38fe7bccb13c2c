# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""split_children: classify nodes into slots and validate slot cardinality."""

from __future__ import annotations

from typing import Any

from .classifier import classify_nodes
from .nodes import flatten_nodes
from .schema import EMPTY_SCHEMA, normalize_schema
from .validator import validate_cardinality


def split_children(nodes: Any = None, schema: Any = EMPTY_SCHEMA) -> dict[str, list[Any]]:
    """Split nodes into the slots declared by schema.

    Args:
        nodes: A node, None, or a nested collection of nodes.
        schema: Mapping of slot name to {'min': n, 'max': m} (either optional),
            Bounds, None, or a SlotSchema. Order of declaration decides which
            slot wins when a node carries several markers.

    Returns:
        Dict with an '<slot>Children' list for every slot plus 'rest'.

    Raises:
        SchemaTypeError: If schema is not a valid mapping.
        ReservedSlotError: If a slot is named 'rest'.
        CardinalityError: If a slot count is out of bounds.

    Example:
        >>> from genro_slots import MarkedNode, REQUIRED
        >>> icon, text = MarkedNode('i', icon=True), MarkedNode('t')
        >>> split_children([icon, text], {'icon': REQUIRED})
        {'iconChildren': [MarkedNode('i')], 'rest': [MarkedNode('t')]}
    """
    slot_schema = normalize_schema(schema)
    result = classify_nodes(flatten_nodes(nodes), slot_schema)
    validate_cardinality(result, slot_schema)
    return result
