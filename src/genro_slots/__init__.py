# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""genro_slots - split a parent's children into named, cardinality-checked slots.

A slot schema declares, in order, the slots a parent element accepts and how
many elements each may hold. Children are assigned to the first slot whose
marker they carry; children matching no slot end up in 'rest'.

Example:
    >>> from genro_slots import MarkedNode, REQUIRED, split_children
    >>>
    >>> icon = MarkedNode('star', icon=True)
    >>> text = MarkedNode('label')
    >>> split_children([icon, [None, text]], {'icon': REQUIRED})
    {'iconChildren': [MarkedNode('star')], 'rest': [MarkedNode('label')]}

Compact declarations use the same grammar as builder children specs:
    >>> split_children(nodes, parse_slots('icon[1], tab[1:], footer[:1]'))
"""

from genro_slots.classifier import classify_nodes, result_key
from genro_slots.component import SlotsComponent
from genro_slots.errors import (
    CardinalityError,
    ReservedSlotError,
    SchemaTypeError,
    SlotsError,
)
from genro_slots.nodes import MarkedNode, SlotNode, flatten_nodes, has_marker
from genro_slots.schema import (
    DEFAULT_MAX,
    DEFAULT_MIN,
    EMPTY_SCHEMA,
    OPTIONAL,
    OPTIONALS,
    REQUIRED,
    REQUIREDS,
    REST,
    Bounds,
    SlotSchema,
    effective_bound,
    is_valid_number,
    normalize_schema,
    parse_slot_spec,
    parse_slots,
)
from genro_slots.slots import split_children
from genro_slots.validator import check_bound, validate_cardinality

__version__ = "0.1.0"

__all__ = [
    "split_children",
    "SlotsComponent",
    "normalize_schema",
    "effective_bound",
    "is_valid_number",
    "parse_slot_spec",
    "parse_slots",
    "SlotSchema",
    "Bounds",
    "OPTIONAL",
    "OPTIONALS",
    "REQUIRED",
    "REQUIREDS",
    "DEFAULT_MIN",
    "DEFAULT_MAX",
    "EMPTY_SCHEMA",
    "REST",
    "flatten_nodes",
    "has_marker",
    "SlotNode",
    "MarkedNode",
    "classify_nodes",
    "result_key",
    "validate_cardinality",
    "check_bound",
    "SlotsError",
    "SchemaTypeError",
    "ReservedSlotError",
    "CardinalityError",
]
