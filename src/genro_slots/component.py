# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""SlotsComponent - declarative slot contract for parent elements.

Subclasses declare their slots once, as a class attribute:

    class Card(SlotsComponent):
        _slots = 'icon[1], title[:1], action'

    class Tabs(SlotsComponent):
        _slots = {'tab': REQUIREDS, 'toolbar': OPTIONAL}

The declaration is normalized when the class is created, so a malformed
schema fails at import time rather than on first use.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .schema import SlotSchema, normalize_schema, parse_slots
from .slots import split_children


class SlotsComponent:
    """Base class for components whose children are split into slots."""

    _slots: Mapping[str, Any] | str = {}
    slot_schema: SlotSchema = SlotSchema()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Normalize the _slots declared by the subclass."""
        super().__init_subclass__(**kwargs)

        # Inherit the parent schema when _slots is not redeclared
        if "_slots" not in cls.__dict__:
            return

        declared = cls._slots
        if isinstance(declared, str):
            declared = parse_slots(declared)
        cls.slot_schema = normalize_schema(declared)

    @classmethod
    def split_children(cls, children: Any) -> dict[str, list[Any]]:
        """Split children according to the class slots.

        Raises:
            CardinalityError: If a slot count is out of bounds.
        """
        return split_children(children, cls.slot_schema)
