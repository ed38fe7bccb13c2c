# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Node access: marker lookup and flattening of nested node collections.

Nodes are opaque. The only thing slot classification needs from a node is
whether it carries a truthy marker with a given name, answered by
has_marker(). Nodes may implement the SlotNode protocol themselves; plain
mappings, genro BagNodes (markers in ``attr``) and prop-bag objects (markers
in ``props``) are understood as they are.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Protocol, runtime_checkable

from genro_toolbox import safe_is_instance

# Qualified names of genro Bag across genro-bag package layouts
BAG_CLASS_NAMES = ("genro_bag.bag.Bag", "genro_bag.bag._core.Bag")


@runtime_checkable
class SlotNode(Protocol):
    """A node able to answer marker queries by itself."""

    def has_marker(self, name: str) -> bool: ...


class MarkedNode:
    """Minimal concrete node: a label plus a bag of markers.

    Example:
        >>> icon = MarkedNode('star', icon=True)
        >>> icon.has_marker('icon')
        True
    """

    __slots__ = ("label", "markers")

    def __init__(self, label: str | None = None, **markers: Any) -> None:
        self.label = label
        self.markers = markers

    def has_marker(self, name: str) -> bool:
        return bool(self.markers.get(name))

    def __repr__(self) -> str:
        return f"MarkedNode({self.label!r})"


def _is_null(value: Any) -> bool:
    return value is None or value is True or value is False


def has_marker(node: Any, name: str) -> bool:
    """Return True if node carries a truthy marker called name."""
    # classes defining has_marker are values, not nodes
    if isinstance(node, SlotNode) and not isinstance(node, type):
        return bool(node.has_marker(name))
    if isinstance(node, Mapping):
        return bool(node.get(name))
    for bag_attr in ("attr", "props"):
        markers = getattr(node, bag_attr, None)
        if isinstance(markers, Mapping):
            return bool(markers.get(name))
    return False


def _is_container(value: Any) -> bool:
    """True for values whose items are nodes rather than a node themselves."""
    if isinstance(value, (list, tuple, Iterator)):
        return True
    # a genro Bag iterates over its BagNodes
    return any(safe_is_instance(value, name) for name in BAG_CLASS_NAMES)


def flatten_nodes(nodes: Any) -> list[Any]:
    """Flatten a possibly nested node collection into an ordered list.

    Lists, tuples, iterators and genro Bags are expanded at any depth, left
    to right. None, True and False are dropped wherever they appear. Any
    other value (strings and mappings included) is a node.

    Args:
        nodes: A single node, None, or a nested collection of nodes.

    Returns:
        The flat list of nodes.
    """
    result: list[Any] = []
    stack: list[Iterator[Any]] = [iter((nodes,))]
    while stack:
        try:
            item = next(stack[-1])
        except StopIteration:
            stack.pop()
            continue
        if _is_null(item):
            continue
        if _is_container(item):
            stack.append(iter(item))
        else:
            result.append(item)
    return result
