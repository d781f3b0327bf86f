"""Helpers for reshaping joined query results."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from typing import TypeVar

T = TypeVar("T")
V = TypeVar("V")
K = TypeVar("K", bound=Hashable)


def get_one_to_many(
    items: Sequence[T], subitems: Sequence[V], get_id: Callable[[T], K]
) -> tuple[list[T], list[list[V]]]:
    """Group parallel rows into distinct items, each with its list of subitems.

    Items keep the order in which their id was first seen; a later item with a
    seen id contributes only its subitem. Extra subitems beyond ``items`` are
    ignored.
    """
    if len(subitems) < len(items):
        raise ValueError("fewer subitems than items")
    index: dict[K, int] = {}
    grouped_items: list[T] = []
    grouped_subitems: list[list[V]] = []
    for item, subitem in zip(items, subitems):
        key = get_id(item)
        position = index.get(key)
        if position is None:
            index[key] = len(grouped_items)
            grouped_items.append(item)
            grouped_subitems.append([subitem])
        else:
            grouped_subitems[position].append(subitem)
    return grouped_items, grouped_subitems