# -*- coding: utf-8 -*-
"""
Problem model: the immutable input shared by every solver.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Tuple

from .errors import InvalidCapacityError, StateValidationError
from .items import Item


@dataclass(frozen=True)
class Problem:
    """
    Immutable knapsack instance.

    Attributes
    ----------
    items : tuple[Item, ...]
        Items in input order; decision vectors are indexed by this order.
    capacity : int
        Nonnegative capacity limit.
    """
    items: Tuple[Item, ...]
    capacity: int

    def __post_init__(self) -> None:  # type: ignore[override]
        # Accept any sequence but store a tuple so the instance stays hashable/read-only.
        object.__setattr__(self, "items", tuple(self.items))
        for idx, it in enumerate(self.items):
            if not isinstance(it, Item):
                raise StateValidationError(f"Problem.items[{idx}] must be an Item, got {type(it).__name__}.")
        cap = self.capacity
        if isinstance(cap, bool) or not isinstance(cap, int):
            raise InvalidCapacityError(f"Capacity must be an int, got {cap!r}.")
        if cap < 0:
            raise InvalidCapacityError(f"Capacity must be >= 0, got {cap}.")

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[int, int]], capacity: int) -> "Problem":
        """Build from (value, weight) pairs."""
        return cls(items=tuple(Item(value=v, weight=w) for v, w in pairs), capacity=capacity)

    @property
    def n_items(self) -> int:
        return len(self.items)

    @property
    def values(self) -> Tuple[int, ...]:
        return tuple(it.value for it in self.items)

    @property
    def weights(self) -> Tuple[int, ...]:
        return tuple(it.weight for it in self.items)
