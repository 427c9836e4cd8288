# -*- coding: utf-8 -*-
"""
Item model for the 0/1 knapsack problem.
"""

from __future__ import annotations
from dataclasses import dataclass
from .errors import StateValidationError


def _is_count(x: object) -> bool:
    # bool is an int subclass; a flag is never a valid value/weight
    return isinstance(x, int) and not isinstance(x, bool) and x >= 0


@dataclass(frozen=True)
class Item:
    """
    An item that can be packed at most once.

    Attributes
    ----------
    value : int
        Nonnegative objective contribution if selected.
    weight : int
        Nonnegative weight (capacity consumption).
    """
    value: int
    weight: int

    def __post_init__(self) -> None:  # type: ignore[override]
        if not _is_count(self.value):
            raise StateValidationError(f"Item value must be a nonnegative int, got {self.value!r}.")
        if not _is_count(self.weight):
            raise StateValidationError(f"Item weight must be a nonnegative int, got {self.weight!r}.")

    @property
    def density(self) -> float:
        """
        value/weight; convention for weight == 0:
          - value > 0  -> +inf
          - value == 0 -> 0.0
        """
        if self.weight == 0:
            return float("inf") if self.value > 0 else 0.0
        return self.value / self.weight
