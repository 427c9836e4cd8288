# -*- coding: utf-8 -*-
"""
Item ranking for constructive heuristics.

Direction rules (fixed):
  - value   -> descending (most valuable first)
  - weight  -> ascending  (lightest first)
  - density -> descending (value per unit weight, highest first)

Ties keep input order: Python's sort is stable, including with reverse=True.
"""

from __future__ import annotations
from typing import Dict, List, Sequence

from knapsack01.business_objects.items import Item
from .features import build_feature_column

# key -> descending?
RANKING_DIRECTIONS: Dict[str, bool] = {
    "value": True,
    "weight": False,
    "density": True,
}


def rank_items(items: Sequence[Item], key: str) -> List[int]:
    """
    Return item indices ordered by `key` following the direction rules.

    Raises
    ------
    ValueError
        If `key` is not one of RANKING_DIRECTIONS.
    """
    if key not in RANKING_DIRECTIONS:
        raise ValueError(
            f"Unknown ranking key '{key}'. "
            f"Allowed: {sorted(RANKING_DIRECTIONS)}"
        )
    column = build_feature_column(items, key)
    return sorted(range(len(items)), key=lambda i: column[i], reverse=RANKING_DIRECTIONS[key])


def density_order(items: Sequence[Item]) -> List[int]:
    """Item indices by non-increasing value density (the branch-and-bound order)."""
    return rank_items(items, "density")
