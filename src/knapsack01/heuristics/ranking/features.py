# -*- coding: utf-8 -*-
"""
Per-item ranking keys for constructive (greedy) ordering.

This module computes the scalar each ranking scheme sorts by.
It is intentionally pure/stateless and performs no mutation or I/O.
"""

from __future__ import annotations
from typing import Dict, List, Sequence

from knapsack01.business_objects.items import Item


def compute_item_features(item: Item) -> Dict[str, float]:
    """
    Compute ranking features for a single item.

    Features:
      - value:   raw value
      - weight:  raw weight
      - density: value/weight (see Item.density for the weight == 0 convention)
    """
    return {
        "value": float(item.value),
        "weight": float(item.weight),
        "density": item.density,
    }


def build_feature_column(items: Sequence[Item], key: str) -> List[float]:
    """
    One feature for every item, aligned with `items`.
    """
    return [compute_item_features(it)[key] for it in items]
