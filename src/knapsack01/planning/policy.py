# -*- coding: utf-8 -*-
"""
Policy (configuration knobs) for a knapsack solving run.

Solver selection:
  - solvers: tuple[str, ...] | None
    Names from the solver registry, run in registry order. If None/empty,
    every registered solver runs.

Resource guards:
  - max_table_cells: upper limit on (n+1)*(capacity+1) for the DP table
  - max_exhaustive_items: exhaustive search is skipped above this item count
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Policy:
    """
    Run knobs (pure data holder).

    Attributes
    ----------
    solvers : tuple[str, ...] | None
        Registry names to run. Examples:
          ("dynamic_programming", "best_first")
          ("greedy_density",)
        If None/empty, all registered solvers run.
    max_table_cells : int | None
        DP table cell budget; None disables the check.
    max_exhaustive_items : int | None
        Item-count cap for the exhaustive oracle; None disables the check.
    """
    solvers: Optional[Tuple[str, ...]] = None

    max_table_cells: Optional[int] = 50_000_000
    max_exhaustive_items: Optional[int] = 25
