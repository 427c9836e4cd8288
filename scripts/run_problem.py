#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Run every knapsack solver on one problem file and print the results.

This version does NOT use argparse.
Just set the variables at the top of the file and run:

    python scripts/run_problem.py

Outputs under OUT_DIR (when set):
  - solutions.csv        (one row per solver)
  - decisions.csv        (per-solver decision vectors)
  - problem_summary.csv  (instance facts + best objective)
"""

from __future__ import annotations
import logging
import os
from typing import List, Optional

# ====== CONFIGURATION ======
PROBLEM_PATH = "problems/ks_19_0.txt"   # .txt (count capacity pairs...) or .json
OUT_DIR: Optional[str] = "reports/ks_19_0"

# Registry names; None runs all of:
#   "greedy_value", "greedy_weight", "greedy_density", "dynamic_programming",
#   "exhaustive", "depth_first", "best_first", "limited_discrepancy"
SOLVERS: Optional[List[str]] = None

MAX_TABLE_CELLS = 50_000_000   # DP table guard
MAX_EXHAUSTIVE_ITEMS = 25      # exhaustive oracle is skipped above this
LOG_LEVEL = "INFO"
# ============================

from knapsack01.business_objects.problem import Problem
from knapsack01.planning import Policy, SolverReport
from knapsack01.planning.solve_orchestrator import run_solvers
from knapsack01.planning.tracker import Tracker
from knapsack01.utils.formatting import format_reports
from knapsack01.utils.read_problems import read_problem


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL.upper(), format="%(levelname)s %(name)s: %(message)s")

    # Load problem
    problem: Problem = read_problem(PROBLEM_PATH)

    policy = Policy(
        solvers=tuple(SOLVERS) if SOLVERS else None,
        max_table_cells=MAX_TABLE_CELLS,
        max_exhaustive_items=MAX_EXHAUSTIVE_ITEMS,
    )
    tracker = Tracker(out_dir=OUT_DIR) if OUT_DIR else None

    reports: List[SolverReport] = run_solvers(problem, policy, tracker=tracker)

    print(f"\n=== {PROBLEM_PATH}: {problem.n_items} items, capacity {problem.capacity} ===\n")
    print(format_reports(reports))

    if OUT_DIR:
        print(f"\nCSV artifacts written to: {os.path.abspath(OUT_DIR)}")


if __name__ == "__main__":
    main()
