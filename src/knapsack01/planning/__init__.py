# -*- coding: utf-8 -*-
"""
Planning layer public API for the knapsack solvers.

This module exposes the core planning-time data contracts:
  - Solution, SearchStats and SolverReport models
  - WorkingSolution (mutable search state)
  - Policy configuration

Solvers, the orchestrator and the tracker are intentionally not exported
here to avoid cluttering the namespace (and import cycles). They should be
imported explicitly when needed.
"""

from .solution import Solution, SearchStats, SolverReport
from .state import WorkingSolution
from .policy import Policy

__all__ = [
    "Solution",
    "SearchStats",
    "SolverReport",
    "WorkingSolution",
    "Policy",
]
