# -*- coding: utf-8 -*-
"""
Console rendering of solver results.
"""

from __future__ import annotations
from typing import List

from knapsack01.planning.solution import Solution, SolverReport


def format_solution(solution: Solution) -> str:
    """
    Two lines:
      "<objective_value> <optimal 0|1>"
      "<d_0> <d_1> ... <d_n-1>"
    """
    head = f"{solution.objective_value} {1 if solution.optimal else 0}"
    body = " ".join(str(x) for x in solution.decision_variables)
    return f"{head}\n{body}"


def format_reports(reports: List[SolverReport]) -> str:
    blocks = [f"{rep.solver.replace('_', ' ')} solution:\n{format_solution(rep.solution)}" for rep in reports]
    return "\n\n".join(blocks)
