# -*- coding: utf-8 -*-
"""
List-backed binary max-heap of best-first search nodes, keyed by bound.

  - push: append, then sift up while the node's bound is strictly greater
          than its parent's.
  - pop:  swap root and last, shrink, then sift down, each level promoting
          the larger of the two children.

Nodes are moved in and out; the heap never hands out a node it still holds.
Ties are resolved by heap structure only (strict comparisons).
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List

log = logging.getLogger(__name__)


@dataclass
class SearchNode:
    """
    A partial solution waiting in the best-first queue.

    Attributes
    ----------
    objective_value : int
        Value packed so far.
    decision_variables : list[int]
        Decisions in density order; owned by this node alone.
    index : int
        Next undecided item.
    remaining : int
        Capacity still free.
    bound : int
        Optimistic value of the best completion.
    """
    objective_value: int
    decision_variables: List[int]
    index: int
    remaining: int
    bound: int


class NodeHeap:
    """Max-heap on SearchNode.bound."""

    def __init__(self) -> None:
        self._nodes: List[SearchNode] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def __bool__(self) -> bool:
        return bool(self._nodes)

    def push(self, node: SearchNode) -> None:
        nodes = self._nodes
        nodes.append(node)
        i = len(nodes) - 1
        while i > 0:
            parent = (i - 1) // 2
            if nodes[i].bound <= nodes[parent].bound:
                break
            nodes[i], nodes[parent] = nodes[parent], nodes[i]
            i = parent

    def pop(self) -> SearchNode:
        """Remove and return the node with the largest bound."""
        nodes = self._nodes
        if not nodes:
            raise IndexError("pop from an empty NodeHeap")
        last = len(nodes) - 1
        nodes[0], nodes[last] = nodes[last], nodes[0]
        top = nodes.pop()
        self._sift_down(0)
        return top

    def peek(self) -> SearchNode:
        if not self._nodes:
            raise IndexError("peek at an empty NodeHeap")
        return self._nodes[0]

    def drain(self) -> int:
        """Release every queued node; returns how many were dropped."""
        dropped = len(self._nodes)
        self._nodes.clear()
        if dropped:
            log.debug("drained %d queued nodes", dropped)
        return dropped

    def _sift_down(self, i: int) -> None:
        nodes = self._nodes
        size = len(nodes)
        while True:
            left = 2 * i + 1
            if left >= size:
                return
            right = left + 1
            child = left
            if right < size and nodes[right].bound > nodes[left].bound:
                child = right
            if nodes[child].bound <= nodes[i].bound:
                return
            nodes[i], nodes[child] = nodes[child], nodes[i]
            i = child
