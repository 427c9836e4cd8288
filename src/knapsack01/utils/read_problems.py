# -*- coding: utf-8 -*-
"""
I/O helpers for loading knapsack problem definitions.

Formats:
- text : whitespace-delimited integers
           <item_count> <capacity>
           <value_0> <weight_0>
           ...
- JSON : {"capacity": <int>, "items": [{"value": <int>, "weight": <int>}, ...]}

Both map directly to business_objects.problem.Problem.
"""

from __future__ import annotations
import json
from typing import List

from knapsack01.business_objects.errors import SchemaError, StateValidationError
from knapsack01.business_objects.items import Item
from knapsack01.business_objects.problem import Problem


def _require(obj: dict, key: str, path: str) -> object:
    if key not in obj:
        raise SchemaError(f"{path}: missing required key '{key}' in object {obj}")
    return obj[key]


def _as_int(raw: object, what: str) -> int:
    # Reject floats and bools instead of silently truncating them.
    if isinstance(raw, bool):
        raise SchemaError(f"{what}: expected an integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw)
        except ValueError as e:
            raise SchemaError(f"{what}: expected an integer, got {raw!r}") from e
    raise SchemaError(f"{what}: expected an integer, got {raw!r}")


def _build(items: List[Item], capacity: int, path: str) -> Problem:
    try:
        return Problem(items=tuple(items), capacity=capacity)
    except StateValidationError as e:
        raise SchemaError(f"{path}: {e}") from e


def parse_problem_text(text: str, path: str = "<text>") -> Problem:
    """
    Parse the whitespace-delimited text format.
    Tokens after the declared item count are rejected.
    """
    tokens = text.split()
    if len(tokens) < 2:
        raise SchemaError(f"{path}: expected '<item_count> <capacity>' header.")

    count = _as_int(tokens[0], f"{path}: item count")
    capacity = _as_int(tokens[1], f"{path}: capacity")
    if count < 0:
        raise SchemaError(f"{path}: item count must be >= 0, got {count}.")

    body = tokens[2:]
    if len(body) != 2 * count:
        raise SchemaError(
            f"{path}: expected {count} (value, weight) pairs, found {len(body)} numbers."
        )

    items: List[Item] = []
    for idx in range(count):
        value = _as_int(body[2 * idx], f"{path}[{idx}] value")
        weight = _as_int(body[2 * idx + 1], f"{path}[{idx}] weight")
        try:
            items.append(Item(value=value, weight=weight))
        except StateValidationError as e:
            raise SchemaError(f"{path}[{idx}]: {e}") from e
    return _build(items, capacity, path)


def read_problem_text(path: str) -> Problem:
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise SchemaError(f"{path}: failed to read: {e}") from e
    return parse_problem_text(text, path=path)


def read_problem_json(path: str) -> Problem:
    """
    Load a problem from a JSON object with:
      - capacity (int)
      - items (array of {value: int, weight: int})
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise SchemaError(f"{path}: failed to read/parse JSON: {e}") from e

    if not isinstance(data, dict):
        raise SchemaError(f"{path}: expected a JSON object.")

    capacity = _as_int(_require(data, "capacity", path), f"{path}: capacity")
    raw_items = _require(data, "items", path)
    if not isinstance(raw_items, list):
        raise SchemaError(f"{path}: 'items' must be a JSON array.")

    items: List[Item] = []
    for idx, obj in enumerate(raw_items):
        if not isinstance(obj, dict):
            raise SchemaError(f"{path}[{idx}]: expected an object.")
        value = _as_int(_require(obj, "value", path), f"{path}[{idx}] value")
        weight = _as_int(_require(obj, "weight", path), f"{path}[{idx}] weight")
        try:
            items.append(Item(value=value, weight=weight))
        except StateValidationError as e:
            raise SchemaError(f"{path}[{idx}]: {e}") from e
    return _build(items, capacity, path)


def read_problem(path: str) -> Problem:
    """Dispatch on extension: .json -> JSON reader, anything else -> text."""
    if path.lower().endswith(".json"):
        return read_problem_json(path)
    return read_problem_text(path)
