"""Tests for the problem readers and the console formatting."""

import json

import pytest

from knapsack01.business_objects import Problem, SchemaError
from knapsack01.planning import Solution, SolverReport
from knapsack01.utils.formatting import format_reports, format_solution
from knapsack01.utils.read_problems import (
    parse_problem_text,
    read_problem,
    read_problem_json,
    read_problem_text,
)


def test_parse_text_format():
    problem = parse_problem_text("4 7\n16 2\n19 3\n23 4\n28 5\n")
    assert problem == Problem.from_pairs([(16, 2), (19, 3), (23, 4), (28, 5)], capacity=7)


def test_parse_text_any_whitespace():
    assert parse_problem_text("2 5 1 1\t2 2").capacity == 5


def test_parse_text_empty_item_list():
    problem = parse_problem_text("0 10")
    assert problem.n_items == 0 and problem.capacity == 10


@pytest.mark.parametrize("text", [
    "",
    "3",
    "2 10 1 1",            # too few pairs
    "1 10 1 1 9",          # trailing numbers
    "1 10 1.5 1",          # not an integer
    "1 -4 1 1",            # negative capacity
    "1 10 -1 1",           # negative value
    "-1 10",               # negative count
    "x 10",
])
def test_parse_text_rejects_malformed(text):
    with pytest.raises(SchemaError):
        parse_problem_text(text)


def test_read_text_and_dispatch(tmp_path):
    path = tmp_path / "ks_3.txt"
    path.write_text("3 9\n5 4\n6 5\n3 2\n", encoding="utf-8")
    expected = Problem.from_pairs([(5, 4), (6, 5), (3, 2)], capacity=9)
    assert read_problem_text(str(path)) == expected
    assert read_problem(str(path)) == expected


def test_read_missing_file(tmp_path):
    with pytest.raises(SchemaError):
        read_problem_text(str(tmp_path / "nope.txt"))


def test_read_json(tmp_path):
    path = tmp_path / "ks.json"
    path.write_text(json.dumps({
        "capacity": 9,
        "items": [{"value": 5, "weight": 4}, {"value": 6, "weight": 5}],
    }), encoding="utf-8")
    expected = Problem.from_pairs([(5, 4), (6, 5)], capacity=9)
    assert read_problem_json(str(path)) == expected
    assert read_problem(str(path)) == expected


@pytest.mark.parametrize("payload", [
    "[]",
    "{not json",
    json.dumps({"items": []}),
    json.dumps({"capacity": 3}),
    json.dumps({"capacity": 3, "items": {}}),
    json.dumps({"capacity": 3, "items": [5]}),
    json.dumps({"capacity": 3, "items": [{"value": 1}]}),
    json.dumps({"capacity": 2.5, "items": []}),
    json.dumps({"capacity": 3, "items": [{"value": True, "weight": 1}]}),
])
def test_read_json_rejects_malformed(tmp_path, payload):
    path = tmp_path / "bad.json"
    path.write_text(payload, encoding="utf-8")
    with pytest.raises(SchemaError):
        read_problem_json(str(path))


def test_format_solution():
    sol = Solution(objective_value=44, decision_variables=(1, 0, 0, 1), optimal=True)
    assert format_solution(sol) == "44 1\n1 0 0 1"
    assert format_solution(Solution.empty(2)) == "0 0\n0 0"


def test_format_reports():
    rep = SolverReport(solver="greedy_value", solution=Solution(3, (1,)), elapsed_seconds=0.0)
    assert format_reports([rep]) == "greedy value solution:\n3 0\n1"
