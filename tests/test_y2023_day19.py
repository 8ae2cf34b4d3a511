import pytest

from aocsolutions.y2023_day19 import (
    FULL_RANGE,
    Op,
    Rule,
    Workflow,
    parse,
    part1,
    part2,
)

EXAMPLE = [
    "px{a<2006:qkq,m>2090:A,rfg}",
    "pv{a>1716:R,A}",
    "lnx{m>1548:A,A}",
    "rfg{s<537:gd,x>2440:R,A}",
    "qs{s>3448:A,lnx}",
    "qkq{x<1416:A,crn}",
    "crn{x>2662:A,R}",
    "in{s<1351:px,qqz}",
    "qqz{s>2770:qs,m<1801:hdj,R}",
    "gd{a>3333:R,R}",
    "hdj{m>838:A,pv}",
    "",
    "{x=787,m=2655,a=1222,s=2876}",
    "{x=1679,m=44,a=2067,s=496}",
    "{x=2036,m=264,a=79,s=2244}",
    "{x=2461,m=1339,a=466,s=291}",
    "{x=2127,m=1623,a=2188,s=1013}",
]

START_RANGES = {category: FULL_RANGE for category in "xmas"}


def test_example_part1():
    assert part1(EXAMPLE) == 19114


def test_example_part2():
    assert part2(EXAMPLE) == 167409079868000


def test_parse_workflow_and_parts():
    workflows, parts = parse(EXAMPLE)
    assert workflows["px"] == Workflow(
        [Rule("a", Op.LESS, 2006, "qkq"), Rule("m", Op.GREATER, 2090, "A")], "rfg"
    )
    assert parts[0] == {"x": 787, "m": 2655, "a": 1222, "s": 2876}
    assert len(parts) == 5


def test_route_first_matching_rule():
    workflow = Workflow([Rule("x", Op.LESS, 10, "low"), Rule("x", Op.LESS, 100, "mid")], "high")
    assert workflow.route({"x": 5}) == "low"
    assert workflow.route({"x": 50}) == "mid"
    assert workflow.route({"x": 500}) == "high"


@pytest.mark.parametrize("op", [Op.LESS, Op.GREATER])
def test_apply_agrees_with_check(op):
    rule = Rule("m", op, 1500, "A")
    matched, complement = rule.apply(START_RANGES)
    for value in range(1, 4001):
        in_matched = matched["m"][0] < value < matched["m"][1]
        in_complement = complement["m"][0] < value < complement["m"][1]
        assert in_matched == rule.check({"m": value})
        assert in_complement != in_matched
    assert matched["x"] == START_RANGES["x"]
    assert complement["s"] == START_RANGES["s"]


def test_accept_everything():
    assert part2(["in{A}"]) == 4000**4


def test_reject_everything():
    assert part2(["in{R}"]) == 0


def test_part1_accepts_all_sums_ratings():
    lines = ["in{A}", "", "{x=1,m=2,a=3,s=4}", "{x=10,m=20,a=30,s=40}"]
    assert part1(lines) == 1 + 2 + 3 + 4 + 10 + 20 + 30 + 40


def test_unknown_workflow_part1():
    with pytest.raises(ValueError):
        part1(["in{nowhere}", "", "{x=1,m=1,a=1,s=1}"])


def test_unknown_workflow_part2():
    with pytest.raises(ValueError):
        part2(["in{x<5:nowhere,A}"])


def test_malformed_rule():
    with pytest.raises(ValueError):
        parse(["in{x=5:A,R}"])