"""Aplenty: sorting machine parts through workflows."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum

from aocsolutions.textutil import split, to_int, trim

Part = Mapping[str, int]
Ranges = dict[str, tuple[int, int]]

CATEGORIES = "xmas"
START = "in"
ACCEPTED = "A"
REJECTED = "R"
# Exclusive bounds: every rating lies strictly between them.
FULL_RANGE = (0, 4001)


class Op(Enum):
    LESS = "<"
    GREATER = ">"


@dataclass(frozen=True)
class Rule:
    """A condition on one rating and the workflow it sends matching parts to."""

    var: str
    op: Op
    value: int
    target: str

    def check(self, part: Part) -> bool:
        rating = part.get(self.var, 0)
        if self.op is Op.LESS:
            return rating < self.value
        return rating > self.value

    def apply(self, ranges: Mapping[str, tuple[int, int]]) -> tuple[Ranges, Ranges]:
        """Split exclusive rating ranges into (matching, not matching)."""
        matched = dict(ranges)
        complement = dict(ranges)
        if self.var in ranges:
            low, high = ranges[self.var]
            if self.op is Op.LESS:
                matched[self.var] = (low, min(high, self.value))
                complement[self.var] = (max(low, self.value - 1), high)
            else:
                matched[self.var] = (max(low, self.value), high)
                complement[self.var] = (low, min(high, self.value + 1))
        return matched, complement


@dataclass
class Workflow:
    """Rules tried in order, and where parts go when none matches."""

    rules: list[Rule] = field(default_factory=list)
    final: str = ""

    def route(self, part: Part) -> str:
        return next((rule.target for rule in self.rules if rule.check(part)), self.final)


def _parse_rule(text: str) -> Rule:
    fields = split(text, ":")
    if len(fields) < 2:
        raise ValueError(f"malformed rule {text!r}")
    condition, target = fields[0], fields[1]
    for op in Op:
        sides = split(condition, op.value)
        if len(sides) == 2 and sides[0]:
            return Rule(sides[0][0], op, to_int(sides[1]), target)
    raise ValueError(f"malformed condition {condition!r}")


def _parse_workflow(line: str) -> tuple[str, Workflow]:
    fields = split(line, "{")
    if len(fields) < 2:
        raise ValueError(f"malformed workflow {line!r}")
    steps = split(trim(fields[1], "}"), ",")
    if not steps:
        raise ValueError(f"workflow without rules {line!r}")
    return fields[0], Workflow([_parse_rule(s) for s in steps[:-1]], steps[-1])


def _parse_part(line: str) -> dict[str, int]:
    part: dict[str, int] = {}
    for rating in split(trim(line, "{}"), ","):
        fields = split(rating, "=")
        if len(fields) < 2 or not fields[0]:
            raise ValueError(f"malformed rating {rating!r}")
        part[fields[0][0]] = to_int(fields[1])
    return part


def parse(lines: Iterable[str]) -> tuple[dict[str, Workflow], list[dict[str, int]]]:
    """Return the workflows by name and the list of parts."""
    workflows: dict[str, Workflow] = {}
    parts: list[dict[str, int]] = []
    in_parts = False
    for line in lines:
        if not in_parts:
            if not line:
                in_parts = True
                continue
            name, workflow = _parse_workflow(line)
            workflows[name] = workflow
        else:
            parts.append(_parse_part(line))
    return workflows, parts


def _workflow(workflows: Mapping[str, Workflow], name: str) -> Workflow:
    try:
        return workflows[name]
    except KeyError:
        raise ValueError(f"unknown workflow {name!r}") from None


def part1(lines: Iterable[str]) -> int:
    """Sum of all ratings of the accepted parts."""
    workflows, parts = parse(lines)
    total = 0
    for part in parts:
        status = START
        while status not in (ACCEPTED, REJECTED):
            status = _workflow(workflows, status).route(part)
        if status == ACCEPTED:
            total += sum(part.get(category, 0) for category in CATEGORIES)
    return total


def part2(lines: Iterable[str]) -> int:
    """Number of rating combinations (each 1..4000) that are accepted."""
    workflows, _ = parse(lines)
    accepted: list[Ranges] = []
    stack: list[tuple[str, Ranges]] = [
        (START, {category: FULL_RANGE for category in CATEGORIES})
    ]
    while stack:
        name, ranges = stack.pop()
        workflow = _workflow(workflows, name)
        for rule in workflow.rules:
            matched, ranges = rule.apply(ranges)
            if rule.target == ACCEPTED:
                accepted.append(matched)
            elif rule.target != REJECTED:
                stack.append((rule.target, matched))
        if workflow.final == ACCEPTED:
            accepted.append(ranges)
        elif workflow.final != REJECTED:
            stack.append((workflow.final, ranges))
    return sum(
        math.prod(max(0, high - low - 1) for low, high in ranges.values())
        for ranges in accepted
    )