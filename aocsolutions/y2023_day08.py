"""Haunted wasteland: walking a left/right network."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Mapping

from aocsolutions.textutil import split, trim


def parse_network(lines: Iterable[str]) -> tuple[str, dict[str, tuple[str, str]]]:
    """Return the instruction string and the node table."""
    lines = list(lines)
    if not lines:
        raise ValueError("empty network description")
    nodes: dict[str, tuple[str, str]] = {}
    for line in lines[2:]:
        sides = split(line, "=")
        if len(sides) < 2:
            raise ValueError(f"malformed node line {line!r}")
        targets = split(sides[1], ",")
        if len(targets) < 2:
            raise ValueError(f"malformed node line {line!r}")
        key = trim(sides[0], " ")
        nodes.setdefault(key, (trim(targets[0], " ()"), trim(targets[1], " ()")))
    return lines[0], nodes


def _steps(
    instructions: str,
    nodes: Mapping[str, tuple[str, str]],
    start: str,
    done: Callable[[str], bool],
    at_least_one: bool,
) -> int:
    if not instructions:
        raise ValueError("no instructions")
    node = start
    steps = 0
    seen: set[tuple[str, int]] = set()
    while (at_least_one and steps == 0) or not done(node):
        index = steps % len(instructions)
        if (node, index) in seen:
            raise ValueError(f"walk from {start!r} never reaches its goal")
        seen.add((node, index))
        try:
            left, right = nodes[node]
        except KeyError:
            raise ValueError(f"unknown node {node!r}") from None
        node = left if instructions[index] == "L" else right
        steps += 1
    return steps


def part1(lines: Iterable[str]) -> int:
    """Steps from AAA to ZZZ."""
    instructions, nodes = parse_network(lines)
    return _steps(instructions, nodes, "AAA", lambda node: node == "ZZZ", False)


def part2(lines: Iterable[str]) -> int:
    """Steps until every walk from a node ending in 'A' is on a node ending in 'Z'.

    Assumes each walk cycles with the period of its first arrival.
    """
    instructions, nodes = parse_network(lines)
    cycles = [
        _steps(instructions, nodes, name, lambda node: node.endswith("Z"), True)
        for name in nodes
        if name.endswith("A")
    ]
    return math.lcm(*cycles)