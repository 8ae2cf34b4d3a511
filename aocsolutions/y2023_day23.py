"""A long walk: the longest path through a forest of trails."""

from __future__ import annotations

from collections.abc import Iterable

Position = tuple[int, int]
Graph = dict[Position, dict[Position, int]]

_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def build_graph(lines: Iterable[str]) -> tuple[Graph, Position, Position]:
    """Trail graph with corridors collapsed into weighted edges.

    Slopes count as ordinary path. Returns the graph, the start (top row,
    second column) and the end (bottom row, second to last column).
    """
    grid = list(lines)
    if not grid or len(grid[0]) < 2:
        raise ValueError("the map is too small")
    rows, cols = len(grid), len(grid[0])
    start, end = (0, 1), (rows - 1, cols - 2)
    open_cells = {
        (r, c) for r, line in enumerate(grid) for c, ch in enumerate(line) if ch != "#"
    }
    for point in (start, end):
        if point not in open_cells:
            raise ValueError(f"position {point} is not on a trail")

    graph: Graph = {
        (r, c): {
            (r + dr, c + dc): 1 for dr, dc in _STEPS if (r + dr, c + dc) in open_cells
        }
        for r, c in open_cells
    }
    changed = True
    while changed:
        changed = False
        for node in list(graph):
            edges = graph[node]
            if node in (start, end) or len(edges) != 2:
                continue
            (a, length_a), (b, length_b) = edges.items()
            del graph[a][node]
            del graph[b][node]
            length = length_a + length_b
            graph[a][b] = max(graph[a].get(b, 0), length)
            graph[b][a] = max(graph[b].get(a, 0), length)
            del graph[node]
            changed = True
    return {node: edges for node, edges in graph.items() if edges}, start, end


def part1(lines: Iterable[str]) -> int:
    """Length of the longest walk from start to end that never revisits a tile."""
    graph, start, end = build_graph(lines)
    best = -1
    visited = {start}

    def walk(node: Position, length: int) -> None:
        nonlocal best
        if node == end:
            best = max(best, length)
            return
        for neighbour, step in graph.get(node, {}).items():
            if neighbour not in visited:
                visited.add(neighbour)
                walk(neighbour, length + step)
                visited.remove(neighbour)

    walk(start, 0)
    if best < 0:
        raise ValueError("the end cannot be reached from the start")
    return best