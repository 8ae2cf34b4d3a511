import pytest

from aocsolutions.y2023_day25 import global_min_cut, part1

EXAMPLE = [
    "jqt: rhn xhk nvd",
    "rsh: frs pzl lsr",
    "xhk: hfx",
    "cmg: qnr nvd lhk bvb",
    "rhn: xhk bvb hfx",
    "bvb: xhk hfx",
    "pzl: lsr hfx nvd",
    "qnr: nvd",
    "ntq: jqt hfx bvb xhk",
    "nvd: lhk",
    "lsr: lhk",
    "rzs: qnr cmg lsr rsh",
    "frs: qnr lhk lsr",
]


def _matrix(size, edges):
    matrix = [[0] * size for _ in range(size)]
    for a, b in edges:
        matrix[a][b] = matrix[b][a] = 1
    return matrix


TRIANGLES = _matrix(6, [(0, 1), (1, 2), (0, 2), (3, 4), (4, 5), (3, 5), (2, 3)])


def test_part1_example():
    assert part1(EXAMPLE) == 54


def test_min_cut_of_joined_triangles():
    weight, cut = global_min_cut(TRIANGLES)
    assert weight == 1
    assert set(cut) in ({0, 1, 2}, {3, 4, 5})


def test_min_cut_does_not_modify_input():
    copy = [row[:] for row in TRIANGLES]
    global_min_cut(TRIANGLES)
    assert TRIANGLES == copy


def test_disconnected_graph_has_zero_cut():
    weight, cut = global_min_cut(_matrix(4, [(0, 1), (2, 3)]))
    assert weight == 0
    assert set(cut) in ({0, 1}, {2, 3})


def test_joined_triangles_via_lines():
    lines = ["a: b c", "b: c", "c: d", "d: e f", "e: f"]
    assert part1(lines) == 3 * 3


def test_single_vertex_raises():
    with pytest.raises(ValueError):
        global_min_cut([[0]])


def test_non_square_matrix_raises():
    with pytest.raises(ValueError):
        global_min_cut([[0, 1], [1]])


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        part1(["abc def"])