import pathlib
import sys

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

import numpy as np
import pytest

from perfectmaze.cells import Cell, CellType
from perfectmaze.core import Edge, SpanningTreeGenerator, generate_many
from perfectmaze.union_find import DisjointSet

SIZES = [(3, 3), (3, 11), (11, 3), (5, 5), (9, 9), (10, 8), (21, 31), (41, 17)]


def test_reduced_dimensions():
    gen = SpanningTreeGenerator(21, 10)
    assert gen.reduced_height == 10
    assert gen.reduced_width == 4
    assert gen.full_height == 21
    assert gen.full_width == 9
    assert gen.node_count == 40


@pytest.mark.parametrize("height, width", [(0, 0), (1, 1), (2, 2), (1, 9), (9, 2)])
def test_degenerate_dimensions_give_empty_maze(height, width):
    gen = SpanningTreeGenerator(height, width)
    assert gen.node_count == 0
    assert gen.candidate_edges().shape == (0, 2)
    assert gen.edges() == []
    assert gen.spanning_tree(0) == []
    assert gen.generate(0) == []


def test_candidate_edges_two_by_two():
    gen = SpanningTreeGenerator(5, 5)
    np.testing.assert_array_equal(gen.candidate_edges(), np.array([[1, 0], [2, 0], [3, 2], [3, 1]]))
    assert gen.edges() == [Edge(1, 0), Edge(2, 0), Edge(3, 2), Edge(3, 1)]


@pytest.mark.parametrize("height, width", SIZES)
def test_candidate_edges_form_the_grid_graph(height, width):
    gen = SpanningTreeGenerator(height, width)
    h, w = gen.reduced_height, gen.reduced_width
    edges = gen.candidate_edges()
    assert edges.shape == (h * (w - 1) + w * (h - 1), 2)
    assert len({tuple(sorted(e)) for e in edges.tolist()}) == edges.shape[0]
    for a, b in edges.tolist():
        assert 0 <= b < a < h * w
        ra, ca = gen.from_index(a)
        rb, cb = gen.from_index(b)
        assert abs(ra - rb) + abs(ca - cb) == 1


def test_index_round_trip():
    gen = SpanningTreeGenerator(9, 13)
    assert gen.to_index(2, 5) == 2 * 6 + 5
    assert gen.from_index(gen.to_index(3, 4)) == (3, 4)


def test_two_by_two_scenario():
    gen = SpanningTreeGenerator(5, 5)
    for seed in range(20):
        cells = gen.generate(seed)
        assert len(cells) == 3
        assert all(cell.type is CellType.PASSAGE for cell in cells)
        coords = {(cell.row, cell.column) for cell in cells}
        assert len(coords) == 3
        assert coords <= {(1, 2), (2, 1), (3, 2), (2, 3)}


@pytest.mark.parametrize("height, width", SIZES)
def test_acceptance_count(height, width):
    gen = SpanningTreeGenerator(height, width)
    rng = np.random.default_rng(0)
    for _ in range(5):
        assert len(gen.generate(rng)) == gen.node_count - 1


@pytest.mark.parametrize("height, width", SIZES)
def test_tree_is_connected_and_acyclic(height, width):
    gen = SpanningTreeGenerator(height, width)
    tree = gen.spanning_tree(np.random.default_rng(11))
    replay = DisjointSet(gen.node_count)
    for edge in tree:
        assert replay.union(edge.first_cell, edge.second_cell)
    assert replay.size == 1


def test_connectors_lie_between_their_endpoints():
    gen = SpanningTreeGenerator(15, 11)
    rng = np.random.default_rng(5)
    tree = gen.spanning_tree(rng)
    cells = gen.generate(np.random.default_rng(5))
    assert len(cells) == len(tree)
    for edge, cell in zip(tree, cells):
        ra, ca = gen.from_index(edge.first_cell)
        rb, cb = gen.from_index(edge.second_cell)
        assert (cell.row, cell.column) == (ra + rb + 1, ca + cb + 1)
        # exactly one coordinate is even: the wall between two odd passages
        assert (cell.row % 2) + (cell.column % 2) == 1


def test_same_seed_same_maze():
    gen = SpanningTreeGenerator(21, 21)
    assert gen.generate(42) == gen.generate(42)
    assert gen.generate(np.random.default_rng(42)) == gen.generate(42)


def test_shared_generator_gives_independent_mazes():
    gen = SpanningTreeGenerator(21, 21)
    rng = np.random.default_rng(1)
    first = gen.generate(rng)
    second = gen.generate(rng)
    assert first != second
    assert sorted(first) != sorted(second)


def test_verbose_prints_progress(capsys):
    SpanningTreeGenerator(7, 7, verbose=True).generate(0)
    out = capsys.readouterr().out
    assert "Candidate edges: 12" in out
    assert "Accepted edges: 8" in out


def test_silent_by_default(capsys):
    SpanningTreeGenerator(7, 7).generate(0)
    assert capsys.readouterr().out == ""


def test_generate_many_is_reproducible():
    serial = generate_many(11, 15, 4, seed=123, n_jobs=1)
    parallel = generate_many(11, 15, 4, seed=123, n_jobs=2)
    assert serial == parallel
    assert len(serial) == 4
    assert all(len(cells) == 5 * 7 - 1 for cells in serial)
    assert all(isinstance(cell, Cell) for cells in serial for cell in cells)
    assert serial[0] != serial[1]


def test_generate_many_counts():
    assert generate_many(5, 5, 0) == []
    with pytest.raises(ValueError):
        generate_many(5, 5, -1)
