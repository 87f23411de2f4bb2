import math

import pytest

from check_mst import bottleneck_weight, reference_weight
from emst import (
    DEFAULT_FORMAT,
    Edge,
    Infeasible,
    OutputFormat,
    Point,
    build_emst,
    distance,
    format_edges,
    format_weight,
    render_result,
    solve,
)
from point_files import random_points, sort_points


def make_points(coords):
    return sort_points([Point(x, y, i) for i, (x, y) in enumerate(coords)])


TRIANGLE = [(0, 0), (0, 3), (4, 0)]


# --- Scenarios ---
def test_triangle_with_loose_alpha():
    assert solve(make_points(TRIANGLE), 10.0) == [
        "7.0000000000",
        "(0, 0)(0, 3)",
        "(0, 0)(4, 0)",
    ]


def test_triangle_with_tight_alpha_fails():
    points = make_points(TRIANGLE)
    with pytest.raises(Infeasible) as excinfo:
        build_emst(points, 2.0)
    assert excinfo.value.weight == 3.0
    assert excinfo.value.alpha == 2.0
    assert solve(points, 2.0) == ["FAIL"]


@pytest.mark.parametrize("alpha", [0.0, 1.0, -5.0, math.inf])
def test_single_point(alpha):
    result = build_emst([Point(5, 5, 0)], alpha)
    assert result.total_weight == 0.0
    assert result.edges == []
    assert render_result(result) == ["0.0000000000"]


def test_eleven_collinear_points_hide_edges():
    points = make_points([(i, 0) for i in range(11)])
    result = build_emst(points, 1.0)
    assert len(result.edges) == 10
    assert solve(points, 1.0) == ["10.0000000000"]


def test_ten_points_list_edges():
    points = make_points([(i, 0) for i in range(10)])
    lines = solve(points, 1.0)
    assert lines[0] == "9.0000000000"
    assert len(lines) == 10


# --- Builder ---
def test_empty_points_rejected():
    with pytest.raises(ValueError):
        build_emst([], 1.0)


def test_negative_alpha_fails_with_two_points():
    with pytest.raises(Infeasible):
        build_emst(make_points([(0, 0), (0, 0)]), -1.0)


def test_duplicate_points_have_zero_edge():
    result = build_emst(make_points([(1, 1), (1, 1)]), 0.0)
    assert result.total_weight == 0.0
    assert [str(e) for e in result.edges] == ["(1, 1)(1, 1)"]


def test_alpha_equal_to_edge_weight_is_allowed():
    result = build_emst(make_points([(0, 0), (3, 4)]), 5.0)
    assert result.total_weight == 5.0


def test_equal_distance_goes_to_latest_tree_point():
    # (1, 3) is sqrt(10) from both (0, 0) and (2, 0); (2, 0) joins the tree later
    points = make_points([(0, 0), (2, 0), (1, 3)])
    result = build_emst(points, math.inf)
    assert format_edges(result.edges) == ["(0, 0)(2, 0)", "(1, 3)(2, 0)"]


def test_root_is_lowest_point():
    points = make_points([(5, 9), (3, 1), (7, 1)])
    assert (points[0].x, points[0].y) == (3, 1)
    result = build_emst(points, math.inf)
    assert result.edges[0].p1 == points[0]


@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
def test_edge_count_and_canonical_order(seed):
    points = sort_points(random_points(25, 50, seed))
    result = build_emst(points, math.inf)
    assert len(result.edges) == len(points) - 1
    for edge in result.edges:
        a, b = edge.canonical()
        assert (a.x, a.y) <= (b.x, b.y)
        assert str(edge).startswith(f"({a.x}, {a.y})")


@pytest.mark.parametrize("seed", [7, 11, 13, 17])
def test_weight_matches_networkx(seed):
    points = sort_points(random_points(40, 100, seed))
    result = build_emst(points, math.inf)
    assert result.total_weight == pytest.approx(reference_weight(points), rel=1e-9)


@pytest.mark.parametrize("seed", [21, 22, 23])
def test_alpha_threshold_is_monotone(seed):
    points = sort_points(random_points(30, 60, seed))
    bottleneck = bottleneck_weight(points)

    result = build_emst(points, bottleneck)
    assert result.total_weight == pytest.approx(reference_weight(points), rel=1e-9)

    for alpha in (bottleneck - 1e-6, bottleneck / 2, 0.0, -1.0):
        with pytest.raises(Infeasible):
            build_emst(points, alpha)


def test_repeated_runs_are_identical():
    points = sort_points(random_points(10, 5, 99))
    assert solve(points, math.inf) == solve(points, math.inf)


# --- Formatting ---
def test_distance_is_sqrt_of_squares():
    assert distance(Point(0, 0, 0), Point(3, 4, 1)) == 5.0
    assert distance(Point(-1, -1, 0), Point(1, 1, 1)) == math.sqrt(8.0)


def test_edge_string_is_canonical():
    edge = Edge(Point(4, 0, 0), Point(0, 3, 1), 5.0)
    assert str(edge) == "(0, 3)(4, 0)"
    assert str(Edge(Point(2, 5, 0), Point(2, -1, 1), 6.0)) == "(2, -1)(2, 5)"


def test_format_edges_sorts_text():
    edges = [
        Edge(Point(10, 0, 0), Point(2, 0, 1), 8.0),
        Edge(Point(1, 0, 2), Point(2, 0, 1), 1.0),
    ]
    # "(1" < "(2" as text even though the first edge starts at x=2
    assert format_edges(edges) == ["(1, 0)(2, 0)", "(2, 0)(10, 0)"]


def test_format_weight():
    assert format_weight(7.0) == "7.0000000000"
    assert format_weight(math.sqrt(2)) == "1.4142135624"


def test_output_format_is_explicit():
    fmt = OutputFormat(decimals=3, max_listed_points=2, decimal_point=",",
                       failure_text="NO")
    points = make_points(TRIANGLE)
    assert solve(points, 10.0, fmt) == ["7,000"]
    assert solve(points, 1.0, fmt) == ["NO"]
    assert solve([], 1.0, fmt) == ["NO"]
    assert DEFAULT_FORMAT.decimal_point == "."
