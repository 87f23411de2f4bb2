import math

from check_mst import (
    bottleneck_weight,
    complete_graph,
    reference_mst,
    reference_weight,
    run_experiment,
)
from emst import Point


def test_complete_graph_has_all_pairs():
    points = [Point(0, 0, 0), Point(0, 3, 1), Point(4, 0, 2)]
    G = complete_graph(points)
    assert G.number_of_edges() == 3
    assert G[1][2]["weight"] == 5.0


def test_reference_mst_triangle():
    points = [Point(0, 0, 0), Point(0, 3, 1), Point(4, 0, 2)]
    assert reference_mst(points).number_of_edges() == 2
    assert reference_weight(points) == 7.0
    assert bottleneck_weight(points) == 4.0


def test_bottleneck_single_point():
    assert bottleneck_weight([Point(1, 1, 0)]) == 0.0


def test_run_experiment_unconstrained():
    result = run_experiment(20, 50, seed=8)
    assert result["feasible"]
    assert result["is_correct"]
    assert result["edges_found"] == result["edges_expected"] == 19


def test_run_experiment_tight_alpha():
    result = run_experiment(20, 50, seed=8, alpha=0.5)
    assert not result["feasible"]
    assert result["mst_weight"] is None
    assert result["is_correct"]
    assert not math.isnan(result["networkx_weight"])
