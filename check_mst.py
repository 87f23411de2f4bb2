"""
Reference EMST via networkx (Kruskal on the complete graph)
Used to check the weights reported by emst.build_emst
"""

import json
import math

import networkx as nx

from emst import Infeasible, build_emst, distance
from point_files import random_points, sort_points


def complete_graph(points):
    """Every pair of points joined, weighted by Euclidean distance"""
    G = nx.Graph()
    for p in points:
        G.add_node(p.id, x=p.x, y=p.y)
    for i, a in enumerate(points):
        for b in points[i + 1 :]:
            G.add_edge(a.id, b.id, weight=distance(a, b))
    return G


def reference_mst(points):
    return nx.minimum_spanning_tree(
        complete_graph(points), weight="weight", algorithm="kruskal"
    )


def reference_weight(points):
    mst = reference_mst(points)
    return sum(data["weight"] for _, _, data in mst.edges(data=True))


def bottleneck_weight(points):
    """Heaviest edge of the reference MST; any alpha at or above it is feasible"""
    mst = reference_mst(points)
    return max((data["weight"] for _, _, data in mst.edges(data=True)), default=0.0)


def run_experiment(num_points, side, seed, alpha=math.inf):
    """Build one random instance and compare against networkx"""
    points = sort_points(random_points(num_points, side, seed))

    nx_weight = reference_weight(points)
    try:
        result = build_emst(points, alpha)
        feasible = True
        weight = result.total_weight
        edges_found = len(result.edges)
    except Infeasible:
        feasible = False
        weight = None
        edges_found = 0

    is_correct = (
        feasible and math.isclose(weight, nx_weight, rel_tol=1e-9, abs_tol=1e-9)
    ) or (not feasible and alpha < bottleneck_weight(points))

    return {
        "num_points": num_points,
        "side": side,
        "seed": seed,
        "alpha": alpha if math.isfinite(alpha) else str(alpha),
        "feasible": feasible,
        "mst_weight": weight,
        "networkx_weight": nx_weight,
        "edges_found": edges_found,
        "edges_expected": num_points - 1,
        "is_correct": is_correct,
    }


def main():
    """Run a fixed set of random instances and save the results"""
    configs = [
        {"num_points": 5, "side": 10, "seed": 42},
        {"num_points": 10, "side": 20, "seed": 100},
        {"num_points": 50, "side": 100, "seed": 200},
        {"num_points": 200, "side": 1000, "seed": 300},
        {"num_points": 50, "side": 100, "seed": 400, "alpha": 5.0},
    ]

    results = [run_experiment(**config) for config in configs]

    print(f"{'Points':<8} {'Alpha':<8} {'EMST Wt':<14} {'NX Wt':<14} {'Status':<8}")
    print("-" * 56)
    for r in results:
        weight = "FAIL" if r["mst_weight"] is None else f"{r['mst_weight']:.4f}"
        status = "PASS" if r["is_correct"] else "WRONG"
        print(
            f"{r['num_points']:<8} {r['alpha']!s:<8} {weight:<14} "
            f"{r['networkx_weight']:<14.4f} {status:<8}"
        )

    with open("emst_experiments.json", "w") as f:
        json.dump(results, f, indent=2)
    print("\nAll results saved to: emst_experiments.json")


if __name__ == "__main__":
    main()
