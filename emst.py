"""
Euclidean Minimum Spanning Tree with a maximum edge weight (alpha)
Grows the tree Prim-style over a complete graph of 2D integer points
"""

import argparse
import logging
import math
import sys
from collections import namedtuple

import matplotlib.pyplot as plt
import networkx as nx

logger = logging.getLogger(__name__)

Point = namedtuple("Point", ["x", "y", "id"])


def distance(a, b):
    """Euclidean distance between two points"""
    dx = float(a.x - b.x)
    dy = float(a.y - b.y)
    return math.sqrt(dx * dx + dy * dy)


class Infeasible(Exception):
    """The tree cannot be grown over all points within alpha"""

    def __init__(self, message, weight=None, alpha=None):
        super().__init__(message)
        self.weight = weight
        self.alpha = alpha


class Edge:
    def __init__(self, p1, p2, weight):
        self.p1 = p1
        self.p2 = p2
        self.weight = weight

    def canonical(self):
        """Endpoints ordered by (x, y)"""
        a, b = self.p1, self.p2
        if (a.x, a.y) > (b.x, b.y):
            a, b = b, a
        return a, b

    def __str__(self):
        a, b = self.canonical()
        return f"({a.x}, {a.y})({b.x}, {b.y})"

    def __repr__(self):
        return f"Edge({self}, weight={self.weight!r})"


class TreeSlot:
    """Growth state of one point: membership, best connection cost, parent"""

    def __init__(self):
        self.in_tree = False
        self.cost = math.inf
        self.parent = -1


class EMSTResult:
    def __init__(self, total_weight, edges, num_points):
        self.total_weight = total_weight
        self.edges = edges
        self.num_points = num_points


def build_emst(points, alpha):
    """
    Build the EMST of `points` rooted at points[0]
    Raises Infeasible as soon as an annexing edge is heavier than alpha
    """
    n = len(points)
    if n == 0:
        raise ValueError("build_emst needs at least one point")
    if n == 1:
        return EMSTResult(0.0, [], 1)

    slots = [TreeSlot() for _ in range(n)]
    slots[0].cost = 0.0

    edges = []
    total_weight = 0.0

    for _ in range(n):
        # Closest point outside the tree, first index wins on ties
        u = -1
        for v in range(n):
            if not slots[v].in_tree and (u == -1 or slots[v].cost < slots[u].cost):
                u = v

        if u == -1 or slots[u].cost == math.inf:
            raise Infeasible("point set is disconnected")

        slot = slots[u]
        if slot.parent != -1:
            if slot.cost > alpha:
                logger.debug(
                    "Edge to point %d has weight %r > alpha %r", u, slot.cost, alpha
                )
                raise Infeasible(
                    f"edge weight {slot.cost!r} exceeds alpha {alpha!r}",
                    weight=slot.cost,
                    alpha=alpha,
                )
            total_weight += slot.cost
            edges.append(Edge(points[slot.parent], points[u], slot.cost))

        slot.in_tree = True

        # Relax; "<=" lets the newest tree point take over equal distances
        for v in range(n):
            other = slots[v]
            if not other.in_tree:
                dist = distance(points[u], points[v])
                if dist <= other.cost:
                    other.cost = dist
                    other.parent = u

    logger.debug("Tree over %d points, total weight %r", n, total_weight)
    return EMSTResult(total_weight, edges, n)


def format_edges(edges):
    """Canonical edge strings in lexicographic order"""
    return sorted(str(edge) for edge in edges)


class OutputFormat:
    """How results are written out; passed explicitly instead of a global locale"""

    def __init__(
        self, decimals=10, max_listed_points=10, decimal_point=".", failure_text="FAIL"
    ):
        self.decimals = decimals
        self.max_listed_points = max_listed_points
        self.decimal_point = decimal_point
        self.failure_text = failure_text


DEFAULT_FORMAT = OutputFormat()


def format_weight(weight, fmt=DEFAULT_FORMAT):
    text = f"{weight:.{fmt.decimals}f}"
    if fmt.decimal_point != ".":
        text = text.replace(".", fmt.decimal_point)
    return text


def render_result(result, fmt=DEFAULT_FORMAT):
    """Weight line, then edge lines for small instances"""
    lines = [format_weight(result.total_weight, fmt)]
    if result.num_points <= fmt.max_listed_points:
        lines.extend(format_edges(result.edges))
    return lines


def render_failure(fmt=DEFAULT_FORMAT):
    return [fmt.failure_text]


def solve(points, alpha, fmt=DEFAULT_FORMAT):
    """Output lines for points already sorted by (y, x)"""
    if not points:
        return render_failure(fmt)
    try:
        result = build_emst(points, alpha)
    except Infeasible as e:
        logger.info("Infeasible: %s", e)
        return render_failure(fmt)
    return render_result(result, fmt)


def visualize_tree(points, result, save_path="emst.png"):
    """Plot the points and the tree edges at their coordinates"""
    tree = nx.Graph()
    for p in points:
        tree.add_node(p.id)
    for edge in result.edges:
        tree.add_edge(edge.p1.id, edge.p2.id, weight=edge.weight)

    pos = {p.id: (p.x, p.y) for p in points}

    fig, ax = plt.subplots(figsize=(8, 8))
    ax.set_title(
        f"EMST ({len(points)} points, weight {result.total_weight:.4f})",
        fontsize=14,
        fontweight="bold",
    )
    nx.draw(
        tree,
        pos,
        ax=ax,
        with_labels=len(points) <= 30,
        node_color="lightgreen",
        node_size=300,
        font_size=8,
        edge_color="red",
        width=2,
    )
    ax.set_aspect("equal")

    plt.tight_layout()
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    logger.info("Visualization saved to %s", save_path)
    plt.close(fig)

    return tree


def main(argv=None):
    """Read points from a file and print the alpha-bounded EMST"""
    from point_files import load_points, parse_alpha, sort_points

    parser = argparse.ArgumentParser(
        description="Euclidean MST of 2D integer points with a maximum edge weight"
    )
    parser.add_argument("input", help="File with one 'x,y' point per line")
    parser.add_argument("alpha", help="Maximum allowed edge weight")
    parser.add_argument("--plot", metavar="PATH", help="Save a plot of the tree")
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Compare the weight with a networkx Kruskal MST",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    fmt = DEFAULT_FORMAT

    try:
        alpha = parse_alpha(args.alpha)
    except ValueError:
        print(fmt.failure_text)
        return 0

    try:
        points = load_points(args.input)
    except OSError as e:
        logger.error("Cannot read %s: %s", args.input, e)
        return 1

    if not points:
        print(fmt.failure_text)
        return 0

    if len(points) == 1:
        print(format_weight(0.0, fmt))
        return 0

    points = sort_points(points)

    try:
        result = build_emst(points, alpha)
    except Infeasible as e:
        logger.info("Infeasible: %s", e)
        print(fmt.failure_text)
        return 0

    for line in render_result(result, fmt):
        print(line)

    if args.verify:
        from check_mst import reference_weight

        expected = reference_weight(points)
        if math.isclose(result.total_weight, expected, rel_tol=1e-9, abs_tol=1e-9):
            logger.info("Weight matches networkx MST (%r)", expected)
        else:
            logger.warning(
                "Weight %r differs from networkx MST %r", result.total_weight, expected
            )

    if args.plot:
        visualize_tree(points, result, args.plot)

    return 0


if __name__ == "__main__":
    sys.exit(main())
