"""
Point files for the EMST solver
One 'x,y' integer pair per line; malformed lines are skipped
"""

import logging
import os
import random
import re

import matplotlib.pyplot as plt

from emst import Point

logger = logging.getLogger(__name__)

# Only ASCII control characters and space count as padding; U+00A0 does not
TRIM_CHARS = "".join(chr(c) for c in range(0x21))

# Any Unicode decimal digit, 32-bit signed range
INT_PATTERN = re.compile(r"[+-]?\d+")
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

ALPHA_DECIMAL = re.compile(
    r"[+-]?(?:NaN|Infinity|(?P<num>(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)[fFdD]?)"
)
ALPHA_HEX = re.compile(
    r"(?P<hex>[+-]?0[xX](?:[0-9a-fA-F]+\.?|[0-9a-fA-F]*\.[0-9a-fA-F]+)[pP][+-]?[0-9]+)[fFdD]?"
)


def trim(text):
    return text.strip(TRIM_CHARS)


def parse_alpha(text):
    """
    Threshold in the usual double literal grammar: "Infinity", "NaN",
    decimal or hex with an optional f/d suffix. "inf" and "1_000" are rejected.
    Raises ValueError for anything else.
    """
    text = trim(text)
    match = ALPHA_HEX.fullmatch(text)
    if match:
        return float.fromhex(match.group("hex"))
    match = ALPHA_DECIMAL.fullmatch(text)
    if not match:
        raise ValueError(f"not a number: {text!r}")
    if match.group("num") is None:
        # Python spells these the same way, case-insensitively
        return float(text)
    sign = "-" if text.startswith("-") else ""
    return float(sign + match.group("num"))


def parse_int(text):
    """Signed 32-bit decimal integer, or None"""
    text = trim(text)
    if not INT_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if value < INT_MIN or value > INT_MAX:
        return None
    return value


def parse_point_line(line):
    """Return (x, y) for a well-formed record, None otherwise"""
    line = trim(line)
    if not line:
        return None

    parts = line.split(",")
    # Trailing empty fields do not count ("3,4," is a valid record)
    while parts and parts[-1] == "":
        parts.pop()
    if len(parts) != 2:
        return None

    x = parse_int(parts[0])
    y = parse_int(parts[1])
    if x is None or y is None:
        return None
    return x, y


def load_points(path):
    """Read points in file order; ids follow the order they were read"""
    points = []
    # Undecodable bytes become U+FFFD, so such lines fail to parse and are skipped
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        for line_no, line in enumerate(f, 1):
            parsed = parse_point_line(line)
            if parsed is None:
                if trim(line):
                    logger.debug("Skipping line %d of %s: %r", line_no, path, line)
                continue
            points.append(Point(parsed[0], parsed[1], len(points)))

    logger.debug("Loaded %d points from %s", len(points), path)
    return points


def sort_points(points):
    """Ascending by (y, x); the first point becomes the tree root"""
    return sorted(points, key=lambda p: (p.y, p.x))


def random_points(num_points=10, side=100, seed=42):
    """Distinct random integer points in [0, side] x [0, side]"""
    if num_points > (side + 1) ** 2:
        raise ValueError(f"Cannot place {num_points} distinct points in side {side}")

    rng = random.Random(seed)
    seen = set()
    points = []
    while len(points) < num_points:
        xy = (rng.randint(0, side), rng.randint(0, side))
        if xy in seen:
            continue
        seen.add(xy)
        points.append(Point(xy[0], xy[1], len(points)))
    return points


def write_points(points, path):
    """Write one 'x,y' line per point"""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(path, "w") as f:
        for p in points:
            f.write(f"{p.x},{p.y}\n")

    return path


def visualize_points(points, save_path):
    """Scatter plot of the input points"""
    fig, ax = plt.subplots(figsize=(8, 8))
    ax.scatter([p.x for p in points], [p.y for p in points], c="lightblue",
               edgecolors="black", s=60)
    if len(points) <= 30:
        for p in points:
            ax.annotate(str(p.id), (p.x, p.y), fontsize=8)
    ax.set_aspect("equal")
    ax.set_title("Input Points for EMST", fontsize=14, fontweight="bold")

    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return save_path


def main(argv=None):
    """Generate a random point file"""
    import argparse

    parser = argparse.ArgumentParser(description="Generate a random point file")
    parser.add_argument(
        "--points", type=int, default=10, help="Number of points (default: 10)"
    )
    parser.add_argument(
        "--side", type=int, default=100, help="Coordinate range 0..side (default: 100)"
    )
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument(
        "--output",
        type=str,
        default="points.txt",
        help="Output file (default: points.txt)",
    )
    parser.add_argument("--plot", metavar="PATH", help="Save a scatter plot")

    args = parser.parse_args(argv)

    points = random_points(args.points, args.side, args.seed)
    write_points(points, args.output)
    print(f"Wrote {len(points)} points to {args.output}")

    if args.plot:
        visualize_points(points, args.plot)
        print(f"Plot saved to {args.plot}")

    print(f"\nTo compute the EMST:")
    print(f"  python emst.py {args.output} <alpha>")


if __name__ == "__main__":
    main()
