"""
Write the reference scenarios as point files for manual runs of emst.py
"""

import json
import os

SCENARIOS = {
    "triangle": {
        "points": [(0, 0), (0, 3), (4, 0)],
        "alpha": 10.0,
        "expected": ["7.0000000000", "(0, 0)(0, 3)", "(0, 0)(4, 0)"],
    },
    "triangle_tight": {
        "points": [(0, 0), (0, 3), (4, 0)],
        "alpha": 2.0,
        "expected": ["FAIL"],
    },
    "single": {
        "points": [(5, 5)],
        "alpha": 1.0,
        "expected": ["0.0000000000"],
    },
    "line_of_eleven": {
        "points": [(i, 0) for i in range(11)],
        "alpha": 1.0,
        "expected": ["10.0000000000"],
    },
}


def create_scenarios(output_dir="scenarios"):
    os.makedirs(output_dir, exist_ok=True)

    index = {}
    for name, scenario in SCENARIOS.items():
        filename = os.path.join(output_dir, f"{name}.txt")
        with open(filename, "w") as f:
            for x, y in scenario["points"]:
                f.write(f"{x},{y}\n")
        index[name] = {
            "file": filename,
            "alpha": scenario["alpha"],
            "expected": scenario["expected"],
        }
        print(f"  Created {filename}: {len(scenario['points'])} points")

    with open(os.path.join(output_dir, "scenarios.json"), "w") as f:
        json.dump(index, f, indent=2)

    return index


if __name__ == "__main__":
    create_scenarios()
