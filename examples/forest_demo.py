"""Plant five oaks and show they all share one TreeType."""

import json
import logging

from flyweight import Forest, RegistrySettings, configure_logging

PLANTINGS = [
    {"x": 10, "y": 20, "name": "Oak", "color": "Brown", "texture": "oak.jpg"},
    {"x": 3, "y": 25, "name": "Oak", "color": "Brown", "texture": "oak.jpg"},
    {"x": 7, "y": 50, "name": "Oak", "color": "Brown", "texture": "oak.jpg"},
    {"x": 1, "y": 30, "name": "Oak", "color": "Brown", "texture": "oak.jpg"},
    {"x": 2, "y": 37, "name": "Oak", "color": "Brown", "texture": "oak.jpg"},
]


def main() -> None:
    logging.basicConfig(format="%(message)s")
    configure_logging(RegistrySettings(log_level="INFO"))

    forest = Forest()
    for planting in PLANTINGS:
        forest.plant_tree(**planting)

    # Every tree reports the same tree_type_id
    print(json.dumps(forest.dump(), indent=2))
    print(f"Trees: {len(forest)}, shared tree types: {len(forest.tree_types())}")

    print("\n===\n")
    forest.draw("Monitor")


if __name__ == "__main__":
    main()
