#!/usr/bin/env python3
"""
Interactive console with a seeded demo restaurant.

Usage (from project root):
    python scripts/console.py              # seed, print summary, open a shell
    python scripts/console.py --no-shell   # seed and print summary only

Environment variables (all optional):
    DINER_REGISTRY_BACKEND  - "memory" or "locked" (default: memory)
    LOG_LEVEL               - logging level (default: INFO)

Inside the shell, `restaurant` is the demo dining room and every seeded
person is bound by lower-case name (howard, terrance, ...).
"""

import code
import logging
import os
import sys

# Allow running as `python scripts/console.py` from project root.
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from diner.demo import seed_demo, summarize
from diner.restaurant import Restaurant

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s  %(levelname)-7s  %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
log = logging.getLogger(__name__)


def main() -> None:
    try:
        restaurant = Restaurant.create()
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)

    people = seed_demo(restaurant)

    print()
    for line in summarize(restaurant):
        print(f"  {line}")
    print()

    if "--no-shell" in sys.argv[1:]:
        return

    namespace = {"restaurant": restaurant, **people}
    code.interact(
        banner=f"Bound: restaurant, {', '.join(people)}. Ctrl-D to quit.",
        local=namespace,
    )


if __name__ == "__main__":
    main()
