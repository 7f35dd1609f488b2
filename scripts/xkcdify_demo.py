#!/usr/bin/env python3
"""
Stacking order demo: three overlapping rectangles reordered step by step.
"""

import argparse
import logging
import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from xkcdify import uistack
from xkcdify.utils.logging import setup_logging

logger = logging.getLogger(__name__)

STEPS = [
    ("red", "top", 1),
    ("green", "top", 1),
    ("red", "down", 1),
    ("blue", "bottom", 1),
]


def parse_args():
    parser = argparse.ArgumentParser(description="Demonstrate uistack on overlapping rectangles")
    parser.add_argument(
        "--output_dir",
        type=str,
        default="results/stacking",
        help="Directory to save one PNG per step"
    )
    return parser.parse_args()


def main():
    args = parse_args()
    setup_logging(log_to_file=False)

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(5, 5))
    rects = {
        "green": Rectangle((1.5, 0.5), 2, 2, facecolor="g"),
        "blue": Rectangle((0.5, 1), 2, 2, facecolor="b"),
        "red": Rectangle((0, 0), 2, 2, facecolor="r"),
    }
    # Added back to front, so red starts in front.
    for rect in reversed(list(rects.values())):
        ax.add_patch(rect)
    ax.set_xlim(-0.5, 3.5)
    ax.set_ylim(-0.5, 3.5)
    ax.set_aspect("equal")

    names = {id(rect): name for name, rect in rects.items()}

    def order():
        return [names[id(a)] for a in reversed(ax.patches)]

    ax.set_title(f"Initial: {order()}")
    fig.savefig(output_dir / "step_0.png")
    logger.info(f"Initial order (front to back): {order()}")

    for i, (name, placement, step) in enumerate(STEPS, start=1):
        uistack(rects[name], placement, step)
        ax.set_title(f"uistack({name}, '{placement}'): {order()}")
        fig.savefig(output_dir / f"step_{i}.png")
        logger.info(f"After uistack({name}, '{placement}', {step}): {order()}")

    plt.close(fig)


if __name__ == "__main__":
    main()
