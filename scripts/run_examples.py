#!/usr/bin/env python3
"""
Example gallery: builds a few ordinary charts, xkcdifies them and saves PNGs.
"""

import argparse
import logging
import sys
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from tqdm import tqdm

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from xkcdify import XkcdStyle, xkcdify
from xkcdify.utils.config import Config
from xkcdify.utils.config_validation import validate_config
from xkcdify.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def lines_markers_and_text(style, rng):
    """Lines, markers, axes labels and free text."""
    x = np.arange(0, 2 * np.pi, 0.05)
    flat = np.zeros_like(x)
    square = np.mod(np.round(x / np.pi), 2) * 1.5 - 0.75
    sine = 0.2 + 0.6 * np.sin(x)

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.plot(x, flat, linewidth=4)
    ax.plot(x, square, linewidth=4)
    ax.plot(x, sine, linewidth=4)
    ax.plot(x[::15], sine[::15], "o")
    ax.plot(x[::15], square[::15], "xk")
    ax.set_xlabel("Time")
    ax.set_ylabel("Value")
    ax.text(2, -0.5, "Funny Plot", fontsize=16)
    ax.set_title("Funny Plot")
    ax.set_xlim(0, 6)
    ax.set_ylim(-1.1, 1.1)

    xkcdify(ax, style=style, rng=rng)
    return fig


def normal_vs_xkcd(style, rng):
    """The same line plot before and after."""
    x = np.arange(0, 2 * np.pi, 0.05)
    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    for ax, name in zip(axes, ["Normal Plot", "XKCDified Plot"]):
        ax.plot(x, np.zeros_like(x), linewidth=4)
        ax.plot(x, np.mod(np.round(x / np.pi), 2) * 1.5 - 0.75, linewidth=4)
        ax.plot(x, 0.2 + 0.6 * np.sin(x), linewidth=4)
        ax.set_xlabel("Time")
        ax.set_ylabel("Value")
        ax.text(2, -0.5, name, fontsize=16)
        ax.set_title(name)
        ax.set_xlim(x[0] - 0.25, x[-1] + 0.25)
        ax.set_ylim(-0.9, 0.9)

    xkcdify(axes[1], style=style, rng=rng)
    return fig


def bars_with_line(style, rng):
    """A bar chart with a line on top."""
    x = np.arange(0, 5.05, 0.1)
    y = 1 + (x - 2) ** 2

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    for ax in axes:
        ax.bar([1, 2, 3, 4], [3, 2, 4, 6], color=["tab:blue", "tab:orange", "tab:green", "tab:red"])
        ax.plot(x, y, color="r", linewidth=3)
        ax.set_xlim(0.5, 4.5)
        ax.set_ylim(0, 7)

    xkcdify(axes[1], style=style, rng=rng)
    return fig


def boxplot_with_line(style, rng):
    """A box plot with a line on top."""
    n = 5
    data = rng.random((20, n)) * 5
    x = np.arange(1, n + 1)
    y = data.mean(axis=0) + rng.random(n)

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    for ax in axes:
        ax.boxplot(data, boxprops={"linewidth": 3}, whiskerprops={"linewidth": 3},
                   capprops={"linewidth": 3}, medianprops={"linewidth": 3})
        ax.plot(x, y, color="g", linewidth=3)

    xkcdify(axes[1], style=style, rng=rng)
    return fig


def subset_of_axes(style, rng):
    """Only some subplots of a figure are xkcdified."""
    x = np.arange(0, 2 * np.pi, 0.1)
    fig, axes = plt.subplots(1, 3, figsize=(15, 4))
    for i, ax in enumerate(axes, start=1):
        ax.plot(x * i, np.sin(x / (i / 2)), x * i, np.cos(x / (i / 2)), linewidth=4)
        ax.set_xlim((x[0] - 0.25) * i, (x[-1] + 0.25) * i)
        ax.set_ylim(-1.2, 1.2)

    xkcdify(axes[1:], style=style, rng=rng)
    return fig


EXAMPLES = {
    "lines": lines_markers_and_text,
    "normal_vs_xkcd": normal_vs_xkcd,
    "bars": bars_with_line,
    "boxplot": boxplot_with_line,
    "subset": subset_of_axes,
}


def parse_args():
    parser = argparse.ArgumentParser(description="Render the xkcdify example gallery")
    parser.add_argument(
        "--config",
        type=str,
        default="configs/default_style.yml",
        help="Path to configuration file"
    )
    parser.add_argument(
        "--output_dir",
        type=str,
        help="Override figure output directory"
    )
    parser.add_argument(
        "--examples",
        nargs="+",
        choices=sorted(EXAMPLES),
        default=list(EXAMPLES),
        help="Examples to render"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for reproducible wobble"
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Also show each figure interactively"
    )
    return parser.parse_args()


def main():
    args = parse_args()

    config = Config(args.config)
    validate_config(config)
    if args.output_dir:
        config.set('output.figures_dir', args.output_dir)

    setup_logging(
        log_dir=config.get('output.logs_dir', 'logs'),
        log_level=config.get('logging.level', 'INFO'),
        log_to_file=config.get('logging.log_to_file', True)
    )

    if not args.show:
        plt.switch_backend("agg")

    style = XkcdStyle.from_config(config)
    rng = np.random.default_rng(args.seed)
    output_dir = Path(config.get('output.figures_dir', 'results/figures'))
    output_dir.mkdir(parents=True, exist_ok=True)

    logger.info(f"Rendering {len(args.examples)} examples to {output_dir}")

    try:
        for name in tqdm(args.examples, desc="Examples"):
            fig = EXAMPLES[name](style, rng)
            save_path = output_dir / f"{name}.png"
            fig.savefig(save_path, dpi=100)
            logger.info(f"Saved {save_path}")
            if args.show:
                plt.show()
            plt.close(fig)
    except Exception as e:
        logger.error(f"Rendering failed: {e}", exc_info=True)
        raise


if __name__ == "__main__":
    main()
