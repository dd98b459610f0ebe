#!/usr/bin/env python3
"""
heatmap_demo.py
===============

4x4 heatmap via imshow.

Usage
-----
python scripts/heatmap_demo.py [--out figs/heatmap] [--config plot.yaml]
"""

from __future__ import annotations

import argparse
from pathlib import Path

import numpy as np

from segplot.io.config import PlotConfig, load_plot_config
from segplot.io.logging_utils import setup_logger
from segplot.viz.pyplot import plot_session


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="segplot heatmap demo")
    p.add_argument("--out", type=str, default="", help="Output base path (no extension). Empty: show window.")
    p.add_argument("--config", type=str, default="", help="Plot config YAML (formats, dpi, backend)")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logger = setup_logger()

    config = load_plot_config(Path(args.config)) if args.config else PlotConfig()
    if args.out and config.backend is None:
        config = config.with_overrides(backend="Agg")

    data = np.array(
        [
            [0.1, 0.2, 0.3, 0.4],
            [0.2, 0.3, 0.4, 0.1],
            [0.3, 0.4, 0.1, 0.2],
            [0.4, 0.1, 0.2, 0.3],
        ]
    )

    with plot_session(backend=config.backend) as plt:
        ax = plt.figure().gca()
        ax.heatmap(data).set_title("heatmap demo")
        if args.out:
            for path in ax.save(Path(args.out), config.formats, dpi=config.dpi):
                logger.info("wrote %s", path)
        else:
            plt.show()


if __name__ == "__main__":
    main()
