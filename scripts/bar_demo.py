#!/usr/bin/env python3
"""
bar_demo.py
===========

Vertical bars with per-bar widths.

Usage
-----
python scripts/bar_demo.py                                    # interactive window
python scripts/bar_demo.py --out figs/bar                     # figs/bar.png
python scripts/bar_demo.py --out figs/bar --config plot.yaml  # formats/dpi/backend from YAML
"""

from __future__ import annotations

import argparse
from pathlib import Path

from segplot.io.config import PlotConfig, load_plot_config
from segplot.io.logging_utils import setup_logger
from segplot.viz.pyplot import plot_session


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="segplot bar demo")
    p.add_argument("--out", type=str, default="", help="Output base path (no extension). Empty: show window.")
    p.add_argument("--config", type=str, default="", help="Plot config YAML (formats, dpi, backend)")
    p.add_argument("--dpi", type=int, default=None, help="Override config dpi")
    p.add_argument("--horizontal", action="store_true", help="Draw horizontal bars")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logger = setup_logger()

    config = load_plot_config(Path(args.config)) if args.config else PlotConfig()
    config = config.with_overrides(dpi=args.dpi, backend="Agg" if args.out and config.backend is None else None)

    x = [1, 3, 6, 10]
    y = [4, 3, 2, 1]
    widths = [1, 2, 3, 4]

    with plot_session(backend=config.backend) as plt:
        fig = plt.figure()
        ax = fig.gca()
        ax.bar(x, y, widths=widths, horizontal=args.horizontal)
        if args.out:
            for path in fig.savefig(Path(args.out), config.formats, dpi=config.dpi):
                logger.info("wrote %s", path)
        else:
            plt.show()


if __name__ == "__main__":
    main()
