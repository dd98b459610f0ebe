"""
style.py
========

Central plotting style helpers.

Keep this small:
• lightweight rcParams defaults for count/segment figures
• saving one figure in several formats
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

import matplotlib.pyplot as plt

logger = logging.getLogger(__name__)


def apply_mpl_defaults() -> None:
    """
    Apply lightweight defaults.
    Call once per plotting session (plot_session does this by default).
    """
    plt.rcParams["figure.dpi"] = 120
    plt.rcParams["savefig.dpi"] = 160
    plt.rcParams["axes.grid"] = True
    plt.rcParams["grid.alpha"] = 0.25
    plt.rcParams["axes.titlesize"] = 11
    plt.rcParams["axes.labelsize"] = 11
    plt.rcParams["legend.fontsize"] = 9
    plt.rcParams["lines.linewidth"] = 1.6


def save_figure(fig: plt.Figure, out_base: Path, formats: Sequence[str] = ("png",), dpi: int = 160) -> List[Path]:
    """
    Save ``fig`` once per format as ``out_base.<fmt>`` and return the written paths.

    The format replaces any existing suffix of ``out_base``: "sample.chr1"
    becomes "sample.png". Put dotted names in the directory part, or use
    "sample_chr1".
    """
    out_base = Path(out_base)
    out_base.parent.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []
    for fmt in formats:
        fmt = fmt.lower().lstrip(".")
        path = out_base.with_suffix(f".{fmt}")
        fig.savefig(path, dpi=dpi, bbox_inches="tight")
        written.append(path)
        logger.info("saved figure: %s", path)
    return written
