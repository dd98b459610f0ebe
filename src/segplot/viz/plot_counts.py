# src/segplot/viz/plot_counts.py
"""
plot_counts.py
==============

Count scatter with an optional segment overlay, for one target.

Design (same as other segplot.viz modules)
------------------------------------------
• Takes parsed data + a PyPlot handle, returns the Figure handle.
• No file reading here; counts come from a CountSource, segments from a SegmentSet.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence, TextIO

from segplot.io.config import PlotConfig
from segplot.io.inputs import CountSource, CountTrack, SegmentSet, resolve_target
from segplot.transforms.scatter import sample_counts
from segplot.transforms.segments import SegmentLike, to_polyline

from .pyplot import Figure, PyPlot

logger = logging.getLogger(__name__)


def format_polyline(xs: Iterable[float], ys: Iterable[float]) -> Iterator[str]:
    """One line per point: x rounded, right-aligned with ``_`` thousands separators, y to 3 decimals."""
    for x, y in zip(xs, ys):
        yield f"{x:>12_.0f}, {y:.3f}"


def plot_counts(
    plot: PyPlot,
    track: CountTrack,
    segments: Optional[Sequence[SegmentLike]] = None,
    *,
    config: PlotConfig = PlotConfig(),
    dump: Optional[TextIO] = None,
    rng=None,
) -> Figure:
    """
    Scatter subsampled counts and draw segments as a broken line on top.

    Parameters
    ----------
    plot : PyPlot
        Handle from plot_session().
    track : CountTrack
        Counts, positions and coverage of the target.
    segments : optional
        Segments to overlay; indices refer to ``track.positions``.
    dump : text stream, optional
        If given, every polyline point is written there before plotting.
    rng : optional
        Jitter source for sample_counts.
    """
    fig = plot.figure()
    ax = fig.gca()

    xs, ys = sample_counts(
        track.counts,
        track.positions,
        max_count=config.max_count,
        coverage=track.coverage,
        step=config.step,
        rng=rng,
    )
    ax.scatter(xs, ys, config.alpha)
    logger.info("plotted %d sampled counts (step=%d)", xs.shape[0], config.step)

    if segments is not None:
        sx, sy = to_polyline(segments, track.positions)
        if dump is not None:
            for line in format_polyline(sx, sy):
                dump.write(line + "\n")
        ax.line(sx, sy)
        logger.info("plotted %d segments", len(segments))

    return fig


def plot_target(
    plot: PyPlot,
    source: CountSource,
    *,
    segment_set: Optional[SegmentSet] = None,
    target: Optional[str] = None,
    config: PlotConfig = PlotConfig(),
    dump: Optional[TextIO] = None,
    out_base: Optional[Path] = None,
    rng=None,
) -> Figure:
    """
    Resolve the target, fetch its counts and plot them with the segments.

    With ``out_base`` the figure is also saved once per ``config.formats``
    at ``config.dpi``.

    MissingInputError is raised before any figure is created.
    """
    name = resolve_target(segment_set, target)
    logger.info("plotting target %s", name)
    track = source.get(name)
    segments = segment_set.segments if segment_set is not None else None
    fig = plot_counts(plot, track, segments, config=config, dump=dump, rng=rng)
    fig.gca().set_title(name)
    if out_base is not None:
        fig.savefig(Path(out_base), config.formats, dpi=config.dpi)
    return fig
