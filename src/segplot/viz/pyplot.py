# src/segplot/viz/pyplot.py
"""
pyplot.py
=========

Thin handles around ``matplotlib.pyplot`` figures and axes.

Design
------
• No plotting logic: every method collects its inputs into numpy arrays,
  forwards one call to matplotlib and returns a handle.
• matplotlib errors are not caught; they reach the caller unchanged.
• Handles borrow the matplotlib objects for the lifetime of a plot_session().

Example
-------
    with plot_session() as plt:
        ax = plt.figure().gca()
        ax.bar([1, 3, 6, 10], [4, 3, 2, 1], widths=[1, 2, 3, 4])
        plt.show()
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterable, Iterator, List, Optional, Sequence

import matplotlib
import numpy as np

from .style import apply_mpl_defaults, save_figure

logger = logging.getLogger(__name__)


def _as_array(values: Iterable[Any]) -> np.ndarray:
    """Collect an iterable (lazy sequences included) into a 1D array, once."""
    if isinstance(values, np.ndarray):
        return values
    if not isinstance(values, (list, tuple)):
        values = list(values)
    return np.asarray(values)


class PyPlot:
    """Wrapper around the ``matplotlib.pyplot`` module."""

    def __init__(self, plt: Any = None) -> None:
        if plt is None:
            import matplotlib.pyplot as plt
        self._plt = plt

    @property
    def module(self) -> Any:
        return self._plt

    def figure(self, **kwargs: Any) -> "Figure":
        """Create a new Figure (see ``matplotlib.pyplot.figure``)."""
        return Figure(self._plt.figure(**kwargs))

    def gcf(self) -> "Figure":
        """Current figure; matplotlib creates one if none exists."""
        return Figure(self._plt.gcf())

    def show(self) -> Any:
        return self._plt.show()

    def close(self, which: Any = "all") -> None:
        self._plt.close(which)


class Figure:
    """Plot surface: wraps a ``matplotlib.figure.Figure``."""

    def __init__(self, fig: Any) -> None:
        self.fig = fig

    def add_axes(
        self,
        left: float,
        bottom: float,
        width: float,
        height: float,
        share_x: Optional["Axes"] = None,
        share_y: Optional["Axes"] = None,
    ) -> "Axes":
        """Add axes at [left, bottom, width, height] in figure fractions."""
        shares = {}
        if share_x is not None:
            shares["sharex"] = share_x.axes
        if share_y is not None:
            shares["sharey"] = share_y.axes
        rect = [float(left), float(bottom), float(width), float(height)]
        return Axes(self, self.fig.add_axes(rect, **shares))

    def add_subplot(self, *args: Any, **kwargs: Any) -> "Axes":
        return Axes(self, self.fig.add_subplot(*args, **kwargs))

    def gca(self) -> "Axes":
        return Axes(self, self.fig.gca())

    def show(self) -> Any:
        return self.fig.show()

    def savefig(self, out_base: Path, formats: Sequence[str] = ("png",), dpi: int = 160) -> List[Path]:
        return save_figure(self.fig, out_base, formats, dpi=dpi)


class Axes:
    """Plot area: wraps a ``matplotlib.axes.Axes`` and remembers its Figure."""

    def __init__(self, figure: Figure, axes: Any) -> None:
        self.figure = figure
        self.axes = axes

    # Plotting -------------------------------------------------------
    def scatter(self, x: Iterable[float], y: Iterable[float], alpha: float) -> "Axes":
        """Small point markers; ``plot(x, y, ".")`` is much faster than ``scatter`` for big N."""
        x, y = _as_array(x), _as_array(y)
        logger.debug("scatter: %d points, alpha=%g", x.shape[0], alpha)
        self.axes.plot(x, y, ".", alpha=alpha, ms=1.0)
        return self

    def line(self, x: Iterable[float], y: Iterable[float], **kwargs: Any) -> "Axes":
        x, y = _as_array(x), _as_array(y)
        logger.debug("line: %d points", x.shape[0])
        self.axes.plot(x, y, **kwargs)
        return self

    def hist(self, x: Iterable[float], bins: Optional[Any] = None) -> "Axes":
        self.axes.hist(_as_array(x), bins=bins)
        return self

    def bar(
        self,
        x: Iterable[float],
        height: Iterable[float],
        widths: Optional[Iterable[float]] = None,
        horizontal: bool = False,
    ) -> "Axes":
        """
        Vertical (``bar``) or horizontal (``barh``) bars.

        ``widths`` is the bar thickness: passed as ``width=`` to bar and as
        ``height=`` to barh.
        """
        cmd = "barh" if horizontal else "bar"
        size_key = "height" if horizontal else "width"
        kwargs = {}
        if widths is not None:
            kwargs[size_key] = _as_array(widths)
        getattr(self.axes, cmd)(_as_array(x), _as_array(height), **kwargs)
        return self

    def heatmap(self, z: Any) -> "Axes":
        """``imshow`` of a 2D array."""
        self.axes.imshow(np.asarray(z))
        return self

    # Labels ---------------------------------------------------------
    def set_xlabel(self, label: str) -> "Axes":
        self.axes.set_xlabel(label)
        return self

    def set_ylabel(self, label: str) -> "Axes":
        self.axes.set_ylabel(label)
        return self

    def set_title(self, title: str) -> "Axes":
        self.axes.set_title(title)
        return self

    def legend(self, **kwargs: Any) -> "Axes":
        self.axes.legend(**kwargs)
        return self

    # Output ---------------------------------------------------------
    def save(self, out_base: Path, formats: Sequence[str] = ("png",), dpi: int = 160) -> List[Path]:
        return self.figure.savefig(out_base, formats, dpi=dpi)

    def show(self) -> Any:
        return self.figure.show()


@contextmanager
def plot_session(backend: Optional[str] = None, close: bool = True, defaults: bool = True) -> Iterator[PyPlot]:
    """
    One batch of plotting calls.

    Selects ``backend`` (if given) before pyplot is used, applies the style
    defaults and closes every figure on exit, errors included.
    """
    if backend is not None:
        matplotlib.use(backend)
    plot = PyPlot()
    if defaults:
        apply_mpl_defaults()
    logger.debug("plot session opened (backend=%s)", matplotlib.get_backend())
    try:
        yield plot
    finally:
        if close:
            plot.close("all")
            logger.debug("plot session closed")
