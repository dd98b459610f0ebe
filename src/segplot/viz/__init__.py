"""
segplot.viz
===========

Plotting layer for segplot.

Design
------
• pyplot.py holds the figure/axes handles; everything else draws through them.
• Plot modules take parsed arrays + metadata and return handles; no file reading.
"""

from .pyplot import Axes, Figure, PyPlot, plot_session

__all__ = ["Axes", "Figure", "PyPlot", "plot_session"]
