"""
segplot
=======

Small matplotlib handles plus the transforms needed to draw genomic count
scatters with piecewise-constant segment overlays.
"""

from segplot.io.inputs import CountTrack, MissingInputError, SegmentSet
from segplot.transforms import Segment, sample_counts, to_polyline
from segplot.viz import Axes, Figure, PyPlot, plot_session

__version__ = "0.1.0"

__all__ = [
    "Axes",
    "CountTrack",
    "Figure",
    "MissingInputError",
    "PyPlot",
    "Segment",
    "SegmentSet",
    "plot_session",
    "sample_counts",
    "to_polyline",
]
