"""
segplot.transforms
==================

Pure data transforms that turn parsed inputs into plot coordinates.
"""

from .segments import LazySequence, Segment, as_segment, to_polyline
from .scatter import sample_counts

__all__ = ["LazySequence", "Segment", "as_segment", "to_polyline", "sample_counts"]
