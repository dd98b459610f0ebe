# src/segplot/io/inputs.py
"""
segplot.io.inputs
=================

Already-parsed inputs handed to the plotting layer.

What belongs here
-----------------
- SegmentSet: target name + ordered segments (from an external segment reader)
- CountTrack: counts, positions and coverage for one target
- CountSource: the interface an external counts store implements
- Target resolution (segment file wins over an explicit target)

What does NOT belong here
-------------------------
- Reading segment / count files (external collaborators)
- Plotting (that's segplot.viz)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence

from segplot.transforms.segments import Segment, SegmentLike, as_segment


class MissingInputError(ValueError):
    """Neither a segment set nor an explicit target was supplied."""


@dataclass
class SegmentSet:
    target: str
    segments: List[Segment] = field(default_factory=list)

    @classmethod
    def from_items(cls, target: str, items: Sequence[SegmentLike]) -> "SegmentSet":
        return cls(target=target, segments=[as_segment(it) for it in items])


@dataclass
class CountTrack:
    counts: Sequence[float]
    positions: Sequence[float]
    coverage: float


class CountSource(Protocol):
    def get(self, target: str) -> CountTrack:
        ...


def resolve_target(segment_set: Optional[SegmentSet] = None, target: Optional[str] = None) -> str:
    """
    Pick the target to plot.

    The segment set's own target is preferred; otherwise ``target`` is used.
    Raises MissingInputError if neither is available.
    """
    if segment_set is not None and segment_set.target:
        return segment_set.target
    if target:
        return target
    raise MissingInputError("Need segments or target")
