# src/segplot/transforms/segments.py
"""
segments.py
===========

Segment -> polyline transform.

A segment is a half-open index interval [start, end) with a constant level v.
To draw a list of segments as one line with visual breaks between them, every
segment becomes three points:

    (positions[start],   v)
    (positions[end - 1], v)
    (positions[end - 1], NaN)   <- pen-up sentinel

matplotlib does not connect a point with a NaN coordinate, so the sentinel
splits the line. x is repeated on the sentinel so the last drawn piece of each
segment has zero length.

Design
------
• Pure: no plotting, no I/O.
• Outputs are lazy but restartable: iterating twice gives the same points.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterator, Sequence, Tuple, Union


@dataclass(frozen=True)
class Segment:
    """Half-open interval [start, end) over a position index, with level ``value``."""

    start: int
    end: int
    value: float


SegmentLike = Union[Segment, Tuple[Tuple[int, int], float]]


def as_segment(item: SegmentLike) -> Segment:
    """Accept a ``Segment`` or a ``((start, end), value)`` pair."""
    if isinstance(item, Segment):
        return item
    (start, end), value = item
    return Segment(int(start), int(end), float(value))


class LazySequence:
    """
    Finite, restartable iterable built from a generator factory.

    Every ``iter()`` calls the factory again, so the sequence can be consumed
    any number of times (e.g. once for a dump and once for plotting).
    """

    def __init__(self, factory: Callable[[], Iterator[float]]) -> None:
        self._factory = factory

    def __iter__(self) -> Iterator[float]:
        return self._factory()


def _position(positions: Sequence[float], idx: int) -> float:
    # Plain indexing would wrap negative indices (end == 0) around.
    if idx < 0 or idx >= len(positions):
        raise IndexError(
            f"segment index {idx} out of range for {len(positions)} positions"
        )
    return float(positions[idx])


def _endpoints(seg: Segment, positions: Sequence[float]) -> Tuple[float, float]:
    """Return (positions[start], positions[end - 1]); empty or reversed intervals are out of bounds."""
    if seg.end <= seg.start:
        raise IndexError(f"empty segment interval [{seg.start}, {seg.end})")
    return _position(positions, seg.start), _position(positions, seg.end - 1)


def to_polyline(
    segments: Sequence[SegmentLike],
    positions: Sequence[float],
) -> Tuple[LazySequence, LazySequence]:
    """
    Convert segments into x/y coordinates for a NaN-broken line plot.

    Parameters
    ----------
    segments : sequence of Segment or ((start, end), value)
        Ordered segments. Not checked for overlap.
    positions : sequence of numbers
        Index -> coordinate (e.g. genomic position).

    Returns
    -------
    xs, ys : LazySequence
        Equal length (3 per segment), same order.

    Raises
    ------
    IndexError
        (on iteration) if a segment has end <= start, or its start or end-1
        is not a valid index.
    """

    def xs() -> Iterator[float]:
        for item in segments:
            first, last = _endpoints(as_segment(item), positions)
            yield first
            yield last
            yield last

    def ys() -> Iterator[float]:
        for item in segments:
            seg = as_segment(item)
            # keep the bounds failure on both sides of the pair
            _endpoints(seg, positions)
            yield seg.value
            yield seg.value
            yield math.nan

    return LazySequence(xs), LazySequence(ys)
