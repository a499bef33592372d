"""
Observers: read-only recorders attached to a larva.

Observers see the chain after each tick. They never push on it.
- CenterTracker: centroid and head path over time
- SegmentRecorder: actual vs target segment lengths over time
"""

from larvasim.observers.base import Observer
from larvasim.observers.tracker import CenterTracker
from larvasim.observers.segments import SegmentRecorder

__all__ = [
    "Observer",
    "CenterTracker",
    "SegmentRecorder",
]
