"""
Event projections for building read models over a recorded buffer.
"""

from uirecorder.events.projections.base import Projection
from uirecorder.events.projections.statistics import (
    EventCountProjection,
    ScreenActivity,
    ScreenActivityProjection,
)

__all__ = [
    "Projection",
    "EventCountProjection",
    "ScreenActivity",
    "ScreenActivityProjection",
]
