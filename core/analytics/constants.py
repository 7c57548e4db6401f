"""
Constants for activity analytics.
"""

from __future__ import annotations

from typing import Final


# Days shown by the activity heatmap (52 weeks + today)
HEATMAP_DAYS: Final[int] = 365

# Upper bounds (inclusive) of heatmap intensity levels 1..4.
# 0 cards is level 0; anything above the last bound is the top level.
ACTIVITY_LEVEL_BOUNDS: Final[list[int]] = [5, 15, 30]
