"""Thresholds used when separating trajectories."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta


@dataclass(frozen=True)
class SeparateConf:
    """Distance (metres) and time gap beyond which a trajectory is split."""

    distance: float = 1000.0
    time: timedelta = field(default_factory=lambda: timedelta(seconds=60))