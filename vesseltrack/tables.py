"""Column-oriented tables of vessel observations keyed by MMSI and time."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from vesseltrack.errors import MissingKeyError


class NavStatusValue(enum.Enum):
    """Navigational status reported by a vessel."""

    UNDER_WAY_USING_ENGINE = "under way using engine"
    ANCHORED = "at anchor"
    NOT_UNDER_COMMAND = "not under command"
    RESTRICTED_MANEUVERABILITY = "restricted maneuverability"
    CONSTRAINED_BY_HER_DRAUGHT = "constrained by her draught"
    MOORED = "moored"
    AGROUND = "aground"
    ENGAGED_IN_FISHING_ACTIVITY = "engaged in fishing"
    UNDERWAY_SAILING = "under way sailing"
    AIS_SART = "ais-sart (active)"


def nav_status_converter(field: str) -> NavStatusValue:
    """Map a stored status name onto a :class:`NavStatusValue`."""
    try:
        return NavStatusValue(field)
    except ValueError:
        raise ValueError(f"unknown navigational status: {field!r}") from None


def _first_index(matches) -> int:
    index = next((i for i, hit in enumerate(matches) if hit), None)
    if index is None:
        raise MissingKeyError()
    return index


def _covering(mmsis, begins, ends, mmsi: int, time: datetime):
    return (
        m == mmsi and begin <= time <= end
        for m, begin, end in zip(mmsis, begins, ends)
    )


def _exact(mmsis, times, mmsi: int, time: datetime):
    return (m == mmsi and t == time for m, t in zip(mmsis, times))


@dataclass
class NavStatus:
    """Navigational status per vessel over time intervals."""

    mmsi: list[int] = field(default_factory=list)
    time_begin: list[datetime] = field(default_factory=list)
    time_end: list[datetime] = field(default_factory=list)
    nav_status: list[NavStatusValue] = field(default_factory=list)

    def search_by_key(self, mmsi: int, time: datetime) -> NavStatusValue:
        """Status of ``mmsi`` during the first interval that contains ``time``."""
        index = _first_index(
            _covering(self.mmsi, self.time_begin, self.time_end, mmsi, time)
        )
        return self.nav_status[index]


@dataclass
class Draught:
    """Reported draught per vessel over time intervals."""

    mmsi: list[int] = field(default_factory=list)
    time_begin: list[datetime] = field(default_factory=list)
    time_end: list[datetime] = field(default_factory=list)
    draught: list[float] = field(default_factory=list)

    def search_by_key(self, mmsi: int, time: datetime) -> float:
        """Draught of ``mmsi`` during the first interval that contains ``time``."""
        index = _first_index(
            _covering(self.mmsi, self.time_begin, self.time_end, mmsi, time)
        )
        return self.draught[index]

    def search_range_by_time(
        self, mmsi: int, time_from: datetime, time_to: datetime
    ) -> list[int]:
        """Row indices of ``mmsi`` whose intervals overlap ``[time_from, time_to]``."""
        return [
            i
            for i, (m, begin, end) in enumerate(
                zip(self.mmsi, self.time_begin, self.time_end)
            )
            if m == mmsi and time_from <= end and time_to >= begin
        ]


@dataclass
class Cog:
    """Course over ground samples."""

    mmsi: list[int] = field(default_factory=list)
    time: list[datetime] = field(default_factory=list)
    cog: list[float] = field(default_factory=list)

    def search_by_key(self, mmsi: int, time: datetime) -> float:
        """Course of ``mmsi`` sampled exactly at ``time``."""
        return self.cog[_first_index(_exact(self.mmsi, self.time, mmsi, time))]


@dataclass
class Rot:
    """Rate of turn samples."""

    mmsi: list[int] = field(default_factory=list)
    time: list[datetime] = field(default_factory=list)
    rot: list[float] = field(default_factory=list)

    def search_by_key(self, mmsi: int, time: datetime) -> float:
        """Rate of turn of ``mmsi`` sampled exactly at ``time``."""
        return self.rot[_first_index(_exact(self.mmsi, self.time, mmsi, time))]


@dataclass
class Sog:
    """Speed over ground samples, with an index from (mmsi, time) to row."""

    mmsi: list[int] = field(default_factory=list)
    time: list[datetime] = field(default_factory=list)
    sog: list[float] = field(default_factory=list)
    b_tree_index: dict[tuple[int, datetime], int] = field(default_factory=dict)

    def search_by_key(self, mmsi: int, time: datetime) -> float:
        """Speed of ``mmsi`` sampled exactly at ``time``."""
        return self.sog[_first_index(_exact(self.mmsi, self.time, mmsi, time))]


@dataclass
class Dimensions:
    """Width and length of each vessel."""

    mmsi: list[int] = field(default_factory=list)
    width: list[float] = field(default_factory=list)
    length: list[float] = field(default_factory=list)

    def search_by_key(self, mmsi: int) -> tuple[float, float]:
        """``(width, length)`` of ``mmsi``."""
        index = _first_index(m == mmsi for m in self.mmsi)
        return self.width[index], self.length[index]


@dataclass
class GPSPosition:
    """Distances from the GPS antenna to bow (a), stern (b), port (c) and starboard (d)."""

    mmsi: list[int] = field(default_factory=list)
    a: list[float] = field(default_factory=list)
    b: list[float] = field(default_factory=list)
    c: list[float] = field(default_factory=list)
    d: list[float] = field(default_factory=list)

    def search_by_key(self, mmsi: int) -> tuple[float, float, float, float]:
        """``(a, b, c, d)`` of ``mmsi``."""
        index = _first_index(m == mmsi for m in self.mmsi)
        return self.a[index], self.b[index], self.c[index], self.d[index]


@dataclass
class StopObject:
    """Geometries where vessels stopped, per time interval."""

    mmsi: list[int] = field(default_factory=list)
    time_begin: list[datetime] = field(default_factory=list)
    time_end: list[datetime] = field(default_factory=list)
    geom: list[Any] = field(default_factory=list)

    def search_by_key(self, mmsi: int, time: datetime) -> Any:
        """Geometry of ``mmsi`` during the first interval that contains ``time``."""
        index = _first_index(
            _covering(self.mmsi, self.time_begin, self.time_end, mmsi, time)
        )
        return self.geom[index]


@dataclass
class Trajectories:
    """Trajectory of each vessel."""

    mmsi: list[int] = field(default_factory=list)
    trajectory: list[Any] = field(default_factory=list)

    def search_by_key(self, mmsi: int) -> Any:
        """First trajectory recorded for ``mmsi``."""
        return self.trajectory[_first_index(m == mmsi for m in self.mmsi)]


@dataclass
class Ships:
    """Every table describing a set of vessels."""

    nav_status: NavStatus
    ship_draught: Draught
    cog: Cog
    sog: Sog
    rot: Rot
    gps_position: GPSPosition
    dimensions: Dimensions
    trajectories: Trajectories