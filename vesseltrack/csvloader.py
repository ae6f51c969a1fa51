"""Reading AIS observations from CSV exports."""

from __future__ import annotations

import csv
import os
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional, Union

from vesseltrack.errors import CsvError

_TIME_FORMAT = "%d/%m/%Y %H:%M:%S"


@dataclass(frozen=True)
class CsvRecord:
    """One row of an AIS CSV export."""

    timestamp: str
    type_of_mobile: str
    mmsi: int
    latitude: float
    longitude: float
    nav_status: str
    rot: Optional[float]
    sog: Optional[float]
    cog: Optional[float]
    heading: Optional[int]
    imo: str
    callsign: str
    name: Optional[str]
    ship_type: str
    cargo_type: Optional[str]
    width: Optional[int]
    length: Optional[int]
    position_fixing_device: str
    draught: Optional[float]
    destination: str
    eta: Optional[datetime]
    data_source_type: str
    a: Optional[int]
    b: Optional[int]
    c: Optional[int]
    d: Optional[int]


def _unsigned(bits: int) -> Callable[[str], int]:
    limit = 2**bits

    def parse(text: str) -> int:
        value = int(text)
        if not 0 <= value < limit:
            raise ValueError(f"{value} out of range for u{bits}")
        return value

    return parse


def _optional(parse: Callable[[str], object]) -> Callable[[str], object]:
    def wrapped(text: str):
        return None if text == "" else parse(text)

    return wrapped


def _text(text: str) -> str:
    return text


_U16 = _unsigned(16)

_COLUMNS: dict[str, tuple[str, Callable[[str], object]]] = {
    "# Timestamp": ("timestamp", _text),
    "Type of mobile": ("type_of_mobile", _text),
    "MMSI": ("mmsi", _unsigned(64)),
    "Latitude": ("latitude", float),
    "Longitude": ("longitude", float),
    "Navigational status": ("nav_status", _text),
    "ROT": ("rot", _optional(float)),
    "SOG": ("sog", _optional(float)),
    "COG": ("cog", _optional(float)),
    "Heading": ("heading", _optional(_U16)),
    "IMO": ("imo", _text),
    "Callsign": ("callsign", _text),
    "Name": ("name", _optional(_text)),
    "Ship type": ("ship_type", _text),
    "Cargo type": ("cargo_type", _optional(_text)),
    "Width": ("width", _optional(_U16)),
    "Length": ("length", _optional(_U16)),
    "Type of position fixing device": ("position_fixing_device", _text),
    "Draught": ("draught", _optional(float)),
    "Destination": ("destination", _text),
    "ETA": ("eta", _optional(datetime.fromisoformat)),
    "Data source type": ("data_source_type", _text),
    "A": ("a", _optional(_U16)),
    "B": ("b", _optional(_U16)),
    "C": ("c", _optional(_U16)),
    "D": ("d", _optional(_U16)),
}


def _record(header: list[str], row: list[str]) -> CsvRecord:
    if len(row) != len(header):
        raise CsvError("row length does not match header")
    values = dict(zip(header, row))
    try:
        fields = {
            name: parse(values[column]) for column, (name, parse) in _COLUMNS.items()
        }
    except ValueError as exc:
        raise CsvError("could not deserialise row") from exc
    return CsvRecord(**fields)


def read_data(path: Union[str, os.PathLike]) -> list[CsvRecord]:
    """Read every record of the CSV file at ``path``."""
    try:
        handle = open(path, newline="", encoding="utf-8")
    except OSError as exc:
        raise CsvError("could not open file") from exc
    with handle:
        reader = csv.reader(handle)
        header = next(reader, None)
        if header is None:
            return []
        missing = [column for column in _COLUMNS if column not in header]
        if missing:
            raise CsvError(f"missing columns: {', '.join(missing)}")
        return [_record(header, row) for row in reader if row]


def time_converter(time: str) -> datetime:
    """Parse a ``dd/mm/YYYY HH:MM:SS`` timestamp."""
    try:
        return datetime.strptime(time, _TIME_FORMAT)
    except ValueError as exc:
        raise CsvError("could not convert time") from exc