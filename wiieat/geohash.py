"""Geohash encoding, decoding and neighbour lookup."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

MAX_LAT = 90.0
MIN_LAT = -90.0
MAX_LONG = 180.0
MIN_LONG = -180.0

LENGTH_OF_DEGREE = 111100  # meters

CHAR_MAP = "0123456789bcdefghjkmnpqrstuvwxyz"

_EVEN_NEIGHBORS = (
    "p0r21436x8zb9dcf5h7kjnmqesgutwvy",
    "bc01fg45238967deuvhjyznpkmstqrwx",
    "14365h7k9dcfesgujnmqp0r2twvyx8zb",
    "238967debc01fg45kmstqrwxuvhjyznp",
)
_ODD_NEIGHBORS = (
    "bc01fg45238967deuvhjyznpkmstqrwx",
    "p0r21436x8zb9dcf5h7kjnmqesgutwvy",
    "238967debc01fg45kmstqrwxuvhjyznp",
    "14365h7k9dcfesgujnmqp0r2twvyx8zb",
)
_EVEN_BORDERS = ("prxz", "bcfguvyz", "028b", "0145hjnp")
_ODD_BORDERS = ("bcfguvyz", "prxz", "0145hjnp", "028b")


class Direction(IntEnum):
    """Compass direction used for neighbour lookup."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


@dataclass(frozen=True)
class GeoBoxDimension:
    """Height and width in degrees of a geohash cell."""

    height: float = 0.0
    width: float = 0.0


@dataclass(frozen=True)
class GeoCoord:
    """Centre point and bounding box of a decoded geohash."""

    latitude: float = 0.0
    longitude: float = 0.0
    north: float = 0.0
    east: float = 0.0
    south: float = 0.0
    west: float = 0.0
    dimension: GeoBoxDimension = field(default_factory=GeoBoxDimension)


def _char_index(char: str) -> int:
    index = CHAR_MAP.find(char)
    if index < 0 or len(char) != 1:
        raise ValueError(f"invalid geohash character: {char!r}")
    return index


def encode(lat: float, lng: float, precision: int = 12) -> str:
    """Encode a coordinate as a geohash; precision outside 1..12 falls back to 6."""
    if precision < 1 or precision > 12:
        precision = 6

    if not (MIN_LAT <= lat <= MAX_LAT and MIN_LONG <= lng <= MAX_LONG):
        raise ValueError(f"coordinate out of range: ({lat}, {lng})")

    lat_interval = [MAX_LAT, MIN_LAT]  # high, low
    lng_interval = [MAX_LONG, MIN_LONG]
    chars = []
    bits = 0
    is_even = True

    for i in range(1, precision * 5 + 1):
        interval, coord = (lng_interval, lng) if is_even else (lat_interval, lat)
        mid = (interval[1] + interval[0]) / 2.0
        bits <<= 1
        if coord > mid:
            interval[1] = mid
            bits |= 1
        else:
            interval[0] = mid
        if i % 5 == 0:
            chars.append(CHAR_MAP[bits])
            bits = 0
        is_even = not is_even

    return "".join(chars)


def decode(hash_: str) -> GeoCoord:
    """Decode a geohash into its centre point and bounding box."""
    if not hash_:
        return GeoCoord()

    lat_interval = [MAX_LAT, MIN_LAT]  # high, low
    lng_interval = [MAX_LONG, MIN_LONG]
    is_even = True

    for char in hash_:
        index = _char_index(char)
        for j in range(5):
            interval = lng_interval if is_even else lat_interval
            delta = (interval[0] - interval[1]) / 2.0
            if (index << j) & 0x10:
                interval[1] += delta
            else:
                interval[0] -= delta
            is_even = not is_even

    return GeoCoord(
        latitude=lat_interval[0] - (lat_interval[0] - lat_interval[1]) / 2.0,
        longitude=lng_interval[0] - (lng_interval[0] - lng_interval[1]) / 2.0,
        north=lat_interval[0],
        east=lng_interval[0],
        south=lat_interval[1],
        west=lng_interval[1],
    )


def neighbor(hash_: str, direction: Direction | int) -> str:
    """Return the adjacent geohash in the given direction."""
    if not hash_:
        raise ValueError("empty geohash has no neighbours")
    direction = Direction(direction)

    last_char = hash_[-1]
    is_odd = len(hash_) % 2 == 1
    borders = _ODD_BORDERS if is_odd else _EVEN_BORDERS
    table = _ODD_NEIGHBORS if is_odd else _EVEN_NEIGHBORS

    base = hash_[:-1]
    if last_char in borders[direction] and base:
        base = neighbor(base, direction)

    index = table[direction].find(last_char)
    if index < 0:
        raise ValueError(f"invalid geohash character: {last_char!r}")
    return base + CHAR_MAP[index]


def neighbors(hash_: str) -> list[str]:
    """Return the eight neighbours ordered N, NE, E, SE, S, SW, W, NW."""
    north = neighbor(hash_, Direction.NORTH)
    east = neighbor(hash_, Direction.EAST)
    south = neighbor(hash_, Direction.SOUTH)
    west = neighbor(hash_, Direction.WEST)
    return [
        north,
        neighbor(north, Direction.EAST),
        east,
        neighbor(east, Direction.SOUTH),
        south,
        neighbor(south, Direction.WEST),
        west,
        neighbor(west, Direction.NORTH),
    ]


def dimensions_for_precision(precision: int) -> GeoBoxDimension:
    """Return the cell size in degrees for a geohash of the given length."""
    if precision <= 0:
        return GeoBoxDimension()

    lat_cuts = precision * 5 // 2
    lng_cuts = lat_cuts + (1 if precision % 2 else 0)
    return GeoBoxDimension(height=180.0 / 2**lat_cuts, width=360.0 / 2**lng_cuts)