"""Coordinate type alias and helpers.

Board layout (flat index, scan order w → x → y → z):
    (0,0,0,0)=0, (0,0,0,1)=1, ..., (0,0,0,3)=3
    (0,0,1,0)=4, ...
    (3,3,3,3)=255
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import product
from typing import TypeAlias

Coord: TypeAlias = tuple[int, int, int, int]  # (w, x, y, z), each 0–3

BOARD_SIZE = 4
SQUARE_COUNT = BOARD_SIZE**4

AXES: tuple[str, ...] = ("w", "x", "y", "z")
W, X, Y, Z = range(4)


def is_valid_coord(coord: Sequence[int]) -> bool:
    """Whether *coord* has four integer axes, each in [0, 3]."""
    if len(coord) != 4:
        return False
    return all(isinstance(v, int) and 0 <= v < BOARD_SIZE for v in coord)


def make_coord(w: int, x: int, y: int, z: int) -> Coord:
    return (w, x, y, z)


def offset(coord: Coord, delta: Sequence[int]) -> Coord:
    """Component-wise sum; the result is not validated."""
    w, x, y, z = coord
    dw, dx, dy, dz = delta
    return (w + dw, x + dx, y + dy, z + dz)


def coord_index(coord: Coord) -> int:
    """Flat 0–255 index of a valid coordinate."""
    w, x, y, z = coord
    return ((w * BOARD_SIZE + x) * BOARD_SIZE + y) * BOARD_SIZE + z


def coord_from_index(index: int) -> Coord:
    z = index % BOARD_SIZE
    y = (index // BOARD_SIZE) % BOARD_SIZE
    x = (index // BOARD_SIZE**2) % BOARD_SIZE
    w = index // BOARD_SIZE**3
    return (w, x, y, z)


def iter_coords() -> Iterator[Coord]:
    """All 256 coordinates in scan order."""
    for w, x, y, z in product(range(BOARD_SIZE), repeat=4):
        yield (w, x, y, z)


def coord_name(coord: Coord) -> str:
    """Human-readable name, e.g. (0, 1, 0, 0) → '0.1.0.0'."""
    return ".".join(str(v) for v in coord)


def parse_coord(name: str) -> Coord:
    """Parse a coordinate name, e.g. '1.2.0.0' → (1, 2, 0, 0)."""
    parts = name.strip().split(".")
    if len(parts) != 4 or not all(p.isdigit() for p in parts):
        raise ValueError(f"Invalid coordinate name: {name!r}")
    w, x, y, z = (int(p) for p in parts)
    coord = (w, x, y, z)
    if not is_valid_coord(coord):
        raise ValueError(f"Coordinate out of range: {name!r}")
    return coord
