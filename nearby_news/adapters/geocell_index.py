# adapters/geocell_index.py

"""
In-memory spatial index bucketing points into fixed-size geocells.
"""

import math
from typing import Dict, Iterable, List, Set, Tuple

from ..interfaces.spatial_index import SpatialIndex
from ..schemas.news_schemas import GeoPoint
from ..utils.geo_utils import (
    haversine_distance,
    latitude_bounds,
    longitude_span_degrees,
    normalize_longitude,
)

Cell = Tuple[int, int]

# Padding in degrees so points lying exactly on the cap boundary keep their cell
_EDGE_PADDING = 1e-9


class GeoCellIndex(SpatialIndex):
    """
    Grid index keyed by (row, column) cells of ``cell_size_degrees``.

    A query visits the cells overlapping the bounding box of the spherical
    cap and confirms each point with the haversine distance. When the cap
    contains a pole every column of the covered rows is visited, and column
    ranges crossing the antimeridian wrap around.
    """

    def __init__(self, cell_size_degrees: float = 0.1):
        if cell_size_degrees <= 0 or cell_size_degrees > 90:
            raise ValueError("cell_size_degrees must be in (0, 90]")
        self.cell_size = cell_size_degrees
        self._rows = int(math.ceil(180.0 / cell_size_degrees))
        self._cols = int(math.ceil(360.0 / cell_size_degrees))
        self._points: Dict[str, GeoPoint] = {}
        self._cells: Dict[Cell, Set[str]] = {}

    def _row(self, latitude: float) -> int:
        row = int(math.floor((latitude + 90.0) / self.cell_size))
        return min(max(row, 0), self._rows - 1)

    def _col(self, longitude: float) -> int:
        col = int(math.floor((normalize_longitude(longitude) + 180.0) / self.cell_size))
        return col % self._cols

    def cell_of(self, point: GeoPoint) -> Cell:
        return self._row(point.latitude), self._col(point.longitude)

    def add(self, item_id: str, point: GeoPoint) -> None:
        if item_id in self._points:
            self.remove(item_id)
        self._points[item_id] = point
        self._cells.setdefault(self.cell_of(point), set()).add(item_id)

    def remove(self, item_id: str) -> bool:
        point = self._points.pop(item_id, None)
        if point is None:
            return False
        cell = self.cell_of(point)
        members = self._cells.get(cell)
        if members is not None:
            members.discard(item_id)
            if not members:
                del self._cells[cell]
        return True

    def _candidate_cells(self, point: GeoPoint, radius_meters: float) -> Iterable[Cell]:
        lat_min, lat_max = latitude_bounds(point.latitude, radius_meters)
        row_min = self._row(lat_min - _EDGE_PADDING)
        row_max = self._row(lat_max + _EDGE_PADDING)

        span = longitude_span_degrees(point.latitude, radius_meters)
        if span >= 180.0:
            return [cell for cell in self._cells if row_min <= cell[0] <= row_max]

        first = int(
            math.floor((point.longitude - span - _EDGE_PADDING + 180.0) / self.cell_size)
        )
        last = int(
            math.floor((point.longitude + span + _EDGE_PADDING + 180.0) / self.cell_size)
        )
        columns = {col % self._cols for col in range(first, last + 1)}
        wanted = (row_max - row_min + 1) * len(columns)

        # Sparse index: scanning occupied cells is cheaper than probing
        if wanted > len(self._cells):
            return [
                cell
                for cell in self._cells
                if row_min <= cell[0] <= row_max and cell[1] in columns
            ]
        return [
            (row, col)
            for row in range(row_min, row_max + 1)
            for col in columns
            if (row, col) in self._cells
        ]

    def query(self, point: GeoPoint, radius_meters: float) -> List[Tuple[str, float]]:
        results: List[Tuple[str, float]] = []
        for cell in self._candidate_cells(point, radius_meters):
            for item_id in self._cells.get(cell, ()):
                other = self._points[item_id]
                distance = haversine_distance(
                    point.latitude, point.longitude, other.latitude, other.longitude
                )
                if distance <= radius_meters:
                    results.append((item_id, distance))
        return results

    def clear(self) -> None:
        self._points.clear()
        self._cells.clear()

    def __len__(self) -> int:
        return len(self._points)

    def __contains__(self, item_id: str) -> bool:
        return item_id in self._points
