"""
Geographic data models.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple


@dataclass(frozen=True)
class BoundingBox:
    """Rectangular region in degrees."""

    min_lat: float
    min_lon: float
    max_lat: float
    max_lon: float

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "BoundingBox":
        """Build from [min_lat, min_lon, max_lat, max_lon]."""
        if len(values) != 4:
            raise ValueError(
                f"Bounding box needs 4 values [min_lat, min_lon, max_lat, max_lon], got {len(values)}"
            )
        return cls(*(float(v) for v in values))

    @property
    def is_well_formed(self) -> bool:
        return self.min_lat <= self.max_lat and self.min_lon <= self.max_lon

    @property
    def center(self) -> Tuple[float, float]:
        """(lat, lon) midpoint of the box."""
        return (
            (self.min_lat + self.max_lat) / 2,
            (self.min_lon + self.max_lon) / 2,
        )

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.min_lat, self.min_lon, self.max_lat, self.max_lon)

    def to_query_param(self) -> str:
        return ",".join(f"{v:g}" for v in self.as_tuple())
