from __future__ import annotations

import dataclasses

from pluscode.constants import LATITUDE_MAX, LONGITUDE_MAX


@dataclasses.dataclass(frozen=True, slots=True)
class CodeArea:
    """Bounding box of a decoded code.

    The lower bounds are inclusive and the upper bounds exclusive. The center is
    the box midpoint, clamped so it never exceeds 90/180.
    """

    latitude_lo: float
    longitude_lo: float
    latitude_hi: float
    longitude_hi: float
    code_length: int
    latitude_center: float = dataclasses.field(init=False)
    longitude_center: float = dataclasses.field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "latitude_center",
            min(
                self.latitude_lo + (self.latitude_hi - self.latitude_lo) / 2.0,
                float(LATITUDE_MAX),
            ),
        )
        object.__setattr__(
            self,
            "longitude_center",
            min(
                self.longitude_lo + (self.longitude_hi - self.longitude_lo) / 2.0,
                float(LONGITUDE_MAX),
            ),
        )

    @property
    def center(self) -> tuple[float, float]:
        return self.latitude_center, self.longitude_center

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Return (lat_lo, lat_hi, lon_lo, lon_hi)."""

        return self.latitude_lo, self.latitude_hi, self.longitude_lo, self.longitude_hi

    def recentered(
        self, *, latitude_center: float, longitude_center: float
    ) -> CodeArea:
        """Return a copy whose center is moved; the box itself shifts with it."""

        dlat = latitude_center - self.latitude_center
        dlon = longitude_center - self.longitude_center
        return CodeArea(
            latitude_lo=self.latitude_lo + dlat,
            longitude_lo=self.longitude_lo + dlon,
            latitude_hi=self.latitude_hi + dlat,
            longitude_hi=self.longitude_hi + dlon,
            code_length=self.code_length,
        )
