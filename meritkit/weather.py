"""Hourly weather records for climate sites and the queries that load them."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .database import DatabaseError

HOURS_PER_YEAR = 8760
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

_CHANNELS = (
    "temperature",
    "direct_solar",
    "diffuse_solar",
    "wind_speed",
    "wind_direction",
    "relative_humidity",
)


@dataclass
class WeatherData:
    """Weather conditions at one time step."""

    temperature: float = 0.0
    direct_solar: float = 0.0
    diffuse_solar: float = 0.0
    wind_speed: float = 0.0
    wind_direction: float = 0.0
    relative_humidity: float = 0.0


@dataclass
class WeatherSeries:
    """Time series of the six weather channels for one site."""

    site: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    temperature: list[float] = field(default_factory=list)
    direct_solar: list[float] = field(default_factory=list)
    diffuse_solar: list[float] = field(default_factory=list)
    wind_speed: list[float] = field(default_factory=list)
    wind_direction: list[float] = field(default_factory=list)
    relative_humidity: list[float] = field(default_factory=list)

    def allocate(self, n: int) -> None:
        """Resize every channel to ``n`` values, padding with zeros."""
        if n < 0:
            raise ValueError("series length must not be negative")
        for name in _CHANNELS:
            values = getattr(self, name)
            del values[n:]
            values.extend([0.0] * (n - len(values)))

    def records(self) -> Iterator[WeatherData]:
        """Yield one WeatherData per time step."""
        for row in zip(*(getattr(self, name) for name in _CHANNELS)):
            yield WeatherData(*row)

    def __len__(self) -> int:
        return len(self.temperature)


def _to_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _parse_datetime(text: Any) -> datetime | None:
    if text is None:
        return None
    try:
        return datetime.strptime(str(text), DATETIME_FORMAT)
    except ValueError:
        return None


class ClimateStore:
    """Read climate sites and their weather records from a database."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection

    def _query(self, sql: str, params: Sequence[Any] = ()) -> list[tuple]:
        try:
            return self.connection.execute(sql, tuple(params)).fetchall()
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def site_names(self) -> list[str]:
        """Return the names of all climate sites."""
        return [str(row[0]) for row in self._query("SELECT climate_site FROM climate_site")]

    def _last_float(self, sql: str, site: str) -> float:
        rows = self._query(sql, (site,))
        return _to_float(rows[-1][0]) if rows else 0.0

    def latitude(self, site: str) -> float:
        """Return the latitude of ``site``, or 0.0 if it is unknown."""
        return self._last_float(
            "SELECT ref_x FROM climate_site WHERE climate_site = ?", site
        )

    def longitude(self, site: str) -> float:
        """Return the longitude of ``site``, or 0.0 if it is unknown."""
        return self._last_float(
            "SELECT ref_y FROM climate_site WHERE climate_site = ?", site
        )

    def start_date(self, site: str) -> datetime | None:
        """Return the first record time for ``site``, or None."""
        rows = self._query(
            "SELECT datetime FROM climate_espr WHERE climate_site = ? LIMIT 1",
            (site,),
        )
        return _parse_datetime(rows[-1][0]) if rows else None

    def end_date(self, site: str) -> datetime | None:
        """Return the latest record time for ``site``, or None."""
        rows = self._query(
            "SELECT datetime FROM climate_espr WHERE climate_site = ? "
            "ORDER BY datetime DESC LIMIT 1",
            (site,),
        )
        return _parse_datetime(rows[-1][0]) if rows else None

    def weather_series(self, site: str) -> WeatherSeries:
        """Load a year of hourly weather for ``site``.

        The series always holds HOURS_PER_YEAR values; steps with no record
        stay at zero.
        """
        rows = self._query(
            "SELECT ambient, dir_solar, diff_solar, wind_speed, wind_dir, rh "
            "FROM climate_espr WHERE climate_site = ?",
            (site,),
        )
        if len(rows) > HOURS_PER_YEAR:
            raise DatabaseError(
                f"site {site!r} has {len(rows)} records, more than {HOURS_PER_YEAR}"
            )
        series = WeatherSeries(site=site)
        series.allocate(HOURS_PER_YEAR)
        channels = [getattr(series, name) for name in _CHANNELS]
        for index, row in enumerate(rows):
            for values, value in zip(channels, row):
                values[index] = _to_float(value)
        return series