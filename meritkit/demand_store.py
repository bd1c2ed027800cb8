"""Loading hourly demand profiles from the energy table."""

from __future__ import annotations

import sqlite3
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from .database import DatabaseError
from .profiles import TemporalParameters, temporal_parameters
from .weather import HOURS_PER_YEAR


def _to_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _to_text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass
class DemandRecord:
    """One year of demand values and their time stamps for a named profile."""

    name: str
    values: list[float] = field(default_factory=list)
    dates: list[str] = field(default_factory=list)

    @property
    def temporal(self) -> TemporalParameters:
        """The start days, end days and hour steps the profile allows.

        Raises ValueError when the first or last time stamp is missing.
        """
        return temporal_parameters(self.dates)

    def __len__(self) -> int:
        return len(self.values)


class DemandStore:
    """Read demand profiles from a database."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection

    def _query(self, sql: str, params: Sequence[Any] = ()) -> list[tuple]:
        try:
            return self.connection.execute(sql, tuple(params)).fetchall()
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def load(self, name: str) -> DemandRecord:
        """Load the hourly demand profile called ``name``.

        The record always holds HOURS_PER_YEAR steps; steps with no row keep
        a zero value and an empty time stamp.
        """
        rows = self._query(
            "SELECT tot, to_datetime FROM energy WHERE ref = ?", (name,)
        )
        if len(rows) > HOURS_PER_YEAR:
            raise DatabaseError(
                f"profile {name!r} has {len(rows)} records, more than {HOURS_PER_YEAR}"
            )
        values = [_to_float(total) for total, _ in rows]
        dates = [_to_text(stamp) for _, stamp in rows]
        padding = HOURS_PER_YEAR - len(rows)
        values.extend([0.0] * padding)
        dates.extend([""] * padding)
        return DemandRecord(name=name, values=values, dates=dates)