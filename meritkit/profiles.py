"""Operations on hourly demand profiles and the temporal options they allow."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .weather import HOURS_PER_YEAR

COMBINED_NAME = "combined demand"

# Days elapsed before the first of each month in a non-leap year.
_MONTH_OFFSETS = {
    1: 0,
    2: 31,
    3: 59,
    4: 90,
    5: 120,
    6: 151,
    7: 181,
    8: 212,
    9: 243,
    10: 273,
    11: 304,
    12: 334,
}


@dataclass
class TemporalParameters:
    """The start days, end days and hourly step counts a profile offers."""

    start_days: list[int] = field(default_factory=list)
    end_days: list[int] = field(default_factory=list)
    hour_steps: list[int] = field(default_factory=list)


def convert_to_julian(day: int, month: int) -> int:
    """Return the day of the year for ``day`` of ``month``.

    Leap years are not taken into account. A month outside 1-12 gives 0.
    """
    if month not in _MONTH_OFFSETS:
        return 0
    return _MONTH_OFFSETS[month] + day


def _to_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


def _day_and_month(stamp: str) -> tuple[int, int]:
    date_part = str(stamp).split(" ")[0]
    parts = date_part.split("-")
    if len(parts) < 3:
        raise ValueError(f"not a date of the form YYYY-MM-DD: {stamp!r}")
    return _to_int(parts[2]), _to_int(parts[1])


def temporal_parameters(dates: Sequence[str]) -> TemporalParameters:
    """Work out the day and step choices for a profile from its time stamps.

    ``dates`` holds one "YYYY-MM-DD hh:mm:ss" stamp per data point; the first
    and last stamps bound the period.
    """
    if not dates:
        raise ValueError("no time stamps given")
    start_day, start_month = _day_and_month(dates[0])
    end_day, end_month = _day_and_month(dates[-1])
    julian_start = convert_to_julian(start_day, start_month)
    julian_end = convert_to_julian(end_day, end_month)
    points = len(dates)

    if julian_start <= julian_end:
        steps = points // ((julian_end - julian_start + 1) * 24)
        hour_steps = list(range(steps, 0, -1)) if steps > 1 else [steps]
        return TemporalParameters(
            start_days=list(range(julian_start, julian_end + 1)),
            end_days=list(range(julian_end, julian_start - 1, -1)),
            hour_steps=hour_steps,
        )

    return TemporalParameters(
        start_days=[julian_end],
        end_days=[julian_end],
        hour_steps=[points // 24],
    )


def scale_profile(values: Iterable[float], factor: float) -> list[float]:
    """Return the profile with every value multiplied by ``factor``."""
    return [factor * value for value in values]


def shift_profile(values: Sequence[float], steps: int, forward: bool) -> list[float]:
    """Rotate the profile by ``steps`` time steps.

    Shifting forward moves values later in time, wrapping the tail round to
    the start; shifting backward moves them earlier, wrapping the head round
    to the end.
    """
    count = len(values)
    if not 0 <= steps <= count:
        raise ValueError(f"shift of {steps} steps is outside 0..{count}")
    values = list(values)
    if forward:
        return values[count - steps:] + values[: count - steps]
    return values[steps:] + values[:steps]


def combine_profiles(profiles: Iterable[Sequence[float]]) -> list[float]:
    """Sum profiles step by step into one year-long profile.

    Shorter profiles contribute zero beyond their end.
    """
    total = [0.0] * HOURS_PER_YEAR
    for profile in profiles:
        if len(profile) > HOURS_PER_YEAR:
            raise ValueError(
                f"profile has {len(profile)} values, more than {HOURS_PER_YEAR}"
            )
        for index, value in enumerate(profile):
            total[index] += value
    return total