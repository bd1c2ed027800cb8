"""The working lists a user builds demand scenarios from.

Profiles start in the standard table, which the demand store holds. They can
be copied into a process list for scaling, shifting and combining, and into
a selected list whose contents are saved as a scenario.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from .demand_store import DemandRecord
from .profiles import COMBINED_NAME, combine_profiles, scale_profile, shift_profile
from .scenarios import DemandProfileData


class _RecordSource(Protocol):
    def load(self, name: str) -> DemandRecord: ...


class DuplicateNameError(ValueError):
    """Raised when a profile name is already in use and no new name was given."""


@dataclass
class NamedProfile:
    """A demand profile in a working list, with its temporal settings."""

    name: str
    values: list[float] = field(default_factory=list)
    start_day: int = 0
    end_day: int = 0
    hour_steps: int = 0

    def to_profile_data(self) -> DemandProfileData:
        """Return the profile in the form a scenario stores."""
        return DemandProfileData(
            name=self.name,
            start_day=self.start_day,
            end_day=self.end_day,
            hour_steps=self.hour_steps,
            values=list(self.values),
        )


@dataclass
class _Temporal:
    start_day: int = 0
    end_day: int = 0
    hour_steps: int = 0


class DemandWorkspace:
    """The standard, process and selected demand profile lists."""

    def __init__(self, store: _RecordSource, standard_names: Iterable[str]) -> None:
        self.store = store
        self._standard: dict[str, _Temporal] = {
            name: _Temporal() for name in standard_names
        }
        self._process: list[NamedProfile] = []
        self._selected: list[NamedProfile] = []

    @property
    def standard_names(self) -> list[str]:
        """Names of the profiles in the standard table, in order."""
        return list(self._standard)

    @property
    def process_profiles(self) -> list[NamedProfile]:
        """The profiles in the process list, in the order they were added."""
        return list(self._process)

    @property
    def selected(self) -> list[NamedProfile]:
        """The profiles in the selected list, in the order they were added."""
        return list(self._selected)

    def _temporal(self, name: str) -> _Temporal:
        return self._standard.get(name, _Temporal())

    def standard_properties(self, name: str) -> tuple[int, int, int]:
        """Return (start day, end day, hour steps) of a standard profile."""
        if name not in self._standard:
            raise KeyError(name)
        settings = self._standard[name]
        return settings.start_day, settings.end_day, settings.hour_steps

    def set_standard_properties(
        self, name: str, start_day: int, end_day: int, hour_steps: int
    ) -> None:
        """Set the temporal settings of a standard profile."""
        if name not in self._standard:
            raise KeyError(name)
        self._standard[name] = _Temporal(start_day, end_day, hour_steps)

    @staticmethod
    def _resolve_name(name: str, taken: Iterable[str], new_name: str | None) -> str:
        if name not in set(taken):
            return name
        if new_name is None:
            raise DuplicateNameError(f"name already exists: {name!r}")
        if not new_name:
            raise ValueError("new name must not be empty")
        return new_name

    def move_to_process(self, name: str, new_name: str | None = None) -> NamedProfile:
        """Copy a standard profile into the process list and return the copy.

        If the process list already holds ``name`` the copy is stored under
        ``new_name``; without one DuplicateNameError is raised.
        """
        if name not in self._standard:
            raise KeyError(name)
        record = self.store.load(name)
        target = self._resolve_name(
            name, (profile.name for profile in self._process), new_name
        )
        settings = self._temporal(name)
        profile = NamedProfile(
            target,
            list(record.values),
            settings.start_day,
            settings.end_day,
            settings.hour_steps,
        )
        self._process.append(profile)
        return profile

    def move_to_selected(
        self, name: str, new_name: str | None = None
    ) -> list[NamedProfile]:
        """Copy a standard or process profile into the selected list.

        A standard profile is loaded from the store; otherwise every process
        profile called ``name`` is copied. Returns the copies added.
        """
        target = self._resolve_name(
            name, (profile.name for profile in self._selected), new_name
        )
        if name in self._standard:
            record = self.store.load(name)
            settings = self._temporal(name)
            added = [
                NamedProfile(
                    target,
                    list(record.values),
                    settings.start_day,
                    settings.end_day,
                    settings.hour_steps,
                )
            ]
        else:
            added = [
                NamedProfile(
                    target,
                    list(profile.values),
                    profile.start_day,
                    profile.end_day,
                    profile.hour_steps,
                )
                for profile in self._process
                if profile.name == name
            ]
            if not added:
                raise KeyError(name)
        self._selected.extend(added)
        return added

    @staticmethod
    def _remove(profiles: list[NamedProfile], name: str) -> NamedProfile:
        for index, profile in enumerate(profiles):
            if profile.name == name:
                return profiles.pop(index)
        raise KeyError(name)

    def remove_process(self, name: str) -> NamedProfile:
        """Remove the first process profile called ``name`` and return it."""
        return self._remove(self._process, name)

    def remove_selected(self, name: str) -> NamedProfile:
        """Remove the first selected profile called ``name`` and return it."""
        return self._remove(self._selected, name)

    def clear_process(self) -> None:
        """Empty the process list."""
        self._process.clear()

    def _matching_process(self, name: str) -> list[NamedProfile]:
        matches = [profile for profile in self._process if profile.name == name]
        if not matches:
            raise KeyError(name)
        return matches

    def scale_process(self, name: str, factor: float | str) -> list[NamedProfile]:
        """Multiply process profiles called ``name`` by ``factor``.

        The profiles are renamed "<name>_<factor>scaled" and returned.
        """
        factor_text = str(factor).strip()
        value = float(factor_text)
        matches = self._matching_process(name)
        renamed = f"{name}_{factor_text}scaled"
        for profile in matches:
            profile.values = scale_profile(profile.values, value)
            profile.name = renamed
        return matches

    def shift_process(self, name: str, steps: int, forward: bool) -> list[NamedProfile]:
        """Rotate process profiles called ``name`` by ``steps`` time steps.

        The profiles are renamed "<name>_shifted" and returned.
        """
        matches = self._matching_process(name)
        for profile in matches:
            profile.values = shift_profile(profile.values, steps, forward)
            profile.name = f"{name}_shifted"
        return matches

    def combine_process(
        self, names: Iterable[str], new_name: str | None = None
    ) -> NamedProfile:
        """Sum the named process profiles into a new process profile.

        The sum is called "combined demand", or ``new_name`` when that name
        is already taken. For each name the last process profile with it is
        used; a name with no profile adds nothing. Temporal settings come
        from the standard profile of the first name.
        """
        names = list(names)
        if not names:
            raise ValueError("no profiles to combine")
        latest = {profile.name: profile.values for profile in self._process}
        total = combine_profiles(latest[name] for name in names if name in latest)
        target = self._resolve_name(
            COMBINED_NAME, (profile.name for profile in self._process), new_name
        )
        settings = self._temporal(names[0])
        profile = NamedProfile(
            target, total, settings.start_day, settings.end_day, settings.hour_steps
        )
        self._process.append(profile)
        return profile

    def selected_profiles(self) -> list[DemandProfileData]:
        """Return the selected list in the form a scenario stores."""
        return [profile.to_profile_data() for profile in self._selected]