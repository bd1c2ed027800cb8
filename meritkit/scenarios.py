"""Demand scenarios: named collections of demand profiles."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

NO_PROFILE_TEXT = "no profile has been selected yet."


def scenario_label(number: int) -> str:
    """Return the display name of the scenario with sequence ``number``."""
    return f"ds {number}"


@dataclass
class DemandProfileData:
    """One demand profile as it is stored in a scenario."""

    name: str = ""
    start_day: int = 0
    end_day: int = 0
    hour_steps: int = 0
    values: list[float] = field(default_factory=list)


@dataclass
class Scenario:
    """A named demand scenario and the profiles it holds."""

    name: str
    profiles: list[DemandProfileData] = field(default_factory=list)


class ScenarioPortfolio:
    """The ordered set of demand scenarios a user has built."""

    def __init__(self) -> None:
        self._scenarios: list[Scenario] = []
        # Display names, kept in step with the scenarios by position.
        self._display_names: list[str] = []
        self._counter = 0

    def __iter__(self) -> Iterator[Scenario]:
        return iter(self._scenarios)

    def __len__(self) -> int:
        return len(self._scenarios)

    @property
    def scenarios(self) -> list[Scenario]:
        """A copy of the scenario list, in order."""
        return list(self._scenarios)

    def _append(self, profiles: list[DemandProfileData]) -> Scenario:
        label = scenario_label(self._counter)
        scenario = Scenario(label, profiles)
        self._scenarios.append(scenario)
        self._display_names.append(label)
        return scenario

    def add(self) -> Scenario:
        """Append a new scenario holding one empty profile and return it."""
        if self._scenarios:
            self._counter = len(self._scenarios) + 1
        else:
            self._counter += 1
            self._display_names.clear()
        return self._append([DemandProfileData()])

    def _index_of(self, scenario_name: str) -> int:
        key = next(
            (
                scenario.name
                for scenario, shown in zip(self._scenarios, self._display_names)
                if shown == scenario_name
            ),
            None,
        )
        if key is not None:
            for index, scenario in enumerate(self._scenarios):
                if scenario.name == key:
                    return index
        raise KeyError(scenario_name)

    def save(
        self,
        scenario_name: str | None,
        profiles: Iterable[DemandProfileData],
    ) -> Scenario | None:
        """Replace the profiles of a scenario and return it.

        With no ``scenario_name`` the profiles go into the first scenario,
        but only while exactly one scenario has been numbered; otherwise
        nothing changes and None is returned. An unknown name raises
        KeyError.
        """
        new_profiles = list(profiles)
        if scenario_name is None:
            if self._counter != 1 or not self._scenarios:
                return None
            target = self._scenarios[0]
        else:
            target = self._scenarios[self._index_of(scenario_name)]
        target.profiles = new_profiles
        return target

    def save_as(self, profiles: Iterable[DemandProfileData]) -> Scenario:
        """Store the profiles as a new scenario at the end and return it."""
        self._counter += 1
        return self._append(list(profiles))

    def remove(self, scenario_name: str) -> Scenario:
        """Remove the named scenario and return it; KeyError if unknown."""
        index = self._index_of(scenario_name)
        removed = self._scenarios.pop(index)
        del self._display_names[index]
        self._counter -= 1
        return removed

    def tree_lines(self) -> list[str]:
        """Return the lines shown in the scenario tree.

        Each scenario name is followed by its profiles, indented by one
        space; an unnamed profile shows a placeholder text.
        """
        lines: list[str] = []
        for scenario in self._scenarios:
            lines.append(scenario.name)
            lines.extend(
                " " + (profile.name or NO_PROFILE_TEXT)
                for profile in scenario.profiles
            )
        return lines

    def profile_names(self, scenario_name: str) -> list[str]:
        """Return the profile names of the named scenario; KeyError if unknown."""
        scenario = self._scenarios[self._index_of(scenario_name)]
        return [profile.name for profile in scenario.profiles]

    def name_map(self) -> dict[str, str]:
        """Map each scenario name to the name it is displayed under."""
        return {
            scenario.name: shown
            for scenario, shown in zip(self._scenarios, self._display_names)
        }