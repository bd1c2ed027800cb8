# meritkit

Tools for working with hourly climate data, energy demand profiles and
demand scenarios kept in a SQLite database.

## Installation

```
pip install .
```

The package uses only the standard library. To run the tests, install the
`test` extra with `pip install .[test]` and then run `pytest`.

## Modules

- `meritkit.database`: `open_database(path)` opens a SQLite database and
  returns the `sqlite3.Connection`. If the file cannot be opened or read, it
  raises `DatabaseError`.
- `meritkit.weather`: `ClimateStore(connection)` reads the `climate_site` and
  `climate_espr` tables.
  - `site_names()` lists the climate sites.
  - `latitude(site)` and `longitude(site)` return 0.0 for an unknown site.
  - `start_date(site)` and `end_date(site)` return a `datetime`, or `None`
    when there is no record.
  - `weather_series(site)` returns a `WeatherSeries` of 8760 hourly values for
    dry-bulb temperature, direct and diffuse solar radiation, wind speed, wind
    direction and relative humidity. Hours with no record stay at zero.
  - `WeatherSeries.allocate(n)` resizes every channel, and
    `WeatherSeries.records()` yields one `WeatherData` per step.
  - A query that fails, or a site with more than 8760 records, raises
    `DatabaseError`.
- `meritkit.profiles`: functions on demand profiles.
  - `convert_to_julian(day, month)` gives the day of the year. It ignores
    leap years and returns 0 for a month outside 1 to 12.
  - `temporal_parameters(dates)` takes "YYYY-MM-DD hh:mm:ss" stamps and
    returns a `TemporalParameters` with the start-day, end-day and hour-step
    choices they allow.
  - `scale_profile(values, factor)` multiplies every value by `factor`.
  - `shift_profile(values, steps, forward)` rotates a profile.
  - `combine_profiles(profiles)` adds profiles step by step into one
    8760-step profile.
- `meritkit.demand_store`: `DemandStore(connection).load(name)` reads a
  profile from the `energy` table. It returns a `DemandRecord` with 8760
  values and time stamps, and `DemandRecord.temporal` gives its temporal
  parameters.
- `meritkit.scenarios`: `ScenarioPortfolio` keeps numbered demand scenarios
  (`ds 1`, `ds 2`, ...), each holding `DemandProfileData` entries.
  - `add()`, `save(name, profiles)`, `save_as(profiles)` and `remove(name)`
    change the scenarios. An unknown name raises `KeyError`.
  - `tree_lines()` returns each scenario followed by its profiles indented by
    one space.
  - `profile_names(name)` and `name_map()` report the scenarios' contents.
- `meritkit.workspace`: `DemandWorkspace(store, standard_names)` holds three
  lists: the standard profiles, a process list and a selected list.
  - Profiles are copied along with `move_to_process` and `move_to_selected`.
  - Process profiles are changed with `scale_process`, `shift_process` and
    `combine_process`.
  - Profiles are removed with `remove_process`, `remove_selected` and
    `clear_process`.
  - `selected_profiles()` returns the selected list ready to save into a
    scenario.
  - Reusing a name that is already in the target list, without giving a new
    name, raises `DuplicateNameError`.

## Example

This example assumes a file `sample.db` that holds the `climate_site`,
`climate_espr` and `energy` tables.

```python
from meritkit.database import open_database
from meritkit.weather import ClimateStore
from meritkit.demand_store import DemandStore
from meritkit.workspace import DemandWorkspace
from meritkit.scenarios import ScenarioPortfolio

connection = open_database("sample.db")

climate = ClimateStore(connection)
for site in climate.site_names():
    print(site, climate.latitude(site), climate.longitude(site))

store = DemandStore(connection)
workspace = DemandWorkspace(store, ["office", "house"])
workspace.move_to_process("office", None)
workspace.scale_process("office", "2")
workspace.move_to_selected("office_2scaled", None)

portfolio = ScenarioPortfolio()
portfolio.add()
portfolio.save("ds 1", workspace.selected_profiles())
print("\n".join(portfolio.tree_lines()))
```

## What it does not do

meritkit is a library only. It has:

- no command-line program;
- no graphical interface and no plotting of weather or demand profiles;
- no way to create or write the database. It reads tables that already
  exist, and scenarios are kept in memory only.