import pytest

from meritkit.scenarios import (
    NO_PROFILE_TEXT,
    DemandProfileData,
    Scenario,
    ScenarioPortfolio,
)


def _profiles(*names):
    return [DemandProfileData(name=name, values=[1.0, 2.0]) for name in names]


def test_first_add_creates_ds_1_with_placeholder():
    portfolio = ScenarioPortfolio()
    scenario = portfolio.add()
    assert scenario.name == "ds 1"
    assert portfolio.tree_lines() == ["ds 1", " no profile has been selected yet."]


def test_placeholder_line_uses_placeholder_text():
    portfolio = ScenarioPortfolio()
    portfolio.add()
    portfolio.add()
    lines = portfolio.tree_lines()
    assert lines[1] == " " + NO_PROFILE_TEXT
    assert lines[3] == " no profile has been selected yet."


def test_empty_portfolio_has_no_lines():
    portfolio = ScenarioPortfolio()
    assert portfolio.tree_lines() == []
    assert portfolio.name_map() == {}
    assert len(portfolio) == 0


def test_add_numbers_follow_count():
    portfolio = ScenarioPortfolio()
    portfolio.add()
    portfolio.add()
    assert [s.name for s in portfolio] == ["ds 1", "ds 2"]


def test_name_map_is_identity_for_fresh_scenarios():
    portfolio = ScenarioPortfolio()
    portfolio.add()
    portfolio.add()
    mapping = portfolio.name_map()
    assert mapping == {name: name for name in mapping}
    assert set(mapping) == {s.name for s in portfolio}


def test_save_replaces_profiles_of_named_scenario():
    portfolio = ScenarioPortfolio()
    portfolio.add()
    portfolio.add()
    saved = portfolio.save("ds 2", _profiles("office", "school"))
    assert saved.name == "ds 2"
    assert portfolio.profile_names("ds 2") == ["office", "school"]
    assert portfolio.profile_names("ds 1") == [""]
    assert portfolio.tree_lines() == [
        "ds 1",
        " " + NO_PROFILE_TEXT,
        "ds 2",
        " office",
        " school",
    ]


def test_save_without_name_uses_first_when_single():
    portfolio = ScenarioPortfolio()
    portfolio.add()
    saved = portfolio.save(None, _profiles("house"))
    assert saved is portfolio.scenarios[0]
    assert portfolio.profile_names("ds 1") == ["house"]


def test_save_without_name_does_nothing_with_several():
    portfolio = ScenarioPortfolio()
    portfolio.add()
    portfolio.add()
    assert portfolio.save(None, _profiles("house")) is None
    assert portfolio.profile_names("ds 1") == [""]
    assert portfolio.profile_names("ds 2") == [""]


def test_save_unknown_scenario_raises():
    portfolio = ScenarioPortfolio()
    portfolio.add()
    with pytest.raises(KeyError):
        portfolio.save("ds 9", _profiles("house"))


def test_save_as_appends_new_scenario():
    portfolio = ScenarioPortfolio()
    portfolio.add()
    scenario = portfolio.save_as(_profiles("hall"))
    assert scenario.name == "ds 2"
    assert portfolio.profile_names("ds 2") == ["hall"]
    assert len(portfolio) == 2


def test_save_as_with_no_profiles_shows_only_name():
    portfolio = ScenarioPortfolio()
    portfolio.add()
    portfolio.save_as([])
    assert portfolio.tree_lines()[-1] == "ds 2"


def test_remove_drops_scenario_and_lines():
    portfolio = ScenarioPortfolio()
    portfolio.add()
    portfolio.save_as(_profiles("hall"))
    removed = portfolio.remove("ds 1")
    assert removed == Scenario("ds 1", [DemandProfileData()])
    assert [s.name for s in portfolio] == ["ds 2"]
    assert portfolio.tree_lines() == ["ds 2", " hall"]
    assert "ds 1" not in portfolio.name_map()


def test_remove_unknown_raises_and_keeps_state():
    portfolio = ScenarioPortfolio()
    portfolio.add()
    with pytest.raises(KeyError):
        portfolio.remove("ds 5")
    assert [s.name for s in portfolio] == ["ds 1"]


def test_profile_names_unknown_raises():
    portfolio = ScenarioPortfolio()
    with pytest.raises(KeyError):
        portfolio.profile_names("ds 1")


def test_remove_all_then_add_restarts_numbering():
    portfolio = ScenarioPortfolio()
    portfolio.add()
    portfolio.remove("ds 1")
    scenario = portfolio.add()
    assert scenario.name == "ds 1"
    assert len(portfolio) == 1


def test_scenarios_property_is_a_copy():
    portfolio = ScenarioPortfolio()
    portfolio.add()
    copy = portfolio.scenarios
    copy.clear()
    assert len(portfolio) == 1


def test_saved_profile_keeps_values():
    portfolio = ScenarioPortfolio()
    portfolio.add()
    profile = DemandProfileData(name="p", start_day=3, end_day=7, hour_steps=2, values=[0.5])
    portfolio.save("ds 1", [profile])
    stored = portfolio.scenarios[0].profiles[0]
    assert stored == profile