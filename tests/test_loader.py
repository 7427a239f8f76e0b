import json

import pandas as pd
import pytest

from data_prep.loader import ConfigurationError, load_scenario, parse_scenario


def _write(tmp_path, data):
    path = tmp_path / "scenario.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


@pytest.mark.unit
def test_load_scenario(tmp_path):
    path = _write(
        tmp_path,
        {
            "scenario": "Base case",
            "birth_date": "1976-02",
            "initial_capital": 100000,
            "as_of_date": "2026-09",
            "conditions": [
                {"date": "2026-10", "rate": 7, "movement": 500},
                {"date": "2036-10", "rate": 7, "movement": -2000},
            ],
        },
    )
    config, timeline = load_scenario(path)

    assert config.birth_month == pd.Timestamp("1976-02-01")
    assert config.as_of_month == pd.Timestamp("2026-09-01")
    assert config.horizon == pd.Timestamp("2076-02-01")
    assert config.initial_capital == 100000
    assert config.fallback_policy == "first"
    assert timeline.ids == (0, 1)
    assert timeline[1].movement == -2000


@pytest.mark.unit
def test_explicit_ids_and_auto_ids_mix():
    _, timeline = parse_scenario(
        {
            "birth_date": "1990-01",
            "conditions": [{"id": 10, "date": "2030-01"}, {"rate": 3}],
        }
    )
    assert timeline.ids == (10, 11)
    assert timeline[1].effective_date is None


@pytest.mark.unit
def test_missing_as_of_uses_current_month():
    config, _ = parse_scenario({"birth_date": "1990-01", "conditions": [{"date": "2030-01"}]})
    today = pd.Timestamp.today()
    assert config.as_of_month == pd.Timestamp(year=today.year, month=today.month, day=1)


@pytest.mark.unit
@pytest.mark.parametrize(
    "data",
    [
        {"conditions": []},
        {"birth_date": "someday"},
        {"birth_date": "1990-01", "conditions": [{"date": "2030-99"}]},
        {"birth_date": "1990-01", "fallback_policy": "last"},
        {"birth_date": "1990-01", "conditions": [{"id": 1}, {"id": 1}]},
        ["not", "a", "mapping"],
    ],
)
def test_invalid_scenarios(data):
    with pytest.raises(ConfigurationError):
        parse_scenario(data)


@pytest.mark.unit
def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        load_scenario(str(tmp_path / "nope.json"))


@pytest.mark.unit
def test_bad_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{ birth_date: ", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="Error parsing JSON"):
        load_scenario(str(path))
