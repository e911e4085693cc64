import json
import logging

import yaml
from typer.testing import CliRunner

from console.cli import app
from console.hooks import announce_new_records
from loader.schemas import PokemonRecord
from store.registry import get_store

runner = CliRunner()

POKEMON = [
    {"id": "pikachu", "attack": 10, "defense": 4},
    {"id": "bulbasaur", "attack": 4, "defense": 6},
    {"id": "charizard", "attack": 10, "defense": 8},
]


def _write_data(tmp_path, records=POKEMON, name="data.json"):
    data_file = tmp_path / name
    data_file.write_text(json.dumps(records), encoding="utf-8")
    return data_file


def test_best_picks_first_of_tied_maximum(tmp_path):
    data_file = _write_data(tmp_path)

    result = runner.invoke(app, ["best", str(data_file)])

    assert result.exit_code == 0
    assert "Best by attack: pikachu" in result.output
    assert "Score:   10" in result.output


def test_best_by_other_field(tmp_path):
    data_file = _write_data(tmp_path)

    result = runner.invoke(app, ["best", str(data_file), "--field", "defense"])

    assert result.exit_code == 0
    assert "Best by defense: charizard" in result.output


def test_best_reports_nothing_qualified(tmp_path):
    data_file = _write_data(tmp_path, [{"id": "magikarp", "attack": 0}])

    result = runner.invoke(app, ["best", str(data_file)])

    assert result.exit_code == 0
    assert "No record scored above 0" in result.output


def test_best_missing_file_exits_1(tmp_path):
    result = runner.invoke(app, ["best", str(tmp_path / "missing.json")])
    assert result.exit_code == 1


def test_best_unknown_type_exits_1(tmp_path):
    data_file = _write_data(tmp_path)
    result = runner.invoke(app, ["best", str(data_file), "--type", "digimon"])
    assert result.exit_code == 1


def test_list_prints_records_in_order(tmp_path):
    data_file = _write_data(tmp_path)

    result = runner.invoke(app, ["list", str(data_file)])

    assert result.exit_code == 0
    ids = [json.loads(line)["id"] for line in result.output.splitlines() if line.startswith("{")]
    assert ids == ["pikachu", "bulbasaur", "charizard"]


def test_run_resolves_data_path_relative_to_config(tmp_path):
    _write_data(tmp_path, name="records.json")
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        yaml.safe_dump(
            {
                "data_path": "records.json",
                "score_field": "defense",
                "log_level": "WARNING",
            }
        )
    )

    result = runner.invoke(app, ["run", str(config_file)])

    assert result.exit_code == 0
    assert "Best by defense: charizard" in result.output


def test_run_invalid_config_exits_1(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(yaml.safe_dump({"score_field": "attack"}))

    result = runner.invoke(app, ["run", str(config_file)])

    assert result.exit_code == 1


def test_announce_new_records_logs_and_cancels(caplog):
    store = get_store(PokemonRecord)
    cancel = announce_new_records(store)

    with caplog.at_level(logging.INFO, logger="console.hooks"):
        store.set(PokemonRecord(id="pikachu", attack=10))
        cancel()
        store.set(PokemonRecord(id="raichu", attack=20))

    assert "new record >>" in caplog.text
    assert "pikachu" in caplog.text
    assert "raichu" not in caplog.text


def test_consecutive_commands_do_not_share_records(tmp_path):
    strong = _write_data(tmp_path, [{"id": "mewtwo", "attack": 100}], name="a.json")
    weak = _write_data(tmp_path, [{"id": "rattata", "attack": 5}], name="b.json")

    first = runner.invoke(app, ["best", str(strong)])
    second = runner.invoke(app, ["best", str(weak)])
    listed = runner.invoke(app, ["list", str(weak)])

    assert first.exit_code == 0
    assert "Best by attack: mewtwo" in first.output
    assert second.exit_code == 0
    assert "Best by attack: rattata" in second.output
    assert "Records: 1" in second.output
    ids = [json.loads(line)["id"] for line in listed.output.splitlines() if line.startswith("{")]
    assert ids == ["rattata"]
    assert len(get_store(PokemonRecord)) == 0
