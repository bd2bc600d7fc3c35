import json

import pytest

from JsonToInsert import cli

from conftest import PEOPLE_SQL


@pytest.fixture
def settings(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"enable_logging": False}), encoding="utf-8")
    return str(path)


def test_converts_file_named_after_input(settings, people_json, write_json, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    json_path = write_json("people.json", people_json)

    assert cli.main(["--json", json_path, "--config", settings]) == 0
    assert (tmp_path / "people.sql").read_text(encoding="utf-8") == PEOPLE_SQL


def test_table_and_output_directory_options(settings, people_json, write_json, tmp_path):
    json_path = write_json("export.json", people_json)
    out_dir = tmp_path / "sql"
    out_dir.mkdir()

    status = cli.main(["--json", json_path, "--table", "people", "--out-dir", str(out_dir), "--config", settings])

    assert status == 0
    assert (out_dir / "people.sql").read_text(encoding="utf-8") == PEOPLE_SQL


def test_invalid_json_exits_with_error(settings, write_json, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    json_path = write_json("broken.json", "{")

    assert cli.main(["--json", json_path, "--config", settings, "--log-level", "error"]) == 1
    assert not (tmp_path / "broken.sql").exists()


def test_missing_input_exits_with_error(settings, tmp_path):
    assert cli.main(["--json", str(tmp_path / "missing.json"), "--config", settings, "--debug"]) == 1


def test_without_input_launches_window(settings, monkeypatch):
    pytest.importorskip("tkinter")
    import JsonToInsert.gui.app

    launched = []
    monkeypatch.setattr(JsonToInsert.gui.app, "run", lambda config_mgr: launched.append(config_mgr))

    assert cli.main(["--config", settings]) == 0
    assert len(launched) == 1
    assert launched[0].get("enable_logging") is False


def test_unknown_log_level_is_rejected_by_the_parser(settings, write_json):
    json_path = write_json("people.json", "[]")

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--json", json_path, "--config", settings, "--log-level", "bogus"])
    assert excinfo.value.code == 2


def test_log_level_is_case_insensitive():
    assert cli.build_parser().parse_args(["--log-level", "warning"]).log_level == "WARNING"
