import os

import pytest

from JsonToInsert.config import ConfigManager
from JsonToInsert.core.errors import IoError
from JsonToInsert.gui.controller import ConversionController, UserMessage

from conftest import PEOPLE_SQL


@pytest.fixture
def config_mgr(tmp_path):
    out_dir = tmp_path / "out"
    out_dir.mkdir()
    config_mgr = ConfigManager(str(tmp_path / "config.json"))
    config_mgr.set("output_directory", str(out_dir))
    return config_mgr


def test_convert_requires_a_loaded_file(config_mgr):
    message = ConversionController(config_mgr).convert("people")

    assert message == UserMessage("error", "No JSON File", "Open a JSON file before converting.")


def test_load_file_suggests_table_name_and_remembers_directory(config_mgr, people_json, write_json, tmp_path):
    controller = ConversionController(config_mgr)

    assert controller.load_file(write_json("people.json", people_json)) == "people"
    assert controller.file_content == people_json.encode("utf-8")
    assert config_mgr.get("last_open_directory") == str(tmp_path)
    assert ConfigManager(config_mgr.path).get("last_open_directory") == str(tmp_path)
    assert controller.initial_directory == str(tmp_path)


def test_load_file_uses_custom_table_name_when_configured(config_mgr, write_json):
    config_mgr.set("use_filename_as_table_name", False)
    config_mgr.set("custom_table_name", "imports")

    assert ConversionController(config_mgr).load_file(write_json("people.json", "[]")) == "imports"


def test_load_missing_file_raises_io_error(config_mgr, tmp_path):
    controller = ConversionController(config_mgr)

    with pytest.raises(IoError):
        controller.load_file(str(tmp_path / "missing.json"))
    assert controller.file_path == ""


def test_convert_writes_script_to_output_directory(config_mgr, people_json, write_json):
    controller = ConversionController(config_mgr)
    controller.load_file(write_json("people.json", people_json))

    message = controller.convert()

    script = os.path.join(config_mgr.get("output_directory"), "people.sql")
    assert message.kind == "info"
    assert message.title == "Conversion Complete"
    assert script in message.text
    with open(script, encoding="utf-8") as f:
        assert f.read() == PEOPLE_SQL


def test_convert_uses_edited_table_name(config_mgr, people_json, write_json):
    controller = ConversionController(config_mgr)
    controller.load_file(write_json("people.json", people_json))

    message = controller.convert("  staff  ")

    assert message.kind == "info"
    assert controller.table_name == "staff"
    assert os.path.exists(os.path.join(config_mgr.get("output_directory"), "staff.sql"))


def test_convert_rejects_blank_table_name(config_mgr, people_json, write_json):
    controller = ConversionController(config_mgr)
    controller.load_file(write_json("people.json", people_json))

    assert controller.convert("   ").title == "No Table Name"


def test_convert_reports_invalid_json(config_mgr, write_json):
    controller = ConversionController(config_mgr)
    controller.load_file(write_json("broken.json", '[{"name": "John",}]'))

    message = controller.convert()

    assert message.kind == "error"
    assert message.title == "Invalid JSON"
    assert "line 1" in message.text
    assert os.listdir(config_mgr.get("output_directory")) == []


def test_convert_reports_unsupported_structure(config_mgr, write_json):
    controller = ConversionController(config_mgr)
    controller.load_file(write_json("numbers.json", "[1, 2, 3]"))

    assert controller.convert().title == "Unsupported JSON Structure"


def test_controller_without_settings_uses_working_directory(people_json, write_json, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    controller = ConversionController()
    controller.load_file(write_json("people.json", people_json))

    assert controller.convert().kind == "info"
    assert (tmp_path / "people.sql").read_text(encoding="utf-8") == PEOPLE_SQL


def test_clear_forgets_the_loaded_file(config_mgr, write_json):
    controller = ConversionController(config_mgr)
    controller.load_file(write_json("people.json", "[]"))
    controller.clear()

    assert controller.convert("people").title == "No JSON File"
