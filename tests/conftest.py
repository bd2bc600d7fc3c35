import json
import logging

import pytest

PEOPLE = [{"name": "John", "age": 30}, {"name": "Alice", "age": 25}]

PEOPLE_SQL = (
    "INSERT INTO people (name, age) VALUES ('John', 30);\n"
    "INSERT INTO people (name, age) VALUES ('Alice', 25);\n"
)


@pytest.fixture
def people_json():
    return json.dumps(PEOPLE)


@pytest.fixture
def write_json(tmp_path):
    """Write text to a file under tmp_path and return its path as a str."""
    def _write(name, text):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    package_logger = logging.getLogger("JsonToInsert")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
