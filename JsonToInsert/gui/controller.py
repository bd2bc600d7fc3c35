# Contains the front-end state and actions, kept free of any widget toolkit
import logging
import os
from collections import namedtuple

from ..core.errors import IoError
from ..main import process_json_to_sql_file, table_name_from_path

logger = logging.getLogger(__name__)

# kind is "info" or "error"
UserMessage = namedtuple("UserMessage", ["kind", "title", "text"])


class ConversionController:
    """
    Holds what the user has chosen (JSON file, table name) and runs the conversion.

    Every action returns plain values so any front end can render them.
    """

    def __init__(self, config_mgr=None):
        self.config_mgr = config_mgr
        self.file_path = ""
        self.file_content = b""
        self.table_name = ""

    def _setting(self, key, default=None):
        if self.config_mgr is None:
            return default
        return self.config_mgr.get(key, default)

    @property
    def initial_directory(self):
        return self._setting("last_open_directory") or os.getcwd()

    @property
    def output_directory(self):
        return self._setting("output_directory") or None

    def load_file(self, path):
        """
        Read the selected JSON file and suggest a table name for it.

        Returns:
            str: The suggested table name

        Raises:
            IoError: If the file cannot be read
        """
        try:
            with open(path, "rb") as f:
                content = f.read()
        except OSError as e:
            raise IoError(f"Unable to read JSON file {path}: {e.strerror or e}", path=path) from e

        self.file_path = path
        self.file_content = content
        logger.info(f"Loaded {len(content)} bytes from {path}")

        if self._setting("use_filename_as_table_name", True):
            self.table_name = table_name_from_path(path)
        else:
            self.table_name = self._setting("custom_table_name", "") or self.table_name

        if self.config_mgr is not None:
            self.config_mgr.set("last_open_directory", os.path.dirname(os.path.abspath(path)))
            self.config_mgr.save()

        return self.table_name

    def clear(self):
        self.file_path = ""
        self.file_content = b""
        self.table_name = ""

    def convert(self, table_name=None):
        """
        Convert the loaded file and write the script.

        Args:
            table_name: Overrides the stored table name (e.g. the text box contents)

        Returns:
            UserMessage: What to show the user
        """
        if table_name is not None:
            self.table_name = table_name.strip()

        if not self.file_path:
            return UserMessage("error", "No JSON File", "Open a JSON file before converting.")
        if not self.table_name:
            return UserMessage("error", "No Table Name", "Enter a table name before converting.")

        result = process_json_to_sql_file(self.file_content, self.table_name, output_dir=self.output_directory)
        if result.ok:
            return UserMessage("info", "Conversion Complete", result.message)
        return UserMessage("error", _ERROR_TITLES.get(result.kind, "Conversion Failed"), result.message)


_ERROR_TITLES = {
    "parse": "Invalid JSON",
    "schema": "Unsupported JSON Structure",
    "table_name": "No Table Name",
    "io": "Unable to Write SQL File",
}
