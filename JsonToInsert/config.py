# Contains user settings persisted as a JSON file
import json
import logging
import os
import platform

logger = logging.getLogger(__name__)

APP_NAME = "JsonToInsert"

DEFAULT_CONFIG = {
    "output_directory": "",
    "last_open_directory": "",
    "use_filename_as_table_name": True,
    "custom_table_name": "",
    "enable_logging": True,
    "log_directory": "",
    "log_level": "INFO",
}


def get_config_path():
    """Per-user settings file: %APPDATA%\\JsonToInsert or ~/.config/JsonToInsert"""
    if platform.system() == "Windows":
        base_dir = os.environ.get("APPDATA", os.path.expanduser("~"))
    else:
        base_dir = os.path.join(os.path.expanduser("~"), ".config")
    return os.path.join(base_dir, APP_NAME, "config.json")


class ConfigManager:
    def __init__(self, path=None):
        self.path = path or get_config_path()
        self.config = dict(DEFAULT_CONFIG)
        self.load()

    def load(self):
        """Merge the settings file over the defaults, if it exists."""
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf-8") as f:
                    stored = json.load(f)
            except (OSError, ValueError) as e:
                logger.warning(f"Error loading config {self.path}: {e}")
                return
            if isinstance(stored, dict):
                self.config.update(stored)
            else:
                logger.warning(f"Ignoring config {self.path}: expected a JSON object")

    def save(self):
        try:
            os.makedirs(os.path.dirname(os.path.abspath(self.path)), exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(self.config, f, indent=4)
        except OSError as e:
            logger.warning(f"Error saving config {self.path}: {e}")

    def get(self, key, default=None):
        return self.config.get(key, default)

    def set(self, key, value):
        self.config[key] = value
