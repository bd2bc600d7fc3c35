import argparse
import logging

from .config import ConfigManager
from .log_config import configure_logging
from .main import process_json_file

logger = logging.getLogger(__name__)


def build_parser():

    description = """
    Convert a JSON array of objects into SQL INSERT statements.
    --------------------
    Example usage:
        json-to-insert --json people.json
        json-to-insert --json people.json --table people --out-dir sql

    Writes <table>.sql with one INSERT statement per array element.
    Without --json, the desktop window is opened instead.
    """

    clargs = {
        "json": {
            "help": "Path to the JSON file to convert.",
            "type": str,
            "default": None
        },
        "table": {
            "help": "Target table name (default: JSON file name without extension).",
            "type": str,
            "default": None
        },
        "out-dir": {
            "help": "Directory for the .sql file (default: output_directory setting, "
                    "else the current working directory).",
            "type": str,
            "default": None
        },
        "config": {
            "help": "Path to the JSON settings file.",
            "type": str,
            "default": None
        },
        "debug": {
            "help": "Verbose logging.",
            "action": "store_true",
            "default": False
        },
        "log-level": {
            "help": "Set logging level (e.g., DEBUG, INFO, WARNING, ERROR).",
            "type": str.upper,
            "choices": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
            "default": None
        }
    }

    parser_kwargs = {
        "description": description,
        "formatter_class": argparse.RawDescriptionHelpFormatter
    }

    parser = argparse.ArgumentParser(**parser_kwargs)
    for k, v in clargs.items():
        parser.add_argument(f'--{k}', **v)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    config_mgr = ConfigManager(args.config)
    level = "DEBUG" if args.debug else args.log_level
    configure_logging(config_mgr.config, level=level)

    if args.json is None:
        from .gui.app import run
        run(config_mgr)
        return 0

    out_dir = args.out_dir or config_mgr.get("output_directory") or None
    result = process_json_file(args.json, table_name=args.table, output_dir=out_dir)
    if not result.ok:
        logger.error(result.message)
        return 1

    logger.info(result.message)
    return 0
