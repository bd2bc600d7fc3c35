# Contains the main entry points
import logging
import os

from .core.converter import JsonToInsertConverter
from .core.errors import ConversionError, IoError
from .core.result import ConversionResult
from .database.sql_writer import SqlScriptWriter

logger = logging.getLogger(__name__)


def process_json_to_sql_file(json_text, table_name, output_dir=None):
    """
    Converts JSON text and writes the INSERT statements to <table_name>.sql.

    The file is only written once the whole input has been converted.

    Args:
        json_text: The JSON array of objects (str or bytes)
        table_name: Name of the target table, also used as the file name
        output_dir: Directory for the script (default: current working directory)

    Returns:
        ConversionResult: With output_path set on success, or the error that
        stopped the conversion (ParseError, SchemaError, TableNameError, IoError)
    """
    try:
        statements = JsonToInsertConverter.build_statements(json_text, table_name)

        # Only touch the file system after the transform succeeded
        writer = SqlScriptWriter(output_dir)
        output_path = writer.write(writer.output_path_for(table_name), statements)
    except (ConversionError, IoError) as e:
        logger.error(f"Failed to create SQL file for table {table_name!r}: {e}")
        return ConversionResult.failure(table_name, e)

    return ConversionResult.success(table_name, statements, output_path=output_path)


def process_json_file(json_path, table_name=None, output_dir=None):
    """
    Reads a JSON file and converts it with process_json_to_sql_file.

    Args:
        json_path: Path of the JSON file
        table_name: Target table name (default: the file name without extension)
        output_dir: Directory for the script (default: current working directory)

    Returns:
        ConversionResult: See process_json_to_sql_file; read failures give an IoError
    """
    if not table_name:
        table_name = table_name_from_path(json_path)

    logger.info(f"Reading {json_path}")
    try:
        with open(json_path, "rb") as f:
            json_bytes = f.read()
    except OSError as e:
        error = IoError(f"Unable to read JSON file {json_path}: {e.strerror or e}", path=json_path)
        logger.error(str(error))
        return ConversionResult.failure(table_name, error)

    return process_json_to_sql_file(json_bytes, table_name, output_dir=output_dir)


def table_name_from_path(path):
    """people.json -> people"""
    return os.path.splitext(os.path.basename(path))[0]
