from .core.analyzer import RecordAnalyzer
from .core.converter import JsonToInsertConverter, convert
from .core.errors import (
    ConversionError,
    IoError,
    JsonToInsertError,
    ParseError,
    SchemaError,
    TableNameError,
)
from .core.result import ConversionResult
from .core.statement_builder import InsertStatementBuilder
from .database.sql_writer import SqlScriptWriter, output_path_for, write

from .main import process_json_file, process_json_to_sql_file

__all__ = [
    "convert",
    "write",
    "output_path_for",
    "process_json_to_sql_file",
    "process_json_file",
    "JsonToInsertConverter",
    "RecordAnalyzer",
    "InsertStatementBuilder",
    "SqlScriptWriter",
    "ConversionResult",
    "JsonToInsertError",
    "ConversionError",
    "ParseError",
    "SchemaError",
    "TableNameError",
    "IoError",
]
