from .analyzer import RecordAnalyzer
from .converter import JsonToInsertConverter, convert
from .errors import (
    ConversionError,
    IoError,
    JsonToInsertError,
    ParseError,
    SchemaError,
    TableNameError,
)
from .result import ConversionResult
from .statement_builder import InsertStatementBuilder

__all__ = [
    'RecordAnalyzer',
    'JsonToInsertConverter',
    'InsertStatementBuilder',
    'ConversionResult',
    'convert',
    'JsonToInsertError',
    'ConversionError',
    'ParseError',
    'SchemaError',
    'TableNameError',
    'IoError',
]
