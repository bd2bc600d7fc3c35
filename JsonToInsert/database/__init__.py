from .sql_writer import SqlScriptWriter, output_path_for, write

__all__ = [
    'SqlScriptWriter',
    'output_path_for',
    'write',
]
