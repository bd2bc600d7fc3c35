# Contains class for building INSERT statements from records
import json

import pandas as pd

# Stands in for a column the record does not carry
MISSING = object()


class InsertStatementBuilder:
    """
    Builds one INSERT statement per record for a fixed table and column set.

    Table and column names are emitted as given; the caller is responsible
    for supplying identifiers that are safe for the target database.
    """

    def __init__(self, table_name, columns):
        self.table_name = table_name
        self.columns = list(columns)
        # The column list is the same for every statement, so join it once
        self._column_list = ", ".join(self.columns)

    def build(self, record):
        """
        Compose the INSERT statement for a single record.

        Columns absent from the record are rendered as NULL and keys that are
        not in the column set are ignored.

        Args:
            record: Dict mapping column names to parsed JSON values

        Returns:
            str: The statement, terminated by a semicolon
        """
        values = [self.format_value(record.get(col, MISSING)) for col in self.columns]
        return f"INSERT INTO {self.table_name} ({self._column_list}) VALUES ({', '.join(values)});"

    def build_all(self, records):
        return [self.build(record) for record in records]

    @staticmethod
    def format_value(value):
        """
        Render a parsed JSON value as a SQL literal.

        Args:
            value: The value, or MISSING when the record has no such key

        Returns:
            str: NULL, 1/0 for booleans, the numeric text for numbers, or a
            single-quoted string literal for text and nested values
        """
        if value is MISSING:
            return "NULL"
        # bool is a subclass of int, so it has to be checked first
        if isinstance(value, bool):
            return "1" if value else "0"
        if isinstance(value, (dict, list)):
            # Nested values are stored as their JSON text
            return quote_literal(json.dumps(value, ensure_ascii=False, separators=(",", ":")))
        if pd.isna(value):
            return "NULL"
        if isinstance(value, (int, float)):
            return str(value)
        return quote_literal(str(value))


def quote_literal(text):
    """Wrap text in single quotes, doubling any embedded single quote."""
    return "'" + text.replace("'", "''") + "'"


def unquote_literal(literal):
    """
    Recover the original text from a literal produced by quote_literal.

    Raises:
        ValueError: If the literal is not a well-formed single-quoted string
    """
    if len(literal) < 2 or not (literal.startswith("'") and literal.endswith("'")):
        raise ValueError(f"Not a quoted SQL string literal: {literal!r}")
    body = literal[1:-1]
    # Every quote inside the body must come in a doubled pair
    if body.replace("''", "").count("'"):
        raise ValueError(f"Unescaped quote in SQL string literal: {literal!r}")
    return body.replace("''", "'")
