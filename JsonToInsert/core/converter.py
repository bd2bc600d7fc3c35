# Contains main conversion logic
import logging

from .analyzer import RecordAnalyzer
from .errors import ConversionError, TableNameError
from .result import ConversionResult
from .statement_builder import InsertStatementBuilder

logger = logging.getLogger(__name__)


class JsonToInsertConverter:
    """
    Handles the conversion of a JSON array of objects into INSERT statements.
    """

    @staticmethod
    def build_statements(json_text, table_name):
        """
        Convert JSON text into one INSERT statement per array element.

        Args:
            json_text: A JSON array of objects (str or bytes)
            table_name: Name of the target table, emitted as given

        Returns:
            list: The INSERT statements in input order (empty for an empty array)

        Raises:
            TableNameError: If the table name is blank
            ParseError: If the text is not valid JSON or not an array
            SchemaError: If any element of the array is not an object
        """
        if not table_name or not str(table_name).strip():
            raise TableNameError("Table name must not be empty")

        # Parse the text and take the columns from the first record
        analyzer = RecordAnalyzer()
        records, columns = analyzer.analyze(json_text)
        if not records:
            logger.info(f"Input array for table {table_name} is empty, nothing to insert")
            return []

        builder = InsertStatementBuilder(table_name, columns)
        statements = builder.build_all(record for _, record in analyzer.iter_records(records))

        logger.info(f"Generated {len(statements)} INSERT statements for table {table_name}")
        return statements

    @staticmethod
    def convert(json_text, table_name):
        """
        Convert JSON text into INSERT statements without raising for bad input.

        Returns:
            ConversionResult: The statements, or the ParseError, SchemaError
            or TableNameError that stopped the conversion
        """
        try:
            statements = JsonToInsertConverter.build_statements(json_text, table_name)
        except ConversionError as e:
            logger.warning(f"Conversion for table {table_name!r} failed: {e}")
            return ConversionResult.failure(table_name, e)
        return ConversionResult.success(table_name, statements)


def convert(json_text, table_name):
    """Module-level shortcut for JsonToInsertConverter.convert."""
    return JsonToInsertConverter.convert(json_text, table_name)
