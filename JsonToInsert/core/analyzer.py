# Contains class for analyzing the structure of the input JSON array
import json
import logging
import math

from .errors import ParseError, SchemaError

logger = logging.getLogger(__name__)


def _reject_constant(name):
    # NaN, Infinity and -Infinity are accepted by the json module but are not JSON
    raise ValueError(f"Invalid JSON constant {name}")


def _parse_finite_float(text):
    value = float(text)
    # 1e400 and the like overflow to inf, which has no SQL literal
    if math.isinf(value):
        raise ValueError(f"Number {text} is out of range")
    return value


def _check_encodable(parsed):
    """Raise ParseError if any key or string holds an unpaired surrogate escape such as \\ud800."""
    # Iterative, since the decoder already allows nesting close to the recursion limit
    pending = [parsed]
    while pending:
        value = pending.pop()
        if isinstance(value, dict):
            pending.extend(value.keys())
            pending.extend(value.values())
        elif isinstance(value, list):
            pending.extend(value)
        elif isinstance(value, str):
            try:
                value.encode("utf-8")
            except UnicodeEncodeError as e:
                raise ParseError(f"Invalid JSON: unpaired surrogate in string {value!r}") from e


class RecordAnalyzer:
    """
    Parses the input text and identifies the records and their columns.

    The column set comes from the first record only. Every later record is
    read through those columns, whatever keys it carries itself.
    """

    def __init__(self):
        self.records = []  # Parsed top-level array
        self.columns = []  # Column names taken from the first record

    def analyze(self, json_text):
        """
        Parse the JSON text and derive the column set.

        Args:
            json_text: The JSON document (str or bytes)

        Returns:
            tuple: (records, columns)
        """
        self.records = self.parse(json_text)
        self.columns = self.derive_columns(self.records)
        logger.debug(f"Found {len(self.records)} records with columns {self.columns}")
        return self.records, self.columns

    @staticmethod
    def parse(json_text):
        """
        Parse the JSON text into the list of top-level array elements.

        Raises:
            ParseError: If the text is empty, not valid JSON or not an array
        """
        if isinstance(json_text, (bytes, bytearray)):
            try:
                # utf-8-sig drops a leading byte order mark if the file has one
                json_text = bytes(json_text).decode("utf-8-sig")
            except UnicodeDecodeError as e:
                raise ParseError(f"Input is not valid UTF-8 text: {e.reason}", pos=e.start) from e

        if json_text is None or not json_text.strip():
            raise ParseError("JSON input is empty")

        try:
            parsed = json.loads(json_text, parse_constant=_reject_constant, parse_float=_parse_finite_float)
        except json.JSONDecodeError as e:
            raise ParseError(f"Invalid JSON: {e.msg}", lineno=e.lineno, colno=e.colno, pos=e.pos) from e
        except ValueError as e:
            raise ParseError(f"Invalid JSON: {e}") from e
        except RecursionError as e:
            raise ParseError("Invalid JSON: nesting too deep") from e

        if not isinstance(parsed, list):
            raise ParseError(f"Expected a JSON array at the top level, got {_json_type_name(parsed)}")

        _check_encodable(parsed)

        return parsed

    @staticmethod
    def derive_columns(records):
        """
        Take the keys of the first record, in the order they occur, as the column set.

        An empty array has no columns.

        Raises:
            SchemaError: If the first element is not a JSON object
        """
        if not records:
            return []

        first = records[0]
        if not isinstance(first, dict):
            raise SchemaError(
                f"Element 0 must be a JSON object, got {_json_type_name(first)}", index=0
            )
        return list(first.keys())

    @staticmethod
    def iter_records(records):
        """
        Yield (index, record) for every element, checking that each one is an object.

        Raises:
            SchemaError: At the first element that is not a JSON object
        """
        for index, item in enumerate(records):
            if not isinstance(item, dict):
                raise SchemaError(
                    f"Element {index} must be a JSON object, got {_json_type_name(item)}", index=index
                )
            yield index, item


def _json_type_name(value):
    """Name a parsed value by its JSON type, for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"
