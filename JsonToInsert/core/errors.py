# Error types raised while converting JSON to INSERT statements


class JsonToInsertError(Exception):
    """Base class for every error this package reports to a front end."""

    kind = "error"


class ConversionError(JsonToInsertError):
    """The input could not be turned into INSERT statements."""


class ParseError(ConversionError):
    """
    The input text is not valid JSON or its top-level value is not an array.

    When the failure comes from the JSON decoder, ``lineno``, ``colno`` and
    ``pos`` point at the offending character.
    """

    kind = "parse"

    def __init__(self, message, lineno=None, colno=None, pos=None):
        super().__init__(message)
        self.lineno = lineno
        self.colno = colno
        self.pos = pos

    def __str__(self):
        message = super().__str__()
        if self.lineno is not None and self.colno is not None:
            return f"{message} (line {self.lineno}, column {self.colno})"
        return message


class SchemaError(ConversionError):
    """An element of the input array is not a JSON object."""

    kind = "schema"

    def __init__(self, message, index=None):
        super().__init__(message)
        self.index = index


class TableNameError(ConversionError):
    """The target table name is blank."""

    kind = "table_name"


class IoError(JsonToInsertError):
    """A file could not be read or the SQL script could not be written."""

    kind = "io"

    def __init__(self, message, path=None):
        super().__init__(message)
        self.path = path
