# Contains the tagged result returned by the public conversion entry points
from dataclasses import dataclass, field
from typing import List, Optional

from .errors import JsonToInsertError


@dataclass
class ConversionResult:
    """
    Outcome of one conversion.

    On success ``statements`` holds the INSERT statements in input order and
    ``output_path`` the script file once it has been written. On failure
    ``error`` holds the exception and ``statements`` is empty.
    """

    table_name: str
    statements: List[str] = field(default_factory=list)
    error: Optional[JsonToInsertError] = None
    output_path: Optional[str] = None

    @classmethod
    def success(cls, table_name, statements, output_path=None):
        return cls(table_name=table_name, statements=list(statements), output_path=output_path)

    @classmethod
    def failure(cls, table_name, error):
        return cls(table_name=table_name, error=error)

    @property
    def ok(self):
        return self.error is None

    @property
    def kind(self):
        """'success', or the kind of the error ('parse', 'schema', 'table_name', 'io')."""
        return "success" if self.ok else self.error.kind

    @property
    def count(self):
        return len(self.statements)

    @property
    def message(self):
        """User-facing description of the outcome."""
        if not self.ok:
            return str(self.error)
        noun = "statement" if self.count == 1 else "statements"
        if self.output_path:
            return f"Wrote {self.count} INSERT {noun} to {self.output_path}"
        return f"Generated {self.count} INSERT {noun} for table {self.table_name}"
