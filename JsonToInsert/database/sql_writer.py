# Contains SQL script file operations
import logging
import os
import tempfile

from ..core.errors import IoError

logger = logging.getLogger(__name__)


class SqlScriptWriter:
    """
    Writes INSERT statements to a .sql script file.

    The script is written to a temporary file next to the target and moved
    into place only once every statement has been written, so a failed
    conversion never leaves a half-written script behind.
    """

    def __init__(self, output_dir=None):
        """
        Initialize with the directory scripts are written to.

        Args:
            output_dir: Target directory; the current working directory when empty
        """
        self.output_dir = output_dir or None

    def output_path_for(self, table_name):
        """Return the script path for a table: <output_dir>/<table_name>.sql"""
        directory = self.output_dir or os.getcwd()
        return os.path.join(directory, f"{table_name}.sql")

    def write(self, path, statements):
        """
        Create or truncate the script at path and write one statement per line.

        Args:
            path: Target file path
            statements: Iterable of INSERT statements

        Returns:
            str: The path written

        Raises:
            IoError: If the file cannot be created or written
        """
        directory = os.path.dirname(os.path.abspath(path))
        tmp_path = None
        count = 0
        try:
            fd, tmp_path = tempfile.mkstemp(prefix=".json_to_insert-", suffix=".sql.tmp", dir=directory)
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
                for statement in statements:
                    f.write(statement)
                    f.write("\n")
                    count += 1
            os.replace(tmp_path, path)
            tmp_path = None
        except OSError as e:
            raise IoError(f"Unable to write SQL file {path}: {e.strerror or e}", path=path) from e
        except UnicodeEncodeError as e:
            # e.g. a table name from the command line carrying undecodable bytes
            raise IoError(f"Unable to write SQL file {path}: text is not encodable as UTF-8", path=path) from e
        finally:
            # Leave nothing behind but the previous script, if there was one
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)

        logger.info(f"Wrote {count} statements to {path}")
        return path


def output_path_for(table_name, directory=None):
    return SqlScriptWriter(directory).output_path_for(table_name)


def write(path, statements):
    """Write statements to path, one per line. See SqlScriptWriter.write."""
    return SqlScriptWriter().write(path, statements)
