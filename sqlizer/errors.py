"""Exception hierarchy for sqlizer.

Every failure that ends a command derives from :class:`SqlizerError`, so the
CLI can report it with the phase it happened in and exit.
"""


class SqlizerError(Exception):
    """Base exception for all sqlizer errors."""

    pass


class DatabaseConnectionError(SqlizerError):
    """The database server could not be reached or rejected the login."""

    pass


class DatabaseNotFoundError(SqlizerError):
    """The requested database does not exist on the server."""

    def __init__(self, database: str):
        super().__init__(f"database {database!r} does not exist")
        self.database = database


class TableNotFoundError(SqlizerError):
    """The requested table does not exist in the lookup catalog."""

    def __init__(self, table: str, catalog: str):
        super().__init__(f"table {table!r} does not exist in {catalog}")
        self.table = table
        self.catalog = catalog


class QueryError(SqlizerError):
    """A metadata query failed to execute."""

    pass


class FormatError(SqlizerError):
    """Generated source could not be formatted."""

    pass


class DirectoryExistsError(SqlizerError):
    """The output directory already exists."""

    def __init__(self, path):
        super().__init__(f"output directory already exists: {path}")
        self.path = path


class FileWriteError(SqlizerError):
    """Generated source could not be written to disk."""

    pass


class ImportNormalizationError(SqlizerError):
    """Imports of a written file could not be normalized.

    The file written before normalization is left on disk.
    """

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path
