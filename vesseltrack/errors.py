"""Exceptions raised when loading and querying vessel data."""

from __future__ import annotations

from typing import Optional


class DataError(Exception):
    """Base class of every data loading or lookup failure."""

    message = "Data Error"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message if message is not None else self.message)


class DatabaseError(DataError):
    """A database could not be reached, queried or its results decoded."""

    message = "Database Error"


class TableError(DataError):
    """An in-memory table could not satisfy a request."""

    message = "Table Error"


class MissingKeyError(TableError):
    """No row of the table matches the requested key."""

    message = "Could not find key in table"


class DuplicateKeyError(TableError):
    """The key is already present in the table."""

    message = "Key already exists in table"


class LoaderError(TableError):
    """Data could not be loaded into the table."""

    message = "Error loading data into table"


class CsvError(DataError):
    """A CSV file could not be opened, deserialised or a timestamp parsed."""

    message = "CSV Error"