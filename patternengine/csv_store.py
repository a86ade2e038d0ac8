"""Storage of CSV records by id and a manager that loads the data tables."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Generic, TypeVar, Union

from .csv_data import (
    AllNodePattern,
    BaseData,
    EnemyAttackPattern,
    EnemyData,
    PlayerAttackPattern,
    PlayerData,
)

T = TypeVar("T", bound=BaseData)
PathLike = Union[str, "os.PathLike[str]"]

# Header lines each data sheet starts with.
SKIP_LINES: dict[type[BaseData], int] = {
    AllNodePattern: 5,
    EnemyAttackPattern: 5,
    EnemyData: 5,
    PlayerAttackPattern: 11,
    PlayerData: 5,
}


class CsvDataStorage(Generic[T]):
    """Records keyed by id, with the ids kept in the order they were stored."""

    def __init__(self) -> None:
        self._data: dict[str, T] = {}
        self._ids: list[str] = []

    def set(self, key: str, record: T) -> None:
        """Store a record under its id and remember the id."""
        self._data[key] = record
        self._ids.append(key)

    def get(self, key: str) -> T:
        """Return the record for this id; raise KeyError if unknown."""
        try:
            return self._data[key]
        except KeyError:
            raise KeyError(f"no record with id {key!r}") from None

    def ids(self) -> list[str]:
        """Return the stored ids in storage order."""
        return list(self._ids)

    def print_data(self) -> None:
        """Print a summary line for every record."""
        for record in self._data.values():
            print(record.describe())

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)


def _split_cells(line: str) -> list[str]:
    """Split a line on commas, dropping one trailing empty cell."""
    if not line:
        return []
    cells = line.split(",")
    if cells[-1] == "":
        cells.pop()
    return cells


class CsvDataManager:
    """Loads the game's data sheets and keeps one storage per record type."""

    def __init__(self) -> None:
        self._storages: dict[type[BaseData], CsvDataStorage] = {
            record_type: CsvDataStorage() for record_type in SKIP_LINES
        }

    def _storage(self, record_type: type[BaseData]) -> CsvDataStorage:
        if not (isinstance(record_type, type) and issubclass(record_type, BaseData)):
            raise TypeError(f"{record_type!r} is not a record type")
        try:
            return self._storages[record_type]
        except KeyError:
            raise TypeError(f"unsupported record type: {record_type.__name__}") from None

    def skip_lines(self, record_type: type[BaseData]) -> int:
        """Number of header lines skipped in this type's sheet."""
        self._storage(record_type)
        return SKIP_LINES[record_type]

    def load_csv(self, record_type: type[BaseData], file_path: PathLike) -> None:
        """Read a sheet and store one record per row, keyed by its first cell."""
        storage = self._storage(record_type)
        skip = SKIP_LINES[record_type]
        with open(file_path, encoding="utf-8-sig") as handle:
            for line_number, line in enumerate(handle, start=1):
                if line_number <= skip:
                    continue
                cells = _split_cells(line.rstrip("\r\n"))
                if not cells:
                    continue
                record = record_type()
                record.set_data(cells)
                key = cells[0]
                if key:
                    storage.set(key, record)

    def get(self, record_type: type[BaseData], key: str) -> BaseData:
        """Return the record of this type with this id; raise KeyError if unknown."""
        return self._storage(record_type).get(key)

    def ids(self, record_type: type[BaseData]) -> list[str]:
        """Return the ids loaded for this record type."""
        return self._storage(record_type).ids()

    def print_records(self, record_type: type[BaseData]) -> None:
        """Print every record of this type."""
        self._storage(record_type).print_data()