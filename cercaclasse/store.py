"""Record store — parses the class CSV once and keeps it in memory.

The default parse step is a plain delimiter split: a delimiter inside a
value is treated as a field boundary, so the source must not contain quoted
fields with embedded commas. Set ``quoted_fields=True`` (or
``CERCACLASSE_QUOTED_FIELDS=1``) to parse with the ``csv`` module instead;
the resulting records are the same for clean input.
"""

import csv
import re
import threading
import time
from collections.abc import Callable
from dataclasses import fields
from pathlib import Path

from cercaclasse.config import settings
from cercaclasse.exceptions import MissingColumnError, StoreLoadError
from cercaclasse.log import logger
from cercaclasse.schema import ClassRecord
from cercaclasse.utils import read_source

# Record field → source header (MIUR open data column names)
COLUMNS: dict[str, str] = {
    "school_code": "CODICESCUOLA",
    "institution_code": "CODICEISTITUTORIFERIMENTO",
    "school_name": "DENOMINAZIONESCUOLA",
    "institution_name": "DENOMINAZIONEISTITUTORIFERIMENTO",
    "municipality": "DESCRIZIONECOMUNE",
    "province": "PROVINCIA",
    "class_label": "CLASSE_DISPLAY",
}

_RECORD_FIELDS = [f.name for f in fields(ClassRecord)]
_LINE_RE = re.compile(r"\r?\n")


def split_rows(text: str, *, delimiter: str = ",", quoted_fields: bool = False) -> list[list[str]]:
    """Split source text into rows of cells, skipping blank lines.

    Both modes see the same lines, so a quoted value cannot span a line break.
    """
    lines = [line for line in _LINE_RE.split(text) if line.strip()]
    if quoted_fields:
        return list(csv.reader(lines, delimiter=delimiter))
    return [line.split(delimiter) for line in lines]


def parse_records(
    text: str,
    *,
    source: str = "<text>",
    columns: dict[str, str] | None = None,
    delimiter: str = ",",
    quoted_fields: bool = False,
) -> tuple[ClassRecord, ...]:
    """Parse tabular text into records, mapping columns by header name.

    Rows shorter than the header get ``""`` for the missing fields.

    Raises:
        MissingColumnError: If a required header is absent.
        StoreLoadError: If the csv reader rejects the text (quoted mode).
    """
    columns = columns or COLUMNS
    if set(columns) != set(_RECORD_FIELDS):
        raise ValueError(f"columns must map exactly these fields: {', '.join(_RECORD_FIELDS)}")

    try:
        table = split_rows(text, delimiter=delimiter, quoted_fields=quoted_fields)
    except csv.Error as e:
        raise StoreLoadError(source, str(e), "MALFORMED_SOURCE") from e
    header = [name.strip() for name in table[0]] if table else []

    positions = {}
    for field_name in _RECORD_FIELDS:
        column = columns[field_name]
        if column not in header:
            raise MissingColumnError(source, column, header)
        positions[field_name] = header.index(column)

    return tuple(
        ClassRecord(**{
            name: row[idx] if idx < len(row) else ""
            for name, idx in positions.items()
        })
        for row in table[1:]
    )


class RecordStore:
    """Lazily loaded, immutable collection of class records.

    ``load()`` parses the source on first call and returns the cached tuple
    afterwards. A failed load caches nothing, so the next call tries again.
    """

    def __init__(
        self,
        source: str | Path,
        *,
        columns: dict[str, str] | None = None,
        delimiter: str = ",",
        quoted_fields: bool = False,
        reader: Callable[[str], str] = read_source,
    ):
        self.source = str(source)
        self.columns = columns or COLUMNS
        self.delimiter = delimiter
        self.quoted_fields = quoted_fields
        self._reader = reader
        self._records: tuple[ClassRecord, ...] | None = None
        self._lock = threading.Lock()

    @classmethod
    def from_text(cls, text: str, **kwargs) -> "RecordStore":
        """Build a store over in-memory text instead of a file or URL."""
        return cls("<memory>", reader=lambda _source: text, **kwargs)

    @classmethod
    def from_settings(cls) -> "RecordStore":
        return cls(
            settings.data_source,
            delimiter=settings.csv_delimiter,
            quoted_fields=settings.quoted_fields,
        )

    @property
    def loaded(self) -> bool:
        return self._records is not None

    def load(self) -> tuple[ClassRecord, ...]:
        records = self._records
        if records is not None:
            return records

        with self._lock:
            if self._records is None:
                start = time.time()
                try:
                    text = self._reader(self.source)
                    self._records = parse_records(
                        text,
                        source=self.source,
                        columns=self.columns,
                        delimiter=self.delimiter,
                        quoted_fields=self.quoted_fields,
                    )
                except StoreLoadError as e:
                    logger.error(f"Record load failed: {e}")
                    raise
                elapsed = time.time() - start
                logger.info(f"Loaded {len(self._records)} records from {self.source} ({elapsed:.2f}s)")
            return self._records

    def reset(self) -> None:
        """Drop the cached records; the next ``load()`` re-reads the source."""
        with self._lock:
            self._records = None


_default_store: RecordStore | None = None
_default_lock = threading.Lock()


def get_store() -> RecordStore:
    """Return the process-wide store configured from settings."""
    global _default_store
    with _default_lock:
        if _default_store is None:
            _default_store = RecordStore.from_settings()
        return _default_store


def load_records() -> tuple[ClassRecord, ...]:
    return get_store().load()


def clear_cache() -> None:
    """Forget the process-wide store (used by tests)."""
    global _default_store
    with _default_lock:
        _default_store = None
