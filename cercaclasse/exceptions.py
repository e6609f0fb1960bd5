"""Exception hierarchy for record loading."""

from typing import Any


class CercaClasseError(Exception):
    """Base class for all cercaclasse errors."""

    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: dict[str, Any] | None = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


class StoreLoadError(CercaClasseError):
    """The record source could not be read."""

    def __init__(self, source: str, reason: str, error_code: str = "SOURCE_UNAVAILABLE", details: dict[str, Any] | None = None):
        message = f"Could not load records from {source}: {reason}"
        super().__init__(message, error_code, details or {"source": source, "reason": reason})


class MissingColumnError(StoreLoadError):
    """A required header is absent from the source."""

    def __init__(self, source: str, column: str, available: list[str]):
        self.column = column
        super().__init__(
            source,
            f"missing column {column!r}",
            "MISSING_COLUMN",
            {"source": source, "column": column, "available": available},
        )
