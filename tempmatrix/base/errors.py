from typing import Any


class DataLoadError(OSError):
    """Raised when the input data file is missing or cannot be read."""


class ParseError(ValueError):
    """Raised when an input row has a malformed date or temperature field."""

    def __init__(
        self,
        message: str,
        *,
        row: Any = None,
        column: str | None = None,
        value: Any = None,
    ) -> None:
        """Creates a new ParseError instance.

        Args:
            message: the exception message
            row: index label of the offending row, if known
            column: name of the offending column, if known
            value: the raw value that failed to parse
        """
        super().__init__(message)
        self.row = row
        self.column = column
        self.value = value

    def __str__(self) -> str:
        base = super().__str__()
        parts = []
        if self.row is not None:
            parts.append(f"row={self.row}")
        if self.column is not None:
            parts.append(f"column={self.column}")
        if self.row is not None or self.column is not None:
            parts.append(f"value={self.value!r}")
        return f"{base} ({', '.join(parts)})" if parts else base
