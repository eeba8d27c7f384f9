"""
DataType tags for PyCell / PyColumn.

Pure metadata design:
  - DataType records a column's kind before any data exists
  - Only two kinds are supported: 32-bit integers and text
  - Values carry their own Python type at runtime
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Type

from .errors import PyFrameTypeError


@dataclass(frozen=True)
class DataType:
    """
    Describes the kind of a PyCell or PyColumn.

    Attributes
    ----------
    kind : Type
        Python type, either int or str

    Examples
    --------
    >>> DataType(int)
    <int>
    >>> INTEGER == DataType(int)
    True
    """

    kind: Type[Any]

    def __post_init__(self):
        if self.kind not in _SUPPORTED_KINDS:
            raise PyFrameTypeError(
                f"Unsupported column kind {getattr(self.kind, '__name__', self.kind)!s}"
            )

    def __repr__(self):
        return f"<{self.kind.__name__}>"

    @property
    def label(self) -> str:
        """Human-readable name used in error messages."""
        return _LABELS[self.kind]


_SUPPORTED_KINDS = (int, str)
_LABELS = {int: "integer", str: "text"}

INTEGER = DataType(int)
TEXT = DataType(str)

# Signed 32-bit range of an Integer cell
INT_MIN = -(1 << 31)
INT_MAX = (1 << 31) - 1

# Kind given to a column when no first-row cell exists to infer from
DEFAULT_KIND = INTEGER


def infer_kind(value: Any) -> DataType:
    """
    Infer the DataType for a single Python scalar.

    Raises PyFrameTypeError for anything that is not int or str.
    """
    # Check bool BEFORE int (bool is subclass of int)
    if isinstance(value, bool):
        raise PyFrameTypeError("bool is not a supported cell kind; use int explicitly")
    if isinstance(value, int):
        return INTEGER
    if isinstance(value, str):
        return TEXT
    raise PyFrameTypeError(
        f"Cannot build a cell from value of type {type(value).__name__}"
    )
