"""
Storage buffers for PyColumn data.

Pure Python implementation using array.array for integer columns
and a plain list (frozen to a tuple) for text columns.
"""

from __future__ import annotations
from array import array
from typing import Any, Protocol, Iterator

from .errors import PyFrameTypeError
from .typing import DataType, INTEGER, TEXT


class Storage(Protocol):
    """Protocol for column storage buffers."""

    def __len__(self) -> int:
        ...

    def __getitem__(self, i: int) -> Any:
        ...

    def __iter__(self) -> Iterator[Any]:
        ...

    def append(self, value: Any) -> None:
        """Append one value at the end of the buffer."""
        ...

    def to_tuple(self) -> tuple:
        """Export to Python tuple."""
        ...


class IntStorage:
    """
    Contiguous 32-bit integer storage using array.array.

    The 'i' typecode is a C signed int, so values outside the
    32-bit range raise OverflowError on append.
    """

    __slots__ = ('_data',)

    TYPECODE = 'i'

    def __init__(self):
        self._data = array(self.TYPECODE)

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, i: int) -> int:
        return self._data[i]

    def __iter__(self) -> Iterator[int]:
        yield from self._data

    def append(self, value: int) -> None:
        self._data.append(value)

    def to_tuple(self) -> tuple:
        return tuple(self._data)


class TextStorage:
    """
    Python object storage for str values.
    """

    __slots__ = ('_data',)

    def __init__(self):
        self._data = []

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, i: int) -> str:
        return self._data[i]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def append(self, value: str) -> None:
        self._data.append(value)

    def to_tuple(self) -> tuple:
        return tuple(self._data)


def choose_storage(dtype: DataType) -> Storage:
    """
    Return an empty storage buffer suited to dtype.

    Parameters
    ----------
    dtype : DataType
        Column kind (INTEGER or TEXT)

    Returns
    -------
    Storage
        Fresh, empty buffer
    """
    if dtype == INTEGER:
        return IntStorage()
    if dtype == TEXT:
        return TextStorage()
    raise PyFrameTypeError(f"No storage available for {dtype!r}")
