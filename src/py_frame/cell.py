"""Typed cell values: the flat input of a PyFrame build."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, List, Union

from .errors import PyFrameTypeError, PyFrameValueError
from .typing import DataType, INTEGER, TEXT, INT_MIN, INT_MAX, infer_kind


@dataclass(frozen=True)
class PyCell:
	"""
	One datum of exactly one supported kind (Integer or Text).

	Prefer the constructors over calling PyCell directly:

	>>> PyCell.integer(3)
	Integer(3)
	>>> PyCell.text("x")
	Text('x')
	>>> PyCell.of(7).kind()
	<int>
	"""
	dtype: DataType
	value: Union[int, str]

	def __post_init__(self):
		# Accept plain Python types (int, str) in place of a DataType
		if not isinstance(self.dtype, DataType):
			object.__setattr__(self, "dtype", DataType(self.dtype))
		if self.dtype == INTEGER:
			_check_integer(self.value)
			# Payload is always an exact int or str (IntEnum members, str subclasses)
			object.__setattr__(self, "value", int.__int__(self.value))
		elif isinstance(self.value, str):
			object.__setattr__(self, "value", str.__str__(self.value))
		else:
			raise PyFrameTypeError(
				f"Text cell requires str, got {type(self.value).__name__}"
			)

	@classmethod
	def integer(cls, value: int) -> "PyCell":
		return cls(INTEGER, value)

	@classmethod
	def text(cls, value: str) -> "PyCell":
		return cls(TEXT, value)

	@classmethod
	def of(cls, value: Any) -> "PyCell":
		"""Build the cell variant matching a Python scalar's type."""
		if isinstance(value, PyCell):
			return value
		return cls(infer_kind(value), value)

	def kind(self) -> DataType:
		return self.dtype

	def __repr__(self):
		tag = "Integer" if self.dtype == INTEGER else "Text"
		return f"{tag}({self.value!r})"


def _check_integer(value):
	if isinstance(value, bool) or not isinstance(value, int):
		raise PyFrameTypeError(
			f"Integer cell requires int, got {type(value).__name__}"
		)
	if not INT_MIN <= value <= INT_MAX:
		raise PyFrameValueError(
			f"Integer cell value {value} outside 32-bit range [{INT_MIN}, {INT_MAX}]"
		)


def data(*values) -> List[PyCell]:
	"""Convert literal arguments into a flat list of cells.

	>>> data(1, "x", 2, "y")
	[Integer(1), Text('x'), Integer(2), Text('y')]
	"""
	return [PyCell.of(v) for v in values]
