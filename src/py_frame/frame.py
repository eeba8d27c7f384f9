import warnings
from .cell import PyCell
from .column import PyColumn
from .errors import PyFrameShapeError, PyFrameSchemaError, PyFrameTypeMismatchError
from .typing import DEFAULT_KIND


SHAPE_MISMATCH_MSG = "length of data provided did not match expected number of columns"
TYPE_MISMATCH_MSG = "data cell type did not match {label} column type"


def _check_column_names(column_names):
	"""Validate the declared column names and return them as a tuple.

	Rules:
	- at least one name is required (a zero-column frame has no row shape)
	- every name is a non-empty str
	- duplicates are allowed, but warned about
	"""
	if isinstance(column_names, (str, bytes)):
		raise PyFrameSchemaError(
			f"column_names must be a sequence of names, not a bare {type(column_names).__name__}"
		)
	names = tuple(column_names)
	if not names:
		raise PyFrameSchemaError("at least one column name is required")

	seen = set()
	for idx, name in enumerate(names):
		if not isinstance(name, str):
			raise PyFrameSchemaError(
				f"Column name at position {idx} must be str, not {type(name).__name__}"
			)
		if not name:
			raise PyFrameSchemaError(f"Column name at position {idx} is empty")
		if name in seen:
			warnings.warn(f"Duplicate column name '{name}' at position {idx}", stacklevel=3)
		seen.add(name)
	return names


def _infer_column_types(cells, num_cols):
	"""Infer each column's kind from the first row only.

	Positions with no first-row cell (only possible for empty input)
	default to DEFAULT_KIND.
	"""
	return [cells[i].kind() if i < len(cells) else DEFAULT_KIND for i in range(num_cols)]


def build(column_names, cells):
	"""
	Build a PyFrame from column names and a flat, row-major sequence of cells.

	Cell j belongs to column j % len(column_names) and row j // len(column_names).
	Column kinds come from the first row; every later cell must match exactly.

	Raises
	------
	PyFrameSchemaError
		No column names, or a name that is not a non-empty str
	PyFrameShapeError
		len(cells) is not a multiple of the number of columns
	PyFrameTypeMismatchError
		A cell's kind differs from its column's kind (first offender wins)
	"""
	names = _check_column_names(column_names)
	num_cols = len(names)

	# Materialize once: generators would otherwise be consumed by inference
	cells = list(cells)

	# Shape is checked before any cell is converted or type checked
	if len(cells) % num_cols != 0:
		raise PyFrameShapeError(SHAPE_MISMATCH_MSG)

	cells = [PyCell.of(c) for c in cells]
	column_types = _infer_column_types(cells, num_cols)

	cols = [PyColumn.empty(name, dtype) for name, dtype in zip(names, column_types)]

	for j, cell in enumerate(cells):
		col = cols[j % num_cols]
		expected = col.kind()
		if cell.kind() != expected:
			raise PyFrameTypeMismatchError(
				TYPE_MISMATCH_MSG.format(label=expected.label),
				expected=expected,
				actual=cell.kind(),
				index=j,
			)
		col._push(cell.value)

	return PyFrame._from_columns(cols)


def columns(*names):
	"""Collect literal column names into a list.

	>>> columns("a", "b")
	['a', 'b']
	"""
	return list(names)


class PyFrame():
	""" Multiple named columns of the same length, fixed at construction """
	__slots__ = ('_columns', '_length')

	def __init__(self, column_names, cells):
		built = build(column_names, cells)
		self._columns = built._columns
		self._length = built._length

	@classmethod
	def _from_columns(cls, cols):
		frame = object.__new__(cls)
		frame._columns = tuple(cols)
		frame._length = len(cols[0]) if cols else 0
		return frame

	build = staticmethod(build)

	def cols(self):
		return self._columns

	def column_names(self):
		return [col.name() for col in self._columns]

	def kinds(self):
		return [col.kind() for col in self._columns]

	def __len__(self):
		return self._length

	def size(self):
		return (self._length, len(self._columns))

	def __eq__(self, other):
		if not isinstance(other, PyFrame):
			return NotImplemented
		return self._columns == other._columns

	__hash__ = None

	def __repr__(self):
		header = ', '.join(f"{col.name()}{col.kind()!r}" for col in self._columns)
		return f"PyFrame({self._length} rows: {header})"
