"""PyColumn dispatch and read-only access"""
import pytest
from py_frame import PyColumn, INTEGER, TEXT, build, data
from py_frame import _PyIntColumn, _PyTextColumn
from py_frame.errors import PyFrameTypeError


class TestDispatch:
	"""Typed subclasses are picked from the dtype"""

	@pytest.mark.parametrize("dtype,expected_class", [
		(INTEGER, _PyIntColumn),
		(TEXT, _PyTextColumn),
		(int, _PyIntColumn),
		(str, _PyTextColumn),
	])
	def test_empty_column_class(self, dtype, expected_class):
		col = PyColumn.empty('c', dtype)
		assert isinstance(col, expected_class)
		assert isinstance(col, PyColumn)
		assert col.name() == 'c'
		assert col.length() == 0
		assert len(col) == 0

	def test_unsupported_dtype(self):
		with pytest.raises(PyFrameTypeError):
			PyColumn.empty('c', float)


class TestAccess:
	"""Columns handed out by a frame"""

	def test_values_and_indexing(self):
		col = build(['n'], data(4, 5, 6)).cols()[0]
		assert list(col) == [4, 5, 6]
		assert col[0] == 4
		assert col[-1] == 6
		assert col.to_tuple() == (4, 5, 6)
		assert col.kind() == INTEGER

	def test_index_must_be_int(self):
		col = build(['n'], data(4)).cols()[0]
		with pytest.raises(PyFrameTypeError):
			col['n']

	def test_no_public_mutation(self):
		col = build(['n'], data(4)).cols()[0]
		assert not hasattr(col, 'append')
		with pytest.raises(TypeError):
			col[0] = 5

	def test_push_rejects_wrong_kind(self):
		col = PyColumn.empty('t', TEXT)
		with pytest.raises(PyFrameTypeError):
			col._push(1)

	def test_equality(self):
		a = build(['x'], data('p', 'q')).cols()[0]
		b = build(['x'], data('p', 'q')).cols()[0]
		c = build(['y'], data('p', 'q')).cols()[0]
		assert a == b
		assert a != c

	def test_repr(self):
		col = build(['x'], data('p')).cols()[0]
		assert repr(col) == "PyTextColumn('x', <str>, ['p'])"
