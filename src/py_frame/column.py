from .errors import PyFrameTypeError
from .storage import choose_storage
from .typing import DataType
from .typing import INTEGER
from .typing import TEXT


class PyColumn():
	""" Named, homogeneously typed, read-only sequence of values """
	_dtype = None  # DataType instance (private)
	_storage = None
	_name = None

	def __new__(cls, name, dtype):
		"""
		Decide which typed PyColumn to create based on the dtype.
		"""
		if not isinstance(dtype, DataType):
			dtype = DataType(dtype)

		target_class = cls
		if dtype == INTEGER:
			target_class = _PyIntColumn
		elif dtype == TEXT:
			target_class = _PyTextColumn

		instance = super(PyColumn, target_class).__new__(target_class)
		instance._dtype = dtype
		return instance

	def __init__(self, name, dtype):
		self._name = name
		self._storage = choose_storage(self._dtype)

	@classmethod
	def empty(cls, name, dtype):
		""" create a new column with no values; its kind never changes afterwards """
		return cls(name, dtype)

	def _push(self, value):
		# Only the frame builder fills columns, after checking the cell kind
		if type(value) is not self._dtype.kind:
			raise PyFrameTypeError(
				f"Cannot store {type(value).__name__} in {self._dtype.label} column '{self._name}'"
			)
		self._storage.append(value)

	def name(self):
		return self._name

	def kind(self):
		return self._dtype

	def length(self):
		return len(self._storage)

	def __len__(self):
		return len(self._storage)

	def __iter__(self):
		return iter(self._storage)

	def __getitem__(self, index):
		if not isinstance(index, int) or isinstance(index, bool):
			raise PyFrameTypeError(f"Column indices must be int, not {type(index).__name__}")
		return self._storage[index]

	def to_tuple(self):
		return self._storage.to_tuple()

	def __eq__(self, other):
		if not isinstance(other, PyColumn):
			return NotImplemented
		return (self._name == other._name
			and self._dtype == other._dtype
			and self.to_tuple() == other.to_tuple())

	__hash__ = None

	def __repr__(self):
		return f"{self.__class__.__name__.lstrip('_')}({self._name!r}, {self._dtype!r}, {list(self._storage)!r})"


class _PyIntColumn(PyColumn):
	""" Column of 32-bit integers """


class _PyTextColumn(PyColumn):
	""" Column of strings """
