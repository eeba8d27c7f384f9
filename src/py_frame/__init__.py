"""
py-frame: A Pythonic, zero-dependency typed table builder

Builds a table of named, independently typed columns from a flat,
row-major sequence of cells. Column kinds are inferred from the
first row and every later cell is checked against them.

Main classes:
    - PyCell: one Integer (32-bit) or Text value
    - PyColumn: named, read-only column of a single kind
    - PyFrame: equal-length columns produced by build()

Type-specific column subclasses (auto-created):
    - _PyIntColumn: Column of 32-bit integers
    - _PyTextColumn: Column of strings

Zero external dependencies - pure Python stdlib only.
"""

from .cell import PyCell, data
from .column import PyColumn, _PyIntColumn, _PyTextColumn
from .frame import PyFrame, build, columns
from .typing import DataType, INTEGER, TEXT
from .errors import PyFrameError, PyFrameTypeError, PyFrameValueError, PyFrameShapeError, PyFrameSchemaError, PyFrameTypeMismatchError

__version__ = "0.1.0"
__all__ = [
	"PyCell",
	"PyColumn",
	"PyFrame",
	"DataType",
	"INTEGER",
	"TEXT",
	"build",
	"data",
	"columns",
	"PyFrameError",
	"PyFrameTypeError",
	"PyFrameValueError",
	"PyFrameShapeError",
	"PyFrameSchemaError",
	"PyFrameTypeMismatchError"
]
