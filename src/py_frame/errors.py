class PyFrameError(Exception):
    """Base exception for py-frame library."""
    pass


class PyFrameTypeError(PyFrameError, TypeError):
    """Raised for values of a kind no cell can hold."""
    pass


class PyFrameValueError(PyFrameError, ValueError):
    """Raised for invalid values, e.g. integers outside the 32-bit range."""
    pass


class PyFrameShapeError(PyFrameValueError):
    """Raised when the cell count is not a multiple of the column count."""
    pass


class PyFrameSchemaError(PyFrameValueError):
    """Raised when the column names cannot describe a frame."""
    pass


class PyFrameTypeMismatchError(PyFrameTypeError):
    """Raised when a cell's kind disagrees with its column's inferred kind."""

    def __init__(self, message, expected=None, actual=None, index=None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
        self.index = index
