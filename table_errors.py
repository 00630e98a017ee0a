class TableError(Exception):
    """Base class for every failure raised by the table core."""


class ParseError(TableError):
    pass


class ShapeMismatch(TableError):
    def __init__(self, message: str, expected: int | None = None, actual: int | None = None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class IndexOutOfRange(TableError, IndexError):
    def __init__(self, what: str, index: int, bound: int):
        if bound > 0:
            msg = f"{what} index {index} out of range (0-{bound - 1})"
        else:
            msg = f"{what} index {index} out of range (no {what}s)"
        super().__init__(msg)
        self.what = what
        self.index = index
        self.bound = bound
