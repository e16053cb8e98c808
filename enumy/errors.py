"""
failures raised by enumy.
each error also derives from the builtin exception a caller would expect,
so `except ValueError` keeps catching an empty first().
"""


class EnumyError(Exception):
    """base class for every enumy failure"""


class EmptySequenceError(EnumyError, ValueError):
    """no element (or no matching element) exists"""

    def __init__(self, message: str = "no matching element found"):
        super().__init__(message)


class MultipleMatchesError(EnumyError, ValueError):
    """more than one element satisfies the condition of single()"""

    def __init__(self, message: str = "sequence contains more than one matching element"):
        super().__init__(message)


class IndexOutOfRangeError(EnumyError, IndexError):
    def __init__(self, index):
        super().__init__(f"index out of range: {index}")
        self.index = index


class UnsupportedOperationError(EnumyError, NotImplementedError):
    """the operation is not supported by this object"""


class ReadOnlyCollectionError(UnsupportedOperationError):
    def __init__(self, operation: str = "mutation"):
        super().__init__(f"collection is read-only, '{operation}' is not allowed")
        self.operation = operation


class InvalidExpressionError(EnumyError, ValueError):
    """a textual lambda expression could not be compiled"""

    def __init__(self, expression: str, reason: str = "no valid lambda expression"):
        super().__init__(f"'{expression}': {reason}")
        self.expression = expression
