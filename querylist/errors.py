class QueryListError(Exception):
    """base class for every error raised by querylist itself."""
    pass


class ConstructionError(QueryListError, ValueError):
    """raised when a query list is built from a null source."""
    pass


class NotFoundError(QueryListError, LookupError):
    """raised by strict accessors when the requested element does not exist."""
    pass


class TypeMismatchError(QueryListError, TypeError):
    """raised when an aggregation meets a non-numeric value."""
    pass


class DivisionByZeroError(QueryListError, ZeroDivisionError):
    """raised when averaging an empty (or empty after filtering) sequence."""
    pass


class EmptySequenceError(QueryListError, ValueError):
    """raised when an extremum value is requested from an empty sequence."""
    pass
