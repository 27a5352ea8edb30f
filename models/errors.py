"""
Order related errors
"""
from enum import Enum
from typing import List, Optional


class ErrorKind(Enum):
    ALREADY_EXISTS = "already_exists"
    ORDER_NOT_FOUND = "order_not_found"
    NO_ACTIVE_ORDER = "no_active_order"
    AMBIGUOUS_ORDER = "ambiguous_order"
    ORDER_CLOSED = "order_closed"
    ALREADY_CLOSED = "already_closed"
    NOT_FOUND = "not_found"
    MISSING_ARGUMENT = "missing_argument"
    UNKNOWN_COMMAND = "unknown_command"


class OrderError(Exception):
    """Base class for expected, user-facing order errors"""
    kind = None

    def __init__(self, order_name: Optional[str] = None, message: str = ""):
        super().__init__(message or self.kind.value)
        self.order_name = order_name


class AlreadyExists(OrderError):
    kind = ErrorKind.ALREADY_EXISTS


class OrderNotFound(OrderError):
    kind = ErrorKind.ORDER_NOT_FOUND


class NoActiveOrder(OrderError):
    kind = ErrorKind.NO_ACTIVE_ORDER


class AmbiguousOrder(OrderError):
    kind = ErrorKind.AMBIGUOUS_ORDER

    def __init__(self, candidates: List[str]):
        super().__init__(None, f"ambiguous order: {', '.join(candidates)}")
        self.candidates = list(candidates)


class OrderClosed(OrderError):
    kind = ErrorKind.ORDER_CLOSED


class AlreadyClosed(OrderError):
    kind = ErrorKind.ALREADY_CLOSED


class NotFound(OrderError):
    kind = ErrorKind.NOT_FOUND
