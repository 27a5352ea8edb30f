"""
Models package for the food ordering bot
Contains data models, error types and type definitions
"""

from .errors import (
    ErrorKind, OrderError, AlreadyExists, OrderNotFound, NoActiveOrder,
    AmbiguousOrder, OrderClosed, AlreadyClosed, NotFound
)
from .order import Order, OrderItem, OrderStatus, OrderSnapshot, OrderSummary, Participant
from .command import CommandType, InboundCommand, CommandResult

__all__ = [
    'ErrorKind', 'OrderError', 'AlreadyExists', 'OrderNotFound', 'NoActiveOrder',
    'AmbiguousOrder', 'OrderClosed', 'AlreadyClosed', 'NotFound',
    'Order', 'OrderItem', 'OrderStatus', 'OrderSnapshot', 'OrderSummary', 'Participant',
    'CommandType', 'InboundCommand', 'CommandResult'
]
