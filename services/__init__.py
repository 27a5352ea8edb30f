"""
Services package for the food ordering bot
Contains the per-chat order state and command resolution
"""

from .order_store import OrderStore
from .chat_registry import ChatRegistry
from .command_resolver import CommandResolver

__all__ = [
    'OrderStore', 'ChatRegistry', 'CommandResolver'
]
