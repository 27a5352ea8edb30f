"""
UI package for the food ordering bot
Contains user interface implementations
"""

from .console_ui import ConsoleChatUI

__all__ = [
    'ConsoleChatUI'
]
