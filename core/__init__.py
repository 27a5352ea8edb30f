"""
Core package for the food ordering bot
Contains command parsing, reply rendering and orchestration
"""

from .order_bot import FoodOrderBot, BotReply

__all__ = [
    'FoodOrderBot', 'BotReply'
]
