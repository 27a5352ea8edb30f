"""
Order store - holds every order of a single chat
"""
import logging
import threading
from typing import Dict, List, Optional

from models.errors import AlreadyExists
from models.order import Order, OrderSummary, Participant

logger = logging.getLogger(__name__)


class OrderStore:
    # All orders of one chat, keyed by name. Ended orders are kept for /view.
    # Callers hold `lock` for the whole resolve-then-mutate sequence of a command.

    def __init__(self, chat_id: str):
        self.chat_id = chat_id
        self.lock = threading.RLock()
        self.orders: Dict[str, Order] = {}

    def start_order(self, name: str, creator: Participant) -> Order:
        # create a new active order; names are never reused within a chat
        if name in self.orders:
            raise AlreadyExists(name)
        order = Order(name=name, creator=creator)
        self.orders[name] = order
        logger.info("Order %s started in chat %s by %s", name, self.chat_id, creator.user_id)
        return order

    def find(self, name: str) -> Optional[Order]:
        return self.orders.get(name)

    def active_orders(self) -> List[Order]:
        return [order for order in self.orders.values() if order.is_active]

    def list_orders(self) -> List[OrderSummary]:
        return [order.summary() for order in self.orders.values()]

    def order_names(self) -> List[str]:
        return list(self.orders)

    def has_active_orders(self) -> bool:
        return any(order.is_active for order in self.orders.values())
