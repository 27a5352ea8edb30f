"""
Chat registry - one order store per chat
"""
import logging
import threading
from typing import Dict

from .order_store import OrderStore

logger = logging.getLogger(__name__)


class ChatRegistry:
    # Stores are created on first use and kept for the lifetime of the process.

    def __init__(self):
        self._stores: Dict[str, OrderStore] = {}
        self._lock = threading.Lock()

    def get_or_create(self, chat_id: str) -> OrderStore:
        store = self._stores.get(chat_id)
        if store is not None:
            return store
        with self._lock:
            # re-check under the lock so two first commands share one store
            store = self._stores.get(chat_id)
            if store is None:
                store = OrderStore(chat_id)
                self._stores[chat_id] = store
                logger.debug("Created order store for chat %s (%d chats)", chat_id, len(self))
            return store

    def __len__(self) -> int:
        return len(self._stores)
