"""
Telegram payloads - incoming updates and webhook replies
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import requests

from models.order import OrderSnapshot, Participant

logger = logging.getLogger(__name__)

API_URL = "https://api.telegram.org/bot{token}/{method}"
# Request timeout in seconds
REQUEST_TIMEOUT = 10
CALLBACK_DATA_LIMIT = 64
BUTTONS_PER_ROW = 2


@dataclass(frozen=True)
class IncomingMessage:
    """Text message sent in a chat"""
    chat_id: Any
    message_id: int
    user: Participant
    text: str


@dataclass(frozen=True)
class IncomingCallback:
    """Inline keyboard button press"""
    callback_id: str
    chat_id: Any
    message_id: int
    user: Participant
    data: str


def _participant(sender: Dict[str, Any]) -> Participant:
    return Participant(user_id=str(sender["id"]), first_name=sender.get("first_name", ""))


def parse_update(update: Dict[str, Any]):
    # Returns an IncomingMessage, an IncomingCallback, or None for updates the bot ignores.
    # Raises KeyError/TypeError for updates missing required fields.
    message = update.get("message")
    if message is not None:
        text = message.get("text")
        if not text or "from" not in message:
            return None
        return IncomingMessage(
            chat_id=message["chat"]["id"],
            message_id=message["message_id"],
            user=_participant(message["from"]),
            text=text
        )

    query = update.get("callback_query")
    if query is not None and query.get("data") and query.get("message"):
        return IncomingCallback(
            callback_id=str(query["id"]),
            chat_id=query["message"]["chat"]["id"],
            message_id=query["message"]["message_id"],
            user=_participant(query["from"]),
            data=query["data"]
        )
    return None


def encode_callback_data(order_name: str, item: str) -> Optional[str]:
    # None when the data would not fit in Telegram's callback limit
    data = f"{order_name}:{item}"
    if len(data.encode("utf-8")) > CALLBACK_DATA_LIMIT:
        return None
    return data


def decode_callback_data(data: str) -> Optional[Tuple[str, str]]:
    order_name, sep, item = data.partition(":")
    if not sep or not order_name or not item:
        return None
    return order_name, item


def build_inline_keyboard(snapshots: List[OrderSnapshot]) -> Optional[Dict[str, Any]]:
    """Buttons for every item already chosen in the given active orders.

    Pressing a button orders the same item for the pressing user. The order
    name is shown on the button only when more than one order is listed.
    """
    active = [s for s in snapshots if s.is_active]
    buttons = []
    for snapshot in active:
        for item in snapshot.items_by_item():
            data = encode_callback_data(snapshot.name, item)
            if data is None:
                continue
            label = f"{snapshot.name}: {item}" if len(active) > 1 else item
            buttons.append({"text": label, "callback_data": data})

    if not buttons:
        return None
    rows = [buttons[i:i + BUTTONS_PER_ROW] for i in range(0, len(buttons), BUTTONS_PER_ROW)]
    return {"inline_keyboard": rows}


def send_message_reply(chat_id: Any, text: str, reply_to_message_id: Optional[int] = None,
                       reply_markup: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    payload = {
        "method": "sendMessage",
        "chat_id": chat_id,
        "text": text
    }
    if reply_to_message_id is not None:
        payload["reply_to_message_id"] = reply_to_message_id
    if reply_markup:
        payload["reply_markup"] = reply_markup
    return payload


def edit_message_reply(chat_id: Any, message_id: int, text: str,
                       reply_markup: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    payload = {
        "method": "editMessageText",
        "chat_id": chat_id,
        "message_id": message_id,
        "text": text
    }
    if reply_markup:
        payload["reply_markup"] = reply_markup
    return payload


def answer_callback_reply(callback_id: str, text: str = "") -> Dict[str, Any]:
    payload = {
        "method": "answerCallbackQuery",
        "callback_query_id": callback_id
    }
    if text:
        payload["text"] = text
    return payload


class TelegramClient:
    """Sends webhook-style payloads through the Bot API.

    A webhook response can carry a single method; anything else the bot has
    to send for the same update goes through here.
    """

    def __init__(self, token: str, timeout: float = REQUEST_TIMEOUT):
        self.token = token
        self.timeout = timeout

    def send(self, payload: Dict[str, Any]) -> bool:
        # payload is a reply dict as built above; returns whether Telegram accepted it
        params = dict(payload)
        method = params.pop("method")
        try:
            response = requests.post(
                API_URL.format(token=self.token, method=method),
                json=params,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            # the exception text carries the URL, which contains the token
            logger.warning("Telegram %s failed: %s", method, type(e).__name__)
            return False
        if not response.ok:
            logger.warning("Telegram %s failed with status %s", method, response.status_code)
            return False
        return True
