"""
Main FoodOrderBot class - routes chat commands to the per-chat order state
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from models.command import CommandType, InboundCommand, CommandResult
from models.order import Participant
from services.chat_registry import ChatRegistry
from services.command_resolver import CommandResolver
from services.order_store import OrderStore
from .command_parser import parse_command, CommandParseError
from .rendering import render_result
from .telegram import build_inline_keyboard, decode_callback_data

logger = logging.getLogger(__name__)

# commands whose replies offer buttons for items already chosen
KEYBOARD_COMMANDS = (CommandType.ORDER, CommandType.CANCEL, CommandType.VIEW)


@dataclass
class BotReply:
    """Rendered reply for the chat"""
    success: bool
    text: str
    reply_markup: Optional[Dict[str, Any]] = None
    result: Optional[CommandResult] = None


class FoodOrderBot:
    # Entry point for chat commands: looks up the chat's store and delegates to the resolver

    def __init__(self, registry: Optional[ChatRegistry] = None,
                 resolver: Optional[CommandResolver] = None,
                 bot_username: str = ""):
        self.registry = registry or ChatRegistry()
        self.resolver = resolver or CommandResolver()
        self.bot_username = bot_username

    def execute(self, command: InboundCommand) -> CommandResult:
        # run an already parsed command
        store = self.registry.get_or_create(command.chat_id)
        with store.lock:
            return self._execute_locked(store, command)

    def handle_text(self, chat_id: Any, user: Participant, text: str) -> Optional[BotReply]:
        # parse and run a chat message; None when the message is not a command
        store = self.registry.get_or_create(str(chat_id))
        with store.lock:
            try:
                parsed = parse_command(text, store.order_names(), self.bot_username)
            except CommandParseError as e:
                result = CommandResult.failure(e.command, e.kind, suggestion=e.suggestion)
            else:
                if parsed is None:
                    return None
                command = InboundCommand(
                    chat_id=store.chat_id,
                    user=user,
                    command=parsed.command,
                    order_name=parsed.order_name,
                    item=parsed.item
                )
                result = self._execute_locked(store, command)
        # rendering works on snapshots only, so it happens after the lock is released
        return self.render(result)

    def handle_callback(self, chat_id: Any, user: Participant, data: str) -> Optional[BotReply]:
        # an inline button press orders the button's item in the button's order
        decoded = decode_callback_data(data)
        if decoded is None:
            logger.warning("Ignoring malformed callback data %r", data)
            return None
        order_name, item = decoded
        store = self.registry.get_or_create(str(chat_id))
        with store.lock:
            result = self._execute_locked(store, InboundCommand(
                chat_id=store.chat_id,
                user=user,
                command=CommandType.ORDER,
                order_name=order_name,
                item=item
            ))
            view = None
            if result.success:
                # the edited message shows every active order, like /view
                view = self._execute_locked(store, InboundCommand(store.chat_id, user, CommandType.VIEW))
        if view is not None:
            reply = self.render(view)
            reply.result = result
            return reply
        return self.render(result)

    def render(self, result: CommandResult) -> BotReply:
        markup = None
        if result.success and result.command in KEYBOARD_COMMANDS:
            markup = build_inline_keyboard(result.active_snapshots)
        return BotReply(success=result.success, text=render_result(result), reply_markup=markup, result=result)

    def has_active_orders(self, chat_id: Any) -> bool:
        store = self.registry.get_or_create(str(chat_id))
        with store.lock:
            return store.has_active_orders()

    def _execute_locked(self, store: OrderStore, command: InboundCommand) -> CommandResult:
        had_active = store.has_active_orders()
        result = self.resolver.execute(store, command)
        has_active = store.has_active_orders()
        if had_active != has_active:
            status = "There are now active orders." if has_active else "No active orders."
            logger.info("Chat %s: %s", store.chat_id, status)
        return result
