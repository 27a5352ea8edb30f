"""
Command resolver - picks the order a command applies to and runs it
"""
import logging
from typing import Optional

from models.command import CommandType, InboundCommand, CommandResult
from models.errors import (
    ErrorKind, OrderError, OrderNotFound, NoActiveOrder, AmbiguousOrder
)
from models.order import Order
from .order_store import OrderStore

logger = logging.getLogger(__name__)


class CommandResolver:
    # Runs commands against a chat's OrderStore and turns every domain error into a result value

    def resolve(self, store: OrderStore, order_name: Optional[str]) -> Order:
        # explicit name: exact lookup, ended orders included
        if order_name:
            order = store.find(order_name)
            if order is None:
                raise OrderNotFound(order_name)
            return order

        # no name: only a single active order may be targeted implicitly
        active = store.active_orders()
        if not active:
            raise NoActiveOrder()
        if len(active) > 1:
            raise AmbiguousOrder([order.name for order in active])
        return active[0]

    def execute(self, store: OrderStore, command: InboundCommand) -> CommandResult:
        handlers = {
            CommandType.START: self._start,
            CommandType.ORDER: self._order,
            CommandType.CANCEL: self._cancel,
            CommandType.END: self._end,
            CommandType.VIEW: self._view,
            CommandType.HELP: self._help,
        }
        handler = handlers[command.command]

        with store.lock:
            try:
                result = handler(store, command)
            except AmbiguousOrder as e:
                logger.debug("Ambiguous %s in chat %s: %s", command.command.value, store.chat_id, e.candidates)
                return CommandResult.failure(command.command, e.kind, candidates=e.candidates)
            except OrderError as e:
                logger.debug("%s failed in chat %s: %s", command.command.value, store.chat_id, e.kind.value)
                return CommandResult.failure(command.command, e.kind, order_name=e.order_name, detail=str(e))
        logger.debug("%s in chat %s: %s", command.command.value, store.chat_id, result.to_dict())
        return result

    def _start(self, store: OrderStore, command: InboundCommand) -> CommandResult:
        if not command.order_name:
            return CommandResult.failure(command.command, ErrorKind.MISSING_ARGUMENT, detail="order name")
        order = store.start_order(command.order_name, command.user)
        return CommandResult.ok(command.command, order_name=order.name, snapshot=order.snapshot())

    def _order(self, store: OrderStore, command: InboundCommand) -> CommandResult:
        if not command.item:
            return CommandResult.failure(
                command.command, ErrorKind.MISSING_ARGUMENT, order_name=command.order_name, detail="item"
            )
        order = self.resolve(store, command.order_name)
        replaced = order.set_item(command.user, command.item)
        return CommandResult.ok(
            command.command,
            order_name=order.name,
            snapshot=order.snapshot(),
            active_snapshots=self._active_snapshots(store),
            replaced=replaced
        )

    def _cancel(self, store: OrderStore, command: InboundCommand) -> CommandResult:
        order = self.resolve(store, command.order_name)
        removed_item = order.remove_item(command.user)
        return CommandResult.ok(
            command.command,
            order_name=order.name,
            snapshot=order.snapshot(),
            active_snapshots=self._active_snapshots(store),
            removed_item=removed_item
        )

    def _end(self, store: OrderStore, command: InboundCommand) -> CommandResult:
        order = self.resolve(store, command.order_name)
        order.close()
        logger.info("Order %s ended in chat %s by %s", order.name, store.chat_id, command.user.user_id)
        return CommandResult.ok(command.command, order_name=order.name, snapshot=order.snapshot())

    def _view(self, store: OrderStore, command: InboundCommand) -> CommandResult:
        if command.order_name:
            order = store.find(command.order_name)
            if order is None:
                raise OrderNotFound(command.order_name)
            return CommandResult.ok(
                command.command,
                order_name=order.name,
                snapshot=order.snapshot(),
                summaries=[order.summary()],
                active_snapshots=self._active_snapshots(store)
            )
        return CommandResult.ok(
            command.command,
            summaries=store.list_orders(),
            active_snapshots=self._active_snapshots(store)
        )

    def _help(self, store: OrderStore, command: InboundCommand) -> CommandResult:
        return CommandResult.ok(command.command)

    def _active_snapshots(self, store: OrderStore):
        return [order.snapshot() for order in store.active_orders()]
