"""
Reply rendering - turns command results into chat messages
"""
from typing import List

from models.command import CommandType, CommandResult
from models.errors import ErrorKind
from models.order import OrderSnapshot, OrderStatus, Participant

HELP_TEXT = """/start <order name> - starts an order. For example, /start waffles.
/view [order name] - shows orders.

The following commands will ask for the order name, if there are multiple active orders.

/order [order name] <item> - adds an item to an order, or replaces the previously chosen one.
/cancel [order name] - removes your previously selected item from an order.
/end [order name] - stops an order."""

START_HINT = "Use /order <item> to order, /view to view orders and /end when done."
NO_ACTIVE_ORDERS = "There are no active orders. Start one by using /start <order name>"


def display_name(participant: Participant) -> str:
    return participant.first_name or participant.user_id


def render_snapshot(snapshot: OrderSnapshot) -> str:
    # one line per item, "<count> <item>: <names>", items and names sorted
    title = f"Orders for {snapshot.name}"
    if snapshot.status is OrderStatus.ENDED:
        title += " (ended)"

    grouped = snapshot.items_by_item()
    if not grouped:
        return f"{title}:\n\nNone"

    lines = []
    for item, participants in grouped.items():
        names = sorted(display_name(p) for p in participants)
        lines.append(f"{len(participants)} {item}: {', '.join(names)}")
    lines.sort()
    return f"{title}:\n\n" + "\n".join(lines)


def render_snapshots(snapshots: List[OrderSnapshot]) -> str:
    header = f"There are {len(snapshots)} orders.\n" if len(snapshots) > 1 else ""
    return header + "\n\n".join(render_snapshot(s) for s in snapshots)


def render_result(result: CommandResult) -> str:
    if not result.success:
        return render_error(result)

    command = result.command
    if command is CommandType.HELP:
        return HELP_TEXT

    if command is CommandType.START:
        return f"Order started for {result.order_name}.\n{START_HINT}"

    if command is CommandType.ORDER:
        hint = "Use /order <item> to update your order and /end when done."
        if len(result.active_snapshots) > 1:
            hint = f"Use /order {result.order_name} <item> to update your order and /end {result.order_name} when done."
        return f"{render_snapshot(result.snapshot)}\n\n{hint}"

    if command is CommandType.CANCEL:
        return (f"Cancelled your order of {result.removed_item} for {result.order_name}.\n\n"
                f"{render_snapshot(result.snapshot)}")

    if command is CommandType.END:
        return f"Order for {result.order_name} has ended.\n\n{render_snapshot(result.snapshot)}"

    return render_view(result)


def render_view(result: CommandResult) -> str:
    if result.snapshot is not None:
        return render_snapshot(result.snapshot)

    if not result.summaries:
        return NO_ACTIVE_ORDERS

    parts = []
    if result.active_snapshots:
        parts.append(render_snapshots(result.active_snapshots))
    else:
        parts.append("There are no active orders.")

    ended = [s for s in result.summaries if s.status is OrderStatus.ENDED]
    if ended:
        listed = ", ".join(f"{s.name} ({s.participant_count})" for s in ended)
        parts.append(f"Ended orders: {listed}\nUse /view <order name> to see one.")
    return "\n\n".join(parts)


def render_error(result: CommandResult) -> str:
    error = result.error
    name = result.order_name
    command = result.command.value if result.command else "order"

    if error is ErrorKind.ALREADY_EXISTS:
        return f"There is already an order for {name}. Use /order {name} <item> to add an item to it."
    if error is ErrorKind.ORDER_NOT_FOUND:
        return f"Order {name} not found."
    if error is ErrorKind.NO_ACTIVE_ORDER:
        return NO_ACTIVE_ORDERS
    if error is ErrorKind.AMBIGUOUS_ORDER:
        example = f"/{command} {result.candidates[0]}"
        if result.command is CommandType.ORDER:
            example += " <item>"
        return (f"There are multiple active orders: {', '.join(result.candidates)}. "
                f"Specify the name of the order. For example, {example}")
    if error in (ErrorKind.ORDER_CLOSED, ErrorKind.ALREADY_CLOSED):
        return f"The order for {name} has already ended."
    if error is ErrorKind.NOT_FOUND:
        return f"You have not ordered anything for {name}. Use /order <item> to do so."
    if error is ErrorKind.MISSING_ARGUMENT:
        if result.command is CommandType.START:
            if result.suggestion:
                return f"Order names must not contain spaces. Try /start {result.suggestion}"
            return "Specify the name of the order. For example, /start waffles"
        return "Specify the name of the item you wish to order. For example, /order chocolate"
    return "Use /help for a list of recognized commands."
