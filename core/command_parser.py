"""
Command parser - turns chat message text into command arguments
"""
import re
from dataclasses import dataclass
from typing import Iterable, Optional

from models.command import CommandType
from models.errors import ErrorKind

COMMAND_ALIASES = {
    "/start": CommandType.START,
    "/start_order": CommandType.START,
    "/order": CommandType.ORDER,
    "/cancel": CommandType.CANCEL,
    "/end": CommandType.END,
    "/end_order": CommandType.END,
    "/view": CommandType.VIEW,
    "/view_orders": CommandType.VIEW,
    "/help": CommandType.HELP,
}

# characters that may not appear in an order name; ':' separates callback data
INVALID_NAME_CHARS = re.compile(r"[\s:]+")


@dataclass(frozen=True)
class ParsedCommand:
    command: CommandType
    order_name: Optional[str] = None
    item: Optional[str] = None


class CommandParseError(Exception):
    """Raised when a message looks like a command but cannot be used"""

    def __init__(self, kind: ErrorKind, command: Optional[CommandType] = None,
                 suggestion: Optional[str] = None):
        super().__init__(kind.value)
        self.kind = kind
        self.command = command
        self.suggestion = suggestion


def is_command(text: str) -> bool:
    return bool(text) and text.lstrip().startswith("/")


def parse_command(text: str, known_orders: Iterable[str] = (),
                  bot_username: str = "") -> Optional[ParsedCommand]:
    # Returns None for plain chat messages. `known_orders` holds every order name
    # of the chat and decides whether the first /order argument is a name or an item.
    if not is_command(text):
        return None

    normalized = text.lower()
    if bot_username:
        normalized = normalized.replace("@" + bot_username.lower(), "")
    tokens = normalized.split()
    # "/order@somebot" addressed to another bot keeps its suffix and is unknown here
    keyword, args = tokens[0], tokens[1:]

    command = COMMAND_ALIASES.get(keyword)
    if command is None:
        raise CommandParseError(ErrorKind.UNKNOWN_COMMAND)

    if command is CommandType.START:
        return _parse_start(keyword, args)
    if command is CommandType.ORDER:
        return _parse_order(args, set(known_orders))
    if command is CommandType.HELP:
        return ParsedCommand(CommandType.HELP)

    # /cancel, /end and /view take at most an order name
    return ParsedCommand(command, order_name=args[0] if args else None)


def _parse_start(keyword: str, args) -> ParsedCommand:
    if not args:
        # a bare /start is what Telegram sends when a chat opens the bot
        if keyword == "/start":
            return ParsedCommand(CommandType.HELP)
        raise CommandParseError(ErrorKind.MISSING_ARGUMENT, CommandType.START)

    name = " ".join(args)
    if len(args) > 1 or INVALID_NAME_CHARS.search(name):
        suggestion = INVALID_NAME_CHARS.sub("-", name).strip("-")
        raise CommandParseError(ErrorKind.MISSING_ARGUMENT, CommandType.START, suggestion=suggestion)
    return ParsedCommand(CommandType.START, order_name=name)


def _parse_order(args, known_orders) -> ParsedCommand:
    if not args:
        return ParsedCommand(CommandType.ORDER)
    if args[0] in known_orders:
        item = " ".join(args[1:]) or None
        return ParsedCommand(CommandType.ORDER, order_name=args[0], item=item)
    return ParsedCommand(CommandType.ORDER, item=" ".join(args))
