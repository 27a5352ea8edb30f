"""
Tests for command parsing
"""
import unittest

from core.command_parser import parse_command, ParsedCommand, CommandParseError
from models.command import CommandType
from models.errors import ErrorKind

NO_ORDERS = []
WAFFLES = ["waffles"]
WAFFLES_AND_PIZZA = ["waffles", "pizza"]


class TestParseCommand(unittest.TestCase):
    """Test cases for parse_command"""

    def assertParseError(self, text, kind, known=NO_ORDERS):
        with self.assertRaises(CommandParseError) as ctx:
            parse_command(text, known, "food_ordering_bot")
        self.assertEqual(ctx.exception.kind, kind)
        return ctx.exception

    def test_plain_text_is_not_a_command(self):
        self.assertIsNone(parse_command("hi", WAFFLES))
        self.assertIsNone(parse_command("", WAFFLES))

    def test_unknown_command(self):
        self.assertParseError("/invalid_command", ErrorKind.UNKNOWN_COMMAND)

    def test_help(self):
        self.assertEqual(parse_command("/help"), ParsedCommand(CommandType.HELP))
        self.assertEqual(parse_command("/start"), ParsedCommand(CommandType.HELP))

    def test_start(self):
        expected = ParsedCommand(CommandType.START, order_name="waffles")
        self.assertEqual(parse_command("/start waffles"), expected)
        self.assertEqual(parse_command("/start_order waffles"), expected)
        self.assertEqual(parse_command("/Start WAFFLES "), expected, "whitespace and capitalization are ignored")
        self.assertEqual(parse_command("/start waffles @food_ordering_bot", bot_username="food_ordering_bot"),
                         expected, "@mentions are ignored")
        self.assertEqual(parse_command("/start@food_ordering_bot waffles", bot_username="food_ordering_bot"),
                         expected)
        self.assertEqual(parse_command("/start ice-cream"),
                         ParsedCommand(CommandType.START, order_name="ice-cream"))

    def test_start_errors(self):
        error = self.assertParseError("/start_order", ErrorKind.MISSING_ARGUMENT)
        self.assertIsNone(error.suggestion)

        error = self.assertParseError("/start ice cream", ErrorKind.MISSING_ARGUMENT)
        self.assertEqual(error.command, CommandType.START)
        self.assertEqual(error.suggestion, "ice-cream")

        error = self.assertParseError("/start ice:cream", ErrorKind.MISSING_ARGUMENT)
        self.assertEqual(error.suggestion, "ice-cream")

    def test_order_without_name(self):
        self.assertEqual(parse_command("/order chocolate", WAFFLES),
                         ParsedCommand(CommandType.ORDER, item="chocolate"))
        self.assertEqual(parse_command("/order Large Chocolate ", WAFFLES),
                         ParsedCommand(CommandType.ORDER, item="large chocolate"),
                         "capitalization is ignored, and multi-word items are allowed")
        self.assertEqual(parse_command("/order chocolate", NO_ORDERS),
                         ParsedCommand(CommandType.ORDER, item="chocolate"))

    def test_order_with_name(self):
        self.assertEqual(parse_command("/order waffles chocolate", WAFFLES),
                         ParsedCommand(CommandType.ORDER, order_name="waffles", item="chocolate"))
        self.assertEqual(parse_command("/order  pizza Barbecue  chicken ", WAFFLES_AND_PIZZA),
                         ParsedCommand(CommandType.ORDER, order_name="pizza", item="barbecue chicken"))

    def test_order_unknown_first_word_is_part_of_item(self):
        self.assertEqual(parse_command("/order ice-cream chocolate cone", WAFFLES_AND_PIZZA),
                         ParsedCommand(CommandType.ORDER, item="ice-cream chocolate cone"))

    def test_order_missing_item(self):
        self.assertEqual(parse_command("/order", WAFFLES), ParsedCommand(CommandType.ORDER))
        self.assertEqual(parse_command("/order waffles", WAFFLES_AND_PIZZA),
                         ParsedCommand(CommandType.ORDER, order_name="waffles"))

    def test_cancel_end_view(self):
        self.assertEqual(parse_command("/cancel", WAFFLES), ParsedCommand(CommandType.CANCEL))
        self.assertEqual(parse_command("/cancel PIZZA ", WAFFLES_AND_PIZZA),
                         ParsedCommand(CommandType.CANCEL, order_name="pizza"))
        self.assertEqual(parse_command("/end_order Waffles", WAFFLES),
                         ParsedCommand(CommandType.END, order_name="waffles"))
        self.assertEqual(parse_command("/end", WAFFLES), ParsedCommand(CommandType.END))
        self.assertEqual(parse_command("/view_orders"), ParsedCommand(CommandType.VIEW))
        self.assertEqual(parse_command("/view pizza"), ParsedCommand(CommandType.VIEW, order_name="pizza"))


if __name__ == '__main__':
    unittest.main()
