"""
Console UI - simulates a group chat in the terminal
"""
from typing import Dict

from core.order_bot import FoodOrderBot
from models.order import Participant


class ConsoleChatUI:
    """Text-based chat simulator where several users share one chat"""

    def __init__(self, order_bot: FoodOrderBot, chat_id: str = "console_chat"):
        self.bot = order_bot
        self.chat_id = chat_id
        self.users: Dict[str, Participant] = {}

    def get_user(self, name: str) -> Participant:
        # users get stable ids in order of first appearance
        if name not in self.users:
            self.users[name] = Participant(user_id=f"console-{len(self.users) + 1}", first_name=name)
        return self.users[name]

    def handle_line(self, line: str) -> str:
        """Run one '<user>: <message>' line and return the bot's reply"""
        name, sep, text = line.partition(":")
        if not sep or not name.strip():
            return "Write messages as '<user>: <message>', for example 'alice: /start waffles'."

        reply = self.bot.handle_text(self.chat_id, self.get_user(name.strip()), text.strip())
        if reply is None:
            return ""
        text = reply.text
        if reply.reply_markup:
            buttons = [b["text"] for row in reply.reply_markup["inline_keyboard"] for b in row]
            text += "\n[" + "] [".join(buttons) + "]"
        return text

    def run(self):
        """Run the chat loop until 'quit'"""
        print("Food ordering bot - console chat")
        print("Type messages as '<user>: <message>', e.g. 'alice: /start waffles'")
        print("Type 'quit' to exit.\n")

        while True:
            try:
                line = input("> ").strip()
            except EOFError:
                break

            if line in ["quit", "exit"]:
                break
            if not line:
                continue

            reply = self.handle_line(line)
            if reply:
                print(f"bot: {reply}\n")
