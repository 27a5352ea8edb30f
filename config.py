"""
Configuration for the food ordering bot

Values come from the environment; a .env file in the working directory is
loaded first.

Environment variables:
- TELEGRAM_BOT_TOKEN: bot credential, also the secret part of the webhook path (required)
- BOT_USERNAME: the bot's @username, stripped from commands (default: food_ordering_bot)
- PORT: HTTP port for the webhook server (default: 5000)
- DEBUG: Flask debug mode (default: false)
- LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL (default: INFO)
"""
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


class ConfigurationError(RuntimeError):
    """Required configuration is missing"""


@dataclass(frozen=True)
class Settings:
    telegram_bot_token: str
    bot_username: str = "food_ordering_bot"
    port: int = 5000
    debug: bool = False
    log_level: str = "INFO"


def load_settings() -> Settings:
    token = os.getenv("TELEGRAM_BOT_TOKEN", "").strip()
    if not token:
        raise ConfigurationError("TELEGRAM_BOT_TOKEN not set")

    return Settings(
        telegram_bot_token=token,
        bot_username=os.getenv("BOT_USERNAME", "food_ordering_bot").lstrip("@"),
        port=int(os.getenv("PORT", 5000)),
        debug=os.getenv("DEBUG", "False").lower() == "true",
        log_level=os.getenv("LOG_LEVEL", "INFO").upper()
    )
