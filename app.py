"""
Flask webhook server for the food ordering bot
"""
import hmac
import logging
from typing import Optional

from flask import Flask, request, jsonify

from config import Settings, load_settings
from core.order_bot import FoodOrderBot
from core.telegram import (
    IncomingMessage, IncomingCallback, TelegramClient, parse_update,
    send_message_reply, edit_message_reply, answer_callback_reply
)

logger = logging.getLogger(__name__)


def create_app(bot: Optional[FoodOrderBot] = None, settings: Optional[Settings] = None,
               telegram_client: Optional[TelegramClient] = None) -> Flask:
    # Raises ConfigurationError when no settings are passed and the token is missing
    if settings is None:
        settings = load_settings()
    if bot is None:
        bot = FoodOrderBot(bot_username=settings.bot_username)
    if telegram_client is None:
        telegram_client = TelegramClient(settings.telegram_bot_token)

    app = Flask(__name__)
    app.config["BOT"] = bot

    @app.route('/webhook/<token>', methods=['POST'])
    def webhook(token):
        """Handle a Telegram update; the reply is sent back in the response body"""
        # compare bytes: compare_digest rejects non-ASCII str
        if not hmac.compare_digest(token.encode("utf-8"), settings.telegram_bot_token.encode("utf-8")):
            logger.warning("Rejected webhook call with invalid token")
            return jsonify({'error': 'forbidden'}), 403

        update = request.get_json(silent=True)
        if not isinstance(update, dict):
            return jsonify({'error': 'invalid update'}), 400

        try:
            incoming = parse_update(update)
        except (KeyError, TypeError):
            logger.warning("Malformed update %s", update.get("update_id"))
            return jsonify({'error': 'invalid update'}), 400

        try:
            if isinstance(incoming, IncomingMessage):
                reply = bot.handle_text(incoming.chat_id, incoming.user, incoming.text)
                if reply is None:
                    return jsonify({})
                return jsonify(send_message_reply(
                    incoming.chat_id, reply.text, incoming.message_id, reply.reply_markup
                ))

            if isinstance(incoming, IncomingCallback):
                reply = bot.handle_callback(incoming.chat_id, incoming.user, incoming.data)
                if reply is None:
                    return jsonify(answer_callback_reply(incoming.callback_id))
                if not reply.success:
                    # failed button presses only show a notification
                    return jsonify(answer_callback_reply(incoming.callback_id, reply.text))
                # the chat lock is released by now; the edit goes through the Bot API
                # and the response body stops the button's loading spinner
                telegram_client.send(edit_message_reply(
                    incoming.chat_id, incoming.message_id, reply.text, reply.reply_markup
                ))
                return jsonify(answer_callback_reply(incoming.callback_id))

            return jsonify({})

        except Exception as e:
            logger.exception("Failed to handle update %s", update.get("update_id"))
            return jsonify({'error': f'An error occurred: {str(e)}'}), 500

    @app.route('/health')
    def health():
        """Health check endpoint"""
        return jsonify({'status': 'ok', 'message': 'Food ordering bot is running!'})

    return app
