"""
Tests for the Flask webhook server
"""
import unittest
from unittest.mock import patch, MagicMock

import requests

from app import create_app
from config import Settings
from core.order_bot import FoodOrderBot

TOKEN = "123456:test-token"


def message_update(text, user_id=1, first_name="Alice", chat_id=-100, message_id=10):
    return {
        "update_id": 1,
        "message": {
            "message_id": message_id,
            "from": {"id": user_id, "first_name": first_name},
            "chat": {"id": chat_id, "type": "group"},
            "text": text
        }
    }


def callback_update(data, user_id=2, first_name="Bob", chat_id=-100, message_id=11):
    return {
        "update_id": 2,
        "callback_query": {
            "id": "cb-1",
            "from": {"id": user_id, "first_name": first_name},
            "message": {"message_id": message_id, "chat": {"id": chat_id}},
            "data": data
        }
    }


class TestWebhook(unittest.TestCase):
    """Test cases for the webhook endpoint"""

    def setUp(self):
        self.bot = FoodOrderBot(bot_username="food_ordering_bot")
        app = create_app(bot=self.bot, settings=Settings(telegram_bot_token=TOKEN))
        app.testing = True
        self.client = app.test_client()

    def post(self, update, token=TOKEN):
        return self.client.post(f"/webhook/{token}", json=update)

    def test_health(self):
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["status"], "ok")

    def test_rejects_wrong_token(self):
        response = self.post(message_update("/start waffles"), token="wrong")
        self.assertEqual(response.status_code, 403)
        self.assertFalse(self.bot.has_active_orders(-100))

    def test_rejects_non_ascii_token(self):
        response = self.client.post("/webhook/%C3%A9", json=message_update("/start waffles"))
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.get_json(), {"error": "forbidden"})

    def test_rejects_invalid_body(self):
        response = self.client.post(f"/webhook/{TOKEN}", data="not json", content_type="application/json")
        self.assertEqual(response.status_code, 400)

    def test_rejects_malformed_message(self):
        update = message_update("/start waffles")
        del update["message"]["chat"]
        self.assertEqual(self.post(update).status_code, 400)

    def test_start_replies_with_send_message(self):
        response = self.post(message_update("/start waffles"))
        self.assertEqual(response.status_code, 200)
        body = response.get_json()
        self.assertEqual(body["method"], "sendMessage")
        self.assertEqual(body["chat_id"], -100)
        self.assertEqual(body["reply_to_message_id"], 10)
        self.assertTrue(body["text"].startswith("Order started for waffles."))
        self.assertNotIn("reply_markup", body)

    def test_order_reply_has_keyboard(self):
        self.post(message_update("/start waffles"))
        body = self.post(message_update("/order syrup")).get_json()
        self.assertEqual(body["reply_markup"]["inline_keyboard"][0][0]["callback_data"], "waffles:syrup")

    def test_plain_text_gets_empty_reply(self):
        response = self.post(message_update("lunch?"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {})

    def test_unsupported_update(self):
        response = self.post({"update_id": 3, "edited_message": {}})
        self.assertEqual(response.get_json(), {})

    @patch("core.telegram.requests.post")
    def test_callback_is_answered_and_message_edited(self, mock_post):
        mock_post.return_value = MagicMock(ok=True, status_code=200)
        self.post(message_update("/start waffles"))
        self.post(message_update("/order syrup"))

        body = self.post(callback_update("waffles:syrup")).get_json()
        self.assertEqual(body, {"method": "answerCallbackQuery", "callback_query_id": "cb-1"})

        mock_post.assert_called_once()
        url = mock_post.call_args.args[0]
        sent = mock_post.call_args.kwargs["json"]
        self.assertEqual(url, f"https://api.telegram.org/bot{TOKEN}/editMessageText")
        self.assertEqual(sent["chat_id"], -100)
        self.assertEqual(sent["message_id"], 11)
        self.assertIn("2 syrup: Alice, Bob", sent["text"])
        self.assertNotIn("method", sent)

    @patch("core.telegram.requests.post")
    def test_callback_is_answered_when_edit_fails(self, mock_post):
        mock_post.side_effect = requests.ConnectionError("unreachable")
        self.post(message_update("/start waffles"))
        self.post(message_update("/order syrup"))

        response = self.post(callback_update("waffles:syrup"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["method"], "answerCallbackQuery")
        self.assertTrue(self.bot.has_active_orders(-100))

    @patch("core.telegram.requests.post")
    def test_failed_callback_answers_query(self, mock_post):
        body = self.post(callback_update("waffles:syrup")).get_json()
        self.assertEqual(body["method"], "answerCallbackQuery")
        self.assertEqual(body["callback_query_id"], "cb-1")
        self.assertEqual(body["text"], "Order waffles not found.")
        mock_post.assert_not_called()


if __name__ == '__main__':
    unittest.main()
