"""Telegram transport - sends and receives messages via Telegram Bot API.

This is the default transport. Requires TELEGRAM_BOT_TOKEN in .env.
Commands and plain text both go to the registered message handler; the
habit commands themselves are parsed in habitcal.commands.
"""

import logging
from telegram import Update
from telegram.ext import Application, ContextTypes, MessageHandler, filters

from habitcal.transport import Transport, IncomingMessage
from habitcal.config import TELEGRAM_BOT_TOKEN, set_owner_user_id

log = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 4096

# Message handler callback - set by main.py during initialization
_on_message_callback = None


def set_message_handler(callback) -> None:
    """Register the function to handle incoming messages.

    Signature: async def callback(msg: IncomingMessage) -> str
    Returns the bot's response text.
    """
    global _on_message_callback
    _on_message_callback = callback


def _chunks(text: str) -> list[str]:
    return [text[i:i + MAX_MESSAGE_LENGTH] for i in range(0, len(text), MAX_MESSAGE_LENGTH)]


class TelegramTransport(Transport):
    """Telegram Bot API transport."""

    def __init__(self):
        self._app: Application | None = None

    @property
    def name(self) -> str:
        return "telegram"

    async def start(self) -> None:
        if not TELEGRAM_BOT_TOKEN:
            log.warning("TELEGRAM_BOT_TOKEN not set, Telegram transport disabled")
            return

        self._app = Application.builder().token(TELEGRAM_BOT_TOKEN).build()
        self._app.add_handler(MessageHandler(filters.TEXT, self._handle_message))

        await self._app.initialize()
        await self._app.start()
        await self._app.updater.start_polling(drop_pending_updates=True)
        log.info("Telegram transport started")

    async def stop(self) -> None:
        if self._app:
            await self._app.updater.stop()
            await self._app.stop()
            await self._app.shutdown()
            log.info("Telegram transport stopped")

    async def send_message(self, user_id: int, text: str) -> None:
        if not self._app:
            log.warning("Telegram not started, cannot send message")
            return
        try:
            for chunk in _chunks(text):
                await self._app.bot.send_message(chat_id=user_id, text=chunk)
        except Exception as e:
            log.error("Failed to send Telegram message: %s", e)

    # ── Handlers ──────────────────────────────────────────────

    async def _handle_message(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        if not update.message or not update.message.text:
            return

        user_id = update.effective_user.id

        # First user to message becomes the owner
        from habitcal.config import OWNER_USER_ID as _current_owner
        if not _current_owner:
            set_owner_user_id(user_id)
            log.info("Owner auto-detected: user_id=%d", user_id)
        elif user_id != _current_owner:
            log.warning("Refused message from non-owner user_id=%d", user_id)
            await update.message.reply_text("Sorry, this is a personal habit tracker.")
            return

        msg = IncomingMessage(
            user_id=user_id,
            channel_id=update.effective_chat.id,
            text=update.message.text,
            transport="telegram",
        )

        if not _on_message_callback:
            await update.message.reply_text("Still starting up... try again in a moment.")
            return

        response = await _on_message_callback(msg)
        if not response:
            return
        try:
            for chunk in _chunks(response):
                await update.message.reply_text(chunk)
        except Exception as e:
            log.error("Failed to reply on Telegram: %s", e)
