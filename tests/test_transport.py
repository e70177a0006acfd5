"""Tests for the Telegram handler, runtime screens and main message routing."""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

import habitcal.config as cfg
import habitcal.transport.telegram as tg
from habitcal import runtime_state
from habitcal.transport import IncomingMessage
from habitcal.transport.telegram import TelegramTransport, set_message_handler


def _update(user_id: int, text: str, chat_id: int | None = None):
    message = SimpleNamespace(text=text, reply_text=AsyncMock())
    return SimpleNamespace(
        message=message,
        effective_user=SimpleNamespace(id=user_id),
        effective_chat=SimpleNamespace(id=chat_id or user_id),
    )


@pytest.fixture(autouse=True)
def reset_state(monkeypatch):
    monkeypatch.setattr(tg, "_on_message_callback", None)
    runtime_state.clear_all()
    yield
    runtime_state.clear_all()


class TestTelegramHandler:
    @pytest.mark.asyncio
    async def test_owner_message_is_routed(self, monkeypatch):
        monkeypatch.setattr(cfg, "OWNER_USER_ID", 42)
        seen = []

        async def handler(msg: IncomingMessage) -> str:
            seen.append(msg)
            return "ok"

        set_message_handler(handler)
        update = _update(42, "Drink water", chat_id=7)
        await TelegramTransport()._handle_message(update, None)

        assert seen[0].text == "Drink water"
        assert seen[0].channel_id == 7
        assert seen[0].transport == "telegram"
        update.message.reply_text.assert_awaited_once_with("ok")

    @pytest.mark.asyncio
    async def test_non_owner_refused(self, monkeypatch):
        monkeypatch.setattr(cfg, "OWNER_USER_ID", 42)
        handler = AsyncMock(return_value="ok")
        set_message_handler(handler)

        update = _update(99, "hi")
        await TelegramTransport()._handle_message(update, None)

        handler.assert_not_awaited()
        assert "personal" in update.message.reply_text.await_args.args[0]

    @pytest.mark.asyncio
    async def test_first_user_becomes_owner(self, monkeypatch):
        monkeypatch.setattr(cfg, "OWNER_USER_ID", 0)
        persisted = []
        monkeypatch.setattr(cfg, "_persist_owner", persisted.append)
        set_message_handler(AsyncMock(return_value="ok"))

        await TelegramTransport()._handle_message(_update(5, "hi"), None)

        assert cfg.OWNER_USER_ID == 5
        assert persisted == [5]

    @pytest.mark.asyncio
    async def test_long_reply_is_split(self, monkeypatch):
        monkeypatch.setattr(cfg, "OWNER_USER_ID", 42)
        set_message_handler(AsyncMock(return_value="x" * 5000))

        update = _update(42, "/list")
        await TelegramTransport()._handle_message(update, None)

        sizes = [len(c.args[0]) for c in update.message.reply_text.await_args_list]
        assert sizes == [4096, 904]

    @pytest.mark.asyncio
    async def test_no_handler_yet(self, monkeypatch):
        monkeypatch.setattr(cfg, "OWNER_USER_ID", 42)
        update = _update(42, "hi")
        await TelegramTransport()._handle_message(update, None)
        assert "starting up" in update.message.reply_text.await_args.args[0]

    @pytest.mark.asyncio
    async def test_send_before_start_is_noop(self):
        await TelegramTransport().send_message(1, "hello")


class TestRuntimeState:
    def test_one_screen_per_chat(self):
        a = runtime_state.get_screen(1)
        assert runtime_state.get_screen(1) is a
        assert runtime_state.get_screen(2) is not a

    def test_drop_screen(self):
        a = runtime_state.get_screen(1)
        runtime_state.drop_screen(1)
        assert runtime_state.get_screen(1) is not a


class TestHandleMessage:
    @pytest.mark.asyncio
    async def test_routes_to_chat_screen(self):
        from habitcal.main import handle_message

        msg = IncomingMessage(user_id=1, channel_id=10, text="Read", transport="test")
        reply = await handle_message(msg)
        assert "Added: Read" in reply

        other = IncomingMessage(user_id=1, channel_id=11, text="/list", transport="test")
        reply = await handle_message(other)
        assert "Habits completed: 0 / 0" in reply
        assert runtime_state.get_screen(10).total == 1
