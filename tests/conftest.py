from unittest.mock import AsyncMock, MagicMock

import pytest

from shop_bot.store.store import ShopSession
from shop_bot.utils import constants


@pytest.fixture(autouse=True)
def open_access(monkeypatch):
    monkeypatch.setattr(constants, "AUTHORIZED_USERS_IDS", set())
    monkeypatch.setattr(constants, "AUTHORIZED_USERS_USERNAMES", set())


@pytest.fixture
def session():
    return ShopSession.create(add_product_adds_to_cart=True)


@pytest.fixture
def context(session):
    context = MagicMock()
    context.bot_data = {"session": session}
    context.user_data = {}
    context.bot.set_my_commands = AsyncMock()
    return context


def make_update(text=None, callback_data=None, user_id=1, username="tester"):
    update = MagicMock()
    update.effective_user.id = user_id
    update.effective_user.username = username

    message = MagicMock()
    message.text = text
    message.reply_text = AsyncMock()

    if callback_data is not None:
        update.callback_query.data = callback_data
        update.callback_query.answer = AsyncMock()
        update.callback_query.message = message
        update.message = None
    else:
        update.callback_query = None
        update.message = message

    update.effective_message = message
    return update


def replies(update):
    return [call.args[0] for call in update.effective_message.reply_text.await_args_list]
