import pytest
from telegram.ext import ConversationHandler

from shop_bot.handlers.cart_handlers import (
    command_add_to_cart,
    command_cart,
    handle_product_id,
    handle_quantity,
)
from shop_bot.handlers.catalog_handlers import (
    command_add_product,
    command_products,
    handle_description,
    handle_price,
    handle_title,
)
from shop_bot.handlers.checkout_handlers import command_checkout, handle_address, handle_name
from shop_bot.handlers.common import get_session
from shop_bot.handlers.menu_handlers import cancel, command_reset, start
from shop_bot.utils import constants
from shop_bot.utils.constants import ADDRESS, DESCRIPTION, NAME, PRICE, PRODUCT_ID, QUANTITY, TITLE

from .conftest import make_update, replies


@pytest.mark.asyncio
async def test_start_shows_menu(context):
    update = make_update("/start")

    result = await start(update, context)

    assert result == ConversationHandler.END
    context.bot.set_my_commands.assert_awaited_once()
    assert "Welcome" in replies(update)[0]


@pytest.mark.asyncio
async def test_unauthorized_user_is_refused(context, monkeypatch):
    monkeypatch.setattr(constants, "AUTHORIZED_USERS_IDS", {99})
    update = make_update("/add_product", user_id=1)

    result = await command_add_product(update, context)

    assert result == ConversationHandler.END
    assert replies(update) == ["Sorry, you are not authorized to use this bot."]


@pytest.mark.asyncio
async def test_authorized_by_username(context, monkeypatch):
    monkeypatch.setattr(constants, "AUTHORIZED_USERS_USERNAMES", {"@tester"})
    update = make_update("/add_product", user_id=1, username="Tester")

    assert await command_add_product(update, context) == TITLE


@pytest.mark.asyncio
async def test_products_lists_catalog(context):
    update = make_update(callback_data="products")

    await command_products(update, context)

    update.callback_query.answer.assert_awaited_once()
    text = replies(update)[0]
    assert "#1 HTML húfa — 5.000 kr." in text
    assert "#3 JavaScript jakki — 20.000 kr." in text


@pytest.mark.asyncio
async def test_add_product_conversation(context, session):
    assert await command_add_product(make_update("/add_product"), context) == TITLE
    assert await handle_title(make_update("Python peysa"), context) == DESCRIPTION
    assert await handle_description(make_update("Hlý peysa."), context) == PRICE

    update = make_update("7500")
    result = await handle_price(update, context)

    assert result == ConversationHandler.END
    assert len(session.list_catalog()) == 4
    assert session.list_catalog()[-1].title == "Python peysa"
    assert session.cart.lines[0].product.id == 4
    assert "Python peysa — 7.500 kr." in replies(update)[0]
    assert context.user_data == {}


@pytest.mark.asyncio
async def test_add_product_empty_title_aborts(context, session):
    await command_add_product(make_update("/add_product"), context)
    update = make_update(None)

    result = await handle_title(update, context)

    assert result == ConversationHandler.END
    assert replies(update) == ["❌ Title must not be empty."]
    assert len(session.list_catalog()) == 3


@pytest.mark.asyncio
async def test_add_product_bad_price_aborts(context, session):
    await command_add_product(make_update("/add_product"), context)
    await handle_title(make_update("Titill"), context)
    await handle_description(make_update("Lýsing"), context)
    update = make_update("-10")

    result = await handle_price(update, context)

    assert result == ConversationHandler.END
    assert replies(update) == ["❌ Price must be a positive integer."]
    assert len(session.list_catalog()) == 3
    assert session.cart.lines == []


@pytest.mark.asyncio
async def test_add_to_cart_by_typed_id(context, session):
    assert await command_add_to_cart(make_update("/add_to_cart"), context) == PRODUCT_ID
    assert await handle_product_id(make_update("2"), context) == QUANTITY

    update = make_update("3")
    result = await handle_quantity(update, context)

    assert result == ConversationHandler.END
    assert session.cart.lines[0].product.id == 2
    assert session.cart.lines[0].quantity == 3
    assert "Total: 9.000 kr." in replies(update)[0]


@pytest.mark.asyncio
async def test_add_to_cart_by_keyboard(context, session):
    await command_add_to_cart(make_update(callback_data="add_to_cart"), context)
    update = make_update(callback_data="product:1")

    assert await handle_product_id(update, context) == QUANTITY
    update.callback_query.answer.assert_awaited_once()

    await handle_quantity(make_update("2"), context)

    assert session.cart.lines[0].quantity == 2


@pytest.mark.asyncio
async def test_add_to_cart_unknown_id_aborts(context, session):
    await command_add_to_cart(make_update("/add_to_cart"), context)
    update = make_update("42")

    result = await handle_product_id(update, context)

    assert result == ConversationHandler.END
    assert replies(update) == ["❌ Product #42 was not found."]
    assert session.cart.lines == []


@pytest.mark.asyncio
async def test_add_to_cart_bad_quantity_aborts(context, session):
    await command_add_to_cart(make_update("/add_to_cart"), context)
    await handle_product_id(make_update("1"), context)
    update = make_update("100")

    result = await handle_quantity(update, context)

    assert result == ConversationHandler.END
    assert "maximum 99" in replies(update)[0]
    assert session.cart.lines == []


@pytest.mark.asyncio
async def test_cart_empty(context):
    update = make_update("/cart")

    await command_cart(update, context)

    assert replies(update) == ["🛒 Cart is empty."]


@pytest.mark.asyncio
async def test_checkout_with_empty_cart(context):
    update = make_update("/checkout")

    result = await command_checkout(update, context)

    assert result == ConversationHandler.END
    assert replies(update) == ["❌ The cart is empty."]


@pytest.mark.asyncio
async def test_checkout_conversation(context, session):
    session.add_to_cart(1, 2)
    session.add_to_cart(2, 1)

    assert await command_checkout(make_update("/checkout"), context) == NAME
    assert await handle_name(make_update("Jón"), context) == ADDRESS

    update = make_update("Einhver gata 1")
    result = await handle_address(update, context)

    assert result == ConversationHandler.END
    assert session.cart.cart.name == "Jón"
    assert session.cart.cart.address == "Einhver gata 1"
    confirmation = replies(update)[0]
    assert "Order received, Jón." in confirmation
    assert "Total: 13.000 kr." in confirmation


@pytest.mark.asyncio
async def test_checkout_empty_address_aborts(context, session):
    session.add_to_cart(1, 1)
    await command_checkout(make_update("/checkout"), context)
    await handle_name(make_update("Jón"), context)
    update = make_update("   ")

    result = await handle_address(update, context)

    assert result == ConversationHandler.END
    assert replies(update) == ["❌ An address is required."]
    assert session.cart.cart.name is None


@pytest.mark.asyncio
async def test_cancel_clears_answers(context, session):
    await command_add_product(make_update("/add_product"), context)
    await handle_title(make_update("Titill"), context)

    result = await cancel(make_update("/cancel"), context)

    assert result == ConversationHandler.END
    assert context.user_data == {}
    assert len(session.list_catalog()) == 3


@pytest.mark.asyncio
async def test_reset(context, session):
    session.add_product("Nýtt", "Ný vara.", "10")
    update = make_update(callback_data="reset")

    await command_reset(update, context)

    assert len(session.list_catalog()) == 3
    assert session.cart.lines == []


def test_get_session_created_on_first_use(context):
    context.bot_data = {}

    session = get_session(context)

    assert context.bot_data["session"] is session
    assert get_session(context) is session
