from telegram import Update
from telegram.ext import ContextTypes, ConversationHandler
from .auth_handlers import check_auth
from .common import get_session, get_message, reject
from ..models.errors import ShopError
from ..utils.constants import TITLE, DESCRIPTION, PRICE, EMOJIS
from ..utils.formatters import format_catalog_text, format_product_line
from ..utils.validators import validate_title, validate_description, validate_price

async def command_products(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    if not await check_auth(update):
        return

    message = await get_message(update)
    products = get_session(context).list_catalog()
    if not products:
        await message.reply_text(f"{EMOJIS['WARNING']} The catalog is empty.")
        return

    await message.reply_text(f"{EMOJIS['SHOPPING']} Products:\n{format_catalog_text(products)}")

async def command_add_product(update: Update, context: ContextTypes.DEFAULT_TYPE):
    if not await check_auth(update):
        return ConversationHandler.END

    # Clear any existing conversation data
    context.user_data.clear()

    message = await get_message(update)
    await message.reply_text("Title:")
    return TITLE

async def handle_title(update: Update, context: ContextTypes.DEFAULT_TYPE):
    try:
        context.user_data['title'] = validate_title(update.effective_message.text)
    except ShopError as e:
        return await reject(update, context, e)

    await update.effective_message.reply_text("Description:")
    return DESCRIPTION

async def handle_description(update: Update, context: ContextTypes.DEFAULT_TYPE):
    try:
        context.user_data['description'] = validate_description(update.effective_message.text)
    except ShopError as e:
        return await reject(update, context, e)

    await update.effective_message.reply_text("Price:")
    return PRICE

async def handle_price(update: Update, context: ContextTypes.DEFAULT_TYPE):
    session = get_session(context)
    try:
        price = validate_price(update.effective_message.text)
        product = session.add_product(
            context.user_data.get('title'),
            context.user_data.get('description'),
            price
        )
    except ShopError as e:
        return await reject(update, context, e)

    context.user_data.clear()
    text = f"{EMOJIS['CONFIRM']} Product added:\n{format_product_line(product)}"
    if session.cart.find_line(product.id):
        text += f"\n{EMOJIS['CART']} It was also put in the cart."
    await update.effective_message.reply_text(text)
    return ConversationHandler.END
