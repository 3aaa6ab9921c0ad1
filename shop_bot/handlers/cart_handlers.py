from telegram import Update
from telegram.ext import ContextTypes, ConversationHandler
from .auth_handlers import check_auth
from .common import get_session, get_message, reject
from ..models.errors import ShopError
from ..utils.constants import PRODUCT_ID, QUANTITY, EMOJIS, MIN_QUANTITY, MAX_QUANTITY
from ..utils.keyboards import create_product_keyboard
from ..utils.formatters import format_cart_text, format_product_line

async def command_cart(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    if not await check_auth(update):
        return

    message = await get_message(update)
    summary = get_session(context).cart_summary()
    await message.reply_text(f"{EMOJIS['CART']} {format_cart_text(summary)}")

async def command_add_to_cart(update: Update, context: ContextTypes.DEFAULT_TYPE):
    if not await check_auth(update):
        return ConversationHandler.END

    # Clear any existing conversation data
    context.user_data.clear()

    message = await get_message(update)
    products = get_session(context).list_catalog()
    await message.reply_text(
        f"{EMOJIS['SHOPPING']} Enter a product id or pick a product:",
        reply_markup=create_product_keyboard(products)
    )
    return PRODUCT_ID

async def handle_product_id(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    if query:
        await query.answer()
        product_id = query.data.split(':', 1)[1]
    else:
        product_id = update.effective_message.text

    try:
        product = get_session(context).get_product(product_id)
    except ShopError as e:
        return await reject(update, context, e)

    context.user_data['product_id'] = product.id
    await update.effective_message.reply_text(
        f"{EMOJIS['PACKAGE']} Enter quantity for {format_product_line(product)} "
        f"({MIN_QUANTITY}-{MAX_QUANTITY}):"
    )
    return QUANTITY

async def handle_quantity(update: Update, context: ContextTypes.DEFAULT_TYPE):
    session = get_session(context)
    try:
        line = session.add_to_cart(context.user_data.get('product_id'), update.effective_message.text)
    except ShopError as e:
        return await reject(update, context, e)

    context.user_data.clear()
    await update.effective_message.reply_text(
        f"{EMOJIS['CONFIRM']} {format_product_line(line.product, line.quantity)}\n\n"
        f"{EMOJIS['CART']} {format_cart_text(session.cart_summary())}"
    )
    return ConversationHandler.END
