from telegram import Update
from telegram.ext import ContextTypes, ConversationHandler
from .auth_handlers import check_auth
from .common import get_session, get_message, reject
from ..models.errors import ShopError
from ..utils.constants import NAME, ADDRESS, EMOJIS
from ..utils.formatters import format_order_confirmation
from ..utils.keyboards import create_main_menu_keyboard
from ..utils.validators import validate_name

async def command_checkout(update: Update, context: ContextTypes.DEFAULT_TYPE):
    if not await check_auth(update):
        return ConversationHandler.END

    context.user_data.clear()

    message = await get_message(update)
    try:
        get_session(context).ensure_cart_not_empty()
    except ShopError as e:
        return await reject(update, context, e)

    await message.reply_text(f"{EMOJIS['PERSON']} Name:")
    return NAME

async def handle_name(update: Update, context: ContextTypes.DEFAULT_TYPE):
    try:
        context.user_data['name'] = validate_name(update.effective_message.text)
    except ShopError as e:
        return await reject(update, context, e)

    await update.effective_message.reply_text(f"{EMOJIS['LOCATION']} Address:")
    return ADDRESS

async def handle_address(update: Update, context: ContextTypes.DEFAULT_TYPE):
    try:
        order = get_session(context).checkout(context.user_data.get('name'), update.effective_message.text)
    except ShopError as e:
        return await reject(update, context, e)

    context.user_data.clear()
    await update.effective_message.reply_text(
        f"{EMOJIS['CONFIRM']} {format_order_confirmation(order)}"
    )
    
    # Show main menu after order completion
    await update.effective_message.reply_text(
        f"{EMOJIS['ARROW']} What would you like to do next?",
        reply_markup=create_main_menu_keyboard()
    )
    return ConversationHandler.END
