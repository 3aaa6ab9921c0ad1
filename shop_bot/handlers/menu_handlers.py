import logging
from telegram import Update
from telegram.ext import ContextTypes, ConversationHandler
from .auth_handlers import check_auth
from .common import get_session, get_message
from ..utils.constants import BOT_COMMANDS, EMOJIS
from ..utils.keyboards import create_main_menu_keyboard

logger = logging.getLogger(__name__)

async def start(update: Update, context: ContextTypes.DEFAULT_TYPE):
    if not await check_auth(update):
        return ConversationHandler.END

    # Set up menu commands
    await context.bot.set_my_commands(BOT_COMMANDS)

    context.user_data.clear()
    await update.message.reply_text(
        f"{EMOJIS['WAVE']} Welcome to the shop!\n"
        f"{EMOJIS['ARROW']} What would you like to do?",
        reply_markup=create_main_menu_keyboard()
    )
    return ConversationHandler.END

async def cancel(update: Update, context: ContextTypes.DEFAULT_TYPE):
    if not await check_auth(update):
        return ConversationHandler.END
    
    context.user_data.clear()
    await update.message.reply_text(f"{EMOJIS['ERROR']} Operation cancelled.")
    return ConversationHandler.END

async def command_reset(update: Update, context: ContextTypes.DEFAULT_TYPE):
    if not await check_auth(update):
        return ConversationHandler.END

    message = await get_message(update)
    get_session(context).reset()
    context.user_data.clear()
    await message.reply_text(
        f"{EMOJIS['RESET']} Catalog and cart have been reset.",
        reply_markup=create_main_menu_keyboard()
    )
    return ConversationHandler.END

async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    logger.error("Error while handling an update: %s", context.error, exc_info=context.error)

    if isinstance(update, Update) and update.effective_message:
        await update.effective_message.reply_text(
            f"{EMOJIS['ERROR']} Sorry, something went wrong. Please try again."
        )
