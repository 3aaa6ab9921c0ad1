import logging
from telegram import Message, Update
from telegram.ext import ContextTypes, ConversationHandler
from ..models.errors import ShopError
from ..store.store import ShopSession
from ..utils.constants import EMOJIS

logger = logging.getLogger(__name__)

def get_session(context: ContextTypes.DEFAULT_TYPE) -> ShopSession:
    """Return the session shared by all chats, creating it on first use."""
    session = context.bot_data.get('session')
    if session is None:
        session = ShopSession.create()
        context.bot_data['session'] = session
    return session

async def get_message(update: Update) -> Message:
    # Handle both direct command and callback query
    if update.callback_query:
        await update.callback_query.answer()
        return update.callback_query.message
    return update.message

async def reject(update: Update, context: ContextTypes.DEFAULT_TYPE, error: ShopError) -> int:
    """Report a rejected answer and end the conversation without changing anything."""
    logger.warning("Rejected input from user %s: %s", update.effective_user.id, error.message)
    context.user_data.clear()
    await update.effective_message.reply_text(f"{EMOJIS['ERROR']} {error.message}")
    return ConversationHandler.END
