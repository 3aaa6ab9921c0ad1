from telegram import Update
from ..utils import constants

async def check_auth(update: Update) -> bool:
    # Nobody configured means the bot is open to everyone
    if not constants.AUTHORIZED_USERS_IDS and not constants.AUTHORIZED_USERS_USERNAMES:
        return True

    user_id = update.effective_user.id
    username = update.effective_user.username
    
    if user_id in constants.AUTHORIZED_USERS_IDS:
        return True
    
    if username and f"@{username.lower()}" in constants.AUTHORIZED_USERS_USERNAMES:
        return True
        
    await update.effective_message.reply_text("Sorry, you are not authorized to use this bot.")
    return False
