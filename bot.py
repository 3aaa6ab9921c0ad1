import logging
from dotenv import load_dotenv

# Load environment variables before the package reads its settings
load_dotenv()

from telegram import Update
from telegram.ext import (
    Application, CommandHandler, CallbackQueryHandler, MessageHandler,
    filters, ConversationHandler
)
from shop_bot.store.store import ShopSession
from shop_bot.utils.constants import (
    BOT_TOKEN, LOG_LEVEL, TITLE, DESCRIPTION, PRICE, PRODUCT_ID, QUANTITY, NAME, ADDRESS
)
from shop_bot.handlers.menu_handlers import start, cancel, command_reset, error_handler
from shop_bot.handlers.catalog_handlers import (
    command_products, command_add_product, handle_title, handle_description, handle_price
)
from shop_bot.handlers.cart_handlers import (
    command_cart, command_add_to_cart, handle_product_id, handle_quantity
)
from shop_bot.handlers.checkout_handlers import command_checkout, handle_name, handle_address

# Enable logging
logging.basicConfig(format='%(asctime)s - %(name)s - %(levelname)s - %(message)s', level=LOG_LEVEL)
logging.getLogger('httpx').setLevel(logging.WARNING)
logger = logging.getLogger(__name__)

# Any message that is not a command answers the current prompt; non-text counts as empty
ANSWER = filters.ALL & ~filters.COMMAND

def build_conversation():
    # One conversation for every flow, so starting a new flow replaces an unfinished one
    return ConversationHandler(
        entry_points=[
            CommandHandler('add_product', command_add_product),
            CallbackQueryHandler(command_add_product, pattern='^add_product$'),
            CommandHandler('add_to_cart', command_add_to_cart),
            CallbackQueryHandler(command_add_to_cart, pattern='^add_to_cart$'),
            CommandHandler('checkout', command_checkout),
            CallbackQueryHandler(command_checkout, pattern='^checkout$')
        ],
        states={
            TITLE: [MessageHandler(ANSWER, handle_title)],
            DESCRIPTION: [MessageHandler(ANSWER, handle_description)],
            PRICE: [MessageHandler(ANSWER, handle_price)],
            PRODUCT_ID: [
                CallbackQueryHandler(handle_product_id, pattern='^product:'),
                MessageHandler(ANSWER, handle_product_id)
            ],
            QUANTITY: [MessageHandler(ANSWER, handle_quantity)],
            NAME: [MessageHandler(ANSWER, handle_name)],
            ADDRESS: [MessageHandler(ANSWER, handle_address)]
        },
        fallbacks=[
            CommandHandler('cancel', cancel),
            CommandHandler('start', start),
            CommandHandler('reset', command_reset)
        ],
        allow_reentry=True
    )

def register_handlers(application: Application) -> None:
    # Conversation first so its fallbacks see /cancel, /start and /reset while a prompt is open
    application.add_handler(build_conversation())

    application.add_handler(CommandHandler("start", start))
    application.add_handler(CommandHandler("products", command_products))
    application.add_handler(CommandHandler("cart", command_cart))
    application.add_handler(CommandHandler("reset", command_reset))
    application.add_handler(CommandHandler("cancel", cancel))
    application.add_handler(CallbackQueryHandler(command_products, pattern='^products$'))
    application.add_handler(CallbackQueryHandler(command_cart, pattern='^cart$'))
    application.add_handler(CallbackQueryHandler(command_reset, pattern='^reset$'))

    application.add_error_handler(error_handler)

def main():
    if not BOT_TOKEN:
        raise ValueError("BOT_TOKEN environment variable is not set")

    # Initialize the Application with the bot token
    application = Application.builder().token(BOT_TOKEN).build()
    application.bot_data['session'] = ShopSession.create()
    register_handlers(application)

    # Start the bot
    logger.info("Starting bot...")
    application.run_polling(allowed_updates=Update.ALL_TYPES)

if __name__ == '__main__':
    main()
