import logging
import os

# Conversation states
TITLE, DESCRIPTION, PRICE, PRODUCT_ID, QUANTITY, NAME, ADDRESS = range(7)

MIN_QUANTITY = 1
MAX_QUANTITY = 99

# Emojis for UI elements
EMOJIS = {
    'CART': '🛒',
    'PRODUCT': '💠',
    'CONFIRM': '✅',
    'WARNING': '⚠️',
    'ERROR': '❌',
    'PERSON': '👤',
    'LOCATION': '📍',
    'SHOPPING': '🛍️',
    'PACKAGE': '📦',
    'ARROW': '🔽',
    'WAVE': '👋',
    'PLUS': '➕',
    'RESET': '🔄'
}

# Products the catalog starts with
SEED_PRODUCTS = [
    {
        'title': 'HTML húfa',
        'description': 'Húfa sem heldur hausnum heitum og hvíslar hugsanlega að þér hvaða element væri best að nota.',
        'price': 5_000,
    },
    {
        'title': 'CSS sokkar',
        'description': 'Sokkar sem skalast vel með hvaða fótum sem er.',
        'price': 3_000,
    },
    {
        'title': 'JavaScript jakki',
        'description': 'Mjög töff jakki fyrir öll sem skrifa JavaScript reglulega.',
        'price': 20_000,
    },
]

BOT_COMMANDS = [
    ('start', 'Show the main menu'),
    ('products', 'List the catalog'),
    ('add_product', 'Add a product to the catalog'),
    ('add_to_cart', 'Add a product to the cart'),
    ('cart', 'Show the cart'),
    ('checkout', 'Check out'),
    ('reset', 'Start over with the default catalog'),
    ('cancel', 'Cancel the current operation')
]

def parse_log_level(value):
    # Unknown level names fall back to INFO instead of failing at startup
    level = (value or 'INFO').strip().upper()
    return level if isinstance(logging.getLevelName(level), int) else 'INFO'

BOT_TOKEN = os.getenv('BOT_TOKEN')
LOG_LEVEL = parse_log_level(os.getenv('LOG_LEVEL'))

# Adding a product to the catalog also puts one in the cart unless disabled
ADD_PRODUCT_ADDS_TO_CART = os.getenv('ADD_PRODUCT_ADDS_TO_CART', 'true').strip().lower() in ('1', 'true', 'yes', 'on')

# Initialize authorized users from environment variables
AUTHORIZED_USERS_IDS = set()
AUTHORIZED_USERS_USERNAMES = set()

for user in os.getenv('AUTHORIZED_USERS', '').split(','):
    user = user.strip()
    if user.startswith('@'):
        AUTHORIZED_USERS_USERNAMES.add(user.lower())
    elif user.isdigit():
        AUTHORIZED_USERS_IDS.add(int(user))
