from typing import List
from telegram import InlineKeyboardButton, InlineKeyboardMarkup
from ..models.models import Product
from .constants import EMOJIS
from .formatters import format_currency

def create_product_keyboard(products: List[Product]) -> InlineKeyboardMarkup:
    """Create a keyboard with one button per catalog product."""
    keyboard = [
        [InlineKeyboardButton(
            f"{EMOJIS['PRODUCT']} #{product.id} {product.title} - {format_currency(product.price)}",
            callback_data=f'product:{product.id}'
        )]
        for product in products
    ]
    return InlineKeyboardMarkup(keyboard)

def create_main_menu_keyboard() -> InlineKeyboardMarkup:
    """Create the main menu keyboard."""
    keyboard = [
        [InlineKeyboardButton(f"{EMOJIS['SHOPPING']} Products", callback_data='products')],
        [InlineKeyboardButton(f"{EMOJIS['PLUS']} Add Product", callback_data='add_product')],
        [InlineKeyboardButton(f"{EMOJIS['PACKAGE']} Add to Cart", callback_data='add_to_cart')],
        [InlineKeyboardButton(f"{EMOJIS['CART']} Show Cart", callback_data='cart')],
        [InlineKeyboardButton(f"{EMOJIS['CONFIRM']} Checkout", callback_data='checkout')],
        [InlineKeyboardButton(f"{EMOJIS['RESET']} Start Over", callback_data='reset')]
    ]
    return InlineKeyboardMarkup(keyboard)
