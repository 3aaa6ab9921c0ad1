from typing import List, Optional
from ..models.models import Product, CartSummary, OrderSummary

def format_currency(amount: int) -> str:
    """Format an amount in Icelandic krónur, e.g. 123000 -> '123.000 kr.'"""
    return f"{amount:,}".replace(',', '.') + " kr."

def format_product_line(product: Product, quantity: Optional[int] = None) -> str:
    if quantity is not None:
        return (
            f"{product.title} — {quantity}x{format_currency(product.price)} "
            f"total {format_currency(product.price * quantity)}"
        )
    return f"{product.title} — {format_currency(product.price)}"

def format_catalog_text(products: List[Product]) -> str:
    return "\n".join(f"#{product.id} {format_product_line(product)}" for product in products)

def format_cart_text(summary: CartSummary) -> str:
    """Format cart contents followed by the total."""
    if summary.is_empty:
        return "Cart is empty."

    cart_lines = [format_product_line(line.product, line.quantity) for line in summary.lines]
    return "\n".join(cart_lines) + f"\nTotal: {format_currency(summary.total)}"

def format_order_confirmation(order: OrderSummary) -> str:
    """Format order confirmation message."""
    return (
        f"Order received, {order.name}.\n"
        f"Items will be shipped to {order.address}.\n\n"
        f"{format_cart_text(order.cart)}"
    )
