from typing import Optional, Union
from ..models.errors import ValidationError
from .constants import MIN_QUANTITY, MAX_QUANTITY

MAX_DIGITS = 18

def parse_int(value: Union[int, str, None]) -> Optional[int]:
    """Parse a whole decimal number, returning None for anything else.

    Unlike ``int()`` this rejects signs, fractions and trailing junk, so
    "12abc", "1.5" and "-3" all come back as None, as does
    anything longer than MAX_DIGITS.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if value is None:
        return None
    text = value.strip()
    # int() refuses very long digit strings
    if not text.isdecimal() or len(text) > MAX_DIGITS:
        return None
    return int(text)

def require_text(value: Optional[str], field: str, message: str) -> str:
    # A cancelled prompt (None) counts as an empty answer
    if value is None or not value.strip():
        raise ValidationError(field, message)
    return value.strip()

def validate_title(value: Optional[str]) -> str:
    return require_text(value, 'title', "Title must not be empty.")

def validate_description(value: Optional[str]) -> str:
    return require_text(value, 'description', "Description must not be empty.")

def validate_price(value: Union[int, str, None]) -> int:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError('price', "Price must not be empty.")
    price = parse_int(value)
    if price is None or price < 1:
        raise ValidationError('price', "Price must be a positive integer.")
    return price

def validate_product_id(value: Union[int, str, None]) -> int:
    product_id = parse_int(value)
    if product_id is None or product_id < 1:
        raise ValidationError('product_id', "Product id must be a positive integer.")
    return product_id

def validate_quantity(value: Union[int, str, None]) -> int:
    quantity = parse_int(value)
    if quantity is None or not MIN_QUANTITY <= quantity <= MAX_QUANTITY:
        raise ValidationError(
            'quantity',
            f"Quantity is not valid, minimum {MIN_QUANTITY} and maximum {MAX_QUANTITY}."
        )
    return quantity

def validate_name(value: Optional[str]) -> str:
    return require_text(value, 'name', "A name is required.")

def validate_address(value: Optional[str]) -> str:
    return require_text(value, 'address', "An address is required.")
