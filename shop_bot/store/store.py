import logging
from typing import Dict, List, Optional, Union
from ..models.models import Product, Cart, CartLine, CartSummary, SummaryLine, OrderSummary
from ..models.errors import NotFoundError, ValidationError
from ..utils.constants import SEED_PRODUCTS, MAX_QUANTITY, ADD_PRODUCT_ADDS_TO_CART
from ..utils import validators

logger = logging.getLogger(__name__)

class CatalogStore:
    def __init__(self, seed: Optional[List[Dict]] = None):
        self.seed = list(SEED_PRODUCTS if seed is None else seed)
        self.reset()

    def reset(self) -> None:
        self.products: List[Product] = []
        self.next_id = 1
        for item in self.seed:
            self.create(item['title'], item['description'], item['price'])

    def create(self, title: str, description: str, price: int) -> Product:
        # Ids come from a counter so they stay unique even if products are removed
        product = Product(id=self.next_id, title=title, description=description, price=price)
        self.next_id += 1
        self.products.append(product)
        return product

    def get(self, product_id: int) -> Optional[Product]:
        return next((p for p in self.products if p.id == product_id), None)

    def __len__(self) -> int:
        return len(self.products)

class CartStore:
    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self.cart = Cart()

    @property
    def lines(self) -> List[CartLine]:
        return self.cart.lines

    def find_line(self, product_id: int) -> Optional[CartLine]:
        return next((line for line in self.cart.lines if line.product.id == product_id), None)

    def add(self, product: Product, quantity: int) -> CartLine:
        line = self.find_line(product.id)
        if line:
            line.quantity = min(line.quantity + quantity, MAX_QUANTITY)
        else:
            line = CartLine(product=product, quantity=quantity)
            self.cart.lines.append(line)
        return line

    def summary(self) -> CartSummary:
        lines = [
            SummaryLine(product=line.product, quantity=line.quantity, line_total=line.line_total)
            for line in self.cart.lines
        ]
        return CartSummary(lines=lines, total=sum(line.line_total for line in lines))

class ShopSession:
    """One catalog and one cart, shared by every operation of a running bot.

    Operations validate all of their input before touching either store, so a
    raised ``ShopError`` always means nothing was changed.
    """

    def __init__(self, catalog: CatalogStore, cart: CartStore, add_product_adds_to_cart: bool = ADD_PRODUCT_ADDS_TO_CART):
        self.catalog = catalog
        self.cart = cart
        self.add_product_adds_to_cart = add_product_adds_to_cart

    @classmethod
    def create(cls, seed: Optional[List[Dict]] = None, add_product_adds_to_cart: bool = ADD_PRODUCT_ADDS_TO_CART) -> 'ShopSession':
        return cls(CatalogStore(seed), CartStore(), add_product_adds_to_cart)

    def reset(self) -> None:
        self.catalog.reset()
        self.cart.reset()
        logger.info("Session reset, catalog has %d products", len(self.catalog))

    def list_catalog(self) -> List[Product]:
        return list(self.catalog.products)

    def add_product(self, title: Optional[str], description: Optional[str], price_text: Union[int, str, None],
                    also_add_to_cart: Optional[bool] = None) -> Product:
        title = validators.validate_title(title)
        description = validators.validate_description(description)
        price = validators.validate_price(price_text)

        if also_add_to_cart is None:
            also_add_to_cart = self.add_product_adds_to_cart

        product = self.catalog.create(title, description, price)
        logger.info("Added product #%d %s", product.id, product.title)

        if also_add_to_cart:
            self.cart.add(product, 1)
            logger.info("Added product #%d to cart", product.id)
        return product

    def add_to_cart(self, product_id: Union[int, str, None], quantity: Union[int, str, None]) -> CartLine:
        product = self.get_product(product_id)
        quantity = validators.validate_quantity(quantity)

        line = self.cart.add(product, quantity)
        logger.info("Cart line #%d now has quantity %d", product.id, line.quantity)
        return line

    def get_product(self, product_id: Union[int, str, None]) -> Product:
        product_id = validators.validate_product_id(product_id)
        product = self.catalog.get(product_id)
        if not product:
            raise NotFoundError(product_id)
        return product

    def cart_summary(self) -> CartSummary:
        return self.cart.summary()

    def ensure_cart_not_empty(self) -> None:
        if not self.cart.lines:
            raise ValidationError('cart', "The cart is empty.")

    def checkout(self, name: Optional[str], address: Optional[str]) -> OrderSummary:
        self.ensure_cart_not_empty()
        name = validators.validate_name(name)
        address = validators.validate_address(address)

        self.cart.cart.name = name
        self.cart.cart.address = address

        summary = self.cart_summary()
        logger.info("Checkout with %d lines, total %d", len(summary.lines), summary.total)
        return OrderSummary(name=name, address=address, cart=summary)
