from dataclasses import dataclass, field
from typing import List, Optional

@dataclass(frozen=True)
class Product:
    id: int
    title: str
    description: str
    price: int

@dataclass
class CartLine:
    product: Product
    quantity: int

    @property
    def line_total(self) -> int:
        return self.product.price * self.quantity

@dataclass
class Cart:
    lines: List[CartLine] = field(default_factory=list)
    name: Optional[str] = None
    address: Optional[str] = None

@dataclass
class SummaryLine:
    product: Product
    quantity: int
    line_total: int

@dataclass
class CartSummary:
    lines: List[SummaryLine]
    total: int

    @property
    def is_empty(self) -> bool:
        return not self.lines

@dataclass
class OrderSummary:
    name: str
    address: str
    cart: CartSummary
