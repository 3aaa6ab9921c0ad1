class ShopError(Exception):
    """Base class for errors reported back to the user."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

class ValidationError(ShopError):
    """Missing, empty or out-of-range input."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field

class NotFoundError(ShopError):
    """Referenced product id is not in the catalog."""

    def __init__(self, product_id: int):
        super().__init__(f"Product #{product_id} was not found.")
        self.product_id = product_id
