"""
Local shopping cart, persisted between sessions and reconciled with the
server only at checkout
"""
import os
from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Dict, List

DEFAULT_CART_FILE = "cart-storage.json"


class CartItem(BaseModel):
    """One product line in the cart"""
    id: str
    name: str
    price: Decimal = Field(..., ge=0)
    image: str
    quantity: int = Field(1, ge=1)


class Cart(BaseModel):
    """
    Cart aggregate
    
    item_count and total are recomputed after every mutation so they always
    agree with items.
    """
    items: List[CartItem] = Field(default_factory=list)
    item_count: int = 0
    total: Decimal = Decimal("0")
    
    def _recalculate(self) -> None:
        self.item_count = sum(item.quantity for item in self.items)
        self.total = sum((item.price * item.quantity for item in self.items), Decimal("0"))
    
    def add_item(self, product_id: str, name: str, price: Decimal, image: str) -> None:
        """Add one unit of a product, merging with an existing line"""
        for item in self.items:
            if item.id == product_id:
                item.quantity += 1
                break
        else:
            self.items.append(CartItem(id=product_id, name=name, price=Decimal(str(price)), image=image))
        self._recalculate()
    
    def remove_item(self, product_id: str) -> None:
        self.items = [item for item in self.items if item.id != product_id]
        self._recalculate()
    
    def update_quantity(self, product_id: str, quantity: int) -> None:
        """Set a line's quantity; zero or less removes the line"""
        if quantity <= 0:
            self.remove_item(product_id)
            return
        for item in self.items:
            if item.id == product_id:
                item.quantity = quantity
        self._recalculate()
    
    def clear(self) -> None:
        self.items = []
        self._recalculate()
    
    def is_empty(self) -> bool:
        return not self.items
    
    def to_order_payload(self) -> Dict:
        """Request body for placing this cart as an order"""
        return {
            "items": [
                {"productId": item.id, "quantity": item.quantity, "price": str(item.price)}
                for item in self.items
            ],
            "totalPrice": str(self.total)
        }


class CartStore:
    """Persists a cart as JSON in a file"""
    
    def __init__(self, path: str = DEFAULT_CART_FILE):
        self.path = path
    
    def load(self) -> Cart:
        """Load the saved cart, or an empty one if nothing was saved"""
        if not os.path.exists(self.path):
            return Cart()
        with open(self.path, "r", encoding="utf-8") as f:
            return Cart.model_validate_json(f.read())
    
    def save(self, cart: Cart) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(cart.model_dump_json())
