"""
Order Service - Business Logic Layer
"""
import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from storefront.exceptions import InvalidStatusTransitionError
from storefront.models.order import OrderStatus, can_transition
from storefront.models.user import User
from storefront.repositories.order_repository import OrderRepository
from storefront.schemas.order import OrderCreate, OrderResponse, OrderDetailResponse

logger = logging.getLogger(__name__)


class OrderService:
    """Service layer for order business logic"""
    
    def __init__(self, db: Session):
        self.repository = OrderRepository(db)
    
    def get_orders_for(self, user: User) -> List[OrderResponse]:
        """Admins see every order, everyone else only their own"""
        user_id = None if user.is_admin else user.id
        orders = self.repository.get_all(user_id=user_id)
        return [OrderResponse.model_validate(o) for o in orders]
    
    def get_order_for(self, order_id: str, user: User) -> Optional[OrderDetailResponse]:
        """Get an order with its items if the user may see it"""
        order = self.repository.get_with_items(order_id)
        if not order:
            return None
        if not user.is_admin and order.user_id != user.id:
            return None
        return OrderDetailResponse.model_validate(order)
    
    def place_order(self, order_data: OrderCreate, user: User) -> OrderResponse:
        """
        Place an order for the given user
        
        Steps:
        1. Build the order header (pending, caller's email, supplied total)
        2. Write header and items in one transaction
        3. Return the header without items
        
        The total is taken as supplied by the caller and is not recomputed
        from the items. Stock is left untouched.
        
        Args:
            order_data: Validated order payload with at least one item
            user: Authenticated caller
        
        Returns:
            Created order
        """
        order_dict = {
            'user_id': user.id,
            'total_price': order_data.total_price,
            'status': OrderStatus.PENDING.value,
            'customer_email': user.email
        }
        
        order = self.repository.create_with_items(order_dict, order_data.items)
        logger.info(
            "Order %s placed by user %s with %d item(s), total %s",
            order.id, user.id, len(order_data.items), order.total_price
        )
        return OrderResponse.model_validate(order)
    
    def update_order_status(self, order_id: str, new_status: OrderStatus) -> Optional[OrderResponse]:
        """
        Update order status
        
        Args:
            order_id: Order ID
            new_status: Target status
        
        Returns:
            Updated order or None if not found
        
        Raises:
            InvalidStatusTransitionError: If the transition table forbids the change
        """
        order = self.repository.get_by_id(order_id)
        if not order:
            return None
        
        current = OrderStatus(order.status)
        if not can_transition(current, new_status):
            raise InvalidStatusTransitionError(current.value, new_status.value)
        
        order = self.repository.update_status(order, new_status)
        logger.info("Order %s status changed: %s -> %s", order.id, current.value, order.status)
        return OrderResponse.model_validate(order)
