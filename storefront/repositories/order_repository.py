"""
Order Repository - Data Access Layer
"""
from typing import List, Optional
from sqlalchemy.orm import Session, selectinload

from storefront.models.order import Order, OrderItem, OrderStatus
from storefront.schemas.order import OrderItemCreate


class OrderRepository:
    """Repository for Order aggregate operations"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_all(self, user_id: Optional[str] = None) -> List[Order]:
        """Get orders in creation order, optionally only those of one user"""
        query = self.db.query(Order)
        if user_id is not None:
            query = query.filter(Order.user_id == user_id)
        return query.order_by(Order.created_at).all()
    
    def get_by_id(self, order_id: str) -> Optional[Order]:
        """Get order by ID"""
        return self.db.query(Order).filter(Order.id == order_id).first()
    
    def get_with_items(self, order_id: str) -> Optional[Order]:
        """Get order by ID with its line items loaded"""
        return self.db.query(Order).options(
            selectinload(Order.items)
        ).filter(Order.id == order_id).first()
    
    def create_with_items(self, order_data: dict, items: List[OrderItemCreate]) -> Order:
        """
        Create an order header and all of its items in one transaction
        
        Args:
            order_data: Dictionary with order header fields
            items: Line items, written in the given order
        
        Returns:
            Created order (items not attached to the response)
        
        Raises:
            Any database error; nothing from the aggregate is persisted then
        """
        try:
            order = Order(**order_data)
            self.db.add(order)
            self.db.flush()
            
            for position, item in enumerate(items):
                self.db.add(OrderItem(
                    order_id=order.id,
                    product_id=item.product_id,
                    quantity=item.quantity,
                    price=item.price,
                    position=position
                ))
            
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        
        self.db.refresh(order)
        return order
    
    def update_status(self, order: Order, new_status: OrderStatus) -> Order:
        """Update order status"""
        order.status = new_status.value
        self.db.commit()
        self.db.refresh(order)
        return order
