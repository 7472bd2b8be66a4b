"""
Order API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from storefront.api.deps import get_current_user, require_admin
from storefront.database import get_db
from storefront.exceptions import InvalidStatusTransitionError
from storefront.models.user import User
from storefront.services.order_service import OrderService
from storefront.schemas.order import (
    OrderCreate,
    OrderStatusUpdate,
    OrderResponse,
    OrderDetailResponse
)

router = APIRouter(prefix="/orders", tags=["orders"])


def get_order_service(db: Session = Depends(get_db)) -> OrderService:
    """Dependency to get OrderService instance"""
    return OrderService(db)


@router.get("", response_model=List[OrderResponse], summary="Get orders")
def get_orders(
    user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service)
):
    """Own orders for customers, every order for admins"""
    return service.get_orders_for(user)


@router.get("/{order_id}", response_model=OrderDetailResponse, summary="Get order with items")
def get_order(
    order_id: str,
    user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service)
):
    order = service.get_order_for(order_id, user)
    if not order:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Order not found"
        )
    return order


@router.post("", response_model=OrderResponse, summary="Place order")
def create_order(
    order_data: OrderCreate,
    user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service)
):
    """
    Place a new order
    
    Process:
    1. Reject an empty item list
    2. Save the order header and its items in one transaction
    3. Return the order header
    
    - **items**: list of productId, quantity and unit price (required, non-empty)
    - **totalPrice**: order total as shown to the customer (required)
    """
    return service.place_order(order_data, user)


@router.put(
    "/{order_id}/status",
    response_model=OrderResponse,
    dependencies=[Depends(require_admin)],
    summary="Update order status"
)
def update_order_status(
    order_id: str,
    status_data: OrderStatusUpdate,
    service: OrderService = Depends(get_order_service)
):
    """
    Update order status (admin only)
    
    - **status**: pending, processing, shipped, delivered or cancelled
    """
    try:
        order = service.update_order_status(order_id, status_data.status)
    except InvalidStatusTransitionError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )
    if not order:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Order not found"
        )
    return order
