"""
Cart endpoints.

The visitor is identified by the ``X-User-Id`` header.

Routes:
- GET /cart - Cart with totals
- POST /cart/items - Add a tour (merges with an existing line)
- PUT /cart/items/{id} - Change quantity
- DELETE /cart/items/{id} - Remove a line
- DELETE /cart - Empty the cart

Dependencies: tourbook.application.services, tourbook.models
System role: Cart HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from tourbook.api.deps.dependencies import get_cart_service, get_current_user_id
from tourbook.api.routers.router_utils import handle_service_errors, map_one
from tourbook.application.services.cart_service import CartService
from tourbook.models.cart import AddCartItemRequest, CartResponse, UpdateCartItemRequest
from tourbook.models.common import MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cart", tags=["cart"])


@router.get("", response_model=CartResponse)
@handle_service_errors
async def get_cart(
    user_id: str = Depends(get_current_user_id),
    service: CartService = Depends(get_cart_service),
) -> CartResponse:
    return map_one(CartResponse, await service.get_cart(user_id))


@router.post("/items", response_model=CartResponse, status_code=201)
@handle_service_errors
async def add_cart_item(
    request: AddCartItemRequest,
    user_id: str = Depends(get_current_user_id),
    service: CartService = Depends(get_cart_service),
) -> CartResponse:
    """
    Add a tour to the cart.

    Raises:
        HTTPException(404): Tour not found or not active
    """
    return map_one(CartResponse, await service.add_item(user_id, request.model_dump()))


@router.put("/items/{item_id}", response_model=CartResponse)
@handle_service_errors
async def update_cart_item(
    item_id: UUID,
    request: UpdateCartItemRequest,
    user_id: str = Depends(get_current_user_id),
    service: CartService = Depends(get_cart_service),
) -> CartResponse:
    """
    Change a line's quantity.

    Raises:
        HTTPException(404): Line not in this visitor's cart
    """
    return map_one(CartResponse, await service.update_quantity(user_id, item_id, request.quantity))


@router.delete("/items/{item_id}", response_model=CartResponse)
@handle_service_errors
async def remove_cart_item(
    item_id: UUID,
    user_id: str = Depends(get_current_user_id),
    service: CartService = Depends(get_cart_service),
) -> CartResponse:
    return map_one(CartResponse, await service.remove_item(user_id, item_id))


@router.delete("", response_model=MessageResponse)
@handle_service_errors
async def clear_cart(
    user_id: str = Depends(get_current_user_id),
    service: CartService = Depends(get_cart_service),
) -> MessageResponse:
    removed = await service.clear(user_id)
    return MessageResponse(success=True, message=f"Removed {removed} item(s) from cart")
