"""FastAPI routes for ordering: cart items, item status and orders."""

from fastapi import APIRouter, Depends, Response
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from marketplace.identity.account import Account
from marketplace.identity.api.dependencies import get_buyer, get_seller
from marketplace.ordering.api.schemas import (
    AddToCartRequest,
    CheckoutRequest,
    ItemStatusResponse,
    OrderItemResponse,
    OrderResponse,
    UpdateItemStatusRequest,
)
from marketplace.ordering.cart.fulfilment import UpdateItemStatus
from marketplace.ordering.cart.item import OrderItem
from marketplace.ordering.cart.items import AddToCart, RemoveFromCart, cart_of
from marketplace.ordering.order.checkout import checkout_cart
from marketplace.ordering.order.order import Order
from marketplace.ordering.order.views import OrderView, order_for_buyer, orders_for_buyer, orders_for_seller
from marketplace.shared.access import Principal


def _item_response(item: OrderItem) -> OrderItemResponse:
    return OrderItemResponse(
        id=str(item.id),
        order_id=str(item.order_id) if item.order_id else None,
        buyer_id=str(item.buyer_id),
        seller_id=str(item.seller_id) if item.seller_id else None,
        product_id=str(item.product_id),
        product_name=item.product_name,
        product_image=item.product_image,
        quantity=item.quantity,
        unit_price=item.unit_price,
        status=item.status,
    )


def _order_response(view: OrderView, buyers: dict | None = None) -> OrderResponse:
    buyers = {} if buyers is None else buyers
    order = view.order
    buyer_id = str(order.buyer_id)
    if buyer_id not in buyers:
        try:
            buyers[buyer_id] = current_domain.repository_for(Account).get(buyer_id)
        except ObjectNotFoundError:
            buyers[buyer_id] = None
    buyer = buyers[buyer_id]

    return OrderResponse(
        id=str(order.id),
        buyer_id=buyer_id,
        buyer_username=buyer.username if buyer else None,
        buyer_email=buyer.email if buyer else None,
        created_at=order.created_at,
        status=order.status,
        shipping_address=order.shipping_address,
        total_amount=order.total_amount,
        items=[_item_response(i) for i in view.items],
    )


def _order_list(views) -> list[OrderResponse]:
    buyers: dict = {}
    return [_order_response(v, buyers) for v in views]


# ---------------------------------------------------------------------------
# Order item Router
# ---------------------------------------------------------------------------
order_item_router = APIRouter(prefix="/api/orderitem", tags=["order-items"])


@order_item_router.get("/cart", response_model=list[OrderItemResponse])
async def list_cart(principal: Principal = Depends(get_buyer)) -> list[OrderItemResponse]:
    return [_item_response(i) for i in cart_of(principal.id)]


@order_item_router.post("/cart", status_code=201, response_model=OrderItemResponse)
async def add_to_cart(body: AddToCartRequest, principal: Principal = Depends(get_buyer)) -> OrderItemResponse:
    command = AddToCart(
        buyer_id=principal.id,
        product_id=body.product_id,
        quantity=body.quantity,
    )
    item_id = current_domain.process(command, asynchronous=False)
    return _item_response(current_domain.repository_for(OrderItem).get(item_id))


@order_item_router.delete("/cart/{item_id}", status_code=204, response_class=Response)
async def remove_from_cart(item_id: str, principal: Principal = Depends(get_buyer)) -> Response:
    current_domain.process(RemoveFromCart(buyer_id=principal.id, item_id=item_id), asynchronous=False)
    return Response(status_code=204)


@order_item_router.put("/{item_id}/status", response_model=ItemStatusResponse)
async def update_item_status(
    item_id: str, body: UpdateItemStatusRequest, principal: Principal = Depends(get_seller)
) -> ItemStatusResponse:
    command = UpdateItemStatus(
        seller_id=principal.id,
        item_id=item_id,
        status=body.status,
    )
    current_domain.process(command, asynchronous=False)

    item = current_domain.repository_for(OrderItem).get(item_id)
    order_status = None
    if item.order_id:
        order_status = current_domain.repository_for(Order).get(item.order_id).status
    return ItemStatusResponse(
        item_id=str(item.id),
        status=item.status,
        order_id=str(item.order_id) if item.order_id else None,
        order_status=order_status,
    )


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/api/order", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderResponse)
async def create_order(body: CheckoutRequest, principal: Principal = Depends(get_buyer)) -> OrderResponse:
    order_id = checkout_cart(
        buyer_id=principal.id,
        shipping_address=body.shipping_address,
        total_amount=body.total_amount,
    )
    return _order_response(order_for_buyer(order_id, principal.id))


@order_router.get("/seller", response_model=list[OrderResponse])
async def list_seller_orders(principal: Principal = Depends(get_seller)) -> list[OrderResponse]:
    return _order_list(orders_for_seller(principal.id))


@order_router.get("/my", response_model=list[OrderResponse])
async def list_my_orders(principal: Principal = Depends(get_buyer)) -> list[OrderResponse]:
    return _order_list(orders_for_buyer(principal.id))


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str, principal: Principal = Depends(get_buyer)) -> OrderResponse:
    return _order_response(order_for_buyer(order_id, principal.id))
