"""Pydantic request/response schemas for the Ordering API."""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Cart / order items
# ---------------------------------------------------------------------------
class AddToCartRequest(BaseModel):
    product_id: str
    quantity: int = Field(ge=1, default=1)


class UpdateItemStatusRequest(BaseModel):
    status: str = Field(min_length=1, max_length=20)

    model_config = {"json_schema_extra": {"examples": [{"status": "Shipped"}]}}


class OrderItemResponse(BaseModel):
    id: str
    order_id: str | None = None
    buyer_id: str
    seller_id: str | None = None
    product_id: str
    product_name: str | None = None
    product_image: str | None = None
    quantity: int
    unit_price: float
    status: str


class ItemStatusResponse(BaseModel):
    item_id: str
    status: str
    order_id: str | None = None
    order_status: str | None = None


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class CheckoutRequest(BaseModel):
    shipping_address: str = Field(min_length=1, max_length=500)
    total_amount: float | None = Field(default=None, ge=0)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "shipping_address": "221B Baker Street, London",
                    "total_amount": 179.8,
                }
            ]
        }
    }


class OrderResponse(BaseModel):
    id: str
    buyer_id: str
    buyer_username: str | None = None
    buyer_email: str | None = None
    created_at: datetime | None = None
    status: str
    shipping_address: str
    total_amount: float
    items: list[OrderItemResponse] = []
