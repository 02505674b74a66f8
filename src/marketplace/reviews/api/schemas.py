"""Pydantic request/response schemas for the Reviews API."""

from datetime import datetime

from pydantic import BaseModel, Field


class SubmitReviewRequest(BaseModel):
    product_id: str
    rating: int = Field(ge=1, le=5)
    text: str = Field(min_length=1, max_length=4000)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "product_id": "prod-001",
                    "rating": 5,
                    "text": "Arrived quickly and works as described.",
                }
            ]
        }
    }


class ReplyRequest(BaseModel):
    reply: str = Field(min_length=1, max_length=4000)


class ReviewResponse(BaseModel):
    id: str
    product_id: str
    buyer_id: str
    rating: int
    text: str
    created_at: datetime | None = None
    seller_reply: str | None = None
    replied_at: datetime | None = None


class CanReviewResponse(BaseModel):
    product_id: str
    can_review: bool
