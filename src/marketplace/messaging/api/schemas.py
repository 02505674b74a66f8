"""Pydantic request/response schemas for the Messaging API."""

from datetime import datetime

from pydantic import BaseModel, Field


class SendMessageRequest(BaseModel):
    receiver_id: str
    content: str = Field(min_length=1, max_length=2000)
    product_id: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "receiver_id": "user-002",
                    "content": "Is this still available?",
                    "product_id": "prod-001",
                }
            ]
        }
    }


class MessageResponse(BaseModel):
    id: str
    sender_id: str
    receiver_id: str
    content: str
    product_id: str | None = None
    product_name: str | None = None
    sent_at: datetime | None = None
    is_read: bool


class ThreadResponse(BaseModel):
    product_id: str
    product_name: str
    buyer_id: str
    last_message: str
    last_date: datetime
    unread_count: int = 0
