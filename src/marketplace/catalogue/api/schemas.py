"""Pydantic request/response schemas for the Catalogue API."""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Category
# ---------------------------------------------------------------------------
class CategoryRequest(BaseModel):
    id: str | None = None
    name: str = Field(min_length=1, max_length=100)
    description: str | None = None
    parent_category_id: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Laptops",
                    "description": "Portable computers",
                    "parent_category_id": None,
                }
            ]
        }
    }


class CategoryResponse(BaseModel):
    id: str
    name: str
    description: str | None = None
    parent_category_id: str | None = None


# ---------------------------------------------------------------------------
# Product
# ---------------------------------------------------------------------------
class ProductRequest(BaseModel):
    id: str | None = None
    name: str = Field(min_length=1, max_length=200)
    description: str | None = None
    price: float = Field(ge=0)
    category_id: str
    is_available: bool = True
    image: str | None = Field(default=None, description="Base64-encoded image payload")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Mechanical keyboard",
                    "description": "87 keys, brown switches",
                    "price": 89.9,
                    "category_id": "cat-001",
                    "is_available": True,
                }
            ]
        }
    }


class ProductResponse(BaseModel):
    id: str
    name: str
    description: str | None = None
    price: float
    category_id: str
    category_name: str | None = None
    seller_id: str
    seller_username: str | None = None
    is_available: bool
    image: str | None = None
    created_at: datetime | None = None


# ---------------------------------------------------------------------------
# Seller / category links
# ---------------------------------------------------------------------------
class UserCategoryRequest(BaseModel):
    user_id: str
    category_id: str


class UserCategoryResponse(BaseModel):
    user_id: str
    category_id: str


class IdResponse(BaseModel):
    id: str


class StatusResponse(BaseModel):
    status: str = "ok"
