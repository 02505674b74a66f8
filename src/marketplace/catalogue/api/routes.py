"""FastAPI endpoints for the catalogue: categories, products and seller links."""

from fastapi import APIRouter, Depends, Response
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from marketplace.catalogue.api.schemas import (
    CategoryRequest,
    CategoryResponse,
    IdResponse,
    ProductRequest,
    ProductResponse,
    StatusResponse,
    UserCategoryRequest,
    UserCategoryResponse,
)
from marketplace.catalogue.browsing import (
    all_categories,
    all_products,
    all_seller_categories,
    categories_by_parent,
    categories_of_seller,
    products_of_seller,
)
from marketplace.catalogue.category.category import Category
from marketplace.catalogue.category.management import CreateCategory, DeleteCategory, UpdateCategory
from marketplace.catalogue.product.management import CreateProduct, DeleteProduct, UpdateProduct
from marketplace.catalogue.product.product import Product
from marketplace.catalogue.seller_category.link import find_link, links_of_seller
from marketplace.catalogue.seller_category.management import (
    LinkSellerCategory,
    UnlinkSellerCategory,
    UpdateSellerCategory,
)
from marketplace.identity.account import Account
from marketplace.identity.api.dependencies import get_principal, get_seller
from marketplace.shared.access import Principal, require_self


def _ensure_same_id(path_id: str, body_id: str | None) -> None:
    if body_id is not None and str(body_id) != str(path_id):
        raise ValidationError({"id": ["ID mismatch"]})


def _category_response(category: Category) -> CategoryResponse:
    return CategoryResponse(
        id=str(category.id),
        name=category.name,
        description=category.description,
        parent_category_id=str(category.parent_category_id) if category.parent_category_id else None,
    )


def _lookup(cls, identifier, cache):
    key = (cls.__name__, str(identifier))
    if key not in cache:
        try:
            cache[key] = current_domain.repository_for(cls).get(identifier)
        except ObjectNotFoundError:
            cache[key] = None
    return cache[key]


def _product_response(product: Product, cache: dict | None = None) -> ProductResponse:
    cache = {} if cache is None else cache
    category = _lookup(Category, product.category_id, cache)
    seller = _lookup(Account, product.seller_id, cache)
    return ProductResponse(
        id=str(product.id),
        name=product.name,
        description=product.description,
        price=product.price,
        category_id=str(product.category_id),
        category_name=category.name if category else None,
        seller_id=str(product.seller_id),
        seller_username=seller.username if seller else None,
        is_available=product.is_available,
        image=product.image,
        created_at=product.created_at,
    )


def _product_list(products) -> list[ProductResponse]:
    cache: dict = {}
    return [_product_response(p, cache) for p in products]


# ---------------------------------------------------------------------------
# Category Router
# ---------------------------------------------------------------------------
category_router = APIRouter(prefix="/api/category", tags=["categories"])


@category_router.get("", response_model=list[CategoryResponse])
async def list_categories() -> list[CategoryResponse]:
    return [_category_response(c) for c in all_categories()]


@category_router.get("/seller", response_model=list[CategoryResponse])
async def list_my_categories(principal: Principal = Depends(get_seller)) -> list[CategoryResponse]:
    return [_category_response(c) for c in categories_of_seller(principal.id)]


@category_router.get("/parent/{parent_id}", response_model=list[CategoryResponse])
async def list_subcategories(parent_id: str) -> list[CategoryResponse]:
    return [_category_response(c) for c in categories_by_parent(parent_id)]


@category_router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(category_id: str) -> CategoryResponse:
    return _category_response(current_domain.repository_for(Category).get(category_id))


@category_router.post("", status_code=201, response_model=CategoryResponse)
async def create_category(body: CategoryRequest, principal: Principal = Depends(get_seller)) -> CategoryResponse:
    command = CreateCategory(
        seller_id=principal.id,
        name=body.name,
        description=body.description,
        parent_category_id=body.parent_category_id,
    )
    category_id = current_domain.process(command, asynchronous=False)
    return _category_response(current_domain.repository_for(Category).get(category_id))


@category_router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: str, body: CategoryRequest, principal: Principal = Depends(get_seller)
) -> CategoryResponse:
    _ensure_same_id(category_id, body.id)
    command = UpdateCategory(
        seller_id=principal.id,
        category_id=category_id,
        name=body.name,
        description=body.description,
        parent_category_id=body.parent_category_id,
    )
    current_domain.process(command, asynchronous=False)
    return _category_response(current_domain.repository_for(Category).get(category_id))


@category_router.delete("/{category_id}", status_code=204, response_class=Response)
async def delete_category(category_id: str, principal: Principal = Depends(get_seller)) -> Response:
    current_domain.process(DeleteCategory(seller_id=principal.id, category_id=category_id), asynchronous=False)
    return Response(status_code=204)


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/api/product", tags=["products"])


@product_router.get("", response_model=list[ProductResponse])
async def list_products(category_id: str | None = None, available: bool = False) -> list[ProductResponse]:
    return _product_list(all_products(category_id=category_id, available_only=available))


@product_router.get("/mine", response_model=list[ProductResponse])
async def list_my_products(principal: Principal = Depends(get_seller)) -> list[ProductResponse]:
    return _product_list(products_of_seller(principal.id))


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    return _product_response(current_domain.repository_for(Product).get(product_id))


@product_router.post("", status_code=201, response_model=ProductResponse)
async def create_product(body: ProductRequest, principal: Principal = Depends(get_seller)) -> ProductResponse:
    command = CreateProduct(
        seller_id=principal.id,
        name=body.name,
        description=body.description,
        price=body.price,
        category_id=body.category_id,
        is_available=body.is_available,
        image=body.image,
    )
    product_id = current_domain.process(command, asynchronous=False)
    return _product_response(current_domain.repository_for(Product).get(product_id))


@product_router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str, body: ProductRequest, principal: Principal = Depends(get_seller)
) -> ProductResponse:
    _ensure_same_id(product_id, body.id)
    command = UpdateProduct(
        seller_id=principal.id,
        product_id=product_id,
        name=body.name,
        description=body.description,
        price=body.price,
        category_id=body.category_id,
        is_available=body.is_available,
        image=body.image,
    )
    current_domain.process(command, asynchronous=False)
    return _product_response(current_domain.repository_for(Product).get(product_id))


@product_router.delete("/{product_id}", status_code=204, response_class=Response)
async def delete_product(product_id: str, principal: Principal = Depends(get_seller)) -> Response:
    current_domain.process(DeleteProduct(seller_id=principal.id, product_id=product_id), asynchronous=False)
    return Response(status_code=204)


# ---------------------------------------------------------------------------
# UserCategory Router
# ---------------------------------------------------------------------------
user_category_router = APIRouter(prefix="/api/usercategory", tags=["user-categories"])


def _link_response(link) -> UserCategoryResponse:
    return UserCategoryResponse(user_id=str(link.user_id), category_id=str(link.category_id))


@user_category_router.get("", response_model=list[UserCategoryResponse])
async def list_user_categories(
    principal: Principal = Depends(get_principal),  # noqa: ARG001
) -> list[UserCategoryResponse]:
    return [_link_response(link) for link in all_seller_categories()]


@user_category_router.get("/my", response_model=list[UserCategoryResponse])
async def list_my_user_categories(principal: Principal = Depends(get_seller)) -> list[UserCategoryResponse]:
    return [_link_response(link) for link in links_of_seller(principal.id)]


@user_category_router.get("/{user_id}/{category_id}", response_model=UserCategoryResponse)
async def get_user_category(
    user_id: str, category_id: str, principal: Principal = Depends(get_principal)  # noqa: ARG001
) -> UserCategoryResponse:
    link = find_link(user_id, category_id)
    if link is None:
        raise ObjectNotFoundError(f"Seller {user_id} is not linked to category {category_id}")
    return _link_response(link)


@user_category_router.post("", status_code=201, response_model=IdResponse)
async def create_user_category(body: UserCategoryRequest, principal: Principal = Depends(get_seller)) -> IdResponse:
    require_self(principal, body.user_id)
    link_id = current_domain.process(
        LinkSellerCategory(user_id=body.user_id, category_id=body.category_id),
        asynchronous=False,
    )
    return IdResponse(id=link_id)


@user_category_router.put("/{user_id}/{category_id}", response_model=StatusResponse)
async def update_user_category(
    user_id: str, category_id: str, body: UserCategoryRequest, principal: Principal = Depends(get_seller)
) -> StatusResponse:
    require_self(principal, user_id)
    command = UpdateSellerCategory(
        user_id=user_id,
        category_id=category_id,
        new_user_id=body.user_id,
        new_category_id=body.category_id,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@user_category_router.delete("/{user_id}/{category_id}", status_code=204, response_class=Response)
async def delete_user_category(user_id: str, category_id: str, principal: Principal = Depends(get_seller)) -> Response:
    require_self(principal, user_id)
    current_domain.process(UnlinkSellerCategory(user_id=user_id, category_id=category_id), asynchronous=False)
    return Response(status_code=204)
