"""Read-side queries over the catalogue."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from marketplace.catalogue.category.category import Category
from marketplace.catalogue.product.product import Product
from marketplace.catalogue.seller_category.link import SellerCategory, links_of_seller


def _by_name(records):
    return sorted(records, key=lambda r: (r.name or "").lower())


def all_categories():
    return _by_name(current_domain.repository_for(Category)._dao.query.limit(None).all().items)


def categories_by_parent(parent_category_id):
    return _by_name(
        current_domain.repository_for(Category)
        ._dao.query.filter(parent_category_id=str(parent_category_id))
        .limit(None)
        .all()
        .items
    )


def categories_of_seller(seller_id):
    """Categories the seller is linked to."""
    repo = current_domain.repository_for(Category)
    categories = []
    for link in links_of_seller(seller_id):
        try:
            categories.append(repo.get(link.category_id))
        except ObjectNotFoundError:
            continue
    return _by_name(categories)


def all_products(category_id=None, available_only=False):
    query = current_domain.repository_for(Product)._dao.query
    if category_id:
        query = query.filter(category_id=str(category_id))
    products = query.limit(None).all().items
    if available_only:
        products = [p for p in products if p.is_available]
    return sorted(products, key=lambda p: p.created_at, reverse=True)


def products_of_seller(seller_id):
    products = (
        current_domain.repository_for(Product)._dao.query.filter(seller_id=str(seller_id)).limit(None).all().items
    )
    return sorted(products, key=lambda p: p.created_at, reverse=True)


def all_seller_categories():
    return current_domain.repository_for(SellerCategory)._dao.query.limit(None).all().items
