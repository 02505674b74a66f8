"""Review listings."""

from protean.utils.globals import current_domain

from marketplace.catalogue.browsing import products_of_seller
from marketplace.reviews.review.review import Review


def _newest_first(reviews):
    return sorted(reviews, key=lambda r: r.created_at, reverse=True)


def all_reviews():
    return _newest_first(current_domain.repository_for(Review)._dao.query.limit(None).all().items)


def reviews_for_product(product_id):
    return _newest_first(
        current_domain.repository_for(Review)._dao.query.filter(product_id=str(product_id)).limit(None).all().items
    )


def reviews_for_seller(seller_id):
    """Reviews of every product the seller owns."""
    dao = current_domain.repository_for(Review)._dao
    reviews = []
    for product in products_of_seller(seller_id):
        reviews.extend(dao.query.filter(product_id=str(product.id)).limit(None).all().items)
    return _newest_first(reviews)
