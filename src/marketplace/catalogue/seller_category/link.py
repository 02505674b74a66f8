"""SellerCategory aggregate: a seller operating in a category."""

from datetime import UTC, datetime

from protean.fields import DateTime, Identifier
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.catalogue.seller_category.events import SellerCategoryLinked


@marketplace.aggregate
class SellerCategory:
    """Association between a seller and a category, unique per pair."""

    user_id: Identifier(required=True)
    category_id: Identifier(required=True)
    linked_at: DateTime(default=lambda: datetime.now(UTC))

    @classmethod
    def link(cls, user_id, category_id):
        link = cls(user_id=user_id, category_id=category_id)
        link.raise_(SellerCategoryLinked(user_id=user_id, category_id=category_id))
        return link


def find_link(user_id, category_id):
    """Return the link between `user_id` and `category_id`, or None."""
    matches = (
        current_domain.repository_for(SellerCategory)
        ._dao.query.filter(user_id=str(user_id), category_id=str(category_id))
        .limit(None)
        .all()
        .items
    )
    return matches[0] if matches else None


def links_of_category(category_id):
    return (
        current_domain.repository_for(SellerCategory)
        ._dao.query.filter(category_id=str(category_id))
        .limit(None)
        .all()
        .items
    )


def links_of_seller(user_id):
    return (
        current_domain.repository_for(SellerCategory)
        ._dao.query.filter(user_id=str(user_id))
        .limit(None)
        .all()
        .items
    )
