"""Domain events for the SellerCategory aggregate."""

from protean.fields import Identifier

from marketplace.domain import marketplace


@marketplace.event(part_of="SellerCategory")
class SellerCategoryLinked:
    """A seller started operating in a category."""

    __version__ = 1

    user_id: Identifier(required=True)
    category_id: Identifier(required=True)
