"""Domain events for the Review aggregate."""

from protean.fields import DateTime, Identifier, Integer

from marketplace.domain import marketplace


@marketplace.event(part_of="Review")
class ReviewSubmitted:
    """A buyer reviewed a product they purchased."""

    __version__ = 1

    review_id = Identifier(required=True)
    product_id = Identifier(required=True)
    buyer_id = Identifier(required=True)
    rating = Integer(required=True)
    submitted_at = DateTime(required=True)


@marketplace.event(part_of="Review")
class SellerReplied:
    """The seller of the reviewed product answered the review."""

    __version__ = 1

    review_id = Identifier(required=True)
    product_id = Identifier(required=True)
    seller_id = Identifier(required=True)
    replied_at = DateTime(required=True)
