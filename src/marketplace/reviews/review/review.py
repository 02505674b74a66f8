"""Review aggregate: a buyer's rating of a product, with an optional seller reply."""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer, Text

from marketplace.domain import marketplace
from marketplace.reviews.review.events import ReviewSubmitted, SellerReplied


@marketplace.aggregate
class Review:
    """A star rating and comment left by a buyer who has purchased the product."""

    product_id = Identifier(required=True)
    buyer_id = Identifier(required=True)
    rating = Integer(required=True)
    text = Text(required=True)
    created_at = DateTime(default=lambda: datetime.now(UTC))
    seller_reply = Text()
    replied_at = DateTime()

    @invariant.post
    def rating_must_be_in_range(self):
        if self.rating is not None and (self.rating < 1 or self.rating > 5):
            raise ValidationError({"rating": ["Rating must be between 1 and 5"]})

    @invariant.post
    def text_must_not_be_blank(self):
        if self.text is not None and not self.text.strip():
            raise ValidationError({"text": ["Review text cannot be blank"]})

    @classmethod
    def submit(cls, product_id, buyer_id, rating, text):
        now = datetime.now(UTC)
        review = cls(
            product_id=product_id,
            buyer_id=buyer_id,
            rating=rating,
            text=text,
            created_at=now,
        )
        review.raise_(
            ReviewSubmitted(
                review_id=review.id,
                product_id=product_id,
                buyer_id=buyer_id,
                rating=rating,
                submitted_at=now,
            )
        )
        return review

    def reply(self, seller_id, body):
        """Set the seller's reply, replacing any earlier one."""
        if not body or not body.strip():
            raise ValidationError({"reply": ["Reply cannot be blank"]})

        now = datetime.now(UTC)
        self.seller_reply = body
        self.replied_at = now

        self.raise_(
            SellerReplied(
                review_id=self.id,
                product_id=self.product_id,
                seller_id=seller_id,
                replied_at=now,
            )
        )
