"""SubmitReview: a buyer reviews a product they have bought."""

import structlog
from protean.fields import Identifier, Integer, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from marketplace.catalogue.product.product import Product
from marketplace.domain import marketplace
from marketplace.reviews.review.eligibility import can_review
from marketplace.reviews.review.review import Review
from marketplace.shared.errors import AccessDenied

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="Review")
class SubmitReview:
    buyer_id = Identifier(required=True)
    product_id = Identifier(required=True)
    rating = Integer(required=True)
    text = Text(required=True)


@marketplace.command_handler(part_of=Review)
class SubmitReviewHandler:
    @handle(SubmitReview)
    def submit_review(self, command):
        current_domain.repository_for(Product).get(command.product_id)

        if not can_review(command.buyer_id, command.product_id):
            raise AccessDenied("You can review a product only after your order item is completed or canceled")

        review = Review.submit(
            product_id=command.product_id,
            buyer_id=command.buyer_id,
            rating=command.rating,
            text=command.text,
        )
        current_domain.repository_for(Review).add(review)
        logger.info(
            "Review submitted",
            review_id=str(review.id),
            product_id=str(command.product_id),
            rating=command.rating,
        )
        return str(review.id)
