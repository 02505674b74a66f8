"""ReplyToReview: the product's seller answers a review.

A later reply replaces the earlier one.
"""

from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from marketplace.catalogue.product.product import Product
from marketplace.domain import marketplace
from marketplace.reviews.review.review import Review
from marketplace.shared.errors import AccessDenied


@marketplace.command(part_of="Review")
class ReplyToReview:
    review_id = Identifier(required=True)
    seller_id = Identifier(required=True)
    reply = Text(required=True)


@marketplace.command_handler(part_of=Review)
class ReplyToReviewHandler:
    @handle(ReplyToReview)
    def reply_to_review(self, command):
        repo = current_domain.repository_for(Review)
        review = repo.get(command.review_id)

        try:
            product = current_domain.repository_for(Product).get(review.product_id)
        except ObjectNotFoundError:
            raise AccessDenied("Only the seller of the product can reply") from None

        if str(product.seller_id) != str(command.seller_id):
            raise AccessDenied("Only the seller of the product can reply")

        review.reply(seller_id=command.seller_id, body=command.reply)
        repo.add(review)
