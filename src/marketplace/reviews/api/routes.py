"""FastAPI routes for product reviews."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from marketplace.identity.api.dependencies import get_buyer, get_seller
from marketplace.reviews.api.schemas import CanReviewResponse, ReplyRequest, ReviewResponse, SubmitReviewRequest
from marketplace.reviews.review.eligibility import can_review
from marketplace.reviews.review.queries import all_reviews, reviews_for_product, reviews_for_seller
from marketplace.reviews.review.reply import ReplyToReview
from marketplace.reviews.review.review import Review
from marketplace.reviews.review.submission import SubmitReview
from marketplace.shared.access import Principal

review_router = APIRouter(prefix="/api/review", tags=["reviews"])


def _review_response(review: Review) -> ReviewResponse:
    return ReviewResponse(
        id=str(review.id),
        product_id=str(review.product_id),
        buyer_id=str(review.buyer_id),
        rating=review.rating,
        text=review.text,
        created_at=review.created_at,
        seller_reply=review.seller_reply,
        replied_at=review.replied_at,
    )


@review_router.get("", response_model=list[ReviewResponse])
async def list_reviews() -> list[ReviewResponse]:
    return [_review_response(r) for r in all_reviews()]


@review_router.get("/product/{product_id}", response_model=list[ReviewResponse])
async def list_product_reviews(product_id: str) -> list[ReviewResponse]:
    return [_review_response(r) for r in reviews_for_product(product_id)]


@review_router.get("/can-review/{product_id}", response_model=CanReviewResponse)
async def check_can_review(product_id: str, principal: Principal = Depends(get_buyer)) -> CanReviewResponse:
    return CanReviewResponse(product_id=product_id, can_review=can_review(principal.id, product_id))


@review_router.get("/seller", response_model=list[ReviewResponse])
async def list_seller_reviews(principal: Principal = Depends(get_seller)) -> list[ReviewResponse]:
    return [_review_response(r) for r in reviews_for_seller(principal.id)]


@review_router.post("", status_code=201, response_model=ReviewResponse)
async def submit_review(body: SubmitReviewRequest, principal: Principal = Depends(get_buyer)) -> ReviewResponse:
    command = SubmitReview(
        buyer_id=principal.id,
        product_id=body.product_id,
        rating=body.rating,
        text=body.text,
    )
    review_id = current_domain.process(command, asynchronous=False)
    return _review_response(current_domain.repository_for(Review).get(review_id))


@review_router.put("/{review_id}/reply", response_model=ReviewResponse)
async def reply_to_review(
    review_id: str, body: ReplyRequest, principal: Principal = Depends(get_seller)
) -> ReviewResponse:
    command = ReplyToReview(
        review_id=review_id,
        seller_id=principal.id,
        reply=body.reply,
    )
    current_domain.process(command, asynchronous=False)
    return _review_response(current_domain.repository_for(Review).get(review_id))
