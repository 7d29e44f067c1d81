"""Review aggregation: attach a review and recompute the product rating."""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from pydantic import ValidationError

from .catalog import CatalogRepository
from .errors import ValidationFailed
from .schemas import Product, Review, timestamp_id

logger = logging.getLogger(__name__)

ANONYMOUS = "Anonymous"

# Review dates are shown in the store's fixed ru-RU locale
DATE_FORMAT = "%d.%m.%Y"


def average_rating(reviews: list[Review]) -> float:
    """Mean review rating rounded half-up to one decimal place.

    [5, 5, 4] -> 4.7, [4, 4, 5, 4] -> 4.3, [1, 2] -> 1.5. Callers must pass at
    least one review.
    """
    total = Decimal(sum(r.rating for r in reviews))
    mean = total / Decimal(len(reviews))
    return float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def new_review(
    user_name: str,
    rating: int,
    comment: str,
    image_url: str | None = None,
    now: datetime | None = None,
) -> Review:
    """Build a review from form input.

    Raises:
        ValidationFailed: If rating is not an integer from 1 to 5.
    """
    review_id = str(int(now.timestamp() * 1000)) if now else timestamp_id()
    now = now or datetime.now()
    try:
        return Review(
            id=review_id,
            user_name=user_name.strip() or ANONYMOUS,
            rating=rating,
            comment=comment,
            date=now.strftime(DATE_FORMAT),
            image_url=image_url or None,
        )
    except ValidationError:
        raise ValidationFailed("rating", "rating must be between 1 and 5") from None


class ReviewAggregator:
    """Prepends reviews to products stored by a CatalogRepository."""

    def __init__(self, catalog: CatalogRepository) -> None:
        self._catalog = catalog

    def add_review(self, product_id: str, review: Review) -> Product | None:
        """Prepend review to the first product with product_id and re-rate it.

        Returns:
            The updated product, or None (and nothing written) if no product
            has that id.
        """
        updated = None
        with self._catalog.edit_products() as products:
            index = next(
                (i for i, p in enumerate(products) if p.id == product_id), None
            )
            if index is not None:
                reviews = [review, *(products[index].reviews or [])]
                updated = products[index].model_copy(
                    update={"reviews": reviews, "rating": average_rating(reviews)}
                )
                products[index] = updated

        if updated is None:
            logger.debug("No product %s to review", product_id)
            return None

        logger.info(
            "Review %s added to %s, rating now %.1f", review.id, product_id, updated.rating
        )
        return updated
