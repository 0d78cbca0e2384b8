"""Review controller — user_review_count and experience rating aggregation.

Invariants:
    - user_review_count is the number of reviews sharing the review's email
    - After every write the experience's ratings are the per-field mean over all
      of its reviews, review_count their number, rating the mean of the fields
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from trisog.controllers.common import (
    DELETED, found, require_object_id, require_user_id,
)
from trisog.core.errors import ReferenceNotFoundError, ResourceNotFoundError
from trisog.core.ratings import aggregate_ratings, calculate_average_rating
from trisog.core.validation import parse_payload
from trisog.models.experience import Experience
from trisog.models.review import Review
from trisog.schemas.review import ReviewResponse, ReviewUpsert
from trisog.services.base import commit_changes
from trisog.services.experiences import ExperienceService
from trisog.services.reviews import ReviewService

_UNKNOWN_EXPERIENCE = (
    "The specified experience does not exist, please choose a valid experience"
)


async def _with_counts(
    service: ReviewService, reviews: list[Review],
) -> list[ReviewResponse]:
    counts = await service.email_counts(r.email for r in reviews)
    responses = []
    for review in reviews:
        response = ReviewResponse.model_validate(review)
        response.user_review_count = counts.get(review.email, 0)
        responses.append(response)
    return responses


async def _existing_experience(db: AsyncSession, experience_id: str) -> Experience:
    require_object_id(experience_id, "experience")
    experience = await ExperienceService(db).get_by_id(experience_id)
    if experience is None:
        raise ReferenceNotFoundError(_UNKNOWN_EXPERIENCE)
    return experience


async def _reaggregate(db: AsyncSession, experience: Experience) -> None:
    review_ratings = await ReviewService(db).ratings_for_experience(experience.id)
    ratings, count = aggregate_ratings(review_ratings)
    experience.ratings = ratings
    experience.review_count = count
    experience.rating = calculate_average_rating(ratings)


async def list_reviews(db: AsyncSession) -> list[ReviewResponse]:
    service = ReviewService(db)
    return await _with_counts(service, await service.list_all())


async def get_review(db: AsyncSession, review_id: str) -> ReviewResponse:
    require_object_id(review_id, "review")
    service = ReviewService(db)
    review = found(await service.get_by_id(review_id), "review", review_id)
    [response] = await _with_counts(service, [review])
    return response


async def list_reviews_by_experience(
    db: AsyncSession, experience_id: str,
) -> list[ReviewResponse]:
    await _existing_experience(db, experience_id)
    service = ReviewService(db)
    reviews = await service.list_by_experience(experience_id)
    if not reviews:
        raise ResourceNotFoundError()
    return await _with_counts(service, reviews)


async def create_review(
    db: AsyncSession, user_id: str, body: Any,
) -> ReviewResponse:
    require_user_id(user_id)
    payload = parse_payload(ReviewUpsert, body)
    experience = await _existing_experience(db, payload.experience_id)
    service = ReviewService(db)
    review = await service.create(**payload.model_dump())
    await _reaggregate(db, experience)
    await commit_changes(db)
    [response] = await _with_counts(service, [review])
    return response


async def update_review(
    db: AsyncSession, user_id: str, review_id: str, body: Any,
) -> ReviewResponse:
    require_user_id(user_id)
    require_object_id(review_id, "review")
    service = ReviewService(db)
    review = found(await service.get_by_id(review_id), "review", review_id)
    payload = parse_payload(ReviewUpsert, body)
    experience = await _existing_experience(db, payload.experience_id)
    previous_experience_id = review.experience_id

    await service.update(review, **payload.model_dump())
    await _reaggregate(db, experience)
    if previous_experience_id != experience.id:
        previous = await ExperienceService(db).get_by_id(previous_experience_id)
        if previous is not None:
            await _reaggregate(db, previous)
    await commit_changes(db)
    [response] = await _with_counts(service, [review])
    return response


async def delete_review(
    db: AsyncSession, user_id: str, review_id: str,
) -> dict:
    require_user_id(user_id)
    require_object_id(review_id, "review")
    service = ReviewService(db)
    review = found(await service.get_by_id(review_id), "review", review_id)
    experience_id = review.experience_id
    await service.delete(review)
    experience = await ExperienceService(db).get_by_id(experience_id)
    if experience is not None:
        await _reaggregate(db, experience)
    await commit_changes(db)
    return DELETED
