"""Movie reviews loaded from a static JSON file"""
import json
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class ReviewDataError(ValueError):
    """Raised when the review data file is malformed"""


@dataclass(frozen=True)
class Review:
    movie_id: int
    user_name: str
    avatar: str
    rating: float
    comment: str

    def to_dict(self):
        return {
            'movieId': self.movie_id,
            'userName': self.user_name,
            'avatar': self.avatar,
            'rating': self.rating,
            'comment': self.comment
        }


class ReviewStore:

    def __init__(self, reviews):
        grouped = {}
        for review in reviews:
            grouped.setdefault(review.movie_id, []).append(review)
        self._by_movie = {movie_id: tuple(items) for movie_id, items in grouped.items()}

    def get_reviews_for_movie(self, movie_id):
        return self._by_movie.get(movie_id, ())

    def average_rating(self, movie_id):
        """
        Mean review rating for a movie

        Returns:
            float rounded to one decimal, or None without reviews
        """
        reviews = self.get_reviews_for_movie(movie_id)
        if not reviews:
            return None
        return round(sum(review.rating for review in reviews) / len(reviews), 1)


def load_reviews(path):
    try:
        with open(path, 'r', encoding='utf-8') as f:
            records = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ReviewDataError(f"Cannot read review data from {path}: {e}") from e

    if not isinstance(records, list):
        raise ReviewDataError("Review data must be a JSON list")

    reviews = []
    for position, record in enumerate(records, start=1):
        try:
            reviews.append(Review(
                movie_id=int(record['movieId']),
                user_name=record['userName'],
                avatar=record.get('avatar', ''),
                rating=float(record['rating']),
                comment=record.get('comment', '')
            ))
        except (KeyError, TypeError, ValueError) as e:
            raise ReviewDataError(f"Review #{position} is invalid: {e}") from e

    logger.info(f"Loaded {len(reviews)} reviews from {path}")
    return ReviewStore(reviews)
