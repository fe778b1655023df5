import json
import logging
from dataclasses import dataclass

from database.search_criteria import SearchCriteria

logger = logging.getLogger(__name__)


REQUIRED_FIELDS = ('movieName', 'director', 'year', 'genre', 'description', 'duration', 'imdbRating')


class MovieDataError(ValueError):
    """Raised when the movie data file cannot be turned into a catalog"""


@dataclass(frozen=True)
class Movie:
    id: int
    name: str
    director: str
    year: int
    genre: str
    description: str
    duration: int  # minutes
    rating: float

    @classmethod
    def from_dict(cls, data, movie_id):
        return cls(
            id=movie_id,
            name=data['movieName'],
            director=data['director'],
            year=int(data['year']),
            genre=data['genre'],
            description=data['description'],
            duration=int(data['duration']),
            rating=float(data['imdbRating'])
        )

    def to_dict(self):
        return {
            'id': self.id,
            'movieName': self.name,
            'director': self.director,
            'year': self.year,
            'genre': self.genre,
            'description': self.description,
            'duration': self.duration,
            'imdbRating': self.rating
        }


class MovieCatalog:
    """
    Read-only movie collection and the lookups served from it.

    Built once at startup; every query is evaluated against the same
    snapshot and none of them raise.
    """

    def __init__(self, movies):
        self._movies = tuple(movies)
        self._by_id = {}
        for movie in self._movies:
            if movie.id in self._by_id:
                raise MovieDataError(f"Duplicate movie id: {movie.id}")
            self._by_id[movie.id] = movie

        self._genres = tuple(dict.fromkeys(movie.genre for movie in self._movies))

    def __len__(self):
        return len(self._movies)

    def all_movies(self):
        return self._movies

    def get_movie_by_id(self, movie_id):
        """
        Get a single movie

        Returns:
            Movie or None when the id is missing, not positive or unknown
        """
        if isinstance(movie_id, bool) or not isinstance(movie_id, int) or movie_id <= 0:
            return None
        return self._by_id.get(movie_id)

    def get_all_genres(self):
        """Distinct genres in the order they first appear"""
        return self._genres

    def search_movies(self, name=None, movie_id=None, genre=None):
        criteria = SearchCriteria.from_params(name=name, movie_id=movie_id, genre=genre)
        return self.search(criteria)

    def search(self, criteria):
        if criteria.is_empty():
            return self._movies
        return tuple(movie for movie in self._movies if criteria.matches(movie))


def load_movies_from_file(path):
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def build_movies(records):
    """
    Turn raw JSON records into Movie objects

    Records without an "id" get their 1-based position in the list.
    """
    if not isinstance(records, list):
        raise MovieDataError("Movie data must be a JSON list")

    movies = []
    for position, record in enumerate(records, start=1):
        missing = [field for field in REQUIRED_FIELDS if field not in record]
        if missing:
            raise MovieDataError(f"Movie #{position} is missing fields: {', '.join(missing)}")

        movie_id = record.get('id', position)
        try:
            movies.append(Movie.from_dict(record, int(movie_id)))
        except (TypeError, ValueError) as e:
            raise MovieDataError(f"Movie #{position} has invalid values: {e}") from e

    return movies


def load_catalog(path):
    try:
        records = load_movies_from_file(path)
    except (OSError, json.JSONDecodeError) as e:
        raise MovieDataError(f"Cannot read movie data from {path}: {e}") from e

    catalog = MovieCatalog(build_movies(records))
    logger.info(f"Loaded {len(catalog)} movies ({len(catalog.get_all_genres())} genres) from {path}")
    return catalog
