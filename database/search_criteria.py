"""Normalized search criteria for the movie catalog"""
from dataclasses import dataclass
from typing import Optional


def _clean_text(value):
    """Trim a text parameter, blank or missing becomes None"""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


@dataclass(frozen=True)
class SearchCriteria:
    """
    Search criteria with every absent criterion held as None.

    A criterion is supplied when it is not None and, for text,
    not blank after trimming. Supplied criteria combine with AND.
    """
    name: Optional[str] = None
    movie_id: Optional[int] = None
    genre: Optional[str] = None

    @classmethod
    def from_params(cls, name=None, movie_id=None, genre=None):
        return cls(
            name=_clean_text(name),
            movie_id=movie_id,
            genre=_clean_text(genre)
        )

    def is_empty(self):
        return self.name is None and self.movie_id is None and self.genre is None

    def matches(self, movie):
        if self.name is not None and self.name.lower() not in movie.name.lower():
            return False

        if self.movie_id is not None and movie.id != self.movie_id:
            return False

        # Exact genre: "Drama" must not match "Crime/Drama"
        if self.genre is not None and movie.genre.lower() != self.genre.lower():
            return False

        return True

    def describe(self, result_count):
        """
        Build the summary line shown above search results

        Args:
            result_count: number of movies found

        Returns:
            str: e.g. "Searched for movies with name containing 'the'. Found 3 movies."
        """
        parts = []
        if self.name is not None:
            parts.append(f"with name containing '{self.name}'")
        if self.movie_id is not None:
            parts.append(f"with ID {self.movie_id}")
        if self.genre is not None:
            parts.append(f"in genre '{self.genre}'")

        summary = "Searched for movies"
        if parts:
            summary += " " + " and ".join(parts)

        noun = "movie" if result_count == 1 else "movies"
        return f"{summary}. Found {result_count} {noun}."

    def to_dict(self):
        return {
            'name': self.name if self.name is not None else '',
            'id': self.movie_id if self.movie_id is not None else '',
            'genre': self.genre if self.genre is not None else ''
        }
