import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from database.movies_db import Movie, MovieCatalog
from database.reviews_db import Review, ReviewStore


def make_movie(movie_id, name, genre, **overrides):
    fields = {
        'id': movie_id,
        'name': name,
        'director': 'Test Director',
        'year': 1994,
        'genre': genre,
        'description': 'Test description',
        'duration': 120,
        'rating': 4.5
    }
    fields.update(overrides)
    return Movie(**fields)


@pytest.fixture
def movies():
    return [
        make_movie(1, 'The Prison Escape', 'Drama'),
        make_movie(2, 'The Family Boss', 'Crime/Drama', year=1972),
        make_movie(5, 'Life Journey', 'Drama'),
    ]


@pytest.fixture
def catalog(movies):
    return MovieCatalog(movies)


@pytest.fixture
def reviews():
    return ReviewStore([
        Review(movie_id=1, user_name='Alex', avatar='🧑', rating=5.0, comment='Great'),
        Review(movie_id=1, user_name='Sam', avatar='👩', rating=4.0, comment='Good'),
    ])


@pytest.fixture
def client(catalog, reviews):
    from app import create_app

    flask_app = create_app(catalog=catalog, reviews=reviews)
    flask_app.config['TESTING'] = True
    with flask_app.test_client() as client:
        yield client
