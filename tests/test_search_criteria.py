import pytest

from database.search_criteria import SearchCriteria
from conftest import make_movie


def test_blank_text_is_not_supplied():
    criteria = SearchCriteria.from_params(name='   ', movie_id=None, genre='')

    assert criteria.name is None
    assert criteria.genre is None
    assert criteria.is_empty()


def test_text_is_trimmed():
    criteria = SearchCriteria.from_params(name='  the ', genre=' Drama\t')

    assert criteria.name == 'the'
    assert criteria.genre == 'Drama'
    assert not criteria.is_empty()


def test_id_alone_is_supplied():
    assert not SearchCriteria.from_params(movie_id=0).is_empty()


def test_empty_criteria_match_everything():
    assert SearchCriteria().matches(make_movie(1, 'Anything', 'Drama'))


@pytest.mark.parametrize('criteria, expected', [
    (SearchCriteria(name='family'), True),
    (SearchCriteria(name='FAMILY BOSS'), True),
    (SearchCriteria(name='prison'), False),
    (SearchCriteria(movie_id=2), True),
    (SearchCriteria(movie_id=3), False),
    (SearchCriteria(genre='crime/drama'), True),
    (SearchCriteria(genre='Drama'), False),
    (SearchCriteria(name='boss', movie_id=2, genre='Crime/Drama'), True),
    (SearchCriteria(name='boss', movie_id=1, genre='Crime/Drama'), False),
])
def test_matches(criteria, expected):
    movie = make_movie(2, 'The Family Boss', 'Crime/Drama')

    assert criteria.matches(movie) is expected


def test_describe_single_criterion():
    criteria = SearchCriteria.from_params(name='the')

    assert criteria.describe(3) == "Searched for movies with name containing 'the'. Found 3 movies."


def test_describe_all_criteria_singular():
    criteria = SearchCriteria.from_params(name='prison', movie_id=1, genre='Drama')

    assert criteria.describe(1) == (
        "Searched for movies with name containing 'prison' and with ID 1 "
        "and in genre 'Drama'. Found 1 movie."
    )


def test_describe_no_results():
    assert SearchCriteria(genre='Horror').describe(0) == "Searched for movies in genre 'Horror'. Found 0 movies."


def test_to_dict_renders_absent_values_as_empty():
    assert SearchCriteria.from_params(name=' the ').to_dict() == {'name': 'the', 'id': '', 'genre': ''}
    assert SearchCriteria(movie_id=1, genre='Drama').to_dict() == {'name': '', 'id': 1, 'genre': 'Drama'}
