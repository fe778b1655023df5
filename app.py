from flask import Flask, Blueprint, jsonify, request, render_template, redirect, url_for, current_app
from flask_cors import CORS
from werkzeug.exceptions import BadRequest, HTTPException
from config import Config
import logging
import re

from services.catalog_check import check_catalog

from database.movies_db import load_catalog
from database.reviews_db import load_reviews
from database.search_criteria import SearchCriteria
from utils.movie_icons import get_movie_icon

from metrics import (
    metrics_endpoint, track_request,
    CATALOG_SIZE, SEARCH_QUERY_COUNT, SEARCH_RESULTS_COUNT,
    MOVIE_VIEWS
)

ID_PATTERN = re.compile(r'-?[0-9]+')

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

NO_CRITERIA_API_MESSAGE = 'At least one search parameter (name, id, or genre) must be provided'
NO_CRITERIA_PAGE_MESSAGE = 'Please provide at least one search criterion: name, ID or genre.'
NO_RESULTS_MESSAGE = 'No movies found matching your search. Try different criteria.'

logger = logging.getLogger(__name__)

bp = Blueprint('movies', __name__)


def get_catalog():
    return current_app.extensions['movie_catalog']


def get_reviews():
    return current_app.extensions['movie_reviews']


def parse_id_param(value):
    """Blank id means "not supplied", anything else must be an integer"""
    if value is None or not value.strip():
        return None
    # ASCII digits with an optional leading minus
    if not ID_PATTERN.fullmatch(value.strip()):
        raise BadRequest(f"Invalid movie id: {value!r}")
    return int(value.strip())


def read_search_params():
    name = request.args.get('name')
    genre = request.args.get('genre')
    movie_id = parse_id_param(request.args.get('id'))
    return name, movie_id, genre


@bp.route('/')
def home():
    return redirect(url_for('movies.movies_list'))


@bp.route('/health')
@track_request
def health():
    return jsonify({
        'status': 'healthy',
        'service': 'movie-catalog',
        'version': '1.0.0'
    }), 200


@bp.route('/check/catalog')
def check_catalog_endpoint():
    result = check_catalog(
        get_catalog(),
        get_reviews(),
        movies_path=current_app.config['MOVIES_DATA_PATH'],
        reviews_path=current_app.config['REVIEWS_DATA_PATH']
    )
    status_code = 200 if result['status'] == 'healthy' else 503
    return jsonify(result), status_code


@bp.route('/movies')
@track_request
def movies_list():
    logger.info("Fetching movies")
    catalog = get_catalog()
    return render_template(
        'movies.html',
        movies=catalog.all_movies(),
        genres=catalog.get_all_genres()
    )


@bp.route('/movies/<int:movie_id>/details')
@track_request
def movie_details(movie_id):
    logger.info(f"Fetching details for movie ID: {movie_id}")

    movie = get_catalog().get_movie_by_id(movie_id)

    if movie is None:
        logger.warning(f"Movie with ID {movie_id} not found")
        return render_template(
            'error.html',
            title='Movie Not Found',
            message=f'Movie with ID {movie_id} was not found.'
        ), 404

    MOVIE_VIEWS.labels(movie_id=movie_id).inc()

    reviews = get_reviews()
    return render_template(
        'movie_details.html',
        movie=movie,
        movie_icon=get_movie_icon(movie.name),
        reviews=reviews.get_reviews_for_movie(movie.id),
        average_review=reviews.average_rating(movie.id)
    )


@bp.route('/movies/search')
@track_request
def search_movies_page():
    name, movie_id, genre = read_search_params()
    logger.info(f"Search requested with name: {name}, id: {movie_id}, genre: {genre}")

    catalog = get_catalog()
    criteria = SearchCriteria.from_params(name=name, movie_id=movie_id, genre=genre)

    if criteria.is_empty():
        logger.warning("No search criteria provided")
        return render_template(
            'movies.html',
            movies=catalog.all_movies(),
            genres=catalog.get_all_genres(),
            message=NO_CRITERIA_PAGE_MESSAGE
        )

    SEARCH_QUERY_COUNT.labels(channel='html').inc()
    results = catalog.search(criteria)
    SEARCH_RESULTS_COUNT.observe(len(results))

    return render_template(
        'search_results.html',
        movies=results,
        genres=catalog.get_all_genres(),
        search_summary=criteria.describe(len(results)),
        search_name=name,
        search_id=movie_id,
        search_genre=genre,
        no_results_message=NO_RESULTS_MESSAGE if not results else None
    )


@bp.route('/api/movies')
@track_request
def api_movies():
    movies = get_catalog().all_movies()
    return jsonify({
        'movies': [movie.to_dict() for movie in movies],
        'total': len(movies)
    })


@bp.route('/api/movies/<int:movie_id>')
@track_request
def api_movie_detail(movie_id):
    movie = get_catalog().get_movie_by_id(movie_id)

    if movie is None:
        return jsonify({'error': 'Movie not found'}), 404

    reviews = get_reviews()
    data = movie.to_dict()
    data['icon'] = get_movie_icon(movie.name)
    data['reviews'] = [review.to_dict() for review in reviews.get_reviews_for_movie(movie.id)]
    data['averageReviewRating'] = reviews.average_rating(movie.id)
    return jsonify(data)


@bp.route('/api/genres')
def api_genres():
    return jsonify({
        'genres': list(get_catalog().get_all_genres())
    })


@bp.route('/api/movies/search')
@track_request
def api_search():
    name, movie_id, genre = read_search_params()
    logger.info(f"API search requested with name: {name}, id: {movie_id}, genre: {genre}")

    criteria = SearchCriteria.from_params(name=name, movie_id=movie_id, genre=genre)

    if criteria.is_empty():
        return jsonify({
            'success': False,
            'message': NO_CRITERIA_API_MESSAGE,
            'results': []
        }), 400

    SEARCH_QUERY_COUNT.labels(channel='api').inc()
    results = get_catalog().search(criteria)
    SEARCH_RESULTS_COUNT.observe(len(results))

    return jsonify({
        'success': True,
        'message': 'Search completed successfully',
        'results': [movie.to_dict() for movie in results],
        'totalResults': len(results),
        'searchCriteria': criteria.to_dict()
    })


@bp.route('/metrics')
@track_request
def metrics():
    return metrics_endpoint()


def wants_json():
    return request.path.startswith('/api/')


def register_error_handlers(app):

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        if wants_json():
            return jsonify({
                'success': False,
                'error': e.name,
                'message': e.description
            }), e.code
        return render_template('error.html', title=e.name, message=e.description), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        logger.exception(f"Unhandled error on {request.path}: {e}")
        if wants_json():
            return jsonify({
                'success': False,
                'error': 'Internal Server Error',
                'message': 'Request failed'
            }), 500
        return render_template(
            'error.html',
            title='Something Went Wrong',
            message='An unexpected error occurred. Please try again later.'
        ), 500


def create_app(config_class=Config, catalog=None, reviews=None):
    logging.basicConfig(level=config_class.LOG_LEVEL, format=LOG_FORMAT)

    app = Flask(__name__)
    app.config.from_object(config_class)
    CORS(app, resources={r'/api/*': {'origins': config_class.CORS_ORIGINS}})

    if catalog is None:
        catalog = load_catalog(config_class.MOVIES_DATA_PATH)
    if reviews is None:
        reviews = load_reviews(config_class.REVIEWS_DATA_PATH)

    app.extensions['movie_catalog'] = catalog
    app.extensions['movie_reviews'] = reviews
    CATALOG_SIZE.set(len(catalog))

    app.jinja_env.globals['movie_icon'] = get_movie_icon

    app.register_blueprint(bp)
    register_error_handlers(app)
    return app


app = create_app()


if __name__ == '__main__':
    app.run(
        host=Config.FLASK_HOST,
        port=Config.FLASK_PORT,
        debug=Config.FLASK_DEBUG
    )
