from prometheus_client import Counter, Histogram, Gauge, generate_latest, CONTENT_TYPE_LATEST
from flask import Response, request
from werkzeug.exceptions import HTTPException
import time
import functools


REQUEST_COUNT = Counter(
    'movies_request_count',
    'Total Flask Request Count',
    ['method', 'endpoint', 'http_status']
)

REQUEST_DURATION = Histogram(
    'movies_request_duration_seconds',
    'Flask Request Duration',
    ['method', 'endpoint']
)


CATALOG_SIZE = Gauge(
    'movies_catalog_size',
    'Number of movies loaded in the catalog'
)


SEARCH_QUERY_COUNT = Counter(
    'movies_search_queries_total',
    'Total search queries',
    ['channel']
)

SEARCH_RESULTS_COUNT = Histogram(
    'movies_search_results',
    'Number of search results returned',
    buckets=(0, 1, 2, 5, 10, 20, 50)
)


MOVIE_VIEWS = Counter(
    'movies_detail_views_total',
    'Total movie detail page views',
    ['movie_id']
)


def _status_code(response):
    # Views may return (body, status) tuples
    if isinstance(response, tuple) and len(response) > 1 and isinstance(response[1], int):
        return response[1]
    return response.status_code if hasattr(response, 'status_code') else 200


def track_request(f):
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        start_time = time.time()

        try:
            response = f(*args, **kwargs)

            REQUEST_COUNT.labels(
                method=request.method,
                endpoint=f.__name__,
                http_status=_status_code(response)
            ).inc()

            duration = time.time() - start_time
            REQUEST_DURATION.labels(
                method=request.method,
                endpoint=f.__name__
            ).observe(duration)

            return response

        except HTTPException as e:
            REQUEST_COUNT.labels(
                method=request.method,
                endpoint=f.__name__,
                http_status=e.code
            ).inc()
            raise

        except Exception:
            REQUEST_COUNT.labels(
                method=request.method,
                endpoint=f.__name__,
                http_status=500
            ).inc()
            raise

    return wrapper


def metrics_endpoint():
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)
