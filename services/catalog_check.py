import os


def check_catalog(catalog, reviews=None, movies_path=None, reviews_path=None):
    try:
        movie_count = len(catalog)
        genres = catalog.get_all_genres()

        if movie_count == 0:
            return {
                'status': 'unhealthy',
                'service': 'catalog',
                'message': 'Movie catalog is empty'
            }

        review_count = 0
        reviewed_movies = 0
        if reviews is not None:
            for movie in catalog.all_movies():
                movie_reviews = reviews.get_reviews_for_movie(movie.id)
                review_count += len(movie_reviews)
                if movie_reviews:
                    reviewed_movies += 1

        return {
            'status': 'healthy',
            'service': 'catalog',
            'message': f'Movie catalog loaded with {movie_count} movies',
            'details': {
                'source': {
                    'movies_file': movies_path,
                    'movies_file_exists': bool(movies_path) and os.path.exists(movies_path),
                    'reviews_file': reviews_path
                },
                'movies': {
                    'total_count': movie_count,
                    'genres': list(genres),
                    'genre_count': len(genres)
                },
                'reviews': {
                    'total_count': review_count,
                    'reviewed_movies': reviewed_movies
                }
            }
        }

    except Exception as e:
        return {
            'status': 'unhealthy',
            'service': 'catalog',
            'message': f'Unexpected error: {str(e)}'
        }
