"""Emoji icons for movies, picked from keywords in the title"""

DEFAULT_ICON = '🎬'

# First matching keyword wins
KEYWORD_ICONS = (
    ('prison', '🔒'),
    ('escape', '🔒'),
    ('family', '👨‍👩‍👦'),
    ('boss', '👔'),
    ('hero', '🦸'),
    ('masked', '🦸'),
    ('urban', '🏙️'),
    ('life', '🌱'),
    ('journey', '🧭'),
    ('dream', '💭'),
    ('heist', '💰'),
    ('virtual', '💻'),
    ('world', '🌍'),
    ('wise', '🕴️'),
    ('ring', '💍'),
    ('quest', '🗡️'),
    ('space', '🚀'),
    ('war', '⚔️'),
    ('club', '🥊'),
    ('lamb', '🐑'),
)


def get_movie_icon(movie_name):
    if not movie_name:
        return DEFAULT_ICON

    name = movie_name.lower()
    for keyword, icon in KEYWORD_ICONS:
        if keyword in name:
            return icon
    return DEFAULT_ICON
