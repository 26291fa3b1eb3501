"""
Constantes globales pour AniTMDB.

Ce module contient les constantes utilisees dans l'application:
- URL de base de l'API TMDB
- ID de genre TMDB "Animation"
- Pattern de detection de l'annee dans un titre
- Placeholder du titre d'episode dans le template de renommage
- Niveaux de log reconnus par loguru
"""

import re

TMDB_BASE_URL = "https://api.themoviedb.org/3"

# Genre TMDB "Animation" (identique pour films et series)
ANIMATION_GENRE_ID = 16

# Annee sur 4 chiffres, eventuellement entre parentheses ou crochets
# (ASCII ou pleine chasse). Les nombres colles a une lettre ou un chiffre
# ("1080p", "x2020", "12345") ne sont pas touches.
YEAR_PATTERN = re.compile(r"[(\[（【]?(?<![0-9A-Za-z])[0-9]{4}(?![0-9A-Za-z])[)\]）】]?")

EPISODE_TITLE_PLACEHOLDER = "${episodeTitle}"

# Delai de courtoisie entre deux recherches successives (rate limiting TMDB)
NARROWING_DELAY_SECONDS = 0.5

REQUEST_TIMEOUT_SECONDS = 5.0

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
