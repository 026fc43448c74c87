"""
Constantes globales pour Boxoffice.

Ce module contient toutes les constantes utilisees dans l'application:
- Source box-office (URL Sacnilk, en-tete navigateur, timeout)
- Structure du tableau HTML scrape (indices de colonnes)
- Calendrier de decroissance de l'estimateur journalier
- Conversion devises (USD -> roupies -> crores)
"""

# Source box-office (page "100 crores club" de Sacnilk)
SACNILK_URL = "https://www.sacnilk.com/articles/Bollywood_100crores_Collection_Club_Movies"
SACNILK_SOURCE_NAME = "Sacnilk.com"
BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
)
FETCH_TIMEOUT_SECONDS = 10.0

# Cache du classement (un seul slot, 6 heures)
CACHE_TTL_HOURS = 6

# Nombre maximum de films conserves apres parsing
MAX_BOX_OFFICE_RECORDS = 100

# Colonnes du tableau Sacnilk : rang | titre | collection | annee
RANK_COLUMN = 0
TITLE_COLUMN = 1
COLLECTION_COLUMN = 2
YEAR_COLUMN = 3
MIN_COLUMNS = 4

# Estimateur : horizon et parts fixes des premiers jours
ESTIMATE_HORIZON_DAYS = 30
OPENING_DAY_SHARES = {
    1: 0.25,
    2: 0.15,
    3: 0.12,
}
# Jours 4 a 7 : 8% puis -1% par jour
FIRST_WEEK_START_SHARE = 0.08
FIRST_WEEK_DAILY_DROP = 0.01
FIRST_WEEK_LAST_DAY = 7

# Conversion USD -> crores (1 USD ~ 83 INR, 1 crore = 10 000 000)
USD_TO_INR = 83
CRORE = 10_000_000

# Estimation comparative quand seul le budget est connu
BUDGET_TO_TOTAL_MULTIPLIER = 2.5
DEFAULT_ESTIMATED_TOTAL_CRORES = 100.0
# Nombre de votes TMDB par crore estime, faute de chiffres
VOTES_PER_ESTIMATED_CRORE = 100
# Budget estime: part de la collection
ESTIMATED_BUDGET_SHARE = 0.4
# Total de la courbe d'une fiche film sans recettes connues
DEFAULT_DETAIL_TOTAL_CRORES = 500.0

# Matching des titres
DEFAULT_MATCH_THRESHOLD = 0.5
FIRST_TOKEN_CONFIDENCE = 0.5

# TMDB : decouverte des films hindi
TMDB_DISCOVER_LANGUAGE = "hi"
TMDB_DISCOVER_SORT = "popularity.desc"
TMDB_DISCOVER_RELEASE_DATE_GTE = "2010-01-01"
TMDB_DISCOVER_PAGES = 5
TMDB_SEARCH_LANGUAGE = "en-US"
