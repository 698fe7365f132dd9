# book_explorer/src/book_explorer/config.py
"""
Configuration et constantes pour Book Explorer
"""

import os

# ---------- Configuration réseau ----------
API_TIMEOUT = 10
OPENLIB_BASE = "https://openlibrary.org"
OPENLIB_SEARCH = f"{OPENLIB_BASE}/search.json"
COVERS_BASE = "https://covers.openlibrary.org"
WIKIPEDIA_API = "https://en.wikipedia.org/api/rest_v1"

# Wikipedia bloque les requêtes sans User-Agent identifiable
USER_AGENT = "BookExplorerApp/1.0 (book-explorer)"

# ---------- Recherche ----------
SEARCH_LIMIT = 10
SEARCH_DEBOUNCE_SECONDS = 0.5

# ---------- Valeurs par défaut (fallbacks) ----------
UNKNOWN_AUTHOR = "Unknown Author"
NO_PUBLISHED_YEAR = "N/A"
NO_SHORT_DESCRIPTION = "No description available."
NO_DESCRIPTION = "No overview available."
NO_AUTHOR_BIO = "Author information not listed."
AUTHOR_BIO_TEMPLATE = (
    "{name} is the author of this book. "
    "Detailed biographical information is currently unavailable from public sources."
)

# ---------- Dossiers ----------
LOG_DIR = "logs"

# ---------- Configuration logging ----------
LOG_MAX_BYTES = 5 * 1024 * 1024  # 5MB
LOG_BACKUP_COUNT = 5
LOG_ENCODING = "utf-8"


# ---------- Initialisation des dossiers ----------
def ensure_directories():
    """Crée les dossiers nécessaires s'ils n'existent pas."""
    os.makedirs(LOG_DIR, exist_ok=True)
