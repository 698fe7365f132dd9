# book_explorer/src/book_explorer/core/search.py
"""
Recherche de livres via l'API de recherche Open Library.

Responsabilité unique: interroger search.json et convertir chaque
résultat brut en BookSummary normalisé.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from ..config import (
    COVERS_BASE,
    NO_PUBLISHED_YEAR,
    NO_SHORT_DESCRIPTION,
    OPENLIB_SEARCH,
    SEARCH_LIMIT,
    UNKNOWN_AUTHOR,
)
from .errors import DecodeError
from .models import BookSummary
from .network_utils import http_get_json

logger = logging.getLogger(__name__)


def build_cover_urls(cover_id: Any) -> Tuple[Optional[str], Optional[str]]:
    """
    Construit les URLs de couverture (moyenne, petite) depuis un cover_i.

    Returns:
        (None, None) si aucun identifiant de couverture
    """
    if not cover_id:
        return None, None
    return (
        f"{COVERS_BASE}/b/id/{cover_id}-M.jpg",
        f"{COVERS_BASE}/b/id/{cover_id}-S.jpg",
    )


def _first_sentence(raw: Any) -> Optional[str]:
    # first_sentence est une liste de chaînes, parfois une chaîne ou un {'value': ...}
    if isinstance(raw, list):
        raw = raw[0] if raw else None
    if isinstance(raw, dict):
        raw = raw.get("value")
    return raw if isinstance(raw, str) and raw else None


def _parse_search_doc(doc: Dict) -> BookSummary:
    """
    Convertit un résultat brut de search.json en BookSummary.

    Args:
        doc: Entrée de la liste 'docs'

    Returns:
        BookSummary avec les valeurs par défaut pour les champs absents
    """
    authors = doc.get("author_name") or [UNKNOWN_AUTHOR]
    if isinstance(authors, str):
        authors = [authors]
    year = doc.get("first_publish_year")
    ratings_average = doc.get("ratings_average")
    thumbnail, small_thumbnail = build_cover_urls(doc.get("cover_i"))

    return BookSummary(
        id=doc["key"],
        title=doc["title"],
        authors=tuple(authors),
        published_year=str(year) if year is not None else NO_PUBLISHED_YEAR,
        short_description=_first_sentence(doc.get("first_sentence")) or NO_SHORT_DESCRIPTION,
        average_rating=round(float(ratings_average), 1) if ratings_average else 0.0,
        ratings_count=int(doc.get("ratings_count") or 0),
        cover_thumbnail_url=thumbnail,
        cover_small_thumbnail_url=small_thumbnail,
    )


def search_books(query: str, limit: int = SEARCH_LIMIT) -> List[BookSummary]:
    """
    Recherche des livres par titre sur Open Library.

    Args:
        query: Texte libre saisi par l'utilisateur
        limit: Nombre maximum de résultats

    Returns:
        Liste de BookSummary (vide si la requête est vide)

    Raises:
        TransportError: erreur réseau ou statut HTTP non-2xx
        DecodeError: réponse de forme inattendue
    """
    if not query or not query.strip():
        return []

    data = http_get_json(OPENLIB_SEARCH, params={"title": query, "limit": limit})
    docs = data.get("docs") if isinstance(data, dict) else None
    if not isinstance(docs, list):
        raise DecodeError("Search response has no 'docs' list", url=OPENLIB_SEARCH)

    try:
        books = [_parse_search_doc(doc) for doc in docs]
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise DecodeError(f"Unexpected search record: {e!r}", url=OPENLIB_SEARCH) from e

    logger.info("OL search: %d result(s) for %r", len(books), query)
    return books
