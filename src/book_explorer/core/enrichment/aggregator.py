# book_explorer/src/book_explorer/core/enrichment/aggregator.py
"""
Agrégateur des détails d'un livre.

Responsabilité unique: orchestrer les appels Open Library / Wikipedia
pour une œuvre et fusionner leurs résultats dans un DetailResult toujours
complet. Chaque étape est isolée: un échec laisse la valeur par défaut.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Optional

from ..models import DetailResult, Rating
from ..text_utils import clean_text
from .author_bio import resolve_author_bio
from .openlibrary import fetch_work, first_author_key
from .ratings import fetch_rating

logger = logging.getLogger(__name__)


def _resolve_work(work_id: str) -> Optional[Dict[str, Any]]:
    try:
        return fetch_work(work_id)
    except Exception as e:
        logger.warning("Failed to fetch OL Work %s: %s", work_id, e)
        return None


def _resolve_rating(work_id: str) -> Optional[Rating]:
    try:
        return fetch_rating(work_id)
    except Exception as e:
        logger.warning("Failed to fetch OL ratings for %s: %s", work_id, e)
        return None


def _resolve_description_and_bio(
    result: DetailResult, work_id: str, author_name: Optional[str]
) -> None:
    """Étapes 1 et 2: description de l'œuvre puis biographie de l'auteur."""
    work_data = _resolve_work(work_id)

    author_key = None
    if work_data is not None:
        description = clean_text(work_data.get("description"))
        if description.strip():
            result.description = description
        author_key = first_author_key(work_data)

    result.author_bio = resolve_author_bio(author_key, author_name)


def fetch_book_details(
    work_id: str, author_name: Optional[str] = None, concurrent: bool = True
) -> DetailResult:
    """
    Récupère et agrège les détails d'une œuvre.

    Cette fonction orchestre:
    - Œuvre Open Library (description, clé du premier auteur)
    - Biographie de l'auteur (Open Library > Wikipedia > texte de repli)
    - Notes Open Library (histogramme > résumé)

    Args:
        work_id: Clé de l'œuvre ('/works/OL...W')
        author_name: Nom de l'auteur pour les replis de biographie
        concurrent: Si True, les notes sont récupérées dans un thread séparé

    Returns:
        DetailResult entièrement rempli; ne lève jamais d'exception
    """
    result = DetailResult()

    if not work_id or not work_id.strip():
        logger.warning("Cannot fetch details without a work id.")
        result.author_bio = resolve_author_bio(None, author_name)
        return result

    logger.debug("Fetching details for: work=%s, author=%s", work_id, author_name)

    try:
        if concurrent:
            # Les notes ne dépendent pas de l'œuvre: requête en parallèle
            with ThreadPoolExecutor(max_workers=1) as executor:
                rating_future = executor.submit(_resolve_rating, work_id)
                _resolve_description_and_bio(result, work_id, author_name)
                rating = rating_future.result()
        else:
            _resolve_description_and_bio(result, work_id, author_name)
            rating = _resolve_rating(work_id)

        if rating is not None:
            result.rating = rating

    except Exception:
        logger.exception("Unexpected error while aggregating details for %s", work_id)
        return DetailResult()

    logger.info(
        "Details complete for %s: rating=%.1f (%d), bio_chars=%d",
        work_id,
        result.rating.average,
        result.rating.count,
        len(result.author_bio),
    )
    return result
