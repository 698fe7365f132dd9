# book_explorer/src/book_explorer/core/enrichment/ratings.py
"""
Calcul de la note d'une œuvre.

Responsabilité unique: convertir la réponse ratings.json d'Open Library
(histogramme 1..5 et/ou résumé précalculé) en Rating.
"""

import logging
from typing import Any, Dict

from ..errors import DecodeError
from ..models import Rating
from .openlibrary import fetch_ratings

logger = logging.getLogger(__name__)

STAR_VALUES = range(1, 6)


def _parse_histogram(counts: Any) -> Dict[int, int]:
    """
    Convertit {'1': n, ..., '5': n} en {1: n, ..., 5: n}.

    Les entrées non numériques ou hors 1..5 sont ignorées.
    """
    if not counts:
        return {}
    if not isinstance(counts, dict):
        raise DecodeError(f"Unexpected ratings histogram: {counts!r}")

    histogram: Dict[int, int] = {}
    for key, value in counts.items():
        try:
            star = int(key)
            votes = int(value or 0)
        except (TypeError, ValueError):
            logger.debug("Ignoring ratings entry %r: %r", key, value)
            continue
        if star in STAR_VALUES and votes > 0:
            histogram[star] = votes
    return histogram


def compute_rating(payload: Dict[str, Any]) -> Rating:
    """
    Calcule la note depuis une réponse ratings.json.

    Logique de priorité:
    1. Histogramme (moyenne pondérée) dès que le total des votes est > 0
    2. Résumé fourni par l'API ('summary')
    3. Note nulle par défaut

    Les deux sources ne sont jamais mélangées.
    """
    histogram = _parse_histogram(payload.get("counts"))
    total = sum(histogram.values())
    if total > 0:
        weighted_sum = sum(star * votes for star, votes in histogram.items())
        return Rating(average=round(weighted_sum / total, 1), count=total)

    summary = payload.get("summary")
    if isinstance(summary, dict):
        return Rating(
            average=float(summary.get("average") or 0),
            count=int(summary.get("count") or 0),
        )

    return Rating()


def fetch_rating(work_id: str) -> Rating:
    """Récupère et calcule la note d'une œuvre (les erreurs sont propagées)."""
    rating = compute_rating(fetch_ratings(work_id))
    logger.debug("OL rating for %s: %.1f (%d votes)", work_id, rating.average, rating.count)
    return rating
