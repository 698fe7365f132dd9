# book_explorer/src/book_explorer/core/enrichment/openlibrary.py
"""
Client Open Library pour les ressources de détail.

Responsabilité unique: récupérer les JSON d'œuvre (Work), d'auteur
et de notes. Les erreurs sont propagées; l'agrégateur les isole.
"""

import logging
from typing import Any, Dict, Optional

from ...config import OPENLIB_BASE
from ..errors import DecodeError
from ..network_utils import http_get_json

logger = logging.getLogger(__name__)


def normalize_work_key(work_id: str) -> str:
    """Retourne la clé d'œuvre sous la forme '/works/OL...W'."""
    key = work_id.strip()
    if key.startswith("/"):
        return key
    if key.startswith("works/"):
        return f"/{key}"
    return f"/works/{key}"


def _fetch_json_object(path: str) -> Dict[str, Any]:
    url = f"{OPENLIB_BASE}{path}"
    data = http_get_json(url)
    if not isinstance(data, dict):
        raise DecodeError(f"Expected a JSON object from {url}", url=url)
    return data


def fetch_work(work_id: str) -> Dict[str, Any]:
    """Récupère les détails de l'Œuvre (Work) Open Library."""
    return _fetch_json_object(f"{normalize_work_key(work_id)}.json")


def fetch_author(author_key: str) -> Dict[str, Any]:
    """Récupère la fiche d'un auteur ('/authors/OL...A')."""
    return _fetch_json_object(f"{author_key}.json")


def fetch_ratings(work_id: str) -> Dict[str, Any]:
    """Récupère l'histogramme / le résumé des notes d'une œuvre."""
    return _fetch_json_object(f"{normalize_work_key(work_id)}/ratings.json")


def first_author_key(work_data: Dict[str, Any]) -> Optional[str]:
    """
    Extrait la clé du premier auteur d'une œuvre.

    Format courant: {'authors': [{'author': {'key': '/authors/OL1A'}}]}.
    Certaines anciennes œuvres ont directement {'key': ...} dans la liste.
    """
    authors = work_data.get("authors")
    if not isinstance(authors, list) or not authors:
        return None

    entry = authors[0]
    if not isinstance(entry, dict):
        return None
    author = entry.get("author") if isinstance(entry.get("author"), dict) else entry
    key = author.get("key")
    return key if isinstance(key, str) and key else None
