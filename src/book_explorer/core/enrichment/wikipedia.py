# book_explorer/src/book_explorer/core/enrichment/wikipedia.py
"""
Client Wikipedia API.

Responsabilité unique: interroger l'API REST Wikipedia (en) pour obtenir
le résumé d'une page, utilisé comme biographie d'auteur de secours.
"""

import logging
from typing import Optional
from urllib.parse import quote

from ...config import USER_AGENT, WIKIPEDIA_API
from ..network_utils import http_get_json
from ..text_utils import clean_text

logger = logging.getLogger(__name__)


def _parse_wiki_page(data: dict) -> Optional[str]:
    """
    Extrait le résumé du résultat de l'API Wikipedia.

    Args:
        data: Résultat JSON de l'API Wikipedia

    Returns:
        Résumé nettoyé ou None (page absente ou page d'homonymie)
    """
    if not isinstance(data, dict) or data.get("type") == "disambiguation":
        return None
    extract = clean_text(data.get("extract"))
    return extract if extract.strip() else None


def query_wikipedia_summary(title: str) -> Optional[str]:
    """
    Récupère le résumé d'une page Wikipedia (version anglaise).

    Args:
        title: Titre de la page (ici, le nom de l'auteur)

    Returns:
        Résumé de la page ou None si non trouvé

    Note:
        Sans en-tête User-Agent, Wikipedia rejette la requête.
    """
    if not title:
        return None

    encoded_title = quote(title, safe="")
    url = f"{WIKIPEDIA_API}/page/summary/{encoded_title}"

    try:
        data = http_get_json(url, headers={"User-Agent": USER_AGENT})
    except Exception as e:
        logger.info("Failed to get Wikipedia summary for '%s': %s", title, e)
        return None

    summary = _parse_wiki_page(data)
    if summary:
        logger.info("Wikipedia: Found summary for %s.", title)
    return summary
