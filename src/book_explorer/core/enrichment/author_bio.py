# book_explorer/src/book_explorer/core/enrichment/author_bio.py
"""
Résolution de la biographie d'un auteur.

Chaîne de repli ordonnée, arrêt au premier succès:
1. Fiche auteur Open Library (clé issue de l'œuvre)
2. Résumé Wikipedia à partir du nom de l'auteur
3. Phrase générée à partir du nom, sinon texte générique
"""

import logging
from functools import partial
from typing import Callable, Optional, Sequence

from ...config import AUTHOR_BIO_TEMPLATE, NO_AUTHOR_BIO
from ..text_utils import clean_text
from .openlibrary import fetch_author
from .wikipedia import query_wikipedia_summary

logger = logging.getLogger(__name__)

BioStep = Callable[[], Optional[str]]


def bio_from_openlibrary(author_key: Optional[str]) -> Optional[str]:
    """Biographie depuis la fiche auteur Open Library, ou None."""
    if not author_key:
        return None
    try:
        data = fetch_author(author_key)
    except Exception as e:
        logger.warning("Failed to fetch OL author %s: %s", author_key, e)
        return None

    bio = clean_text(data.get("bio"))
    if not bio.strip():
        logger.info("OL: no bio for author %s", author_key)
        return None
    return bio


def bio_from_wikipedia(author_name: Optional[str]) -> Optional[str]:
    """Biographie depuis le résumé Wikipedia, ou None."""
    if not author_name:
        return None
    return query_wikipedia_summary(author_name)


def fallback_author_bio(author_name: Optional[str]) -> str:
    if author_name:
        return AUTHOR_BIO_TEMPLATE.format(name=author_name)
    return NO_AUTHOR_BIO


def resolve_author_bio(author_key: Optional[str], author_name: Optional[str]) -> str:
    """
    Détermine la meilleure biographie disponible.

    Args:
        author_key: Clé Open Library du premier auteur de l'œuvre (si connue)
        author_name: Nom de l'auteur transmis par l'appelant (si connu)

    Returns:
        Biographie non vide (jamais d'exception)
    """
    steps: Sequence[BioStep] = (
        partial(bio_from_openlibrary, author_key),
        partial(bio_from_wikipedia, author_name),
    )
    for step in steps:
        try:
            bio = step()
        except Exception:
            logger.exception("Unexpected error while resolving author bio")
            bio = None
        if bio:
            return bio

    logger.info("No author bio found, using fallback text")
    return fallback_author_bio(author_name)
