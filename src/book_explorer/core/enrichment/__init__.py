# book_explorer/src/book_explorer/core/enrichment/__init__.py
"""
Module Enrichment - Agrégation multi-sources des détails d'un livre.

Ce module orchestre les appels aux API externes (Open Library, Wikipedia)
pour construire la fiche détaillée d'une œuvre: description, biographie
de l'auteur et note.
"""

# Exports publics
from .aggregator import fetch_book_details
from .author_bio import resolve_author_bio
from .ratings import compute_rating
from .wikipedia import query_wikipedia_summary

__all__ = [
    "fetch_book_details",
    "resolve_author_bio",
    "compute_rating",
    "query_wikipedia_summary",
]
