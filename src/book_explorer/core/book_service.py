# book_explorer/src/book_explorer/core/book_service.py
"""
Service Book Explorer.

Façade réutilisable exposant les deux opérations de l'application:
recherche de livres et récupération des détails d'un livre.
Utilisée par le mode ligne de commande et le mode interactif.
"""

import logging
from typing import List, Optional

from .enrichment import fetch_book_details
from .models import BookSummary, DetailResult
from .search import search_books

logger = logging.getLogger(__name__)


class BookService:
    """
    Service de recherche et de détail des livres.

    Aucun état n'est conservé entre deux appels.
    """

    def __init__(self, concurrent: bool = True):
        """
        Initialise le service.

        Args:
            concurrent: Si True, les notes sont récupérées en parallèle
                de la description et de la biographie
        """
        self.concurrent = concurrent
        logger.debug("BookService initialized (concurrent=%s)", concurrent)

    def search(self, query: str) -> List[BookSummary]:
        """
        Recherche des livres par titre.

        Raises:
            UpstreamError: la recherche a échoué (réseau ou décodage)
        """
        return search_books(query)

    def get_details(self, work_id: str, author_name: Optional[str] = None) -> DetailResult:
        """Récupère les détails agrégés d'une œuvre (ne lève jamais d'exception)."""
        return fetch_book_details(work_id, author_name, concurrent=self.concurrent)

    def get_details_for(self, book: BookSummary) -> DetailResult:
        """Récupère les détails d'un livre issu d'une recherche."""
        return self.get_details(book.id, book.primary_author)
