# book_explorer/src/book_explorer/cli.py
"""
Logique pour le mode ligne de commande.

Utilise BookService pour réutiliser la logique de recherche et de détail.
"""

import logging
import sys
from typing import List, Optional, TextIO

from .config import SEARCH_DEBOUNCE_SECONDS
from .core.book_service import BookService
from .core.debounce import Debouncer
from .core.errors import UpstreamError
from .core.models import BookSummary, DetailResult

logger = logging.getLogger(__name__)


def cli_search(query: str) -> List[BookSummary]:
    """
    Recherche des livres en mode CLI.

    Raises:
        UpstreamError: la recherche a échoué
    """
    logger.info(f"CLI mode - searching: {query}")
    books = BookService().search(query)
    logger.info(f"CLI mode - found {len(books)} books")
    return books


def cli_details(work_id: str, author_name: Optional[str] = None) -> DetailResult:
    """Récupère les détails d'une œuvre en mode CLI."""
    logger.info(f"CLI mode - fetching details: {work_id}")
    return BookService().get_details(work_id, author_name)


def print_search_results(books: List[BookSummary]):
    """Affiche la liste des livres trouvés."""
    print(f"\n=== Résultats: {len(books)} ===")
    for i, book in enumerate(books, start=1):
        print(f"\n[{i}] {book.title}")
        print(f"  by {', '.join(book.authors)} ({book.published_year})")
        print(f"  {book.short_description}")
        print(f"  Note: {book.average_rating} ({book.ratings_count} reviews)")
        print(f"  Id: {book.id}")
        if book.cover_thumbnail_url:
            print(f"  Couverture: {book.cover_thumbnail_url}")


def print_details(detail: DetailResult):
    """Affiche la fiche détaillée d'un livre."""
    print("\n=== Overview ===")
    print(detail.description)
    print("\n=== About the author ===")
    print(detail.author_bio)
    print("\n=== Rating ===")
    print(f"{detail.rating.average} ({detail.rating.count} reviews)")


def run_interactive(
    service: Optional[BookService] = None,
    stream: TextIO = sys.stdin,
    wait: float = SEARCH_DEBOUNCE_SECONDS,
) -> int:
    """
    Boucle interactive: chaque ligne est une recherche, un numéro ouvre
    la fiche du résultat correspondant.

    Les recherches sont regroupées (debounce): seule la dernière ligne
    d'une rafale déclenche un appel.
    """
    service = service or BookService()
    results: List[BookSummary] = []

    def do_search(query: str):
        try:
            books = service.search(query)
        except UpstreamError as e:
            logger.error("Search failed for %r: %s", query, e)
            print("Search failed.")
            return
        results[:] = books
        print_search_results(books)

    debouncer = Debouncer(do_search, wait=wait)

    for line in stream:
        text = line.strip()
        if not text:
            continue
        if text.isdigit():
            # La sélection porte sur la dernière recherche exécutée
            debouncer.flush()
            index = int(text) - 1
            if 0 <= index < len(results):
                print_details(service.get_details_for(results[index]))
            else:
                print(f"No result #{text}")
            continue
        debouncer.call(text)

    debouncer.flush()
    return 0
