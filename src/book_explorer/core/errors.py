# book_explorer/src/book_explorer/core/errors.py
"""
Exceptions levées par les appels aux APIs externes.
"""

from typing import Optional


class BookExplorerError(Exception):
    """Erreur de base du package."""


class UpstreamError(BookExplorerError):
    """Échec d'un appel à un fournisseur externe (Open Library, Wikipedia)."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class TransportError(UpstreamError):
    """Erreur réseau, timeout ou statut HTTP non-2xx."""


class DecodeError(UpstreamError):
    """Réponse JSON invalide ou de forme inattendue."""
