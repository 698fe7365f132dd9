# tests/conftest.py
"""
Configuration globale pour pytest.

Fournit des fixtures réutilisables pour tous les tests.
"""

from typing import Dict

import pytest


@pytest.fixture
def sample_search_doc() -> Dict:
    """Retourne un résultat de search.json complet."""
    return {
        "key": "/works/OL66554W",
        "title": "Pride and Prejudice",
        "author_name": ["Jane Austen"],
        "first_publish_year": 1813,
        "first_sentence": [
            "It is a truth universally acknowledged, that a single man in possession "
            "of a good fortune, must be in want of a wife."
        ],
        "ratings_average": 4.1234,
        "ratings_count": 512,
        "cover_i": 14348537,
    }


@pytest.fixture
def sample_work_data() -> Dict:
    """Retourne une œuvre Open Library avec description structurée."""
    return {
        "key": "/works/OL66554W",
        "title": "Pride and Prejudice",
        "description": {
            "type": "/type/text",
            "value": "A novel of manners.\r\nFirst published in 1813 -- anonymously.",
        },
        "authors": [
            {"author": {"key": "/authors/OL21594A"}, "type": {"key": "/type/author_role"}}
        ],
    }


@pytest.fixture
def sample_book_summary():
    """Retourne un objet BookSummary d'exemple pour tests."""
    from book_explorer.core.models import BookSummary

    return BookSummary(
        id="/works/OL66554W",
        title="Pride and Prejudice",
        authors=("Jane Austen",),
        published_year="1813",
        short_description="It is a truth universally acknowledged.",
        average_rating=4.1,
        ratings_count=512,
    )


@pytest.fixture
def mock_http_response():
    """Retourne un mock de réponse HTTP."""
    class MockResponse:
        def __init__(self, json_data, status_code=200):
            self.json_data = json_data
            self.status_code = status_code
            self.text = str(json_data)

        def json(self):
            if isinstance(self.json_data, Exception):
                raise self.json_data
            return self.json_data

        def raise_for_status(self):
            import requests

            if self.status_code >= 400:
                raise requests.HTTPError(f"{self.status_code} Error")

    return MockResponse
