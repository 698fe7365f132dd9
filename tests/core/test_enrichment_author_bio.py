# tests/core/test_enrichment_author_bio.py
"""
Tests pour le module core.enrichment.author_bio.
"""

from unittest.mock import patch

from book_explorer.core.enrichment.author_bio import (
    bio_from_openlibrary,
    fallback_author_bio,
    resolve_author_bio,
)
from book_explorer.core.errors import TransportError

AUSTEN_FALLBACK = (
    "Jane Austen is the author of this book. "
    "Detailed biographical information is currently unavailable from public sources."
)


class TestBioFromOpenLibrary:
    """Tests pour bio_from_openlibrary."""

    def test_without_key(self):
        assert bio_from_openlibrary(None) is None

    @patch("book_explorer.core.enrichment.author_bio.fetch_author")
    def test_structured_bio_is_cleaned(self, mock_fetch):
        mock_fetch.return_value = {"bio": {"type": "/type/text", "value": "Born 1775--died 1817."}}

        assert bio_from_openlibrary("/authors/OL21594A") == "Born 1775—died 1817."

    @patch("book_explorer.core.enrichment.author_bio.fetch_author")
    def test_blank_bio(self, mock_fetch):
        mock_fetch.return_value = {"bio": "   "}

        assert bio_from_openlibrary("/authors/OL21594A") is None


class TestFallbackAuthorBio:
    """Tests pour fallback_author_bio."""

    def test_with_name(self):
        assert fallback_author_bio("Jane Austen") == AUSTEN_FALLBACK

    def test_without_name(self):
        assert fallback_author_bio(None) == "Author information not listed."


class TestResolveAuthorBio:
    """Tests pour resolve_author_bio."""

    @patch("book_explorer.core.enrichment.author_bio.query_wikipedia_summary")
    @patch("book_explorer.core.enrichment.author_bio.fetch_author")
    def test_openlibrary_bio_stops_chain(self, mock_fetch, mock_wiki):
        mock_fetch.return_value = {"bio": "Jane Austen was an English novelist."}

        bio = resolve_author_bio("/authors/OL21594A", "Jane Austen")

        assert bio == "Jane Austen was an English novelist."
        mock_wiki.assert_not_called()

    @patch("book_explorer.core.enrichment.author_bio.query_wikipedia_summary")
    @patch("book_explorer.core.enrichment.author_bio.fetch_author")
    def test_openlibrary_failure_falls_back_to_wikipedia(self, mock_fetch, mock_wiki):
        mock_fetch.side_effect = TransportError("500")
        mock_wiki.return_value = "Jane Austen (1775-1817) was an English novelist."

        bio = resolve_author_bio("/authors/OL21594A", "Jane Austen")

        assert bio == "Jane Austen (1775-1817) was an English novelist."
        mock_wiki.assert_called_once_with("Jane Austen")

    @patch("book_explorer.core.enrichment.author_bio.query_wikipedia_summary")
    @patch("book_explorer.core.enrichment.author_bio.fetch_author")
    def test_empty_openlibrary_bio_falls_back_to_wikipedia(self, mock_fetch, mock_wiki):
        mock_fetch.return_value = {"name": "Jane Austen"}
        mock_wiki.return_value = "English novelist."

        assert resolve_author_bio("/authors/OL21594A", "Jane Austen") == "English novelist."

    @patch("book_explorer.core.enrichment.author_bio.query_wikipedia_summary")
    @patch("book_explorer.core.enrichment.author_bio.fetch_author")
    def test_all_tiers_fail_with_name(self, mock_fetch, mock_wiki):
        mock_fetch.side_effect = TransportError("500")
        mock_wiki.return_value = None

        assert resolve_author_bio("/authors/OL21594A", "Jane Austen") == AUSTEN_FALLBACK

    @patch("book_explorer.core.enrichment.author_bio.query_wikipedia_summary")
    def test_no_key_and_no_name(self, mock_wiki):
        assert resolve_author_bio(None, None) == "Author information not listed."
        mock_wiki.assert_not_called()

    @patch("book_explorer.core.enrichment.author_bio.query_wikipedia_summary")
    def test_unexpected_error_in_tier_is_isolated(self, mock_wiki):
        mock_wiki.side_effect = RuntimeError("bug")

        assert resolve_author_bio(None, "Jane Austen") == AUSTEN_FALLBACK
