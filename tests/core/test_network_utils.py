# tests/core/test_network_utils.py
"""
Tests pour le module core.network_utils.
"""

from unittest.mock import patch

import pytest
import requests

from book_explorer.core.errors import DecodeError, TransportError, UpstreamError
from book_explorer.core.network_utils import http_get, http_get_json


class TestHttpGet:
    """Tests pour http_get."""

    @patch("book_explorer.core.network_utils.requests.get")
    def test_passes_params_and_headers(self, mock_get, mock_http_response):
        mock_get.return_value = mock_http_response({"ok": True})

        http_get("https://example.org/x", params={"a": 1}, headers={"User-Agent": "ua"})

        mock_get.assert_called_once_with(
            "https://example.org/x", params={"a": 1}, headers={"User-Agent": "ua"}, timeout=10
        )

    @patch("book_explorer.core.network_utils.requests.get")
    def test_connection_error(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("unreachable")

        with pytest.raises(TransportError) as excinfo:
            http_get("https://example.org/x")

        assert excinfo.value.url == "https://example.org/x"

    @patch("book_explorer.core.network_utils.requests.get")
    def test_timeout(self, mock_get):
        mock_get.side_effect = requests.Timeout("slow")

        with pytest.raises(TransportError):
            http_get("https://example.org/x")

    @patch("book_explorer.core.network_utils.requests.get")
    def test_http_error_status(self, mock_get, mock_http_response):
        mock_get.return_value = mock_http_response({}, status_code=404)

        with pytest.raises(TransportError):
            http_get("https://example.org/missing")

    @patch("book_explorer.core.network_utils.requests.get")
    def test_single_attempt(self, mock_get):
        """Aucune nouvelle tentative après un échec."""
        mock_get.side_effect = requests.ConnectionError("unreachable")

        with pytest.raises(TransportError):
            http_get("https://example.org/x")

        assert mock_get.call_count == 1


class TestHttpGetJson:
    """Tests pour http_get_json."""

    @patch("book_explorer.core.network_utils.requests.get")
    def test_decodes_json(self, mock_get, mock_http_response):
        mock_get.return_value = mock_http_response({"docs": []})

        assert http_get_json("https://example.org/x") == {"docs": []}

    @patch("book_explorer.core.network_utils.requests.get")
    def test_invalid_json(self, mock_get, mock_http_response):
        mock_get.return_value = mock_http_response(ValueError("Expecting value"))

        with pytest.raises(DecodeError) as excinfo:
            http_get_json("https://example.org/x")

        assert isinstance(excinfo.value, UpstreamError)
