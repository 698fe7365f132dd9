# book_explorer/src/book_explorer/core/network_utils.py
"""
Utilitaires réseau génériques (requêtes HTTP GET / JSON).

Une seule tentative par appel: pas de retry ni de backoff.
"""

import logging
from typing import Any, Dict, Optional

import requests

from ..config import API_TIMEOUT
from .errors import DecodeError, TransportError

logger = logging.getLogger(__name__)


def http_get(
    url: str,
    params: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
    timeout: int = API_TIMEOUT,
) -> requests.Response:
    """
    Effectue une requête HTTP GET.

    Raises:
        TransportError: erreur réseau, timeout ou statut non-2xx
    """
    logger.debug("HTTP GET %s params=%s", url, params)
    try:
        r = requests.get(url, params=params, headers=headers, timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as e:
        raise TransportError(f"GET {url} failed: {e}", url=url) from e
    return r


def http_get_json(
    url: str,
    params: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
    timeout: int = API_TIMEOUT,
) -> Any:
    """
    Effectue une requête HTTP GET et décode le corps JSON.

    Raises:
        TransportError: voir http_get
        DecodeError: le corps n'est pas du JSON valide
    """
    r = http_get(url, params=params, headers=headers, timeout=timeout)
    try:
        return r.json()
    except ValueError as e:
        raise DecodeError(f"Invalid JSON from {url}: {e}", url=url) from e
