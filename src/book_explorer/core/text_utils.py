# book_explorer/src/book_explorer/core/text_utils.py
"""
Utilitaires pour le nettoyage des textes renvoyés par les APIs.
"""

import re
from typing import Any

EM_DASH = "—"

# "\r\r\n" doit donner "\n" en une seule passe (nettoyage idempotent)
_CRLF_RE = re.compile(r"\r+\n")


def extract_text(raw: Any) -> str:
    """
    Normalise un champ texte Open Library en chaîne simple.

    Le champ peut être une chaîne ou un dict {'type': '/type/text', 'value': '...'}.
    """
    if not raw:
        return ""
    if isinstance(raw, dict):
        raw = raw.get("value")
    return raw if isinstance(raw, str) else ""


def clean_text(raw: Any) -> str:
    """Normalise puis nettoie le texte (fins de ligne, tirets doubles)."""
    text = extract_text(raw)
    text = _CRLF_RE.sub("\n", text)
    return text.replace("--", EM_DASH)
