from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..config import (
    NO_AUTHOR_BIO,
    NO_DESCRIPTION,
    NO_PUBLISHED_YEAR,
    NO_SHORT_DESCRIPTION,
    UNKNOWN_AUTHOR,
)


@dataclass(frozen=True)
class BookSummary:
    """Résumé d'un livre issu d'une recherche (immuable)."""

    id: str
    title: str
    authors: Tuple[str, ...] = (UNKNOWN_AUTHOR,)
    published_year: str = NO_PUBLISHED_YEAR
    short_description: str = NO_SHORT_DESCRIPTION
    average_rating: float = 0.0
    ratings_count: int = 0
    cover_thumbnail_url: Optional[str] = None
    cover_small_thumbnail_url: Optional[str] = None

    @property
    def primary_author(self) -> Optional[str]:
        """Premier auteur réel, None si seul l'auteur par défaut est présent."""
        if not self.authors or self.authors[0] == UNKNOWN_AUTHOR:
            return None
        return self.authors[0]


@dataclass
class Rating:
    average: float = 0.0
    count: int = 0


@dataclass
class DetailResult:
    """Détails agrégés d'une œuvre. Chaque champ a toujours une valeur."""

    description: str = NO_DESCRIPTION
    author_bio: str = NO_AUTHOR_BIO
    rating: Rating = field(default_factory=Rating)
