# book_explorer/src/book_explorer/main.py
"""
Point d'entrée principal pour Book Explorer
Analyse la ligne de commande et lance la commande demandée
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from .config import (
    LOG_BACKUP_COUNT,
    LOG_DIR,
    LOG_ENCODING,
    LOG_MAX_BYTES,
    ensure_directories,
)
from .core.errors import UpstreamError

USAGE = """Usage:
  book-explorer search <query...>
  book-explorer details <work_id> [--author NAME]
  book-explorer interactive
"""


def setup_logging():
    """Configure le système de logging."""
    ensure_directories()
    logger = logging.getLogger("book_explorer")
    logger.setLevel(logging.DEBUG)

    # Handler pour fichier avec rotation
    logfile = os.path.join(LOG_DIR, "book_explorer.log")
    handler = RotatingFileHandler(
        logfile, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding=LOG_ENCODING
    )
    formatter = logging.Formatter("%(asctime)s %(levelname)s [%(threadName)s] %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    # Handler pour console
    console = logging.StreamHandler()
    console.setLevel(logging.INFO)
    console.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(console)

    return logger


def _parse_details_args(args: List[str]):
    """Retourne (work_id, author_name) ou None si les arguments sont invalides."""
    author_name = None
    if "--author" in args:
        i = args.index("--author")
        if i + 1 >= len(args):
            return None
        author_name = args[i + 1]
        args = args[:i] + args[i + 2:]
    if len(args) != 1:
        return None
    return args[0], author_name


def run_cli(argv: Optional[List[str]] = None) -> int:
    """Lance la commande demandée."""
    logger = logging.getLogger("book_explorer")
    argv = sys.argv[1:] if argv is None else argv

    if not argv:
        print(USAGE)
        return 1

    from .cli import cli_details, cli_search, print_details, print_search_results, run_interactive

    command, args = argv[0], argv[1:]

    if command == "search":
        query = " ".join(args)
        if not query.strip():
            print(USAGE)
            return 1
        try:
            print_search_results(cli_search(query))
            return 0
        except UpstreamError as e:
            logger.exception("Search failed")
            print(f"Error: {e}")
            return 1

    if command == "details":
        parsed = _parse_details_args(args)
        if parsed is None:
            print(USAGE)
            return 1
        work_id, author_name = parsed
        print_details(cli_details(work_id, author_name))
        return 0

    if command == "interactive":
        return run_interactive()

    print(f"Unknown command: {command}")
    print(USAGE)
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Point d'entrée principal."""
    setup_logging()
    return run_cli(argv)


if __name__ == "__main__":
    raise SystemExit(main())
