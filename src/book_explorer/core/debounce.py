# book_explorer/src/book_explorer/core/debounce.py
"""
Regroupement temporel des appels (debounce).

Seul le dernier appel d'une rafale est exécuté, une fois le délai
d'inactivité écoulé.
"""

import logging
import threading
from typing import Any, Callable, Optional, Tuple

from ..config import SEARCH_DEBOUNCE_SECONDS

logger = logging.getLogger(__name__)


class Debouncer:
    """Exécute func après `wait` secondes sans nouvel appel."""

    def __init__(self, func: Callable[..., Any], wait: float = SEARCH_DEBOUNCE_SECONDS):
        self.func = func
        self.wait = wait
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        # Timer dont l'appel est en cours d'exécution
        self._running: Optional[threading.Timer] = None
        self._args: Tuple[Any, ...] = ()

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def call(self, *args: Any) -> None:
        """Planifie func(*args), en annulant l'appel en attente."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._args = args
            timer = threading.Timer(self.wait, self._fire)
            # Le timer se passe lui-même pour ignorer un déclenchement périmé
            timer.args = (timer,)
            timer.daemon = True
            self._timer = timer
            timer.start()

    def cancel(self) -> None:
        """Abandonne l'appel en attente."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def flush(self) -> None:
        """
        Exécute immédiatement l'appel en attente, s'il existe.

        Si un appel déclenché par le timer s'exécute encore, attend d'abord
        sa fin: au retour, plus aucun appel n'est en cours.
        """
        current = threading.current_thread()
        while True:
            with self._lock:
                running = self._running
                if running is None or running is current:
                    timer = self._timer
                    if timer is None:
                        return
                    timer.cancel()
                    self._timer = None
                    args = self._args
                    break
            running.join()
        self.func(*args)

    def _fire(self, timer: threading.Timer) -> None:
        with self._lock:
            if self._timer is not timer:
                return
            self._timer = None
            self._running = timer
            args = self._args
        try:
            self.func(*args)
        except Exception:
            logger.exception("Debounced call to %s failed", getattr(self.func, "__name__", self.func))
        finally:
            with self._lock:
                if self._running is timer:
                    self._running = None
