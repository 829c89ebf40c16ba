"""In-memory cache of the starred repository list."""

import logging

from .fetch_starred import fetch_starred
from .models import PAGE_CAPACITY, Repository

logger = logging.getLogger(__name__)


class ResultCache:
    """Holds the full starred list for the lifetime of the process.

    The batch size only changes how the list is fetched, so a cached list is
    returned for any batch size. A failed fetch leaves the slot as it was.
    The list is stored and returned as a tuple so callers cannot change it.
    """

    def __init__(self, client, per_page: int = PAGE_CAPACITY):
        self.client = client
        self.per_page = per_page
        self._repos: tuple[Repository, ...] | None = None
        self.hits = 0
        self.fetches = 0

    @property
    def is_populated(self) -> bool:
        return self._repos is not None

    def get_or_fetch(self, batch_size: int, bypass_cache: bool = False) -> tuple[Repository, ...]:
        """Return the cached list, fetching it first if absent or bypassed."""
        if self._repos is not None and not bypass_cache:
            self.hits += 1
            return self._repos

        repos = tuple(fetch_starred(self.client, batch_size, per_page=self.per_page))
        self.fetches += 1
        self._repos = repos
        logger.debug("cached %d starred repositories", len(repos))
        return repos

    def stats(self) -> str:
        state = "populated" if self.is_populated else "empty"
        return f"cache {state}: {self.fetches} fetches, {self.hits} hits"
