"""Fetch all starred repositories, several pages at a time."""

import logging
from concurrent.futures import ThreadPoolExecutor, wait

from ..errors import PartialBatchError
from ..models import PAGE_CAPACITY, Repository
from .fetch_page import fetch_page

logger = logging.getLogger(__name__)


def _fetch_window(
    executor: ThreadPoolExecutor,
    client,
    first_page: int,
    batch_size: int,
    per_page: int,
) -> list[Repository]:
    """Fetch ``batch_size`` pages concurrently and join them in page order.

    Each worker owns one slot of the window, so completion order never
    affects the result.
    """
    futures = [
        executor.submit(fetch_page, client, first_page + offset, per_page)
        for offset in range(batch_size)
    ]
    wait(futures)

    slots: list[list[Repository]] = [[] for _ in range(batch_size)]
    for offset, future in enumerate(futures):
        err = future.exception()
        if err is not None:
            raise PartialBatchError(first_page + offset, err) from err
        slots[offset] = future.result()

    return [repo for slot in slots for repo in slot]


def fetch_starred(
    client,
    batch_size: int,
    per_page: int = PAGE_CAPACITY,
) -> list[Repository]:
    """Fetch every starred repository, ``batch_size`` pages per round trip.

    Stops after the first window that returns fewer than
    ``batch_size * per_page`` repositories. When the total is an exact multiple
    of that, one extra empty window is fetched to detect the end.

    Raises PartialBatchError if any page of a window fails; the single-page
    path (``batch_size == 1``) lets the page's own error propagate.
    """
    if batch_size < 1:
        raise ValueError(f"batch_size must be >= 1, got {batch_size}")

    starred: list[Repository] = []
    page = 1

    if batch_size == 1:
        while True:
            repos = fetch_page(client, page, per_page)
            starred.extend(repos)
            if len(repos) < per_page:
                break
            page += 1
        logger.debug("fetched %d starred repositories from %d pages", len(starred), page)
        return starred

    with ThreadPoolExecutor(max_workers=batch_size) as executor:
        while True:
            logger.debug("fetching pages %d..%d", page, page + batch_size - 1)
            repos = _fetch_window(executor, client, page, batch_size, per_page)
            starred.extend(repos)
            if len(repos) < per_page * batch_size:
                break
            page += batch_size

    logger.debug(
        "fetched %d starred repositories from %d pages", len(starred), page + batch_size - 1
    )
    return starred
