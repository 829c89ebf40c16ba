import logging

from pydantic import TypeAdapter, ValidationError

from ..errors import DecodeError
from ..models import PAGE_CAPACITY, Repository, StarredRepoPayload

logger = logging.getLogger(__name__)

_PAGE_ADAPTER = TypeAdapter(list[StarredRepoPayload])


def starred_endpoint(page: int, per_page: int = PAGE_CAPACITY) -> str:
    return f"user/starred?page={page}&per_page={per_page}"


def decode_page(raw: bytes | str) -> list[Repository]:
    """Decode a `user/starred` response body into repositories.

    Raises DecodeError if the body is not a JSON array of repository objects.
    """
    try:
        payloads = _PAGE_ADAPTER.validate_json(raw)
    except ValidationError as e:
        first = e.errors()[0]
        loc = ".".join(str(part) for part in first["loc"]) or "<root>"
        raise DecodeError(
            f"unexpected starred response at {loc}: {first['msg']} ({e.error_count()} error(s))"
        ) from e
    return [p.to_repository() for p in payloads]


def fetch_page(client, page: int, per_page: int = PAGE_CAPACITY) -> list[Repository]:
    """Fetch one page of starred repositories.

    Transport failures from the client propagate unchanged. No retries.
    """
    raw = client.invoke(starred_endpoint(page, per_page))
    repos = decode_page(raw)
    logger.debug("page %d: %d repositories", page, len(repos))
    return repos
