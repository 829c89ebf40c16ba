"""Data models and constants for starred repository listing."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

PAGE_CAPACITY = 100  # GitHub REST API maximum per_page
DEFAULT_BATCH_SIZE = 5  # pages fetched concurrently per window


@dataclass(frozen=True)
class Repository:
    """A starred repository as returned by the API."""

    name: str
    full_name: str
    topics: tuple[str, ...]
    url: str


@dataclass(frozen=True)
class Suggestion:
    """One completion candidate offered by the shell."""

    text: str
    description: str = ""


class StarredRepoPayload(BaseModel):
    """Wire shape of one element of `GET user/starred`.

    Missing fields decode to empty values, unknown fields are ignored.
    """

    model_config = ConfigDict(extra="ignore", strict=True)

    name: str = ""
    full_name: str = ""
    topics: list[str] | None = None
    html_url: str = ""

    def to_repository(self) -> Repository:
        return Repository(
            name=self.name,
            full_name=self.full_name,
            topics=tuple(self.topics or ()),
            url=self.html_url,
        )
