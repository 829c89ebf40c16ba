"""Topic vocabulary and topic filtering over starred repositories."""

from collections.abc import Iterable, Sequence

from .models import Repository


def collect_topics(repos: Iterable[Repository]) -> list[str]:
    """Unique topics across ``repos``, in ascending ordinal order."""
    return sorted({topic for repo in repos for topic in repo.topics})


def filter_by_topics(repos: Sequence[Repository], topics: Iterable[str]) -> list[Repository]:
    """Keep repositories tagged with at least one of ``topics``.

    Matching is exact and case-sensitive. No topics keeps everything.
    """
    wanted = set(topics)
    if not wanted:
        return list(repos)
    return [repo for repo in repos if wanted.intersection(repo.topics)]


def split_topic_args(values: Iterable[str] | None) -> list[str]:
    """Flatten repeated and comma-separated ``--topics`` values."""
    topics = []
    for value in values or ():
        topics.extend(t.strip() for t in value.split(",") if t.strip())
    return topics
