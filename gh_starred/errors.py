"""Errors raised while fetching starred repositories."""


class StarredError(Exception):
    """Base class for errors a command reports to the user."""

    @property
    def kind(self) -> str:
        return type(self).__name__


class SettingsError(StarredError):
    """Required configuration is missing."""


class TransportError(StarredError):
    """The external API call failed."""


class DecodeError(StarredError):
    """The API response is not a JSON array of repositories."""


class PartialBatchError(StarredError):
    """A page inside a concurrent fetch window failed.

    Wraps the first failure in page order; the underlying error is also
    chained as ``__cause__``.
    """

    def __init__(self, page: int, cause: Exception):
        self.page = page
        self.cause = cause
        kind = cause.kind if isinstance(cause, StarredError) else type(cause).__name__
        super().__init__(f"page {page} failed ({kind}): {cause}")
