"""GitHub REST API clients that return raw response bodies.

Both clients make exactly one call per ``invoke``. Authentication is left to
the GitHub CLI (``GhCliClient``) or to ``GITHUB_TOKEN`` (``HttpApiClient``);
retries and rate limiting are not handled here.
"""

import logging
import subprocess

import httpx

from .errors import SettingsError, TransportError
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)

# httpx logs every request at INFO
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


class GhCliClient:
    """Delegates API calls to `gh api`, which owns auth and transport."""

    def __init__(self, gh_path: str = "gh"):
        self.gh_path = gh_path

    def invoke(self, endpoint: str) -> bytes:
        """Run `gh api <endpoint>` and return its stdout."""
        cmd = [self.gh_path, "api", endpoint]
        logger.debug("exec %s", " ".join(cmd))
        try:
            proc = subprocess.run(cmd, capture_output=True, check=False)
        except OSError as e:
            raise TransportError(f"could not run {self.gh_path!r}: {e}") from e

        if proc.returncode != 0:
            stderr = proc.stderr.decode("utf-8", errors="replace").strip()
            raise TransportError(
                f"gh api {endpoint} exited with status {proc.returncode}: {stderr}"
            )
        return proc.stdout

    def close(self):
        pass


class HttpApiClient:
    """Thin client for GitHub REST endpoints using httpx."""

    def __init__(self, token: str | None = None, api_base: str | None = None):
        settings = get_settings()
        token = token or settings.github_token
        if not token:
            raise SettingsError("GITHUB_TOKEN is not set")
        self.api_base = (api_base or settings.api_base).rstrip("/")
        self._client = httpx.Client(
            headers={
                "Authorization": f"bearer {token}",
                "Accept": "application/vnd.github+json",
            },
            timeout=30.0,
        )

    def invoke(self, endpoint: str) -> bytes:
        """GET ``endpoint`` (path plus query string) and return the body."""
        ep = endpoint if endpoint.startswith("/") else f"/{endpoint}"
        url = f"{self.api_base}{ep}"
        logger.debug("GET %s", url)
        try:
            resp = self._client.request("GET", url)
        except httpx.HTTPError as e:
            raise TransportError(f"GET {endpoint} failed: {e}") from e

        if not 200 <= resp.status_code < 300:
            raise TransportError(f"GitHub API error {resp.status_code} for GET {endpoint}")
        return resp.content

    def close(self):
        self._client.close()


def get_api_client(settings: Settings | None = None) -> GhCliClient | HttpApiClient:
    """Build the API client selected by ``settings.api_client``."""
    settings = settings or get_settings()
    if settings.api_client == "http":
        return HttpApiClient(token=settings.github_token, api_base=settings.api_base)
    return GhCliClient(gh_path=settings.gh_path)
