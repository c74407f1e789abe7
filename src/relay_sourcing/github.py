from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlparse

from .errors import InvalidRepositoryError

GITHUB_HOST = "github.com"


@dataclass(frozen=True)
class GitHubRepository:
    owner: str
    name: str

    def repo_id(self) -> str:
        return f"{self.owner}/{self.name}"


def parse_repository(url: str) -> GitHubRepository:
    """
    Parse a GitHub repository url into owner/name.

    Accepted:
      - https://github.com/<owner>/<name>
      - optional trailing "/" and optional ".git" suffix

    Raises InvalidRepositoryError for any other shape.
    """
    raw = (url or "").strip()
    try:
        parsed = urlparse(raw)
    except ValueError as e:
        raise InvalidRepositoryError(url) from e
    if parsed.scheme not in ("http", "https"):
        raise InvalidRepositoryError(url)
    if (parsed.hostname or "").lower() != GITHUB_HOST:
        raise InvalidRepositoryError(url)
    if parsed.query or parsed.fragment:
        raise InvalidRepositoryError(url)

    path = parsed.path.strip("/")
    parts = path.split("/") if path else []
    if len(parts) != 2:
        raise InvalidRepositoryError(url)
    owner, name = parts[0].strip(), parts[1].strip()
    if name.endswith(".git"):
        name = name[: -len(".git")]
    if not owner or not name:
        raise InvalidRepositoryError(url)
    return GitHubRepository(owner=owner, name=name)
