import pytest

from relay_sourcing.errors import InvalidRepositoryError
from relay_sourcing.github import parse_repository


def test_parse_repository_basic() -> None:
    r = parse_repository("https://github.com/r0gue-io/polkadot")
    assert r.owner == "r0gue-io"
    assert r.name == "polkadot"
    assert r.repo_id() == "r0gue-io/polkadot"


def test_parse_repository_tolerates_trailing_slash_and_git_suffix() -> None:
    assert parse_repository("https://github.com/paritytech/polkadot-sdk/").name == "polkadot-sdk"
    assert parse_repository("https://github.com/paritytech/polkadot-sdk.git").name == "polkadot-sdk"


@pytest.mark.parametrize(
    "url",
    [
        "",
        "github.com/r0gue-io/polkadot",
        "ftp://github.com/r0gue-io/polkadot",
        "https://gitlab.com/r0gue-io/polkadot",
        "https://github.com/r0gue-io",
        "https://github.com/r0gue-io/polkadot/releases",
        "https://github.com/r0gue-io/.git",
    ],
)
def test_parse_repository_rejects_malformed(url: str) -> None:
    with pytest.raises(InvalidRepositoryError) as e:
        parse_repository(url)
    assert e.value.url == url
