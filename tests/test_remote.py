import pytest

from wasmpages.errors import UnrecognizedOriginError
from wasmpages.git.remote import history_url, parse_repo_slug


def test_parse_ssh_origin():
    assert parse_repo_slug("git@github.com:OWNER/REPO.git") == "OWNER/REPO"


def test_parse_https_origin():
    assert parse_repo_slug("https://github.com/OWNER/REPO.git") == "OWNER/REPO"


def test_parse_ignores_trailing_newline():
    """``git remote get-url`` output ends with a newline."""
    assert parse_repo_slug("git@github.com:rust-lang/snake.rs.git\n") == "rust-lang/snake.rs"


@pytest.mark.parametrize(
    "url",
    [
        "https://gitlab.com/owner/repo.git",
        "git@bitbucket.org:owner/repo.git",
        "https://github.com/owner/repo",
        "/srv/git/repo.git",
        "https://github.com/owner.git",
        "",
    ],
)
def test_unrecognized_origin(url):
    with pytest.raises(UnrecognizedOriginError) as exc_info:
        parse_repo_slug(url)

    assert exc_info.value.exit_code == 1
    assert str(exc_info.value) == f"unrecognized github origin: {url}"


def test_history_url():
    assert history_url("OWNER/REPO") == "https://github.com/OWNER/REPO/commits/gh-pages"
    assert history_url("OWNER/REPO", "pages") == "https://github.com/OWNER/REPO/commits/pages"
