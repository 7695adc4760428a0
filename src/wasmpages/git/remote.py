import re

from wasmpages.errors import UnrecognizedOriginError

# Tried in order
ORIGIN_PATTERNS = (
    re.compile(r"^git@github\.com:(?P<slug>[^/\s]+/[^/\s]+?)\.git$"),
    re.compile(r"^https://github\.com/(?P<slug>[^/\s]+/[^/\s]+?)\.git$"),
)


def parse_repo_slug(url: str) -> str:
    """
    Extract ``owner/repo`` from a github remote URL.
    Raises UnrecognizedOriginError when neither the SSH nor the HTTPS form matches.
    """
    candidate = url.strip()
    for pattern in ORIGIN_PATTERNS:
        match = pattern.match(candidate)
        if match and match.group("slug"):
            return match.group("slug")
    raise UnrecognizedOriginError(url)


def history_url(slug: str, branch: str = "gh-pages") -> str:
    return f"https://github.com/{slug}/commits/{branch}"
