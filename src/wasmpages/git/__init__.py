from .client import GitClient
from .remote import history_url, parse_repo_slug

__all__ = ["GitClient", "history_url", "parse_repo_slug"]
