"""
Deployment settings.

Values come from constructor arguments first, then ``WASMPAGES_*`` environment
variables, then the defaults below.
"""

import os
import shlex
from pathlib import Path
from typing import List, Optional, Sequence, Union

DEFAULT_BRANCH = "gh-pages"
DEFAULT_REMOTE = "origin"
DEFAULT_BUILD_COMMAND = "wasm-pack build --target web"
DEFAULT_PKG_DIR = "pkg"
DEFAULT_INDEX_HTML = "web/index.html"
DEFAULT_ARTIFACT_PATTERNS = ("*.js", "*.wasm")
DEFAULT_COMMIT_MESSAGE = "gh-pages"


class DeployConfig:
    """Resolved settings for a single deployment run."""

    def __init__(
        self,
        source_dir: Optional[Path] = None,
        branch: Optional[str] = None,
        checkout_dir: Optional[str] = None,
        remote: Optional[str] = None,
        build_command: Optional[Union[str, Sequence[str]]] = None,
        pkg_dir: Optional[str] = None,
        index_html: Optional[str] = None,
        artifact_patterns: Sequence[str] = DEFAULT_ARTIFACT_PATTERNS,
        commit_message: Optional[str] = None,
    ):
        env = os.environ

        self.source_dir = Path(source_dir or env.get("WASMPAGES_SOURCE_DIR") or Path.cwd()).resolve()
        self.branch = branch or env.get("WASMPAGES_BRANCH") or DEFAULT_BRANCH
        self.checkout_name = checkout_dir or env.get("WASMPAGES_CHECKOUT_DIR") or self.branch
        self.remote = remote or env.get("WASMPAGES_REMOTE") or DEFAULT_REMOTE
        self.build_command = self._split_command(build_command or env.get("WASMPAGES_BUILD_COMMAND") or DEFAULT_BUILD_COMMAND)
        self.pkg_dir = self.source_dir / (pkg_dir or env.get("WASMPAGES_PKG_DIR") or DEFAULT_PKG_DIR)
        self.index_html = self.source_dir / (index_html or env.get("WASMPAGES_INDEX_HTML") or DEFAULT_INDEX_HTML)
        self.artifact_patterns = tuple(artifact_patterns)
        self.commit_message = commit_message or env.get("WASMPAGES_COMMIT_MESSAGE") or DEFAULT_COMMIT_MESSAGE
        self.bootstrap_message = f"create {self.branch}"

    @property
    def checkout_dir(self) -> Path:
        return self.source_dir / self.checkout_name

    @staticmethod
    def _split_command(command: Union[str, Sequence[str]]) -> List[str]:
        if isinstance(command, str):
            return shlex.split(command)
        return list(command)

    def __repr__(self) -> str:
        return f"DeployConfig(source_dir={str(self.source_dir)!r}, branch={self.branch!r}, remote={self.remote!r})"
