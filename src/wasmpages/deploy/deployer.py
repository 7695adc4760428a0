from pathlib import Path
from typing import Optional

from loguru import logger

from wasmpages.config import DeployConfig
from wasmpages.git import GitClient, history_url, parse_repo_slug

from .bootstrap import ensure_checkout
from .build import run_build
from .publish import publish_build


class Deployer:
    """Runs the gh-pages deployment steps in order."""

    def __init__(self, config: Optional[DeployConfig] = None):
        self.config = config or DeployConfig()
        self.checkout_dir: Optional[Path] = None

    def ensure_checkout(self) -> Path:
        self.checkout_dir = ensure_checkout(self.config)
        return self.checkout_dir

    def build(self):
        run_build(self.config.build_command, self.config.source_dir)

    def publish(self):
        publish_build(self.config, self.checkout_dir or self.config.checkout_dir)

    def history_url(self) -> str:
        """Link to the branch's commit history, derived from the checkout's remote URL."""
        checkout_dir = self.checkout_dir or self.config.checkout_dir
        origin = GitClient(checkout_dir).remote_get_url(self.config.remote)
        return history_url(parse_repo_slug(origin), self.config.branch)

    def run(self, skip_build: bool = False) -> str:
        logger.info(f"Deploying {self.config.source_dir} to branch '{self.config.branch}'")
        self.ensure_checkout()
        if skip_build:
            logger.info("Skipping build")
        else:
            self.build()
        self.publish()
        return self.history_url()
