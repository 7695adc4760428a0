"""
Replace the contents of the gh-pages checkout with the latest build.
"""

import shutil
from pathlib import Path
from typing import List

from loguru import logger

from wasmpages.config import DeployConfig
from wasmpages.errors import ArtifactError
from wasmpages.git import GitClient

PRESERVED_ENTRIES = {".git"}


def collect_artifacts(config: DeployConfig) -> List[Path]:
    """
    Find the files to publish: build outputs matching the artifact patterns plus the HTML entry point.
    Raises ArtifactError when the entry point or every build output is missing.
    """
    artifacts: List[Path] = []
    if config.pkg_dir.is_dir():
        for pattern in config.artifact_patterns:
            artifacts.extend(sorted(p for p in config.pkg_dir.glob(pattern) if p.is_file()))

    if not artifacts:
        patterns = ", ".join(config.artifact_patterns)
        raise ArtifactError(f"no build artifacts matching {patterns} in {config.pkg_dir}")
    if not config.index_html.is_file():
        raise ArtifactError(f"HTML entry point not found: {config.index_html}")

    artifacts.append(config.index_html)
    return artifacts


def clear_checkout(checkout_dir: Path) -> int:
    """Delete every top-level entry except the git metadata. Returns the number removed."""
    removed = 0
    for entry in checkout_dir.iterdir():
        if entry.name in PRESERVED_ENTRIES:
            continue
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry)
        else:
            entry.unlink()
        removed += 1
    return removed


def publish_build(config: DeployConfig, checkout_dir: Path):
    git = GitClient(checkout_dir)
    artifacts = collect_artifacts(config)

    git.pull()

    removed = clear_checkout(checkout_dir)
    logger.debug(f"Removed {removed} entries from {checkout_dir}")

    for artifact in artifacts:
        shutil.copyfile(artifact, checkout_dir / artifact.name)
        logger.debug(f"Copied {artifact.name}")
    logger.info(f"Copied {len(artifacts)} files into {checkout_dir.name}/")

    git.add_all()
    git.commit(config.commit_message, allow_empty=True)
    git.push()
    logger.success(f"Pushed {config.branch}")
