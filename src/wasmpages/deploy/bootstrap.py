from pathlib import Path

from loguru import logger

from wasmpages.config import DeployConfig
from wasmpages.errors import DeployError
from wasmpages.git import GitClient


def ensure_checkout(config: DeployConfig) -> Path:
    """
    Make sure ``config.checkout_dir`` holds a checkout of the publishing branch.

    An existing directory is trusted as-is. Otherwise the branch is cloned from
    the source repository's remote; if that fails the branch is created as an
    orphan with a single empty commit and pushed upstream.
    Returns:
        Path to the checkout
    """
    checkout_dir = config.checkout_dir
    if checkout_dir.exists():
        logger.info(f"Using existing checkout at {checkout_dir}")
        return checkout_dir

    source_git = GitClient(config.source_dir)
    origin = source_git.remote_get_url(config.remote)
    logger.info(f"Cloning branch '{config.branch}' from {origin}")
    if source_git.clone(origin, checkout_dir, config.branch, remote=config.remote):
        return checkout_dir

    logger.info(f"Creating orphan branch '{config.branch}' in {checkout_dir}")
    try:
        checkout_dir.mkdir()
    except FileExistsError:
        raise DeployError(f"{checkout_dir} appeared while bootstrapping; is another deployment running?")

    git = GitClient(checkout_dir)
    git.init()
    git.remote_add(config.remote, origin)
    git.checkout_orphan(config.branch)
    git.commit(config.bootstrap_message, allow_empty=True)
    git.push(config.remote, config.branch, set_upstream=True)
    logger.success(f"Branch '{config.branch}' created on {config.remote}")
    return checkout_dir
