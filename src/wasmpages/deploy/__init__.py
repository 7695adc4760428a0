from .bootstrap import ensure_checkout
from .build import run_build
from .deployer import Deployer
from .publish import clear_checkout, collect_artifacts, publish_build

__all__ = ["Deployer", "clear_checkout", "collect_artifacts", "ensure_checkout", "publish_build", "run_build"]
