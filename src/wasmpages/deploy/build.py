import subprocess
from pathlib import Path
from typing import List

from loguru import logger

from wasmpages.errors import COMMAND_NOT_FOUND, BuildError


def run_build(command: List[str], cwd: Path):
    """Run the build tool with its output going straight to the terminal."""
    logger.info(f"Building: {' '.join(command)}")
    try:
        # Not captured; build output is for the user
        result = subprocess.run(command, cwd=str(cwd))
    except FileNotFoundError:
        raise BuildError(command, COMMAND_NOT_FOUND, f"{command[0]} command not found")

    if result.returncode != 0:
        raise BuildError(command, result.returncode)
    logger.info("Build finished")
