import subprocess
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from wasmpages.errors import COMMAND_NOT_FOUND, GitCommandError


class GitClient:
    """Runs git commands inside a single working directory."""

    def __init__(self, cwd: Union[str, Path]):
        self.cwd = Path(cwd)

    def run(self, *args: str, check: bool = True) -> subprocess.CompletedProcess:
        """
        Run ``git <args>`` in the working directory.
        Args:
            args: git arguments
            check: raise GitCommandError on a non-zero exit
        Returns:
            The completed process with captured text output
        """
        command = ["git", *args]
        logger.debug(f"[{self.cwd}] {' '.join(command)}")
        try:
            result = subprocess.run(
                command,
                cwd=str(self.cwd),
                capture_output=True,
                text=True,
            )
        except FileNotFoundError:
            raise GitCommandError(command, COMMAND_NOT_FOUND, "git command not found")

        if result.stdout and result.stdout.strip():
            logger.debug(result.stdout.strip())
        if check and result.returncode != 0:
            raise GitCommandError(command, result.returncode, result.stderr)
        return result

    def remote_get_url(self, name: str = "origin") -> str:
        return self.run("remote", "get-url", name).stdout.strip()

    def clone(self, url: str, dest: Union[str, Path], branch: str, remote: str = "origin", depth: int = 1) -> bool:
        """Shallow single-branch clone. Returns False instead of raising when git fails."""
        result = self.run("clone", f"--depth={depth}", "--origin", remote, "--branch", branch, url, str(dest), check=False)
        if result.returncode != 0:
            logger.warning(f"Cloning branch '{branch}' from {url} failed: {result.stderr.strip()}")
            return False
        return True

    def init(self):
        self.run("init")

    def remote_add(self, name: str, url: str):
        self.run("remote", "add", name, url)

    def checkout_orphan(self, branch: str):
        self.run("checkout", "--orphan", branch)

    def add_all(self):
        self.run("add", ".")

    def commit(self, message: str, allow_empty: bool = False):
        args = ["commit"]
        if allow_empty:
            args.append("--allow-empty")
        self.run(*args, "--message", message)

    def pull(self):
        self.run("pull")

    def push(self, remote: Optional[str] = None, branch: Optional[str] = None, set_upstream: bool = False):
        args = ["push"]
        if set_upstream:
            args.append("-u")
        if remote:
            args.append(remote)
        if branch:
            args.append(branch)
        self.run(*args)
