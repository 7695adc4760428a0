"""
Errors raised while deploying to gh-pages.

Every error carries the exit code the CLI should terminate with.
"""

from typing import List, Optional

# Shell convention for "command not found"
COMMAND_NOT_FOUND = 127
# Shell convention for a process killed by signal N is 128 + N
SIGNAL_EXIT_BASE = 128


class DeployError(Exception):
    """Base class for deployment failures."""

    exit_code = 1

    def __init__(self, message: str, exit_code: Optional[int] = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class CommandError(DeployError):
    """An external command exited with a non-zero status."""

    def __init__(self, command: List[str], returncode: int, stderr: str = ""):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr or ""
        message = f"command failed with exit code {returncode}: {' '.join(self.command)}"
        if self.stderr.strip():
            message = f"{message}\n{self.stderr.strip()}"
        exit_code = SIGNAL_EXIT_BASE - returncode if returncode < 0 else returncode
        super().__init__(message, exit_code=exit_code)


class GitCommandError(CommandError):
    """A git invocation failed."""


class BuildError(CommandError):
    """The build tool failed."""


class ArtifactError(DeployError):
    """Build outputs to publish are missing."""


class UnrecognizedOriginError(DeployError):
    """The remote URL is neither the SSH nor the HTTPS github form."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"unrecognized github origin: {url}", exit_code=1)
