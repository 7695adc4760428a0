import os
import shutil
import subprocess

import pytest

from wasmpages.config import DeployConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep WASMPAGES_* variables from the developer's shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("WASMPAGES_"):
            monkeypatch.delenv(key)


@pytest.fixture
def project(tmp_path):
    """A source directory with build output and an HTML entry point."""
    source = tmp_path / "project"
    (source / "pkg").mkdir(parents=True)
    (source / "web").mkdir()
    (source / "pkg" / "snake.js").write_text("export default function init() {}")
    (source / "pkg" / "snake_bg.wasm").write_bytes(b"\x00asm\x01\x00\x00\x00")
    (source / "pkg" / "snake.d.ts").write_text("export function start(): void;")
    (source / "pkg" / "package.json").write_text("{}")
    (source / "web" / "index.html").write_text("<script type=module>import init from './snake.js'; init();</script>")
    return source


@pytest.fixture
def config(project):
    return DeployConfig(source_dir=project, build_command="true")


@pytest.fixture
def git(monkeypatch, tmp_path):
    """Run real git isolated from user configuration. Returns a ``git(cwd, *args)`` helper."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    gitconfig = tmp_path / "gitconfig"
    gitconfig.write_text("[init]\n\tdefaultBranch = main\n")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(gitconfig))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    for who in ("AUTHOR", "COMMITTER"):
        monkeypatch.setenv(f"GIT_{who}_NAME", "Test")
        monkeypatch.setenv(f"GIT_{who}_EMAIL", "test@example.com")

    def run(cwd, *args):
        result = subprocess.run(["git", *args], cwd=str(cwd), capture_output=True, text=True, check=True)
        return result.stdout.strip()

    return run
