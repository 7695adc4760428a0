#!/usr/bin/env python3
"""Command line entry point for publishing a web build to gh-pages."""

import sys
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from wasmpages.config import DeployConfig
from wasmpages.deploy import Deployer
from wasmpages.errors import DeployError

app = typer.Typer(help="Build the project for the web and publish it to the gh-pages branch", add_completion=False)
console = Console()


def configure_logging(verbose: bool):
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO", format="<level>{level: <8}</level> | {message}")


@app.command()
def deploy(
    source_dir: Optional[Path] = typer.Option(None, "--source-dir", help="Project directory (default: current directory)"),
    branch: Optional[str] = typer.Option(None, "--branch", help="Branch to publish to (default: gh-pages)"),
    remote: Optional[str] = typer.Option(None, "--remote", help="Remote to clone from and push to (default: origin)"),
    build_command: Optional[str] = typer.Option(None, "--build-command", help="Build command (default: wasm-pack build --target web)"),
    skip_build: bool = typer.Option(False, "--skip-build", help="Publish the existing build output without rebuilding"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Show every git command"),
):
    """Build, copy the output into the gh-pages checkout, commit and push."""
    configure_logging(verbose)
    config = DeployConfig(source_dir=source_dir, branch=branch, remote=remote, build_command=build_command)
    deployer = Deployer(config)

    try:
        url = deployer.run(skip_build=skip_build)
    except DeployError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]", highlight=False, soft_wrap=True)
        raise typer.Exit(code=e.exit_code)

    console.print(url, highlight=False, soft_wrap=True)


def main():
    """Main entry point for the wasmpages CLI."""
    app()


if __name__ == "__main__":
    main()
