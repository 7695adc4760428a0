"""Publish a wasm-pack web build to a repository's gh-pages branch."""

__version__ = "0.1.0"
