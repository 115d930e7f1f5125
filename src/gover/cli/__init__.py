"""Command line interface for gover."""

from __future__ import annotations

from gover.cli.app import app, main

__all__ = ["app", "main"]
