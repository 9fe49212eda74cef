"""beanctx CLI module.

A thin typer application over the container for listing and verifying
the components of a package.
"""

from .app import app, main

__all__ = ["app", "main"]
