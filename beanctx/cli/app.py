"""Command line tooling for inspecting bean packages."""

import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from .._version import __version__
from ..config import BeanContextSettings, ConfigurationManager
from ..di import ApplicationContext, ComponentScanner, select_constructor
from ..errors import BeanContextError
from ..logging_utils import configure_logging

app = typer.Typer(
    name="beanctx",
    help="Inspect and verify beanctx component packages",
    no_args_is_help=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=False,
)

console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"[bold cyan]beanctx[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-V", help="Enable debug logging"
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Configuration file path"
    ),
):
    """beanctx: a minimal dependency injection container."""
    try:
        settings = ConfigurationManager(command_config_path=config).load_settings()
    except BeanContextError as e:
        console.print(e.format_for_cli(verbose=verbose))
        raise typer.Exit(1)

    configure_logging(level="DEBUG" if verbose else settings.logging.level)
    ctx.obj = {"settings": settings, "verbose": verbose}


def _prepare_path(paths: Optional[List[Path]]) -> None:
    for entry in [Path.cwd(), *(paths or [])]:
        entry = str(entry.resolve())
        if entry not in sys.path:
            sys.path.insert(0, entry)


def _settings(ctx: typer.Context) -> BeanContextSettings:
    return ctx.obj["settings"]


@app.command()
def scan(
    ctx: typer.Context,
    package: Optional[str] = typer.Argument(None, help="Package to scan (defaults to configured base_package)"),
    path: Optional[List[Path]] = typer.Option(
        None, "--path", "-p", help="Extra directories to put on the import path"
    ),
):
    """List the components discovered in a package."""
    settings = _settings(ctx)
    package = package or settings.base_package
    if not package:
        console.print("[red]Error[/red]: no package given and no base_package configured")
        raise typer.Exit(2)

    _prepare_path(path)
    scanner = ComponentScanner(strict=settings.discovery.strict, exclude=settings.discovery.exclude)
    try:
        discovered = scanner.discover(package)
    except BeanContextError as e:
        console.print(e.format_for_cli(verbose=ctx.obj["verbose"]))
        raise typer.Exit(1)

    table = Table(title=f"Components in {package}")
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    table.add_column("Module", style="dim")
    table.add_column("Arity", justify="right")

    for name, cls in discovered:
        try:
            arity = str(select_constructor(cls).arity)
        except BeanContextError:
            arity = "[red]invalid[/red]"
        table.add_row(name, cls.__qualname__, cls.__module__, arity)

    console.print(table)
    console.print(f"Total components: {len(discovered)}")


@app.command()
def check(
    ctx: typer.Context,
    package: Optional[str] = typer.Argument(None, help="Package to check (defaults to configured base_package)"),
    path: Optional[List[Path]] = typer.Option(
        None, "--path", "-p", help="Extra directories to put on the import path"
    ),
):
    """Resolve every bean in a package and report failures."""
    settings = _settings(ctx)
    package = package or settings.base_package
    if not package:
        console.print("[red]Error[/red]: no package given and no base_package configured")
        raise typer.Exit(2)

    _prepare_path(path)
    failures = 0

    table = Table(title=f"Bean check: {package}")
    table.add_column("Name", style="cyan")
    table.add_column("Status")
    table.add_column("Detail", style="dim")

    context = ApplicationContext(package, settings=settings)
    try:
        names = context.bean_names()
    except BeanContextError as e:
        console.print(e.format_for_cli(verbose=ctx.obj["verbose"]))
        raise typer.Exit(1)

    try:
        for name in names:
            try:
                bean = context.gen_bean(name)
            except BeanContextError as e:
                failures += 1
                table.add_row(name, "[red]FAILED[/red]", f"{e.error_code}: {e.message}")
            else:
                table.add_row(name, "[green]OK[/green]", type(bean).__qualname__)
    finally:
        context.close()

    console.print(table)
    if failures:
        console.print(f"[red]{failures} bean(s) failed to resolve[/red]")
        raise typer.Exit(1)
    console.print("[green]All beans resolved[/green]")


def main():
    """Main entry point for the CLI."""
    app()
