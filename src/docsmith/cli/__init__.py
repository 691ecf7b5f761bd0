"""Docsmith CLI for documentation generation."""

from __future__ import annotations

import logfire
import typer
from rich.console import Console

from docsmith import __version__
from docsmith.cli.commands import generate, providers
from docsmith.core.config import get_settings

app = typer.Typer(
    name="docsmith",
    help="Build human-readable documentation from canonical LLM docs",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()

# Add command groups
app.add_typer(generate.app, name="generate", help="Generate documentation")
app.add_typer(providers.app, name="providers", help="Inspect LLM providers")


@app.callback()
def configure(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print structured log events to the console.",
    ),
) -> None:
    """Configure logging before any command runs."""
    settings = get_settings()
    logfire.configure(
        service_name="docsmith",
        environment=settings.environment,
        send_to_logfire="if-token-present",
        console=logfire.ConsoleOptions(min_log_level=settings.log_level.lower())
        if verbose
        else False,
    )


@app.command()
def version() -> None:
    """Show the CLI version."""
    console.print(f"docsmith version {__version__}")


def main() -> None:
    """Main entry point for the CLI."""
    app()


__all__ = ["app", "main"]
