"""Providers command for docsmith CLI."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from docsmith.core.config import get_settings
from docsmith.llm import LLMProvider, available_providers, get_provider

app = typer.Typer(context_settings={"help_option_names": ["-h", "--help"]})
console = Console()


async def _check_provider(provider: LLMProvider, with_models: bool) -> tuple[bool, list[str]]:
    healthy = await provider.health_check()
    models = await provider.list_models() if with_models and healthy else []
    return healthy, models


@app.callback(invoke_without_command=True)
def providers(
    models: bool = typer.Option(
        False,
        "--models",
        help="Also list the models each available provider offers.",
    ),
) -> None:
    """Show every provider with its health status."""
    settings = get_settings()

    table = Table(title="LLM Providers")
    table.add_column("Provider", style="cyan")
    table.add_column("Default model")
    table.add_column("Status")
    if models:
        table.add_column("Models")

    for name in available_providers():
        provider = get_provider(name, settings=settings)
        healthy, names = asyncio.run(_check_provider(provider, models))

        status = "[green]ready[/green]" if healthy else "[red]unavailable[/red]"
        row = [name, provider.default_model, status]
        if models:
            row.append(", ".join(names) if names else "[dim]-[/dim]")
        table.add_row(*row)

        if not healthy and provider.remediation_hint:
            console.print(f"[dim]{name}: {provider.remediation_hint}[/dim]")

    console.print(table)
