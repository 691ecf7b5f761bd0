"""Generate command for docsmith CLI."""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from docsmith.config import load_project_config
from docsmith.core.config import get_settings
from docsmith.core.errors import (
    ProviderUnavailableError,
    SourceFileNotFoundError,
    UnknownProviderError,
    UnsafePathError,
)
from docsmith.core.service import DocumentationService, GenerationResult, RunOptions

app = typer.Typer(context_settings={"help_option_names": ["-h", "--help"]})
console = Console()


@app.callback(invoke_without_command=True)
def generate(
    provider: str | None = typer.Option(
        None,
        "--provider",
        "-p",
        help="LLM provider: ollama, gemini, claude or openai. Defaults to ollama.",
    ),
    model: str | None = typer.Option(
        None,
        "--model",
        "-m",
        help="Model name. Uses the provider default if not provided.",
    ),
    file: str | None = typer.Option(
        None,
        "--file",
        "-f",
        help="Generate a single file only (relative to the source directory).",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        help="Regenerate even if the target exists and is newer.",
    ),
    merge: bool = typer.Option(
        True,
        "--merge/--no-merge",
        help="Merge companion files (foo-impl.md, foo-testing.md) into their main file.",
    ),
    retry_failed: bool = typer.Option(
        False,
        "--retry-failed",
        help="Retry only files that failed in the previous run.",
    ),
    clean: bool = typer.Option(
        False,
        "--clean",
        help="Clear the failed files history and restart all files.",
    ),
    source: Path | None = typer.Option(
        None,
        "--source",
        help="Source directory. Defaults to docs/llm.",
    ),
    target: Path | None = typer.Option(
        None,
        "--target",
        help="Target directory. Defaults to docs/en.",
    ),
) -> None:
    """Generate human-readable documentation from the canonical docs.

    Companion files are merged into their main file by default:
    foo.md + foo-impl.md + foo-testing.md -> docs/en/foo.md

    Examples:

        docsmith generate

        docsmith generate --provider gemini

        docsmith generate --file policies/security.md

        docsmith generate --force --no-merge

        docsmith generate --retry-failed
    """
    settings = get_settings()

    try:
        project_config = load_project_config()
    except ValueError as e:
        console.print(f"[red]Error:[/red] Invalid project config: {e}")
        raise typer.Exit(1) from None

    service = DocumentationService(
        settings=settings,
        project_config=project_config,
        source_dir=source,
        target_dir=target,
        console=console,
    )
    options = RunOptions(
        provider=provider,
        model=model,
        file=file,
        force=force,
        merge=merge,
        retry_failed=retry_failed,
        clean=clean,
    )

    if retry_failed:
        mode = "Retry failed files only"
    elif clean:
        mode = "Clean restart (all files)"
    elif file:
        mode = f"Single file ({file})"
    else:
        mode = "Changed files" if not force else "All files (forced)"

    console.print(
        Panel(
            f"Provider: [blue]{provider or project_config.provider or settings.llm_provider}"
            f"[/blue]\n"
            f"Source: [blue]{service.source_dir}[/blue]\n"
            f"Target: [blue]{service.target_dir}[/blue]\n"
            f"Merge: [blue]{'Yes (companion files merged)' if merge else 'No'}[/blue]\n"
            f"Mode: [blue]{mode}[/blue]",
            title="Documentation Generation",
            border_style="blue",
        )
    )

    try:
        result = asyncio.run(service.run(options))
    except UnknownProviderError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from None
    except ProviderUnavailableError as e:
        console.print(f"[red]Error:[/red] {e}")
        if e.hint:
            console.print(f"   {e.hint}")
        raise typer.Exit(1) from None
    except SourceFileNotFoundError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from None
    except UnsafePathError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from None
    except Exception as e:
        console.print(f"[red]Fatal error:[/red] {e}")
        raise typer.Exit(1) from None

    if result.cleared_history:
        console.print("[dim]Cleared failed files history.[/dim]")

    if result.selected:
        print_summary(result)


def print_summary(result: GenerationResult) -> None:
    """Print the aggregate outcome of a run."""
    border = "green" if not result.failed else "yellow"
    lines = [f"Success: [green]{result.success}[/green]"]
    if result.failed:
        lines.append(f"Failed: [red]{result.failure_count}[/red]")
        lines.append("\nTo retry failed files, run:\n  docsmith generate --retry-failed")

    console.print()
    console.print(Panel("\n".join(lines), title="Generation Complete", border_style=border))
