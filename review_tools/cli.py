"""Review tools CLI using Typer."""

import json
import logging
from pathlib import Path
from typing import Annotated

import click
import typer
from rich.console import Console
from rich.logging import RichHandler

from .commits.classifier import CommitType
from .commits.composer import NO_CHANGES_MESSAGE
from .config import get_settings
from .exceptions import RepositoryAccessError
from .output.formatter import OutputFormatter
from .tools.handlers import generate_commit_message, write_review_to_markdown
from .tools.registry import openai_tool_definitions
from .vcs.operations import list_changes, summarize

app = typer.Typer(
    name="review-tools",
    help="Git change tools for AI code review agents.",
    no_args_is_help=True,
)

console = Console()
formatter = OutputFormatter(console)


def configure_logging(verbose: bool = False) -> None:
    """Route log records through Rich on stderr."""
    level = logging.DEBUG if verbose else get_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Git change tools for AI code review agents."""
    configure_logging(verbose)


@app.command()
def changes(
    path: Annotated[Path, typer.Argument(help="Directory inside the git repository")] = Path("."),
    staged: Annotated[
        bool,
        typer.Option("--staged", help="Use staged changes instead of the working tree"),
    ] = False,
    stat: Annotated[
        bool,
        typer.Option("--stat", help="Only show per-file line counts"),
    ] = False,
) -> None:
    """Show the changed files of a repository with their diffs."""
    try:
        if stat:
            summary = summarize(path, staged=staged)
            if not summary.files:
                formatter.print_no_changes(NO_CHANGES_MESSAGE)
                return
            formatter.print_summary(summary)
            return

        diffs = list_changes(path, staged=staged)
        if not diffs:
            formatter.print_no_changes(NO_CHANGES_MESSAGE)
            return
        formatter.print_header(f"{len(diffs)} changed file(s)")
        formatter.print_diffs(diffs)

    except RepositoryAccessError as e:
        formatter.print_error(e.message)
        raise typer.Exit(1) from None


@app.command("commit-message")
def commit_message(
    path: Annotated[Path, typer.Argument(help="Directory inside the git repository")] = Path("."),
    commit_type: Annotated[
        CommitType | None,
        typer.Option("--type", "-t", help="Commit type (auto-detected if omitted)"),
    ] = None,
    staged: Annotated[
        bool,
        typer.Option("--staged", help="Use staged changes instead of the working tree"),
    ] = False,
) -> None:
    """Suggest a conventional commit message for pending changes."""
    try:
        result = generate_commit_message(str(path), commit_type, staged=staged)
    except RepositoryAccessError as e:
        formatter.print_error(e.message)
        raise typer.Exit(1) from None

    if isinstance(result, str):
        formatter.print_no_changes(result)
        return
    formatter.print_commit_message(result)


@app.command("write-review")
def write_review(
    file_path: Annotated[Path, typer.Argument(help="Markdown file to write")],
    content: Annotated[
        str | None,
        typer.Option("--content", "-c", help="Review text"),
    ] = None,
    from_file: Annotated[
        Path | None,
        typer.Option("--from-file", "-f", help="Read the review text from a file"),
    ] = None,
    title: Annotated[
        str | None,
        typer.Option("--title", help="Document title"),
    ] = None,
    no_timestamp: Annotated[
        bool,
        typer.Option("--no-timestamp", help="Omit the generated timestamp"),
    ] = False,
) -> None:
    """Write review text to a formatted markdown document."""
    try:
        if from_file is not None:
            content = from_file.read_text(encoding="utf-8")
        if not content:
            formatter.print_error("Provide review text with --content or --from-file.")
            raise typer.Exit(1)

        result = write_review_to_markdown(
            str(file_path),
            content,
            title=title,
            include_timestamp=not no_timestamp,
        )
        if not result["success"]:
            formatter.print_error(result["error"])
            raise typer.Exit(1)

        formatter.print_success(f"{result['message']} ({result['size']} characters)")

    except click.exceptions.Exit:
        raise
    except OSError as e:
        formatter.print_error(f"Cannot read {from_file}: {e}")
        raise typer.Exit(1) from None


@app.command()
def tools() -> None:
    """Print the OpenAI tool definitions as JSON."""
    console.print_json(json.dumps(openai_tool_definitions()))


@app.command()
def config() -> None:
    """Show current configuration."""
    settings = get_settings()

    console.print()
    console.print("[bold]Review Tools Configuration[/bold]")
    console.print()
    console.print(f"  Excluded files: [cyan]{', '.join(settings.exclude_files) or '-'}[/cyan]")
    console.print(f"  Review title: [cyan]{settings.default_review_title}[/cyan]")
    console.print(f"  Log level: [cyan]{settings.log_level}[/cyan]")
    console.print()


@app.command()
def version() -> None:
    """Show version information."""
    from . import __version__

    console.print(f"Review Tools v{__version__}")


if __name__ == "__main__":
    app()
