"""Command-line interface for routines-md."""

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table
from rich.text import Text

from routines_md import __version__
from routines_md.config import get_settings
from routines_md.core.converter import ConversionError, DocumentConverter
from routines_md.formats import SOURCE_EXTENSIONS, SUPPORTED_EXTENSIONS
from routines_md.formatting.inline import InlineScanner
from routines_md.render import TerminalRenderer

app = typer.Typer(
    name="routines-md",
    help="Parse and render journal markdown entries.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

OUTPUT_SUFFIX = "-export"
FORMATS = tuple(ext.lstrip(".") for ext in SUPPORTED_EXTENSIONS if ext != ".markdown")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"routines-md v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send log records through rich, DEBUG when verbose."""
    settings = get_settings()
    level = logging.DEBUG if verbose else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def generate_output_path(
    input_path: Path, fmt: str, output_dir: Optional[Path] = None
) -> Path:
    """Generate output path with -export suffix and the format's extension."""
    output_name = f"{input_path.stem}{OUTPUT_SUFFIX}.{fmt}"

    if output_dir:
        return output_dir / output_name
    return input_path.parent / output_name


def process_file(
    input_path: Path,
    output_path: Path,
    verbose: bool,
    converter: Optional[DocumentConverter] = None,
) -> bool:
    """Convert a single file. Returns True on success."""
    if input_path.suffix.lower() not in SOURCE_EXTENSIONS:
        console.print(
            f"[yellow]Skipping:[/yellow] {input_path.name} "
            f"(unsupported format: {input_path.suffix})"
        )
        return False

    if verbose:
        console.print(f"[blue]Processing:[/blue] {input_path}")
        console.print(f"[blue]Output:[/blue] {output_path}")

    try:
        converter = converter or DocumentConverter()
        document = converter.convert_file(input_path, output_path)
        console.print(
            f"[green]Success:[/green] {output_path} ({len(document)} lines)"
        )
        return True
    except (ConversionError, OSError, ValueError) as e:
        console.print(f"[red]Error processing {input_path.name}:[/red] {e}")
        if verbose:
            console.print_exception()
        return False


def process_folder(
    folder_path: Path,
    fmt: str,
    verbose: bool,
    recursive: bool = True,
) -> tuple[int, int]:
    """Convert all markdown sources in a folder. Returns (success_count, fail_count)."""
    files: list[Path] = []
    for ext in SOURCE_EXTENSIONS:
        if recursive:
            files.extend(folder_path.rglob(f"*{ext}"))
        else:
            files.extend(folder_path.glob(f"*{ext}"))

    # Skip outputs of earlier runs
    files = sorted(f for f in files if not f.stem.endswith(OUTPUT_SUFFIX))

    if not files:
        console.print(
            f"[yellow]No markdown files found in {folder_path}[/yellow]\n"
            f"Supported formats: {', '.join(SOURCE_EXTENSIONS)}"
        )
        return 0, 0

    console.print(f"[blue]Found {len(files)} file(s) to convert[/blue]")

    converter = DocumentConverter()
    success_count = 0
    fail_count = 0

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Converting files...", total=len(files))

        for file_path in files:
            progress.update(task, description=f"Converting {file_path.name}...")
            output_path = generate_output_path(file_path, fmt)
            if process_file(file_path, output_path, verbose, converter):
                success_count += 1
            else:
                fail_count += 1
            progress.advance(task)

    return success_count, fail_count


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output and debug logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Parse and render journal markdown entries.

    Examples:

        routines-md show entry.md

        routines-md convert entry.md --format json

        routines-md convert /path/to/journal --format txt

        routines-md spans "**done** and *pending*"
    """
    try:
        configure_logging(verbose)
    except ValidationError as e:
        err_console.print(f"[red]Invalid configuration:[/red] {e}")
        raise typer.Exit(1)
    ctx.obj = {"verbose": verbose}


@app.command()
def show(
    path: Path = typer.Argument(
        ...,
        help="Markdown file to render",
        exists=True,
        dir_okay=False,
    ),
) -> None:
    """Render a markdown file in the terminal."""
    try:
        document = DocumentConverter().load(path)
    except (ConversionError, OSError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    TerminalRenderer().print(document, console)


@app.command()
def convert(
    ctx: typer.Context,
    path: Path = typer.Argument(
        ...,
        help="File or folder to convert",
        exists=True,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path (for single file only); its extension picks the format",
    ),
    fmt: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: json, txt or md (default from ROUTINES_MD_FORMAT)",
    ),
    recursive: bool = typer.Option(
        True,
        "--recursive/--no-recursive",
        help="Descend into sub-folders in folder mode",
    ),
) -> None:
    """Convert markdown entries to JSON, plain text or normalized markdown."""
    use_format = (fmt or get_settings().default_format).lower().lstrip(".")
    if use_format not in FORMATS:
        console.print(
            f"[red]Error:[/red] Unknown format '{use_format}'. "
            f"Choose from: {', '.join(FORMATS)}"
        )
        raise typer.Exit(1)

    verbose = bool(ctx.obj and ctx.obj.get("verbose"))

    if path.is_file():
        output_path = output or generate_output_path(path, use_format)
        success = process_file(path, output_path, verbose)
        raise typer.Exit(0 if success else 1)

    if output is not None:
        console.print(
            "[yellow]Warning:[/yellow] --output is ignored in folder mode. "
            f"Files will be saved alongside originals with {OUTPUT_SUFFIX} suffix."
        )

    success, fail = process_folder(path, use_format, verbose, recursive)
    console.print(f"\n[bold]Complete:[/bold] {success} succeeded, {fail} failed")
    raise typer.Exit(0 if fail == 0 else 1)


@app.command()
def spans(
    text: str = typer.Argument(..., help="A single line of markdown"),
) -> None:
    """Print the inline spans found in a line of text."""
    table = Table(title="Inline spans")
    table.add_column("#", justify="right")
    table.add_column("Type")
    table.add_column("Content")

    for index, span in enumerate(InlineScanner().scan(text), start=1):
        table.add_row(str(index), span.inline_type.value, Text(span.content))

    console.print(table)


@app.command()
def lines(
    path: Path = typer.Argument(
        ...,
        help="Markdown file to inspect",
        exists=True,
        dir_okay=False,
    ),
) -> None:
    """Print the logical lines of a markdown file."""
    try:
        document = DocumentConverter().load(path)
    except (ConversionError, OSError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    table = Table(title=path.name)
    table.add_column("#", justify="right")
    table.add_column("Type")
    table.add_column("Content")

    for index, line in enumerate(document.lines, start=1):
        table.add_row(str(index), line.block_type.value, Text(line.content))

    console.print(table)


if __name__ == "__main__":
    app()
