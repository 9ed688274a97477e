"""
Elementsnatch CLI - Command line interface.

Usage:
    elementsnatch ancestors page.html --target ".tab-header-group"
    elementsnatch path page.html --target ".tab-header-group" --ancestor ".tab-header"
    elementsnatch css page.html --root "ul.menu" --max-nodes 500 --copy
"""

import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from elementsnatch import __version__
from elementsnatch.clipboard import Noticer, copy_text
from elementsnatch.config import (
    DEFAULT_INDENT,
    DEFAULT_MAX_NODES,
    DEFAULT_PARSER,
    DEFAULT_SKIP_TAG_NAMES,
    NOTICE_FAIL_MS,
    NOTICE_OK_MS,
)
from elementsnatch.dom import DomService, SerializeOptions
from elementsnatch.exceptions import SnatchError
from elementsnatch.highlight import Highlighter
from elementsnatch.logging import console as err_console
from elementsnatch.logging import logger, setup_logging
from elementsnatch.menu import build_menu

# Load .env file if present
load_dotenv()

app = typer.Typer(
    name="elementsnatch",
    help="Synthesize CSS selector paths and nested CSS from HTML documents",
    add_completion=False,
)

# Results go to stdout; notices and logs go to stderr
console = Console()

FILE_HELP = "HTML file to read ('-' for stdin)"


def _setup(verbose: bool, log_file: str | None = None) -> None:
    setup_logging(level="DEBUG" if verbose else "WARNING", log_file=log_file)


def _load(file: str, parser: str) -> DomService:
    if file == "-":
        return DomService.from_html(sys.stdin.read(), parser)
    return DomService.from_file(Path(file), parser)


def _emit(text: str, copy: bool, what: str) -> None:
    """Print text, or copy it and announce the result."""
    if not copy:
        typer.echo(text, nl=False)
        return

    ok = copy_text(text)
    logger.copied(what, ok)
    noticer = Noticer()
    if ok:
        noticer.show(f"{what} copied", NOTICE_OK_MS)
    else:
        noticer.show("Copy failed", NOTICE_FAIL_MS, style="warning")
        typer.echo(text, nl=False)


def _fail(e: Exception) -> None:
    err_console.print(f"[red]Error: {escape(str(e))}[/red]")
    raise typer.Exit(1)


@app.command()
def ancestors(
    file: str = typer.Argument(..., help=FILE_HELP),
    target: str = typer.Option(..., "--target", "-t", help="CSS selector of the target element"),
    mode: str = typer.Option("path", "--mode", "-m", help="Menu mode (path/css)"),
    parser: str = typer.Option(DEFAULT_PARSER, "--parser", envvar="ELEMENTSNATCH_PARSER"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """List the target's ancestors, <body> first."""
    _setup(verbose)
    if mode not in ("path", "css"):
        _fail(SnatchError(f"Unknown mode {mode!r}"))

    try:
        service = _load(file, parser)
        menu = build_menu(service.select(target), mode=mode, stop_at=service.body)
    except SnatchError as e:
        _fail(e)

    logger.menu(mode, len(menu.items))
    table = Table(title=menu.title)
    table.add_column("#", justify="right")
    table.add_column("Element")
    table.add_column("Result" if mode == "path" else "Root selector")
    for item in menu.items:
        table.add_row(str(item.index), escape(item.label), escape(item.title))
    console.print(table)


@app.command()
def path(
    file: str = typer.Argument(..., help=FILE_HELP),
    target: str = typer.Option(..., "--target", "-t", help="CSS selector of the target element"),
    ancestor: str | None = typer.Option(None, "--ancestor", "-a", help="CSS selector of the ancestor"),
    level: int | None = typer.Option(
        None, "--level", "-l", help="Ancestor by menu index (0 = <body>, -1 = target)"
    ),
    nth_child: bool = typer.Option(False, "--nth-child", help="Add :nth-child() qualifiers"),
    copy: bool = typer.Option(False, "--copy", "-c", help="Copy to clipboard instead of printing"),
    parser: str = typer.Option(DEFAULT_PARSER, "--parser", envvar="ELEMENTSNATCH_PARSER"),
    log_file: str | None = typer.Option(None, "--log-file", help="Write JSON logs to a file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Print descendant and child selector paths from an ancestor to the target."""
    _setup(verbose, log_file)
    if (ancestor is None) == (level is None):
        _fail(SnatchError("Give exactly one of --ancestor or --level"))

    try:
        service = _load(file, parser)
        target_el = service.select(target)
        options = SerializeOptions.build(include_nth_child=nth_child)
        if ancestor is not None:
            pair = service.paths(service.select(ancestor), target_el, options)
            text = pair.to_clipboard_text()
            logger.path(pair.descendant)
        else:
            menu = build_menu(target_el, mode="path", options=options, stop_at=service.body)
            text = menu.choose(level)
    except IndexError:
        _fail(SnatchError(f"No ancestor at level {level}"))
    except SnatchError as e:
        _fail(e)

    _emit(text, copy, "Path")


@app.command()
def css(
    file: str = typer.Argument(..., help=FILE_HELP),
    root: str = typer.Option("body", "--root", "-r", help="CSS selector of the subtree root"),
    indent: str = typer.Option(DEFAULT_INDENT, "--indent", envvar="ELEMENTSNATCH_INDENT"),
    max_depth: int | None = typer.Option(None, "--max-depth", help="Deepest level to render"),
    max_nodes: int = typer.Option(
        DEFAULT_MAX_NODES, "--max-nodes", envvar="ELEMENTSNATCH_MAX_NODES"
    ),
    skip: list[str] = typer.Option(
        sorted(DEFAULT_SKIP_TAG_NAMES), "--skip", "-s", help="Tag names to leave out"
    ),
    nth_child: bool = typer.Option(False, "--nth-child", help="Add :nth-child() qualifiers"),
    hex_escape: bool = typer.Option(False, "--hex-escape", help="Escape identifiers as \\hex"),
    copy: bool = typer.Option(False, "--copy", "-c", help="Copy to clipboard instead of printing"),
    parser: str = typer.Option(DEFAULT_PARSER, "--parser", envvar="ELEMENTSNATCH_PARSER"),
    log_file: str | None = typer.Option(None, "--log-file", help="Write JSON logs to a file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Print the nested CSS serialization of a subtree."""
    _setup(verbose, log_file)
    try:
        options = SerializeOptions.build(
            indent=indent.replace("\\t", "\t"),
            max_depth=max_depth,
            max_nodes=max_nodes,
            skip_tag_names=skip,
            include_nth_child=nth_child,
            escape_mode="hex" if hex_escape else "cssom",
        )
        service = _load(file, parser)
        result = service.serialize(service.select(root), options)
    except SnatchError as e:
        _fail(e)

    if result.truncated:
        logger.truncated(options.max_nodes)
    logger.serialized(result.node_count, result.group_count)
    _emit(result.text, copy, "Nested CSS")


@app.command()
def highlight(
    file: str = typer.Argument(..., help=FILE_HELP),
    target: str = typer.Option(..., "--target", "-t", help="CSS selector of the element"),
    output: Path = typer.Option(..., "--output", "-o", help="Where to write the highlighted HTML"),
    parser: str = typer.Option(DEFAULT_PARSER, "--parser", envvar="ELEMENTSNATCH_PARSER"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Write a copy of the document with the target element highlighted."""
    _setup(verbose)
    try:
        service = _load(file, parser)
        Highlighter().highlight(service.select(target), True)
    except SnatchError as e:
        _fail(e)

    output.write_text(str(service.document), encoding="utf-8")
    logger.success(f"Wrote {output}")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"Elementsnatch v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
