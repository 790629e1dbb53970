"""Typer-based CLI for git-open-link."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from . import __version__
from .browser import BrowserLauncher, PrintOnly, SystemBrowser
from .commands import open_on_current_branch, open_on_default_branch
from .config import resolve_workspace_root
from .editor import CommandLineEditor, parse_file_argument
from .exceptions import OpenLinkError, ValidationError
from .models import EditorSelection, SelectionRange

app = typer.Typer(
    help="Open the hosted web page for a file and line range in a git repository",
    add_completion=False,
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()

FILE_HELP = "File to link to, optionally suffixed with :N or :N-M."
LINE_HELP = "1-based cursor line."
LINES_HELP = "1-based inclusive selection, e.g. 10-15."
REPO_HELP = "Repository root (defaults to $GIT_OPEN_LINK_REPO, then git toplevel)."
PRINT_HELP = "Print the link instead of opening a browser."


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"git-open-link {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the git-open-link version and exit.",
    ),
) -> None:
    _ = version  # handled via callback
    configure_logging(verbose)


@app.command("main", help="Open the file on the default branch (main)")
def open_main(
    target: str = typer.Argument(..., help=FILE_HELP),
    line: Optional[int] = typer.Option(None, "--line", "-l", min=1, help=LINE_HELP),
    lines: Optional[str] = typer.Option(None, "--lines", help=LINES_HELP),
    repo: Optional[Path] = typer.Option(None, "--repo", "-r", file_okay=False, help=REPO_HELP),
    print_only: bool = typer.Option(False, "--print", "-p", help=PRINT_HELP),
) -> None:
    _run(target, line, lines, repo, print_only, use_default_branch=True)


@app.command("current", help="Open the file on the checked-out branch")
def open_current(
    target: str = typer.Argument(..., help=FILE_HELP),
    line: Optional[int] = typer.Option(None, "--line", "-l", min=1, help=LINE_HELP),
    lines: Optional[str] = typer.Option(None, "--lines", help=LINES_HELP),
    repo: Optional[Path] = typer.Option(None, "--repo", "-r", file_okay=False, help=REPO_HELP),
    print_only: bool = typer.Option(False, "--print", "-p", help=PRINT_HELP),
) -> None:
    _run(target, line, lines, repo, print_only, use_default_branch=False)


def _run(
    target: str,
    line: int | None,
    lines: str | None,
    repo: Path | None,
    print_only: bool,
    *,
    use_default_branch: bool,
) -> None:
    try:
        editor = _build_editor(target, line, lines)
        workspace_root = resolve_workspace_root(repo, editor.file_path)
        launcher: BrowserLauncher = PrintOnly(console) if print_only else SystemBrowser()
        if use_default_branch:
            link = open_on_default_branch(editor, workspace_root, launcher)
        else:
            link = open_on_current_branch(editor, workspace_root, launcher)
    except OpenLinkError as err:
        _fail(str(err))
    if not print_only:
        console.print(f"Opened [bold]{escape(link.url)}[/bold]", highlight=False, soft_wrap=True)


def _build_editor(target: str, line: int | None, lines: str | None) -> CommandLineEditor:
    file_path, selection = parse_file_argument(target)
    if not file_path.is_file():
        raise ValidationError(f"File not found: {file_path}")
    if lines is not None:
        selection = SelectionRange.parse(lines)
    elif line is not None:
        selection = EditorSelection(anchor_line=line - 1, active_line=line - 1, is_empty=True).to_range()
    return CommandLineEditor(file_path, selection)


def _fail(message: str, code: int = 1) -> None:
    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code)


if __name__ == "__main__":
    app()
