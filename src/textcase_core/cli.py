"""
Command-line interface for the title-case engine.

Usage:
    textcase title "the lord of the rings" --style chicago
    textcase sentence "first sentence. second one." --multi-line
    textcase lower "Some Text"
    textcase upper "Some Text"
    textcase convert "a study of love and hope" --style mla --json
    textcase styles

TEXT may be omitted (or given as "-") to read from standard input.
"""

import logging
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from textcase_core.convert import (
    convert,
    convert_lower_case,
    convert_sentence_case,
    convert_title_case,
    convert_upper_case,
)
from textcase_core.enums import StyleGuide
from textcase_core.errors import UnknownStyleError
from textcase_core.logging_config import setup_logging
from textcase_core.models import ConversionOptions
from textcase_core.settings import get_settings

app = typer.Typer(
    name="textcase",
    help="Title case, sentence case, lowercase and uppercase conversion.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)

TEXT_ARGUMENT = typer.Argument(None, help="Text to convert; omit or pass '-' to read stdin.")
STYLE_OPTION = typer.Option(None, "--style", "-s", help="Style guide (default from settings).")


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Log level (default from TEXTCASE_LOG_LEVEL)."
    ),
):
    setup_logging(log_level or get_settings().log_level)


def _read_text(text: Optional[str]) -> str:
    if text is None or text == "-":
        return sys.stdin.read().rstrip("\n")
    return text


def _resolve_style(name: Optional[str]) -> StyleGuide:
    if name is None:
        return get_settings().default_style
    try:
        return StyleGuide.parse(name)
    except UnknownStyleError as e:
        logger.warning("rejected style %r", e.name)
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(2)


def _resolve_options(
    keep_all_caps: Optional[bool],
    multi_line: Optional[bool],
    straight_quotes: bool,
) -> ConversionOptions:
    defaults = get_settings().default_options()
    return ConversionOptions(
        keep_all_caps=defaults.keep_all_caps if keep_all_caps is None else keep_all_caps,
        multi_line=defaults.multi_line if multi_line is None else multi_line,
        use_smart_typography=defaults.use_smart_typography and not straight_quotes,
    )


@app.command()
def title(
    text: Optional[str] = TEXT_ARGUMENT,
    style: Optional[str] = STYLE_OPTION,
    keep_all_caps: Optional[bool] = typer.Option(
        None, "--keep-all-caps/--no-keep-all-caps", help="Preserve words written in all caps."
    ),
    multi_line: Optional[bool] = typer.Option(
        None, "--multi-line/--single-line", help="Convert each line independently."
    ),
    straight_quotes: bool = typer.Option(
        False, "--straight-quotes", help="Skip curly quotes, dashes and ellipses."
    ),
):
    """Convert to title case using a style guide."""
    guide = _resolve_style(style)
    options = _resolve_options(keep_all_caps, multi_line, straight_quotes)
    typer.echo(convert_title_case(_read_text(text), guide, options))


@app.command()
def sentence(
    text: Optional[str] = TEXT_ARGUMENT,
    multi_line: Optional[bool] = typer.Option(
        None, "--multi-line/--single-line", help="Convert each line independently."
    ),
):
    """Convert to sentence case."""
    if multi_line is None:
        multi_line = get_settings().multi_line
    typer.echo(convert_sentence_case(_read_text(text), multi_line))


@app.command()
def lower(text: Optional[str] = TEXT_ARGUMENT):
    """Convert to lowercase."""
    typer.echo(convert_lower_case(_read_text(text)))


@app.command()
def upper(text: Optional[str] = TEXT_ARGUMENT):
    """Convert to uppercase."""
    typer.echo(convert_upper_case(_read_text(text)))


@app.command("convert")
def convert_all(
    text: Optional[str] = TEXT_ARGUMENT,
    style: Optional[str] = STYLE_OPTION,
    keep_all_caps: Optional[bool] = typer.Option(
        None, "--keep-all-caps/--no-keep-all-caps", help="Preserve words written in all caps."
    ),
    multi_line: Optional[bool] = typer.Option(
        None, "--multi-line/--single-line", help="Convert each line independently."
    ),
    straight_quotes: bool = typer.Option(
        False, "--straight-quotes", help="Skip curly quotes, dashes and ellipses."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
):
    """Show title case, sentence case, lowercase and uppercase side by side."""
    guide = _resolve_style(style)
    options = _resolve_options(keep_all_caps, multi_line, straight_quotes)
    result = convert(_read_text(text), guide, options)

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
        return

    table = Table(title=f"{guide.label} style")
    table.add_column("View", style="cyan", no_wrap=True)
    table.add_column("Text")
    table.add_row("Title case", Text(result.title_case))
    table.add_row("Sentence case", Text(result.sentence_case))
    table.add_row("lowercase", Text(result.lower_case))
    table.add_row("UPPERCASE", Text(result.upper_case))
    console.print(table)


@app.command()
def styles():
    """List supported style guides."""
    default = get_settings().default_style
    table = Table(title="Style guides")
    table.add_column("Value", style="cyan", no_wrap=True)
    table.add_column("Label")
    table.add_column("Last word capitalized")
    for guide in StyleGuide:
        marker = " (default)" if guide is default else ""
        table.add_row(guide.value + marker, guide.label, "yes" if guide.capitalizes_last_word else "no")
    console.print(table)


if __name__ == "__main__":
    app()
