#!/usr/bin/env python3
"""Command line interface for emoji-codec."""

import json as json_lib
import sys

import rich_click as click
from rich.console import Console
from rich.table import Table

from . import __version__
from .catalog.loader import load_catalog
from .converters import FitzpatrickAction
from .core.config import ConfigLoader
from .core.logging import get_logger, setup_logging
from .exceptions import EmojiCodecError
from .parser import EmojiParser

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.STYLE_OPTION = "#ff79c6"
click.rich_click.STYLE_ARGUMENT = "#8be9fd"
click.rich_click.STYLE_COMMAND = "#50fa7b"
click.rich_click.STYLE_USAGE = "#bd93f9"
click.rich_click.STYLE_HELPTEXT = "#b3b8c0"

FITZPATRICK_CHOICES = [action.value for action in FitzpatrickAction]

console = Console(stderr=True)
logger = get_logger(__name__)


def _read_text(text: str | None) -> str:
    if text is not None:
        return text
    return sys.stdin.read()


def _build_parser(ctx: click.Context) -> EmojiParser:
    """Create the parser once per invocation from the group options."""
    obj = ctx.ensure_object(dict)
    parser = obj.get("parser")
    if parser is not None:
        return parser

    config: ConfigLoader = obj["config"]
    catalog_path = obj.get("catalog") or config.catalog_path
    try:
        catalog = load_catalog(catalog_path, legacy_prefixes=config.legacy_prefixes)
        action = FitzpatrickAction.from_name(config.fitzpatrick_action)
    except EmojiCodecError as e:
        console.print(f"[red]Error: {e}[/red]")
        ctx.exit(1)
    parser = EmojiParser(catalog, default_action=action)
    obj["parser"] = parser
    return parser


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="emoji-codec")
@click.option("--config", "config_path", type=click.Path(dir_okay=False), help=" ⚙️  Configuration file path")
@click.option("--catalog", type=click.Path(exists=True, dir_okay=False), help=" 📚 Emoji JSON database to use")
@click.option("--debug", is_flag=True, help=" 🐛 Enable detailed debug logging")
@click.pass_context
def main(ctx, config_path, catalog, debug):
    """😄 [bold cyan]emoji-codec[/bold cyan] - Find emoji in text and convert between representations

    \b
    [bold yellow]🎯 Quick Start:[/bold yellow]
    \b
      [green]emoji-codec alias "I ❤ 🍕"[/green]            [italic]# I :heart: :pizza:[/italic]
      [green]emoji-codec unicode ":boy|type_6:"[/green]    [italic]# 👦🏿[/italic]
      [green]emoji-codec html --hex "🚀"[/green]           [italic]# &#x1f680;[/italic]
      [green]echo "hi 👋" | emoji-codec strip[/green]      [italic]# hi [/italic]
    """
    try:
        config = ConfigLoader(config_path)
        setup_logging(log_level="DEBUG" if debug else config.log_level, include_console=debug or None)
    except EmojiCodecError as e:
        console.print(f"[red]Error: {e}[/red]")
        ctx.exit(1)

    logger.debug(f"Using config file {config.config_file}")

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["catalog"] = catalog


@main.command()
@click.argument("text", required=False)
@click.option("--fitzpatrick", type=click.Choice(FITZPATRICK_CHOICES), help=" 🎨 Skin-tone handling")
@click.pass_context
def alias(ctx, text, fitzpatrick):
    """Replace emoji with their :alias: form."""
    parser = _build_parser(ctx)
    click.echo(parser.to_alias(_read_text(text), fitzpatrick), nl=False)


@main.command()
@click.argument("text", required=False)
@click.option("--hex", "hexadecimal", is_flag=True, help=" 🔢 Emit hexadecimal entities")
@click.option("--fitzpatrick", type=click.Choice(FITZPATRICK_CHOICES), help=" 🎨 Skin-tone handling")
@click.pass_context
def html(ctx, text, hexadecimal, fitzpatrick):
    """Replace emoji with html numeric entities."""
    parser = _build_parser(ctx)
    source = _read_text(text)
    if hexadecimal:
        click.echo(parser.to_html_hexadecimal(source, fitzpatrick), nl=False)
    else:
        click.echo(parser.to_html_decimal(source, fitzpatrick), nl=False)


@main.command()
@click.argument("text", required=False)
@click.pass_context
def unicode(ctx, text):
    """Replace aliases and html entities with unicode emoji."""
    parser = _build_parser(ctx)
    click.echo(parser.to_unicode(_read_text(text)), nl=False)


@main.command()
@click.argument("text", required=False)
@click.option("--replacement", default="", help=" ✂️  Text to put in place of each emoji")
@click.pass_context
def strip(ctx, text, replacement):
    """Remove every emoji (or replace it with a fixed string)."""
    parser = _build_parser(ctx)
    click.echo(parser.replace_all(_read_text(text), replacement), nl=False)


@main.command()
@click.argument("text", required=False)
@click.option("--limit", type=int, default=0, help=" 🔢 Stop after this many matches (0 = all)")
@click.option("--json", "as_json", is_flag=True, help=" 📄 Output JSON format")
@click.pass_context
def extract(ctx, text, limit, as_json):
    """List the emoji found in the text."""
    parser = _build_parser(ctx)
    matches = parser.extract_matches(_read_text(text), limit)
    if as_json:
        payload = [
            {
                "text": match.text,
                "alias": match.entry.primary_alias,
                "skin_tone": match.skin_tone_type or None,
                "gender": match.gender.value if match.gender else None,
                "start": match.start,
                "end": match.end,
            }
            for match in matches
        ]
        click.echo(json_lib.dumps(payload, ensure_ascii=False))
        return
    for match in matches:
        click.echo(f"{match.start}\t{match.end}\t{match.text}\t:{match.entry.primary_alias}:")


@main.command()
@click.pass_context
def status(ctx):
    """Show catalog and configuration details."""
    parser = _build_parser(ctx)
    config: ConfigLoader = ctx.obj["config"]
    catalog = parser.catalog

    table = Table(title="emoji-codec status")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Version", __version__)
    table.add_row("Config file", config.config_file)
    table.add_row("Catalog", str(ctx.obj.get("catalog") or config.catalog_path or "bundled"))
    table.add_row("Entries", str(len(catalog)))
    table.add_row("Tags", str(len(catalog.all_tags)))
    table.add_row("Longest sequence", str(catalog.trie.max_depth))
    table.add_row("Fitzpatrick action", parser.default_action.value)
    Console().print(table)


if __name__ == "__main__":
    main()
