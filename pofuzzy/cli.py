"""Command-line interface for catalog fuzzy matching."""

import logging
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import config
from .matching import build_matcher, similarity
from .models.translation import TranslationKey

console = Console()


def _build_key(msgid: str, context: Optional[str], plural: Optional[str]) -> TranslationKey:
    """Build the key variant implied by the given context/plural options."""
    if context is not None and plural is not None:
        return TranslationKey.contextual_plural(context, msgid, plural)
    if context is not None:
        return TranslationKey.contextual(context, msgid)
    if plural is not None:
        return TranslationKey.plural(msgid, plural)
    return TranslationKey.plain(msgid)


@click.group()
@click.version_option(version=__version__)
def cli():
    """Fuzzy matching for translation catalog entries."""
    errors = config.validate()
    if errors:
        console.print("[red]Configuration errors:[/red]")
        for error in errors:
            console.print(f"  - {error}")
        raise click.Abort()

    logging.basicConfig(
        level=config.logging_level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@cli.command()
@click.argument("msgid_a")
@click.argument("msgid_b")
@click.option(
    "--threshold", "-t",
    type=float,
    default=None,
    help="Minimum similarity for a match (defaults to POFUZZY_THRESHOLD)"
)
@click.option("--context-a", default=None, help="msgctxt of the first entry")
@click.option("--context-b", default=None, help="msgctxt of the second entry")
@click.option("--plural-a", default=None, help="msgid_plural of the first entry")
@click.option("--plural-b", default=None, help="msgid_plural of the second entry")
def score(
    msgid_a: str,
    msgid_b: str,
    threshold: Optional[float],
    context_a: Optional[str],
    context_b: Optional[str],
    plural_a: Optional[str],
    plural_b: Optional[str],
):
    """Score how closely two msgids match.

    Only the msgids are compared; context and plural forms are shown
    but never change the score.
    """
    key_a = _build_key(msgid_a, context_a, plural_a)
    key_b = _build_key(msgid_b, context_b, plural_b)
    matcher = build_matcher(threshold)
    score = similarity(key_a, key_b)
    result = matcher.evaluate(score)

    table = Table(title="Fuzzy match")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Entry A", f"{escape(key_a.msgid)} [dim]({key_a.kind.value})[/dim]")
    table.add_row("Entry B", f"{escape(key_b.msgid)} [dim]({key_b.kind.value})[/dim]")
    table.add_row("Similarity", f"{score:.4f}")
    table.add_row("Threshold", f"{matcher.threshold:.4f}")
    if result.matched:
        table.add_row("Decision", "[green]match[/green]")
    else:
        table.add_row("Decision", "[red]no match[/red]")

    console.print(table)


if __name__ == "__main__":
    cli()
