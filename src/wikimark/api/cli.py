"""wikimark command line interface.

Usage::

    wikimark parse notes.md
    wikimark parse --format json --nest notes.md
    cat notes.md | wikimark links --unique
"""

from __future__ import annotations

import json

import click

from wikimark import __version__
from wikimark.application.outline import nest_document
from wikimark.config.logging import configure_logging, get_logger
from wikimark.config.settings import get_settings
from wikimark.core.exceptions import WikimarkError
from wikimark.domain.entities import BulletList, Document, Element, Heading
from wikimark.infrastructure.parsing.markdown import parse_document
from wikimark.infrastructure.source import read_source

logger = get_logger(__name__)

_SOURCE = click.Path(exists=True, dir_okay=False, allow_dash=True)


def _load(source: str) -> Document:
    settings = get_settings()
    try:
        text = read_source(source, encoding=settings.encoding)
    except WikimarkError as e:
        raise click.ClickException(e.message) from e
    document = parse_document(text)
    logger.debug("cli.parsed", source=source, elements=len(document))
    return document


# ---------------------------------------------------------------------------
# Text rendering
# ---------------------------------------------------------------------------


def _format_links(links: tuple[str, ...]) -> str:
    return f" links={list(links)!r}" if links else ""


def _format_element(element: Element) -> str:
    if isinstance(element, Heading):
        return f"Heading(level={element.level}) {element.title.content!r}{_format_links(element.links)}"
    if isinstance(element, BulletList):
        items = ", ".join(repr(item.content) for item in element.items)
        return f"BulletList [{items}]{_format_links(element.links)}"
    return f"InlineText {element.text.content!r}{_format_links(element.links)}"


def render_text(document: Document) -> str:
    """Render *document* as one line per element, indenting heading children."""
    lines = ["Parsed document:"]
    stack: list[tuple[Element, int]] = [(e, 0) for e in reversed(document.elements)]
    while stack:
        element, depth = stack.pop()
        lines.append("  " * depth + _format_element(element))
        if isinstance(element, Heading):
            stack.extend((child, depth + 1) for child in reversed(element.children))
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(version=__version__, prog_name="wikimark")
def cli() -> None:
    """Parse line-oriented markdown with [[wiki-links]]."""
    settings = get_settings()
    try:
        configure_logging(settings.log_level, settings.log_format)
    except WikimarkError as e:
        raise click.ClickException(e.message) from e


@cli.command("parse")
@click.argument("source", type=_SOURCE, default="-")
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(["text", "json"]),
    default=None,
    help="Output format (defaults to WIKIMARK_OUTPUT_FORMAT).",
)
@click.option("--nest", is_flag=True, help="Nest elements under their headings.")
def parse_cmd(source: str, output_format: str | None, nest: bool) -> None:
    """Parse SOURCE (a file, or - for stdin) and print its elements."""
    document = _load(source)
    if nest:
        document = nest_document(document)

    output_format = output_format or get_settings().output_format
    if output_format == "json":
        click.echo(json.dumps(document.model_dump(mode="json"), indent=2, ensure_ascii=False))
    else:
        click.echo(render_text(document))


@cli.command("links")
@click.argument("source", type=_SOURCE, default="-")
@click.option("--unique", "-u", is_flag=True, help="Drop repeated targets.")
def links_cmd(source: str, unique: bool) -> None:
    """Print every [[link]] target in SOURCE, one per line."""
    targets = _load(source).link_targets()
    if unique:
        targets = list(dict.fromkeys(targets))
    for target in targets:
        click.echo(target)


def main() -> None:
    """Entry point for the wikimark script."""
    cli()


if __name__ == "__main__":
    main()
