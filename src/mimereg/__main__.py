"""CLI entry point for mimereg.

Provides commands for looking up MIME types by name or
filename and for checking corpus files.
"""

import re
from pathlib import Path
from typing import TYPE_CHECKING

import click

from mimereg import __version__
from mimereg.errors import MimeRegError
from mimereg.models.mime_type import MimeType

if TYPE_CHECKING:
    from mimereg.registry import MimeTypeRegistry

config_option = click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)


def _describe(mime_type: MimeType) -> str:
    flags = []
    if not mime_type.registered:
        flags.append("unregistered")
    if mime_type.obsolete:
        flags.append("obsolete")
    if mime_type.system is not None:
        flags.append(f"system={mime_type.system.pattern}")
    extensions = ",".join(mime_type.extensions) or "-"
    line = f"{mime_type.content_type}\t{extensions}\t{mime_type.encoding}"
    if flags:
        line += "\t" + " ".join(flags)
    return line


def _load_registry(config: Path | None) -> "MimeTypeRegistry":
    from mimereg.config.loader import load_config
    from mimereg.registry import MimeTypeRegistry
    from mimereg.utils.logging import configure_logging

    try:
        cfg = load_config(config)
        configure_logging(cfg.logging)
        return MimeTypeRegistry.create_default(cfg.registry)
    except (MimeRegError, ValueError) as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """MIME type registry.

    Look up MIME type definitions by content type, pattern,
    or file name.
    """
    pass


@cli.command()
@click.argument("content_type")
@config_option
@click.option("--pattern", "-p", is_flag=True, help="Treat CONTENT_TYPE as a regular expression")
@click.option("--complete", is_flag=True, help="Only types with known extensions")
@click.option("--platform", is_flag=True, help="Only types specific to this platform")
def lookup(
    content_type: str, config: Path | None, pattern: bool, complete: bool, platform: bool
) -> None:
    """Show the definitions for a content type, most reliable first."""
    registry = _load_registry(config)
    identifier: str | re.Pattern[str] = content_type
    if pattern:
        try:
            identifier = re.compile(content_type)
        except re.error as e:
            raise click.BadParameter(str(e), param_hint="CONTENT_TYPE") from e
    types = registry.resolve(identifier, complete=complete, platform=platform)

    if not types:
        click.echo(f"No definitions found for {content_type}")
        return

    for mime_type in types:
        click.echo(_describe(mime_type))


@cli.command("type-for")
@click.argument("filename")
@config_option
@click.option("--platform", is_flag=True, help="Only types specific to this platform")
def type_for(filename: str, config: Path | None, platform: bool) -> None:
    """Show the content types registered for a file name."""
    registry = _load_registry(config)
    types = registry.type_for(filename, platform=platform)

    if not types:
        click.echo(f"No content types found for {filename}")
        return

    for mime_type in types:
        click.echo(mime_type.content_type)


@cli.command()
@click.argument("corpus", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def check(corpus: Path) -> None:
    """Parse a corpus file and report the number of definitions."""
    from mimereg.errors import DatasetParseError
    from mimereg.loader import parse_corpus

    try:
        types = parse_corpus(corpus.read_text(encoding="utf-8"), source=str(corpus))
    except DatasetParseError as e:
        raise click.ClickException(str(e)) from e

    variants = {mime_type.simplified for mime_type in types}
    click.echo(f"{corpus}: {len(types)} definitions, {len(variants)} distinct types")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
