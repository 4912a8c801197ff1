"""
Translates a UTF-8 text file into TeX source.
Writes the result to stdout, or atomically to the file given with --output.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path

import click
from . import __version__
from .config import ENVIRONMENT_NAMES, ConfigError, build_config
from .exceptions import TranslationError
from .filesystem import STDIO_PATH, get_max_input_size, read_input, write_output
from .translator import translate

__all__ = ["cli"]

logger = logging.getLogger(__name__)


@click.command()
@click.version_option(version=__version__)
@click.option(
    "--fuzzy/--no-fuzzy",
    default=None,
    help="Pass existing TeX macros, groups and $...$ math through untouched",
)
@click.option("--environment", type=click.Choice(ENVIRONMENT_NAMES), help="Translation environment")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    help="Write output to this file instead of stdout",
)
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr")
@click.argument(
    "input_path",
    metavar="INPUT",
    default=STDIO_PATH,
    type=click.Path(dir_okay=False, allow_dash=True),
)
def cli(
    input_path: str,
    fuzzy: bool | None = None,
    environment: str | None = None,
    output: str | None = None,
    verbose: bool = False,
):
    """
    Entry point for translating a UTF-8 file into TeX.

    Args:
        input_path: File to translate, or ``-`` for stdin.
        fuzzy: Override for passing existing TeX markup through.
        environment: Override for the translation environment.
        output: Destination file; stdout when omitted.
        verbose: Enable debug logging on stderr.

    Returns:
        None.

    Raises:
        click.BadParameter: If the configuration is invalid.
        click.ClickException: If the input cannot be read, is not translatable,
            or the output cannot be written.

    Examples:
        utf8totex --fuzzy chapter.txt -o chapter.tex
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    search_path = Path.cwd() if input_path == STDIO_PATH else Path(input_path).parent
    try:
        config = build_config(search_path, fuzzy=fuzzy, environment=environment)
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        max_input_size = get_max_input_size(default=config.max_input_size)
    except ValueError as error:
        raise click.ClickException(str(error)) from error

    try:
        data = read_input(input_path, max_input_size)
    except IOError as error:
        raise click.ClickException(str(error)) from error

    logger.info(
        "Translating %d bytes in %s mode (fuzzy=%s)", len(data), config.environment, config.fuzzy
    )

    # Buffer so that a failed translation leaves no partial output behind
    buffer = io.BytesIO()
    try:
        translate(data, config.fuzzy, config.translation_environment, buffer)
    except TranslationError as error:
        raise click.ClickException(f"{input_path}: {error}") from error

    if output is None:
        click.get_binary_stream("stdout").write(buffer.getvalue())
        return

    try:
        write_output(Path(output), buffer.getvalue())
    except IOError as error:
        raise click.ClickException(str(error)) from error


if __name__ == "__main__":
    cli()
