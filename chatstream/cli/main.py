"""chatstream CLI - Command Line Interface."""

import json
import sys

import click
from loguru import logger

from chatstream import __version__
from chatstream.settings import settings

ENCODE_MODES = ("plain", "chunked", "tools")
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def _configure_logging(level: str) -> None:
    """Send log output to stderr at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


@click.group()
@click.version_option(__version__)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=settings.log_level,
    show_default=True,
    help="Log level for stderr output",
)
def cli(log_level: str):
    """chatstream - Encode chat responses as an AI data stream."""
    _configure_logging(log_level)


@cli.command()
@click.argument("source", type=click.File("r"))
@click.option(
    "--mode",
    "-m",
    type=click.Choice(ENCODE_MODES),
    default="plain",
    show_default=True,
    help="plain: one record per generation; chunked: split text; tools: include tool calls",
)
@click.option(
    "--chunk-size",
    "-c",
    type=int,
    default=settings.stream.chunk_size,
    show_default=True,
    help="Characters per text record (chunked mode)",
)
def encode(source, mode: str, chunk_size: int):
    """
    Encode a JSON chat response as a data stream.

    SOURCE is a JSON file, or - for stdin. Expected shape:

        {"generations": [{"text": "...", "tool_calls": [...]}],
         "usage": {"prompt_tokens": 1, "completion_tokens": 2, "total_tokens": 3}}

    Examples:
        chatstream encode response.json
        chatstream encode response.json --mode chunked --chunk-size 20
        cat response.json | chatstream encode - --mode tools
    """
    from chatstream.models.response import coerce_response
    from chatstream.streaming import core

    try:
        payload = json.load(source)
        response = coerce_response(payload)
        if mode == "chunked":
            stream = core.encode_chunked(response, chunk_size)
        elif mode == "tools":
            stream = core.encode_with_tool_calls(response)
        else:
            stream = core.encode(response)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    click.echo(stream, nl=False)


@cli.command()
@click.option(
    "--chunk-size",
    "-c",
    type=int,
    default=settings.stream.chunk_size,
    show_default=True,
    help="Characters per text record for the chunked section",
)
def demo(chunk_size: int):
    """Print sample responses in every encoding mode."""
    from chatstream.streaming.simulator import run_demo

    click.echo("=== Chat Response to Data Stream Demo ===\n")
    try:
        for index, (title, stream) in enumerate(run_demo(chunk_size), start=1):
            click.echo(f"{index}. {title}:")
            click.echo(stream)
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    click.echo("=== Demo Complete ===")


if __name__ == "__main__":
    cli()
