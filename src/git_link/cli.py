"""CLI for git-link."""

import subprocess
import sys
from pathlib import Path

import click
import pydantic
import structlog

from git_link.config.logging import configure_logging
from git_link.config.settings import get_settings
from git_link.core.exceptions import GitLinkError
from git_link.core.models.link import HashCase

logger = structlog.get_logger(__name__)


def _describe(exc: BaseException) -> str:
    """One-line description of an exception in an error chain."""
    if isinstance(exc, subprocess.CalledProcessError) and exc.stderr:
        stderr = exc.stderr
        if isinstance(stderr, bytes):
            stderr = stderr.decode("utf-8", errors="replace")
        return stderr.strip()
    return str(exc) or type(exc).__name__


def format_error_chain(exc: BaseException) -> list[str]:
    """Render an error and its causes, outermost first."""
    lines = [f"Error: {_describe(exc)}"]
    cause = exc.__cause__
    while cause is not None:
        lines.append(f"Caused by: {_describe(cause)}")
        cause = cause.__cause__
    return lines


@click.command()
@click.argument("file_path", type=click.Path(path_type=Path))
@click.option("--line-number", "-l", type=click.IntRange(min=1), help="Line in the file to link to")
@click.option(
    "--ref-type",
    "-r",
    required=True,
    help='How to anchor the link: "branch" or "commit"',
)
@click.option(
    "--hash-case",
    type=click.Choice([c.value for c in HashCase]),
    default=None,
    help="Letter case of commit hashes (default: upper)",
)
@click.option("--short-hash", type=click.IntRange(min=1), default=None, help="Abbreviate commit hashes")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(
    file_path: Path,
    line_number: int | None,
    ref_type: str,
    hash_case: str | None,
    short_hash: int | None,
    verbose: bool,
) -> None:
    """Get a shareable link to a section of source code."""
    from git_link.services.linking import LinkService

    try:
        settings = get_settings()
    except pydantic.ValidationError as exc:
        for error in exc.errors():
            name = "GIT_LINK_" + "_".join(str(part) for part in error["loc"]).upper()
            click.echo(f"Error: Invalid setting {name}: {error['msg']}", err=True)
        sys.exit(1)
    configure_logging(log_level="DEBUG" if verbose else settings.log_level)

    hash_format = settings.hash_format
    if hash_case:
        hash_format = hash_format.model_copy(update={"case": HashCase(hash_case)})
    if short_hash is not None:
        hash_format = hash_format.model_copy(update={"length": short_hash})

    service = LinkService(hash_format=hash_format)
    try:
        url = service.create_link(file_path, ref_type, line_number=line_number)
    except GitLinkError as exc:
        logger.debug("Link creation failed", error=type(exc).__name__, **exc.details)
        for line in format_error_chain(exc):
            click.echo(line, err=True)
        sys.exit(1)

    click.echo(url)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
