"""
Command-line entry point that prints a user's recent GitHub activity.
"""

import sys
from typing import Optional, TextIO

import click

from app.exceptions import ActivityError, UsageError
from services.activity import decode_events, render_activity
from services.github import GitHubService
from utils import logging

logger = logging.get_logger(__name__)

USAGE_MESSAGE = "Username is required as a positional argument."


def run_activity(
    username: Optional[str],
    out: TextIO,
    service: Optional[GitHubService] = None,
) -> None:
    """
    Fetch, decode and print the activity of one user.

    Nothing is written to ``out`` until the response has been decoded.

    :param username: GitHub username, passed through unvalidated.
    :param out: Stream receiving one line per event.
    :param service: Service to fetch with, a fresh one when omitted.
    :raise UsageError: No username was given.
    :raise ActivityError: Any other stage of the pipeline failed.
    :return: None
    """
    if username is None:
        raise UsageError(USAGE_MESSAGE)

    if service is None:
        with GitHubService() as owned:
            raw = owned.fetch_events(username)
    else:
        raw = service.fetch_events(username)

    lines = render_activity(decode_events(raw))
    out.write("".join(f"{line}\n" for line in lines))
    out.flush()


@click.command(help="Show the most recent public GitHub activity of USERNAME.")
@click.argument("username", required=False)
@click.pass_context
def cli(ctx: click.Context, username: Optional[str]) -> None:
    logging.setup_logger()

    try:
        run_activity(username, sys.stdout)
    except UsageError as exc:
        logger.critical(exc.message, extra={"stage": exc.stage})
        click.echo(ctx.get_usage(), err=True)
        ctx.exit(2)
    except ActivityError as exc:
        logger.critical(exc.message, extra={"stage": exc.stage})
        ctx.exit(1)


if __name__ == "__main__":
    cli()
