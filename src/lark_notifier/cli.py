"""Command line interface for sending a single Lark notification."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click

from . import __version__, config, message, notifier, signing

LOGGER = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _configure_logging(level: str, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.getLevelName(level),
        format=LOG_FORMAT,
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="lark-notifier")
@click.option(
    "--webhook-url", "-w", default=None, help="Lark webhook URL (falls back to LARK_WEBHOOK_URL)."
)
@click.option(
    "--secret", "-s", default=None, help="Bot signing secret (falls back to LARK_SECRET)."
)
@click.option("--title", "-t", required=True, help="Message title.")
@click.option("--content", "-c", required=True, help="Message content.")
@click.option("--keywords", "-k", default=None, help="Keywords to highlight, comma separated.")
@click.option(
    "--highlight-style",
    type=click.Choice(message.HIGHLIGHT_STYLES),
    default=message.STYLE_BOLD,
    show_default=True,
    help="How highlighted keywords are rendered.",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="HTTP timeout in seconds (falls back to LARK_TIMEOUT, then 10).",
)
@click.option("--dry-run", is_flag=True, help="Print the JSON payload instead of sending it.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(
    webhook_url: Optional[str],
    secret: Optional[str],
    title: str,
    content: str,
    keywords: Optional[str],
    highlight_style: str,
    timeout: Optional[float],
    dry_run: bool,
    verbose: bool,
) -> None:
    """Send a rich-text notification to a Lark/Feishu bot webhook."""

    try:
        settings = config.Settings.from_env()
        request = config.build_request(
            settings,
            title=title,
            content=content,
            webhook_url=webhook_url,
            secret=secret,
            keywords=config.parse_keywords(keywords),
        )
    except config.ConfigError as exc:
        raise click.UsageError(str(exc)) from exc

    _configure_logging(settings.log_level, verbose)

    envelope = signing.sign(request.secret)
    payload = message.build_payload(
        request.title,
        request.content,
        request.keywords,
        envelope=envelope,
        style=highlight_style,
    )
    LOGGER.debug(
        "Built payload with %d keyword(s), signed=%s", len(request.keywords), envelope is not None
    )

    if dry_run:
        click.echo(message.serialize_payload(payload))
        return

    try:
        notifier.send_message(payload, request.webhook_url, timeout=timeout or settings.timeout)
    except notifier.NotificationError as exc:
        LOGGER.error("Notification failed: %s", exc)
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    LOGGER.info("Notification '%s' delivered", request.title)
    click.echo("Successfully sent notification to Lark")
