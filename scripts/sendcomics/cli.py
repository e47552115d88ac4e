"""
Command-line interface for SendComics.

Provides commands for building and sending comic digests.
"""

import logging
import sys
from datetime import date, datetime
from typing import Optional

import click
from dotenv import load_dotenv

# Load environment variables from .env file (if it exists)
load_dotenv()

from . import __version__
from .comics.registry import COMICS, UnknownComicError, resolve
from .config import config
from .digest import DigestBuilder
from .services import get_fetcher, get_mailer
from .subscriptions import SubscriptionError, parse_subscriptions

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)
logger = logging.getLogger(__name__)


def setup_file_logging() -> None:
    """Set up file logging if enabled."""
    if config.get("logging.file_enabled", True):
        log_file = config.logs_dir / "sendcomics.log"
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(config.get("logging.format")))
        logging.getLogger().addHandler(file_handler)


def _parse_date(ctx, param, value: Optional[str]) -> date:
    """Click callback turning YYYY-MM-DD into a date, defaulting to today."""
    if value is None:
        return date.today()
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise click.BadParameter(f"'{value}' is not a date in YYYY-MM-DD format")


@click.group()
@click.version_option(version=__version__, prog_name="sendcomics")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
def cli(verbose: bool) -> None:
    """SendComics - Email each subscriber today's comic strips."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(config.get("logging.level", "INFO"))
    setup_file_logging()


@cli.command()
@click.option("-d", "--date", "reference_date", callback=_parse_date, help="Date to send (YYYY-MM-DD)")
@click.option("-s", "--subscriptions", "subscription_text", help="Subscription text (overrides config)")
@click.option("--dry-run", is_flag=True, help="Print digests instead of sending them")
def send(reference_date: date, subscription_text: Optional[str], dry_run: bool) -> None:
    """
    Build and send today's comic digests.

    Requires SMTP_USERNAME and SMTP_PASSWORD environment variables unless
    --dry-run is given.
    """
    text = subscription_text or config.subscriptions_text
    if not text.strip():
        click.echo(click.style("Error: no subscriptions configured.", fg="red"))
        click.echo("Set 'subscriptions' in config/config.yaml, SENDCOMICS_SUBSCRIPTIONS, or use --subscriptions.")
        sys.exit(1)

    try:
        subscriptions = parse_subscriptions(text)
    except SubscriptionError as e:
        click.echo(click.style(f"Error: {e}", fg="red"))
        sys.exit(1)

    mailer = None
    if not dry_run:
        mailer = get_mailer()
        if not mailer.is_configured:
            click.echo(click.style("\nError: SMTP credentials not set.", fg="red"))
            click.echo("Set environment variables:")
            click.echo("  SMTP_USERNAME=your-email@gmail.com")
            click.echo("  SMTP_PASSWORD=your-app-password")
            click.echo("\nOr use --dry-run to print digests without sending.")
            sys.exit(1)

    click.echo(f"Building digests for {len(subscriptions)} subscribers ({reference_date:%Y-%m-%d})...")
    messages = DigestBuilder(reference_date, subscriptions, get_fetcher()).build()

    if dry_run:
        for message in messages:
            click.echo()
            click.echo(click.style(f"To: {message.recipient}", bold=True))
            click.echo(f"Subject: {message.subject}")
            click.echo(message.body)
        click.echo(click.style(f"\nDry run - {len(messages)} digests not sent.", fg="green"))
        return

    result = mailer.send(messages)
    click.echo(click.style(str(result), fg="green" if result.success else "yellow"))
    for error in result.errors:
        click.echo(click.style(f"  - {error}", fg="red"))
    if not result.success:
        sys.exit(1)


@cli.command("list-comics")
def list_comics() -> None:
    """List the comics available for subscription."""
    width = max(len(key) for key in COMICS)
    for key in sorted(COMICS):
        comic = COMICS[key]
        click.echo(f"{key:<{width}}  {comic.name} ({comic.schedule})")


@cli.command()
@click.argument("key")
@click.option("-d", "--date", "reference_date", callback=_parse_date, help="Date to check (YYYY-MM-DD)")
def preview(key: str, reference_date: date) -> None:
    """
    Show what a digest would contain for one comic.

    KEY is the comic key, e.g. 'dilbert'.
    """
    try:
        comic = resolve(key)
    except UnknownComicError as e:
        click.echo(click.style(str(e), fg="red"))
        sys.exit(1)

    url = comic.fetch_url(reference_date)
    click.echo(f"Comic:     {comic.name}")
    click.echo(f"Schedule:  {comic.schedule}")
    click.echo(f"Fetch URL: {url}")

    builder = DigestBuilder(reference_date, {}, get_fetcher())
    click.echo(f"Digest:    {builder.digest_line(key)}")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
