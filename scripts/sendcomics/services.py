"""Shared service accessors for SendComics components.

Provides a single place to retrieve configured services so the CLI doesn't
construct collaborators directly.
"""

from .config import config


def get_config():
    """Return application configuration instance."""
    return config


def get_fetcher():
    """Return a comic page fetcher."""
    from .fetcher import ComicFetcher

    return ComicFetcher()


def get_mailer():
    """Return an SMTP mailer."""
    from .mail import Mailer

    return Mailer()
