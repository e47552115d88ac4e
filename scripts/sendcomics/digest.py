"""
Digest builder - turns subscriptions into one outbound message per subscriber.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import List, Mapping, Optional, Sequence

from .comics.base import DAY_NAMES, MONTH_NAMES, ExtractionStatus
from .comics.registry import UnknownComicError, resolve
from .config import config
from .fetcher import FetchError
from .mail import OutboundMessage

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Couldn't find comic for {key}."
NOT_PUBLISHED_MESSAGE = "Comic {key} wasn't published today."


@dataclass
class DigestResult:
    """The digest lines gathered for one subscriber."""

    recipient: str
    lines: List[str] = field(default_factory=list)

    @property
    def body(self) -> str:
        return "\n".join(self.lines)


class DigestBuilder:
    """Builds per-subscriber digest messages for a reference date.

    Comics are resolved, fetched and extracted one at a time. Any failure
    for a single comic becomes a line in that subscriber's digest; it never
    aborts the subscriber or the run.
    """

    def __init__(
        self,
        reference_date: date,
        subscriptions: Mapping[str, Sequence[str]],
        fetcher,
        sender: Optional[str] = None,
        subject: Optional[str] = None,
    ) -> None:
        """
        Initialize the digest builder.

        Args:
            reference_date: Date whose strips are collected.
            subscriptions: Subscriber email -> ordered comic keys.
            fetcher: Object with ``get_content(url) -> str`` raising FetchError.
            sender: From address. Defaults to ``mail.sender``.
            subject: Subject format string; ``{weekday}``, ``{month}``, ``{day}``,
                ``{year}`` and ``{date}`` are filled in.
                Defaults to ``mail.subject``.
        """
        self.reference_date = reference_date
        self.subscriptions = subscriptions
        self.fetcher = fetcher
        self.sender = sender or config.sender
        self.subject = (subject or config.get("mail.subject", "Comics for {date}")).format(
            date=reference_date,
            weekday=DAY_NAMES[reference_date.weekday()],
            month=MONTH_NAMES[reference_date.month - 1],
            day=reference_date.day,
            year=reference_date.year,
        )

    def build(self) -> List[OutboundMessage]:
        """Build one message per subscriber, in subscription order."""
        messages = []
        for recipient, keys in self.subscriptions.items():
            digest = self.build_digest(recipient, keys)
            messages.append(
                OutboundMessage(
                    sender=self.sender,
                    recipient=recipient,
                    subject=self.subject,
                    body=digest.body,
                )
            )

        logger.info("Built %d digests for %s", len(messages), self.reference_date)
        return messages

    def build_digest(self, recipient: str, keys: Sequence[str]) -> DigestResult:
        digest = DigestResult(recipient=recipient)
        for key in keys:
            digest.lines.append(self.digest_line(key))
        return digest

    def digest_line(self, key: str) -> str:
        """Produce the digest line for a single comic key."""
        try:
            comic = resolve(key)
        except UnknownComicError:
            logger.warning("No comic registered for '%s'", key)
            return NOT_FOUND_MESSAGE.format(key=key)

        url = comic.fetch_url(self.reference_date)
        try:
            content = self.fetcher.get_content(url)
        except FetchError as e:
            if not comic.is_published_on(self.reference_date):
                logger.info("%s not published on %s (fetch failed: %s)", key, self.reference_date, e)
                return NOT_PUBLISHED_MESSAGE.format(key=key)
            logger.warning("Could not fetch %s: %s", key, e)
            return NOT_FOUND_MESSAGE.format(key=key)

        result = comic.extract_image(content, self.reference_date)
        if result.status is ExtractionStatus.FOUND:
            logger.debug("Found %s: %s", key, result.image_url)
            return result.image_url
        if result.status is ExtractionStatus.NOT_PUBLISHED:
            logger.info("%s not published on %s", key, self.reference_date)
            return NOT_PUBLISHED_MESSAGE.format(key=key)

        logger.warning("No image found for %s at %s", key, url)
        return NOT_FOUND_MESSAGE.format(key=key)


def build_digests(
    reference_date: date,
    subscriptions: Mapping[str, Sequence[str]],
    fetcher,
    sender: Optional[str] = None,
) -> List[OutboundMessage]:
    """Build one outbound message per subscriber for ``reference_date``."""
    return DigestBuilder(reference_date, subscriptions, fetcher, sender=sender).build()
