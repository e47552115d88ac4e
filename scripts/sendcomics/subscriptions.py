"""
Subscription text parsing.

Subscriptions are written as ``email: key1, key2; email2: key3``.
"""

import logging
import re
from typing import Dict, List

logger = logging.getLogger(__name__)

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class SubscriptionError(ValueError):
    """Raised when subscription text cannot be parsed."""


def parse_subscriptions(text: str) -> Dict[str, List[str]]:
    """
    Parse subscription text into an ordered mapping.

    Args:
        text: Subscription text, entries separated by ``;``.

    Returns:
        Mapping of subscriber email to comic keys, both in the order written.
        A subscriber listed twice has the later keys appended.

    Raises:
        SubscriptionError: If an entry is missing its ``:`` separator or
            does not start with an email address.
    """
    subscriptions: Dict[str, List[str]] = {}

    for raw_entry in text.split(";"):
        entry = raw_entry.strip()
        if not entry:
            continue

        if ":" not in entry:
            raise SubscriptionError(f"Subscription entry missing ':' separator: '{entry}'")

        email, _, comic_list = entry.partition(":")
        email = email.strip()
        if not _EMAIL_PATTERN.match(email):
            raise SubscriptionError(f"Invalid subscriber address '{email}'")

        keys = [key.strip().lower() for key in comic_list.split(",") if key.strip()]
        if not keys:
            logger.warning("Subscriber %s has no comics", email)

        subscriptions.setdefault(email, []).extend(keys)

    logger.debug("Parsed %d subscriptions", len(subscriptions))
    return subscriptions
