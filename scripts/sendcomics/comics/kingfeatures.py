"""
King Features comics.

King Features sites don't link the strip image directly. The page includes a
generated script reference of the form::

    https://safr.kingfeatures.com/idn/cnfeed/zone/js/content.php?file=<base64>

where the ``file`` parameter is the base64-encoded absolute image URL.
"""

import base64
import binascii
import logging
import re
from datetime import date
from typing import Optional
from urllib.parse import unquote

from .base import Comic

logger = logging.getLogger(__name__)

_CONTENT_FILE_PATTERN = re.compile(r"content\.php\?file=([A-Za-z0-9+/=%_-]+)")


def decode_file_parameter(encoded: str) -> Optional[str]:
    """
    Decode a ``content.php`` file parameter into an image URL.

    Args:
        encoded: The raw (possibly URL-quoted, possibly unpadded) parameter.

    Returns:
        The absolute image URL, or None if the parameter doesn't decode to one.
    """
    value = unquote(encoded)
    value += "=" * (-len(value) % 4)

    try:
        decoded = base64.b64decode(value, altchars=b"-_").decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        logger.debug("Could not decode file parameter %r: %s", encoded, e)
        return None

    if not decoded.startswith(("http://", "https://")):
        return None
    return decoded


class KingFeaturesComic(Comic):
    """A strip published on its own King Features site."""

    def __init__(self, key: str, name: str, site: str) -> None:
        super().__init__(key, name)
        self.site = site

    def fetch_url(self, reference_date: date) -> str:
        return f"http://{self.site}/"

    def _find_image_url(self, content: str, reference_date: date) -> Optional[str]:
        match = _CONTENT_FILE_PATTERN.search(content)
        if not match:
            return None
        return decode_file_parameter(match.group(1))
