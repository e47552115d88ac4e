"""
Independently published web comics.
"""

import re
from datetime import date
from typing import Optional

from .base import FRIDAY, MONDAY, WEDNESDAY, WEEKDAYS, Comic

QWANTZ_URL = "http://www.qwantz.com/index.php"
XKCD_URL = "https://xkcd.com/"

_QWANTZ_IMAGE_PATTERN = re.compile(
    r'<img\s+src=["\']((?:https?:)?//[^"\']*/comics/[^"\']+)["\'][^>]*class=["\']comic["\']',
    re.IGNORECASE,
)
_XKCD_HOTLINK_PATTERN = re.compile(
    r"Image URL \(for hotlinking/embedding\):\s*(?:<a href=\s*[\"'])?(https?://imgs\.xkcd\.com/comics/[^\s\"'<]+)"
)


class DinosaurComic(Comic):
    """Dinosaur Comics from qwantz.com, published Monday to Friday.

    The home page always shows the latest strip, so on weekends it still
    carries Friday's image.
    """

    def __init__(self) -> None:
        super().__init__("dinosaur-comics", "Dinosaur Comics", publishes_on=WEEKDAYS)

    def fetch_url(self, reference_date: date) -> str:
        return QWANTZ_URL

    def _find_image_url(self, content: str, reference_date: date) -> Optional[str]:
        match = _QWANTZ_IMAGE_PATTERN.search(content)
        if not match:
            return None
        url = match.group(1)
        if url.startswith("//"):
            url = "http:" + url
        return url


class XkcdComic(Comic):
    """xkcd, published Monday, Wednesday and Friday."""

    def __init__(self) -> None:
        super().__init__("xkcd", "xkcd", publishes_on=frozenset({MONDAY, WEDNESDAY, FRIDAY}))

    def fetch_url(self, reference_date: date) -> str:
        return XKCD_URL

    def _find_image_url(self, content: str, reference_date: date) -> Optional[str]:
        match = _XKCD_HOTLINK_PATTERN.search(content)
        return match.group(1) if match else None
