"""
Andrews McMeel Universal comics - dilbert.com and gocomics.com.

Both sites serve strip images from assets.amuniversal.com.
"""

import json
import logging
import re
from datetime import date
from typing import FrozenSet, Iterator, Optional

from .base import DAILY, MONTH_NAMES, Comic

logger = logging.getLogger(__name__)

DILBERT_URL = "http://www.dilbert.com/"
GOCOMICS_BASE_URL = "http://www.gocomics.com"

_DATA_IMAGE_PATTERN = re.compile(r'data-image=["\'](https?://[^"\']+)["\']', re.IGNORECASE)
_LD_JSON_PATTERN = re.compile(
    r'<script[^>]*type=["\']application/ld\+json["\'][^>]*>(.*?)</script>',
    re.IGNORECASE | re.DOTALL,
)


class DilbertComic(Comic):
    """Dilbert, read from the dilbert.com home page's ``data-image`` attribute."""

    def __init__(self) -> None:
        super().__init__("dilbert", "Dilbert")

    def fetch_url(self, reference_date: date) -> str:
        return DILBERT_URL

    def _find_image_url(self, content: str, reference_date: date) -> Optional[str]:
        match = _DATA_IMAGE_PATTERN.search(content)
        return match.group(1) if match else None


class GoComicsComic(Comic):
    """A strip hosted on gocomics.com.

    Strip pages are dated (``/<slug>/YYYY/MM/DD/``) and describe the strip in
    an embedded JSON-LD ``ImageObject``. Pages also carry JSON-LD for related
    strips, so only the object published on the reference date is used.
    """

    def __init__(
        self,
        key: str,
        name: str,
        slug: Optional[str] = None,
        publishes_on: FrozenSet[int] = DAILY,
    ) -> None:
        super().__init__(key, name, publishes_on)
        self.slug = slug or key

    def fetch_url(self, reference_date: date) -> str:
        return f"{GOCOMICS_BASE_URL}/{self.slug}/{reference_date:%Y/%m/%d}/"

    def _find_image_url(self, content: str, reference_date: date) -> Optional[str]:
        wanted_date = f"{MONTH_NAMES[reference_date.month - 1]} {reference_date.day}, {reference_date.year}"

        for image in self._image_objects(content):
            url = image.get("contentUrl") or image.get("url")
            if not isinstance(url, str) or not url.startswith("http"):
                continue
            if image.get("datePublished") == wanted_date:
                return url

        logger.debug("No %s image dated %s", self.key, wanted_date)
        return None

    def _image_objects(self, content: str) -> Iterator[dict]:
        """Yield every JSON-LD ImageObject embedded in the page."""
        for match in _LD_JSON_PATTERN.finditer(content):
            try:
                data = json.loads(match.group(1))
            except json.JSONDecodeError:
                logger.debug("Skipping unparseable JSON-LD block on %s page", self.key)
                continue

            items = data if isinstance(data, list) else [data]
            for item in items:
                if isinstance(item, dict) and item.get("@type") == "ImageObject":
                    yield item
