"""
Base class for comic sources.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import FrozenSet, Optional

MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(7)

DAILY: FrozenSet[int] = frozenset(range(7))
WEEKDAYS: FrozenSet[int] = frozenset({MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY})
SUNDAYS: FrozenSet[int] = frozenset({SUNDAY})

DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


class ExtractionStatus(Enum):
    FOUND = "found"
    NOT_PUBLISHED = "not_published"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of looking for a comic image in a fetched page."""

    status: ExtractionStatus
    image_url: Optional[str] = None

    @classmethod
    def found(cls, image_url: str) -> "ExtractionResult":
        return cls(ExtractionStatus.FOUND, image_url)

    @classmethod
    def not_published(cls) -> "ExtractionResult":
        return cls(ExtractionStatus.NOT_PUBLISHED)

    @classmethod
    def not_found(cls) -> "ExtractionResult":
        return cls(ExtractionStatus.NOT_FOUND)


class Comic(ABC):
    """Abstract base class for a comic strip published on a single site.

    Each subclass knows how to build the page URL for a date and how to pull
    the strip's image URL out of that page. Publication weekdays are plain
    data, checked before any markup is inspected.
    """

    def __init__(self, key: str, name: str, publishes_on: FrozenSet[int] = DAILY) -> None:
        self._key = key
        self._name = name
        self._publishes_on = frozenset(publishes_on)

    @property
    def key(self) -> str:
        """Short identifier used in subscriptions."""
        return self._key

    @property
    def name(self) -> str:
        """Human-readable comic name."""
        return self._name

    @property
    def publication_days(self) -> FrozenSet[int]:
        """Weekdays (``date.weekday()`` values) the strip is released on."""
        return self._publishes_on

    def is_published_on(self, reference_date: date) -> bool:
        return reference_date.weekday() in self._publishes_on

    @property
    def schedule(self) -> str:
        """Describe the publication days, e.g. 'daily' or 'Sunday'."""
        if self._publishes_on == DAILY:
            return "daily"
        if self._publishes_on == WEEKDAYS:
            return "weekdays"
        return ", ".join(DAY_NAMES[day] for day in sorted(self._publishes_on))

    @abstractmethod
    def fetch_url(self, reference_date: date) -> str:
        """Build the URL of the page carrying the strip for ``reference_date``."""
        ...

    @abstractmethod
    def _find_image_url(self, content: str, reference_date: date) -> Optional[str]:
        """Return the image URL found in ``content``, or None."""
        ...

    def extract_image(self, content: str, reference_date: date) -> ExtractionResult:
        """Classify fetched page content for ``reference_date``.

        Args:
            content: Raw page content returned by the fetcher.
            reference_date: The date the digest is being built for.

        Returns:
            NOT_PUBLISHED on a non-publication weekday regardless of content,
            otherwise FOUND with the image URL or NOT_FOUND.
        """
        if not self.is_published_on(reference_date):
            return ExtractionResult.not_published()

        image_url = self._find_image_url(content or "", reference_date)
        if image_url:
            return ExtractionResult.found(image_url)
        return ExtractionResult.not_found()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._key!r})"
