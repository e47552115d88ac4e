"""
Comic registry - maps subscription keys to comic sources.
"""

import logging
from types import MappingProxyType
from typing import List, Mapping

from .amuniversal import DilbertComic, GoComicsComic
from .base import SUNDAYS, Comic
from .independent import DinosaurComic, XkcdComic
from .kingfeatures import KingFeaturesComic

logger = logging.getLogger(__name__)


class UnknownComicError(KeyError):
    """Raised when a subscription names a comic with no registered source."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Unknown comic '{self.key}'"


def _build_registry(*comics: Comic) -> Mapping[str, Comic]:
    registry = {}
    for comic in comics:
        if comic.key in registry:
            raise ValueError(f"Duplicate comic key '{comic.key}'")
        registry[comic.key] = comic
    return MappingProxyType(registry)


COMICS: Mapping[str, Comic] = _build_registry(
    DilbertComic(),
    GoComicsComic("9chickweedlane", "9 Chickweed Lane"),
    GoComicsComic("arloandjanis", "Arlo and Janis"),
    GoComicsComic("calvinandhobbes", "Calvin and Hobbes"),
    GoComicsComic("foxtrot", "FoxTrot", publishes_on=SUNDAYS),
    GoComicsComic("pickles", "Pickles"),
    KingFeaturesComic("blondie", "Blondie", site="blondie.com"),
    KingFeaturesComic("rhymeswithorange", "Rhymes with Orange", site="rhymeswithorange.com"),
    KingFeaturesComic("zits", "Zits", site="zitscomics.com"),
    DinosaurComic(),
    XkcdComic(),
)


def resolve(key: str) -> Comic:
    """
    Look up the comic source for a subscription key.

    Args:
        key: Comic key, e.g. ``dilbert``.

    Returns:
        The registered Comic.

    Raises:
        UnknownComicError: If no comic is registered under ``key``.
    """
    try:
        return COMICS[key]
    except KeyError:
        raise UnknownComicError(key) from None


def available_comics() -> List[str]:
    """Get all registered comic keys, sorted."""
    return sorted(COMICS)
