"""Shared test fixtures for the SendComics test suite."""

from datetime import date

import pytest
from sendcomics.config import Config
from sendcomics.fetcher import FetchError

WEDNESDAY = date(2018, 6, 27)
SATURDAY = date(2018, 6, 30)
SUNDAY = date(2018, 7, 1)


class NonEnglishDate(date):
    """A date whose strftime names months and days as a French locale would."""

    def strftime(self, fmt):
        return fmt.replace("%B", "juin").replace("%A", "mercredi")


DILBERT_IMAGE_URL = "https://assets.amuniversal.com/cfa39b00b39601365f19005056a9545d"
CHICKWEED_LANE_IMAGE_URL = "https://assets.amuniversal.com/e2a3c500c015013663ff005056a9545d"
CALVIN_AND_HOBBES_SUNDAY_URL = "https://assets.amuniversal.com/65839a905f980136408e005056a9545d"
FOXTROT_SUNDAY_URL = "https://assets.amuniversal.com/1f3a8ca05e4c01365f17005056a9545d"
BLONDIE_IMAGE_URL = "http://safr.kingfeatures.com/Blondie/2018/04/Blondie.20180410_900.gif"
RHYMES_WITH_ORANGE_IMAGE_URL = (
    "http://safr.kingfeatures.com/RhymesWithOrange/2018/04/Rhymes_with_Orange.20180410_900.gif"
)
DINOSAUR_COMICS_IMAGE_URL = "http://www.qwantz.com/comics/comic2-3467.png"

DILBERT_PAGE = f"""
<div class="comic-item-container js-comic-item-container" data-id="2018-06-27"
     data-image="{DILBERT_IMAGE_URL}" data-title="Dilbert Comic for 2018-06-27">
  <img class="img-responsive img-comic" src="{DILBERT_IMAGE_URL}" alt="Dilbert" />
</div>
"""


def gocomics_page(image_url: str, published: str, related_url: str = None) -> str:
    """Build a minimal gocomics strip page with JSON-LD ImageObjects."""
    related = ""
    if related_url:
        related = (
            '<script type="application/ld+json">'
            '{"@context":"https://schema.org","@type":"ImageObject",'
            f'"contentUrl":"{related_url}","datePublished":"June 20, 2018"}}'
            "</script>"
        )
    return (
        "<html><head>"
        f"{related}"
        '<script type="application/ld+json">'
        '{"@context":"https://schema.org","@type":"ImageObject",'
        f'"name":"Comic Strip for {published}","contentUrl":"{image_url}",'
        f'"datePublished":"{published}"}}'
        "</script>"
        "</head><body></body></html>"
    )


def kingfeatures_page(encoded: str) -> str:
    """Build a minimal King Features home page with a content.php script tag."""
    return (
        "<html><body><div id='comic'>"
        '<script type="text/javascript" '
        f'src="https://safr.kingfeatures.com/idn/cnfeed/zone/js/content.php?file={encoded}">'
        "</script></div></body></html>"
    )


BLONDIE_PAGE = kingfeatures_page(
    "aHR0cDovL3NhZnIua2luZ2ZlYXR1cmVzLmNvbS9CbG9uZGllLzIwMTgvMDQvQmxvbmRpZS4yMDE4MDQxMF85MDAuZ2lm"
)
RHYMES_WITH_ORANGE_PAGE = kingfeatures_page(
    "aHR0cDovL3NhZnIua2luZ2ZlYXR1cmVzLmNvbS9SaHltZXNXaXRoT3JhbmdlLzIwMTgvMDQvUmh5bWVzX3dpdGhfT3JhbmdlLjIwMTgwNDEwXzkwMC5naWY="
)

DINOSAUR_COMICS_PAGE = f"""
<center><img src="{DINOSAUR_COMICS_IMAGE_URL}" class="comic" title="the dinosaurs are talking again"></center>
"""

XKCD_PAGE = """
<div id="comic"><img src="//imgs.xkcd.com/comics/bad_map_projection.png" /></div>
Permanent link to this comic: https://xkcd.com/2000/<br />
Image URL (for hotlinking/embedding): <a href= "https://imgs.xkcd.com/comics/bad_map_projection.png">https://imgs.xkcd.com/comics/bad_map_projection.png</a>
"""


class FakeFetcher:
    """Fetcher returning canned pages and recording every requested URL."""

    def __init__(self, pages=None):
        self.pages = dict(pages or {})
        self.requested = []

    def get_content(self, url: str) -> str:
        self.requested.append(url)
        if url not in self.pages:
            raise FetchError(url, "HTTP error 404")
        return self.pages[url]


@pytest.fixture
def fresh_config(tmp_path, monkeypatch):
    """Create a Config instance with reset singleton state pointed at a temp directory."""
    Config._instance = None
    monkeypatch.setenv("SENDCOMICS_BASE_DIR", str(tmp_path))
    monkeypatch.delenv("SENDCOMICS_SUBSCRIPTIONS", raising=False)
    cfg = Config()
    yield cfg
    Config._instance = None


@pytest.fixture
def wednesday_pages():
    """Canned pages for the strips published on Wednesday 2018-06-27."""
    return {
        "http://www.dilbert.com/": DILBERT_PAGE,
        "http://www.gocomics.com/9chickweedlane/2018/06/27/": gocomics_page(
            CHICKWEED_LANE_IMAGE_URL, "June 27, 2018"
        ),
        "http://blondie.com/": BLONDIE_PAGE,
        "http://rhymeswithorange.com/": RHYMES_WITH_ORANGE_PAGE,
        "http://www.qwantz.com/index.php": DINOSAUR_COMICS_PAGE,
    }
