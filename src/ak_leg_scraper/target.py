"""Roster page targets on akleg.gov.

Each chamber has its own roster page, but both share the same markup:

  Senate:  /senate.php  ->  <ul class="people-list"><li>...</li></ul>
  House:   /house.php   ->  <ul class="people-list"><li>...</li></ul>

Inside each <li> the legislator's name is the first link, the portrait sits in
``div.img-holder`` and the party/district/city lead-in is in
``div.description-holder``.  This module keeps those selectors in one place so
the scraper can point at either chamber (or a differently laid out site)
without code changes.
"""

from dataclasses import dataclass
from pathlib import Path

from ak_leg_scraper.config import BASE_URL

# Selectors tried by the diagnostic pass when the primary selector finds nothing.
CANDIDATE_SELECTORS = (
    "ul.people-list > li",
    "ul.people-holder > li",
    "li.same-height-left",
    "div.legislator",
    "table tr",
)


@dataclass(frozen=True)
class SiteTarget:
    """One roster page and the selectors needed to pull legislators out of it."""

    key: str
    url: str
    title: str
    output_file: str
    primary_selector: str = "ul.people-list > li"
    image_selector: str = "div.img-holder img"
    description_selector: str = "div.description-holder"
    candidate_selectors: tuple[str, ...] = CANDIDATE_SELECTORS

    @property
    def label(self) -> str:
        """Human-readable label, e.g. 'Senator roster (https://akleg.gov/senate.php)'"""
        return f"{self.title} roster ({self.url})"

    @property
    def output_path(self) -> Path:
        return Path(self.output_file)

    @classmethod
    def from_name(cls, name: str) -> "SiteTarget":
        """Look up a known target by key ('senate', 'house'), case-insensitively."""
        key = name.strip().lower()
        if key not in KNOWN_TARGETS:
            known = ", ".join(sorted(KNOWN_TARGETS))
            raise ValueError(f"Unknown target {name!r} (known: {known})")
        return KNOWN_TARGETS[key]


SENATE = SiteTarget(
    key="senate",
    url=f"{BASE_URL}/senate.php",
    title="Senator",
    output_file="senators.json",
)

HOUSE = SiteTarget(
    key="house",
    url=f"{BASE_URL}/house.php",
    title="Representative",
    output_file="representatives.json",
)

KNOWN_TARGETS: dict[str, SiteTarget] = {t.key: t for t in (SENATE, HOUSE)}
