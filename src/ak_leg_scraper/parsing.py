"""Field extraction for one roster entry.

Everything here is a pure function of its input: no HTTP, no printing, no
shared state.  The description rules work on plain text so they can be tested
without any HTML at all.

A typical description lead-in looks like one of::

    Jane Doe (R), District A, Juneau
    John Roe, Democrat, District 5, Anchorage, AK

The first comma-separated segment is the name/party lead-in; the rest is
district and location.
"""

import re
from urllib.parse import urljoin

from bs4 import Tag

from ak_leg_scraper.models import Legislator
from ak_leg_scraper.target import SiteTarget

_DISTRICT_RE = re.compile(r"District\s+([A-Z0-9]+)")

# Checked in order, abbreviations before words: "(R)" beats a stray "democrat".
PARTY_ABBREVIATIONS = (("(R)", "Republican"), ("(D)", "Democrat"), ("(I)", "Independent"))
PARTY_WORDS = (
    ("republican", "Republican"),
    ("democrat", "Democrat"),
    ("independent", "Independent"),
)

_MAILTO = "mailto:"
_TEL = "tel:"


def _clean_text(element: Tag) -> str:
    """Extract text from a BeautifulSoup element with inline-tag spacing preserved.

    get_text(strip=True) alone glues neighbouring text nodes together
    (``<b>Jane</b>Doe`` -> ``JaneDoe``), so join on a space and collapse runs.
    """
    return " ".join(element.get_text(separator=" ", strip=True).split())


def parse_party(text: str) -> str | None:
    """Classify party from description text.

    "(R)" / "(D)" / "(I)" are matched case-sensitively first; if none is
    present, the words republican / democrat / independent are matched
    case-insensitively.
    """
    for marker, party in PARTY_ABBREVIATIONS:
        if marker in text:
            return party
    lowered = text.lower()
    for word, party in PARTY_WORDS:
        if word in lowered:
            return party
    return None


def parse_district(text: str) -> str | None:
    """'..., District A, ...' -> 'District A'"""
    match = _DISTRICT_RE.search(text)
    if match:
        return f"District {match.group(1)}"
    return None


def _is_address_segment(segment: str) -> bool:
    if not segment or "District" in segment:
        return False
    if segment in {marker for marker, _ in PARTY_ABBREVIATIONS}:
        return False
    if segment.lower() in {word for word, _ in PARTY_WORDS}:
        return False
    return True


def parse_address(text: str) -> str | None:
    """Rebuild the location from the segments after the lead-in.

    "Jane Doe (R), District A, Juneau" -> "Juneau"
    "John Roe, Democrat, District 5, Anchorage, AK" -> "Anchorage, AK"

    Blank segments are dropped as well, so "Jane Doe, , Juneau" -> "Juneau".
    """
    segments = [part.strip() for part in text.split(",")[1:]]
    kept = [seg for seg in segments if _is_address_segment(seg)]
    return ", ".join(kept) if kept else None


def parse_description(text: str) -> dict[str, str | None]:
    """Derive party, position and address from one description string."""
    text = text.strip()
    return {
        "party": parse_party(text),
        "position": parse_district(text),
        "address": parse_address(text),
    }


def _href_with_scheme(fragment: Tag, scheme: str) -> str | None:
    """Return the href of the first link in the fragment using the given scheme, prefix removed."""
    link = fragment.select_one(f'a[href^="{scheme}"]')
    if link is None:
        return None
    return link["href"][len(scheme) :]


def extract_legislator(fragment: Tag, target: SiteTarget, base_url: str = "") -> Legislator:
    """Build a Legislator from one roster <li>.

    Missing pieces leave their field as None; nothing here raises for absent
    markup.  Only the first link is used for name and url, while mailto:/tel:
    links are found anywhere in the fragment.
    """
    name = ""
    url = None
    link = fragment.find("a")
    if link is not None:
        name = _clean_text(link)
        href = link.get("href")
        if href:
            try:
                url = urljoin(base_url, href.strip())
            except ValueError:
                url = None  # unparseable href, e.g. "http://[bad"

    if not name:
        img = fragment.select_one(target.image_selector)
        if img is not None:
            name = (img.get("alt") or "").strip()

    legislator = Legislator(name=name, title=target.title, url=url)

    description = fragment.select_one(target.description_selector)
    if description is not None:
        fields = parse_description(_clean_text(description))
        legislator.party = fields["party"]
        legislator.position = fields["position"]
        legislator.address = fields["address"]

    legislator.email = _href_with_scheme(fragment, _MAILTO)
    phone = _href_with_scheme(fragment, _TEL)
    legislator.phone = phone.strip() if phone is not None else None

    return legislator
