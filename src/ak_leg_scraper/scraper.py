"""Core scraper class for Alaska Legislature roster pages."""

import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from urllib.parse import urljoin

import requests
from bs4 import BeautifulSoup
from tqdm import tqdm

from ak_leg_scraper.config import REQUEST_TIMEOUT, USER_AGENT
from ak_leg_scraper.models import (
    STATUS_FETCH_FAILURE,
    STATUS_NO_MATCH,
    STATUS_SUCCESS,
    STATUS_WRITE_FAILURE,
    Legislator,
    RunResult,
)
from ak_leg_scraper.output import save_json
from ak_leg_scraper.parsing import extract_legislator
from ak_leg_scraper.target import SENATE, SiteTarget


@dataclass(frozen=True)
class FetchResult:
    """Result of an HTTP fetch attempt."""

    url: str
    html: str | None
    status_code: int | None = None
    error_type: str | None = None  # http, timeout, connection
    error_message: str | None = None

    @property
    def ok(self) -> bool:
        return self.html is not None


class LegislatorScraper:
    """Scrapes one akleg.gov roster page into a list of Legislator records."""

    def __init__(
        self,
        target: SiteTarget = SENATE,
        output_path: Path | None = None,
        timeout: float = REQUEST_TIMEOUT,
    ):
        self.target = target
        self.output_path = output_path or target.output_path
        self.timeout = timeout
        self.http = requests.Session()
        self.http.headers.update({"User-Agent": USER_AGENT})

    # -- HTTP ------------------------------------------------------------------

    def fetch_page(self) -> FetchResult:
        """Fetch the roster page once.  No retries: any failure is final.

        On success ``url`` is the final URL after redirects, which is what
        relative links on the page resolve against.
        """
        url = self.target.url
        try:
            resp = self.http.get(url, timeout=self.timeout)
            resp.raise_for_status()
            return FetchResult(url=resp.url or url, html=resp.text, status_code=resp.status_code)

        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            return FetchResult(
                url=url, html=None, status_code=status, error_type="http", error_message=str(e)
            )

        except requests.Timeout as e:
            return FetchResult(url=url, html=None, error_type="timeout", error_message=str(e))

        except requests.RequestException as e:
            # ConnectionError and anything else requests raises
            return FetchResult(url=url, html=None, error_type="connection", error_message=str(e))

    @staticmethod
    def _base_url(soup: BeautifulSoup, page_url: str) -> str:
        """Page URL, overridden by a <base href> if the document declares one."""
        base = soup.find("base", href=True)
        if base is not None:
            try:
                return urljoin(page_url, base["href"])
            except ValueError:
                print(f"  Ignoring malformed <base href={base['href']!r}>")
        return page_url

    # -- Extraction ------------------------------------------------------------

    def diagnose(self, soup: BeautifulSoup) -> dict[str, int]:
        """Report how many elements alternative selectors match.

        Only used when the primary selector comes up empty, to help work out
        what changed in the page layout.
        """
        print("\n" + "=" * 60)
        print("Document analysis")
        print("=" * 60)

        counts: dict[str, int] = {}
        print("  Checking candidate selectors:")
        for selector in self.target.candidate_selectors:
            counts[selector] = len(soup.select(selector))
            mark = "+" if counts[selector] else "-"
            print(f"    {mark} {selector:30s} {counts[selector]} elements")

        print("\n  Page structure:")
        for tag, label in (("div", "divs"), ("a", "links"), ("img", "images")):
            counts[tag] = len(soup.find_all(tag))
            print(f"    Total {label}: {counts[tag]}")
        return counts

    def collect(
        self, soup: BeautifulSoup, base_url: str = ""
    ) -> tuple[list[Legislator], list[str]]:
        """Extract every named legislator from the page, in document order.

        Returns (records, warnings).  A fragment that fails to parse is logged
        and skipped; it never aborts the rest of the page.
        """
        records: list[Legislator] = []
        warnings: list[str] = []

        fragments = soup.select(self.target.primary_selector)
        if not fragments:
            print(f"  No entries matched {self.target.primary_selector!r}")
            warnings.append(f"No elements matched {self.target.primary_selector!r}")
            self.diagnose(soup)
            return records, warnings

        print(f"  Found {len(fragments)} entries matching {self.target.primary_selector!r}\n")

        for index, fragment in enumerate(tqdm(fragments, desc="Entries", unit="entry"), 1):
            try:
                legislator = extract_legislator(fragment, self.target, base_url)
            except Exception as e:
                message = f"Entry {index}: error parsing element: {e}"
                tqdm.write(f"  {message}")
                warnings.append(message)
                continue

            if not legislator.has_name:
                warnings.append(f"Entry {index}: no name found, skipped")
                continue

            legislator.name = legislator.name.strip()
            records.append(legislator)
            tqdm.write(
                f"  [{len(records)}] {legislator.name} - {legislator.party} - {legislator.position}"
            )

        print(f"\n  Total {self.target.title.lower()}s scraped: {len(records)}")
        return records, warnings

    # -- Main runner -----------------------------------------------------------

    @staticmethod
    def _fmt_elapsed(seconds: float) -> str:
        """Format elapsed seconds as 'Xm Ys' or 'X.Xs'."""
        if seconds >= 60:
            return f"{int(seconds // 60)}m {int(seconds % 60)}s"
        return f"{seconds:.1f}s"

    def _finish(self, result: RunResult, start: float) -> RunResult:
        elapsed = time.time() - start
        print("\n" + "=" * 60)
        print(f"  Finished ({result.status}). Total elapsed: {self._fmt_elapsed(elapsed)}")
        print("=" * 60)
        return result

    def run(self) -> RunResult:
        """Fetch, extract and save.  Never raises; the outcome is in the result."""
        start = time.time()
        print("=" * 60)
        print(f"  Alaska Legislature {self.target.label}")
        print(f"  Started at {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
        print("=" * 60)

        print(f"  Connecting to: {self.target.url}")
        fetched = self.fetch_page()
        if not fetched.ok:
            if fetched.status_code:
                status = f"[HTTP {fetched.status_code}]"
            else:
                status = f"[{fetched.error_type}]"
            print(f"  Error connecting to website {status}: {fetched.error_message}")
            return self._finish(
                RunResult(status=STATUS_FETCH_FAILURE, error_message=fetched.error_message), start
            )

        soup = BeautifulSoup(fetched.html, "lxml")
        page_title = soup.title.get_text(strip=True) if soup.title else ""
        print("  Page loaded successfully")
        print(f"  Page title: {page_title}")

        records, warnings = self.collect(soup, self._base_url(soup, fetched.url))
        if not records:
            return self._finish(RunResult(status=STATUS_NO_MATCH, warnings=warnings), start)

        try:
            output_path = save_json(records, self.output_path)
        except OSError as e:
            print(f"  Error saving JSON: {e}")
            return self._finish(
                RunResult(
                    status=STATUS_WRITE_FAILURE,
                    records=records,
                    warnings=warnings,
                    error_message=str(e),
                ),
                start,
            )

        return self._finish(
            RunResult(
                status=STATUS_SUCCESS,
                records=records,
                warnings=warnings,
                output_path=output_path,
            ),
            start,
        )
