"""Data classes for legislator records and run outcomes."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

# Possible RunResult.status values
STATUS_SUCCESS = "success"
STATUS_NO_MATCH = "no_match"
STATUS_FETCH_FAILURE = "fetch_failure"
STATUS_WRITE_FAILURE = "write_failure"


@dataclass
class Legislator:
    """One legislator as listed on a chamber roster page."""
    name: str
    title: Optional[str] = None  # Senator, Representative
    position: Optional[str] = None  # "District A", "District 5"
    party: Optional[str] = None  # Republican, Democrat, Independent
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    url: Optional[str] = None

    @property
    def has_name(self) -> bool:
        return bool(self.name and self.name.strip())


@dataclass(frozen=True)
class RunResult:
    """Outcome of one scraper run, returned to the caller instead of exiting."""

    status: str
    records: list[Legislator] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    output_path: Optional[Path] = None
    error_message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == STATUS_SUCCESS
