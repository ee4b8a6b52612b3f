"""Alaska Legislature Roster Scraper - scrape legislator contact records from akleg.gov."""

__version__ = "2.0.0"

from ak_leg_scraper.models import Legislator as Legislator
from ak_leg_scraper.models import RunResult as RunResult
from ak_leg_scraper.scraper import LegislatorScraper as LegislatorScraper
from ak_leg_scraper.target import SiteTarget as SiteTarget
