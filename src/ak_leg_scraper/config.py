"""Configuration constants for the Alaska Legislature roster scraper."""

BASE_URL = "https://akleg.gov"

REQUEST_TIMEOUT = 10  # seconds

USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"

DEFAULT_TARGET = "senate"
