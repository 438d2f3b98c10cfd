"""Internal constants shared across the library."""

DEFAULT_BASE_URL = "http://localhost:8080/api/verbiage"
DEFAULT_LOCALES: tuple[str, ...] = ("en", "se")
USER_AGENT = "pyverbiage"

# ------------------------------------------------------------------
# Verbiage API endpoints (relative to base_url)
# ------------------------------------------------------------------

LAST_UPDATE_ENDPOINT = "/last-update"
GENERATE_ENDPOINT = "/generate"

# ------------------------------------------------------------------
# Persistent store keys
# ------------------------------------------------------------------

LOCALES_KEY = "verbiage-locales"
LAST_UPDATE_KEY = "verbiage-last-update"
TERM_PREFIX = "verbiage-terms-"

LOCALE_DELIMITER = ","


def term_key(locale: str) -> str:
    """Return the store key holding the TermMap for *locale*."""
    return f"{TERM_PREFIX}{locale}"
