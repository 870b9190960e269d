from typing import FrozenSet

# Contact fields holding ISO 3166-1 alpha-2 country codes
COUNTRY_FIELDS: FrozenSet[str] = frozenset({"contact_country", "company_hq_country"})

# Contact fields holding ISO-8601 date strings
DATE_FIELDS: FrozenSet[str] = frozenset({"first_seen", "last_seen"})

# Pagination bounds for list endpoints
DEFAULT_PAGE_SIZE: int = 10
MAX_PAGE_SIZE: int = 100

# Cache key for the shared country-code map
COUNTRY_CODES_CACHE_KEY: str = "country_codes"
