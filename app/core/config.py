"""
Application configuration (env, settings, constants).

Responsibility: Centralize config loading, environment variables, and app-wide
constants. Keeps the rest of the app decoupled from how config is sourced.
"""

import os
from types import MappingProxyType

from dotenv import load_dotenv

load_dotenv()


def _optional_timeout(name: str) -> float | None:
    """Read a timeout in seconds from env. Blank or unset means no timeout."""
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else None


# Vercel Edge Config connection string (from env). Blank means not configured.
EDGE_CONFIG: str = os.getenv("EDGE_CONFIG", "").strip()

# Store keys
GLOBAL_KEY: str = "structure_global"
UNIT_KEY_PREFIX: str = "structure_unit_"
CHAR_URL_KEY: str = "structure_char_url"

# Unit display name -> storage slug. Closed set; unknown names are rejected.
UNIT_SLUGS: MappingProxyType[str, str] = MappingProxyType({
    "Leo/need": "leo_need",
    "MORE MORE JUMP!": "more_more_jump",
    "Vivid BAD SQUAD": "vivid_bad_squad",
    "Wonderlands × Showtime": "wonderlands_showtime",
    "25點,Nightcord見": "nightcord_25",
})

# Shared-cache policy for unit/global responses (char responses are never cached)
STRUCTURE_CACHE_CONTROL: str = "s-maxage=3600, stale-while-revalidate=86400"

# Network timeouts (seconds). None waits indefinitely.
EDGE_CONFIG_TIMEOUT: float | None = _optional_timeout("EDGE_CONFIG_TIMEOUT")
BLOB_FETCH_TIMEOUT: float | None = _optional_timeout("BLOB_FETCH_TIMEOUT")
PROXY_TIMEOUT: float | None = _optional_timeout("PROXY_TIMEOUT")

# Upstream ranking API (read-only proxy)
RANKING_API_BASE: str = (
    os.getenv("RANKING_API_BASE", "https://api.hisekai.org").strip().rstrip("/")
    or "https://api.hisekai.org"
)
PROXY_USER_AGENT: str = (
    os.getenv("PROXY_USER_AGENT", "SekaiRankingTW/1.0.0").strip() or "SekaiRankingTW/1.0.0"
)
PROXY_CACHE_CONTROL: str = "s-maxage=10, stale-while-revalidate=59"
