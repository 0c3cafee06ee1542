"""Centralised settings for the eTrack scraper.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Portal detail links
    # ------------------------------------------------------------------
    # The first two parameters give a guest view of the detail page without
    # a login or session.
    etrack_webguest: str = field(
        default_factory=lambda: os.environ.get("ETRACK_WEBGUEST", "P1.WEBGUEST")
    )
    etrack_detail_view: str = field(
        default_factory=lambda: os.environ.get("ETRACK_DETAIL_VIEW", "$P1.ETR.APPDET.VIW")
    )
    etrack_detail_path: str = field(
        default_factory=lambda: os.environ.get(
            "ETRACK_DETAIL_PATH", "eTrackApplicationDetails.aspx"
        )
    )

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "ETRACK_USER_AGENT",
            "Mozilla/5.0 (compatible; eTrack-Scraper/1.0)",
        )
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    rate_limit_delay: float = field(
        default_factory=lambda: float(os.environ.get("RATE_LIMIT_DELAY", "1.0"))
    )

    # ------------------------------------------------------------------
    # Runner
    # ------------------------------------------------------------------
    max_pages: int = field(
        default_factory=lambda: int(os.environ.get("MAX_PAGES", "0"))
    )


# Module-level singleton — import this everywhere:
#   from etrack.config import settings
settings = Settings()
