# tiliches/config/settings.py

"""Central configuration for the Tiliches catalog app."""

import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the Tiliches catalog app."""

    # --- Remote API ---
    API_BASE_URL: str = os.getenv(
        "TILICHES_API_BASE_URL", "https://fakestoreapi.com/"
    )
    ALL_PRODUCTS_PATH: str = "products"
    REQUEST_TIMEOUT: int = 15           # Seconds before a request times out
    IMAGE_TIMEOUT: int = 10             # Per-thumbnail request timeout

    # --- Browser Impersonation ---
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"
    DEFAULT_HEADERS: dict[str, str] = {
        "Accept": "application/json",
        "Accept-Language": "en-US,en;q=0.9",
    }
    IMAGE_HEADERS: dict[str, str] = {
        "Accept": "image/avif,image/webp,image/apng,image/*,*/*;q=0.8",
    }

    # --- Presentation ---
    APP_TITLE: str = "Tiliches"
    CURRENCY_SYMBOL: str = "$"
    TITLE_MAX_LINES: int = 2
    TITLE_WRAP_WIDTH: int = 48          # Characters per title line on a card
    GENERIC_ERROR_MESSAGE: str = "Something went wrong"

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    LOGS_DIR: Path = BASE_DIR / "logs"
