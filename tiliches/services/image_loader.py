# tiliches/services/image_loader.py

"""Thumbnail loader used by product cards."""

import asyncio
import logging
from dataclasses import dataclass

from curl_cffi import requests as curl_requests

from tiliches.config.settings import Settings

logger = logging.getLogger("tiliches.images")


@dataclass(frozen=True)
class LoadedImage:
    """Metadata for a successfully downloaded image."""

    url: str
    content_type: str
    size_bytes: int

    @property
    def label(self) -> str:
        """Short two-line caption shown inside a thumbnail."""
        subtype = self.content_type.split(";", 1)[0].split("/")[-1].strip()
        kind = subtype.upper() if subtype else "IMG"
        if kind == "SVG+XML":
            kind = "SVG"
        return f"{kind}\n{max(1, round(self.size_bytes / 1024))} KB"


class ImageLoader:
    """Downloads product images; never raises for a bad URL or host."""

    def __init__(self) -> None:
        self.settings = Settings()
        self.session = curl_requests.Session(
            impersonate=self.settings.IMPERSONATE_BROWSER
        )

    def fetch(self, url: str) -> LoadedImage | None:
        """Download *url*, returning ``None`` on any failure (blocking)."""
        if not url:
            return None
        try:
            resp = self.session.get(
                url,
                headers=self.settings.IMAGE_HEADERS,
                timeout=self.settings.IMAGE_TIMEOUT,
            )
        except Exception as exc:
            logger.debug("Image request failed for %s: %s", url, exc)
            return None

        if resp.status_code != 200:
            logger.debug("Image HTTP %d for %s", resp.status_code, url)
            return None
        content = resp.content or b""
        if not content:
            logger.debug("Empty image body for %s", url)
            return None

        content_type = str(resp.headers.get("content-type") or "")
        return LoadedImage(
            url=url,
            content_type=content_type,
            size_bytes=len(content),
        )

    async def load(self, url: str) -> LoadedImage | None:
        """Download *url* in a worker thread."""
        return await asyncio.to_thread(self.fetch, url)
