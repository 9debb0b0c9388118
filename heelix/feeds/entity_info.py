import logging
from typing import List, Optional

import requests
from pydantic import ValidationError

from heelix.storage.models import NewsArticle
from .base import BaseFeed

logger = logging.getLogger(__name__)

DEFAULT_FEED_URL = "http://localhost:8081/api/all_entity_info"

# ---------- Sessão HTTP global com pool (sem retry: cada tick é independente) ----------
_SESSION = requests.Session()
_SESSION.headers.update({"User-Agent": "HeelixWidget/1.0 (+http://localhost)"})


class EntityInfoFeed(BaseFeed):
    """Lê as notícias mais recentes (`LatestNews`) do endpoint all_entity_info."""

    TIMEOUT = 10

    def __init__(
        self,
        url: str = DEFAULT_FEED_URL,
        batch_size: int = 20,
        verify: bool = True,
        session: Optional[requests.Session] = None,
    ):
        self.url: str = url
        self.batch_size: int = batch_size
        self.verify: bool = verify
        self.session: requests.Session = session or _SESSION

    def fetch(self) -> List[NewsArticle]:
        try:
            response = self.session.post(self.url, timeout=self.TIMEOUT, verify=self.verify)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error("Fetch failed for %s: %s", self.url, e)
            return []

        try:
            payload = response.json()
        except ValueError as e:
            logger.error("Decode failed for %s: %s", self.url, e)
            return []

        latest = payload.get("LatestNews") if isinstance(payload, dict) else None
        if not isinstance(latest, list):
            logger.error("Response from %s has no LatestNews array", self.url)
            return []

        if len(latest) < self.batch_size:
            # lista curta: usa o que veio em vez de indexar além do fim
            logger.warning(
                "LatestNews has %d entries, expected %d; using what was returned",
                len(latest),
                self.batch_size,
            )

        try:
            return [NewsArticle.model_validate(entry) for entry in latest[: self.batch_size]]
        except ValidationError as e:
            logger.error("Malformed LatestNews entry from %s: %s", self.url, e)
            return []
