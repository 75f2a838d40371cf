from __future__ import annotations

import logging
from urllib.parse import quote

from creatorhub_web.application.ports.footage_port import FootagePort
from creatorhub_web.application.ports.http_client_port import HttpClientPort, HttpTransportError
from creatorhub_web.config import Settings
from creatorhub_web.domain.model import Footage, FootageId

logger = logging.getLogger(__name__)


class FootageApiClient(FootagePort):
    """Server-to-backend read of a footage record.

    The call is authenticated with the internal service key; the viewer's session
    is forwarded as ``X-USER-TOKEN`` so the API can fill in ``marked``.
    """

    def __init__(self, http: HttpClientPort, settings: Settings) -> None:
        self.http = http
        self.settings = settings

    def _headers(self, session: str | None) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.settings.internal_api_key}",
            "X-USER-TOKEN": session or "",
        }

    def fetch(self, footage_id: FootageId, session: str | None) -> Footage | None:
        url = f"{self.settings.api_base}/footage/{quote(str(footage_id), safe='')}"
        try:
            resp = self.http.get(url, headers=self._headers(session))
        except HttpTransportError:
            logger.info("footage %s: transport error, treated as absent", footage_id)
            return None
        if not resp.ok:
            logger.info("footage %s: status %s, treated as absent", footage_id, resp.status_code)
            return None
        try:
            data = resp.json()
            if not data:
                return None
            return Footage.from_payload(data)
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("footage %s: unusable body (%s)", footage_id, type(e).__name__)
            return None
