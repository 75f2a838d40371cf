from __future__ import annotations

import logging
from typing import Any

from creatorhub_web.application.ports.bookmark_port import BookmarkPort
from creatorhub_web.application.ports.http_client_port import AsyncHttpClientPort, HttpResponse, HttpTransportError
from creatorhub_web.config import Settings
from creatorhub_web.domain.model import (
    MUTATION_FALLBACK_ERROR,
    AntiForgeryToken,
    MutationFailed,
    MutationOutcome,
    MutationSucceeded,
)
from creatorhub_web.infrastructure.adapters.creatorhub.csrf_token_manager import CsrfTokenManager

logger = logging.getLogger(__name__)

FALLBACK_ERROR = MUTATION_FALLBACK_ERROR


def extract_error_message(resp: HttpResponse | None) -> str:
    """Best-effort ``message`` from an error body, else the fallback text."""
    if resp is None:
        return FALLBACK_ERROR
    try:
        data: Any = resp.json()
    except ValueError:
        return FALLBACK_ERROR
    message = data.get("message") if isinstance(data, dict) else None
    if isinstance(message, str) and message:
        return message
    return FALLBACK_ERROR


class BookmarkMutationClient(BookmarkPort):
    """Browser-side ``POST /user/bookmark``.

    The session is proven by the cookie jar of ``http``; this call only attaches
    the anti-forgery token header.
    """

    def __init__(self, http: AsyncHttpClientPort, settings: Settings) -> None:
        self.http = http
        self.settings = settings

    async def toggle(self, footage_id: str, current_token: str) -> MutationOutcome:
        url = f"{self.settings.api_base}/user/bookmark"
        try:
            resp = await self.http.post(
                url,
                json={"id": footage_id},
                headers={self.settings.xsrf_cookie: current_token},
            )
        except HttpTransportError:
            logger.info("[BOOKMARK] %s: transport error", footage_id)
            return MutationFailed(FALLBACK_ERROR)
        if not resp.ok:
            message = extract_error_message(resp)
            logger.info("[BOOKMARK] %s: status %s: %s", footage_id, resp.status_code, message)
            return MutationFailed(message)
        try:
            data = resp.json()
            nxt = CsrfTokenManager.rotate(AntiForgeryToken(current_token), data)
            marked = data["marked"]
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning("[BOOKMARK] %s: unusable success body (%s)", footage_id, type(e).__name__)
            return MutationFailed(FALLBACK_ERROR)
        return MutationSucceeded(marked=bool(marked), next_token=nxt.token)
